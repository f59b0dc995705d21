
# --- session

STARTING_LIVES = 3
DEFAULT_DIFFICULTY = "easy"
DEFAULT_THEME = "all"

# --- spawn scheduler

LEVEL_SECONDS = 15  # level goes up every 15s of playing time
MAX_LEVEL = 10
MIN_SPAWN_MS = 350
SPAWN_DECAY_PER_SECOND_MS = 8
SPAWN_DECAY_PER_LEVEL_MS = 20

MIN_X = 5  # percent of play area width
MAX_X = 95

SPEED_VARIANCE = 40  # px/s added on top of the tier speed
LEVEL_SPEED_FACTOR = 0.08
SPEED_JITTER_MIN = -0.05
SPEED_JITTER_MAX = 0.15
MIN_SPEED = 20

# --- motion

BOTTOM_MARGIN = 24  # room for the word's own height
DEFAULT_PLAY_HEIGHT = 300

# --- scoring

MIN_WORD_POINTS = 10
POINTS_PER_CHAR = 10

# --- high score

DATA_DIR_ENV = "FALLING_WORDS_DATA_DIR"
HIGH_SCORE_FILE = "highscore.json"
HIGH_SCORE_KEY = "high_score"

# --- engine

FPS = 60
HUD_HEIGHT = 90
INPUT_HEIGHT = 70
PLAY_AREA_PADDING = 20

BACKGROUND_COLOR = (10, 10, 14)
COLOR = (255, 255, 255)
DIM_COLOR = (140, 140, 150)
WORD_COLOR = (124, 58, 237)
MISSED_COLOR = (255, 80, 80)
CORRECT_COLOR = (100, 255, 100)
BORDER_COLOR = (60, 60, 70)
