from dataclasses import dataclass
from enum import Enum, auto

# --- configuration

@dataclass(frozen=True)
class DifficultyProfile:
    """Base spawn interval and base fall speed for one difficulty tier"""
    name: str
    spawn_ms: int
    base_speed: int  # px per second

# --- session

class SessionState(Enum):
    IDLE = auto()
    PLAYING = auto()
    PAUSED = auto()
    ENDED = auto()

@dataclass
class WordInstance:
    """A single falling word. Only y changes after spawn."""
    id: str
    text: str
    x: float  # percent of play area width
    y: float  # px from the top of the play area
    speed: float  # px per second

@dataclass(frozen=True)
class Match:
    word: WordInstance
    points: int

@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the session handed to the renderer each frame"""
    state: SessionState
    score: int
    lives: int
    high_score: int
    level: int
    difficulty: str
    theme: str
    words: tuple[WordInstance, ...] = ()
    correct_log: tuple[str, ...] = ()
    missed_log: tuple[str, ...] = ()
