from . import constants as C
from . import models as M

DIFFICULTY_PROFILES: dict[str, M.DifficultyProfile] = {
    "easy": M.DifficultyProfile("easy", spawn_ms=2000, base_speed=60),
    "medium": M.DifficultyProfile("medium", spawn_ms=1400, base_speed=110),
    "hard": M.DifficultyProfile("hard", spawn_ms=900, base_speed=170),
}


def get_profile(name: str) -> M.DifficultyProfile:
    return DIFFICULTY_PROFILES.get(name, DIFFICULTY_PROFILES[C.DEFAULT_DIFFICULTY])
