import itertools
import math
import random
from typing import Optional

from . import constants as C
from . import models as M


def level_for(elapsed: float) -> int:
    """Difficulty ratchet: +1 every LEVEL_SECONDS of playing time, capped."""
    return min(math.floor(max(0.0, elapsed) / C.LEVEL_SECONDS), C.MAX_LEVEL)


def spawn_delay_ms(profile: M.DifficultyProfile, elapsed: float) -> int:
    """Delay until the next spawn, shrinking with playing time and level."""
    level = level_for(elapsed)
    delay = profile.spawn_ms - elapsed * C.SPAWN_DECAY_PER_SECOND_MS - level * C.SPAWN_DECAY_PER_LEVEL_MS
    return max(C.MIN_SPAWN_MS, round(delay))


def roll_speed(profile: M.DifficultyProfile, level: int, rng) -> int:
    variance = rng.uniform(0, C.SPEED_VARIANCE)
    multiplier = 1 + C.LEVEL_SPEED_FACTOR * level + rng.uniform(C.SPEED_JITTER_MIN, C.SPEED_JITTER_MAX)
    return max(C.MIN_SPEED, round((profile.base_speed + variance) * multiplier))


class SpawnScheduler:
    """
    One-shot spawn timer on the play clock.
    Each time it fires it drops one new word into the live list and
    re-arms itself with a freshly computed delay, so the spawn rate keeps
    accelerating as the session goes on.
    """
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.next_due: Optional[float] = None  # play clock seconds
        self.last_delay_ms: Optional[int] = None
        self._ids = itertools.count(1)

    @property
    def active(self) -> bool:
        return self.next_due is not None

    def start(self, elapsed: float = 0.0):
        """Arm the timer so the first word drops on the next update."""
        self.next_due = elapsed
        self.last_delay_ms = None

    def cancel(self):
        self.next_due = None

    def create_word(self, text: str, profile: M.DifficultyProfile, elapsed: float) -> M.WordInstance:
        level = level_for(elapsed)
        return M.WordInstance(
            id=f"w{next(self._ids)}",
            text=text,
            x=round(self.rng.uniform(C.MIN_X, C.MAX_X)),
            y=0.0,
            speed=roll_speed(profile, level, self.rng),
        )

    def update(
        self,
        elapsed: float,
        profile: M.DifficultyProfile,
        word_list: list[str],
        live_words: list[M.WordInstance],
    ) -> Optional[M.WordInstance]:
        """Fire the timer if it is due. Returns the spawned word, if any."""
        if self.next_due is None or elapsed < self.next_due:
            return None

        delay_ms = spawn_delay_ms(profile, elapsed)
        self.next_due = elapsed + delay_ms / 1000
        self.last_delay_ms = delay_ms

        # empty theme: skip this cycle, keep the timer running
        if not word_list:
            return None

        word = self.create_word(self.rng.choice(word_list), profile, elapsed)
        live_words.append(word)
        return word
