from typing import Optional

from . import constants as C
from . import models as M


def miss_line(height: float) -> float:
    return height - C.BOTTOM_MARGIN


def advance(live_words: list[M.WordInstance], dt: float, height: float) -> list[M.WordInstance]:
    """
    Move every live word down by speed * dt.
    Words that end up past the miss line are taken out of live_words (left
    at their last on-screen y) and returned in their original order.
    """
    limit = miss_line(height)
    survivors: list[M.WordInstance] = []
    missed: list[M.WordInstance] = []

    for word in live_words:
        new_y = word.y + word.speed * dt
        if new_y > limit:
            missed.append(word)
        else:
            word.y = new_y
            survivors.append(word)

    live_words[:] = survivors
    return missed


class MotionLoop:
    """Per-frame mover. dt is measured on the play clock, so pauses never add fall time."""

    def __init__(self):
        self.last_time: Optional[float] = None

    @property
    def active(self) -> bool:
        return self.last_time is not None

    def start(self, now: float):
        self.last_time = now

    def cancel(self):
        self.last_time = None

    def update(self, now: float, live_words: list[M.WordInstance], height: float) -> list[M.WordInstance]:
        if self.last_time is None:
            return []
        dt = max(0.0, now - self.last_time)
        self.last_time = now
        return advance(live_words, dt, height)
