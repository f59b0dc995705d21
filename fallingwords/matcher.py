from typing import Optional

from . import constants as C
from . import models as M


def points_for(text: str) -> int:
    return max(C.MIN_WORD_POINTS, len(text) * C.POINTS_PER_CHAR)


def find_match(typed: str, live_words: list[M.WordInstance]) -> Optional[int]:
    """Index of the first live word whose text equals typed exactly."""
    for i, word in enumerate(live_words):
        if word.text == typed:
            return i
    return None


def resolve(field_text: str, live_words: list[M.WordInstance]) -> Optional[M.Match]:
    """
    Check the text field against the live words.
    Only a whole, case-sensitive match counts. On a match exactly one word
    (the first with that text) is removed and returned with its points.
    """
    typed = field_text.strip()
    if not typed:
        return None

    idx = find_match(typed, live_words)
    if idx is None:
        return None

    word = live_words.pop(idx)
    return M.Match(word=word, points=points_for(word.text))
