"""High score persisted as {"high_score": n} in a small JSON file."""

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from . import constants as C

logger = logging.getLogger(__name__)


def _data_dir() -> Path:
    override = os.environ.get(C.DATA_DIR_ENV)
    if override:
        return Path(override)
    return Path.home() / ".falling_words"


def default_path() -> Path:
    return _data_dir() / C.HIGH_SCORE_FILE


class HighScoreStore:
    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else default_path()

    def load(self) -> int:
        """Stored high score, or 0 if the file is missing or unreadable."""
        if not self.path.is_file():
            return 0
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Could not read high score from %s: %s", self.path, e)
            return 0

        value = data.get(C.HIGH_SCORE_KEY, 0) if isinstance(data, dict) else 0
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            logger.warning("Ignoring invalid high score %r in %s", value, self.path)
            return 0
        return value

    def save(self, value: int):
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({C.HIGH_SCORE_KEY: int(value)}, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save high score to %s: %s", self.path, e)
