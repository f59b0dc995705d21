import dataclasses
import logging
import random
import time
from typing import Callable, Optional

from . import constants as C
from . import models as M
from .clock import PlayClock
from .difficulty import DIFFICULTY_PROFILES, get_profile
from .highscore import HighScoreStore
from .matcher import resolve
from .motion import MotionLoop
from .spawner import SpawnScheduler, level_for
from .words import WORD_CATALOG, words_for

logger = logging.getLogger(__name__)

State = M.SessionState


class Session:
    """
    Owns everything about a play-through: state, score, lives, the live word
    list and the correct/missed logs. It is the only thing that starts,
    pauses or cancels the spawn timer and the motion loop.

    All three callers (tick, handle_text and the commands) run on the same
    thread and each finishes its pass over live_words before returning, so a
    word can only ever be removed once.
    """
    def __init__(
        self,
        high_scores: Optional[HighScoreStore] = None,
        catalog: Optional[dict[str, list[str]]] = None,
        difficulty: str = C.DEFAULT_DIFFICULTY,
        theme: str = C.DEFAULT_THEME,
        starting_lives: int = C.STARTING_LIVES,
        rng: Optional[random.Random] = None,
        time_fn: Callable[[], float] = time.perf_counter,
    ):
        self.catalog = WORD_CATALOG if catalog is None else catalog
        self.high_scores = high_scores
        self.starting_lives = starting_lives

        self.state = State.IDLE
        self.score = 0
        self.lives = starting_lives
        self.live_words: list[M.WordInstance] = []
        self.correct_log: list[str] = []
        self.missed_log: list[str] = []
        self.high_score = high_scores.load() if high_scores is not None else 0

        self.difficulty = difficulty if difficulty in DIFFICULTY_PROFILES else C.DEFAULT_DIFFICULTY
        self.theme = theme if theme in self.catalog else C.DEFAULT_THEME

        self.clock = PlayClock(time_fn)
        self.spawner = SpawnScheduler(rng)
        self.motion = MotionLoop()

        self.on_game_over: list[Callable[["Session"], None]] = []

    # ==================== PROPERTIES ====================

    @property
    def playing(self) -> bool:
        return self.state is State.PLAYING

    @property
    def paused(self) -> bool:
        return self.state is State.PAUSED

    @property
    def in_session(self) -> bool:
        return self.state in (State.PLAYING, State.PAUSED)

    @property
    def profile(self) -> M.DifficultyProfile:
        return get_profile(self.difficulty)

    @property
    def elapsed(self) -> float:
        """Seconds of playing time, paused time excluded"""
        return self.clock.elapsed()

    @property
    def level(self) -> int:
        return level_for(self.elapsed) if self.in_session else 0

    # ==================== CONFIGURATION ====================

    def set_difficulty(self, name: str) -> bool:
        if name not in DIFFICULTY_PROFILES:
            raise ValueError(f"Unknown difficulty: {name}")
        if self.in_session:
            return False
        self.difficulty = name
        return True

    def set_theme(self, name: str) -> bool:
        if name not in self.catalog:
            raise ValueError(f"Unknown theme: {name}")
        if self.in_session:
            return False
        self.theme = name
        return True

    # ==================== TRANSITIONS ====================

    def start(self):
        """Hard reset of everything session-scoped, then start playing."""
        if self.in_session:
            self.stop()
        elif self.state is State.ENDED:
            self.acknowledge()

        self.live_words.clear()
        self.score = 0
        self.lives = self.starting_lives
        self.correct_log = []
        self.missed_log = []

        self.clock.start()
        self.motion.start(self.clock.elapsed())
        self.spawner.start(self.clock.elapsed())
        self.state = State.PLAYING
        logger.info("Session started (difficulty=%s, theme=%s)", self.difficulty, self.theme)

    def stop(self) -> bool:
        """Manual abort. Not a game over, so the high score is left alone."""
        if not self.in_session:
            return False
        self._cancel_loops()
        self.live_words.clear()
        self.state = State.IDLE
        logger.info("Session stopped (score=%d)", self.score)
        return True

    def pause(self) -> bool:
        if not self.playing:
            return False
        self.clock.pause()
        self.state = State.PAUSED
        logger.info("Session paused at %.2fs", self.elapsed)
        return True

    def resume(self) -> bool:
        if not self.paused:
            return False
        self.clock.resume()
        # both loops pick up from the resume instant
        self.motion.start(self.clock.elapsed())
        self.state = State.PLAYING
        logger.info("Session resumed at %.2fs", self.elapsed)
        return True

    def acknowledge(self) -> bool:
        """Dismiss the game over summary."""
        if self.state is not State.ENDED:
            return False
        self.state = State.IDLE
        return True

    def toggle_start_stop(self):
        if self.in_session:
            self.stop()
        else:
            self.start()

    def toggle_pause(self) -> bool:
        if self.playing:
            return self.pause()
        if self.paused:
            return self.resume()
        return False

    def _cancel_loops(self):
        self.spawner.cancel()
        self.motion.cancel()
        self.clock.stop()

    def _end_game(self):
        self._cancel_loops()
        self.live_words.clear()
        self.state = State.ENDED

        if self.score > self.high_score:
            self.high_score = self.score
            if self.high_scores is not None:
                self.high_scores.save(self.high_score)
        logger.info("Game over (score=%d, high score=%d)", self.score, self.high_score)

        for callback in list(self.on_game_over):
            callback(self)

    # ==================== FRAME / INPUT ====================

    def tick(self, height: float = C.DEFAULT_PLAY_HEIGHT) -> list[M.WordInstance]:
        """
        Run one frame: move words and sweep misses against the word set as of
        frame start, then fire the spawn timer if it is due.
        Returns the words missed this frame.
        """
        if not self.playing:
            return []

        now = self.clock.elapsed()
        missed = self.motion.update(now, self.live_words, height)
        if missed:
            self.missed_log.extend(w.text for w in missed)
            self.lives = max(0, self.lives - len(missed))
            logger.debug("Missed %s, %d lives left", [w.text for w in missed], self.lives)
            if self.lives == 0:
                self._end_game()
                return missed

        self.spawner.update(now, self.profile, words_for(self.theme, self.catalog), self.live_words)
        return missed

    def handle_text(self, text: str) -> str:
        """
        Feed the full contents of the text field. Returns what the field
        should hold afterwards: empty after a match, untouched otherwise.
        """
        if not self.playing:
            return text

        match = resolve(text, self.live_words)
        if match is None:
            return text

        self.correct_log.append(match.word.text)
        self.score += match.points
        logger.debug("Matched %r for %d points", match.word.text, match.points)
        return ""

    def snapshot(self) -> M.Snapshot:
        return M.Snapshot(
            state=self.state,
            score=self.score,
            lives=self.lives,
            high_score=self.high_score,
            level=self.level,
            difficulty=self.difficulty,
            theme=self.theme,
            words=tuple(dataclasses.replace(w) for w in self.live_words),
            correct_log=tuple(self.correct_log),
            missed_log=tuple(self.missed_log),
        )
