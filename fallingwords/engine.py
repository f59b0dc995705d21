import logging
import time

import pygame

from . import constants as C
from . import models as M
from .input import Command, Input
from .menu import GameOverScreen, PauseScreen

logger = logging.getLogger(__name__)

State = M.SessionState


class Game:
    """pygame front end: feeds input into the session, ticks it once per frame and draws it."""

    def __init__(self, session, screen=None, clock=None) -> None:
        if screen is not None:
            self.screen = screen
        else:
            info = pygame.display.Info()
            self.screen = pygame.display.set_mode((info.current_w, info.current_h), pygame.RESIZABLE)
            pygame.display.set_caption("Falling Words")
        self.clock = clock if clock is not None else pygame.time.Clock()
        self.session = session
        self.input = Input()
        self.running = False
        self._exit_to_menu = False
        self.fullscreen = False

        self.font = pygame.font.Font(None, 40)
        self.word_font = pygame.font.Font(None, 30)
        self.input_font = pygame.font.Font(None, 36)
        self.hint_font = pygame.font.Font(None, 26)

        self.message = None
        self.message_duration = 0.0

        self.pause_screen: PauseScreen | None = None
        self.game_over_screen: GameOverScreen | None = None

    def run(self) -> bool:
        """Run the game loop. Returns True if the player exits to the menu, False on quit."""
        self.running = True
        self._exit_to_menu = False
        self.session.on_game_over.append(self._on_game_over)
        self._start()

        try:
            while self.running:
                dt = self.clock.tick(C.FPS) / 1000
                self.update(dt)
                pygame.display.flip()
        finally:
            self.session.on_game_over.remove(self._on_game_over)
            self.session.stop()
            self.session.acknowledge()
            self.exit_fullscreen()

        return self._exit_to_menu

    # ==================== COMMANDS ====================

    def _start(self):
        self.input.clear()
        self.pause_screen = None
        self.game_over_screen = None
        self.session.start()

    def handle_command(self, command: Command):
        if command is Command.START_STOP:
            if self.session.in_session:
                self.session.stop()
                self.pause_screen = None
                self.input.clear()
            else:
                self._start()
        elif command is Command.PAUSE:
            self._toggle_pause()
        elif command is Command.FULLSCREEN:
            self.toggle_fullscreen()

    def _toggle_pause(self):
        if self.session.toggle_pause():
            self.pause_screen = PauseScreen(self.screen) if self.session.paused else None

    def toggle_fullscreen(self):
        try:
            toggled = pygame.display.toggle_fullscreen()
        except pygame.error as e:
            logger.warning("Fullscreen toggle failed: %s", e)
            return
        if not toggled:
            logger.warning("Fullscreen toggle not supported by this display")
            return
        self.fullscreen = not self.fullscreen

    def exit_fullscreen(self):
        if self.fullscreen:
            self.toggle_fullscreen()

    def _on_game_over(self, session):
        self.exit_fullscreen()
        self.input.clear()
        self.pause_screen = None
        self.game_over_screen = GameOverScreen(self.screen, session.snapshot())

    def show_message(self, txt: str, secs: float):
        self.message = txt
        self.message_duration = secs

    # ==================== FRAME ====================

    def play_area(self) -> pygame.Rect:
        sw, sh = self.screen.get_size()
        pad = C.PLAY_AREA_PADDING
        height = max(C.BOTTOM_MARGIN + 1, sh - C.HUD_HEIGHT - C.INPUT_HEIGHT - pad * 2)
        return pygame.Rect(pad, C.HUD_HEIGHT, sw - pad * 2, height)

    def update(self, dt: float) -> None:
        self.input.enabled = self.session.playing
        self.input.update()
        if self.input.quit:
            self.running = False
            return

        for command in self.input.commands:
            self.handle_command(command)

        if self.input.text_changed:
            score_before = self.session.score
            self.input.text = self.session.handle_text(self.input.text)
            if self.session.score > score_before:
                self.show_message(f"+{self.session.score - score_before}", 0.6)

        area = self.play_area()
        missed = self.session.tick(area.height)
        if missed and self.session.playing:
            self.show_message("Missed!", 0.8)

        if self.message_duration > 0:
            self.message_duration -= dt
            if self.message_duration <= 0:
                self.message = None

        snapshot = self.session.snapshot()
        self.screen.fill(C.BACKGROUND_COLOR)
        self.draw_hud(snapshot)
        self.draw_play_area(area, snapshot)
        self.draw_input_field(snapshot)
        self._update_overlays(snapshot)

    def _update_overlays(self, snapshot: M.Snapshot):
        mouse_pos = pygame.mouse.get_pos()
        clicked = self.input.mouse_clicked

        if snapshot.state is State.PAUSED and self.pause_screen is not None:
            action = self.pause_screen.update(mouse_pos, clicked)
            self.pause_screen.draw(time.time())
            if action == "resume":
                self._toggle_pause()
            elif action == "menu":
                self._exit_to_menu = True
                self.running = False

        elif snapshot.state is State.ENDED and self.game_over_screen is not None:
            action = self.game_over_screen.update(mouse_pos, clicked)
            self.game_over_screen.draw()
            if action == "again":
                self._start()
            elif action == "menu":
                self.session.acknowledge()
                self._exit_to_menu = True
                self.running = False

    # ==================== DRAWING ====================

    def draw_hud(self, snapshot: M.Snapshot):
        items = (
            f"Score: {snapshot.score}",
            f"Lives: {snapshot.lives}",
            f"High Score: {snapshot.high_score}",
            f"Level: {snapshot.level}",
        )
        x = C.PLAY_AREA_PADDING
        for item in items:
            surface = self.font.render(item, True, C.COLOR)
            self.screen.blit(surface, (x, 30))
            x += surface.get_width() + 40

        hints = self.hint_font.render(
            "Start/Stop Ctrl+Alt+S   Pause Ctrl+Alt+P   Fullscreen Ctrl+Alt+F", True, C.DIM_COLOR
        )
        self.screen.blit(hints, hints.get_rect(topright=(self.screen.get_width() - C.PLAY_AREA_PADDING, 38)))

    def draw_play_area(self, area: pygame.Rect, snapshot: M.Snapshot):
        pygame.draw.rect(self.screen, C.BORDER_COLOR, area, 1, border_radius=8)
        self.screen.set_clip(area)

        for word in snapshot.words:
            label = self.word_font.render(word.text, True, C.COLOR)
            box = label.get_rect().inflate(16, 8)
            box.midtop = (area.left + int(area.width * word.x / 100), area.top + int(word.y))
            pygame.draw.rect(self.screen, C.WORD_COLOR, box, border_radius=4)
            self.screen.blit(label, label.get_rect(center=box.center))

        if self.message and snapshot.state is State.PLAYING:
            color = C.MISSED_COLOR if self.message == "Missed!" else C.CORRECT_COLOR
            surface = self.font.render(self.message, True, color)
            self.screen.blit(surface, surface.get_rect(center=(area.centerx, area.top + 40)))

        self.screen.set_clip(None)

    def draw_input_field(self, snapshot: M.Snapshot):
        sw, sh = self.screen.get_size()
        pad = C.PLAY_AREA_PADDING
        rect = pygame.Rect(pad, sh - C.INPUT_HEIGHT - pad, sw - pad * 2, C.INPUT_HEIGHT - 16)
        pygame.draw.rect(self.screen, (38, 38, 42), rect, border_radius=6)
        pygame.draw.rect(self.screen, C.BORDER_COLOR, rect, 1, border_radius=6)

        if snapshot.state is State.PLAYING:
            text, color = self.input.text, C.COLOR
            if not text:
                text, color = "Type here...", C.DIM_COLOR
        elif snapshot.state is State.PAUSED:
            text, color = "Paused", C.DIM_COLOR
        else:
            text, color = "Press Start to play (Ctrl+Alt+S)", C.DIM_COLOR

        surface = self.input_font.render(text, True, color)
        self.screen.blit(surface, surface.get_rect(midleft=(rect.left + 12, rect.centery)))
