import math
import time

import pygame

from . import constants as C
from .difficulty import DIFFICULTY_PROFILES


class Button:
    def __init__(self, rect, text, font, base_color=(255, 255, 255), hover_color=(200, 220, 255)):
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.base_color = base_color
        self.hover_color = hover_color
        self.is_hovered = False
        self._scale = 1.0
        self._target_scale = 1.0

    def check_hover(self, mouse_pos):
        self.is_hovered = self.rect.collidepoint(mouse_pos)
        self._target_scale = 1.08 if self.is_hovered else 1.0

    def check_click(self, mouse_pos, mouse_clicked):
        return mouse_clicked and self.rect.collidepoint(mouse_pos)

    def draw(self, screen):
        self._scale += (self._target_scale - self._scale) * 0.18

        color = self.hover_color if self.is_hovered else self.base_color
        if self.is_hovered:
            pygame.draw.rect(screen, (80, 80, 100), self.rect.inflate(8, 8), 2, border_radius=8)

        text_surface = self.font.render(self.text, True, color)
        w = int(text_surface.get_width() * self._scale)
        h = int(text_surface.get_height() * self._scale)
        if w > 0 and h > 0:
            text_surface = pygame.transform.smoothscale(text_surface, (w, h))
        screen.blit(text_surface, text_surface.get_rect(center=self.rect.center))


class OptionToggle:
    """Row of small buttons, exactly one selected (difficulty picker)."""

    COLORS = {
        "easy": (100, 200, 100),
        "medium": (200, 200, 100),
        "hard": (200, 100, 100),
    }

    def __init__(self, options, selected, center_x, y, font, width=130, height=44, gap=8):
        self.options = list(options)
        self.selected = self.options.index(selected) if selected in self.options else 0
        total = len(self.options) * width + (len(self.options) - 1) * gap
        left = center_x - total // 2
        self.buttons = [
            Button((left + i * (width + gap), y, width, height), opt.upper(), font,
                   base_color=(120, 120, 120), hover_color=(255, 255, 255))
            for i, opt in enumerate(self.options)
        ]

    @property
    def value(self) -> str:
        return self.options[self.selected]

    def update(self, mouse_pos, mouse_clicked) -> bool:
        clicked = False
        for i, btn in enumerate(self.buttons):
            btn.check_hover(mouse_pos)
            if btn.check_click(mouse_pos, mouse_clicked):
                self.selected = i
                clicked = True
        return clicked

    def draw(self, screen):
        for i, btn in enumerate(self.buttons):
            if i == self.selected:
                color = self.COLORS.get(self.options[i], (120, 120, 200))
                pygame.draw.rect(screen, color, btn.rect, border_radius=6)
            btn.draw(screen)


class ThemePicker:
    """< theme > selector cycling through the catalog themes."""

    def __init__(self, themes, selected, center_x, y, font):
        self.themes = list(themes)
        self.index = self.themes.index(selected) if selected in self.themes else 0
        self.font = font
        self.center = (center_x, y + 22)
        self.prev_button = Button((center_x - 200, y, 44, 44), "<", font)
        self.next_button = Button((center_x + 156, y, 44, 44), ">", font)

    @property
    def value(self) -> str:
        return self.themes[self.index]

    def update(self, mouse_pos, mouse_clicked) -> bool:
        for btn in (self.prev_button, self.next_button):
            btn.check_hover(mouse_pos)
        if self.prev_button.check_click(mouse_pos, mouse_clicked):
            self.index = (self.index - 1) % len(self.themes)
            return True
        if self.next_button.check_click(mouse_pos, mouse_clicked):
            self.index = (self.index + 1) % len(self.themes)
            return True
        return False

    def draw(self, screen):
        label = self.font.render(self.value.capitalize(), True, C.COLOR)
        screen.blit(label, label.get_rect(center=self.center))
        self.prev_button.draw(screen)
        self.next_button.draw(screen)


class TitleScreen:
    def __init__(self, screen, difficulty, theme, themes):
        self.screen = screen
        sw, sh = screen.get_size()
        self.title_font = pygame.font.Font(None, 110)
        self.label_font = pygame.font.Font(None, 36)
        self.option_font = pygame.font.Font(None, 32)
        self.button_font = pygame.font.Font(None, 64)

        self.title_y_base = sh // 2 - 200
        self.difficulty_toggle = OptionToggle(
            DIFFICULTY_PROFILES.keys(), difficulty, sw // 2, sh // 2 - 70, self.option_font
        )
        self.theme_picker = ThemePicker(themes, theme, sw // 2, sh // 2 + 20, self.option_font)
        self.play_button = Button((sw // 2 - 100, sh // 2 + 100, 200, 70), "PLAY", self.button_font)
        self.quit_button = Button(
            (sw // 2 - 100, sh // 2 + 180, 200, 60), "QUIT", self.label_font,
            base_color=(180, 180, 180), hover_color=(255, 255, 255)
        )

    def update(self, mouse_pos, mouse_clicked):
        self.difficulty_toggle.update(mouse_pos, mouse_clicked)
        self.theme_picker.update(mouse_pos, mouse_clicked)
        for btn in (self.play_button, self.quit_button):
            btn.check_hover(mouse_pos)
        if self.play_button.check_click(mouse_pos, mouse_clicked):
            return "play"
        if self.quit_button.check_click(mouse_pos, mouse_clicked):
            return "quit"
        return None

    def draw(self, current_time, high_score):
        sw, sh = self.screen.get_size()
        # floating title
        y_offset = 8 * math.sin(current_time * 2)
        title = self.title_font.render("FALLING WORDS", True, C.COLOR)
        self.screen.blit(title, title.get_rect(center=(sw // 2, self.title_y_base + y_offset)))

        best = self.label_font.render(f"High Score: {high_score}", True, C.DIM_COLOR)
        self.screen.blit(best, best.get_rect(center=(sw // 2, self.title_y_base + 80)))

        self.difficulty_toggle.draw(self.screen)
        self.theme_picker.draw(self.screen)
        self.play_button.draw(self.screen)
        self.quit_button.draw(self.screen)


class PauseScreen:
    """Pause overlay drawn on top of the game. Returns 'resume' or 'menu'."""

    BORDER_THICKNESS = 6
    FADE_DURATION = 0.25  # seconds for border/dim animation

    def __init__(self, screen):
        self.screen = screen
        sw, sh = screen.get_size()
        btn_font = pygame.font.Font(None, 56)
        self.resume_button = Button((sw // 2 - 120, sh // 2 - 50, 240, 60), "RESUME", btn_font)
        self.menu_button = Button((sw // 2 - 120, sh // 2 + 30, 240, 60), "MAIN MENU", btn_font)
        self.open_time = time.time()

    def update(self, mouse_pos, mouse_clicked):
        self.resume_button.check_hover(mouse_pos)
        self.menu_button.check_hover(mouse_pos)
        if self.resume_button.check_click(mouse_pos, mouse_clicked):
            return "resume"
        if self.menu_button.check_click(mouse_pos, mouse_clicked):
            return "menu"
        return None

    def draw(self, current_time):
        sw, sh = self.screen.get_size()
        t = min(1.0, (current_time - self.open_time) / self.FADE_DURATION)
        ease = 1 - (1 - t) ** 3  # cubic ease-out

        overlay = pygame.Surface((sw, sh), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, int(120 * ease)))
        self.screen.blit(overlay, (0, 0))

        thickness = int(self.BORDER_THICKNESS * ease)
        if thickness > 0:
            bright = int(255 * ease)
            c = (bright, bright, bright)
            pygame.draw.rect(self.screen, c, (0, 0, sw, thickness))
            pygame.draw.rect(self.screen, c, (0, sh - thickness, sw, thickness))
            pygame.draw.rect(self.screen, c, (0, 0, thickness, sh))
            pygame.draw.rect(self.screen, c, (sw - thickness, 0, thickness, sh))

        self.resume_button.draw(self.screen)
        self.menu_button.draw(self.screen)


def wrap_words(words, font, max_width, max_lines=None):
    """
    Split a word list into comma separated lines that fit max_width.
    With max_lines set, the last visible line becomes "+N more" when the
    words do not all fit.
    """
    if not words:
        return ["None"]
    rows, row = [], []
    for word in words:
        candidate = ", ".join(row + [word])
        if row and font.size(candidate)[0] > max_width:
            rows.append(row)
            row = [word]
        else:
            row.append(word)
    rows.append(row)

    if max_lines is not None and len(rows) > max_lines:
        shown = rows[:max_lines - 1]
        hidden = len(words) - sum(len(r) for r in shown)
        return [", ".join(r) + "," for r in shown] + [f"+{hidden} more"]

    return [", ".join(r) + ("," if i < len(rows) - 1 else "") for i, r in enumerate(rows)]


class GameOverScreen:
    """Final score plus correct/missed words. Returns 'again' or 'menu'."""

    def __init__(self, screen, snapshot):
        self.screen = screen
        self.snapshot = snapshot
        sw, sh = screen.get_size()
        self.header_font = pygame.font.Font(None, 72)
        self.score_font = pygame.font.Font(None, 96)
        self.label_font = pygame.font.Font(None, 34)
        self.list_font = pygame.font.Font(None, 28)
        btn_font = pygame.font.Font(None, 48)
        self.panel = pygame.Rect(sw // 2 - 420, sh // 2 - 300, 840, 600)
        self.again_button = Button((sw // 2 - 260, self.panel.bottom - 80, 240, 56), "PLAY AGAIN", btn_font)
        self.menu_button = Button((sw // 2 + 20, self.panel.bottom - 80, 240, 56), "MAIN MENU", btn_font)

    def update(self, mouse_pos, mouse_clicked):
        self.again_button.check_hover(mouse_pos)
        self.menu_button.check_hover(mouse_pos)
        if self.again_button.check_click(mouse_pos, mouse_clicked):
            return "again"
        if self.menu_button.check_click(mouse_pos, mouse_clicked):
            return "menu"
        return None

    def draw(self):
        sw, sh = self.screen.get_size()
        overlay = pygame.Surface((sw, sh), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 170))
        self.screen.blit(overlay, (0, 0))

        pygame.draw.rect(self.screen, (24, 24, 28), self.panel, border_radius=12)
        pygame.draw.rect(self.screen, C.BORDER_COLOR, self.panel, 2, border_radius=12)

        header = self.header_font.render("GAME OVER", True, C.COLOR)
        self.screen.blit(header, header.get_rect(center=(self.panel.centerx, self.panel.top + 50)))
        score = self.score_font.render(str(self.snapshot.score), True, C.COLOR)
        self.screen.blit(score, score.get_rect(center=(self.panel.centerx, self.panel.top + 130)))

        column_w = self.panel.width // 2 - 40
        columns = (
            ("Correct Words", self.snapshot.correct_log, C.CORRECT_COLOR, self.panel.left + 30),
            ("Missed Words", self.snapshot.missed_log, C.MISSED_COLOR, self.panel.centerx + 10),
        )
        for title, words, color, x in columns:
            label = self.label_font.render(title, True, color)
            self.screen.blit(label, (x, self.panel.top + 200))
            y = self.panel.top + 240
            for line in wrap_words(words, self.list_font, column_w, max_lines=10):
                surface = self.list_font.render(line, True, C.DIM_COLOR)
                self.screen.blit(surface, (x, y))
                y += 26

        self.again_button.draw(self.screen)
        self.menu_button.draw(self.screen)


class MenuManager:
    def __init__(self, screen, clock, session, themes):
        self.screen = screen
        self.clock = clock
        self.session = session
        self.title_screen = TitleScreen(screen, session.difficulty, session.theme, themes)

    def run(self) -> bool:
        """Title loop. Applies the chosen difficulty/theme; returns False on quit."""
        while True:
            current_time = time.time()
            mouse_pos = pygame.mouse.get_pos()
            mouse_clicked = False

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return False
                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    mouse_clicked = True

            self.screen.fill(C.BACKGROUND_COLOR)
            action = self.title_screen.update(mouse_pos, mouse_clicked)
            self.title_screen.draw(current_time, self.session.high_score)

            if action == "quit":
                return False
            if action == "play":
                self.session.set_difficulty(self.title_screen.difficulty_toggle.value)
                self.session.set_theme(self.title_screen.theme_picker.value)
                return True

            pygame.display.flip()
            self.clock.tick(C.FPS)
