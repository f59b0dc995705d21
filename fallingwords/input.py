from enum import Enum, auto
from typing import Iterable, Optional

import pygame


class Command(Enum):
    START_STOP = auto()
    PAUSE = auto()
    FULLSCREEN = auto()


SHORTCUTS = {
    pygame.K_s: Command.START_STOP,
    pygame.K_p: Command.PAUSE,
    pygame.K_f: Command.FULLSCREEN,
}


class Input:
    """
    Turns raw pygame events into the single-line text field contents plus the
    three game commands (Ctrl+Alt+S / P / F, and Escape for pause).
    """
    def __init__(self):
        self.text = ""
        self.enabled = False
        self.text_changed = False
        self.commands: list[Command] = []
        self.mouse_clicked = False
        self.quit = False

    def clear(self):
        self.text = ""

    def update(self, events: Optional[Iterable[pygame.event.Event]] = None):
        self.text_changed = False
        self.commands = []
        self.mouse_clicked = False

        if events is None:
            events = pygame.event.get()

        for event in events:
            if event.type == pygame.QUIT:
                self.quit = True
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.mouse_clicked = True
            elif event.type == pygame.KEYDOWN:
                self._handle_key(event)

    def _handle_key(self, event: pygame.event.Event):
        mods = getattr(event, "mod", 0)
        if mods & pygame.KMOD_CTRL and mods & pygame.KMOD_ALT:
            command = SHORTCUTS.get(event.key)
            if command is not None:
                self.commands.append(command)
                return

        if event.key == pygame.K_ESCAPE:
            self.commands.append(Command.PAUSE)
            return

        if not self.enabled:
            return

        if event.key == pygame.K_BACKSPACE:
            if self.text:
                self.text = self.text[:-1]
                self.text_changed = True
        elif event.unicode and event.unicode.isprintable():
            self.text += event.unicode
            self.text_changed = True
