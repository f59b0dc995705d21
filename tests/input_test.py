import pygame

from fallingwords.input import Command, Input

CTRL_ALT = pygame.KMOD_LCTRL | pygame.KMOD_LALT


def key(k, unicode="", mod=0):
    return pygame.event.Event(pygame.KEYDOWN, key=k, mod=mod, unicode=unicode)


def typing(text):
    return [key(ord(ch), unicode=ch) for ch in text]


def test_typing_builds_text():
    inp = Input()
    inp.enabled = True
    inp.update(typing("dog"))
    assert inp.text == "dog"
    assert inp.text_changed


def test_backspace():
    inp = Input()
    inp.enabled = True
    inp.update(typing("cat") + [key(pygame.K_BACKSPACE)])
    assert inp.text == "ca"


def test_backspace_on_empty_field_is_not_a_change():
    inp = Input()
    inp.enabled = True
    inp.update([key(pygame.K_BACKSPACE)])
    assert inp.text == ""
    assert not inp.text_changed


def test_disabled_field_ignores_typing():
    inp = Input()
    inp.update(typing("dog"))
    assert inp.text == ""
    assert not inp.text_changed


def test_shortcuts():
    inp = Input()
    inp.update([
        key(pygame.K_s, mod=CTRL_ALT),
        key(pygame.K_p, mod=CTRL_ALT),
        key(pygame.K_f, mod=CTRL_ALT),
    ])
    assert inp.commands == [Command.START_STOP, Command.PAUSE, Command.FULLSCREEN]


def test_shortcut_keys_are_not_typed():
    inp = Input()
    inp.enabled = True
    inp.update([key(pygame.K_s, unicode="s", mod=CTRL_ALT)])
    assert inp.text == ""
    assert inp.commands == [Command.START_STOP]


def test_escape_pauses():
    inp = Input()
    inp.update([key(pygame.K_ESCAPE)])
    assert inp.commands == [Command.PAUSE]


def test_commands_reset_each_frame():
    inp = Input()
    inp.update([key(pygame.K_ESCAPE)])
    inp.update([])
    assert inp.commands == []


def test_quit_and_click():
    inp = Input()
    inp.update([
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)),
        pygame.event.Event(pygame.QUIT),
    ])
    assert inp.mouse_clicked
    assert inp.quit


def test_altgr_characters_are_typed():
    inp = Input()
    inp.enabled = True
    inp.update([key(pygame.K_q, unicode="@", mod=pygame.KMOD_LCTRL | pygame.KMOD_RALT)])
    assert inp.text == "@"
    assert inp.commands == []
