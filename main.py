import logging
import os

import pygame

from fallingwords.engine import Game
from fallingwords.highscore import HighScoreStore
from fallingwords.menu import MenuManager
from fallingwords.session import Session
from fallingwords.words import theme_names


def main():
    logging.basicConfig(
        level=os.environ.get("FALLING_WORDS_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    info = pygame.display.Info()
    screen = pygame.display.set_mode((info.current_w, info.current_h), pygame.RESIZABLE)
    pygame.display.set_caption("Falling Words")
    clock = pygame.time.Clock()

    # one session for the whole process so the high score carries over
    session = Session(high_scores=HighScoreStore())

    while True:
        menu = MenuManager(screen, clock, session, theme_names())
        if not menu.run():
            break

        game = Game(session, screen=screen, clock=clock)
        if not game.run():
            break

    pygame.quit()


if __name__ == "__main__":
    main()
