"""The game loop and command-line entry point."""

from __future__ import annotations

import argparse
import curses
import time

from .game import DEFAULT_SEED, Game
from .ui import CursesUI

FRAME_SECONDS = 0.05


def run(screen, game=None, frame_seconds=FRAME_SECONDS) -> Game:
    """Play ``game`` on ``screen`` at a fixed frame rate until it stops running."""
    if game is None:
        game = Game()
    ui = CursesUI(screen)
    last_frame = time.monotonic()
    while game.running:
        now = time.monotonic()
        elapsed = now - last_frame
        if elapsed >= frame_seconds:
            ui.draw(game)
            game.handle_action(ui.get_input())
            game.update()
            last_frame = now
        else:
            time.sleep(frame_seconds - elapsed)
    return game


def main(argv=None) -> int:
    """Start a game in the terminal."""
    parser = argparse.ArgumentParser(prog="blockfall", description="Falling-block puzzle game.")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="random seed for pieces")
    args = parser.parse_args(argv)

    def _play(screen):
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        return run(screen, Game(args.seed))

    curses.wrapper(_play)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())