"""Terminal drawing and keyboard input."""

from __future__ import annotations

import curses

from .game import BOARD_HEIGHT, BOARD_WIDTH, EMPTY, FILLED, TETROMINOES, Action

_SIDEBAR_GAP = 1

_KEY_ACTIONS = {
    ord("q"): Action.QUIT,
    curses.KEY_LEFT: Action.LEFT,
    curses.KEY_RIGHT: Action.RIGHT,
    curses.KEY_DOWN: Action.DOWN,
    curses.KEY_UP: Action.ROTATE,
    ord(" "): Action.DROP,
}


def key_to_action(key) -> Action:
    """Map a curses key code to a game action."""
    return _KEY_ACTIONS.get(key, Action.NONE)


def render(game) -> list[str]:
    """Return the screen as lines of text: framed board plus sidebar."""
    grid = [list(row) for row in game.board]
    for i, row in enumerate(game.current_block):
        for j, cell in enumerate(row):
            y, x = game.block_y + i, game.block_x + j
            if cell and 0 <= y < BOARD_HEIGHT and 0 <= x < BOARD_WIDTH:
                grid[y][x] = FILLED

    border = "+" + "-" * BOARD_WIDTH + "+"
    lines = [border, *("|" + "".join(row) + "|" for row in grid), border]

    sidebar = {
        1: f"Score: {game.score}",
        2: f"High Score: {game.high_score}",
        3: f"Level: {game.level}",
        5: "Next:",
    }
    preview = TETROMINOES[game.next_tetromino][0]
    for i, row in enumerate(preview):
        sidebar[6 + i] = "".join(FILLED if cell else " " for cell in row)

    gap = " " * _SIDEBAR_GAP
    for row, text in sidebar.items():
        lines[row] += gap + text
    return lines


class CursesUI:
    """Draws a game on a curses window and reads keys without blocking."""

    def __init__(self, screen):
        self.screen = screen
        screen.keypad(True)
        screen.timeout(0)

    def draw(self, game) -> None:
        """Paint the current game state."""
        for row, line in enumerate(render(game)):
            try:
                self.screen.addstr(row, 0, line)
            except curses.error:
                pass
        self.screen.refresh()

    def get_input(self) -> Action:
        """Return the action for the pending key, or Action.NONE."""
        return key_to_action(self.screen.getch())


__all__ = ["CursesUI", "key_to_action", "render", "EMPTY"]