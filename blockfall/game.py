"""Game rules: the board, the falling piece, scoring and timing."""

from __future__ import annotations

import random
from enum import IntEnum

BOARD_WIDTH = 10
BOARD_HEIGHT = 20

EMPTY = "."
FILLED = "#"

DEFAULT_SEED = 888
START_HIGH_SCORE = 2200
POINTS_PER_LINE = 100


class Action(IntEnum):
    """Player commands understood by :meth:`Game.handle_action`."""

    NONE = 0
    QUIT = 1
    LEFT = 2
    RIGHT = 3
    DOWN = 4
    ROTATE = 5
    DROP = 6


def _shape(*rows: str) -> tuple[tuple[int, ...], ...]:
    return tuple(tuple(int(c) for c in row) for row in rows)


# Each piece is a tuple of rotations; each rotation is a 4x4 grid of 0/1.
TETROMINOES = (
    # I
    (
        _shape("0000", "1111", "0000", "0000"),
        _shape("0010", "0010", "0010", "0010"),
    ),
    # O
    (
        _shape("0110", "0110", "0000", "0000"),
    ),
    # T
    (
        _shape("0100", "1110", "0000", "0000"),
        _shape("0100", "0110", "0100", "0000"),
        _shape("0000", "1110", "0100", "0000"),
        _shape("0100", "1100", "0100", "0000"),
    ),
    # S
    (
        _shape("0110", "1100", "0000", "0000"),
        _shape("0100", "0110", "0010", "0000"),
    ),
    # Z
    (
        _shape("1100", "0110", "0000", "0000"),
        _shape("0010", "0110", "0100", "0000"),
    ),
    # J
    (
        _shape("1000", "1110", "0000", "0000"),
        _shape("0110", "0100", "0100", "0000"),
        _shape("0000", "1110", "0010", "0000"),
        _shape("0100", "0100", "1100", "0000"),
    ),
    # L
    (
        _shape("0010", "1110", "0000", "0000"),
        _shape("0100", "0100", "0110", "0000"),
        _shape("0000", "1110", "1000", "0000"),
        _shape("1100", "0100", "0100", "0000"),
    ),
)


def _cells(block):
    """Yield (row, column) offsets of the occupied cells of a block."""
    for i, row in enumerate(block):
        for j, cell in enumerate(row):
            if cell:
                yield i, j


def is_valid_position(board, x, y, block) -> bool:
    """Return True if ``block`` placed at column ``x``, row ``y`` fits on ``board``."""
    for i, j in _cells(block):
        nx, ny = x + j, y + i
        if not (0 <= nx < BOARD_WIDTH and 0 <= ny < BOARD_HEIGHT):
            return False
        if board[ny][nx] == FILLED:
            return False
    return True


def _fall_interval(level: int) -> int:
    return max(1, 10 - (level - 1))


class Game:
    """State and rules of one game."""

    def __init__(self, seed=DEFAULT_SEED):
        self._rng = random.Random(seed)
        self.board = [[EMPTY] * BOARD_WIDTH for _ in range(BOARD_HEIGHT)]
        self.current_tetromino = 0
        self.current_rotation = 0
        self.current_block = TETROMINOES[0][0]
        self.block_x = 0
        self.block_y = 0
        self.score = 0
        self.level = 1
        self.lines_cleared = 0
        self.high_score = START_HIGH_SCORE
        self.running = True
        self.next_tetromino = self._random_piece()
        self.fall_timer = 0
        self.fall_interval = _fall_interval(self.level)
        self.spawn_new_block()

    def _random_piece(self) -> int:
        return self._rng.randrange(len(TETROMINOES))

    def handle_action(self, action) -> None:
        """Apply one player command; unknown commands are ignored."""
        try:
            action = Action(action)
        except ValueError:
            return
        if action is Action.QUIT:
            self.running = False
        elif action is Action.LEFT:
            self.move(-1, 0)
        elif action is Action.RIGHT:
            self.move(1, 0)
        elif action is Action.DOWN:
            self.move(0, 1)
        elif action is Action.ROTATE:
            self.rotate()
        elif action is Action.DROP:
            self.drop_to_bottom()

    def update(self) -> None:
        """Advance the gravity timer by one frame."""
        self.fall_timer += 1
        if self.fall_timer >= self.fall_interval:
            self.check_lines()
            self.move(0, 1)
            self.fall_timer = 0
            self.fall_interval = _fall_interval(self.level)

    def move(self, dx, dy) -> bool:
        """Shift the piece; a blocked move straight down lands it.

        Returns True if the piece moved.
        """
        nx, ny = self.block_x + dx, self.block_y + dy
        if not is_valid_position(self.board, nx, ny, self.current_block):
            if (dx, dy) == (0, 1):
                self.land()
                self.spawn_new_block()
            return False
        self.block_x, self.block_y = nx, ny
        return True

    def spawn_new_block(self) -> None:
        """Bring the next piece in at the top; end the game if it does not fit."""
        self.block_x = BOARD_WIDTH // 2 - 2
        self.block_y = 0
        self.current_tetromino = self.next_tetromino
        self.current_rotation = 0
        self.next_tetromino = self._random_piece()
        self.current_block = TETROMINOES[self.current_tetromino][0]
        if not is_valid_position(self.board, self.block_x, self.block_y, self.current_block):
            self.running = False

    def drop_to_bottom(self) -> None:
        """Move the piece down until it lands."""
        while self.move(0, 1):
            pass

    def check_lines(self) -> None:
        """Remove full rows, shifting the rows above down, and score them."""
        full = [FILLED] * BOARD_WIDTH
        gained = 0
        for i, row in enumerate(self.board):
            if row == full:
                gained += POINTS_PER_LINE * self.level
                for j in range(i, 0, -1):
                    self.board[j] = list(self.board[j - 1])
        self.score += gained

    def rotate(self) -> None:
        """Turn the piece to its next rotation if that position is free."""
        rotations = TETROMINOES[self.current_tetromino]
        next_rotation = (self.current_rotation + 1) % len(rotations)
        candidate = rotations[next_rotation]
        if is_valid_position(self.board, self.block_x, self.block_y, candidate):
            self.current_rotation = next_rotation
            self.current_block = candidate

    def land(self) -> None:
        """Fix the current piece onto the board."""
        for i, j in _cells(self.current_block):
            self.board[self.block_y + i][self.block_x + j] = FILLED