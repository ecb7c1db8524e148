import curses
from unittest import mock

from blockfall.app import main, run
from blockfall.game import Game


class FakeScreen:
    def __init__(self, keys=()):
        self.keys = list(keys)
        self.draws = 0

    def keypad(self, flag):
        pass

    def timeout(self, ms):
        pass

    def addstr(self, y, x, text):
        pass

    def refresh(self):
        self.draws += 1

    def getch(self):
        return self.keys.pop(0) if self.keys else -1


def test_run_quits_on_q():
    screen = FakeScreen([curses.KEY_LEFT, ord("q")])
    game = Game()
    start_x = game.block_x
    result = run(screen, game, 0)
    assert result is game
    assert game.running is False
    assert game.block_x == start_x - 1
    assert screen.draws == 2


def test_run_creates_game_when_none_given():
    game = run(FakeScreen([ord("q")]), None, 0)
    assert game.running is False
    assert game.score == 0


def test_run_until_game_over():
    screen = FakeScreen()
    game = run(screen, Game(seed=3), 0)
    assert game.running is False
    assert any("#" in row for row in game.board[:4])
    assert screen.draws > 0


def test_run_sleeps_between_frames():
    screen = FakeScreen([ord("q")])
    game = run(screen, Game(), 0.001)
    assert game.running is False
    assert screen.draws == 1


def test_main_plays_through_wrapper():
    screens = []

    def fake_wrapper(func):
        screen = FakeScreen([ord("q")])
        screens.append(screen)
        return func(screen)

    with mock.patch("curses.wrapper", side_effect=fake_wrapper):
        assert main(["--seed", "5"]) == 0
    assert len(screens) == 1
    assert screens[0].draws == 1