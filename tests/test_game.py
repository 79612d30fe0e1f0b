import io
import sys

import pytest

from geesespotter.game import Game, main


class FixedRng:
    """Returns positions from a fixed list, in order."""

    def __init__(self, positions):
        self.positions = list(positions)

    def randrange(self, stop):
        return self.positions.pop(0) % stop


def make_game(text, positions=()):
    out = io.StringIO()
    game = Game(io.StringIO(text), out, FixedRng(positions))
    return game, out


def test_start_builds_hidden_board():
    game, out = make_game("3\n2\n0\n")
    game.start()
    assert game.board.width == 3
    assert game.board.height == 2
    assert game.num_geese == 0
    assert game.board.render() == "***\n***\n"
    assert out.getvalue().startswith("Welcome to GeeseSpotter!\n")


def test_start_reprompts_for_invalid_dimensions():
    game, out = make_game("0 61 2 0 21 3 0\n")
    game.start()
    assert (game.board.width, game.board.height) == (2, 3)
    text = out.getvalue()
    assert text.count("Please enter the x dimension (max 60): ") == 3
    assert text.count("Please enter the y dimension (max 20): ") == 3


def test_start_rejects_too_many_geese():
    game, out = make_game("2 1 5 -1 1\n", positions=[0])
    game.start()
    assert out.getvalue().count("That's too many geese!") == 2
    assert game.num_geese == 1


def test_get_action_uppercases():
    game, out = make_game("  s\n")
    assert game.get_action() == "S"
    assert "[S]how, [M]ark, [R]estart, [Q]uit" in out.getvalue()


def test_get_action_reads_single_character():
    game, _ = make_game("mq\n")
    assert [game.get_action(), game.get_action()] == ["M", "Q"]


def test_show_off_board():
    game, out = make_game("2 2 0 5 0\n")
    game.start()
    game.show()
    assert "Location entered is not on the board." in out.getvalue()


def test_show_marked_location():
    game, out = make_game("2 2 0 0 0 0 0\n")
    game.start()
    game.mark()
    game.show()
    assert "Location is marked, and therefore cannot be revealed." in out.getvalue()
    assert game.board.is_marked(0, 0)


def test_mark_revealed_location():
    game, out = make_game("2 2 0 1 1 1 1\n")
    game.start()
    game.show()
    game.mark()
    assert "Position already revealed, so cannot be marked." in out.getvalue()
    assert not game.board.is_marked(1, 1)


def test_mark_toggles():
    game, _ = make_game("2 2 0 0 1 0 1\n")
    game.start()
    game.mark()
    assert game.board.is_marked(0, 1)
    game.mark()
    assert not game.board.is_marked(0, 1)


def test_show_goose_restarts_game():
    game, out = make_game("2 1 1 0 0 3 1 0\n", positions=[0])
    game.start()
    game.show()
    text = out.getvalue()
    assert "You disturbed a goose! Your game has ended." in text
    assert "Starting a new game." in text
    assert game.board.width == 3
    assert text.count("Welcome to GeeseSpotter!") == 2


def test_run_quit():
    game, out = make_game("2 2 0\nq\n")
    assert game.run() is True
    assert out.getvalue().count("Please enter the action") == 1


def test_run_win_resets_board():
    game, out = make_game("1 1 0\nS 0 0\n2 1 0\nQ\n")
    assert game.run() is True
    text = out.getvalue()
    assert "YOU WON!!!" in text
    assert "Resetting the game board." in text
    assert game.board.width == 2


def test_run_restart():
    game, out = make_game("1 1 0\nR 3 3 0\nQ\n")
    game.run()
    assert "Restarting the game." in out.getvalue()
    assert game.board.width == 3


def test_run_ends_on_eof():
    game, _ = make_game("2 2 0\n")
    assert game.run() is True


def test_start_raises_eof_when_input_runs_out():
    game, _ = make_game("2\n")
    with pytest.raises(EOFError):
        game.start()


def test_main_reads_stdin(monkeypatch):
    out = io.StringIO()
    monkeypatch.setattr(sys, "stdin", io.StringIO("2 2 0\nQ\n"))
    monkeypatch.setattr(sys, "stdout", out)
    assert main() == 0
    assert "Welcome to GeeseSpotter!" in out.getvalue()