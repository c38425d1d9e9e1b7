"""
Tests for the console game and the command line entry point.
"""

import pytest

from logic.ai_player import AIPlayer
from logic.session import GameSession
from main import ConsoleGame, main


class PreferCells:
    """Random source stub: first preferred cell that is free, else the first option."""

    def __init__(self, *preferred):
        self.preferred = preferred

    def choice(self, options):
        for cell in self.preferred:
            if cell in options:
                return cell
        return options[0]


def scripted(answers):
    answers = iter(answers)
    return lambda prompt: next(answers)


def make_game(answers, *preferred):
    session = GameSession(ai=AIPlayer(rng=PreferCells(*preferred)))
    sleeps = []
    game = ConsoleGame(session, delay=0.25, input_fn=scripted(answers), sleep_fn=sleeps.append)
    return game, sleeps


def test_console_draw_with_bad_input(capsys):
    # Human X at 1, 2, 7, 6, 9; computer O at 5, 3, 4, 8
    game, sleeps = make_game(["abc", "0", "1", "1", "2", "7", "6", "9", "n"])
    game.play()

    out = capsys.readouterr().out
    assert "Please type a number 1..9." in out
    assert "That cell is taken. Try again." in out
    assert "Computer plays 5" in out
    assert "Computer plays 3" in out
    assert "Draw What a fight" in out
    assert "Goodbye!" in out
    assert sleeps == [0.25] * 4
    assert game.session.board.is_full()


def test_console_rematch_alternates_first_player(capsys):
    answers = [
        # Game 1: human forks the computer and wins
        "1", "9", "7", "4", "y",
        # Game 2: computer opens, ends in a draw
        "1", "7", "6", "8", "n",
    ]
    game, _ = make_game(answers, 2)
    game.play()

    out = capsys.readouterr().out
    assert "You Win! You so great" in out
    assert "Computer starts this time." in out
    assert "Draw What a fight" in out
    assert game.session.games_started == 2
    assert not game.session.human_first


def test_console_skips_sleep_without_delay():
    session = GameSession(ai=AIPlayer(rng=PreferCells()))
    sleeps = []
    game = ConsoleGame(
        session,
        delay=0,
        input_fn=scripted(["1", "2", "7", "6", "9", "n"]),
        sleep_fn=sleeps.append
    )
    game.play()
    assert sleeps == []


@pytest.mark.parametrize("delay", ["-1", "nan", "inf"])
def test_main_rejects_bad_delay(delay):
    with pytest.raises(SystemExit):
        main(["--no-ui", "--delay", delay])


def test_main_console_mode_stops_on_eof(monkeypatch, capsys):
    def no_more_input(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_more_input)
    assert main(["--no-ui", "--delay", "0", "--seed", "3"]) == 0
    assert "Game interrupted by user." in capsys.readouterr().out


def test_main_console_mode_computer_first(monkeypatch, capsys):
    def no_more_input(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_more_input)
    main(["--no-ui", "--delay", "0", "--computer-first"])
    # Empty board: the computer always takes the center
    assert "Computer plays 5" in capsys.readouterr().out
