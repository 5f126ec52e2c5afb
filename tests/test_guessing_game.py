"""Tests for the number guessing game."""

import io
from unittest.mock import Mock

import pytest

from py_drills.core.guessing_game import (
    GameOptions,
    GuessingGame,
    GuessOutcome,
    evaluate_guess,
)
from py_drills.core.random_source import RandomSource
from py_drills.utils.console import Console


def make_game(text, secret=42, options=None):
    """Build a game whose source always picks ``secret``."""
    source = Mock(spec=RandomSource)
    source.get.return_value = secret
    console = Console(io.StringIO(text), io.StringIO())
    return GuessingGame(console, source, options or GameOptions()), console, source


class TestEvaluateGuess:
    """Test guess evaluation."""

    def test_outcomes(self):
        assert evaluate_guess(42, 42) is GuessOutcome.CORRECT
        assert evaluate_guess(42, 50) is GuessOutcome.TOO_HIGH
        assert evaluate_guess(42, 1) is GuessOutcome.TOO_LOW


class TestGuessingGame:
    """Test playing rounds of the game."""

    def test_intro(self):
        game, _, _ = make_game("")
        assert game.intro() == (
            "Let's play a game. I'm thinking of a number between 1 and 100. "
            "You have 10 tries to guess what it is."
        )

    def test_win(self):
        """Test a round won on the third guess."""
        game, console, source = make_game("50\n25\n42\nn\n")
        rounds = game.play()

        source.get.assert_called_once_with(1, 100)
        assert len(rounds) == 1
        assert rounds[0].won
        assert rounds[0].guesses == [50, 25, 42]

        output = console.stdout.getvalue()
        assert "Guess #1: Your guess is too high.\n" in output
        assert "Guess #2: Your guess is too low.\n" in output
        assert "Guess #3: Correct! You win!\n" in output
        assert output.endswith("Would you like to play again (y/n)? ")

    def test_loss(self):
        """Test running out of guesses."""
        game, console, _ = make_game("1 2 3\nn\n", options=GameOptions(1, 100, 3))
        rounds = game.play()

        assert not rounds[0].won
        assert rounds[0].guesses == [1, 2, 3]
        output = console.stdout.getvalue()
        assert "Guess #4" not in output
        assert "Sorry, you lose. The correct number was 42.\n" in output

    def test_play_again(self):
        """Test that answering y starts a new round."""
        game, _, source = make_game("42\ny\n42\ny\n42\nn\n")
        rounds = game.play()

        assert len(rounds) == 3
        assert all(r.won for r in rounds)
        assert source.get.call_count == 3

    def test_input_ends(self):
        """Test that running out of input ends the session."""
        game, _, _ = make_game("42\ny\n10\n")
        rounds = game.play()

        assert len(rounds) == 1
        assert rounds[0].won

    def test_custom_range(self):
        """Test that the secret is drawn from the configured range."""
        game, _, source = make_game("7\nn\n", secret=7, options=GameOptions(5, 9, 2))
        game.play()
        source.get.assert_called_once_with(5, 9)

    def test_real_source(self):
        """Test a round against a seeded source."""
        source = RandomSource(123)
        secret = RandomSource(123).get(1, 100)
        console = Console(io.StringIO(f"{secret}\nn\n"), io.StringIO())

        rounds = GuessingGame(console, source, GameOptions()).play()

        assert rounds[0].secret == secret
        assert rounds[0].won

    def test_options_from_settings(self, monkeypatch):
        from py_drills.core import guessing_game

        monkeypatch.setattr(guessing_game.settings, "max_guesses", 4)
        assert GameOptions.from_settings().max_guesses == 4

    def test_bad_guess(self):
        """Test that a non-numeric guess propagates InputError."""
        from py_drills.exceptions import InputError

        game, _, _ = make_game("fifty\n")
        with pytest.raises(InputError):
            game.play()


class TestGameOptions:
    """Test guessing game option validation."""

    def test_defaults(self):
        options = GameOptions()
        assert (options.min_value, options.max_value, options.max_guesses) == (1, 100, 10)

    def test_no_guesses_rejected(self):
        """Test that a round must allow at least one guess."""
        with pytest.raises(ValueError):
            GameOptions(1, 100, 0)
        with pytest.raises(ValueError):
            GameOptions(1, 100, -2)

    def test_inverted_range_rejected(self):
        from py_drills.exceptions import InvalidRangeError

        with pytest.raises(InvalidRangeError):
            GameOptions(10, 1, 5)
