"""
Number guessing game.

The game picks a secret number from an injected RandomSource and gives the
player a fixed number of guesses, answering each one with too high, too low
or correct. After each round the player may play again.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

import structlog

from ..config import settings
from ..exceptions import InputExhausted, InvalidRangeError
from ..utils.console import Console
from .random_source import RandomSource

logger = structlog.get_logger()


class GuessOutcome(Enum):
    """Result of comparing a guess with the secret number."""

    CORRECT = "correct"
    TOO_HIGH = "too_high"
    TOO_LOW = "too_low"


MESSAGES = {
    GuessOutcome.CORRECT: "Correct! You win!",
    GuessOutcome.TOO_HIGH: "Your guess is too high.",
    GuessOutcome.TOO_LOW: "Your guess is too low.",
}


@dataclass
class GameOptions:
    """Guessing game parameters."""

    min_value: int = 1
    max_value: int = 100
    max_guesses: int = 10

    def __post_init__(self):
        if self.max_guesses < 1:
            raise ValueError(f"max_guesses must be at least 1, got {self.max_guesses}")
        if self.min_value > self.max_value:
            raise InvalidRangeError(self.min_value, self.max_value)

    @classmethod
    def from_settings(cls) -> "GameOptions":
        return cls(
            min_value=settings.guess_min,
            max_value=settings.guess_max,
            max_guesses=settings.max_guesses,
        )


@dataclass
class RoundResult:
    """Outcome of a single round."""

    secret: int
    guesses: List[int] = field(default_factory=list)
    won: bool = False


def evaluate_guess(correct: int, guess: int) -> GuessOutcome:
    if guess == correct:
        return GuessOutcome.CORRECT
    if guess > correct:
        return GuessOutcome.TOO_HIGH
    return GuessOutcome.TOO_LOW


class GuessingGame:
    """Console guessing game driven by a RandomSource."""

    def __init__(
        self,
        console: Console,
        source: RandomSource,
        options: Optional[GameOptions] = None,
    ):
        self.console = console
        self.source = source
        self.options = options or GameOptions.from_settings()

    def intro(self) -> str:
        opts = self.options
        return (
            f"Let's play a game. I'm thinking of a number between {opts.min_value} "
            f"and {opts.max_value}. You have {opts.max_guesses} tries to guess what it is."
        )

    def play_round(self) -> RoundResult:
        """Play one round and return its result."""
        self.console.print(self.intro())
        secret = self.source.get(self.options.min_value, self.options.max_value)
        result = RoundResult(secret=secret)

        for number in range(1, self.options.max_guesses + 1):
            self.console.prompt(f"Guess #{number}: ")
            guess = self.console.read_int()
            result.guesses.append(guess)

            outcome = evaluate_guess(secret, guess)
            self.console.print(MESSAGES[outcome])
            if outcome is GuessOutcome.CORRECT:
                result.won = True
                break

        if not result.won:
            self.console.print(f"Sorry, you lose. The correct number was {secret}.")

        logger.info("Round finished", won=result.won, guesses=len(result.guesses))
        return result

    def ask_play_again(self) -> bool:
        self.console.prompt("Would you like to play again (y/n)? ")
        return self.console.read_char() == "y"

    def play(self) -> List[RoundResult]:
        """Play rounds until the player declines or input runs out."""
        rounds: List[RoundResult] = []
        try:
            while True:
                rounds.append(self.play_round())
                if not self.ask_play_again():
                    break
        except InputExhausted:
            self.console.print()
            logger.info("Input ended, stopping game", rounds=len(rounds))
        return rounds
