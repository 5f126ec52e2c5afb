"""
Core exercise logic and the random source.
"""

from .random_source import RandomSource, gather_entropy, SUPPORTED_DTYPES
from .guessing_game import GuessingGame, GameOptions, GuessOutcome, RoundResult, evaluate_guess
from .uniformity import Tally, tally_draws

__all__ = ['RandomSource', 'gather_entropy', 'SUPPORTED_DTYPES',
           'GuessingGame', 'GameOptions', 'GuessOutcome', 'RoundResult', 'evaluate_guess',
           'Tally', 'tally_draws']
