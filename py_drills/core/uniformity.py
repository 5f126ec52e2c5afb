"""
Uniformity check for range draws.

Tallies a large number of draws from a RandomSource and summarises how far
the counts stray from a flat distribution.
"""

from dataclasses import dataclass

import numpy as np
import structlog

from ..exceptions import InvalidRangeError
from .random_source import RandomSource

logger = structlog.get_logger()

CHUNK_SIZE = 100_000
MAX_WIDTH = 1_000_000


@dataclass
class Tally:
    """Per-value draw counts over an inclusive range."""

    min_value: int
    max_value: int
    counts: np.ndarray
    out_of_range: int = 0

    @property
    def draws(self) -> int:
        return int(self.counts.sum()) + self.out_of_range

    @property
    def expected(self) -> float:
        return self.draws / len(self.counts)

    @property
    def chi_square(self) -> float:
        """Pearson chi-square statistic against a flat distribution."""
        expected = self.expected
        return float(np.sum((self.counts - expected) ** 2) / expected)

    @property
    def max_relative_deviation(self) -> float:
        """Largest |count - expected| / expected over all values."""
        expected = self.expected
        return float(np.max(np.abs(self.counts - expected)) / expected)


def tally_draws(
    source: RandomSource, min_value: int, max_value: int, draws: int, chunk_size: int = CHUNK_SIZE
) -> Tally:
    """
    Draw ``draws`` values from ``[min_value, max_value]`` and count them.

    Args:
        source: Source to draw from
        min_value: Lower bound (inclusive)
        max_value: Upper bound (inclusive)
        draws: Total number of draws
        chunk_size: Draws made per batch

    Returns:
        Tally of the draws
    """
    if draws < 1:
        raise ValueError(f"draws must be at least 1, got {draws}")
    if min_value > max_value:
        raise InvalidRangeError(min_value, max_value)
    width = max_value - min_value + 1
    if width > MAX_WIDTH:
        raise ValueError(f"Range too wide to tally: {width} values (limit {MAX_WIDTH})")
    counts = np.zeros(width, dtype=np.int64)
    out_of_range = 0

    remaining = draws
    while remaining > 0:
        batch = min(chunk_size, remaining)
        values = source.get_many(min_value, max_value, batch)
        # Offsets are taken in the draw's own dtype so uint64 ranges do not wrap
        lo = values.dtype.type(min_value)
        hi = values.dtype.type(max_value)
        inside = (values >= lo) & (values <= hi)
        out_of_range += int(np.count_nonzero(~inside))
        offsets = (values[inside] - lo).astype(np.int64)
        counts += np.bincount(offsets, minlength=width)
        remaining -= batch

    tally = Tally(min_value, max_value, counts, out_of_range)
    logger.info(
        "Draws tallied",
        draws=draws,
        chi_square=round(tally.chi_square, 3),
        out_of_range=out_of_range,
    )
    return tally
