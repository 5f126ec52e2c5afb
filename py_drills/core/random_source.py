"""
Seeded pseudo-random integer source.

Wraps a NumPy Mersenne Twister (MT19937) generator seeded from a mix of a
high-resolution clock reading and several reads from the OS entropy source,
combined through ``numpy.random.SeedSequence`` so that rapid successive
process starts do not end up with correlated seeds.

Draws are inclusive on both ends. Bounds may be plain Python ints or NumPy
integer scalars; an explicit ``dtype`` converts both bounds to that type
before drawing and rejects bounds that do not fit instead of wrapping them.

Non-goals:
- Cryptographic security
- Reproducing the exact output sequence of any other MT19937 implementation
"""

from __future__ import annotations

import os
import threading
import time
from typing import List, Optional, Sequence, Union

import numpy as np
import structlog

from ..exceptions import BoundConversionError, InvalidRangeError

logger = structlog.get_logger()

# Number of 32-bit words read from the OS entropy source per seed
ENTROPY_WORDS = 7

# Result types a range draw may be converted to (short, int, long long and
# their unsigned forms)
SUPPORTED_DTYPES = tuple(
    np.dtype(t) for t in (np.int16, np.int32, np.int64, np.uint16, np.uint32, np.uint64)
)

_INT64 = np.iinfo(np.int64)
_UINT64 = np.iinfo(np.uint64)

SeedLike = Union[int, Sequence[int], np.random.SeedSequence]
DTypeLike = Union[type, np.dtype, str]


def gather_entropy(words: int = ENTROPY_WORDS) -> List[int]:
    """
    Collect seed material for a fresh generator.

    Returns:
        The current ``perf_counter_ns`` reading followed by ``words`` 32-bit
        values read from ``os.urandom``.
    """
    device = np.frombuffer(os.urandom(4 * words), dtype=np.uint32)
    return [time.perf_counter_ns()] + [int(w) for w in device]


def _is_integer(value) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))


class RandomSource:
    """
    Uniform inclusive range draws from a seeded MT19937 generator.

    Each instance owns its generator; pass it to whatever needs randomness
    instead of reaching for a global. For a deterministic stub in tests,
    construct with an explicit seed.
    """

    def __init__(self, seed: Optional[SeedLike] = None):
        """
        Initialize the generator.

        Args:
            seed: Explicit seed (int, sequence of ints or SeedSequence). When
                omitted the seed is gathered from the clock and OS entropy.
        """
        if isinstance(seed, np.random.SeedSequence):
            self._seed_sequence = seed
        elif seed is None:
            self._seed_sequence = np.random.SeedSequence(gather_entropy())
        else:
            self._seed_sequence = np.random.SeedSequence(seed)

        self._generator = np.random.Generator(np.random.MT19937(self._seed_sequence))
        self._lock = threading.Lock()
        self.call_count = 0

        logger.debug(
            "Random source created",
            seeded=seed is not None,
            entropy=str(self._seed_sequence.entropy),
        )

    @property
    def entropy(self):
        """Seed entropy this source was built from."""
        return self._seed_sequence.entropy

    def spawn(self) -> "RandomSource":
        """Return an independent child source derived from this source's seed."""
        with self._lock:
            child = self._seed_sequence.spawn(1)[0]
        return RandomSource(child)

    def _resolve_type(self, min_val, max_val, dtype: Optional[DTypeLike]):
        for bound in (min_val, max_val):
            if not _is_integer(bound):
                raise TypeError(
                    f"Range bounds must be integers, got {type(bound).__name__}"
                )

        if dtype is None:
            if isinstance(min_val, np.integer) or isinstance(max_val, np.integer):
                if not (
                    isinstance(min_val, np.integer)
                    and isinstance(max_val, np.integer)
                    and min_val.dtype == max_val.dtype
                ):
                    raise TypeError(
                        "min and max must have the same type; pass dtype= to mix types"
                    )
                dtype = min_val.dtype
            else:
                return int

        if dtype is int:
            return int

        result_type = np.dtype(dtype)
        if result_type not in SUPPORTED_DTYPES:
            raise TypeError(f"Unsupported result type: {result_type.name}")
        return result_type

    def _convert(self, value, result_type) -> int:
        value = int(value)
        if result_type is int:
            return value

        info = np.iinfo(result_type)
        if not info.min <= value <= info.max:
            raise BoundConversionError(value, result_type.name)
        return value

    def _draw_type(self, lo: int, hi: int, result_type) -> np.dtype:
        """Pick the NumPy type a draw is made in."""
        if result_type is not int:
            return result_type
        if _INT64.min <= lo and hi <= _INT64.max:
            return np.dtype(np.int64)
        if 0 <= lo and hi <= _UINT64.max:
            return np.dtype(np.uint64)
        bad = lo if lo < _INT64.min or lo > _UINT64.max else hi
        raise BoundConversionError(bad, "int64 or uint64")

    def _bounds(self, min_val, max_val, dtype):
        result_type = self._resolve_type(min_val, max_val, dtype)
        lo = self._convert(min_val, result_type)
        hi = self._convert(max_val, result_type)
        if lo > hi:
            raise InvalidRangeError(lo, hi)
        return result_type, lo, hi, self._draw_type(lo, hi, result_type)

    def get(self, min_val, max_val, dtype: Optional[DTypeLike] = None):
        """
        Draw one integer uniformly from ``[min_val, max_val]``.

        Args:
            min_val: Lower bound (inclusive)
            max_val: Upper bound (inclusive)
            dtype: Result type. When omitted both bounds must share a type and
                the result has that type (Python ints give a Python int).
                When given, both bounds are converted to it first.

        Returns:
            The drawn value, as ``int`` or a NumPy scalar of the result type.

        Raises:
            InvalidRangeError: min_val is greater than max_val
            BoundConversionError: a bound does not fit the result type
            TypeError: a bound is not an integer, or the types cannot be resolved
        """
        result_type, lo, hi, draw_type = self._bounds(min_val, max_val, dtype)

        with self._lock:
            value = self._generator.integers(lo, hi, endpoint=True, dtype=draw_type)
            self.call_count += 1

        if result_type is int:
            return int(value)
        return result_type.type(value)

    def get_many(self, min_val, max_val, size: int, dtype: Optional[DTypeLike] = None) -> np.ndarray:
        """Draw ``size`` integers from ``[min_val, max_val]`` as an array."""
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")

        _, lo, hi, draw_type = self._bounds(min_val, max_val, dtype)

        with self._lock:
            values = self._generator.integers(lo, hi, size=size, endpoint=True, dtype=draw_type)
            self.call_count += size

        return values

    def __repr__(self) -> str:
        return f"RandomSource(draws={self.call_count})"
