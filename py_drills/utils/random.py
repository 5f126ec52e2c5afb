"""
Random number generation utilities.

This module holds the process-wide default RandomSource for callers that
do not have one injected. Code that can take a RandomSource argument should
prefer that; the default exists for scripts and the command line.
"""

import threading
from typing import Optional

from ..config import settings
from ..core.random_source import DTypeLike, RandomSource

# Global source instance
_source: Optional[RandomSource] = None
_source_lock = threading.Lock()


def get_random_source() -> RandomSource:
    """
    Get the default RandomSource, creating it on first use.

    The source is seeded from ``settings.random_seed`` when one is
    configured, otherwise from the clock and OS entropy.

    Returns:
        RandomSource instance
    """
    global _source
    with _source_lock:
        if _source is None:
            _source = RandomSource(settings.random_seed)
        return _source


def set_random_source(source: RandomSource) -> None:
    """
    Replace the default RandomSource.

    Args:
        source: Source to hand out from now on
    """
    global _source
    with _source_lock:
        _source = source


def reset_random_source() -> None:
    """Drop the default source so the next access creates a fresh one."""
    global _source
    with _source_lock:
        _source = None


def get(min_val, max_val, dtype: Optional[DTypeLike] = None):
    """Draw from ``[min_val, max_val]`` using the default source."""
    return get_random_source().get(min_val, max_val, dtype=dtype)
