"""
Ball drop simulation.

A ball is dropped from a tower with no initial velocity. Its height after
``t`` seconds is ``start - g * t^2 / 2``, never going below the ground.
"""

from dataclasses import dataclass
from typing import List, Optional

import numpy as np
import structlog

from ..config import settings
from ..utils.console import Console, format_number

logger = structlog.get_logger()

GRAVITY = 9.8  # m/s^2


@dataclass
class DropOptions:
    """Ball drop parameters."""

    gravity: float = GRAVITY
    seconds: int = 6  # Report heights for t = 0 .. seconds - 1

    @classmethod
    def from_settings(cls) -> "DropOptions":
        return cls(gravity=settings.gravity, seconds=settings.drop_seconds)


def height_at(start_height: float, seconds: float, gravity: float = GRAVITY) -> float:
    """Height of the ball above the ground after ``seconds``."""
    fallen = gravity * seconds * seconds / 2
    if start_height - fallen < 0:
        return 0.0
    return start_height - fallen


def heights(start_height: float, options: Optional[DropOptions] = None) -> np.ndarray:
    """Heights at each whole second from 0 up to ``options.seconds - 1``."""
    options = options or DropOptions()
    t = np.arange(options.seconds, dtype=np.float64)
    return np.maximum(start_height - options.gravity * t * t / 2, 0.0)


def describe(second: int, height: float) -> str:
    if height == 0:
        return f"At {second} seconds, the ball is on the ground."
    return f"At {second} seconds, the ball is at height: {format_number(height)} meters"


def run(console: Console, options: Optional[DropOptions] = None) -> List[float]:
    """Ask for the tower height and print the ball's height each second."""
    options = options or DropOptions.from_settings()

    console.prompt("Enter the height of the tower in meters: ")
    start = console.read_float()

    result = [float(h) for h in heights(start, options)]
    for second, height in enumerate(result):
        console.print(describe(second, height))

    logger.debug("Ball drop simulated", start=start, seconds=options.seconds)
    return result
