"""Read three integers and echo them back."""

from typing import Tuple

from ..utils.console import Console


def format_numbers(x: int, y: int, z: int) -> str:
    return f"You entered {x}, {y}, and {z}."


def run(console: Console) -> Tuple[int, int, int]:
    console.prompt("Enter three numbers: ")
    x = console.read_int()
    y = console.read_int()
    z = console.read_int()
    console.print(format_numbers(x, y, z))
    return x, y, z
