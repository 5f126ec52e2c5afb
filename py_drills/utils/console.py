"""
Console input/output for the exercises.

Input is consumed the way a C++ ``std::cin`` reader would see it: values are
whitespace-delimited tokens that may span or share lines, and a whole-line
read skips any leading whitespace first.
"""

import re
import sys
from typing import Optional, TextIO

from ..exceptions import InputError, InputExhausted


# Token shapes accepted by C++ stream extraction of int and double
_INT_TOKEN = re.compile(r"[+-]?\d+")
_FLOAT_TOKEN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def format_number(value: float) -> str:
    """Format a number like a default-configured C++ output stream (%g)."""
    return f"{value:g}"


class Console:
    """Token reader and line writer over a pair of text streams."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._buffer = ""

    def _fill(self) -> None:
        """Make sure the buffer holds at least one non-whitespace character."""
        while not self._buffer.strip():
            line = self.stdin.readline()
            if line == "":
                self._buffer = ""
                raise InputExhausted("Input ended while a value was expected")
            self._buffer = line
        self._buffer = self._buffer.lstrip()

    def prompt(self, text: str) -> None:
        """Write text without a trailing newline."""
        self.stdout.write(text)
        self.stdout.flush()

    def print(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def read_token(self) -> str:
        """Read the next whitespace-delimited token."""
        self._fill()
        parts = self._buffer.split(None, 1)
        self._buffer = parts[1] if len(parts) > 1 else ""
        return parts[0]

    def read_char(self) -> str:
        """Read the next non-whitespace character."""
        self._fill()
        char, self._buffer = self._buffer[0], self._buffer[1:]
        return char

    def read_line(self) -> str:
        """Skip leading whitespace, then read the rest of the line."""
        self._fill()
        line, self._buffer = self._buffer.rstrip("\r\n"), ""
        return line

    def read_int(self) -> int:
        token = self.read_token()
        if not _INT_TOKEN.fullmatch(token):
            raise InputError(token, "an integer")
        return int(token)

    def read_float(self) -> float:
        token = self.read_token()
        if not _FLOAT_TOKEN.fullmatch(token):
            raise InputError(token, "a number")
        return float(token)
