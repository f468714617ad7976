"""Command-line argument validation for the dining simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

INT_MAX = 2147483647
_WHITESPACE = " \t\n\v\f\r"


class ParseError(ValueError):
    """Raised when an argument is not a valid non-negative integer."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; all times are in milliseconds."""

    num_philos: int
    time_die: int
    time_eat: int
    time_sleep: int
    num_eat: Optional[int] = None


def is_digit(char: str) -> bool:
    """Return True if ``char`` is a single ASCII decimal digit."""
    return len(char) == 1 and "0" <= char <= "9"


def parse_int(text: str) -> int:
    """Parse a non-negative decimal integer that fits in a signed 32-bit int.

    Leading whitespace is skipped; signs, trailing characters and overflow
    are rejected.
    """
    body = text.lstrip(_WHITESPACE)
    if not body:
        raise ParseError(f"not a number: {text!r}")
    if body[0] == "-":
        raise ParseError(f"negative value: {text!r}")
    if not is_digit(body[0]):
        raise ParseError(f"not a number: {text!r}")
    value = 0
    rest = body
    while rest and is_digit(rest[0]):
        digit = ord(rest[0]) - ord("0")
        if value > (INT_MAX - digit) // 10:
            raise ParseError(f"value out of range: {text!r}")
        value = value * 10 + digit
        rest = rest[1:]
    if rest:
        raise ParseError(f"trailing characters in: {text!r}")
    return value


def parse_args(args: Sequence[str]) -> Settings:
    """Build :class:`Settings` from four or five positional arguments."""
    if len(args) not in (4, 5):
        raise ParseError("expected 4 or 5 arguments")
    num_philos, time_die, time_eat, time_sleep = (parse_int(a) for a in args[:4])
    num_eat = parse_int(args[4]) if len(args) == 5 else None
    return Settings(num_philos, time_die, time_eat, time_sleep, num_eat)