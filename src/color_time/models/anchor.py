"""Anchor domain models"""

from dataclasses import dataclass
from typing import Any

from color_time.errors import InvalidArgument

# Day keys are accepted in [0, DAYS_IN_LEAP_YEAR)
DAYS_IN_LEAP_YEAR = 366


def is_valid_day(day: Any) -> bool:
    """True for an int (not bool) in [0, 366)"""
    return isinstance(day, int) and not isinstance(day, bool) and 0 <= day < DAYS_IN_LEAP_YEAR


@dataclass(frozen=True)
class AnchorPoint:
    """
    Fixed point on the annual cycle where the color is explicitly defined

    `color` is kept as supplied (hex string, tuple or Color) and is only
    parsed when blended.
    """
    day: int
    color: Any

    def __post_init__(self):
        if not is_valid_day(self.day):
            raise InvalidArgument(f"Anchor day must be an integer in [0, {DAYS_IN_LEAP_YEAR}), got {self.day!r}")


@dataclass(frozen=True)
class BoundingPair:
    """The two anchors enclosing a query day, going forward from lower to upper"""
    lower: AnchorPoint
    upper: AnchorPoint

    def __iter__(self):
        return iter((self.lower, self.upper))
