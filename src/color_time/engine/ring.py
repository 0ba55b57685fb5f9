"""
Day-of-year ring

Anchors are points on a circular year: the last anchor of the year and the
first one are neighbours. Given a query day, the locator finds the anchors on
either side of it and the weight calculator gives the query's fractional
position between them.
"""

import math
from typing import Sequence

from color_time.errors import InvalidArgument
from color_time.models.anchor import AnchorPoint, BoundingPair

# Query days are taken on a 365-day cycle; Dec 31st of a leap year is day 0.
DAYS_IN_CYCLE = 365

# Day offset applied when an interval wraps past the end of the year.
# Day 364 and day 0 coincide on the ring, so weight_between(344, 20, 0) == 0.5.
RING_LENGTH = 364


def fold_day(day: int) -> int:
    """
    Map a query day onto the 365-day cycle (365 -> 0)

    Example:
        fold_day(220)  # 220
        fold_day(365)  # 0
    """
    return day % DAYS_IN_CYCLE


def _first_by_day(anchors, pick):
    """
    Anchor with the extreme day according to `pick` (min/max)

    Python's min/max return the first extreme element, so among anchors that
    share a day the earliest inserted one wins.
    """
    return pick(anchors, key=lambda anchor: anchor.day)


def find_bounding_anchors(anchors: Sequence[AnchorPoint], day: int) -> BoundingPair:
    """
    Find the two anchors enclosing `day` on the year ring

    lower: greatest anchor day <= day, wrapping to the latest anchor overall
    upper: smallest anchor day > day, wrapping to the earliest anchor overall

    Duplicate days resolve to the first anchor in insertion order.

    Args:
        anchors: Non-empty anchor sequence, any order
        day: 0-indexed day of year

    Returns:
        BoundingPair(lower, upper); both are the same anchor for a single-anchor set

    Raises:
        InvalidArgument: If anchors is empty

    Example:
        anchors = [AnchorPoint(100, "foo"), AnchorPoint(200, "bar"), AnchorPoint(300, "baz")]
        find_bounding_anchors(anchors, 250)  # (200 bar, 300 baz)
        find_bounding_anchors(anchors, 350)  # (300 baz, 100 foo)
    """
    anchors = list(anchors)
    if not anchors:
        raise InvalidArgument("Cannot locate bounding anchors in an empty anchor set")

    before = [anchor for anchor in anchors if anchor.day <= day]
    after = [anchor for anchor in anchors if anchor.day > day]

    lower = _first_by_day(before or anchors, max)
    upper = _first_by_day(after or anchors, min)

    return BoundingPair(lower=lower, upper=upper)


def weight_between(lower_day: int, upper_day: int, day: int) -> float:
    """
    Fractional position of `day` going forward from lower_day to upper_day

    Wrap handling: if the query lies before lower_day (it wrapped past the
    year start) lower_day is moved back one ring length; otherwise if
    upper_day lies before lower_day, upper_day is moved forward one ring length.

    Empty intervals, non-finite values and results outside [0, 1] give
    0, i.e. fully the lower anchor's color.

    Example:
        weight_between(100, 200, 125)  # 0.25
        weight_between(344, 20, 0)     # 0.5
        weight_between(100, 100, 100)  # 0
    """
    if lower_day == upper_day:
        return 0

    if lower_day > day:
        lower_day -= RING_LENGTH
    elif upper_day < lower_day:
        upper_day += RING_LENGTH

    span = upper_day - lower_day
    if span <= 0:
        return 0

    weight = (day - lower_day) / span

    if not math.isfinite(weight) or weight < 0 or weight > 1:
        return 0

    return weight
