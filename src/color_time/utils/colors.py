"""
Color conversion utilities

Pure functions for hex parsing, channel mixing, greyscale conversion and hex
formatting. All channel values are 0-255; results are rounded half up so that
x.5 always goes to the next integer.
"""

import math
import re
from typing import Sequence, Tuple

from color_time.errors import InvalidArgument

RGB = Tuple[int, int, int]

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# Luma weights used for greyscale conversion (R, G, B), in percent
GREYSCALE_WEIGHTS = (30, 59, 11)


def round_half_up(value: float) -> int:
    """Round to nearest int, ties away from zero for positive values (76.5 -> 77)"""
    return int(math.floor(value + 0.5))


def clamp_channel(value: float) -> int:
    """Round and clamp a channel value into 0-255"""
    return max(0, min(255, round_half_up(value)))


def hex_to_rgb(value: str) -> RGB:
    """
    Convert hex color string to RGB (0-255)

    Accepts 3 or 6 hex digits, with or without leading '#'.

    Args:
        value: Hex string like "#f00", "FF0000" or "#ff0000"

    Returns:
        (r, g, b) tuple with values 0-255

    Raises:
        InvalidArgument: If the string is not a hex color

    Example:
        r, g, b = hex_to_rgb("#f00")     # (255, 0, 0)
        r, g, b = hex_to_rgb("#00A659")  # (0, 166, 89)
    """
    match = _HEX_PATTERN.match(value.strip())
    if not match:
        raise InvalidArgument(f"Not a hex color: {value!r}")

    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)

    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """
    Convert RGB (0-255) to uppercase hex string

    Example:
        rgb_to_hex(191, 64, 0)  # "#BF4000"
    """
    return "#{:02X}{:02X}{:02X}".format(clamp_channel(r), clamp_channel(g), clamp_channel(b))


def mix_rgb(base: Sequence[float], other: Sequence[float], weight: float) -> RGB:
    """
    Mix two RGB colors

    `weight` is the share of `base` in the result; the remainder comes from
    `other`. Uses the alpha-aware weighting of the classic CSS/Sass mix
    (w = 2p - 1), with both alphas fixed at 1 so it reduces to a linear blend.

    Args:
        base: (r, g, b) of the base color
        other: (r, g, b) of the color mixed into it
        weight: Base share, normally 0.0-1.0

    Returns:
        (r, g, b) tuple, rounded half up and clamped to 0-255

    Example:
        mix_rgb((0, 255, 0), (255, 0, 0), 0.25)  # (191, 64, 0)
    """
    w = 2 * weight - 1
    w1 = (w + 1) / 2.0
    w2 = 1 - w1

    return (
        clamp_channel(w1 * base[0] + w2 * other[0]),
        clamp_channel(w1 * base[1] + w2 * other[1]),
        clamp_channel(w1 * base[2] + w2 * other[2]),
    )


def rgb_to_greyscale(r: int, g: int, b: int) -> RGB:
    """
    Convert RGB to its greyscale equivalent

    Luma is 0.3 R + 0.59 G + 0.11 B, computed in integer percent to avoid
    float drift on .5 boundaries.

    Example:
        rgb_to_greyscale(255, 0, 0)  # (77, 77, 77)
    """
    wr, wg, wb = GREYSCALE_WEIGHTS
    grey = clamp_channel((r * wr + g * wg + b * wb) / 100)
    return (grey, grey, grey)
