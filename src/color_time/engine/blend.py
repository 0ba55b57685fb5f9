"""Color blending between two bounding anchors"""

from typing import Any

from color_time.models.color import Color


def blend_colors(lower_color: Any, upper_color: Any, weight: float) -> str:
    """
    Color `weight` of the way from lower_color to upper_color

    The upper color is the mix base and the lower color is mixed into it,
    with `weight` as the base share: weight 0 gives lower_color, weight 1
    gives upper_color.

    Args:
        lower_color, upper_color: Any value Color.parse accepts
        weight: 0.0-1.0

    Returns:
        Uppercase "#RRGGBB" string

    Example:
        blend_colors("#f00", "#0f0", 0.25)  # "#BF4000"
    """
    base = Color.parse(upper_color)
    other = Color.parse(lower_color)
    return base.mix(other, weight).to_hex()
