"""
Color model - Immutable RGB color

Wraps the pure conversion functions in utils.colors so the interpolation
engine never touches channel values directly.
"""

from dataclasses import dataclass
from typing import Tuple, Any

from color_time.errors import InvalidArgument
from color_time.utils.colors import (
    hex_to_rgb,
    rgb_to_hex,
    mix_rgb,
    rgb_to_greyscale,
)


@dataclass(frozen=True)
class Color:
    """
    Unified color representation (RGB, 0-255 per channel)

    Examples:
        # Create from hex
        color = Color.from_hex("#f00")

        # Accept whatever a palette holds (hex, tuple, Color)
        color = Color.parse((0, 255, 0))

        # Mix: 25% green, 75% red
        Color.from_hex("#0f0").mix(Color.from_hex("#f00"), 0.25).to_hex()  # "#BF4000"

        # Greyscale
        Color.red().greyscale().to_rgb()  # (77, 77, 77)
    """

    r: int
    g: int
    b: int

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise InvalidArgument(f"RGB channel out of range 0-255: {channel!r}")

    # === CONSTRUCTORS ===

    @classmethod
    def from_hex(cls, value: str) -> 'Color':
        """Create from "#RGB" / "#RRGGBB" (leading '#' optional)"""
        return cls(*hex_to_rgb(value))

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> 'Color':
        return cls(r, g, b)

    @classmethod
    def parse(cls, value: Any) -> 'Color':
        """
        Create from any supported color value

        Args:
            value: Color, hex string, or (r, g, b) tuple/list

        Returns:
            Color object

        Raises:
            InvalidArgument: If value is not a recognised color
        """
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            return cls.from_hex(value)
        if isinstance(value, (tuple, list)) and len(value) == 3:
            return cls.from_rgb(*value)
        raise InvalidArgument(f"Unsupported color value: {value!r}")

    # === RENDERING ===

    def to_rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Uppercase "#RRGGBB" string"""
        return rgb_to_hex(self.r, self.g, self.b)

    # === ADJUSTMENTS ===

    def mix(self, other: 'Color', weight: float) -> 'Color':
        """
        Mix `other` into this color

        Args:
            other: Color blended into this one
            weight: Share of THIS color in the result (0.0-1.0)

        Returns:
            New Color object
        """
        return Color(*mix_rgb(self.to_rgb(), other.to_rgb(), weight))

    def greyscale(self) -> 'Color':
        return Color(*rgb_to_greyscale(self.r, self.g, self.b))

    @staticmethod
    def red() -> 'Color':
        return Color.from_rgb(255, 0, 0)

    @staticmethod
    def green() -> 'Color':
        return Color.from_rgb(0, 255, 0)

    @staticmethod
    def blue() -> 'Color':
        return Color.from_rgb(0, 0, 255)

    # === STRING REPRESENTATION ===

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return f"Color(RGB={self.to_rgb()})"
