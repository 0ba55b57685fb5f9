"""
Utility functions for color_time
"""

from .colors import (
    hex_to_rgb,
    rgb_to_hex,
    mix_rgb,
    rgb_to_greyscale,
    round_half_up,
)

__all__ = [
    'hex_to_rgb',
    'rgb_to_hex',
    'mix_rgb',
    'rgb_to_greyscale',
    'round_half_up',
]
