"""
Models package - Data models for color_time

ColorTimeConfig lives in models.config and is not re-exported here, since it
depends on the aging transforms in the engine package.
"""

from .enums import AgingMode, LogLevel, LogCategory
from .color import Color
from .anchor import AnchorPoint, BoundingPair

__all__ = [
    'AgingMode',
    'LogLevel',
    'LogCategory',
    'Color',
    'AnchorPoint',
    'BoundingPair',
]
