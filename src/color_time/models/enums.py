"""
Enums for color_time
"""

from enum import Enum, auto


class AgingMode(Enum):
    """Built-in aging transforms selectable by name"""
    NONE = auto()       # Identity (no aging)
    GREYSCALE = auto()  # Blend toward greyscale by elapsed-year ratio


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration building, palette files
    COLOR = auto()       # Interpolation and blending
    DATE = auto()        # Date parsing, day-of-year
    AGING = auto()       # Aging transforms
    SYSTEM = auto()      # CLI startup, errors
