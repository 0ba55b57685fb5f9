"""
color_time - colors that follow the calendar

Interpolates between day-of-year color anchors on a circular year and
optionally ages the result toward greyscale.

Example:
    from color_time import color_time

    ct = color_time({
        0: '#0000ff',
        128: '#ff0000',
        250: '#777777',
    })

    today = ct('now')
    print(ct('Aug 9th, 2015'))
"""

from typing import Any, Mapping, Optional

from .errors import ColorTimeError, ConfigurationError, InvalidArgument
from .models import AnchorPoint, BoundingPair, Color, AgingMode
from .models.config import ColorTimeConfig
from .engine.aging import AgingTransform, IdentityAging, GreyscaleAging, CallableAging
from .engine.blend import blend_colors
from .engine.ring import find_bounding_anchors, weight_between
from .managers import build_config, ConfigManager
from .services import ColorTime

__version__ = "1.0.0"


def color_time(options: Mapping[Any, Any], clock=None) -> ColorTime:
    """
    Build a color-for-date calculator from an option bag

    Raises:
        ConfigurationError: If options hold no valid day-color pair
    """
    return ColorTime.from_options(options, clock=clock)


__all__ = [
    'color_time',
    'ColorTime',
    'ColorTimeConfig',
    'AnchorPoint',
    'BoundingPair',
    'Color',
    'AgingMode',
    'AgingTransform',
    'IdentityAging',
    'GreyscaleAging',
    'CallableAging',
    'blend_colors',
    'find_bounding_anchors',
    'weight_between',
    'build_config',
    'ConfigManager',
    'ColorTimeError',
    'ConfigurationError',
    'InvalidArgument',
]
