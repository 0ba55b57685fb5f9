"""
Services package - query objects
"""

from .color_time_service import ColorTime

__all__ = [
    'ColorTime',
]
