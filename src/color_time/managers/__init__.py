"""
Managers package - configuration building and palette file loading
"""

from .config_builder import build_config, parse_day_key
from .config_manager import ConfigManager

__all__ = [
    'build_config',
    'parse_day_key',
    'ConfigManager',
]
