"""
Schemas package - Pydantic models for palette files
"""

from .palette import AgingSettings, PaletteFile

__all__ = [
    'AgingSettings',
    'PaletteFile',
]
