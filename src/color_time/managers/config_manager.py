"""
Config Manager

Loads palette YAML files, validates them against the PaletteFile schema and
hands the resulting option bag to the config builder.
"""

from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from color_time.errors import ConfigurationError
from color_time.managers.config_builder import build_config
from color_time.models.config import ColorTimeConfig
from color_time.models.enums import LogCategory
from color_time.schemas.palette import PaletteFile
from color_time.utils.logger import get_logger

log = get_logger().for_category(LogCategory.CONFIG)


class ConfigManager:
    """
    Palette file manager

    Example:
        manager = ConfigManager("samples/palettes/seasons.yaml")
        config = manager.load()

        manager.palette.name   # "Seasons"
        manager.config.days    # (0, 78, 171, 265)
    """

    def __init__(self, palette_path: Union[str, Path]):
        """
        Args:
            palette_path: Path to the palette YAML file
        """
        self.palette_path = Path(palette_path)
        self.data: dict = {}
        self.palette: Optional[PaletteFile] = None
        self.config: Optional[ColorTimeConfig] = None

    def load(self) -> ColorTimeConfig:
        """
        Load, validate and build the configuration

        Returns:
            ColorTimeConfig

        Raises:
            ConfigurationError: File missing/unreadable, invalid YAML,
                schema violation, or no valid day-color pair
        """
        try:
            with open(self.palette_path, "r", encoding="utf-8") as f:
                self.data = yaml.safe_load(f) or {}
        except OSError as ex:
            log.error(f"Cannot read {self.palette_path}", error=str(ex), error_type=type(ex).__name__)
            raise ConfigurationError(f"Cannot read palette file {self.palette_path}: {ex}") from ex
        except yaml.YAMLError as ex:
            log.error(f"Invalid YAML in {self.palette_path}", error=str(ex))
            raise ConfigurationError(f"Invalid YAML in palette file {self.palette_path}: {ex}") from ex

        self.palette = self.parse(self.data, source=str(self.palette_path))
        self.config = build_config(self.palette.to_options())

        log.info(f"Loaded {self.palette_path.name}", palette=self.palette.name or "-",
                 anchors=len(self.config.anchors))
        return self.config

    @staticmethod
    def parse(data: dict, source: str = "<data>") -> PaletteFile:
        """
        Validate raw palette data

        Raises:
            ConfigurationError: If data does not match the PaletteFile schema
        """
        if not isinstance(data, dict):
            raise ConfigurationError(f"Palette {source} must be a mapping, got {type(data).__name__}")

        try:
            return PaletteFile.model_validate(data)
        except ValidationError as ex:
            log.error(f"Palette {source} failed validation", errors=ex.error_count())
            raise ConfigurationError(f"Invalid palette {source}: {ex}") from ex
