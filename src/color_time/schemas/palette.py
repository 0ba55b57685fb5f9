"""
Palette schemas - Pydantic models for palette files

A palette file is YAML:

    days:
      0: "#0000ff"
      128: "#ff0000"
      250: "#777777"
    aging:
      mode: greyscale
      max_age_years: 10
      max_age_filter_percentage: 0.5

Colors must be quoted in YAML ('#' starts a comment).
"""

from typing import Dict, Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field, model_validator


ColorField = Union[str, Tuple[int, int, int]]


class AgingSettings(BaseModel):
    """Aging section of a palette file"""
    mode: Literal["none", "greyscale"] = Field(
        "none",
        description="Built-in aging transform"
    )

    max_age_years: Optional[float] = Field(
        None,
        gt=0,
        description="Age in years at which the full filter percentage applies"
    )

    max_age_filter_percentage: Optional[float] = Field(
        None,
        ge=0,
        le=1,
        description="Desaturation at max age, 0.0-1.0"
    )

    @model_validator(mode="after")
    def validate_limits(self):
        if self.mode == "greyscale" and (self.max_age_years is None or self.max_age_filter_percentage is None):
            raise ValueError("greyscale aging requires max_age_years and max_age_filter_percentage")
        return self


class PaletteFile(BaseModel):
    """Complete palette file"""
    name: Optional[str] = Field(None, description="Display name of the palette")

    # Keys stay as written; the config builder decides which are valid days
    days: Dict[Union[int, str], ColorField] = Field(
        ...,
        description="Day of year (0-365) -> color"
    )

    aging: AgingSettings = Field(default_factory=AgingSettings)

    def to_options(self) -> dict:
        """Option bag accepted by build_config"""
        options: dict = dict(self.days)
        if self.aging.mode != "none":
            options['agingFn'] = self.aging.mode
        if self.aging.max_age_years is not None:
            options['maxAgeYears'] = self.aging.max_age_years
        if self.aging.max_age_filter_percentage is not None:
            options['maxAgeFilterPercentage'] = self.aging.max_age_filter_percentage
        return options
