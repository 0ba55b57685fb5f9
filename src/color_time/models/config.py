"""Immutable color-time configuration"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from color_time.engine.aging import AgingTransform, IdentityAging
from color_time.errors import ConfigurationError
from color_time.models.anchor import AnchorPoint

EMPTY_ANCHORS_MESSAGE = "Need at least one valid day-color pair"


@dataclass(frozen=True)
class ColorTimeConfig:
    """
    Validated configuration shared by every query of one instance

    Attributes:
        anchors: Day-color anchors in insertion order (at least one)
        max_age_years: Age at which the full filter percentage applies
        max_age_filter_percentage: Degree of desaturation at max age (0.0-1.0)
        aging: Aging transform (identity by default)

    Example:
        config = ColorTimeConfig(
            anchors=[AnchorPoint(0, "#00f"), AnchorPoint(128, "#f00")],
            max_age_years=10,
            max_age_filter_percentage=0.5,
            aging=GreyscaleAging(),
        )
    """
    anchors: Tuple[AnchorPoint, ...]
    max_age_years: Optional[float] = None
    max_age_filter_percentage: Optional[float] = None
    aging: AgingTransform = field(default_factory=IdentityAging)

    def __post_init__(self):
        # Accept any iterable of anchors, store a tuple
        object.__setattr__(self, "anchors", tuple(self.anchors))

        if not self.anchors:
            raise ConfigurationError(EMPTY_ANCHORS_MESSAGE)

        for anchor in self.anchors:
            if not isinstance(anchor, AnchorPoint):
                raise ConfigurationError(f"Expected AnchorPoint, got {type(anchor).__name__}")

        if self.aging is None:
            object.__setattr__(self, "aging", IdentityAging())
        elif not isinstance(self.aging, AgingTransform):
            raise ConfigurationError(f"Expected AgingTransform, got {type(self.aging).__name__}")

    @property
    def days(self) -> Tuple[int, ...]:
        return tuple(anchor.day for anchor in self.anchors)

