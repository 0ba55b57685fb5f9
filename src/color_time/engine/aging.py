"""
Aging transforms

An aging transform further modifies an interpolated color based on elapsed
years, independent of the day-of-year position.

Implementations:
- IdentityAging: no aging (default)
- GreyscaleAging: blend toward the greyscale version of the color
- CallableAging: adapter for a plain function with the same signature
"""

from abc import ABC, abstractmethod
from numbers import Real
from typing import Any, Callable, Optional

from color_time.models.color import Color
from color_time.models.enums import AgingMode, LogCategory
from color_time.utils.logger import get_logger

log = get_logger().for_category(LogCategory.AGING)


def is_number(value: Any) -> bool:
    """Real numbers only; bool is not a number here"""
    return isinstance(value, Real) and not isinstance(value, bool)


class AgingTransform(ABC):
    """
    Capability interface for aging transforms

    apply(color, elapsed_years, max_age_years, max_age_filter_percentage) -> color
    """

    mode: Optional[AgingMode] = None

    @abstractmethod
    def apply(self, color: Any, elapsed_years: float,
              max_age_years: Optional[float], max_age_filter_percentage: Optional[float]) -> Any:
        ...

    def __call__(self, color, elapsed_years, max_age_years=None, max_age_filter_percentage=None):
        return self.apply(color, elapsed_years, max_age_years, max_age_filter_percentage)


class IdentityAging(AgingTransform):
    """Returns the color unchanged"""

    mode = AgingMode.NONE

    def apply(self, color, elapsed_years, max_age_years, max_age_filter_percentage):
        return color

    def __eq__(self, other) -> bool:
        return type(other) is IdentityAging

    def __hash__(self) -> int:
        return hash(IdentityAging)

    def __repr__(self) -> str:
        return "IdentityAging()"


class GreyscaleAging(AgingTransform):
    """
    Desaturate by elapsed-year ratio

    amount = (elapsed_years / max_age_years) * max_age_filter_percentage

    At amount 0 the color is unchanged, at amount 1 it is fully greyscale.
    The ratio is not clamped: ages past max_age_years desaturate further than
    the configured filter level.

    Example:
        GreyscaleAging().apply("#f00", 5, 10, 0.5)   # "#D31313"
        GreyscaleAging().apply("#f00", 10, 10, 0.5)  # "#A62727"
    """

    mode = AgingMode.GREYSCALE

    def apply(self, color, elapsed_years, max_age_years, max_age_filter_percentage) -> str:
        original = Color.parse(color)

        if not (is_number(max_age_years) and is_number(max_age_filter_percentage)) or max_age_years <= 0:
            return original.to_hex()

        age_ratio = (elapsed_years or 0) / max_age_years
        amount = age_ratio * max_age_filter_percentage

        aged = original.greyscale().mix(original, amount)
        log.debug("Applied greyscale aging", elapsed_years=elapsed_years, amount=round(amount, 4),
                  before=original.to_hex(), after=aged.to_hex())
        return aged.to_hex()

    def __eq__(self, other) -> bool:
        return type(other) is GreyscaleAging

    def __hash__(self) -> int:
        return hash(GreyscaleAging)

    def __repr__(self) -> str:
        return "GreyscaleAging()"


class CallableAging(AgingTransform):
    """Adapts a plain function (color, elapsed, max_age, filter) -> color"""

    def __init__(self, fn: Callable[..., Any]):
        self.fn = fn

    def apply(self, color, elapsed_years, max_age_years, max_age_filter_percentage):
        return self.fn(color, elapsed_years, max_age_years, max_age_filter_percentage)

    def __eq__(self, other) -> bool:
        return isinstance(other, CallableAging) and other.fn == self.fn

    def __hash__(self) -> int:
        return hash(self.fn)

    def __repr__(self) -> str:
        return f"CallableAging({getattr(self.fn, '__name__', self.fn)!r})"


BUILTIN_AGING = {
    AgingMode.NONE: IdentityAging,
    AgingMode.GREYSCALE: GreyscaleAging,
}


def resolve_aging(value: Any) -> Optional[AgingTransform]:
    """
    Resolve an `agingFn` option value into a transform

    Args:
        value: "greyscale" / "none" (case-insensitive), an AgingMode,
               an AgingTransform, or any callable

    Returns:
        AgingTransform, or None if the value is not recognised
    """
    if isinstance(value, AgingTransform):
        return value
    if isinstance(value, AgingMode):
        return BUILTIN_AGING[value]()
    if isinstance(value, str):
        try:
            return BUILTIN_AGING[AgingMode[value.strip().upper()]]()
        except KeyError:
            return None
    if callable(value):
        return CallableAging(value)
    return None
