"""
ColorTime service - the query object returned by color_time()

Holds one immutable ColorTimeConfig and answers "which color is this date?".
Query flow:

    date args -> day of year + elapsed years
              -> find_bounding_anchors -> weight_between -> blend_colors
              -> aging transform -> "#RRGGBB"
"""

from datetime import datetime
from numbers import Real
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Tuple, Union

from color_time.engine.blend import blend_colors
from color_time.engine.ring import find_bounding_anchors, fold_day, weight_between
from color_time.errors import InvalidArgument
from color_time.managers.config_builder import build_config
from color_time.managers.config_manager import ConfigManager
from color_time.models.color import Color
from color_time.models.config import ColorTimeConfig
from color_time.models.enums import LogCategory
from color_time.utils.dates import parse_date, day_of_year, elapsed_years
from color_time.utils.logger import get_logger

log = get_logger().for_category(LogCategory.COLOR)

Clock = Callable[[], datetime]


def _is_age_argument(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


class ColorTime:
    """
    Callable color-for-date calculator bound to one configuration

    Call with date arguments, optionally followed by a number of elapsed
    aging years:

        ct = color_time({0: '#0000ff', 128: '#ff0000', 250: '#777777'})

        ct()                                # today
        ct("now")                           # today
        ct("Aug 9th, 2015")                 # parsed by dateutil
        ct("09.08.2015", "%d.%m.%Y")        # explicit strptime format
        ct(date(2015, 8, 9), 3)             # aged by 3 years

    Without an explicit age, elapsed years are measured from the date to the
    instance clock ("now") and never go below 0.

    Instances are immutable and safe to share between threads.
    """

    __slots__ = ("_config", "_clock")

    def __init__(self, config: ColorTimeConfig, clock: Optional[Clock] = None):
        """
        Args:
            config: Validated configuration
            clock: Returns the current datetime (defaults to datetime.now)
        """
        if not isinstance(config, ColorTimeConfig):
            raise InvalidArgument(f"Expected ColorTimeConfig, got {type(config).__name__}")
        object.__setattr__(self, "_config", config)
        object.__setattr__(self, "_clock", clock or datetime.now)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # === CONSTRUCTORS ===

    @classmethod
    def from_options(cls, options: Mapping[Any, Any], clock: Optional[Clock] = None) -> 'ColorTime':
        return cls(build_config(options), clock=clock)

    @classmethod
    def from_file(cls, path: Union[str, Path], clock: Optional[Clock] = None) -> 'ColorTime':
        """Load a palette YAML file (see schemas.palette)"""
        return cls(ConfigManager(path).load(), clock=clock)

    @property
    def config(self) -> ColorTimeConfig:
        return self._config

    # === QUERIES ===

    def __call__(self, *args: Any) -> str:
        date_args, aged_years = self._split_arguments(args)

        if len(date_args) > 2:
            raise InvalidArgument(f"Expected at most a date and a format, got {len(date_args)} date arguments")

        now = self._clock()
        when = parse_date(*date_args, now=now)

        if aged_years is None:
            aged_years = max(0.0, elapsed_years(when, now))

        return self.color_for_day(day_of_year(when), aged_years)

    def color_for_date(self, value: Any = None, fmt: Optional[str] = None,
                       aged_years: Optional[float] = None) -> str:
        """Keyword-friendly form of __call__"""
        args: Tuple[Any, ...] = (value,) if fmt is None else (value, fmt)
        if aged_years is not None:
            args += (aged_years,)
        return self(*args)

    def color_for_day(self, day: int, aged_years: float = 0) -> str:
        """
        Color for a 0-indexed day of year

        Args:
            day: Day of year (0-365); day 365 is read as day 0
            aged_years: Elapsed years fed to the aging transform

        Returns:
            Uppercase "#RRGGBB" string
        """
        config = self._config
        day = fold_day(day)

        lower, upper = find_bounding_anchors(config.anchors, day)
        weight = weight_between(lower.day, upper.day, day)
        color = blend_colors(lower.color, upper.color, weight)

        aged = config.aging.apply(
            color,
            aged_years,
            config.max_age_years,
            config.max_age_filter_percentage,
        )
        result = color if aged is None else Color.parse(aged).to_hex()

        log.debug("Interpolated day", day=day, lower=lower.day, upper=upper.day,
                  weight=round(weight, 4), color=color, aged_years=aged_years, result=result)
        return result

    @staticmethod
    def _split_arguments(args: Tuple[Any, ...]) -> Tuple[Tuple[Any, ...], Optional[float]]:
        """A trailing real number is the elapsed aging years, the rest is the date"""
        if args and _is_age_argument(args[-1]):
            return args[:-1], args[-1]
        return args, None

    def __repr__(self) -> str:
        return f"ColorTime(days={self._config.days}, aging={self._config.aging!r})"
