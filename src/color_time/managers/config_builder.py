"""
Config Builder - Turns an option bag into a ColorTimeConfig

Processes option data (does NOT load files - see ConfigManager).

Option keys:
    <day>                   Day of year 0-365 (int, or its exact decimal string) -> color
    maxAgeYears             Age in years at which the full filter applies
    maxAgeFilterPercentage  Desaturation at max age (0.0-1.0)
    agingFn                 "greyscale", an AgingTransform, or a callable

snake_case spellings of the reserved keys are accepted as well.
"""

from typing import Any, Mapping, Optional

from color_time.engine.aging import AgingTransform, IdentityAging, resolve_aging
from color_time.errors import ConfigurationError
from color_time.models.anchor import AnchorPoint, is_valid_day
from color_time.models.config import ColorTimeConfig, EMPTY_ANCHORS_MESSAGE
from color_time.models.enums import LogCategory
from color_time.utils.logger import get_logger

log = get_logger().for_category(LogCategory.CONFIG)

RESERVED_KEYS = {
    'maxAgeYears': 'max_age_years',
    'max_age_years': 'max_age_years',
    'maxAgeFilterPercentage': 'max_age_filter_percentage',
    'max_age_filter_percentage': 'max_age_filter_percentage',
    'agingFn': 'aging',
    'aging_fn': 'aging',
}


def parse_day_key(key: Any) -> Optional[int]:
    """
    Parse an option key as a day of year

    Strings must round-trip exactly through int(), so "05", " 5", "+5" and
    "5_0" are rejected.

    Returns:
        Day (0-365) or None if the key is not a valid day
    """
    if isinstance(key, bool):
        return None

    if isinstance(key, int):
        day = key
    elif isinstance(key, str):
        try:
            day = int(key)
        except ValueError:
            return None
        if str(day) != key:
            return None
    else:
        return None

    return day if is_valid_day(day) else None


def build_config(options: Mapping[Any, Any]) -> ColorTimeConfig:
    """
    Build an immutable config from an unordered option bag

    Every key is processed before checking that at least one anchor exists.

    Args:
        options: Mapping of day keys and reserved keys

    Returns:
        ColorTimeConfig

    Raises:
        ConfigurationError: If no valid day-color pair was found

    Example:
        config = build_config({
            0: '#0000ff',
            '128': '#ff0000',
            'agingFn': 'greyscale',
            'maxAgeYears': 10,
            'maxAgeFilterPercentage': 0.5,
        })
    """
    if not isinstance(options, Mapping):
        raise ConfigurationError(f"Options must be a mapping, got {type(options).__name__}")

    anchors = []
    settings = {
        'max_age_years': None,
        'max_age_filter_percentage': None,
        'aging': None,
    }

    for key, value in options.items():
        day = parse_day_key(key)
        if day is not None:
            anchors.append(AnchorPoint(day=day, color=value))
            continue

        field_name = RESERVED_KEYS.get(key) if isinstance(key, str) else None
        if field_name is None:
            log.debug("Ignored option key", key=repr(key), reason="not a day of year or reserved key")
            continue

        if field_name == 'aging':
            aging = resolve_aging(value)
            if aging is None:
                log.debug("Ignored aging function", value=repr(value))
            settings['aging'] = aging or settings['aging']
        else:
            settings[field_name] = value

    if not anchors:
        log.error(EMPTY_ANCHORS_MESSAGE, keys=str(list(options.keys())[:10]))
        raise ConfigurationError(EMPTY_ANCHORS_MESSAGE)

    aging: AgingTransform = settings['aging'] or IdentityAging()

    config = ColorTimeConfig(
        anchors=tuple(anchors),
        max_age_years=settings['max_age_years'],
        max_age_filter_percentage=settings['max_age_filter_percentage'],
        aging=aging,
    )

    log.debug(f"Built config with {len(anchors)} anchors", days=str(config.days), aging=repr(aging))
    return config
