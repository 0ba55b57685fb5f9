"""
Errors raised by color_time

ConfigurationError is raised while building a configuration; InvalidArgument
signals a caller bypassing normal construction (programmer error).
"""


class ColorTimeError(Exception):
    """Base class for all color_time errors"""


class ConfigurationError(ColorTimeError):
    """Configuration could not be built (e.g. no valid day-color pair)"""


class InvalidArgument(ColorTimeError, ValueError):
    """An argument violates a precondition (empty anchor set, bad color, bad date)"""
