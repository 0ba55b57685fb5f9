"""
Tests for the structured category logger.
"""

import io

from color_time.models.enums import LogCategory, LogLevel
from color_time.utils.logger import Logger, get_logger, get_category_logger, configure_logger


def make_logger(min_level=LogLevel.DEBUG):
    stream = io.StringIO()
    return Logger(min_level=min_level, use_colors=False, stream=stream), stream


class TestLoggerOutput:

    def test_main_line_format(self):
        logger, stream = make_logger()

        logger.info(LogCategory.CONFIG, "Loaded palette")

        line = stream.getvalue().splitlines()[0]
        assert line.startswith("[")
        assert "CONFIG" in line
        assert "✓ Loaded palette" in line

    def test_details_tree(self):
        logger, stream = make_logger()

        logger.log(LogCategory.COLOR, "Interpolated day", day=220, result="#619E00")

        lines = stream.getvalue().splitlines()
        assert len(lines) == 3
        assert lines[1].strip() == "├─ day: 220"
        assert lines[2].strip() == "└─ result: #619E00"

    def test_level_filter(self):
        logger, stream = make_logger(min_level=LogLevel.WARN)

        logger.debug(LogCategory.DATE, "hidden")
        logger.info(LogCategory.DATE, "hidden too")
        logger.warn(LogCategory.DATE, "shown")

        output = stream.getvalue()
        assert "hidden" not in output
        assert "⚠ shown" in output

    def test_no_ansi_codes_when_disabled(self):
        logger, stream = make_logger()

        logger.error(LogCategory.SYSTEM, "failed", error="boom")

        assert "\033[" not in stream.getvalue()

    def test_colors_enabled(self):
        stream = io.StringIO()
        logger = Logger(min_level=LogLevel.DEBUG, use_colors=True, stream=stream)

        logger.info(LogCategory.AGING, "aged")

        assert "\033[" in stream.getvalue()


class TestBoundLogger:

    def test_bound_category(self):
        logger, stream = make_logger()
        log = logger.for_category(LogCategory.AGING)

        log.info("Applied greyscale aging", amount=0.25)

        output = stream.getvalue()
        assert "AGING" in output
        assert "└─ amount: 0.25" in output

    def test_override_category(self):
        logger, stream = make_logger()
        log = logger.for_category(LogCategory.AGING)

        log.log("moved", LogLevel.INFO, category=LogCategory.DATE)
        log.with_category(LogCategory.CONFIG).warn("rebound")

        output = stream.getvalue()
        assert "DATE" in output
        assert "CONFIG" in output


class TestSingleton:

    def test_configure_updates_in_place(self):
        stream = io.StringIO()
        logger = get_logger()
        bound = get_category_logger(LogCategory.CONFIG)

        configure_logger(min_level=LogLevel.DEBUG, use_colors=False, stream=stream)
        bound.debug("visible now")

        assert get_logger() is logger
        assert "visible now" in stream.getvalue()
