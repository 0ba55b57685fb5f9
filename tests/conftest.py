import pytest
from datetime import datetime
from pathlib import Path

from color_time.models.enums import LogLevel
from color_time.utils.logger import configure_logger

SAMPLES_DIR = Path(__file__).parent.parent / "samples" / "palettes"


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep the logger singleton in its default state between tests."""
    configure_logger(min_level=LogLevel.WARN, use_colors=False)
    yield
    configure_logger(min_level=LogLevel.WARN, use_colors=False)


@pytest.fixture
def fixed_now():
    return datetime(2025, 8, 9)


@pytest.fixture
def clock(fixed_now):
    """Clock returning a fixed 'now' so elapsed years are deterministic."""
    return lambda: fixed_now


@pytest.fixture
def seasons_palette():
    return SAMPLES_DIR / "seasons.yaml"


@pytest.fixture
def write_palette(tmp_path):
    """Write YAML text to a palette file and return its path."""
    def _write(text: str, name: str = "palette.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
