"""
Tests for color blending and aging transforms.
"""

import pytest

from color_time.engine.aging import (
    AgingTransform,
    CallableAging,
    GreyscaleAging,
    IdentityAging,
    resolve_aging,
)
from color_time.engine.blend import blend_colors
from color_time.models.color import Color
from color_time.models.enums import AgingMode


class TestBlendColors:
    """Blend order: upper color is the base, weight is its share."""

    def test_weighted_average(self):
        assert blend_colors("#f00", "#0f0", 0.25) == "#BF4000"

    def test_weight_zero_is_lower(self):
        assert blend_colors("#f00", "#0f0", 0) == "#FF0000"

    def test_weight_one_is_upper(self):
        assert blend_colors("#f00", "#0f0", 1) == "#00FF00"

    def test_same_color(self):
        assert blend_colors("#0f0", "#0f0", 0) == "#00FF00"

    def test_accepts_tuples_and_colors(self):
        assert blend_colors((255, 0, 0), Color.green(), 0.25) == "#BF4000"


class TestGreyscaleAging:
    """Built-in greyscale aging."""

    def test_unconfigured_is_noop(self):
        assert GreyscaleAging().apply("#f00", 0, None, None) == "#FF0000"

    def test_unconfigured_with_age_is_noop(self):
        assert GreyscaleAging().apply("#f00", 7, None, None) == "#FF0000"

    def test_half_age(self):
        assert GreyscaleAging().apply("#f00", 5, 10, 0.5) == "#D31313"

    def test_full_age(self):
        assert GreyscaleAging().apply("#f00", 10, 10, 0.5) == "#A62727"

    def test_zero_age(self):
        assert GreyscaleAging().apply("#f00", 0, 10, 0.5) == "#FF0000"

    def test_full_filter_is_greyscale(self):
        assert GreyscaleAging().apply("#f00", 10, 10, 1) == "#4D4D4D"

    def test_not_clamped_past_max_age(self):
        at_max = Color.parse(GreyscaleAging().apply("#f00", 10, 10, 0.5))
        past_max = Color.parse(GreyscaleAging().apply("#f00", 15, 10, 0.5))
        assert past_max.r < at_max.r

    @pytest.mark.parametrize("max_age,filter_pct", [
        (10, None),
        (None, 0.5),
        ("10", 0.5),
        (10, True),
        (0, 0.5),
        (-5, 0.5),
    ])
    def test_invalid_limits_disable_aging(self, max_age, filter_pct):
        assert GreyscaleAging().apply("#f00", 5, max_age, filter_pct) == "#FF0000"

    def test_missing_elapsed_years(self):
        assert GreyscaleAging().apply("#f00", None, 10, 0.5) == "#FF0000"


class TestAgingTransforms:
    """Identity, callable adapters and name resolution."""

    def test_identity(self):
        assert IdentityAging().apply("#abc", 100, 10, 1) == "#abc"

    def test_callable_adapter(self):
        calls = []

        def sepia(color, elapsed, max_age, filter_pct):
            calls.append((color, elapsed, max_age, filter_pct))
            return "#704214"

        aging = CallableAging(sepia)

        assert aging.apply("#FF0000", 3, 10, 0.5) == "#704214"
        assert calls == [("#FF0000", 3, 10, 0.5)]

    def test_transforms_are_callable(self):
        assert GreyscaleAging()("#f00", 5, 10, 0.5) == "#D31313"

    def test_resolve_names(self):
        assert resolve_aging("greyscale") == GreyscaleAging()
        assert resolve_aging("none") == IdentityAging()
        assert resolve_aging(AgingMode.GREYSCALE) == GreyscaleAging()

    def test_resolve_transform_instance(self):
        aging = GreyscaleAging()
        assert resolve_aging(aging) is aging

    def test_resolve_callable(self):
        def fn(color, *args):
            return color

        resolved = resolve_aging(fn)
        assert isinstance(resolved, CallableAging)
        assert resolved.fn is fn

    @pytest.mark.parametrize("value", ["sepia", 42, None, ["greyscale"]])
    def test_resolve_unknown(self, value):
        assert resolve_aging(value) is None

    def test_custom_subclass(self):
        class Invert(AgingTransform):
            def apply(self, color, elapsed_years, max_age_years, max_age_filter_percentage):
                r, g, b = Color.parse(color).to_rgb()
                return Color(255 - r, 255 - g, 255 - b)

        assert Invert().apply("#f00", 0, None, None) == Color(0, 255, 255)
