"""Unit tests for frame colors."""

from __future__ import annotations

import pytest

from flamecanvas.config import ColorConfig
from flamecanvas.graph import SYSTEM_COLORS, Frame, HslColor, pick_color
from flamecanvas.model import CallFrame, Category, Location


def _frame(graph_id: int, category: Category = Category.USER) -> Frame:
    location = Location(
        id=0,
        call_frame=CallFrame(function_name="f"),
        category=category,
        src=None,
    )
    return Frame(location=location, graph_id=graph_id, self_time=0.0, aggregate_time=0.0)


class TestPickColor:
    """Test deterministic color selection."""

    def test_graph_id_zero(self):
        """A zero hash gives the base hue, saturation and luminance."""
        colors = pick_color(_frame(0))
        assert colors.light == HslColor(40.0, 80.0, 30.0)
        assert colors.dark == HslColor(40.0, 80.0, 23.0)

    def test_hash_bytes(self):
        """Low, middle and high bytes of the hash drive hue, saturation and luminance."""
        colors = pick_color(_frame(1))  # 5381 = 0x001505
        assert colors.light.hue == pytest.approx(40 - 60 * 5 / 255)
        assert colors.light.saturation == pytest.approx(80 + 20 * 21 / 255)
        assert colors.light.luminance == pytest.approx(30.0)

    def test_hash_wraps_at_32_bits(self):
        """Ids differing by 2**32 hash identically."""
        assert pick_color(_frame(2**32)) == pick_color(_frame(0))

    def test_deterministic(self):
        assert pick_color(_frame(1234)) == pick_color(_frame(1234))

    def test_ranges(self):
        """Colors stay within the warm palette."""
        for graph_id in range(200):
            light = pick_color(_frame(graph_id)).light
            assert (light.hue <= 40 or light.hue >= 340)
            assert 80 <= light.saturation <= 100
            assert 30 <= light.luminance <= 50

    def test_fade_reduces_saturation(self):
        normal = pick_color(_frame(7))
        faded = pick_color(_frame(7), fade=True)
        assert faded.light.saturation == pytest.approx(normal.light.saturation - 50)
        assert faded.light.hue == normal.light.hue

    def test_config_offsets(self):
        """Fade and hover offsets come from the color config."""
        config = ColorConfig(fade_saturation=10.0, hover_darken=3.0)
        colors = pick_color(_frame(0), fade=True, config=config)
        assert colors.light.saturation == 70.0
        assert colors.dark.luminance == 27.0

    def test_system_frames_are_gray(self):
        """System frames ignore the hash and the fade."""
        assert pick_color(_frame(3, Category.SYSTEM)) is SYSTEM_COLORS
        assert pick_color(_frame(3, Category.SYSTEM), fade=True) is SYSTEM_COLORS


class TestHslColor:
    """Test color conversions."""

    def test_to_css(self):
        assert HslColor(40.0, 80.0, 30.0).to_css() == "hsl(40, 80%, 30%)"

    def test_system_gray_rgb(self):
        """#999 and #888 grays."""
        assert SYSTEM_COLORS.light.to_rgb() == pytest.approx((0.6, 0.6, 0.6))
        assert SYSTEM_COLORS.dark.to_rgb() == pytest.approx((0x88 / 255,) * 3)

    def test_out_of_range_saturation_clamped(self):
        """Negative saturation from heavy fading converts to a gray."""
        r, g, b = HslColor(10.0, -20.0, 50.0).to_rgb()
        assert r == pytest.approx(g) == pytest.approx(b)
