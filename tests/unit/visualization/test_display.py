"""Unit tests for tooltip, location and timeline text helpers."""

from __future__ import annotations

import pytest

from flamecanvas.display import (
    file_name,
    format_ms,
    format_significant,
    location_text,
    timeline_ticks,
    tooltip_content,
    tooltip_placement,
)
from flamecanvas.graph import build_boxes, build_columns
from flamecanvas.model import CallFrame, Location, SourceLocation
from flamecanvas.viewport import Bounds, CanvasSize


@pytest.fixture
def wide_boxes(wide_model):
    return build_boxes(build_columns(wide_model)).boxes


class TestFormatting:
    def test_format_ms(self):
        assert format_ms(1500) == "1.50ms"
        assert format_ms(0) == "0.00ms"
        assert format_ms(1_234_567) == "1,234.57ms"

    @pytest.mark.parametrize(
        "value,expected",
        [(0, "0.00"), (1.5, "1.50"), (12.345, "12.3"), (123.4, "123"), (12345, "12,300")],
    )
    def test_format_significant(self, value, expected):
        assert format_significant(value) == expected


class TestLocationText:
    """Test the human-readable location label."""

    def test_native_frame(self):
        location = Location(id=0, call_frame=CallFrame(function_name="(gc)"))
        assert location_text(location) is None

    def test_url_only(self):
        frame = CallFrame(function_name="f", url="http://host/app.js", line_number=3, column_number=7)
        assert location_text(Location(id=0, call_frame=frame)) == "http://host/app.js:3:7"

    def test_relative_path_preferred(self):
        location = Location(
            id=0,
            call_frame=CallFrame(function_name="f", url="file:///w/src/a.py"),
            src=SourceLocation(path="/w/src/a.py", line_number=12, relative_path="src/a.py"),
        )
        assert location_text(location) == "src/a.py:12"

    def test_absolute_path(self, wide_model):
        assert location_text(wide_model.locations[5]) == "/src/run.py:6"

    @pytest.mark.parametrize(
        "label,expected",
        [("/src/run.py:6", "run.py:6"), ("C:\\src\\a.py:3", "a.py:3"), ("a.py:1", "a.py:1")],
    )
    def test_file_name(self, label, expected):
        assert file_name(label) == expected


class TestTooltip:
    """Test tooltip content and placement."""

    def test_content_with_source(self, wide_boxes):
        step = next(b for b in wide_boxes if b.text == "step")
        content = tooltip_content(step, keyboard=True)
        assert content.function == "step"
        assert content.label == "/src/run.py:6"
        assert content.file == "run.py:6"
        assert content.self_time == "0.90ms"
        assert content.aggregate_time == "0.20ms"
        assert content.hint == "Ctrl+Enter to jump to file"

    def test_content_without_source(self, wide_boxes):
        read = next(b for b in wide_boxes if b.text == "read")
        content = tooltip_content(read)
        assert content.label is None
        assert content.file is None
        assert content.hint is None

    def test_placed_below(self, wide_boxes):
        step = next(b for b in wide_boxes if b.text == "step")
        placement = tooltip_placement(step, Bounds(), CanvasSize(800, 200))
        assert placement.top == 92
        assert placement.bottom is None
        assert placement.left == pytest.approx(800 * 1500 / 4600 + 10)

    def test_placed_above_near_bottom(self, wide_boxes):
        gc = next(b for b in wide_boxes if b.text == "gc")
        placement = tooltip_placement(gc, Bounds(), CanvasSize(800, 120))
        assert placement.top is None
        assert placement.bottom == 92

    def test_left_limited_by_width(self, wide_boxes):
        last = next(b for b in reversed(wide_boxes) if b.text == "step")
        placement = tooltip_placement(last, Bounds(), CanvasSize(800, 200))
        assert placement.left == 400


class TestTimelineTicks:
    """Test timeline labels."""

    def test_full_window(self):
        ticks = timeline_ticks(4600, Bounds(), 800)
        assert [t.x for t in ticks] == [200, 400, 600, 800]
        assert [t.label for t in ticks] == ["1.15ms", "2.30ms", "3.45ms", "4.60ms"]

    def test_zoomed_window(self):
        ticks = timeline_ticks(10_000, Bounds(0.5, 1.0), 400)
        assert [t.label for t in ticks] == ["7.50ms", "10.0ms"]

    def test_narrow_canvas(self):
        assert timeline_ticks(4600, Bounds(), 50) == []
