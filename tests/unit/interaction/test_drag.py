"""Unit tests for drag state handling."""

from __future__ import annotations

import pytest

from flamecanvas.interaction import LockBound, drag_to, is_click, start_handle_drag, start_pan
from flamecanvas.viewport import Bounds


ZOOMED = Bounds(min_x=0.25, max_x=0.75, y=0.0, level=1)


class TestPan:
    """Test grabbing the graph body."""

    def test_start(self):
        drag = start_pan(ZOOMED, x=400, y=60, timestamp=10, canvas_width=800)
        assert drag.is_pan
        assert drag.lock == LockBound.NONE
        assert drag.x_per_pixel == pytest.approx(0.5 / 800)

    def test_content_follows_pointer(self):
        """Dragging left reveals later time."""
        drag = start_pan(ZOOMED, x=400, y=60, timestamp=0, canvas_width=800)
        bounds = drag_to(drag, x=250, y=60, max_y=100, viewport_height=200)
        assert bounds.min_x == pytest.approx(0.34375)
        assert bounds.max_x == pytest.approx(0.84375)
        assert bounds.level == 1

    def test_window_clamped_to_timeline(self):
        """Panning preserves the window width and stays inside [0, 1]."""
        drag = start_pan(ZOOMED, x=400, y=60, timestamp=0, canvas_width=800)
        right = drag_to(drag, x=-5000, y=60, max_y=100, viewport_height=200)
        left = drag_to(drag, x=5000, y=60, max_y=100, viewport_height=200)
        assert (right.min_x, right.max_x) == pytest.approx((0.5, 1.0))
        assert (left.min_x, left.max_x) == pytest.approx((0.0, 0.5))

    def test_full_window_cannot_pan(self):
        drag = start_pan(Bounds(), x=400, y=60, timestamp=0, canvas_width=800)
        bounds = drag_to(drag, x=100, y=60, max_y=100, viewport_height=200)
        assert (bounds.min_x, bounds.max_x) == (0.0, 1.0)

    def test_vertical_scroll(self):
        """Dragging up scrolls down, limited by the content height."""
        drag = start_pan(Bounds(), x=10, y=100, timestamp=0, canvas_width=800)
        assert drag_to(drag, x=10, y=80, max_y=102, viewport_height=50).y == 20
        assert drag_to(drag, x=10, y=40, max_y=102, viewport_height=50).y == 52
        assert drag_to(drag, x=10, y=300, max_y=102, viewport_height=50).y == 0


class TestHandleDrag:
    """Test dragging the timeline handle and its bookends."""

    def test_y_always_locked(self):
        drag = start_handle_drag(ZOOMED, 200, 5, 0, 800, LockBound.NONE)
        assert drag.lock & LockBound.Y
        assert not drag.is_pan
        assert drag.x_per_pixel == pytest.approx(-1 / 800)
        bounds = drag_to(drag, x=200, y=500, max_y=1000, viewport_height=100)
        assert bounds.y == 0.0

    def test_body_moves_window_with_pointer(self):
        drag = start_handle_drag(ZOOMED, 200, 5, 0, 800, LockBound.NONE)
        bounds = drag_to(drag, x=280, y=5, max_y=100, viewport_height=100)
        assert (bounds.min_x, bounds.max_x) == pytest.approx((0.35, 0.85))

    def test_left_bookend(self):
        """Locking max_x moves only the left edge."""
        drag = start_handle_drag(ZOOMED, 200, 5, 0, 800, LockBound.MAX_X)
        bounds = drag_to(drag, x=300, y=5, max_y=100, viewport_height=100)
        assert (bounds.min_x, bounds.max_x) == pytest.approx((0.375, 0.75))

    def test_left_bookend_keeps_min_window(self):
        drag = start_handle_drag(ZOOMED, 200, 5, 0, 800, LockBound.MAX_X)
        bounds = drag_to(drag, x=5000, y=5, max_y=100, viewport_height=100, min_window=0.005)
        assert bounds.min_x == pytest.approx(0.745)
        assert bounds.max_x == 0.75

    def test_right_bookend(self):
        """Locking min_x moves only the right edge."""
        drag = start_handle_drag(ZOOMED, 600, 5, 0, 800, LockBound.MIN_X)
        bounds = drag_to(drag, x=700, y=5, max_y=100, viewport_height=100)
        assert (bounds.min_x, bounds.max_x) == pytest.approx((0.25, 0.875))

    def test_right_bookend_limits(self):
        drag = start_handle_drag(ZOOMED, 600, 5, 0, 800, LockBound.MIN_X)
        shrunk = drag_to(drag, x=-5000, y=5, max_y=100, viewport_height=100)
        grown = drag_to(drag, x=5000, y=5, max_y=100, viewport_height=100)
        assert shrunk.max_x == pytest.approx(0.255)
        assert grown.max_x == 1.0


class TestIsClick:
    """Test click detection on release."""

    @pytest.fixture
    def drag(self):
        return start_pan(Bounds(), x=100, y=100, timestamp=1000, canvas_width=800)

    def test_short_small_release_is_click(self, drag):
        assert is_click(drag, x=105, y=98, timestamp=1200)

    def test_slow_release_is_not_click(self, drag):
        assert not is_click(drag, x=100, y=100, timestamp=1500)

    def test_far_release_is_not_click(self, drag):
        assert not is_click(drag, x=250, y=100, timestamp=1100)
        assert not is_click(drag, x=100, y=0, timestamp=1100)

    def test_custom_thresholds(self, drag):
        assert not is_click(drag, x=105, y=100, timestamp=1100, max_ms=50)
        assert not is_click(drag, x=105, y=100, timestamp=1100, max_px=5)
