"""Tests for scroll offset helper functions."""

from scroll_window.ui.blessed.helpers.scrolling import (
    clamp_scroll_top,
    max_scroll_top,
    scroll_by,
)


class TestMaxScrollTop:
    """Test the scrollable range computation."""

    def test_content_taller_than_viewport(self):
        assert max_scroll_top(1000, 200) == 800

    def test_natural_layout(self):
        """A target height of 0 leaves nothing to scroll."""
        assert max_scroll_top(0, 200) == 0

    def test_content_shorter_than_viewport(self):
        assert max_scroll_top(150, 200) == 0


class TestClampScrollTop:
    """Test clamping after the estimate changes."""

    def test_negative_offset(self):
        assert clamp_scroll_top(-5, 1000, 200) == 0

    def test_beyond_end(self):
        """Offsets past the end snap to the last position."""
        assert clamp_scroll_top(900, 1000, 200) == 800

    def test_in_range_unchanged(self):
        assert clamp_scroll_top(300, 1000, 200) == 300


class TestScrollBy:
    """Test relative scrolling."""

    def test_scroll_down(self):
        assert scroll_by(100, 50, 1000, 200) == 150

    def test_scroll_up_stops_at_top(self):
        assert scroll_by(10, -50, 1000, 200) == 0

    def test_scroll_down_stops_at_end(self):
        assert scroll_by(780, 50, 1000, 200) == 800
