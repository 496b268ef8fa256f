"""Pure helper functions for scroll offsets of a virtualized viewport."""


def max_scroll_top(target_height: float, viewport_height: float) -> float:
    """Largest scroll offset the container allows.

    Args:
        target_height: Height of the sizing element (0 means natural layout)
        viewport_height: Height of the viewport

    Returns:
        Maximum scroll offset, never negative

    Examples:
        >>> max_scroll_top(target_height=1000, viewport_height=200)
        800
        >>> max_scroll_top(target_height=0, viewport_height=200)
        0
    """
    return max(0, target_height - viewport_height)


def clamp_scroll_top(
    scroll_top: float, target_height: float, viewport_height: float
) -> float:
    """Clamp a scroll offset to [0, max_scroll_top].

    Useful after the estimate changes target_height under the current offset.

    Examples:
        >>> clamp_scroll_top(-5, target_height=1000, viewport_height=200)
        0
        >>> clamp_scroll_top(900, target_height=1000, viewport_height=200)
        800
        >>> clamp_scroll_top(300, target_height=1000, viewport_height=200)
        300
    """
    return max(0, min(scroll_top, max_scroll_top(target_height, viewport_height)))


def scroll_by(
    scroll_top: float,
    delta: float,
    target_height: float,
    viewport_height: float,
) -> float:
    """Move the scroll offset by delta, staying inside the scrollable range.

    Args:
        scroll_top: Current scroll offset
        delta: Amount to move (negative scrolls up)
        target_height: Height of the sizing element
        viewport_height: Height of the viewport

    Returns:
        New scroll offset

    Examples:
        >>> scroll_by(100, 50, target_height=1000, viewport_height=200)
        150
        >>> scroll_by(780, 50, target_height=1000, viewport_height=200)
        800
    """
    return clamp_scroll_top(scroll_top + delta, target_height, viewport_height)
