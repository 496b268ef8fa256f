"""Pure layout of a render plan onto terminal lines.

One terminal line is one pixel unit: placeholders become blank lines and each
rendered row contributes its wrapped lines.
"""

from typing import Callable

from scroll_window.domain.estimator import ScrollState, build_render_plan


def compose_lines(
    state: ScrollState,
    total_items: int,
    row_lines: Callable[[int], list[str]],
    scroll_top: int,
    viewport_height: int,
    filler: str = "",
) -> list[str]:
    """Lines of the virtual document that fall inside the viewport.

    Args:
        state: Estimator state to lay out
        total_items: Number of rows in the list
        row_lines: Wrapped lines of a row, only called for rendered rows
        scroll_top: First document line shown
        viewport_height: Number of lines shown
        filler: Text used for placeholder and empty lines

    Returns:
        Exactly viewport_height lines
    """
    top = scroll_top
    bottom = scroll_top + viewport_height
    visible: list[str] = []
    y = 0

    for segment in build_render_plan(state, total_items):
        if y >= bottom:
            break
        if segment.kind == "placeholder":
            height = round(segment.height)
            visible.extend(filler for _ in range(max(y, top), min(y + height, bottom)))
            y += height
            continue
        for index in range(segment.start, segment.start + segment.count):
            lines = row_lines(index)
            if y + len(lines) > top:
                visible.extend(lines[max(0, top - y) : bottom - y])
            y += len(lines)
            if y >= bottom:
                break

    visible.extend([filler] * (viewport_height - len(visible)))
    return visible


def content_height(state: ScrollState, natural_height: Callable[[], float]) -> float:
    """Height of the scrollable content.

    A target_height of 0 means the list is rendered in full and the natural
    layout height applies.
    """
    if state.target_height:
        return state.target_height
    return natural_height()


def scrollbar_thumb(
    scroll_top: float, content: float, viewport_height: int
) -> tuple[int, int]:
    """Scrollbar thumb (start row, length) for a track of viewport_height rows.

    Examples:
        >>> scrollbar_thumb(0, content=1000, viewport_height=10)
        (0, 1)
        >>> scrollbar_thumb(990, content=1000, viewport_height=10)
        (9, 1)
        >>> scrollbar_thumb(0, content=5, viewport_height=10)
        (0, 10)
    """
    if content <= viewport_height:
        return 0, viewport_height
    length = max(1, round(viewport_height * viewport_height / content))
    span = viewport_height - length
    start = round(span * min(1.0, scroll_top / (content - viewport_height)))
    return start, length
