"""Window locator: maps the pixel scroll position to an item index."""

import math

from .models import MeasureItem, _WorkingState


def locate_window(
    work: _WorkingState, scroll_top: float, measure: MeasureItem
) -> int:
    """Set target_height and top_placeholder_height on `work`.

    The average row height converts pixels into items, so the scrollbar
    fraction maps linearly onto the estimated extent in items.

    Args:
        work: Working record after bottom-anchor sampling, mutated in place
        scroll_top: Current scroll offset in pixels
        measure: Measurement callback (0 when the item is not rendered)

    Returns:
        Index of the first visible item
    """
    work.target_height = (
        work.average_row_height * work.scroll_height_in_items + work.viewport_height
    )

    scrollable = work.target_height - work.viewport_height
    scroll_fraction = scroll_top / scrollable if scrollable > 0 else 0.0
    if scroll_fraction > 1:
        # Content is taller than estimated; the average catches up once more
        # rows have been measured.
        scroll_fraction = 1.0

    first_visible_float = scroll_fraction * work.scroll_height_in_items
    first_visible_item = math.floor(first_visible_float)
    offset_fraction = first_visible_float - first_visible_item

    first_visible_height = measure(first_visible_item) or work.average_row_height
    work.top_placeholder_height = max(
        0.0, scroll_top - first_visible_height * offset_fraction
    )
    return first_visible_item
