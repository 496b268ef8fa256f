"""
Placeholder sizer.

Given the first visible item, decides between the tail-adjacent regime (one
placeholder, everything from the first visible item to the end is rendered)
and the two-placeholder regime (a middle window near the scroll position plus
the last window), then sizes the placeholders from real measurements.

Both regimes stop at the first unmeasured item they need: the working record
then holds exactly what was computed before that lookup.
"""

from typing import Optional

from .models import MeasureItem, _WorkingState


def is_tail_adjacent(first_visible_item: int, work: _WorkingState) -> bool:
    """Whether the middle window would touch or overlap the last window."""
    count = work.viewport_item_count
    return first_visible_item + count >= work.total_items - count


def _sum_measured(
    start: int, count: int, measure: MeasureItem
) -> tuple[float, Optional[int]]:
    """Sum measured heights of `count` items from `start`.

    Returns:
        (sum, None) when all are measured, else (partial sum, first missing index)
    """
    total = 0.0
    for index in range(start, start + count):
        item_size = measure(index)
        if not item_size:
            return total, index
        total += item_size
    return total, None


def size_placeholders(
    work: _WorkingState, first_visible_item: int, measure: MeasureItem
) -> Optional[int]:
    """Fill the render window and placeholder fields of `work`.

    Args:
        work: Working record after window location, mutated in place
        first_visible_item: Index returned by the window locator
        measure: Measurement callback (0 when the item is not rendered)

    Returns:
        None when the estimate was fully refined, else the index of the
        first unmeasured item that stopped refinement
    """
    work.first_middle_item = first_visible_item

    if is_tail_adjacent(first_visible_item, work):
        # Only one placeholder is required
        work.last_item_count = work.total_items - first_visible_item
        count = max(0, work.total_items - work.viewport_item_count - first_visible_item)
        middle_sum, missing = _sum_measured(first_visible_item, count, measure)
        if missing is not None:
            return missing
        work.ratchet_average(
            (middle_sum + work.last_items_total_height)
            / (count + work.viewport_item_count)
        )
        return None

    work.middle_item_count = work.viewport_item_count
    middle_sum, missing = _sum_measured(
        first_visible_item, work.middle_item_count, measure
    )
    if missing is not None:
        return missing

    work.middle_placeholder_height = max(
        0.0,
        work.target_height
        - middle_sum
        - work.last_items_total_height
        - work.top_placeholder_height,
    )
    work.ratchet_average(
        (middle_sum + work.last_items_total_height)
        / (work.middle_item_count + work.viewport_item_count)
    )
    return None
