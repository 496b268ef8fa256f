"""
Bottom-anchor sampler.

Measures rows at the end of the list to get a reference average row height
and the scrollable extent of the list expressed in items. The end of the list
is the anchor because it is a fixed reference point whose rows are usually
already rendered (the last window is always part of the render plan).
"""

from loguru import logger

from .models import MeasureItem, _WorkingState


def sample_bottom_anchor(
    work: _WorkingState, min_row_height: float, measure: MeasureItem
) -> None:
    """Walk backward from the last item and update the anchor fields of `work`.

    Sets scroll_height_in_items, last_items_total_height and (ratcheted)
    average_row_height.

    Args:
        work: Working record for the current call, mutated in place
        min_row_height: Height assumed for unmeasured or undersized tail items
        measure: Measurement callback (0 when the item is not rendered)
    """
    total_items = work.total_items
    viewport_height = work.viewport_height

    last_items_height = 0.0
    last_visible_items = 0
    last_item_size = min_row_height

    # Fill one viewport from the bottom. Missing sizes count as the minimum so
    # that last_item_size can be used as a divisor below.
    while last_items_height < viewport_height and last_visible_items < total_items:
        last_item_size = measure(total_items - 1 - last_visible_items)
        if not last_item_size or last_item_size < min_row_height:
            last_item_size = min_row_height
        last_items_height += last_item_size
        last_visible_items += 1

    # Fractional correction: how far the top visible tail item sticks out
    # above the viewport, in units of that item's height.
    work.scroll_height_in_items = (
        total_items
        - last_visible_items
        + (last_items_height - viewport_height) / last_item_size
    )

    # Sample the rest of a full viewport_item_count window
    while last_visible_items < work.viewport_item_count:
        last_items_height += measure(total_items - 1 - last_visible_items)
        last_visible_items += 1

    work.last_items_total_height = last_items_height
    if last_visible_items:
        # Unmeasured rows in this loop add 0; the average stays >= the minimum
        work.ratchet_average(
            max(min_row_height, last_items_height / last_visible_items)
        )

    logger.trace(
        f"Bottom anchor: {last_visible_items} items, {last_items_height}px, "
        f"scroll_height_in_items={work.scroll_height_in_items:.3f}, "
        f"average_row_height={work.average_row_height:.3f}"
    )
