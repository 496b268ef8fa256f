"""
Scroll window estimator entry points.

Runs the bottom-anchor sampler, the window locator and the placeholder sizer
in sequence. The function is pure given its inputs: all state that must
survive between calls travels in the returned ScrollState.
"""

import math

from loguru import logger

from .locator import locate_window
from .models import (
    EstimationResult,
    MeasureItem,
    ScrollProps,
    ScrollState,
    _WorkingState,
)
from .sampler import sample_bottom_anchor
from .sizer import size_placeholders


def viewport_item_count(viewport_height: float, min_row_height: float) -> int:
    """Maximum number of rows that could be visible at once.

    Examples:
        >>> viewport_item_count(500, 60)
        9
        >>> viewport_item_count(500, 50)
        10
    """
    return math.ceil(viewport_height / min_row_height)


def estimate_scroll_window(
    props: ScrollProps, old_state: ScrollState, measure: MeasureItem
) -> EstimationResult:
    """Estimate the render window for the current scroll position.

    Args:
        props: Item count, minimum row height, viewport height and scroll offset
        old_state: State returned by the previous call (INITIAL_STATE on first use)
        measure: Returns the rendered height of an item, or 0 if not rendered.
            Non-zero heights must be >= props.min_row_height.

    Returns:
        EstimationResult whose state must be rendered and stored by the host
    """
    count = viewport_item_count(props.viewport_height, props.min_row_height)
    work = _WorkingState.start(props, old_state, count)

    if 2 * count >= props.total_items:
        # Too short to virtualize: render every item, natural layout height
        logger.trace(
            f"Rendering all {props.total_items} items "
            f"(viewport fits up to {count})"
        )
        return EstimationResult(state=work.freeze())

    if count == 0:
        # Zero-height viewport: nothing can be visible
        work.last_item_count = 0
        return EstimationResult(state=work.freeze())

    work.last_item_count = count
    sample_bottom_anchor(work, props.min_row_height, measure)

    first_visible_item = locate_window(work, props.scroll_top, measure)

    missing = size_placeholders(work, first_visible_item, measure)
    if missing is not None:
        logger.debug(
            f"Item {missing} not measured yet; "
            f"deferring refinement at scroll_top={props.scroll_top}"
        )
        return EstimationResult(
            state=work.freeze(), complete=False, missing_item=missing
        )

    return EstimationResult(state=work.freeze())


def virtual_scroll_driver(
    props: ScrollProps, old_state: ScrollState, measure: MeasureItem
) -> ScrollState:
    """Same as estimate_scroll_window, returning only the new state."""
    return estimate_scroll_window(props, old_state, measure).state
