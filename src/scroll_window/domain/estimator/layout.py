"""
Render plan for a ScrollState.

Turns the state fields into the ordered list of blocks a host renders inside
its scroll container: top placeholder, middle items, middle placeholder and
last items. Empty blocks are omitted.
"""

from dataclasses import dataclass
from typing import Literal

from .models import ScrollState

SegmentKind = Literal["placeholder", "items"]


@dataclass(frozen=True)
class RenderSegment:
    """One block of the render plan.

    For "items" segments, start/count are the rendered item indices and height
    is 0 (the rows size themselves). For "placeholder" segments, start/count
    are the items the spacer stands in for and height is its pixel height.
    """

    kind: SegmentKind
    start: int
    count: int
    height: float = 0.0


def build_render_plan(state: ScrollState, total_items: int) -> list[RenderSegment]:
    """Build the ordered render plan for a state.

    Args:
        state: State returned by the estimator
        total_items: Number of items in the list

    Returns:
        Segments in top-to-bottom order
    """
    plan: list[RenderSegment] = []
    last_start = total_items - state.last_item_count

    if state.top_placeholder_height > 0:
        plan.append(
            RenderSegment(
                "placeholder",
                0,
                state.first_middle_item,
                state.top_placeholder_height,
            )
        )

    middle_end = state.first_middle_item
    if state.middle_item_count > 0:
        plan.append(
            RenderSegment("items", state.first_middle_item, state.middle_item_count)
        )
        middle_end += state.middle_item_count

    if state.middle_placeholder_height > 0:
        plan.append(
            RenderSegment(
                "placeholder",
                middle_end,
                max(0, last_start - middle_end),
                state.middle_placeholder_height,
            )
        )

    if state.last_item_count > 0:
        plan.append(RenderSegment("items", last_start, state.last_item_count))

    return plan


def rendered_indices(state: ScrollState, total_items: int) -> list[int]:
    """Indices of every item the host must render for a state."""
    indices: list[int] = []
    for segment in build_render_plan(state, total_items):
        if segment.kind == "items":
            indices.extend(range(segment.start, segment.start + segment.count))
    return indices
