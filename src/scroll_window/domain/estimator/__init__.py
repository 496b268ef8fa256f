"""
Scroll window estimator.

Estimates which slice of a very large list with variable, measured-on-render
row heights should be rendered to fill a viewport, and how tall the
placeholders around it must be to keep the scrollbar stable.
"""

from .driver import estimate_scroll_window, viewport_item_count, virtual_scroll_driver
from .layout import RenderSegment, build_render_plan, rendered_indices
from .models import (
    INITIAL_STATE,
    EstimationResult,
    MeasureItem,
    ScrollProps,
    ScrollState,
)

__all__ = [
    "INITIAL_STATE",
    "EstimationResult",
    "MeasureItem",
    "RenderSegment",
    "ScrollProps",
    "ScrollState",
    "build_render_plan",
    "estimate_scroll_window",
    "rendered_indices",
    "viewport_item_count",
    "virtual_scroll_driver",
]
