"""
scroll-window - virtual scroll window estimation for lists whose row heights
are only known once rows are rendered.
"""

from scroll_window.domain.estimator import (
    INITIAL_STATE,
    EstimationResult,
    ScrollProps,
    ScrollState,
    build_render_plan,
    estimate_scroll_window,
    virtual_scroll_driver,
)

__version__ = "0.1.0"

__all__ = [
    "INITIAL_STATE",
    "EstimationResult",
    "ScrollProps",
    "ScrollState",
    "build_render_plan",
    "estimate_scroll_window",
    "virtual_scroll_driver",
]
