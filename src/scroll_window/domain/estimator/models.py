"""
Scroll window estimator models.

Contains the per-call input, the state record persisted by the host between
calls, and the tagged result returned by the estimator.
"""

from dataclasses import dataclass
from typing import Callable, Optional

# Returns the rendered height of an item, or 0 if it is not currently rendered
MeasureItem = Callable[[int], float]


@dataclass(frozen=True)
class ScrollProps:
    """Per-call estimation input.

    Raises:
        ValueError: If any value breaks the host contract
    """

    total_items: int
    min_row_height: float
    viewport_height: float
    scroll_top: float

    def __post_init__(self) -> None:
        if self.total_items < 0:
            raise ValueError(f"total_items must be >= 0, got {self.total_items}")
        if self.min_row_height <= 0:
            raise ValueError(
                f"min_row_height must be positive, got {self.min_row_height}"
            )
        if self.viewport_height < 0:
            raise ValueError(
                f"viewport_height must be >= 0, got {self.viewport_height}"
            )
        if self.scroll_top < 0:
            raise ValueError(f"scroll_top must be >= 0, got {self.scroll_top}")


@dataclass(frozen=True)
class ScrollState:
    """Estimation state threaded through successive calls by the host.

    The host stores each returned state verbatim and passes it back as the
    previous state on the next call. The render window is described by:

    - target_height: height of the 1px wide sizing element in the scroll container
    - top_placeholder_height: first placeholder, omitted when 0
    - first_middle_item / middle_item_count: items rendered after the top placeholder
    - middle_placeholder_height: second placeholder, omitted when 0
    - last_item_count: items rendered at the very end of the list
    """

    average_row_height: float = 0.0  # Ratchet: never decreases for a fixed list
    scroll_height_in_items: float = 0.0
    last_items_total_height: float = 0.0
    target_height: float = 0.0
    top_placeholder_height: float = 0.0
    first_middle_item: int = 0
    middle_item_count: int = 0
    middle_placeholder_height: float = 0.0
    last_item_count: int = 0


INITIAL_STATE = ScrollState()


@dataclass(frozen=True)
class EstimationResult:
    """Outcome of one estimator call.

    A partial result (complete=False) means an item needed to refine the
    placeholders was not measured yet. Its state is still valid to render;
    the host renders it, lets the new rows measure themselves and calls again.
    """

    state: ScrollState
    complete: bool = True
    missing_item: Optional[int] = None  # First unmeasured item, when partial


@dataclass
class _WorkingState:
    """Mutable record used only for the duration of a single call."""

    total_items: int
    viewport_height: float
    viewport_item_count: int
    average_row_height: float
    scroll_height_in_items: float
    last_items_total_height: float
    target_height: float = 0.0
    top_placeholder_height: float = 0.0
    first_middle_item: int = 0
    middle_item_count: int = 0
    middle_placeholder_height: float = 0.0
    last_item_count: int = 0

    @classmethod
    def start(
        cls, props: ScrollProps, previous: ScrollState, viewport_item_count: int
    ) -> "_WorkingState":
        return cls(
            total_items=props.total_items,
            viewport_height=props.viewport_height,
            viewport_item_count=viewport_item_count,
            average_row_height=previous.average_row_height,
            scroll_height_in_items=previous.scroll_height_in_items,
            last_items_total_height=previous.last_items_total_height,
            last_item_count=props.total_items,
        )

    def ratchet_average(self, candidate: float) -> None:
        """Raise the average row height, never lower it."""
        if candidate > self.average_row_height:
            self.average_row_height = candidate

    def freeze(self) -> ScrollState:
        return ScrollState(
            average_row_height=self.average_row_height,
            scroll_height_in_items=self.scroll_height_in_items,
            last_items_total_height=self.last_items_total_height,
            target_height=self.target_height,
            top_placeholder_height=self.top_placeholder_height,
            first_middle_item=self.first_middle_item,
            middle_item_count=self.middle_item_count,
            middle_placeholder_height=self.middle_placeholder_height,
            last_item_count=self.last_item_count,
        )
