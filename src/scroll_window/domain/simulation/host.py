"""
Simulated rendering host.

Plays the role of a list component: it persists the estimator state, renders
the items of the returned window and only reports heights for rows that are
currently rendered. Used to drive the estimator through whole render cycles
without a real UI.
"""

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from scroll_window.domain.estimator import (
    INITIAL_STATE,
    EstimationResult,
    ScrollProps,
    ScrollState,
    estimate_scroll_window,
    rendered_indices,
)


@dataclass(frozen=True)
class Frame:
    """One estimate/render round trip."""

    scroll_top: float
    render_pass: int  # 1-based within a scroll event
    result: EstimationResult
    rendered_count: int


class SimulatedHost:
    """List host whose rows have known heights that are only visible once rendered."""

    def __init__(
        self,
        heights: list[float],
        min_row_height: float,
        viewport_height: float,
        max_render_passes: int = 8,
        state: Optional[ScrollState] = None,
    ) -> None:
        undersized = [i for i, h in enumerate(heights) if h < min_row_height]
        if undersized:
            raise ValueError(
                f"{len(undersized)} rows are shorter than min_row_height "
                f"({min_row_height}), first at index {undersized[0]}"
            )
        if max_render_passes < 1:
            raise ValueError(
                f"max_render_passes must be >= 1, got {max_render_passes}"
            )

        self.heights = heights
        self.min_row_height = min_row_height
        self.viewport_height = viewport_height
        self.max_render_passes = max_render_passes
        self._state = state if state is not None else INITIAL_STATE
        self._rendered: set[int] = set()

    @property
    def state(self) -> ScrollState:
        """Last state returned by the estimator."""
        return self._state

    @property
    def total_items(self) -> int:
        return len(self.heights)

    def measure(self, index: int) -> float:
        """Height of a rendered row, 0 if the row is not rendered."""
        if index in self._rendered:
            return self.heights[index]
        return 0

    def render(self, state: ScrollState) -> int:
        """Render the window described by `state`, replacing the previous one.

        Returns:
            Number of rendered rows
        """
        self._rendered = set(rendered_indices(state, self.total_items))
        return len(self._rendered)

    def estimate(self, scroll_top: float) -> EstimationResult:
        """Run the estimator once and persist the returned state."""
        props = ScrollProps(
            total_items=self.total_items,
            min_row_height=self.min_row_height,
            viewport_height=self.viewport_height,
            scroll_top=scroll_top,
        )
        result = estimate_scroll_window(props, self._state, self.measure)
        self._state = result.state
        return result

    def scroll_to(self, scroll_top: float) -> list[Frame]:
        """Handle one scroll event: estimate and render until the window settles.

        The window has settled once a call completes without changing the state.

        Returns:
            Every round trip made, in order
        """
        frames: list[Frame] = []
        for render_pass in range(1, self.max_render_passes + 1):
            previous = self._state
            result = self.estimate(scroll_top)
            rendered_count = self.render(result.state)
            frames.append(Frame(scroll_top, render_pass, result, rendered_count))
            if result.complete and result.state == previous:
                break
        else:
            logger.warning(
                f"Window did not settle at scroll_top={scroll_top} "
                f"after {self.max_render_passes} passes"
            )
        return frames
