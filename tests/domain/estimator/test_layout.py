"""Tests for render plans built from estimator states."""

from scroll_window.domain.estimator import (
    INITIAL_STATE,
    RenderSegment,
    ScrollProps,
    ScrollState,
    build_render_plan,
    estimate_scroll_window,
    rendered_indices,
)


class TestBuildRenderPlan:
    """Tests for the ordered block layout."""

    def test_two_placeholder_plan(self) -> None:
        """Middle window with placeholders on both sides and the last window."""
        state = ScrollState(
            target_height=500000,
            top_placeholder_height=250000,
            first_middle_item=5000,
            middle_item_count=10,
            middle_placeholder_height=249000,
            last_item_count=10,
        )

        assert build_render_plan(state, 10000) == [
            RenderSegment("placeholder", 0, 5000, 250000),
            RenderSegment("items", 5000, 10),
            RenderSegment("placeholder", 5010, 4980, 249000),
            RenderSegment("items", 9990, 10),
        ]

    def test_single_placeholder_plan(self) -> None:
        state = ScrollState(
            target_height=500000,
            top_placeholder_height=499100,
            first_middle_item=9982,
            last_item_count=18,
        )

        assert build_render_plan(state, 10000) == [
            RenderSegment("placeholder", 0, 9982, 499100),
            RenderSegment("items", 9982, 18),
        ]

    def test_zero_height_blocks_are_omitted(self) -> None:
        """At the top of the list there is no top placeholder."""
        state = ScrollState(
            target_height=500000,
            first_middle_item=0,
            middle_item_count=10,
            middle_placeholder_height=499000,
            last_item_count=10,
        )

        plan = build_render_plan(state, 10000)

        assert [segment.kind for segment in plan] == ["items", "placeholder", "items"]

    def test_degenerate_plan_renders_everything(self) -> None:
        props = ScrollProps(
            total_items=10, min_row_height=60, viewport_height=500, scroll_top=0
        )
        state = estimate_scroll_window(props, INITIAL_STATE, lambda i: 60).state

        assert build_render_plan(state, 10) == [RenderSegment("items", 0, 10)]

    def test_plan_accounts_for_every_item(self) -> None:
        """Rendered blocks plus placeholder ranges cover the list exactly once."""
        heights = [50.0] * 10000
        props = ScrollProps(
            total_items=10000, min_row_height=50, viewport_height=500, scroll_top=250025
        )
        state = estimate_scroll_window(props, INITIAL_STATE, lambda i: heights[i]).state

        covered: list[int] = []
        for segment in build_render_plan(state, 10000):
            covered.extend(range(segment.start, segment.start + segment.count))

        assert covered == list(range(10000))


class TestRenderedIndices:
    """Tests for the list of rows a host renders."""

    def test_middle_and_last_windows(self) -> None:
        state = ScrollState(
            top_placeholder_height=250000,
            first_middle_item=5000,
            middle_item_count=3,
            middle_placeholder_height=249000,
            last_item_count=2,
        )

        assert rendered_indices(state, 10000) == [5000, 5001, 5002, 9998, 9999]

    def test_initial_state_renders_nothing(self) -> None:
        assert rendered_indices(INITIAL_STATE, 10000) == []
