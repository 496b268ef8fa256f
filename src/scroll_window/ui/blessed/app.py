"""Main event loop and entry point for the blessed list viewer.

The viewer is a terminal host for the estimator: rows are generated text of
varying length, a row's height is its number of wrapped lines, and one line
stands for one pixel.
"""

import textwrap
from dataclasses import replace

from blessed import Terminal
from loguru import logger

from scroll_window.core.config import Config
from scroll_window.domain.simulation import (
    SimulatedHost,
    generate_row_texts,
    wrapped_line_heights,
)

from .helpers import write_at, write_block
from .helpers.scrolling import clamp_scroll_top
from .rendering import compose_lines, content_height, scrollbar_thumb
from .state import ViewerState, handle_key

# Columns reserved for the scrollbar and the gap before it
SCROLLBAR_COLUMNS = 2
STATUS_LINES = 1
INPUT_TIMEOUT = 0.1


class _RowCache:
    """Wrapped lines of rows, computed on first render."""

    def __init__(self, texts: list[str], width: int) -> None:
        self.texts = texts
        self.width = width
        self._lines: dict[int, list[str]] = {}

    def __call__(self, index: int) -> list[str]:
        if index not in self._lines:
            self._lines[index] = textwrap.wrap(self.texts[index], self.width) or [""]
        return self._lines[index]


def run_viewer(config: Config) -> int:
    """
    Run the interactive viewer until the user quits.

    Args:
        config: Loaded configuration

    Returns:
        Exit code
    """
    term = Terminal()
    texts = generate_row_texts(
        config.viewer.total_items,
        max_words=config.viewer.max_words_per_row,
        seed=config.viewer.seed,
    )
    logger.info(f"Starting viewer with {len(texts)} rows")

    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        try:
            main_loop(term, texts, config)
        except KeyboardInterrupt:
            logger.info("Ctrl+C detected - leaving viewer")

    return 0


def main_loop(term: Terminal, texts: list[str], config: Config) -> None:
    """
    Event loop: re-estimate after every scroll or resize, then redraw.

    Args:
        term: blessed Terminal instance
        texts: Row contents
        config: Loaded configuration
    """
    state = ViewerState()
    size = None
    host = None
    rows = None
    needs_redraw = True

    while True:
        if (term.width, term.height) != size:
            size = (term.width, term.height)
            text_width = max(10, term.width - SCROLLBAR_COLUMNS)
            viewport_height = max(1, term.height - STATUS_LINES)
            # Heights change with the width, so the ratcheted average starts over
            host = SimulatedHost(
                wrapped_line_heights(texts, text_width),
                min_row_height=1,
                viewport_height=viewport_height,
                max_render_passes=config.simulation.max_render_passes,
            )
            rows = _RowCache(texts, text_width)
            state = replace(state, viewport_height=viewport_height)
            logger.debug(f"Viewport resized to {size}")
            needs_redraw = True

        if needs_redraw:
            state = _settle(host, state)
            _draw(term, host, rows, state)
            needs_redraw = False

        key = term.inkey(timeout=INPUT_TIMEOUT)
        if not key:
            continue

        new_state, should_quit = handle_key(state, key, config.viewer.scroll_step)
        if should_quit:
            return
        needs_redraw = new_state != state
        state = new_state


def _settle(host: SimulatedHost, state: ViewerState) -> ViewerState:
    """Run estimate/render passes for the current offset and update the state."""
    frames = host.scroll_to(state.scroll_top)
    height = content_height(host.state, lambda: sum(host.heights))
    scroll_top = int(clamp_scroll_top(state.scroll_top, height, state.viewport_height))
    if scroll_top != state.scroll_top:
        # The estimate shrank under the offset
        frames = host.scroll_to(scroll_top)
        height = content_height(host.state, lambda: sum(host.heights))
    return replace(
        state,
        scroll_top=scroll_top,
        content_height=height,
        render_passes=len(frames),
        complete=frames[-1].result.complete,
    )


def _draw(
    term: Terminal, host: SimulatedHost, rows: _RowCache, state: ViewerState
) -> None:
    lines = compose_lines(
        host.state,
        host.total_items,
        rows,
        state.scroll_top,
        state.viewport_height,
    )
    thumb_start, thumb_length = scrollbar_thumb(
        state.scroll_top, state.content_height, state.viewport_height
    )

    framed = []
    for row, line in enumerate(lines):
        in_thumb = thumb_start <= row < thumb_start + thumb_length
        bar = term.reverse(" ") if in_thumb else term.dim("│")
        framed.append(line.ljust(rows.width)[: rows.width] + " " + bar)
    write_block(term, 0, 0, framed)

    if state.show_status:
        estimate = host.state
        status = (
            f" top={state.scroll_top} target={estimate.target_height:.0f} "
            f"avg={estimate.average_row_height:.2f} "
            f"middle={estimate.first_middle_item}+{estimate.middle_item_count} "
            f"last={estimate.last_item_count} passes={state.render_passes}"
            f"{'' if state.complete else ' (partial)'}  q:quit s:status"
        )
        write_at(term, 0, state.viewport_height, term.reverse(status[: term.width]))
    else:
        write_at(term, 0, state.viewport_height, "")
