"""Viewer UI state management - immutable state updates."""

from dataclasses import dataclass, replace

from blessed.keyboard import Keystroke

from .helpers.scrolling import scroll_by

# Lines kept from the previous page when paging
PAGE_OVERLAP = 1


@dataclass(frozen=True)
class ViewerState:
    """Scroll position and the last settled estimate summary."""

    scroll_top: int = 0
    content_height: float = 0.0
    viewport_height: int = 0
    render_passes: int = 0
    complete: bool = True
    show_status: bool = True


def handle_key(
    state: ViewerState, key: Keystroke, scroll_step: int = 1
) -> tuple[ViewerState, bool]:
    """
    Apply a key press to the viewer state.

    Args:
        state: Current viewer state
        key: Key pressed
        scroll_step: Lines moved per arrow key press

    Returns:
        (new state, should_quit)
    """
    if key == "q" or key.name == "KEY_ESCAPE":
        return state, True

    if key == "s":
        return replace(state, show_status=not state.show_status), False

    page = max(1, state.viewport_height - PAGE_OVERLAP)
    deltas = {
        "KEY_UP": -scroll_step,
        "KEY_DOWN": scroll_step,
        "KEY_PGUP": -page,
        "KEY_PGDOWN": page,
    }

    if key.name == "KEY_HOME":
        return replace(state, scroll_top=0), False
    if key.name == "KEY_END":
        end = scroll_by(0, state.content_height, state.content_height, state.viewport_height)
        return replace(state, scroll_top=int(end)), False
    if key.name in deltas:
        new_top = scroll_by(
            state.scroll_top,
            deltas[key.name],
            state.content_height,
            state.viewport_height,
        )
        return replace(state, scroll_top=int(new_top)), False

    return state, False
