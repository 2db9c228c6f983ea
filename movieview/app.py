"""Application controller tying view state to the fetched results.

The controller is the only place that knows about both the result set and
the screen: it routes keys into ``ViewState`` and derives a ``Frame`` for the
renderer from the current state and viewport.
"""

from __future__ import annotations

from .layout import detail_body_lines, list_content_height
from .models import ResultSet
from .render import HELP_ROWS, Frame
from .scroll import Viewport, needs_scroll
from .state import ViewMode, ViewState

LIST_TITLE = "Search Results"
LIST_HELP: tuple[tuple[str, str], ...] = (
    ("Up/Down", "move"),
    ("Shift+Up/Down", "scroll"),
    ("Enter", "details"),
    ("q", "quit"),
)
DETAIL_HELP: tuple[tuple[str, str], ...] = (
    ("Up/Down", "scroll"),
    ("Enter/Esc", "back"),
    ("q", "quit"),
)


def region_viewport(columns: int, lines: int) -> Viewport:
    """Viewport of the bordered region: the terminal minus the help row."""
    return Viewport(height=max(0, lines - HELP_ROWS), width=max(0, columns))


class AppController:
    def __init__(self, results: ResultSet, state: ViewState | None = None) -> None:
        if not results:
            raise ValueError("AppController needs at least one result")
        self.results = tuple(results)
        self.state = state if state is not None else ViewState.for_results(self.results)

    @property
    def mode(self) -> ViewMode:
        return self.state.mode

    def handle_key(self, key: str, viewport: Viewport) -> bool:
        """Dispatch one key; return ``True`` when the loop should stop."""
        return self.state.handle_key(key, self.results, viewport)

    def frame(self, viewport: Viewport) -> Frame:
        """Build render instructions for ``viewport``.

        Scroll offsets kept from an earlier frame are clamped first, since
        the terminal may have been resized since they were computed.
        """
        state = self.state
        if state.mode is ViewMode.DETAIL:
            movie = state.detail_subject(self.results)
            body = detail_body_lines(movie, viewport)
            offset = state.detail_scroll.clamp(len(body), viewport)
            return Frame(
                title=movie.title,
                lines=tuple(body),
                scroll_offset=offset,
                help_keys=DETAIL_HELP,
                show_position=needs_scroll(len(body), viewport),
            )

        state.list_scroll.clamp(list_content_height(len(self.results)), viewport)
        state.selection.ensure_visible(state.list_scroll, viewport)
        return Frame(
            title=f"{LIST_TITLE} ({state.selection.selected + 1}/{len(self.results)})",
            lines=tuple(movie.label() for movie in self.results),
            scroll_offset=state.list_scroll.offset,
            help_keys=LIST_HELP,
            selected=state.selection.selected,
        )
