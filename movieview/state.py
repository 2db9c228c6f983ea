"""List/detail view state machine and key routing.

``ViewState`` bundles everything that changes while browsing: the current
mode, the selected result, one scroll offset per view, and the result frozen
as the detail subject. Up/Down mean different things per mode, so every key
handler branches on ``mode``.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

from .layout import detail_content_height, list_content_height
from .models import Movie, ResultSet
from .scroll import ScrollModel, Viewport
from .selection import SelectionModel

logger = logging.getLogger(__name__)

QUIT_KEYS = frozenset({"q", "CTRL_C"})


class ViewMode(enum.Enum):
    LIST = "list"
    DETAIL = "detail"


@dataclass
class ViewState:
    selection: SelectionModel
    mode: ViewMode = ViewMode.LIST
    list_scroll: ScrollModel = field(default_factory=ScrollModel)
    detail_scroll: ScrollModel = field(default_factory=ScrollModel)
    detail_index: int = 0

    @classmethod
    def for_results(cls, results: ResultSet) -> ViewState:
        return cls(selection=SelectionModel(length=len(results)))

    @property
    def active_scroll(self) -> ScrollModel:
        if self.mode is ViewMode.DETAIL:
            return self.detail_scroll
        return self.list_scroll

    def detail_subject(self, results: ResultSet) -> Movie:
        return results[self.detail_index]

    def toggle_mode(self) -> None:
        """Flip between list and detail, resetting the scroll of the view entered."""
        if self.mode is ViewMode.LIST:
            self.detail_index = self.selection.selected
            self.mode = ViewMode.DETAIL
        else:
            self.mode = ViewMode.LIST
        self.active_scroll.reset()
        logger.debug("view mode -> %s (subject %d)", self.mode.value, self.detail_index)

    def return_to_list(self) -> None:
        if self.mode is not ViewMode.LIST:
            logger.debug("view mode -> list")
        self.mode = ViewMode.LIST
        self.active_scroll.reset()

    def move_selection(self, delta: int, viewport: Viewport) -> None:
        if delta < 0:
            self.selection.previous()
        else:
            self.selection.next()
        self.selection.ensure_visible(self.list_scroll, viewport)

    def scroll_list(self, delta: int, result_count: int, viewport: Viewport) -> None:
        """Scroll the list without moving the selection, then snap it into view."""
        content_height = list_content_height(result_count)
        if delta < 0:
            self.list_scroll.scroll_up(content_height, viewport)
        else:
            self.list_scroll.scroll_down(content_height, viewport)
        self.selection.snap_into(self.list_scroll, viewport)

    def scroll_detail(self, delta: int, results: ResultSet, viewport: Viewport) -> None:
        content_height = detail_content_height(self.detail_subject(results), viewport)
        if delta < 0:
            self.detail_scroll.scroll_up(content_height, viewport)
        else:
            self.detail_scroll.scroll_down(content_height, viewport)

    def handle_key(self, key: str, results: ResultSet, viewport: Viewport) -> bool:
        """Apply one decoded key and return ``True`` when the app should quit.

        Keys that mean nothing in the current mode are ignored.
        """
        if key in QUIT_KEYS:
            return True
        if key == "ENTER":
            self.toggle_mode()
            return False
        if key == "ESC":
            self.return_to_list()
            return False

        delta = {"UP": -1, "SHIFT_UP": -1, "DOWN": 1, "SHIFT_DOWN": 1}.get(key)
        if delta is None:
            return False
        if self.mode is ViewMode.DETAIL:
            self.scroll_detail(delta, results, viewport)
        elif key.startswith("SHIFT_"):
            self.scroll_list(delta, len(results), viewport)
        else:
            self.move_selection(delta, viewport)
        return False
