"""Selected-row tracking for the result list."""

from __future__ import annotations

from dataclasses import dataclass

from .scroll import ScrollModel, Viewport


@dataclass
class SelectionModel:
    """Index of the highlighted result over a list of fixed, non-zero length.

    The renderer reads ``selected`` directly; no other copy of the
    highlighted row exists.
    """

    length: int
    selected: int = 0

    def __post_init__(self) -> None:
        if self.length < 1:
            raise ValueError("selection requires at least one item")
        self.selected = self.selected % self.length

    def next(self) -> int:
        self.selected = (self.selected + 1) % self.length
        return self.selected

    def previous(self) -> int:
        self.selected = (self.selected - 1) % self.length
        return self.selected

    def ensure_visible(self, scroll: ScrollModel, viewport: Viewport) -> None:
        """Move ``scroll`` the minimum distance that brings ``selected`` into view."""
        visible_items = viewport.visible_height
        if visible_items <= 0:
            return
        if self.selected >= scroll.offset + visible_items:
            scroll.offset = self.selected - visible_items + 1
        elif self.selected < scroll.offset:
            scroll.offset = self.selected

    def snap_into(self, scroll: ScrollModel, viewport: Viewport) -> None:
        """Move ``selected`` to the nearest row inside the scrolled window.

        Used after the list was scrolled without moving the selection, so the
        highlighted row is always one that gets drawn.
        """
        visible_items = viewport.visible_height
        if visible_items <= 0:
            return
        if self.selected < scroll.offset:
            self.selected = min(scroll.offset, self.length - 1)
        elif self.selected >= scroll.offset + visible_items:
            self.selected = min(scroll.offset + visible_items - 1, self.length - 1)
