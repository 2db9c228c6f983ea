"""Scroll offset bookkeeping for one bordered, vertically scrolling region.

The offset is the only stored value. Everything derived from it (whether
scrolling is needed, the largest legal offset) is recomputed from the
content height and the viewport passed in by the caller, because the
terminal can be resized between any two frames.
"""

from __future__ import annotations

from dataclasses import dataclass

BORDER_ROWS = 2


@dataclass(frozen=True)
class Viewport:
    """Cells available to a UI region, border included."""

    height: int
    width: int

    @property
    def visible_height(self) -> int:
        return self.height - BORDER_ROWS


def needs_scroll(content_height: int, viewport: Viewport) -> bool:
    return content_height > viewport.visible_height


def max_scroll(content_height: int, viewport: Viewport) -> int:
    """Return the largest offset that still fills the region, never negative."""
    return max(0, content_height - viewport.visible_height)


@dataclass
class ScrollModel:
    offset: int = 0

    def scroll_up(self, content_height: int, viewport: Viewport) -> None:
        if not needs_scroll(content_height, viewport):
            # Content shrank below the fold; stale offsets must not survive.
            self.offset = 0
            return
        self.offset = max(0, self.offset - 1)

    def scroll_down(self, content_height: int, viewport: Viewport) -> None:
        if not needs_scroll(content_height, viewport):
            self.offset = 0
            return
        self.offset = min(max_scroll(content_height, viewport), self.offset + 1)

    def clamp(self, content_height: int, viewport: Viewport) -> int:
        """Pull an offset from an earlier frame back into the legal range."""
        self.offset = max(0, min(self.offset, max_scroll(content_height, viewport)))
        return self.offset

    def reset(self) -> None:
        self.offset = 0
