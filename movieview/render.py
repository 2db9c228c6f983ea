"""Frame rendering for the list and detail views.

``build_screen`` turns a ``Frame`` into ANSI text without touching the
terminal; ``render_frame`` writes that text in a single call. Layout is one
rounded box holding the active view, followed by a one-row help line.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from .ansi import clip_ansi_line, display_width, fit_ansi_line

BORDER_STYLE = "\033[38;5;45m"
TITLE_STYLE = "\033[1;38;5;81m"
HELP_KEY_STYLE = "\033[38;5;229m"
DIM_STYLE = "\033[2;38;5;250m"
RESET = "\033[0m"

HELP_ROWS = 1


@dataclass(frozen=True)
class Frame:
    """Everything needed to paint one screen, derived from the view state.

    ``lines`` is the full content of the active view; only
    ``lines[scroll_offset:scroll_offset + visible rows]`` is drawn.
    ``selected`` is the highlighted content line, or ``None`` when the view
    has no selection.
    """

    title: str
    lines: tuple[str, ...]
    scroll_offset: int
    help_keys: tuple[tuple[str, str], ...]
    selected: int | None = None
    show_position: bool = False


def selected_with_ansi(text: str) -> str:
    """Apply reverse-video selection styling to an already-padded row."""
    if not text:
        return text
    return "\033[7m" + text.replace(RESET, "\033[0;7m") + RESET


def build_help_line(help_keys: tuple[tuple[str, str], ...], width: int) -> str:
    parts = [f"{HELP_KEY_STYLE}{key}{RESET} {DIM_STYLE}{action}{RESET}" for key, action in help_keys]
    line = clip_ansi_line("  ".join(parts), max(1, width - 1))
    return f"{line}{RESET}" if "\033" in line else line


def _top_border(title: str, inner: int) -> str:
    if inner <= 0:
        return f"{BORDER_STYLE}╭╮{RESET}"
    label = clip_ansi_line(f" {title} ", inner - 1)
    fill = "─" * (inner - 1 - display_width(label))
    return f"{BORDER_STYLE}╭─{RESET}{TITLE_STYLE}{label}{RESET}{BORDER_STYLE}{fill}╮{RESET}"


def _bottom_border(position: str, inner: int) -> str:
    if inner <= 0:
        return f"{BORDER_STYLE}╰╯{RESET}"
    label = clip_ansi_line(f" {position} ", inner - 1) if position else ""
    fill = "─" * (inner - 1 - display_width(label))
    return f"{BORDER_STYLE}╰{fill}{RESET}{DIM_STYLE}{label}{RESET}{BORDER_STYLE}─╯{RESET}"


def _position_label(frame: Frame, visible_rows: int) -> str:
    total = len(frame.lines)
    if not frame.show_position or total <= visible_rows or visible_rows <= 0:
        return ""
    end = min(total, frame.scroll_offset + visible_rows)
    return f"{frame.scroll_offset + 1}-{end}/{total}"


def build_screen_rows(frame: Frame, width: int, height: int) -> list[str]:
    """Lay out ``frame`` as ``height`` styled rows for a ``width``-column terminal.

    The box fills all rows except the help line. Content rows keep one cell
    of padding inside each border.
    """
    box_height = max(0, height - HELP_ROWS)
    inner = max(0, width - 2)
    visible_rows = max(0, box_height - 2)

    rows: list[str] = []
    if box_height >= 1:
        rows.append(_top_border(frame.title, inner))
    for row in range(visible_rows):
        line_idx = frame.scroll_offset + row
        text = frame.lines[line_idx] if line_idx < len(frame.lines) else ""
        cell = fit_ansi_line(f" {text}", inner) if inner > 0 else ""
        if frame.selected is not None and line_idx == frame.selected:
            cell = selected_with_ansi(cell)
        rows.append(f"{BORDER_STYLE}│{RESET}{cell}{BORDER_STYLE}│{RESET}")
    if box_height >= 2:
        rows.append(_bottom_border(_position_label(frame, visible_rows), inner))
    rows.append(build_help_line(frame.help_keys, width))
    return rows


def build_screen(frame: Frame, width: int, height: int) -> str:
    return "\033[H\033[J" + "\r\n".join(build_screen_rows(frame, width, height))


def render_frame(frame: Frame, width: int, height: int, fd: int | None = None) -> None:
    out = build_screen(frame, width, height)
    target = sys.stdout.fileno() if fd is None else fd
    os.write(target, out.encode("utf-8", errors="replace"))
