"""Whitespace word-wrapping for free-form text such as movie overviews.

Wrapping is greedy and purely whitespace based: words are never split, so a
single word wider than the budget is emitted on a line of its own.
"""

from __future__ import annotations


def wrap(text: str, width: int) -> list[str]:
    """Wrap ``text`` into lines of at most ``width`` characters.

    Words are packed onto the current line while ``line + " " + word`` still
    fits. Empty or whitespace-only input yields no lines at all.
    """
    lines: list[str] = []
    current = ""
    for word in text.split():
        if not current:
            current = word
        elif len(current) + 1 + len(word) <= width:
            current = f"{current} {word}"
        else:
            lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines
