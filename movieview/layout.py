"""Content sizing for the list and detail regions.

Both views report how many rows their content needs for a given viewport so
scroll bounds can be derived fresh each frame.
"""

from __future__ import annotations

from .models import Movie
from .scroll import Viewport
from .text import wrap

DETAIL_TEXT_MARGIN = 4
OVERVIEW_LABEL = "Overview"


def detail_text_width(viewport: Viewport) -> int:
    """Columns left for wrapped overview text after border and padding."""
    return viewport.width - DETAIL_TEXT_MARGIN


def detail_header_lines(movie: Movie) -> list[str]:
    return [f"Release Date: {movie.release_date}", "", OVERVIEW_LABEL, ""]


def detail_body_lines(movie: Movie, viewport: Viewport) -> list[str]:
    """Full detail body: fixed header followed by the wrapped overview."""
    return detail_header_lines(movie) + wrap(movie.overview, detail_text_width(viewport))


def detail_content_height(movie: Movie, viewport: Viewport) -> int:
    return len(detail_body_lines(movie, viewport))


def list_content_height(result_count: int) -> int:
    return result_count
