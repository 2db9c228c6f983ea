from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Movie:
    title: str
    release_date: str
    overview: str

    @property
    def year(self) -> str:
        """Leading year of ``release_date`` or an empty string when unknown."""
        head = self.release_date[:4]
        return head if len(head) == 4 and head.isdigit() else ""

    def label(self) -> str:
        year = self.year
        return f"{self.title} ({year})" if year else self.title


ResultSet = tuple[Movie, ...]
