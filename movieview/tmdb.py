"""Movie search against the TMDB HTTP API.

One authenticated GET per run, first result page only, no retry. Failures
surface as ``NetworkFailure`` (transport error or non-success status) or
``DecodeFailure`` (body is not the expected JSON shape).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from .config import SearchConfig
from .models import Movie, ResultSet

logger = logging.getLogger(__name__)

SEARCH_PATH = "/search/movie"


class MovieSearchError(Exception):
    """Base class for failures of the movie search request."""


class NetworkFailure(MovieSearchError):
    def __str__(self) -> str:
        return f"Network error: {self.args[0] if self.args else ''}"


class DecodeFailure(MovieSearchError):
    def __str__(self) -> str:
        return f"Decode error: {self.args[0] if self.args else ''}"


def _text_field(item: Mapping[str, Any], key: str, index: int) -> str:
    value = item.get(key)
    if value is None:
        # TMDB omits release_date/overview for some entries.
        return ""
    if not isinstance(value, str):
        raise DecodeFailure(f"results[{index}].{key} is not a string")
    return value


def parse_results(payload: object) -> ResultSet:
    """Convert a decoded search response body into movies, preserving order."""
    if not isinstance(payload, dict):
        raise DecodeFailure("response body is not a JSON object")
    raw_results = payload.get("results")
    if not isinstance(raw_results, list):
        raise DecodeFailure("response has no 'results' array")

    movies: list[Movie] = []
    for index, item in enumerate(raw_results):
        if not isinstance(item, dict):
            raise DecodeFailure(f"results[{index}] is not an object")
        title = item.get("title")
        if not isinstance(title, str):
            raise DecodeFailure(f"results[{index}].title is missing")
        movies.append(
            Movie(
                title=title,
                release_date=_text_field(item, "release_date", index),
                overview=_text_field(item, "overview", index),
            )
        )
    return tuple(movies)


class MovieSearchClient:
    """Thin synchronous wrapper over ``httpx.Client`` for the search endpoint."""

    def __init__(self, config: SearchConfig, transport: httpx.BaseTransport | None = None) -> None:
        self.config = config
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.config.api_token:
            headers["Authorization"] = f"Bearer {self.config.api_token}"
        return headers

    def search(self, query: str) -> ResultSet:
        params = {
            "query": query,
            "language": self.config.language,
            "include_adult": "true" if self.config.include_adult else "false",
            "page": "1",
        }
        logger.info("searching for %r", query)
        try:
            with httpx.Client(
                base_url=self.config.base_url,
                headers=self._headers(),
                timeout=self.config.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = client.get(SEARCH_PATH, params=params)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error("search failed with status %s", exc.response.status_code)
            raise NetworkFailure(f"HTTP {exc.response.status_code} from {exc.request.url}") from exc
        except httpx.HTTPError as exc:
            logger.error("search request failed: %s", exc)
            raise NetworkFailure(str(exc) or type(exc).__name__) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            logger.error("search response is not JSON")
            raise DecodeFailure(f"invalid JSON: {exc}") from exc

        results = parse_results(payload)
        logger.info("search for %r returned %d result(s)", query, len(results))
        return results


def search_movies(query: str, config: SearchConfig) -> ResultSet:
    return MovieSearchClient(config).search(query)
