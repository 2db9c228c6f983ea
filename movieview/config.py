"""Persistent JSON config helpers.

Stores the movie-search API credentials and request preferences. Loading is
defensive: a missing or malformed file, or values of the wrong type, fall
back to defaults. ``TMDB_API_TOKEN`` / ``TMDB_API_BASE_URL`` in the
environment override the file.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "movieview"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_BASE_URL = "https://api.themoviedb.org/3"
DEFAULT_LANGUAGE = "en-US"
DEFAULT_TIMEOUT_SECONDS = 10.0

TOKEN_ENV = "TMDB_API_TOKEN"
BASE_URL_ENV = "TMDB_API_BASE_URL"


@dataclass(frozen=True)
class SearchConfig:
    api_token: str | None = None
    base_url: str = DEFAULT_BASE_URL
    language: str = DEFAULT_LANGUAGE
    include_adult: bool = False
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = CONFIG_PATH if path is None else path
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", config_path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _nonempty_str(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _positive_float(value: object) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value) if value > 0 else None


def load_search_config(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> SearchConfig:
    """Merge config file values with environment overrides."""
    data = load_config(path)
    env = os.environ if environ is None else environ

    token = _nonempty_str(env.get(TOKEN_ENV)) or _nonempty_str(data.get("api_token"))
    base_url = _nonempty_str(env.get(BASE_URL_ENV)) or _nonempty_str(data.get("api_base_url"))
    include_adult = data.get("include_adult")
    return SearchConfig(
        api_token=token,
        base_url=(base_url or DEFAULT_BASE_URL).rstrip("/"),
        language=_nonempty_str(data.get("language")) or DEFAULT_LANGUAGE,
        include_adult=include_adult if isinstance(include_adult, bool) else False,
        timeout_seconds=_positive_float(data.get("timeout_seconds")) or DEFAULT_TIMEOUT_SECONDS,
    )
