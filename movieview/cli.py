"""Command-line front door for movieview.

Validates the single search-query argument, loads API settings, runs the
search, and hands non-empty results to the interactive browser.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import CONFIG_PATH, TOKEN_ENV, load_search_config
from .runtime import run_browser
from .tmdb import MovieSearchError, search_movies

logger = logging.getLogger(__name__)

USAGE = "Usage: movieview <movie_name>"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_installed_handlers: list[logging.Handler] = []


class ArgumentUsageError(Exception):
    """Raised instead of argparse's exit-with-status-2 on malformed arguments."""


class _UsageArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise ArgumentUsageError(message)


def configure_logging(log_file: Path | None) -> None:
    """Send package logs to ``log_file``; stay silent without one.

    The screen belongs to the UI while it runs, so nothing is logged to the
    terminal. Handlers from an earlier call are replaced, not stacked.
    """
    package_logger = logging.getLogger("movieview")
    while _installed_handlers:
        old = _installed_handlers.pop()
        package_logger.removeHandler(old)
        old.close()

    if log_file is None:
        handler: logging.Handler = logging.NullHandler()
    else:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.setLevel(logging.DEBUG)
    package_logger.addHandler(handler)
    _installed_handlers.append(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = _UsageArgumentParser(
        prog="movieview",
        description="Search TMDB for a movie title and browse the results in the terminal.",
    )
    parser.add_argument("query", nargs="*", help="Movie title to search for (one argument; quote multi-word titles).")
    parser.add_argument("--log-file", type=Path, default=None, help="Write debug logs to this file.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, search, and launch the browser.

    Exits quietly (status 0) with a usage line for anything other than one
    query argument, unknown options and malformed ones included, and with a
    message when the search finds nothing. Search failures end the program
    with a non-zero status before any UI is shown.
    """
    try:
        args, extra = build_parser().parse_known_args(argv)
    except ArgumentUsageError as exc:
        logger.debug("rejected arguments: %s", exc)
        print(USAGE)
        return
    if extra or len(args.query) != 1:
        print(USAGE)
        return

    configure_logging(args.log_file)
    query = args.query[0]

    config = load_search_config()
    if not config.api_token:
        raise SystemExit(f"No TMDB API token configured. Set {TOKEN_ENV} or 'api_token' in {CONFIG_PATH}.")

    try:
        results = search_movies(query, config)
    except MovieSearchError as exc:
        raise SystemExit(str(exc)) from exc

    if not results:
        logger.info("no results for %r", query)
        print(f"No results found for '{query}'")
        return

    if not sys.stdin.isatty():
        raise SystemExit("movieview needs an interactive terminal.")
    run_browser(results)


if __name__ == "__main__":
    main()
