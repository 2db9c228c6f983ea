"""Main interactive event loop for the terminal UI.

Each iteration measures the terminal, paints one frame, then blocks for one
key. All state changes happen between reading a key and painting the next
frame. Raw mode is held for the whole loop and released on every exit path.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
from collections.abc import Callable

from .app import AppController, region_viewport
from .input import read_key
from .models import ResultSet
from .render import render_frame
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def run_main_loop(
    controller: AppController,
    terminal: TerminalController,
    stdin_fd: int,
    stdout_fd: int,
    *,
    get_terminal_size: Callable[[tuple[int, int]], os.terminal_size] = shutil.get_terminal_size,
    read_key: Callable[[int], str] = read_key,
) -> None:
    """Run until a quit key arrives or stdin reaches end of input."""
    with terminal.raw_mode():
        while True:
            term = get_terminal_size((80, 24))
            viewport = region_viewport(term.columns, term.lines)
            render_frame(controller.frame(viewport), term.columns, term.lines, fd=stdout_fd)

            key = read_key(stdin_fd)
            if not key:
                logger.info("input closed, leaving browser")
                return
            if controller.handle_key(key, viewport):
                return


def run_browser(results: ResultSet) -> None:
    """Browse ``results`` full-screen on the process's controlling terminal."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    controller = AppController(results)
    terminal = TerminalController(stdin_fd, stdout_fd)
    run_main_loop(controller, terminal, stdin_fd, stdout_fd)
