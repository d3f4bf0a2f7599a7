# Optline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import shutil
import sys

import pythonjsonlogger.json
from rich.logging import RichHandler

from optline.console import error_console

LOG_MODES = ("cli", "json")


def get_program_invocation() -> str:
    """Returns the name `%prog` expands to when no `prog` is given."""
    script = sys.argv[0] if sys.argv and sys.argv[0] else "prog"
    program = shutil.which(script)
    if program:
        return os.path.basename(program)

    if script.endswith(".py") and "python" in sys.executable:
        return f"python {os.path.basename(script)}"
    return os.path.basename(script)


def verbosity_to_level(verbosity: int) -> int:
    """Map a `-v` count to a level: 0 → WARNING, 1 → INFO, 2+ → DEBUG."""
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def setup_logging(mode: str | None = None, verbosity: int = 0) -> logging.Handler:
    """
    Route log records to stderr, either through rich or as JSON lines.

    Args:
        mode (str | None): "cli" or "json". Falls back to the
            `OPTLINE_LOG_MODE` environment variable, then to "cli".
        verbosity (int): Number of `-v` flags given on the command line.

    Returns:
        logging.Handler: The installed handler.

    Raises:
        ValueError: If `mode` is not a known log mode.
    """
    mode = mode or os.getenv("OPTLINE_LOG_MODE") or "cli"
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode} (choose from {', '.join(LOG_MODES)})")

    if mode == "cli":
        handler: logging.Handler = RichHandler(
            console=error_console,
            show_time=False,
            show_path=False,
            markup=False,
        )
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter("%(name)s %(levelname)s %(message)s")
        )
    handler.setLevel(verbosity_to_level(verbosity))

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG)
    logging.getLogger("optline").debug("Logging to stderr in '%s' mode.", mode)
    return handler
