# Flagspec — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Process-level helpers for programs built on flagspec.

The parser itself only logs to the "flagspec" logger and never installs
handlers. `setup_logging()` is meant to be called once by a command-line
program, the `flagspec` tool included.

Log modes:
- cli: Rich console output on stderr (default outside containers).
- json: One JSON object per record (default inside containers).
"""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import pythonjsonlogger.json
from rich.logging import RichHandler

LOG_MODE_ENV = "FLAGSPEC_LOG_MODE"
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
TEXT_LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"
_CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def get_program_invocation() -> str:
    """Name to show in usage lines: the script name, or `python -m flagspec`."""
    script = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else ""
    if not script or script == "__main__.py":
        return "python -m flagspec"
    return script


def running_in_container() -> bool:
    try:
        cgroup = Path("/proc/1/cgroup").read_text(encoding="UTF-8")
    except OSError:
        return False
    return any(marker in cgroup for marker in _CONTAINER_MARKERS)


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode!r} (expected 'cli' or 'json')")


def _file_handler(log_filename: str, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(log_filename, "a", "UTF-8")
    if as_json:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(TEXT_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Replace the root handlers with a console handler and an optional file handler.

    Args:
        mode (str | None): "cli" or "json". Falls back to `FLAGSPEC_LOG_MODE`,
            then to "json" inside containers and "cli" elsewhere.
        log_filename (str | None): Also log to this file when given.
        json_log_to_file (bool): Write the file log as JSON instead of text.
        file_log_level (int): Threshold for the file handler.
        console_log_level (int): Threshold for the console handler.

    Raises:
        ValueError: If `mode` is neither "cli" nor "json".
    """
    mode = mode or os.getenv(LOG_MODE_ENV) or ("json" if running_in_container() else "cli")
    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(console_handler)

    if log_filename:
        file_handler = _file_handler(log_filename, json_log_to_file)
        file_handler.setLevel(file_log_level)
        root.addHandler(file_handler)

    logging.getLogger("flagspec").debug("Logging initialized in '%s' mode.", mode)
