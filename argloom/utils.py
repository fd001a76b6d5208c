# Argloom Argument Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import shutil
import sys
from pathlib import Path

import pythonjsonlogger.json
from rich.logging import RichHandler

CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")
LOG_MODES = ("cli", "json")
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def get_program_invocation() -> str:
    """Returns the recommended program invocation prefix."""
    script = sys.argv[0] if sys.argv else ""
    if not script:
        return "argloom"
    program = shutil.which(script)
    if program:
        return os.path.basename(program)

    executable = sys.executable
    if "python" in os.path.basename(executable):
        return f"python {os.path.basename(script)}"
    return os.path.basename(script)


def current_executable_path() -> Path | None:
    """
    Return the absolute, resolved path of the running program.

    Returns None unless `sys.argv[0]` names an existing file. Under
    `python -c` or `python -` it is "-c" or "-", which must not match a
    user token.
    """
    script = sys.argv[0] if sys.argv else ""
    if not script:
        return None
    try:
        path = Path(script).absolute().resolve(strict=True)
    except (OSError, RuntimeError):
        return None
    return path if path.is_file() else None


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def _json_formatter() -> logging.Formatter:
    return pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT)


def setup_logging(
    mode: str | None = None,
    log_filename: str | Path | None = None,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Configure the root logger for the argloom CLI.

    Args:
        mode (str | None): "cli" for Rich console logs or "json" for one JSON
            object per line. Defaults to `ARGLOOM_LOG_MODE`, then to "json"
            inside a container and "cli" elsewhere.
        log_filename (str | Path | None): Also log everything at DEBUG to this
            file, formatted as JSON in "json" mode and as plain text otherwise.
        console_log_level (int): Level for the console handler.

    Raises:
        ValueError: If `mode` is not a known log mode.
    """
    if not mode:
        mode = os.getenv("ARGLOOM_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode}")

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    if mode == "cli":
        console_handler: logging.Handler = RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    else:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(_json_formatter())
    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(logging.DEBUG)
        if mode == "json":
            file_handler.setFormatter(_json_formatter())
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        root.addHandler(file_handler)

    logging.getLogger("argloom").debug("Logging initialized in '%s' mode.", mode)
