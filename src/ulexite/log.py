"""
Colored console logging.

Everything goes to stderr; stdout is reserved for the report / query reply.
"""

import sys
import threading

COLORS = {
    "blue": "\033[94m",
    "green": "\033[92m",
    "yellow": "\033[93m",
    "red": "\033[91m",
    "reset": "\033[0m",
}

_lock = threading.Lock()  # worker threads log concurrently
_quiet = False


def set_quiet(quiet: bool):
    global _quiet
    _quiet = quiet


def _emit(color: str, label: str, message: str, marker: str = ""):
    line = f"{COLORS[color]}[{label}]{marker}{COLORS['reset']} {message}"
    with _lock:
        print(line, file=sys.stderr, flush=True)


def log_info(message: str):
    if not _quiet:
        _emit("blue", "INFO", message)


def log_success(message: str):
    if not _quiet:
        _emit("green", "SUCCESS", message, " ✅")


def log_warning(message: str):
    _emit("yellow", "WARNING", message)


def log_error(message: str):
    _emit("red", "ERROR", message, " ❌")
