"""Diagnostic logging to stderr with optional color output."""

from __future__ import annotations

import io
import os
import sys
from datetime import datetime, timezone

# ANSI color codes, only emitted when stderr is a tty.
_RED = "\033[0;31m"
_GREEN = "\033[0;32m"
_YELLOW = "\033[0;33m"
_BLUE = "\033[0;34m"
_RESET = "\033[0m"


def _use_color() -> bool:
    # CI logs capture stderr through a pipe; color only for local terminals.
    try:
        return os.isatty(sys.stderr.fileno())
    except (OSError, ValueError, io.UnsupportedOperation):
        return False


def _timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.strftime("[%Y-%m-%dT%H:%M:%SZ]")


def _emit(color: str, label: str, message: str) -> None:
    ts = _timestamp()
    if _use_color():
        line = f"{color}{ts} [{label}]{_RESET} {message}"
    else:
        line = f"{ts} [{label}] {message}"
    print(line, file=sys.stderr, flush=True)


def log_info(message: str) -> None:
    """Log a progress message (resolved context, skip notices)."""
    _emit(_BLUE, "INFO", message)


def log_warning(message: str) -> None:
    """Log a non-fatal anomaly."""
    _emit(_YELLOW, "WARN", message)


def log_error(message: str) -> None:
    """Log a failed git step; detection continues where it can."""
    _emit(_RED, "ERROR", message)


def log_success(message: str) -> None:
    """Log the final tally of detected tests."""
    _emit(_GREEN, "OK", message)


def log_block(label: str, text: str) -> None:
    """Log a multi-line block (command output) under an INFO header.

    Each line of *text* is indented beneath the header so the block stays
    readable when interleaved with other CI output.  Empty text is logged
    as ``(empty)``.
    """
    lines = text.splitlines()
    if not lines:
        log_info(f"{label}: (empty)")
        return
    body = "\n".join(f"    {line}" for line in lines)
    log_info(f"{label}:\n{body}")
