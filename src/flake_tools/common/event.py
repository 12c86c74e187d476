"""Reading the GitHub Actions event payload."""

from __future__ import annotations

import json
import pathlib
from typing import Any

from flake_tools.common.config import env_str
from flake_tools.models.context import PullRequestHead


def read_event_payload(path: pathlib.Path | str | None = None) -> dict[str, Any]:
    """Load the event JSON named by *path* (default ``$GITHUB_EVENT_PATH``).

    A missing variable, unreadable file, invalid JSON, or a non-object
    document all yield an empty dict.
    """
    if path is None:
        path = env_str("GITHUB_EVENT_PATH")
    if not path:
        return {}
    try:
        data = json.loads(pathlib.Path(path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def read_pull_request_head(path: pathlib.Path | str | None = None) -> PullRequestHead:
    """Return the pull-request head fields of the current event, if any."""
    return PullRequestHead.from_event(read_event_payload(path))
