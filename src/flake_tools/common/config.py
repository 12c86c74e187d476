"""Environment variable parsing and detector settings.

Examples::

    from flake_tools.common.config import DetectorSettings, env_int, env_str

    # String with default
    branch = env_str("FLAKE_BASELINE_BRANCH", default="canary")

    # Integer with default on invalid
    depth = env_int("FLAKE_FETCH_DEPTH", default=20)

    # All detector settings, with env overrides applied
    settings = DetectorSettings.from_env()
"""

from __future__ import annotations

import os
from dataclasses import dataclass

BASELINE_BRANCH = "canary"
REMOTE_NAME = "origin"
UPSTREAM_REPO = "vercel/next.js"
FETCH_DEPTH = 20


def env_str(name: str, default: str = "") -> str:
    """Read a CI or ``FLAKE_*`` variable, returning *default* when unset.

    An empty value is returned as-is; callers that treat empty as unset
    (the ``GITHUB_*`` fallback chain) check truthiness themselves.
    """
    return os.environ.get(name, default)


def env_int(name: str, default: int = 0) -> int:
    """Read an integer setting such as ``FLAKE_FETCH_DEPTH``.

    Unset or non-numeric values yield *default*.
    """
    val = os.environ.get(name)
    if val is None:
        return default
    try:
        return int(val)
    except ValueError:
        return default


@dataclass(frozen=True)
class DetectorSettings:
    """Tunables for changed-test detection.

    Attributes:
        baseline_branch: Branch the working tree is diffed against.
        remote: Remote the baseline branch is fetched from.
        upstream_repo: Identifier that marks the upstream repository in a
            remote URL or ``owner/name`` slug.
        fetch_depth: Number of baseline commits to fetch.
    """

    baseline_branch: str = BASELINE_BRANCH
    remote: str = REMOTE_NAME
    upstream_repo: str = UPSTREAM_REPO
    fetch_depth: int = FETCH_DEPTH

    @property
    def baseline_ref(self) -> str:
        """Remote-tracking ref for the baseline, e.g. ``origin/canary``."""
        return f"{self.remote}/{self.baseline_branch}"

    @classmethod
    def from_env(cls) -> DetectorSettings:
        """Build settings from ``FLAKE_*`` environment overrides.

        Empty string values are treated as unset.  A non-positive or
        non-numeric ``FLAKE_FETCH_DEPTH`` falls back to the default.
        """
        depth = env_int("FLAKE_FETCH_DEPTH", default=FETCH_DEPTH)
        if depth <= 0:
            depth = FETCH_DEPTH
        return cls(
            baseline_branch=env_str("FLAKE_BASELINE_BRANCH") or BASELINE_BRANCH,
            remote=env_str("FLAKE_REMOTE") or REMOTE_NAME,
            upstream_repo=env_str("FLAKE_UPSTREAM_REPO") or UPSTREAM_REPO,
            fetch_depth=depth,
        )
