"""Shared fixtures for flake-tools tests."""

from __future__ import annotations

import pytest

_CI_VARS = (
    "GITHUB_EVENT_PATH",
    "GITHUB_REF_NAME",
    "GITHUB_REPOSITORY",
    "GITHUB_SHA",
    "FLAKE_BASELINE_BRANCH",
    "FLAKE_REMOTE",
    "FLAKE_UPSTREAM_REPO",
    "FLAKE_FETCH_DEPTH",
)


@pytest.fixture(autouse=True)
def _clean_ci_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests run inside CI too; never let the host's GitHub env leak in."""
    for name in _CI_VARS:
        monkeypatch.delenv(name, raising=False)
