"""Models for the CI invocation context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _dig(data: Any, *keys: str) -> str:
    """Follow *keys* through nested dicts, returning ``""`` on any miss."""
    for key in keys:
        if not isinstance(data, dict):
            return ""
        data = data.get(key)
    return data if isinstance(data, str) else ""


@dataclass(frozen=True)
class PullRequestHead:
    """Fields read from ``pull_request.head`` of a GitHub event payload.

    Attributes:
        ref: Head branch name.
        repo_full_name: ``owner/name`` of the head repository.
        sha: Head commit SHA.
    """

    ref: str = ""
    repo_full_name: str = ""
    sha: str = ""

    @classmethod
    def from_event(cls, event: Any) -> PullRequestHead:
        """Extract the head fields from a decoded event payload.

        Any missing or wrongly-typed level yields empty strings, so a push
        event (no ``pull_request`` key) produces an empty head.
        """
        head = event.get("pull_request") if isinstance(event, dict) else None
        return cls(
            ref=_dig(head, "head", "ref"),
            repo_full_name=_dig(head, "head", "repo", "full_name"),
            sha=_dig(head, "head", "sha"),
        )


@dataclass(frozen=True)
class InvocationContext:
    """Branch, remote and commit the current CI run is operating on."""

    branch_name: str
    remote_url: str
    commit_sha: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "branchName": self.branch_name,
            "remoteUrl": self.remote_url,
            "commitSha": self.commit_sha,
        }
