"""Models for classified changed tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ClassificationResult:
    """Changed test files split by the build mode they run under.

    Attributes:
        dev_tests: Test paths to run against the development server.
        prod_tests: Test paths to run against a production build.
        commit_sha: Commit the classification was computed for.  ``None``
            when detection was skipped for the baseline branch itself.
    """

    dev_tests: list[str] = field(default_factory=list)
    prod_tests: list[str] = field(default_factory=list)
    commit_sha: str | None = None

    def add_dev(self, path: str) -> None:
        if path not in self.dev_tests:
            self.dev_tests.append(path)

    def add_prod(self, path: str) -> None:
        if path not in self.prod_tests:
            self.prod_tests.append(path)

    @property
    def is_empty(self) -> bool:
        return not self.dev_tests and not self.prod_tests

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "devTests": list(self.dev_tests),
            "prodTests": list(self.prod_tests),
        }
        if self.commit_sha is not None:
            d["commitSha"] = self.commit_sha
        return d
