"""Custom exceptions for changed-test detection."""

from __future__ import annotations


class ChangedTestsError(Exception):
    """Base exception for changed-test detection errors."""


class ContextResolutionError(ChangedTestsError):
    """A git query needed to resolve the invocation context failed."""

    def __init__(self, field: str, command: str, detail: str = "") -> None:
        self.field = field
        self.command = command
        self.detail = detail
        message = f"Could not resolve {field} via `{command}`"
        if detail:
            message += f": {detail}"
        super().__init__(message)
