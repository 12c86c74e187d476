"""Data models for changed-test detection."""

from flake_tools.models.classification import ClassificationResult
from flake_tools.models.context import InvocationContext, PullRequestHead

__all__ = [
    "ClassificationResult",
    "InvocationContext",
    "PullRequestHead",
]
