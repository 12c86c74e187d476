"""Changed-test detection for CI flake runs."""

__version__ = "0.1.0"

from flake_tools.changed_tests import detect_changed_tests
from flake_tools.models import ClassificationResult, InvocationContext

__all__ = [
    "ClassificationResult",
    "InvocationContext",
    "detect_changed_tests",
    "__version__",
]
