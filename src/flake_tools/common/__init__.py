"""Common utilities for flake-tools."""

from flake_tools.common.config import DetectorSettings

__all__ = ["DetectorSettings"]
