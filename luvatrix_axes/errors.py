from __future__ import annotations


class AxisConfigError(ValueError):
    """Raised when chart input cannot be turned into axis definitions."""


class AxisLayoutError(RuntimeError):
    """Raised when a layout pass is requested for an unusable canvas."""
