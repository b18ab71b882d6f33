"""Failure types raised by lagoon transforms."""

from __future__ import annotations


class LagoonError(ValueError):
    """Base class for geometry or precondition failures in the pipeline."""


class DegeneratePathError(LagoonError):
    """The path has no segments, so nothing encloses an area."""


class OpenLoopError(LagoonError):
    """The path does not return to its origin."""


class GridTooLargeError(LagoonError):
    """The normalized bounding box exceeds the configured cell budget."""


class FillLeakError(LagoonError):
    """The flood fill escaped the boundary and reached the grid edge."""


class PipelineError(LagoonError):
    """No area was produced. ``errors`` maps transform IDs to messages."""

    def __init__(self, errors: dict[str, str], skipped: dict[str, str] | None = None) -> None:
        self.errors = dict(errors)
        self.skipped = dict(skipped or {})
        detail = "; ".join(f"{tid}: {msg}" for tid, msg in sorted(self.errors.items()))
        super().__init__(detail or "pipeline produced no area")
