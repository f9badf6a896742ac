"""Host-facing runtime pieces: persisted settings and the recompute hook."""

from __future__ import annotations

from .view import IndentMarkerView, PassInputs

__all__ = ["IndentMarkerView", "PassInputs"]
