"""Layout rules shared by the nesting engine and its HTTP surface.

All distances are in millimetres.  The engine reads every tunable from a
single ``LayoutRules`` instance, so tests can scale the whole heuristic
(scan step, padding, roll length) without touching module constants.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


CANDIDATE_STRATEGIES = ("extreme_points", "skyline")
COLLISION_MODES = ("bbox", "polygon")


@dataclass(frozen=True)
class LayoutRules:
    """Tunables for one layout computation."""

    scan_step_mm: float = 50.0
    """Step between baseline-row candidate positions."""

    padding_mm: float = 10.0
    """Minimum gap between the bounding boxes of two placed pieces."""

    bin_height_mm: float = 5000.0
    """Roll length used when a request does not give one."""

    containment_tolerance_mm: float = 1.0
    """How far a placed box may poke past the roll width.  Only used by
    checks on the result, not by the engine."""

    max_scan_positions: int = 10_000
    """Cap on baseline-row candidates per orientation, so a very wide roll
    cannot stall candidate generation."""

    respect_allow_rotation: bool = False
    """When False the request's ``allow_rotation`` flag is ignored and all
    four quarter turns are always tried."""

    candidate_strategy: str = "extreme_points"
    """One of CANDIDATE_STRATEGIES."""

    collision: str = "bbox"
    """One of COLLISION_MODES.  ``polygon`` refines box hits with exact
    outline distance."""

    max_evaluations: int | None = None
    """Cap on collision checks per call (None = unbounded)."""

    time_budget_s: float | None = None
    """Wall-clock cap per call in seconds (None = unbounded)."""

    def with_overrides(self, **changes) -> LayoutRules:
        """Return a copy with some fields replaced."""
        return replace(self, **changes)


# Module-level singleton, importable everywhere.
DEFAULT_RULES = LayoutRules()
