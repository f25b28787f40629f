"""Pattern piece dataclasses — the layout engine's input structure."""

from __future__ import annotations

from dataclasses import dataclass, field


Point = tuple[float, float]     # (x, y) in mm


@dataclass
class PatternPiece:
    """One cuttable component of a garment.

    Only ``id`` and ``outline`` matter to layout.  The annotations
    (grainline, notches, seam allowance) ride along so encoders can
    transform them with the same placement as the outline.
    """

    id: str
    outline: list[Point]
    name: str = ""
    seam_allowance_mm: float = 0.0
    grainline: list[Point] | None = None     # [start, end]
    notches: list[Point] = field(default_factory=list)
