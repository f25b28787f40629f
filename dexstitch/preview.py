"""Preview builder — overall bounds for on-screen or print preview."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from dexstitch.layout.geometry import BoundingBox, bounding_box
from dexstitch.layout.models import LayoutResult
from dexstitch.layout.transform import placed_pieces
from dexstitch.pattern.models import PatternPiece, Point


@dataclass
class Preview:
    """What a viewer needs to frame a pattern (and its layout)."""

    pieces: list[PatternPiece]
    layout: LayoutResult | None
    bounds: BoundingBox | None


def _piece_points(pieces: Sequence[PatternPiece]) -> list[Point]:
    points: list[Point] = []
    for piece in pieces:
        points.extend(piece.outline)
        points.extend(piece.notches)
        if piece.grainline:
            points.extend(piece.grainline)
    return points


def build_preview(
    pieces: Sequence[PatternPiece],
    layout: LayoutResult | None = None,
) -> Preview:
    """Frame *pieces*, or only their placed copies when a layout is given.

    Outline, notch and grainline points all count toward the bounds.
    ``bounds`` is None when there is nothing to frame.
    """
    shown = placed_pieces(pieces, layout) if layout is not None else list(pieces)
    points = _piece_points(shown)
    return Preview(
        pieces=shown,
        layout=layout,
        bounds=bounding_box(points) if points else None,
    )
