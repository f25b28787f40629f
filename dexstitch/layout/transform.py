"""Apply placements to full pattern pieces for export encoders.

The engine only moves outlines.  Encoders need the grainline and notches
moved with them, rotated about (0, 0) and translated exactly like the
outline was.
"""

from __future__ import annotations

from typing import Sequence

from dexstitch.pattern.models import PatternPiece, Point

from .geometry import rotate
from .models import LayoutResult, Placement


def _place_points(points: Sequence[Point], placement: Placement) -> list[Point]:
    return [
        (x + placement.x, y + placement.y)
        for x, y in rotate(points, placement.rotation_deg)
    ]


def place_piece(piece: PatternPiece, placement: Placement) -> PatternPiece:
    """Return a copy of *piece* moved into bin coordinates."""
    return PatternPiece(
        id=piece.id,
        outline=_place_points(piece.outline, placement),
        name=piece.name,
        seam_allowance_mm=piece.seam_allowance_mm,
        grainline=(_place_points(piece.grainline, placement)
                   if piece.grainline is not None else None),
        notches=_place_points(piece.notches, placement),
    )


def placed_pieces(
    pieces: Sequence[PatternPiece], result: LayoutResult,
) -> list[PatternPiece]:
    """Moved copies of every placed piece, in placement order.

    Placements whose piece id is not among *pieces* are skipped.
    """
    by_id = {p.id: p for p in pieces}
    return [
        place_piece(by_id[pl.piece_id], pl)
        for pl in result.placements
        if pl.piece_id in by_id
    ]
