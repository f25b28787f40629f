"""Piece ordering — largest bounding box first (first-fit-decreasing)."""

from __future__ import annotations

from typing import Sequence

from dexstitch.pattern.models import PatternPiece

from .geometry import bounding_box


def rank_pieces(pieces: Sequence[PatternPiece]) -> list[PatternPiece]:
    """Return pieces sorted by descending bounding-box area.

    The sort is stable, so equal-area pieces keep their input order.
    """
    areas = {id(p): bounding_box(p.outline).area for p in pieces}
    return sorted(pieces, key=lambda p: areas[id(p)], reverse=True)
