"""Collision checkers — is a candidate clear of everything already placed?"""

from __future__ import annotations

from typing import Sequence

from shapely.geometry import Polygon

from dexstitch.config import LayoutRules
from dexstitch.pattern.models import Point

from .geometry import BoundingBox, EPS, boxes_overlap
from .models import PlacedPiece


class BoxCollisionChecker:
    """Padded bounding-box overlap against every placed piece.

    Concave or oddly shaped pieces can be rejected where their outlines
    would not actually touch.  Never accepts a real overlap.
    """

    needs_outline = False

    def __init__(self, padding: float) -> None:
        self.padding = padding

    def collides(
        self,
        bbox: BoundingBox,
        outline: Sequence[Point] | None,
        placed: Sequence[PlacedPiece],
    ) -> bool:
        for p in placed:
            if boxes_overlap(bbox, p.bbox, self.padding):
                return True
        return False


class PolygonCollisionChecker(BoxCollisionChecker):
    """Box test first, then exact outline distance for the box hits."""

    needs_outline = True

    def __init__(self, padding: float) -> None:
        super().__init__(padding)
        self._polys: dict[int, Polygon] = {}

    def _polygon(self, outline: Sequence[Point]) -> Polygon | None:
        if len(outline) < 3:
            return None
        poly = Polygon(outline)
        if not poly.is_valid:
            poly = poly.buffer(0)
        if poly.is_empty or poly.area == 0:
            return None
        return poly

    def _placed_polygon(self, p: PlacedPiece) -> Polygon | None:
        key = id(p)
        if key not in self._polys:
            self._polys[key] = self._polygon(p.outline)
        return self._polys[key]

    def collides(
        self,
        bbox: BoundingBox,
        outline: Sequence[Point],
        placed: Sequence[PlacedPiece],
    ) -> bool:
        candidate = None
        for p in placed:
            if not boxes_overlap(bbox, p.bbox, self.padding):
                continue
            if candidate is None:
                candidate = self._polygon(outline)
            other = self._placed_polygon(p)
            # Degenerate outlines fall back to their boxes.
            if candidate is None or other is None:
                return True
            if candidate.distance(other) < self.padding - EPS:
                return True
            if candidate.intersects(other):
                return True
        return False


def make_collision_checker(rules: LayoutRules) -> BoxCollisionChecker:
    """Build the checker named by ``rules.collision``."""
    if rules.collision == "bbox":
        return BoxCollisionChecker(rules.padding_mm)
    if rules.collision == "polygon":
        return PolygonCollisionChecker(rules.padding_mm)
    raise ValueError(
        f"Unknown collision mode '{rules.collision}' "
        f"(expected 'bbox' or 'polygon')"
    )
