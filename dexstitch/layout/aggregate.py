"""Layout aggregator — accepted placements and area accounting."""

from __future__ import annotations

from .models import LayoutResult, Placement, PlacedPiece


class LayoutAggregator:
    """Collects placed pieces in acceptance order."""

    def __init__(self) -> None:
        self.placed: list[PlacedPiece] = []
        self.utilized_area = 0.0
        self._max_x = 0.0
        self._max_y = 0.0

    def add(self, piece: PlacedPiece) -> None:
        self.placed.append(piece)
        self.utilized_area += piece.bbox.area
        self._max_x = max(self._max_x, piece.bbox.max_x)
        self._max_y = max(self._max_y, piece.bbox.max_y)

    @property
    def bin_area(self) -> float:
        """Area of the rectangle from the bin origin to the far corner."""
        if not self.placed:
            return 0.0
        return self._max_x * self._max_y

    def result(self) -> LayoutResult:
        bin_area = self.bin_area
        return LayoutResult(
            placements=[
                Placement(
                    piece_id=p.piece_id,
                    x=p.origin_x,
                    y=p.origin_y,
                    rotation_deg=p.rotation_deg,
                    flipped=p.flipped,
                )
                for p in self.placed
            ],
            utilized_area=self.utilized_area,
            bin_area=bin_area,
            efficiency=self.utilized_area / max(bin_area, 1.0),
        )
