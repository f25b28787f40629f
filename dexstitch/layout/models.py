"""Layout request/result dataclasses and fixed layout constants."""

from __future__ import annotations

from dataclasses import dataclass, field

from dexstitch.pattern.models import PatternPiece, Point

from .geometry import BoundingBox


VALID_ROTATIONS = (0, 90, 180, 270)


# ── Input ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class LayoutRequest:
    """One layout call: pieces to lay out on a roll of fixed width.

    ``bin_height`` None means "use the rules' roll length".
    ``allow_mirroring`` is accepted for interface compatibility and is
    never acted upon.
    """

    pieces: tuple[PatternPiece, ...]
    bin_width: float
    bin_height: float | None = None
    allow_rotation: bool = True
    allow_mirroring: bool = False

    def __post_init__(self) -> None:
        # Accept any sequence; store an immutable tuple.
        object.__setattr__(self, "pieces", tuple(self.pieces))


# ── Working state (one call only) ──────────────────────────────────


@dataclass(frozen=True)
class Orientation:
    """A piece outline turned by one of VALID_ROTATIONS about (0, 0)."""

    rotation_deg: int
    outline: list[Point]
    bbox: BoundingBox


@dataclass(frozen=True)
class PlacedPiece:
    """A piece committed to the roll, in bin coordinates."""

    piece_id: str
    outline: list[Point]
    bbox: BoundingBox
    origin_x: float
    origin_y: float
    rotation_deg: int
    flipped: bool = False


# ── Output ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Placement:
    """Where a piece went: rotate about (0, 0) by ``rotation_deg``, then
    translate by (x, y)."""

    piece_id: str
    x: float
    y: float
    rotation_deg: int
    flipped: bool = False


@dataclass
class LayoutResult:
    """Outcome of one layout call.

    Pieces that could not be placed are simply absent from
    ``placements``.
    """

    placements: list[Placement] = field(default_factory=list)
    utilized_area: float = 0.0
    bin_area: float = 0.0
    efficiency: float | None = None


def unplaced_piece_ids(request: LayoutRequest, result: LayoutResult) -> list[str]:
    """IDs of request pieces missing from the result, in input order."""
    placed = {p.piece_id for p in result.placements}
    return [piece.id for piece in request.pieces if piece.id not in placed]
