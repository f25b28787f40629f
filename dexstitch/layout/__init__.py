"""Layout — nests pattern pieces on a fixed-width roll.

Submodules:
  models        Request/result dataclasses and the rotation set.
  geometry      Bounding boxes, rotation about the origin, padded overlap.
  ranking       Largest-first piece ordering.
  orientation   Quarter-turn variants of a piece.
  candidates    Candidate origin generators (extreme points, skyline).
  collision     Collision checkers (padded boxes, exact polygons).
  aggregate     Accepted placements and area metrics.
  engine        Main layout loop (layout).
  transform     Apply placements to full pieces for encoders.
  serialization JSON conversion (layout_to_dict, parse_layout_request, ...).
"""

from .models import (
    LayoutRequest, LayoutResult, Placement, PlacedPiece, VALID_ROTATIONS,
    unplaced_piece_ids,
)
from .engine import layout
from .geometry import BoundingBox, bounding_box, rotate, boxes_overlap
from .transform import place_piece, placed_pieces
from .serialization import (
    layout_to_dict, parse_layout_result,
    layout_request_to_dict, parse_layout_request,
)

__all__ = [
    # Models
    "LayoutRequest", "LayoutResult", "Placement", "PlacedPiece",
    "VALID_ROTATIONS", "unplaced_piece_ids",
    # Engine
    "layout",
    # Geometry (used by encoders and tests)
    "BoundingBox", "bounding_box", "rotate", "boxes_overlap",
    # Transforms
    "place_piece", "placed_pieces",
    # Serialization
    "layout_to_dict", "parse_layout_result",
    "layout_request_to_dict", "parse_layout_request",
]
