"""Pattern pieces — dataclasses, parsing, validation, and serialization."""

from .models import PatternPiece, Point
from .parsing import (
    LayoutRequestError, parse_point, parse_piece, parse_pieces, piece_to_dict,
)
from .validation import validate_pieces

__all__ = [
    # Models
    "PatternPiece", "Point",
    # Parsing / Validation / Serialization
    "LayoutRequestError", "parse_point", "parse_piece", "parse_pieces",
    "piece_to_dict", "validate_pieces",
]
