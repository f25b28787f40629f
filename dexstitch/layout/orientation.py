"""Orientation search — the quarter-turn variants of a piece."""

from __future__ import annotations

from dexstitch.config import LayoutRules
from dexstitch.pattern.models import PatternPiece

from .geometry import bounding_box, rotate
from .models import Orientation, VALID_ROTATIONS


def orientations(
    piece: PatternPiece,
    rules: LayoutRules,
    allow_rotation: bool = True,
) -> list[Orientation]:
    """Rotated variants of *piece* in the fixed order 0°, 90°, 180°, 270°.

    Every quarter turn is tried unless the rules opt in to honouring the
    request's ``allow_rotation`` flag and that flag is off.
    """
    angles = VALID_ROTATIONS
    if rules.respect_allow_rotation and not allow_rotation:
        angles = (0,)

    result = []
    for angle in angles:
        outline = rotate(piece.outline, angle)
        result.append(Orientation(
            rotation_deg=angle,
            outline=outline,
            bbox=bounding_box(outline),
        ))
    return result
