"""Pattern piece validation — flag outlines the layout will treat oddly."""

from __future__ import annotations

from shapely.geometry import Polygon

from .models import PatternPiece


def validate_pieces(pieces: list[PatternPiece]) -> list[str]:
    """Check pieces for layout-relevant problems. Returns messages (empty = valid).

    Nothing here is fatal for layout: a degenerate outline simply becomes
    a zero-size box.  Callers surface these as warnings.
    """
    errors: list[str] = []

    # ── Piece IDs must be unique ──
    seen_ids: set[str] = set()
    for piece in pieces:
        if piece.id in seen_ids:
            errors.append(f"Duplicate piece id '{piece.id}'")
        seen_ids.add(piece.id)

    for piece in pieces:
        # ── Outline shape ──
        if len(piece.outline) < 3:
            errors.append(
                f"Piece '{piece.id}': outline must have at least 3 points "
                f"(has {len(piece.outline)})"
            )
        else:
            poly = Polygon(piece.outline)
            if not poly.is_valid:
                errors.append(
                    f"Piece '{piece.id}': outline is self-intersecting or invalid"
                )
            elif poly.area <= 0:
                errors.append(f"Piece '{piece.id}': outline has zero area")

        # ── Annotations ──
        if piece.grainline is not None and len(piece.grainline) != 2:
            errors.append(
                f"Piece '{piece.id}': grainline must have exactly 2 points "
                f"(has {len(piece.grainline)})"
            )
        if piece.seam_allowance_mm < 0:
            errors.append(f"Piece '{piece.id}': seam_allowance_mm must be >= 0")

    return errors
