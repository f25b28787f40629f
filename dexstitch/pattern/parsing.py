"""Pattern piece parsing — convert raw dicts/JSON into PatternPiece."""

from __future__ import annotations

from .models import PatternPiece, Point


class LayoutRequestError(ValueError):
    """Raised when a raw dict cannot be parsed into layout input."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


def parse_point(data, path: str = "point") -> Point:
    """Parse ``{"x": .., "y": ..}`` or ``[x, y]`` into an (x, y) tuple."""
    try:
        if isinstance(data, dict):
            return (float(data["x"]), float(data["y"]))
        if isinstance(data, (list, tuple)) and len(data) == 2:
            return (float(data[0]), float(data[1]))
    except (KeyError, TypeError, ValueError) as exc:
        raise LayoutRequestError(path, f"invalid point {data!r}") from exc
    raise LayoutRequestError(path, f"expected {{x, y}} or [x, y], got {data!r}")


def _parse_points(data, path: str) -> list[Point]:
    if not isinstance(data, list):
        raise LayoutRequestError(path, "expected a list of points")
    return [parse_point(p, f"{path}[{i}]") for i, p in enumerate(data)]


def parse_piece(data: dict, path: str = "piece") -> PatternPiece:
    """Parse a raw dict into a PatternPiece.

    Format:
        {"id": "front", "name": "Front", "outline": [{"x": 0, "y": 0}, ...],
         "seam_allowance_mm": 10, "grainline": [[50, 20], [50, 300]],
         "notches": [[0, 150]]}
    """
    if not isinstance(data, dict):
        raise LayoutRequestError(path, "expected an object")
    if "id" not in data:
        raise LayoutRequestError(f"{path}.id", "missing")
    if "outline" not in data:
        raise LayoutRequestError(f"{path}.outline", "missing")

    grainline = data.get("grainline")
    try:
        seam = float(data.get("seam_allowance_mm") or 0)
    except (TypeError, ValueError) as exc:
        raise LayoutRequestError(f"{path}.seam_allowance_mm",
                                 "must be a number") from exc

    return PatternPiece(
        id=str(data["id"]),
        outline=_parse_points(data["outline"], f"{path}.outline"),
        name=str(data.get("name") or ""),
        seam_allowance_mm=seam,
        grainline=(_parse_points(grainline, f"{path}.grainline")
                   if grainline is not None else None),
        notches=_parse_points(data.get("notches") or [], f"{path}.notches"),
    )


def parse_pieces(data: list, path: str = "pieces") -> list[PatternPiece]:
    """Parse a list of raw piece dicts."""
    if not isinstance(data, list):
        raise LayoutRequestError(path, "expected a list of pieces")
    return [parse_piece(p, f"{path}[{i}]") for i, p in enumerate(data)]


def piece_to_dict(piece: PatternPiece) -> dict:
    """Convert a PatternPiece to a JSON-serializable dict."""
    return {
        "id": piece.id,
        **({"name": piece.name} if piece.name else {}),
        "outline": [{"x": x, "y": y} for x, y in piece.outline],
        **({"seam_allowance_mm": piece.seam_allowance_mm}
           if piece.seam_allowance_mm else {}),
        **({"grainline": [{"x": x, "y": y} for x, y in piece.grainline]}
           if piece.grainline is not None else {}),
        **({"notches": [{"x": x, "y": y} for x, y in piece.notches]}
           if piece.notches else {}),
    }
