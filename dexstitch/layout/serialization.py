"""Layout serialization — JSON conversion for requests and results."""

from __future__ import annotations

from dexstitch.pattern.parsing import LayoutRequestError, parse_pieces, piece_to_dict

from .models import LayoutRequest, LayoutResult, Placement, VALID_ROTATIONS


def _number(data: dict, key: str, path: str) -> float:
    if key not in data:
        raise LayoutRequestError(f"{path}.{key}", "missing")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LayoutRequestError(f"{path}.{key}", f"must be a number, got {value!r}")
    return float(value)


def _flag(data: dict, key: str, default: bool, path: str) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise LayoutRequestError(f"{path}.{key}", f"must be true or false, got {value!r}")
    return value


def layout_request_to_dict(request: LayoutRequest) -> dict:
    """Serialize a LayoutRequest to a JSON-safe dict."""
    return {
        "pieces": [piece_to_dict(p) for p in request.pieces],
        "bin_width": request.bin_width,
        **({"bin_height": request.bin_height}
           if request.bin_height is not None else {}),
        "allow_rotation": request.allow_rotation,
        "allow_mirroring": request.allow_mirroring,
    }


def parse_layout_request(data: dict) -> LayoutRequest:
    """Parse a raw dict (from JSON / HTTP body) into a LayoutRequest."""
    if not isinstance(data, dict):
        raise LayoutRequestError("request", "expected an object")
    if "pieces" not in data:
        raise LayoutRequestError("request.pieces", "missing")

    bin_height = None
    if data.get("bin_height") is not None:
        bin_height = _number(data, "bin_height", "request")

    return LayoutRequest(
        pieces=parse_pieces(data["pieces"]),
        bin_width=_number(data, "bin_width", "request"),
        bin_height=bin_height,
        allow_rotation=_flag(data, "allow_rotation", True, "request"),
        allow_mirroring=_flag(data, "allow_mirroring", False, "request"),
    )


def layout_to_dict(result: LayoutResult) -> dict:
    """Serialize a LayoutResult to a JSON-safe dict."""
    return {
        "placements": [
            {
                "piece_id": p.piece_id,
                "x": p.x,
                "y": p.y,
                "rotation_deg": p.rotation_deg,
                "flipped": p.flipped,
            }
            for p in result.placements
        ],
        "utilized_area": result.utilized_area,
        "bin_area": result.bin_area,
        **({"efficiency": result.efficiency}
           if result.efficiency is not None else {}),
    }


def parse_layout_result(data: dict) -> LayoutResult:
    """Parse a layout dict back into a LayoutResult."""
    if not isinstance(data, dict):
        raise LayoutRequestError("layout", "expected an object")

    placements = []
    for i, p in enumerate(data.get("placements") or []):
        path = f"layout.placements[{i}]"
        if not isinstance(p, dict) or "piece_id" not in p:
            raise LayoutRequestError(path, "expected an object with piece_id")
        rotation = int(_number(p, "rotation_deg", path))
        if rotation not in VALID_ROTATIONS:
            raise LayoutRequestError(
                f"{path}.rotation_deg",
                f"must be one of {VALID_ROTATIONS}, got {rotation}",
            )
        placements.append(Placement(
            piece_id=str(p["piece_id"]),
            x=_number(p, "x", path),
            y=_number(p, "y", path),
            rotation_deg=rotation,
            flipped=bool(p.get("flipped", False)),
        ))

    efficiency = data.get("efficiency")
    return LayoutResult(
        placements=placements,
        utilized_area=float(data.get("utilized_area", 0.0)),
        bin_area=float(data.get("bin_area", 0.0)),
        efficiency=float(efficiency) if efficiency is not None else None,
    )
