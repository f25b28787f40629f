"""
FastAPI web server — HTTP surface over the layout engine.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from dexstitch.config import (
    CANDIDATE_STRATEGIES, COLLISION_MODES, DEFAULT_RULES, LayoutRules,
)
from dexstitch.layout import (
    layout, layout_to_dict, parse_layout_request, parse_layout_result,
    unplaced_piece_ids,
)
from dexstitch.pattern import LayoutRequestError, parse_pieces, validate_pieces
from dexstitch.preview import build_preview


log = logging.getLogger(__name__)


# ── App ────────────────────────────────────────────────────────────

app = FastAPI(title="DexStitch Layout")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Models ─────────────────────────────────────────────────────────

class LayoutBody(BaseModel):
    pieces: list[dict[str, Any]]
    bin_width: float
    bin_height: float | None = None
    allow_rotation: bool = True
    allow_mirroring: bool = False
    candidate_strategy: str | None = None     # override LayoutRules
    collision: str | None = None


class PreviewBody(BaseModel):
    pieces: list[dict[str, Any]]
    layout: dict[str, Any] | None = None


def _rules_for(body: LayoutBody) -> LayoutRules:
    overrides: dict[str, str] = {}
    if body.candidate_strategy is not None:
        if body.candidate_strategy not in CANDIDATE_STRATEGIES:
            raise HTTPException(
                422, f"candidate_strategy must be one of {CANDIDATE_STRATEGIES}",
            )
        overrides["candidate_strategy"] = body.candidate_strategy
    if body.collision is not None:
        if body.collision not in COLLISION_MODES:
            raise HTTPException(422, f"collision must be one of {COLLISION_MODES}")
        overrides["collision"] = body.collision
    return DEFAULT_RULES.with_overrides(**overrides) if overrides else DEFAULT_RULES


# ── Routes ─────────────────────────────────────────────────────────

@app.get("/api/health")
def health():
    return {"status": "ok"}


@app.post("/api/layout")
def run_layout(body: LayoutBody):
    """Lay out the given pieces and report which ones did not fit."""
    rules = _rules_for(body)
    try:
        request = parse_layout_request(
            body.model_dump(exclude={"candidate_strategy", "collision"}),
        )
    except LayoutRequestError as exc:
        raise HTTPException(422, str(exc)) from exc

    warnings = validate_pieces(list(request.pieces))
    for w in warnings:
        log.warning("Layout input: %s", w)

    result = layout(request, rules)
    unplaced = unplaced_piece_ids(request, result)
    if unplaced:
        log.info("Layout left %d of %d pieces unplaced: %s",
                 len(unplaced), len(request.pieces), ", ".join(unplaced))

    return {
        **layout_to_dict(result),
        "unplaced": unplaced,
        "warnings": warnings,
    }


@app.post("/api/preview")
def preview(body: PreviewBody):
    """Overall bounds of the pieces, or of their placed copies."""
    try:
        pieces = parse_pieces(body.pieces)
        result = (parse_layout_result(body.layout)
                  if body.layout is not None else None)
    except LayoutRequestError as exc:
        raise HTTPException(422, str(exc)) from exc

    pv = build_preview(pieces, result)
    b = pv.bounds
    return {
        "bounds": (
            {"min_x": b.min_x, "min_y": b.min_y, "max_x": b.max_x, "max_y": b.max_y}
            if b is not None else None
        ),
        "piece_ids": [p.id for p in pv.pieces],
    }


def main(host: str = "127.0.0.1", port: int = 8000):
    import uvicorn
    uvicorn.run("dexstitch.web.server:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
