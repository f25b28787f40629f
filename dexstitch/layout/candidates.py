"""Candidate position generators.

A generator proposes placement origins for one orientation of a piece.
An origin is the translation applied after rotation, so a candidate
``(ox, oy)`` puts the orientation's bounding box at
``bbox.translated(ox, oy)``.

Two implementations share the contract:

  ExtremePointGenerator  baseline row + corners of every placed piece
  SkylineGenerator       corners of a skyline keyed by x-interval
"""

from __future__ import annotations

import math
from typing import Sequence

from dexstitch.config import LayoutRules

from .geometry import BoundingBox, round_half_up
from .models import PlacedPiece


Origin = tuple[float, float]


def dedupe_origins(origins: Sequence[Origin]) -> list[Origin]:
    """Drop origins that round to an already-seen whole-mm position.

    The first occurrence is kept unrounded; order is preserved.
    """
    seen: set[tuple[int, int]] = set()
    out: list[Origin] = []
    for ox, oy in origins:
        key = (round_half_up(ox), round_half_up(oy))
        if key in seen:
            continue
        seen.add(key)
        out.append((ox, oy))
    return out


class CandidateGenerator:
    """Base class: one instance lives for a single layout call."""

    def __init__(self, bin_width: float, bin_height: float,
                 rules: LayoutRules) -> None:
        self.bin_width = bin_width
        self.bin_height = bin_height
        self.rules = rules

    def candidates(
        self, bbox: BoundingBox, placed: Sequence[PlacedPiece],
    ) -> list[Origin]:
        raise NotImplementedError

    def commit(self, piece: PlacedPiece) -> None:
        """Called once for every accepted placement."""


class ExtremePointGenerator(CandidateGenerator):
    """Baseline row plus positions stacked on / beside each placed piece."""

    def candidates(
        self, bbox: BoundingBox, placed: Sequence[PlacedPiece],
    ) -> list[Origin]:
        w, h = bbox.width, bbox.height
        step = self.rules.scan_step_mm
        pad = self.rules.padding_mm
        origins: list[Origin] = []

        # Baseline row: box min corner at (x, 0)
        span = self.bin_width - w
        if step > 0 and math.isfinite(span) and span >= 0:
            count = min(int(span // step) + 1, self.rules.max_scan_positions)
            for i in range(count):
                origins.append((i * step - bbox.min_x, -bbox.min_y))

        for p in placed:
            # Stacked on top, left edges aligned
            sx = p.bbox.min_x
            sy = p.bbox.max_y + pad
            if sx >= 0 and sx + w <= self.bin_width and sy + h <= self.bin_height:
                origins.append((sx - bbox.min_x, sy - bbox.min_y))

            # Beside, bottom edges aligned
            bx = p.bbox.max_x + pad
            by = p.bbox.min_y
            if bx + w <= self.bin_width:
                origins.append((bx - bbox.min_x, by - bbox.min_y))

        return dedupe_origins(origins)


class SkylineGenerator(CandidateGenerator):
    """Candidates on a skyline of ``(x_start, x_end, top)`` segments.

    The skyline is updated on ``commit`` so candidate generation scales
    with the number of segments, not with the number of placed pieces.
    """

    def __init__(self, bin_width: float, bin_height: float,
                 rules: LayoutRules) -> None:
        super().__init__(bin_width, bin_height, rules)
        self.segments: list[tuple[float, float, float]] = (
            [(0.0, bin_width, 0.0)] if bin_width > 0 else []
        )

    def _height_over(self, x0: float, x1: float) -> float:
        """Highest skyline top over the open interval (x0, x1)."""
        top = 0.0
        for s0, s1, t in self.segments:
            if s0 < x1 and x0 < s1 and t > top:
                top = t
        return top

    def candidates(
        self, bbox: BoundingBox, placed: Sequence[PlacedPiece],
    ) -> list[Origin]:
        w, h = bbox.width, bbox.height
        pad = self.rules.padding_mm

        xs: list[float] = [0.0]
        for s0, s1, _ in self.segments:
            xs.append(s0)
            xs.append(s1 + pad)

        origins: list[Origin] = []
        for x in xs:
            if x < 0 or x + w > self.bin_width:
                continue
            top = self._height_over(x - pad, x + w + pad)
            y = top + pad if top > 0 else 0.0
            if y + h > self.bin_height:
                continue
            origins.append((x - bbox.min_x, y - bbox.min_y))
        return dedupe_origins(origins)

    def commit(self, piece: PlacedPiece) -> None:
        x0 = max(piece.bbox.min_x, 0.0)
        x1 = min(piece.bbox.max_x, self.bin_width)
        if x1 <= x0:
            return
        top = piece.bbox.max_y

        updated: list[tuple[float, float, float]] = []
        for s0, s1, t in self.segments:
            if s1 <= x0 or s0 >= x1:
                updated.append((s0, s1, t))
                continue
            if s0 < x0:
                updated.append((s0, x0, t))
            updated.append((max(s0, x0), min(s1, x1), max(t, top)))
            if s1 > x1:
                updated.append((x1, s1, t))

        # Merge neighbours with equal tops
        merged: list[tuple[float, float, float]] = []
        for seg in updated:
            if merged and merged[-1][2] == seg[2] and merged[-1][1] == seg[0]:
                merged[-1] = (merged[-1][0], seg[1], seg[2])
            else:
                merged.append(seg)
        self.segments = merged


GENERATORS: dict[str, type[CandidateGenerator]] = {
    "extreme_points": ExtremePointGenerator,
    "skyline": SkylineGenerator,
}


def make_generator(
    bin_width: float, bin_height: float, rules: LayoutRules,
) -> CandidateGenerator:
    """Build the generator named by ``rules.candidate_strategy``."""
    try:
        cls = GENERATORS[rules.candidate_strategy]
    except KeyError:
        raise ValueError(
            f"Unknown candidate strategy '{rules.candidate_strategy}' "
            f"(expected one of {sorted(GENERATORS)})"
        ) from None
    return cls(bin_width, bin_height, rules)
