"""Main layout engine — greedy first-fit-decreasing nesting on a roll."""

from __future__ import annotations

import logging
import math
import time

from dexstitch.config import DEFAULT_RULES, LayoutRules

from .aggregate import LayoutAggregator
from .candidates import make_generator
from .collision import make_collision_checker
from .geometry import translate
from .models import LayoutRequest, LayoutResult, PlacedPiece
from .orientation import orientations
from .ranking import rank_pieces


log = logging.getLogger(__name__)


class _Budget:
    """Counts collision checks and watches the clock for one call."""

    def __init__(self, rules: LayoutRules) -> None:
        self.max_evaluations = rules.max_evaluations
        self.deadline = (
            time.monotonic() + rules.time_budget_s
            if rules.time_budget_s is not None else None
        )
        self.evaluations = 0
        self.exhausted = False

    def spend(self) -> bool:
        """Charge one evaluation.  Returns False once the budget is gone."""
        if self.exhausted:
            return False
        if (self.max_evaluations is not None
                and self.evaluations >= self.max_evaluations):
            self.exhausted = True
        elif self.deadline is not None and time.monotonic() > self.deadline:
            self.exhausted = True
        else:
            self.evaluations += 1
        return not self.exhausted


def layout(
    request: LayoutRequest,
    rules: LayoutRules = DEFAULT_RULES,
) -> LayoutResult:
    """Lay out every piece of *request* on a roll of fixed width.

    Pieces are processed largest-first.  For each piece, every
    (rotation, candidate origin) pair is checked against the pieces
    already placed and the clear pair with the smallest origin y wins;
    ties go to the earlier rotation, then the earlier candidate.  A
    piece with no clear pair is dropped and processing continues.

    Never raises for a well-formed request: an empty list, a zero,
    negative or non-finite width, or pieces wider than the roll all give
    a valid (possibly incomplete) result.

    Parameters
    ----------
    request : LayoutRequest
        Pieces and roll dimensions.
    rules : LayoutRules
        Scan step, padding, strategies and budgets.

    Returns
    -------
    LayoutResult
        Placements in acceptance order plus area metrics.
    """
    if not request.pieces:
        return LayoutResult(placements=[], utilized_area=0.0, bin_area=0.0)

    bin_width = request.bin_width
    bin_height = (request.bin_height if request.bin_height is not None
                  else rules.bin_height_mm)

    if not math.isfinite(bin_width):
        log.warning("Roll width %r is not finite; dropping all %d pieces",
                    bin_width, len(request.pieces))
        return LayoutAggregator().result()

    generator = make_generator(bin_width, bin_height, rules)
    checker = make_collision_checker(rules)
    aggregator = LayoutAggregator()
    budget = _Budget(rules)

    if request.allow_mirroring:
        log.debug("allow_mirroring is set but mirrored placement is not supported")

    for piece in rank_pieces(request.pieces):
        if budget.exhausted:
            log.info("Dropped %s: evaluation budget exhausted", piece.id)
            continue

        best: PlacedPiece | None = None
        n_candidates = 0

        for orient in orientations(piece, rules, request.allow_rotation):
            for ox, oy in generator.candidates(orient.bbox, aggregator.placed):
                n_candidates += 1
                # Only a strictly lower y can beat the current best.
                if best is not None and oy >= best.origin_y:
                    continue
                if not budget.spend():
                    break
                bbox = orient.bbox.translated(ox, oy)
                outline = (translate(orient.outline, ox, oy)
                           if checker.needs_outline else None)
                if checker.collides(bbox, outline, aggregator.placed):
                    continue
                best = PlacedPiece(
                    piece_id=piece.id,
                    outline=(outline if outline is not None
                             else translate(orient.outline, ox, oy)),
                    bbox=bbox,
                    origin_x=ox,
                    origin_y=oy,
                    rotation_deg=orient.rotation_deg,
                )
            if budget.exhausted:
                log.warning(
                    "Layout budget exhausted after %d evaluations at piece %s; "
                    "remaining pieces are dropped",
                    budget.evaluations, piece.id,
                )
                break

        log.debug("%s: %d candidates considered", piece.id, n_candidates)

        if best is None:
            log.info("Dropped %s: no clear position on the %.0f mm roll",
                     piece.id, bin_width)
            continue

        aggregator.add(best)
        generator.commit(best)
        log.info("Placed %s at (%.1f, %.1f) rot=%d°",
                 best.piece_id, best.origin_x, best.origin_y, best.rotation_deg)

    return aggregator.result()
