"""Geometry kernel for the layout engine — boxes, rotation, translation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from dexstitch.pattern.models import Point


# Gaps are compared with this slack so a gap of exactly ``padding``
# counts as clear despite float round-off.
EPS = 1e-9


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounding box in mm (min <= max on both axes)."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def area(self) -> float:
        return self.width * self.height

    def translated(self, dx: float, dy: float) -> BoundingBox:
        return BoundingBox(self.min_x + dx, self.min_y + dy,
                           self.max_x + dx, self.max_y + dy)


ZERO_BOX = BoundingBox(0.0, 0.0, 0.0, 0.0)


def bounding_box(outline: Sequence[Point]) -> BoundingBox:
    """Bounding box of a point sequence; the empty sequence gives ZERO_BOX."""
    if not outline:
        return ZERO_BOX
    min_x, min_y = outline[0]
    max_x, max_y = min_x, min_y
    for x, y in outline[1:]:
        if x < min_x:
            min_x = x
        elif x > max_x:
            max_x = x
        if y < min_y:
            min_y = y
        elif y > max_y:
            max_y = y
    return BoundingBox(min_x, min_y, max_x, max_y)


def union_box(boxes: Sequence[BoundingBox]) -> BoundingBox | None:
    """Smallest box enclosing all *boxes*, or None for an empty sequence."""
    if not boxes:
        return None
    return BoundingBox(
        min(b.min_x for b in boxes), min(b.min_y for b in boxes),
        max(b.max_x for b in boxes), max(b.max_y for b in boxes),
    )


def rotate_point(point: Point, angle_deg: float) -> Point:
    """Rotate a point counter-clockwise about the origin (0, 0).

    Quarter turns are exact coordinate swaps; other angles go through
    cos/sin.
    """
    x, y = point
    quarter = angle_deg % 360
    if quarter == 0:
        return (x, y)
    if quarter == 90:
        return (-y, x)
    if quarter == 180:
        return (-x, -y)
    if quarter == 270:
        return (y, -x)
    rad = math.radians(angle_deg)
    cos_r = math.cos(rad)
    sin_r = math.sin(rad)
    return (x * cos_r - y * sin_r, x * sin_r + y * cos_r)


def rotate(outline: Sequence[Point], angle_deg: float) -> list[Point]:
    """Rotate every point about the origin, not the outline's own centre.

    An outline authored away from (0, 0) therefore moves as well as turns.
    Always returns a new list.
    """
    if angle_deg % 360 == 0:
        return list(outline)
    return [rotate_point(p, angle_deg) for p in outline]


def translate(outline: Sequence[Point], dx: float, dy: float) -> list[Point]:
    """Shift every point by (dx, dy)."""
    return [(x + dx, y + dy) for x, y in outline]


def boxes_overlap(a: BoundingBox, b: BoundingBox, padding: float) -> bool:
    """Padded AABB test: True when the gap on both axes is below *padding*.

    Boxes separated by at least *padding* along either axis are clear.
    """
    return (
        a.min_x < b.max_x + padding - EPS
        and b.min_x < a.max_x + padding - EPS
        and a.min_y < b.max_y + padding - EPS
        and b.min_y < a.max_y + padding - EPS
    )


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from -inf (not banker's)."""
    return math.floor(value + 0.5)
