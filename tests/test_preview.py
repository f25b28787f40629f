"""Tests for placement transforms and the preview builder."""

from __future__ import annotations

import unittest

from dexstitch.layout import (
    LayoutRequest,
    Placement,
    bounding_box,
    layout,
    place_piece,
    placed_pieces,
)
from dexstitch.layout.geometry import BoundingBox
from dexstitch.pattern.models import PatternPiece
from dexstitch.preview import build_preview
from tests.garment_fixture import make_garment_pieces, rect_piece


class TestPlacePiece(unittest.TestCase):
    """Annotations move with the outline."""

    def setUp(self):
        self.piece = PatternPiece(
            id="strip",
            name="Strip",
            outline=[(0, 0), (150, 0), (150, 40), (0, 40)],
            grainline=[(10, 20), (140, 20)],
            notches=[(75, 0)],
        )

    def test_rotation_then_translation(self):
        moved = place_piece(self.piece, Placement("strip", 40, 0, 90))
        self.assertEqual(moved.outline, [(40, 0), (40, 150), (0, 150), (0, 0)])
        self.assertEqual(moved.grainline, [(20, 10), (20, 140)])
        self.assertEqual(moved.notches, [(40, 75)])
        self.assertEqual(moved.name, "Strip")

    def test_original_untouched(self):
        place_piece(self.piece, Placement("strip", 5, 5, 180))
        self.assertEqual(self.piece.outline[1], (150, 0))

    def test_matches_engine_geometry(self):
        """Moved outlines land on the boxes the engine accounted for."""
        pieces = make_garment_pieces()
        result = layout(LayoutRequest(pieces=pieces, bin_width=900))
        moved = placed_pieces(pieces, result)
        total = sum(bounding_box(p.outline).area for p in moved)
        self.assertAlmostEqual(total, result.utilized_area)
        self.assertEqual([p.id for p in moved],
                         [pl.piece_id for pl in result.placements])

    def test_unknown_piece_skipped(self):
        result = layout(LayoutRequest(pieces=[rect_piece("a", 10, 10)],
                                      bin_width=100))
        self.assertEqual(placed_pieces([rect_piece("b", 10, 10)], result), [])


class TestBuildPreview(unittest.TestCase):

    def test_no_pieces(self):
        preview = build_preview([])
        self.assertIsNone(preview.bounds)
        self.assertEqual(preview.pieces, [])

    def test_raw_pieces_include_annotations(self):
        piece = PatternPiece(
            id="p", outline=[(0, 0), (100, 0), (100, 50)],
            notches=[(-5, 20)], grainline=[(50, 10), (50, 60)],
        )
        preview = build_preview([piece])
        self.assertEqual(preview.bounds, BoundingBox(-5, 0, 100, 60))
        self.assertIsNone(preview.layout)

    def test_layout_bounds_cover_placed_pieces(self):
        pieces = make_garment_pieces()
        result = layout(LayoutRequest(pieces=pieces, bin_width=1200))
        preview = build_preview(pieces, result)
        self.assertIs(preview.layout, result)
        self.assertEqual(len(preview.pieces), len(result.placements))
        self.assertGreaterEqual(preview.bounds.min_x, 0)
        self.assertGreaterEqual(preview.bounds.min_y, 0)
        self.assertLessEqual(preview.bounds.max_x, 1200)
        self.assertAlmostEqual(preview.bounds.max_x * preview.bounds.max_y,
                               result.bin_area)

    def test_dropped_pieces_not_framed(self):
        pieces = [rect_piece("ok", 100, 100), rect_piece("big", 5000, 5000)]
        result = layout(LayoutRequest(pieces=pieces, bin_width=1000))
        preview = build_preview(pieces, result)
        self.assertEqual([p.id for p in preview.pieces], ["ok"])
        self.assertEqual(preview.bounds, BoundingBox(0, 0, 100, 100))


if __name__ == "__main__":
    unittest.main()
