"""Tests for pattern/layout parsing and serialization."""

from __future__ import annotations

import json
import unittest

from dexstitch.layout import (
    LayoutRequest,
    layout,
    layout_request_to_dict,
    layout_to_dict,
    parse_layout_request,
    parse_layout_result,
)
from dexstitch.pattern import (
    LayoutRequestError,
    parse_piece,
    parse_point,
    piece_to_dict,
)
from tests.garment_fixture import make_garment_pieces


class TestPointParsing(unittest.TestCase):

    def test_object_and_pair(self):
        self.assertEqual(parse_point({"x": 1, "y": 2.5}), (1.0, 2.5))
        self.assertEqual(parse_point([3, 4]), (3.0, 4.0))

    def test_bad_points(self):
        for bad in ({"x": 1}, [1, 2, 3], "1,2", {"x": "a", "y": 0}):
            with self.subTest(bad=bad):
                with self.assertRaises(LayoutRequestError):
                    parse_point(bad)


class TestPieceParsing(unittest.TestCase):

    def test_full_piece(self):
        piece = parse_piece({
            "id": "front",
            "name": "Front",
            "outline": [{"x": 0, "y": 0}, [100, 0], [100, 50]],
            "seam_allowance_mm": 10,
            "grainline": [[50, 5], [50, 45]],
            "notches": [[0, 25]],
        })
        self.assertEqual(piece.id, "front")
        self.assertEqual(piece.outline, [(0.0, 0.0), (100.0, 0.0), (100.0, 50.0)])
        self.assertEqual(piece.grainline, [(50.0, 5.0), (50.0, 45.0)])
        self.assertEqual(piece.notches, [(0.0, 25.0)])
        self.assertEqual(piece.seam_allowance_mm, 10.0)

    def test_minimal_piece(self):
        piece = parse_piece({"id": 7, "outline": []})
        self.assertEqual(piece.id, "7")
        self.assertIsNone(piece.grainline)
        self.assertEqual(piece.notches, [])

    def test_missing_outline_reports_path(self):
        with self.assertRaises(LayoutRequestError) as ctx:
            parse_piece({"id": "a"}, "pieces[3]")
        self.assertEqual(ctx.exception.path, "pieces[3].outline")

    def test_bad_point_reports_path(self):
        with self.assertRaises(LayoutRequestError) as ctx:
            parse_piece({"id": "a", "outline": [[0, 0], [1]]})
        self.assertEqual(ctx.exception.path, "piece.outline[1]")

    def test_round_trip(self):
        for piece in make_garment_pieces():
            with self.subTest(piece=piece.id):
                self.assertEqual(parse_piece(piece_to_dict(piece)), piece)


class TestLayoutRequestParsing(unittest.TestCase):

    def test_defaults(self):
        request = parse_layout_request({
            "pieces": [{"id": "a", "outline": [[0, 0], [10, 0], [10, 10]]}],
            "bin_width": 1000,
        })
        self.assertEqual(request.bin_width, 1000.0)
        self.assertIsNone(request.bin_height)
        self.assertTrue(request.allow_rotation)
        self.assertFalse(request.allow_mirroring)
        self.assertEqual(len(request.pieces), 1)

    def test_missing_bin_width(self):
        with self.assertRaises(LayoutRequestError) as ctx:
            parse_layout_request({"pieces": []})
        self.assertEqual(ctx.exception.path, "request.bin_width")

    def test_non_numeric_bin_width(self):
        with self.assertRaises(LayoutRequestError):
            parse_layout_request({"pieces": [], "bin_width": "wide"})
        with self.assertRaises(LayoutRequestError):
            parse_layout_request({"pieces": [], "bin_width": True})

    def test_non_bool_flags_rejected(self):
        base = {"pieces": [], "bin_width": 1000}
        for key, bad in (("allow_rotation", "false"), ("allow_mirroring", 1)):
            with self.subTest(key=key):
                with self.assertRaises(LayoutRequestError) as ctx:
                    parse_layout_request({**base, key: bad})
                self.assertEqual(ctx.exception.path, f"request.{key}")

    def test_error_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_layout_request({"bin_width": 10})

    def test_round_trip(self):
        request = LayoutRequest(pieces=make_garment_pieces(), bin_width=1500,
                                bin_height=3000, allow_rotation=False)
        self.assertEqual(parse_layout_request(layout_request_to_dict(request)),
                         request)


class TestLayoutResultSerialization(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.result = layout(LayoutRequest(pieces=make_garment_pieces(),
                                          bin_width=1500))

    def test_to_dict_is_json_safe(self):
        d = layout_to_dict(self.result)
        json.dumps(d)
        self.assertEqual(set(d), {"placements", "utilized_area", "bin_area",
                                  "efficiency"})
        self.assertEqual(len(d["placements"]), 5)
        self.assertEqual(set(d["placements"][0]),
                         {"piece_id", "x", "y", "rotation_deg", "flipped"})

    def test_empty_result_has_no_efficiency(self):
        empty = layout(LayoutRequest(pieces=[], bin_width=1000))
        self.assertEqual(layout_to_dict(empty),
                         {"placements": [], "utilized_area": 0.0, "bin_area": 0.0})

    def test_round_trip(self):
        restored = parse_layout_result(layout_to_dict(self.result))
        self.assertEqual(restored, self.result)

    def test_rejects_bad_rotation(self):
        with self.assertRaises(LayoutRequestError):
            parse_layout_result({"placements": [
                {"piece_id": "a", "x": 0, "y": 0, "rotation_deg": 45},
            ]})


if __name__ == "__main__":
    unittest.main()
