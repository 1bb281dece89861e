from __future__ import annotations

import math
import unittest

from escher_documents import PROJECT_ROOT  # noqa: F401  (puts the package on sys.path)

from beziers.cubicbezier import CubicBezier
from beziers.point import Point

from eschermap.geometry import (
    arc_length_index,
    arrow_polygon,
    cumulative_lengths,
    evaluate_cubic_bezier,
    sample_curve,
    sample_line,
)

P0 = (1.0, -2.0)
P1 = (4.0, 7.5)
P2 = (-3.0, 12.0)
P3 = (10.0, 0.25)


class BezierTests(unittest.TestCase):
    def assertPointEqual(self, point, expected) -> None:
        self.assertAlmostEqual(point[0], expected[0], places=9)
        self.assertAlmostEqual(point[1], expected[1], places=9)

    def test_degenerate_curve_is_a_point(self) -> None:
        for step in range(11):
            x, y = evaluate_cubic_bezier(step / 10, P0, P0, P0, P0)
            self.assertAlmostEqual(x, P0[0])
            self.assertAlmostEqual(y, P0[1])

    def test_curve_end_points(self) -> None:
        self.assertPointEqual(evaluate_cubic_bezier(0.0, P0, P1, P2, P3), P0)
        self.assertPointEqual(evaluate_cubic_bezier(1.0, P0, P1, P2, P3), P3)

    def test_midpoint_of_symmetric_curve(self) -> None:
        x, y = evaluate_cubic_bezier(0.5, (0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0))
        self.assertAlmostEqual(x, 0.5)
        self.assertAlmostEqual(y, 0.75)

    def test_agrees_with_bezier_library(self) -> None:
        bz = CubicBezier(Point(*P0), Point(*P1), Point(*P2), Point(*P3))
        for t in (0.1, 0.3, 0.75):
            expected = bz.pointAtTime(t)
            self.assertPointEqual(evaluate_cubic_bezier(t, P0, P1, P2, P3), (expected.x, expected.y))

    def test_sample_curve_count_and_ends(self) -> None:
        for count in (2, 10, 100, 200):
            points = sample_curve(P0, P1, P2, P3, count)
            self.assertEqual(len(points), count)
            self.assertPointEqual(points[0], P0)
            self.assertPointEqual(points[-1], P3)

    def test_sample_line_is_evenly_spaced(self) -> None:
        points = sample_line((0.0, 0.0), (9.0, -18.0), 10)
        self.assertEqual(len(points), 10)
        self.assertEqual(points[0], (0.0, 0.0))
        self.assertEqual(points[-1], (9.0, -18.0))
        for n, (x, y) in enumerate(points):
            self.assertAlmostEqual(x, float(n))
            self.assertAlmostEqual(y, -2.0 * n)


class ArcLengthTests(unittest.TestCase):
    def setUp(self) -> None:
        self.line = sample_line((0.0, 0.0), (100.0, 0.0), 101)

    def test_cumulative_lengths(self) -> None:
        lengths = cumulative_lengths([(0.0, 0.0), (3.0, 4.0), (3.0, 10.0)])
        self.assertEqual(list(lengths), [0.0, 5.0, 11.0])

    def test_fraction_zero_is_at_start(self) -> None:
        self.assertEqual(arc_length_index(self.line, 0.0), 0)

    def test_fraction_one_is_last_index(self) -> None:
        self.assertEqual(arc_length_index(self.line, 1.0), 100)

    def test_intermediate_fraction(self) -> None:
        index = arc_length_index(self.line, 0.25)
        self.assertIsNotNone(index)
        self.assertAlmostEqual(self.line[index][0], 25.0, delta=1.0)

    def test_fraction_above_one_is_not_found(self) -> None:
        self.assertIsNone(arc_length_index(self.line, 1.5))

    def test_empty_polyline(self) -> None:
        self.assertIsNone(arc_length_index([], 0.5))

    def test_index_follows_length_not_parameter(self) -> None:
        # Control points bunched at the start make time and length disagree
        curve = sample_curve((0.0, 0.0), (0.0, 0.0), (0.0, 0.0), (100.0, 0.0), 101)
        index = arc_length_index(curve, 0.5)
        self.assertGreater(index, 50)
        self.assertGreaterEqual(curve[index][0], 50.0)
        self.assertLess(curve[index - 1][0], 50.0)


class ArrowPolygonTests(unittest.TestCase):
    def test_arrow_points_along_direction(self) -> None:
        polygon = arrow_polygon((10.0, 5.0), (2.0, 0.0), 6.0)
        coords = list(polygon.exterior.coords)[:-1]
        tip, left, right = coords
        self.assertAlmostEqual(tip[0], 16.0)
        self.assertAlmostEqual(tip[1], 5.0)
        self.assertAlmostEqual(left[0], 10.0)
        self.assertAlmostEqual(right[0], 10.0)
        self.assertAlmostEqual(abs(left[1] - right[1]), 4.0)

    def test_arrow_area(self) -> None:
        polygon = arrow_polygon((0.0, 0.0), (0.0, -1.0), 3.0)
        self.assertAlmostEqual(polygon.area, 0.5 * 2.0 * 3.0)
        self.assertTrue(math.isclose(polygon.bounds[1], -3.0))


if __name__ == "__main__":
    unittest.main()
