import math
import unittest

from aeroscad import Box, Vector
from aeroscad.geom import mirror_point, rotate_point


class VectorTests(unittest.TestCase):
    def test_vector_init(self):
        test_data = (
            ({}, '[]', False, 0),
            ({'x': 1}, '[1]', False, 1),
            ({'y': 2}, '[, 2, ]', True, 1),
            ({'z': 3}, '[, , 3]', True, 1),
            ({'x': 1, 'y': 2}, '[1, 2]', False, 2),
            ({'x': 1, 'z': 3}, '[1, , 3]', True, 2),
            ({'y': 2, 'z': 3}, '[, 2, 3]', True, 2),
            ({'x': 1, 'y': 2, 'z': 3}, '[1, 2, 3]', False, 3),
        )
        for kwargs, expected_res, is_sparse, dims in test_data:
            with self.subTest('Init', kwargs=kwargs):
                v = Vector(**kwargs)
                self.assertEqual(repr(v), expected_res)
                self.assertEqual(v.is_sparse, is_sparse)
                self.assertEqual(v.dimensions, dims)

    def test_vector_add(self):
        V = Vector
        test_data = (
            (V(1), V(2), V(3), 1),
            (V(1), V(y=2), V(1, 2), 2),
            (V(1), V(z=3), V(1, z=3), 2),
            (V(1), V(y=2, z=3), V(1, 2, 3), 3),
            (V(y=2), V(x=1), V(1, 2), 2),
            (V(y=2), V(z=3), V(y=2, z=3), 2),
            (V(1, 2, 3), V(5, 7, 11), V(6, 9, 14), 3),
        )
        for v1, v2, expected_res, dims in test_data:
            with self.subTest('Add', v1=v1, v2=v2):
                res = v1 + v2
                self.assertEqual(res, expected_res)
                self.assertEqual(res.dimensions, dims)

    def test_vector_scalar(self):
        self.assertEqual(Vector(2, 4) / 2, Vector(1, 2))
        self.assertEqual(Vector(2, 4) * 3, Vector(6, 12))
        self.assertEqual(Vector(1, 2, 3) * [2, 2], Vector(2, 4))
        self.assertEqual(-Vector(1, 2), Vector(-1, -2))
        self.assertEqual(Vector(1, 2).updated(z=5), Vector(1, 2, 5))


class PointTests(unittest.TestCase):
    def assertPoint(self, p, expected):
        for a, b in zip(p, expected):
            self.assertAlmostEqual(a, b)

    def test_rotate(self):
        test_data = (
            ((0, 1, 0), 90, (1, 0, 0), (0, 0, 1)),
            ((0, 0, 1), 90, (0, 1, 0), (1, 0, 0)),
            ((1, 0, 0), 90, (0, 0, 1), (0, 1, 0)),
            ((1, 2, 3), 0, (0, 0, 1), (1, 2, 3)),
            ((1, 0, 0), 180, (0, 0, 2), (-1, 0, 0)),
        )
        for p, angle, axis, expected in test_data:
            with self.subTest(p=p, angle=angle, axis=axis):
                self.assertPoint(rotate_point(p, angle, axis), expected)

    def test_mirror(self):
        self.assertPoint(mirror_point((1, 2, 3), (1, 0, 0)), (-1, 2, 3))
        self.assertPoint(mirror_point((1, 2, 3), (0, 2, 0)), (1, -2, 3))


class BoxTests(unittest.TestCase):
    def test_from_points(self):
        box = Box.from_points([Vector(1, 2), Vector(-1, 5), (0, 0, 3)])
        self.assertEqual(box, Box((-1, 0, 0), (1, 5, 3)))
        self.assertEqual(box.size, (2, 5, 3))

    def test_empty(self):
        empty = Box.empty()
        self.assertTrue(empty.is_empty)
        box = Box((0, 0, 0), (1, 1, 1))
        self.assertEqual(empty.merged(box), box)
        self.assertTrue(box.intersected(Box((2, 2, 2), (3, 3, 3))).is_empty)
        self.assertEqual(empty.mapped(lambda p: p), empty)

    def test_grown(self):
        box = Box((0, 0, 0), (4, 4, 1)).grown(-1)
        self.assertEqual(box, Box((1, 1, 0), (3, 3, 1)))

    def test_mapped(self):
        box = Box((0, 0, 0), (2, 1, 1)).mapped(
            lambda p: rotate_point(p, 90, (0, 0, 1)))
        self.assertAlmostEqual(box.lo[0], -1)
        self.assertAlmostEqual(box.hi[1], 2)
        self.assertTrue(math.isclose(box.hi[0], 0, abs_tol=1e-9))
