import unittest

from aeroscad import DegenerateGeometryError, Fuselage, Intersection, x_axis
from aeroscad.test.common import BoundsAssertions


class FuselageTests(unittest.TestCase, BoundsAssertions):
    def test_outlines(self):
        f = Fuselage()
        self.assertEqual(f.front_x, 300.)
        xy = f.xy_outline()
        self.assertEqual([tuple(p.coord) for p in xy.points], [
            (0, 11), (150, 20), (400, 20), (400, -20), (150, -20), (0, -11)])
        xz = f.xz_outline()
        body, nose = xz.children
        self.assertEqual(len(body.points), 6)
        self.assertEqual(body.points[2].x, 300.)
        self.assertBox(nose.bounds, ((200, 400), (-20, 20), (0, 0)))

    def test_side_view_uses_height(self):
        f = Fuselage(z_height=30.)
        self.assertBox(f.xz_outline().bounds, ((0, 400), (-15, 15), (0, 0)))
        self.assertBox(f.xy_outline().bounds, ((0, 400), (-20, 20), (0, 0)))

    def test_get(self):
        body = Fuselage().get()
        self.assertIsInstance(body, Intersection)
        plan, side = body.children
        self.assertEqual(plan.data.center, True)
        self.assertEqual(side.name, 'rotate')
        self.assertEqual((side.data.a, side.data.v), (90, x_axis))
        self.assertBox(body.bounds, ((0, 400), (-20, 20), (-20, 20)))

    def test_invalid(self):
        for kwargs in ({'wing_start': 0}, {'wing_start': 300.},
                       {'x_length': 200.}, {'y_width': 0}, {'nose_radius': -1}):
            with self.subTest(kwargs=kwargs):
                with self.assertRaises(DegenerateGeometryError):
                    Fuselage(**kwargs)

    def test_wing_start_limit_is_nose(self):
        with self.assertRaisesRegex(DegenerateGeometryError, 'front_x = 300'):
            Fuselage(wing_start=320.)

    def test_replace_is_checked(self):
        self.assertEqual(Fuselage()._replace(y_width=50.), Fuselage(y_width=50.))
        for kwargs in ({'wing_start': 350.}, {'nose_radius': 0}):
            with self.subTest(kwargs=kwargs):
                with self.assertRaises(DegenerateGeometryError):
                    Fuselage()._replace(**kwargs)


if __name__ == '__main__':
    unittest.main()
