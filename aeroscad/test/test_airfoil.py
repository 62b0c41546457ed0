import os
import tempfile
import unittest

from aeroscad import Airfoil, ParseError, Polygon, Vector, load_airfoil


class AirfoilLoadTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)

    def write(self, content):
        path = os.path.join(self._tmp.name, 'profile.dat')
        with open(path, 'w') as fp:
            fp.write(content)
        return path

    def test_load(self):
        airfoil = load_airfoil(self.write('TEST\n1.0 0.0\n0.0 0.1\n'))
        self.assertEqual(len(airfoil.points), 2)
        self.assertEqual(airfoil.points, (Vector(1.0, 0.0), Vector(0.0, 0.1)))

    def test_load_skips_blank_and_extra_tokens(self):
        airfoil = Airfoil.load(self.write('MH 44\n\n1.0 0.0 7\n  0.5   0.05\n\n0.0 0.0\n'))
        self.assertEqual(airfoil.points,
                         (Vector(1.0, 0.0), Vector(0.5, 0.05), Vector(0.0, 0.0)))

    def test_missing_file(self):
        with self.assertRaises(OSError):
            load_airfoil(os.path.join(self._tmp.name, 'missing.dat'))

    def test_parse_errors(self):
        test_data = (
            ('TEST\n1.0 0.0\n1.0 abc\n', 3),
            ('TEST\n1.0\n', 2),
            ('TEST\n1,0 0,0\n', 2),
        )
        for content, lineno in test_data:
            with self.subTest(content=content):
                path = self.write(content)
                with self.assertRaises(ParseError) as ctx:
                    load_airfoil(path)
                self.assertEqual(ctx.exception.lineno, lineno)
                self.assertEqual(ctx.exception.source, path)
                self.assertIn(str(lineno), str(ctx.exception))

    def test_no_points(self):
        for content in ('', 'TEST\n', 'TEST\n\n'):
            with self.subTest(content=content):
                with self.assertRaises(ParseError):
                    load_airfoil(self.write(content))

    def test_parse_error_is_value_error(self):
        with self.assertRaises(ValueError):
            Airfoil.from_lines(['TEST', 'x y'])


class AirfoilShapeTests(unittest.TestCase):
    def test_from_lines(self):
        airfoil = Airfoil.from_lines(['label', '1 0', '0 0.1', '0 -0.1'])
        self.assertEqual(airfoil.points[2], Vector(0.0, -0.1))

    def test_shape(self):
        airfoil = Airfoil([(1, 0), (0, 0.1), (0, -0.1)])
        shape = airfoil.shape(140.)
        self.assertEqual(shape.name, 'scale')
        self.assertEqual(shape.data.v, Vector(140., 140.))
        self.assertEqual(shape.target, Polygon(airfoil.points))
        self.assertEqual(shape.bounds.span(0), (0, 140.))


if __name__ == '__main__':
    unittest.main()
