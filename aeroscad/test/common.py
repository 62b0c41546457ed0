from aeroscad import Airfoil

# Crude lens profile at unit chord, upper surface first
PROFILE = Airfoil([
    (1.0, 0.0),
    (0.5, 0.06),
    (0.0, 0.0),
    (0.5, -0.04),
])


class BoundsAssertions:
    def assertSpan(self, box, axis, expected, places=6):
        lo, hi = box.span(axis)
        self.assertAlmostEqual(lo, expected[0], places=places)
        self.assertAlmostEqual(hi, expected[1], places=places)

    def assertBox(self, box, expected, places=6):
        for axis, span in enumerate(expected):
            with self.subTest(axis=axis):
                self.assertSpan(box, axis, span, places)
