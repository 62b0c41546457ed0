#!/usr/bin/env python3
import math
import sys

from aeroscad import *


def naca_4digit(code='2412', n=40):
    m = int(code[0]) / 100
    p = int(code[1]) / 10
    t = int(code[2:]) / 100

    def yt(x):
        return 5 * t * (0.2969 * math.sqrt(x) - 0.1260 * x - 0.3516 * x ** 2
                        + 0.2843 * x ** 3 - 0.1015 * x ** 4)

    def yc(x):
        if m == 0 or p == 0:
            return 0
        if x < p:
            return m / p ** 2 * (2 * p * x - x ** 2)
        return m / (1 - p) ** 2 * ((1 - 2 * p) + 2 * p * x - x ** 2)

    xs = [0.5 * (1 - math.cos(math.pi * i / n)) for i in range(n + 1)]
    upper = [(x, yc(x) + yt(x)) for x in reversed(xs)]
    lower = [(x, yc(x) - yt(x)) for x in xs[1:]]
    return Airfoil(upper + lower)


wing = Wing(naca_4digit(sys.argv[1] if len(sys.argv) > 1 else '2412'))

dump(wing.extruded_rib_shape(), 'naca-wing.scad', fn=25)
dump(assembly.wing_ribs(wing, range(8)), 'naca-ribs.scad', fn=25)
dump(assembly.assemble_plane(wing), 'naca-plane.scad', fn=25)
