"""Printed hinge made of two interlocking tooth combs.

Profiles are drawn at double size and halved so they end up centered on the
x axis.
"""

import logging

from . import csg
from .errors import DegenerateGeometryError, expect_positive
from .geom import Vector, x_axis
from .util import halved

logger = logging.getLogger(__name__)

TOOTH_DEPTH = 1.


def mid_section(mid_y_size, outer_y_size):
    points = [
        Vector(0, mid_y_size),
        Vector(outer_y_size, mid_y_size),
        Vector(outer_y_size, -mid_y_size),
        Vector(0, -mid_y_size),
    ]
    return csg.Polygon(halved(points))


def teeth(amount, outer_y_size, separation):
    """Saw tooth comb of amount prongs, 4 * amount vertices."""
    if amount < 1:
        raise DegenerateGeometryError('Need at least one tooth, got {}'.format(amount))
    expect_positive('Tooth separation', separation)
    inner_y_size = outer_y_size - TOOTH_DEPTH
    if inner_y_size <= 0:
        raise DegenerateGeometryError(
            'Teeth height {} should exceed tooth depth {}'.format(
                outer_y_size, TOOTH_DEPTH))

    points = []
    x = 0
    for _ in range(amount):
        points.append(Vector(x, outer_y_size))
        x += separation
        points.append(Vector(x, inner_y_size))
    for _ in range(amount):
        points.append(Vector(x, -inner_y_size))
        x -= separation
        points.append(Vector(x, -outer_y_size))
    return csg.Polygon(halved(points))


def tooth_cutout(amount, outer_height, thickness, clearance=0.5):
    return teeth(amount, outer_height + clearance, outer_height) \
        * csg.linear_extrude(height=thickness)


def hinge(tooth_amount, outer_height, thickness):
    logger.debug('Hinge: %d teeth, height %s, thickness %s',
                 tooth_amount, outer_height, thickness)
    shape = (
        mid_section(1., outer_height)
        + teeth(tooth_amount, outer_height, outer_height)
        * csg.translate([outer_height / 2, 0])
    ) * csg.linear_extrude(height=thickness)

    return shape + shape * csg.mirror(x_axis)


def test_mount():
    """Block with a tooth shaped socket to check the print fit."""
    return csg.cube([12., 8., 6.], center=(False, True, False)) \
        - tooth_cutout(5, 3., 4.) * csg.translate([0, 0, 2.])


def test_hinge():
    return hinge(5, 3., 4.)
