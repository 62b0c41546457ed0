"""Tapered wing lofted from an airfoil, its foam core ribs and control surface.

Coordinates: x is chordwise (leading edge at 0), y is the profile thickness
direction, z runs along the span from the root (0) to the tip (wingspan).
"""

import collections
import enum
import logging
import math

from . import csg
from .errors import DegenerateGeometryError, OutOfRangeError, expect_positive
from .geom import Vector, y_axis
from .util import CheckedRecord

logger = logging.getLogger(__name__)

# Stands in for an unbounded extent in the trim boxes and rib cutters.
INFINITE_SIZE = 1000.
CAP_THICKNESS = 0.001


class CutoffDirection(enum.Enum):
    Up = 'up'
    Down = 'down'
    Both = 'both'


class FoamCutout(CheckedRecord, collections.namedtuple(
        'FoamCutout', 'shape_offset front_stop upper_back_stop lower_back_stop')):
    """Foam core cavity of a rib.

    shape_offset: signed offset applied to the profile before lofting the
        cavity, negative shrinks it.
    front_stop: chordwise distance from the leading edge to the cavity.
    upper_back_stop, lower_back_stop: distance from the trailing edge to the
        cavity on the upper and lower half of the profile.
    """

    def __new__(cls, shape_offset=-2., front_stop=10.,
                upper_back_stop=40., lower_back_stop=35.):
        return super().__new__(
            cls, shape_offset, front_stop, upper_back_stop, lower_back_stop)


class ControlSurfaceCutout(CheckedRecord, collections.namedtuple(
        'ControlSurfaceCutout', 'start_ratio end_ratio hinge_width')):

    def __new__(cls, start_ratio=0.5, end_ratio=0.95, hinge_width=30.):
        if not 0 <= start_ratio < end_ratio <= 1:
            raise DegenerateGeometryError(
                'Need 0 <= start_ratio < end_ratio <= 1, got {}, {}'.format(
                    start_ratio, end_ratio))
        expect_positive('Hinge width', hinge_width)
        return super().__new__(cls, start_ratio, end_ratio, hinge_width)


def extrude(shape, thickness):
    return shape * csg.linear_extrude(height=thickness)


class Wing(CheckedRecord, collections.namedtuple('Wing', (
        'airfoil inner_length outer_length wingspan extrude_thickness'
        ' spar_radius foam control_surface_slot'))):
    """Wing half from the root (inner) to the tip (outer) station.

    Lengths are chord lengths in mm, the airfoil is scaled by them.
    extrude_thickness is the depth of the thin slabs standing in for the
    zero thickness end profiles when lofting. control_surface_slot places the
    control surface cutout in every rib.
    """

    def __new__(cls, airfoil, inner_length=140., outer_length=100.,
                wingspan=500., extrude_thickness=0.1, spar_radius=5.,
                foam=FoamCutout(), control_surface_slot=ControlSurfaceCutout()):
        expect_positive('Inner length', inner_length)
        expect_positive('Outer length', outer_length)
        expect_positive('Wingspan', wingspan)
        expect_positive('Extrude thickness', extrude_thickness)
        if extrude_thickness * 2 >= wingspan:
            raise DegenerateGeometryError(
                'Extrude thickness {} is too big for wingspan {}'.format(
                    extrude_thickness, wingspan))
        return super().__new__(
            cls, airfoil, inner_length, outer_length, wingspan,
            extrude_thickness, spar_radius, foam, control_surface_slot)

    def exterior_inner_shape(self):
        return self.airfoil.shape(self.inner_length)

    def exterior_outer_shape(self):
        return self.airfoil.shape(self.outer_length)

    def _loft(self, inner, outer):
        t = self.extrude_thickness
        return csg.hull(
            extrude(inner, t),
            extrude(outer, t) * csg.translate(z=self.wingspan - t),
        )

    def exterior_model(self):
        return self._loft(self.exterior_inner_shape(), self.exterior_outer_shape())

    def interior_cutout(self, offset):
        shrink = csg.offset(delta=offset, chamfer=True)
        return self._loft(
            self.exterior_inner_shape() * shrink,
            self.exterior_outer_shape() * shrink,
        )

    def wing_shaped_cutoff_box(self, direction, inner_start, inner_length,
                               outer_start, outer_length):
        """Trim volume following the taper between the root and the tip.

        The box spans inner_start..inner_start + inner_length chordwise at the
        root and the outer pair at the tip. In y it covers both sides of the
        profile (Both) or only one of them (Up, Down).
        """
        expect_positive('Cutoff box inner length', inner_length)
        expect_positive('Cutoff box outer length', outer_length)

        center_y = direction == CutoffDirection.Both
        translation_y = -INFINITE_SIZE if direction == CutoffDirection.Down else 0

        def block(start, length, z):
            size = Vector(length, INFINITE_SIZE, CAP_THICKNESS)
            return csg.cube(size, center=(False, center_y, False)) \
                * csg.translate([start, translation_y, z])

        return csg.hull(
            block(inner_start, inner_length, 0),
            block(outer_start, outer_length, self.wingspan),
        )

    def _foam_lengths(self, back_stop):
        front_stop = self.foam.front_stop
        lengths = tuple(
            chord - front_stop - back_stop
            for chord in (self.inner_length, self.outer_length)
        )
        if min(lengths) <= 0:
            raise DegenerateGeometryError(
                'Foam stops {} + {} leave no cavity in chords {}, {}'.format(
                    front_stop, back_stop, self.inner_length, self.outer_length))
        return lengths

    def foam_cutoff_boxes(self):
        front_stop = self.foam.front_stop
        inner_upper, outer_upper = self._foam_lengths(self.foam.upper_back_stop)
        inner_lower, outer_lower = self._foam_lengths(self.foam.lower_back_stop)
        upper = self.wing_shaped_cutoff_box(
            CutoffDirection.Up,
            front_stop, inner_upper,
            front_stop, outer_upper,
        )
        lower = self.wing_shaped_cutoff_box(
            CutoffDirection.Down,
            front_stop, inner_lower,
            front_stop, outer_lower,
        )
        return upper, lower

    def extruded_rib_shape(self):
        logger.debug('Rib shape: chords %s..%s, span %s, %s',
                     self.inner_length, self.outer_length, self.wingspan, self.foam)
        upper, lower = self.foam_cutoff_boxes()
        front_and_back = self.exterior_model() - upper - lower
        cs = self.control_surface_slot
        return (
            self.interior_cutout(self.foam.shape_offset) + front_and_back
        ) - self.control_surface_cutout(cs.start_ratio, cs.end_ratio, cs.hinge_width)

    def wing_back_angle(self):
        """Angle of the trailing edge to the span axis in degrees.

        Positive when the root chord is longer than the tip chord.
        """
        return math.degrees(
            math.atan2(self.inner_length - self.outer_length, self.wingspan))

    def control_surface_cutout(self, start_ratio, end_ratio, x_size):
        if x_size >= min(self.inner_length, self.outer_length):
            raise DegenerateGeometryError(
                'Control surface {} is wider than the chord'.format(x_size))
        start_z = self.wingspan * start_ratio
        length = (end_ratio - start_ratio) * self.wingspan
        expect_positive('Control surface length', length)

        full_shape = self.wing_shaped_cutoff_box(
            CutoffDirection.Both,
            self.inner_length - x_size, x_size,
            self.outer_length - x_size, x_size,
        )

        # slab faces end up perpendicular to the trailing edge
        z_cutter = csg.cube([INFINITE_SIZE, INFINITE_SIZE, length],
                            center=(True, True, False)) \
            * csg.translate(z=start_z) \
            * csg.rotate(-self.wing_back_angle(), y_axis)

        return full_shape & z_cutter

    def control_surface(self, length_ratio, x_size, thickness=4.):
        expect_positive('Control surface length ratio', length_ratio)
        expect_positive('Control surface thickness', thickness)
        if x_size - thickness / 2 <= 0:
            raise DegenerateGeometryError(
                'Control surface {} is too narrow for thickness {}'.format(
                    x_size, thickness))
        points = [
            (0, thickness / 2),
            (x_size - thickness / 2, 0),
            (0, -thickness / 2),
        ]
        return extrude(csg.Polygon(points), length_ratio * self.wingspan)

    def wing_rib_separation(self, thickness, count):
        if count < 1:
            raise DegenerateGeometryError('Need at least one rib, got {}'.format(count))
        expect_positive('Rib thickness', thickness)
        if thickness >= self.wingspan:
            raise DegenerateGeometryError(
                'Rib thickness {} exceeds wingspan {}'.format(thickness, self.wingspan))
        # the last rib ends exactly at the tip
        return (self.wingspan - thickness) / count

    def wing_rib_offset(self, index, thickness, count):
        separation = self.wing_rib_separation(thickness, count)
        if not 0 <= index < count:
            raise OutOfRangeError('Rib index {} out of range 0..{}'.format(index, count))
        return separation * index

    def get_wing_rib(self, index, thickness, count):
        """Rib number index moved to z = 0 so all ribs share one frame."""
        offset = self.wing_rib_offset(index, thickness, count)
        cutter = csg.cube([INFINITE_SIZE, INFINITE_SIZE, thickness],
                          center=(True, True, False)) \
            * csg.translate(z=offset)
        return (self.extruded_rib_shape() & cutter) * csg.translate(z=-offset)

    def all_wing_ribs(self, thickness, count):
        return csg.Union(*(
            self.get_wing_rib(i, thickness, count)
            * csg.translate(z=self.wing_rib_offset(i, thickness, count))
            for i in range(count)
        ))
