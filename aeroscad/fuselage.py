import collections
import logging

from . import csg
from .errors import DegenerateGeometryError, expect_positive
from .geom import x_axis
from .util import CheckedRecord

logger = logging.getLogger(__name__)

EXTRUDE_LENGTH = 1000.


class Fuselage(CheckedRecord, collections.namedtuple(
        'Fuselage', 'x_length y_width z_height back_y_width wing_start nose_radius')):
    """Fuselage body running along x, tail at 0 and nose at x_length.

    The volume is the intersection of a plan view (x-y) and a side view (x-z)
    outline, both extruded through the whole part.
    """

    def __new__(cls, x_length=400., y_width=40., z_height=40.,
                back_y_width=22., wing_start=150., nose_radius=100.):
        for name, value in (('Length', x_length), ('Width', y_width),
                            ('Height', z_height), ('Back width', back_y_width),
                            ('Nose radius', nose_radius)):
            expect_positive(name, value)
        if not 0 < wing_start < x_length - nose_radius:
            raise DegenerateGeometryError(
                'Wing start {} should be within (0, front_x = {}),'
                ' before the nose'.format(wing_start, x_length - nose_radius))
        return super().__new__(cls, x_length, y_width, z_height,
                               back_y_width, wing_start, nose_radius)

    @property
    def front_x(self):
        return self.x_length - self.nose_radius

    def xy_outline(self):
        half_back = self.back_y_width / 2
        half_width = self.y_width / 2
        return csg.Polygon([
            (0, half_back),
            (self.wing_start, half_width),
            (self.x_length, half_width),
            (self.x_length, -half_width),
            (self.wing_start, -half_width),
            (0, -half_back),
        ])

    def xz_outline(self):
        half_back = self.back_y_width / 2
        half_height = self.z_height / 2
        body = csg.Polygon([
            (0, half_back),
            (self.wing_start, half_height),
            (self.front_x, half_height),
            (self.front_x, -half_height),
            (self.wing_start, -half_height),
            (0, -half_back),
        ])
        nose = csg.circle(r=1) \
            * csg.scale([self.nose_radius, half_height]) \
            * csg.translate([self.front_x, 0])
        return body + nose

    def get(self):
        logger.debug('Fuselage %s', self)
        through = csg.linear_extrude(height=EXTRUDE_LENGTH, center=True)
        return (self.xy_outline() * through) \
            & (self.xz_outline() * through * csg.rotate(90, x_axis))
