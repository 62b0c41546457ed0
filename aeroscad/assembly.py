import logging

from . import csg
from .errors import DegenerateGeometryError
from .fuselage import Fuselage
from .geom import x_axis, y_axis

logger = logging.getLogger(__name__)


def extrude_airfoil(airfoil, length, height):
    return airfoil.shape(length) * csg.linear_extrude(height=height)


def assemble_plane(wing, fuselage=None):
    """Both wing halves attached to the fuselage, span along y."""
    fuselage = fuselage or Fuselage()
    half = wing.extruded_rib_shape() \
        * csg.translate(x=-wing.inner_length) \
        * csg.mirror(x_axis) \
        * csg.rotate(90, x_axis)
    return half + half * csg.mirror(y_axis) + fuselage.get()


def wing_ribs(wing, indices, thickness=5., count=8, spacing=15.):
    """Ribs laid out next to each other along y for printing."""
    indices = list(indices)
    if not indices:
        raise DegenerateGeometryError('No ribs selected')
    logger.info('Ribs %s of %d, %s mm thick', indices, count, thickness)
    return csg.Union(*(
        wing.get_wing_rib(i, thickness, count) * csg.translate(y=spacing * i)
        for i in indices
    ))
