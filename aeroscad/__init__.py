from .csg import (
    Union, Difference, Intersection, Hull, Transform, Objects, Item,
    RotateData, rotate,
    VectorParam, translate, scale, mirror,
    LimitedDimTransform,
    LinearExtrudeParams, linear_extrude,
    OffsetParams, offset,
    PolygonData, Polygon, polygon,
    RectData, RectGeometry, Square, Cube, square, cube,
    CircleData, Circle, circle,
    Scene, dump, svar, hull,
)
from .geom import Vector, Box, x_axis, y_axis, z_axis
from .errors import Error, ParseError, DegenerateGeometryError, OutOfRangeError
from .airfoil import Airfoil, load_airfoil
from .wing import (
    Wing, FoamCutout, ControlSurfaceCutout, CutoffDirection,
    INFINITE_SIZE, CAP_THICKNESS,
)
from .fuselage import Fuselage
from . import hinge
from . import assembly
