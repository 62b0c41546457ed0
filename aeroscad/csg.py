"""Immutable CSG tree serialized as an OpenSCAD program.

Shapes are composed with operators::

    body = Cube([10, 10, 2]) - Circle(r=2) * linear_extrude(height=2)
    body = body * translate(z=5) + other

``+`` is union, ``-`` is difference, ``&`` is intersection and multiplying by
a transform node wraps the shape into that transform. Nothing is mutated:
every operation returns a new node.
"""

from collections import namedtuple
from collections.abc import Iterable
import itertools
import logging

from .errors import DegenerateGeometryError, expect_positive
from .geom import Box, Vector, mirror_point, rotate_point, x_axis, y_axis, z_axis
from .util import CheckedRecord

logger = logging.getLogger(__name__)


class _Bool(namedtuple('Bool', 'value')):
    def __str__(self):
        return 'true' if self.value else 'false'


def format_params_dict(src, **spec_vars):
    def format_param(name, value):
        fmt = '{name}' if value is None else '{name} = {value}'
        if isinstance(value, bool):
            res = fmt.format(name=name, value=_Bool(value))
        elif isinstance(value, str):
            fmt = '{name} = "{value:s}"'
            res = fmt.format(name=name, value=value)
        elif isinstance(value, (Vector, list)):
            res = fmt.format(name=name, value=value)
        elif isinstance(value, Iterable):
            res = fmt.format(name=name, value=list(value))
        else:
            res = fmt.format(name=name, value=value)
        return res

    items = ((name, value) for name, value in src.items() if value is not None)

    formatted_params = (format_param(name, value) for name, value in items)
    formatted_spec = (str(svar(k, v)) for k, v in spec_vars.items())

    return ', '.join(itertools.chain(formatted_params, formatted_spec))


def format_call_params(src, **spec_vars):
    if hasattr(src, '_asdict'):
        src = src._asdict()
    return format_params_dict(src, **spec_vars)


def assert_conflicting_args(*args):
    if len([arg for arg in args if arg is not None]) > 1:
        raise ValueError('Conflicting arguments', args)


def _as_vector(vector, x, y, z):
    if vector is None:
        return Vector(x, y, z)
    if not isinstance(vector, Vector):
        vector = Vector(*vector)
    return vector


class _ProgramMixin:
    def dumps(self, indent=' ' * 4):
        return '\n'.join(self.lines(indent))


class _OneLinerObjectMixin(_ProgramMixin):
    def lines(self, indent, level=0):
        yield (indent * level) + str(self) + ';'


class _TransformFormatMixin(_ProgramMixin):
    def lines(self, indent, level=0):
        yield (indent * level) + str(self)
        yield from self._target.lines(indent, level + 1)


class _CSGMixin:
    def __add__(self, other):
        objects = itertools.chain((self,), other.objects) \
                  if isinstance(other, Union) \
                     else (self, other)
        return Union(*objects)

    def __sub__(self, other):
        return Difference(self, other)

    def __and__(self, other):
        return Intersection(self, other)


class Item:
    """Tree node: ``name``, ``data`` and ``children`` describe it fully."""

    name = None
    data = None
    children = ()

    def _key(self):
        return (type(self), self.name, self.data, self.children)

    def __eq__(self, other):
        if not isinstance(other, Item):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other):
        res = self.__eq__(other)
        return res if res is NotImplemented else not res

    __hash__ = None

    def __repr__(self):
        return self.dumps()


class Objects(Item, _ProgramMixin):

    def __init__(self, name, objects):
        objects = tuple(objects)
        if len(objects) > 0:
            dim = objects[0].dimensions
            for obj in objects[1:]:
                if obj.dimensions != dim:
                    msg = "Can't combine objects with different dims: {}, {}"
                    raise ValueError(msg.format(dim, obj.dimensions))
        else:
            dim = None

        self.name = name
        self._items = objects
        self._dimensions = dim

    @property
    def dimensions(self):
        return self._dimensions

    @property
    def children(self):
        return self._items

    @property
    def objects(self):
        return self._items

    def lines(self, indent, level=0):
        my_indent = indent * level
        yield '{}{}() {{'.format(my_indent, self.name)
        for obj in self._items:
            yield from obj.lines(indent, level + 1)
        yield my_indent + '};'

    @property
    def bounds(self):
        res = Box.empty()
        for obj in self._items:
            res = res.merged(obj.bounds)
        return res


class Union(Objects, _CSGMixin):
    def __init__(self, *objects):
        super().__init__('union', objects)

    def __add__(self, other):
        right_objects = (other.objects if isinstance(other, Union) else (other,))
        return Union(*itertools.chain(self.objects, right_objects))


class Difference(Objects, _CSGMixin):
    def __init__(self, *objects):
        super().__init__('difference', objects)

    def __sub__(self, other):
        return Difference(*itertools.chain(self.objects, (other,)))

    @property
    def bounds(self):
        return self._items[0].bounds if self._items else Box.empty()


class Intersection(Objects, _CSGMixin):
    def __init__(self, *objects):
        super().__init__('intersection', objects)

    def __and__(self, other):
        return Intersection(*itertools.chain(self.objects, (other,)))

    @property
    def bounds(self):
        if not self._items:
            return Box.empty()
        res = self._items[0].bounds
        for obj in self._items[1:]:
            res = res.intersected(obj.bounds)
        return res


class Hull(Objects, _CSGMixin):
    def __init__(self, *objects):
        super().__init__('hull', objects)


def hull(*objects):
    return Hull(*objects)


class Transform(Item, _TransformFormatMixin, _CSGMixin):
    def __init__(self, name, target, data):
        self.name = name
        self._target = target
        self.data = data

    @property
    def target(self):
        return self._target

    @property
    def children(self):
        return (self._target,)

    @property
    def dimensions(self):
        return self._target.dimensions

    @property
    def bounds(self):
        return self._target.bounds.mapped(self._map_point)

    def _map_point(self, p):
        return p

    def __str__(self):
        params = format_call_params(self.data)
        return '{}({})'.format(self.name, params)


class _TransformNode:
    def __init__(self, transform_cls, data):
        self._cls = transform_cls
        self._data = data

    def __rmul__(self, target):
        return self._cls(target, self._data)


RotateData = namedtuple('RotateData', 'a v')

class _Rotate(Transform):
    def __init__(self, target, data):
        super().__init__('rotate', target, data)

    def _map_point(self, p):
        a, v = self.data
        if v is not None:
            return rotate_point(p, a, Vector(*v).as_3d())
        if isinstance(a, Vector):
            for angle, axis in zip(a.as_3d(), (x_axis, y_axis, z_axis)):
                p = rotate_point(p, angle, axis)
            return p
        return rotate_point(p, a, z_axis)


def rotate(angle=None, vector=None, ax=0, ay=0, az=0):
    if angle is None:
        angle = Vector(ax, ay, az)
    elif isinstance(angle, (list, tuple)):
        angle = Vector(*angle)
    if vector is not None and not isinstance(vector, Vector):
        vector = Vector(*vector)
    return _TransformNode(_Rotate, RotateData(angle, vector))


VectorParam = namedtuple('VectorParam', 'v')

class _Translate(Transform):
    def __init__(self, target, data):
        super().__init__('translate', target, data)

    def _map_point(self, p):
        return tuple(a + b for a, b in zip(p, self.data.v.as_3d()))


def translate(vector=None, x=0, y=0, z=0):
    return _TransformNode(_Translate, VectorParam(_as_vector(vector, x, y, z)))


class _Scale(Transform):
    def __init__(self, target, data):
        super().__init__('scale', target, data)

    def _map_point(self, p):
        v = self.data.v
        factors = tuple(1 if f is None else f for f in v)
        return tuple(a * b for a, b in zip(p, factors))


def scale(vector=None, x=1, y=1, z=1):
    return _TransformNode(_Scale, VectorParam(_as_vector(vector, x, y, z)))


class _Mirror(Transform):
    def __init__(self, target, data):
        super().__init__('mirror', target, data)

    def _map_point(self, p):
        return mirror_point(p, self.data.v.as_3d())


def mirror(vector=None, x=0, y=0, z=0):
    return _TransformNode(_Mirror, VectorParam(_as_vector(vector, x, y, z)))


class LimitedDimTransform(Transform):
    def __init__(self, dimensions, name, target, data):
        if target.dimensions not in dimensions:
            raise ValueError("Can transform only object with {} dims".format(dimensions))
        super().__init__(name, target, data)


class _Extrude(LimitedDimTransform):
    def __init__(self, name, target, data):
        super().__init__((2,), name, target, data)

    @property
    def dimensions(self):
        return 3


LinearExtrudeParams = namedtuple('LinearExtrudeParams', 'height center convexity')


class _LinearExtrude(_Extrude):
    def __init__(self, target, data):
        super().__init__('linear_extrude', target, data)

    @property
    def bounds(self):
        res = self._target.bounds
        if res.is_empty:
            return res
        h = self.data.height
        z = (-h / 2, h / 2) if self.data.center else (0, h)
        return Box(res.lo[:2] + z[:1], res.hi[:2] + z[1:])


def linear_extrude(height, center=None, convexity=None):
    expect_positive('Extrusion height', height)
    data = LinearExtrudeParams(height, center, convexity)
    return _TransformNode(_LinearExtrude, data)


class OffsetParams(CheckedRecord, namedtuple('OffsetParams', 'r delta chamfer')):
    def __new__(cls, r=None, delta=None, chamfer=None):
        assert_conflicting_args(r, delta)
        if r is None and delta is None:
            raise ValueError('Need r or delta')
        if chamfer is not None and delta is None:
            raise ValueError('chamfer is used only with delta')
        return super().__new__(cls, r, delta, chamfer)


class _Offset(LimitedDimTransform):
    def __init__(self, target, data):
        super().__init__((2,), 'offset', target, data)

    @property
    def bounds(self):
        d = self.data.delta if self.data.r is None else self.data.r
        return self._target.bounds.grown(d)


def offset(r=None, delta=None, chamfer=None):
    return _TransformNode(_Offset, OffsetParams(r, delta, chamfer))


class Geometry(Item, _CSGMixin):
    def __init__(self, dimensions, name, data, **special_vars):
        self._dimensions = dimensions
        self.data = data
        self.name = name
        self._special_vars = special_vars

    @property
    def dimensions(self):
        return self._dimensions

    def __str__(self):
        params = format_call_params(self.data, **self._special_vars)
        return '{}({})'.format(self.name, params)


PolygonData = namedtuple('PolygonData', 'points paths convexity')

class Polygon(Geometry, _OneLinerObjectMixin):
    def __init__(self, points, paths=None, convexity=None):
        points = tuple(p if isinstance(p, Vector) else Vector(*p) for p in points)
        if len(points) < 3:
            raise DegenerateGeometryError(
                'Polygon needs at least 3 points, got {}'.format(len(points)))
        super().__init__(2, 'polygon', PolygonData(points, paths, convexity))

    @property
    def points(self):
        return self.data.points

    @property
    def bounds(self):
        return Box.from_points(self.points)


def polygon(*points, paths=None, convexity=None):
    return Polygon(points, paths, convexity)


RectData = namedtuple('RectData', 'size center')

class RectGeometry(Geometry, _OneLinerObjectMixin):
    def __init__(self, dimensions, name, size, center=None):
        if not isinstance(size, Vector):
            size = Vector(*size)
        if size.dimensions != dimensions:
            raise ValueError('{} needs {} dims, got {}'.format(name, dimensions, size))
        for v in size.coord:
            expect_positive('{} size'.format(name.capitalize()), v)
        super().__init__(dimensions, name, RectData(size, center))

    @property
    def size(self):
        return self.data.size

    @property
    def bounds(self):
        size = self.size.as_3d()
        if self.data.center:
            return Box(tuple(-v / 2 for v in size), tuple(v / 2 for v in size))
        return Box((0, 0, 0), size)


class Square(RectGeometry):
    def __init__(self, size, center=None):
        super().__init__(dimensions=2, name='square', size=size, center=center)


class Cube(RectGeometry):
    def __init__(self, size, center=None):
        super().__init__(dimensions=3, name='cube', size=size, center=center)


def _rect(cls, size, center):
    if not isinstance(size, Vector):
        size = Vector(*size)

    if center is None or isinstance(center, bool):
        return cls(size, center=center)

    center = [bool(c) for c in center]
    if all(center):
        return cls(size, True)

    shift = Vector(*(-s / 2 if c else 0 for s, c in zip(size.coord, center)))
    if not any(center):
        return cls(size)
    return cls(size) * translate(shift)


def square(size=None, center=None, x=0, y=0):
    if size is None:
        size = Vector(x, y)
    return _rect(Square, size, center)


def cube(size=None, center=None, x=0, y=0, z=0):
    """Cube with optional per axis centering, ``center=(False, True, False)``."""
    if size is None:
        size = Vector(x, y, z)
    return _rect(Cube, size, center)


CircleData = namedtuple('CircleData', 'r')

class Circle(Geometry, _OneLinerObjectMixin):
    def __init__(self, r, **special_vars):
        expect_positive('Circle radius', r)
        super().__init__(2, 'circle', CircleData(r), **special_vars)

    @property
    def bounds(self):
        r = self.data.r
        return Box((-r, -r, 0), (r, r, 0))


def circle(r, **special_vars):
    return Circle(r, **special_vars)


class SpecialVariable(namedtuple('SpecialVariable', 'name value'),
                      _OneLinerObjectMixin):

    def __str__(self):
        return '${} = {}'.format(self.name, self.value)


def svar(name, value):
    return SpecialVariable(name, value)


class Scene:
    """Top level program: special variables followed by objects.

    ``Scene(fn=25)`` sets the detail level of round shapes.
    """

    def __init__(self, **special_vars):
        self._items = []
        self._special_vars = special_vars

    def __call__(self, *objects):
        for obj in objects:
            self.append(obj)
        return self

    def __lshift__(self, item):
        return self.append(item)

    def append(self, item):
        self._items.append(item)
        return self

    def lines(self, indent=' ' * 4, level=0):
        special_lines = (svar(name, value).lines(indent, level)
                         for name, value in self._special_vars.items())
        items_lines = (x.lines(indent, level) for x in self._items)
        return itertools.chain(*special_lines, *items_lines)

    def dumps(self, indent=' ' * 4):
        return '\n'.join(self.lines(indent))

    def dump(self, stream, indent=' ' * 4):
        stream.writelines(line + '\n' for line in self.lines(indent))

    def write(self, fname, indent=' ' * 4):
        logger.debug('Writing %d objects to %s', len(self._items), fname)
        with open(fname, 'w') as fp:
            self.dump(fp, indent)


def dump(obj, fname, **special_vars):
    Scene(**special_vars).append(obj).write(fname)
