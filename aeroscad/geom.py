import collections
from collections.abc import Iterable
import itertools
import math
import numbers

from . import util


class Vector(collections.namedtuple('Vector', 'x y z')):
    def __new__(cls, x=None, y=None, z=None):
        return super().__new__(cls, x, y, z)

    @property
    def dimensions(self):
        return sum((1 for v in self if v is not None))

    @property
    def is_sparse(self):
        return util.is_sparse(self, lambda x: x is not None)

    def __repr__(self):
        placeholder = '' if self.is_sparse else None
        values = map(lambda x: placeholder if x is None else str(x), self)
        params = ', '.join(v for v in values if v is not None)
        return '[{}]'.format(params)

    def __add__(self, other):
        def add(a, b):
            if a is None:
                res = b
            elif b is None:
                res = a
            else:
                res = a + b
            return res

        pairs = self._zip(other)
        return Vector(*(add(a, b) for a, b in pairs))

    def __sub__(self, other):
        if not isinstance(other, Vector):
            other = Vector(*other)
        return self + (-other)

    def __neg__(self):
        return Vector(*map(lambda x: None if x is None else -x, self))

    def _zip(self, other):
        if isinstance(other, numbers.Number):
            return zip(self, itertools.repeat(other))
        elif isinstance(other, Iterable):
            return itertools.zip_longest(self, other)
        else:
            raise ValueError("Can't zip with {}".format(other))

    def __truediv__(self, other):
        def div(x, y):
            return (x / y if not (x is None or y is None) else x)
        return Vector(*(div(a, b) for a, b in self._zip(other)))

    def __mul__(self, other):
        def mul(x, y):
            return (x * y if not (x is None or y is None) else None)
        return Vector(*(mul(a, b) for a, b in self._zip(other)))

    @property
    def coord(self):
        if self.is_sparse:
            raise RuntimeError("Sparse vector can't be resolved")
        return self[:self.dimensions]

    def updated(self, x=None, y=None, z=None):
        return Vector(
            self.x if x is None else x,
            self.y if y is None else y,
            self.z if z is None else z
        )

    def as_3d(self):
        return tuple(0 if v is None else v for v in self)


x_axis = Vector(1, 0, 0)
y_axis = Vector(0, 1, 0)
z_axis = Vector(0, 0, 1)


def rotate_point(p, angle, axis):
    """Rotate 3D point p by angle (degrees) around axis through the origin."""
    ux, uy, uz = axis
    norm = math.sqrt(ux * ux + uy * uy + uz * uz)
    if norm == 0:
        return tuple(p)
    ux, uy, uz = ux / norm, uy / norm, uz / norm
    a = math.radians(angle)
    c, s = math.cos(a), math.sin(a)
    x, y, z = p
    dot = ux * x + uy * y + uz * z
    # Rodrigues
    return (
        x * c + (uy * z - uz * y) * s + ux * dot * (1 - c),
        y * c + (uz * x - ux * z) * s + uy * dot * (1 - c),
        z * c + (ux * y - uy * x) * s + uz * dot * (1 - c),
    )


def mirror_point(p, normal):
    nx, ny, nz = normal
    nn = nx * nx + ny * ny + nz * nz
    if nn == 0:
        return tuple(p)
    k = 2 * (p[0] * nx + p[1] * ny + p[2] * nz) / nn
    return (p[0] - k * nx, p[1] - k * ny, p[2] - k * nz)


_inf = float('inf')


class Box(collections.namedtuple('Box', 'lo hi')):
    """Axis aligned bounds, lo/hi are (x, y, z) tuples.

    Empty box has lo > hi on at least one axis, merging with it is a no-op.
    """

    @classmethod
    def empty(cls):
        return cls((_inf,) * 3, (-_inf,) * 3)

    @classmethod
    def from_points(cls, points):
        points = [p.as_3d() if isinstance(p, Vector) else tuple(p)
                  for p in points]
        if not points:
            return cls.empty()
        return cls(tuple(map(min, zip(*points))), tuple(map(max, zip(*points))))

    @property
    def is_empty(self):
        return any(a > b for a, b in zip(self.lo, self.hi))

    @property
    def size(self):
        if self.is_empty:
            return (0, 0, 0)
        return tuple(b - a for a, b in zip(self.lo, self.hi))

    def corners(self):
        return itertools.product(*zip(self.lo, self.hi))

    def mapped(self, fn):
        if self.is_empty:
            return self
        return Box.from_points([fn(p) for p in self.corners()])

    def merged(self, other):
        return Box(tuple(map(min, self.lo, other.lo)),
                   tuple(map(max, self.hi, other.hi)))

    def intersected(self, other):
        return Box(tuple(map(max, self.lo, other.lo)),
                   tuple(map(min, self.hi, other.hi)))

    def grown(self, delta, axes=(0, 1)):
        if self.is_empty:
            return self
        lo = [v - delta if i in axes else v for i, v in enumerate(self.lo)]
        hi = [v + delta if i in axes else v for i, v in enumerate(self.hi)]
        return Box(tuple(lo), tuple(hi))

    def span(self, axis):
        return (self.lo[axis], self.hi[axis])
