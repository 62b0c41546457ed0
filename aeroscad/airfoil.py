import collections
import logging

from . import csg
from .errors import ParseError
from .geom import Vector
from .util import CheckedRecord

logger = logging.getLogger(__name__)


def _parse_point(line, source, lineno):
    words = line.split()
    if len(words) < 2:
        raise ParseError('Expected "x y" pair', source, lineno, line)
    try:
        return Vector(float(words[0]), float(words[1]))
    except ValueError as err:
        raise ParseError('Bad number', source, lineno, line) from err


class Airfoil(CheckedRecord, collections.namedtuple('Airfoil', 'points')):
    """Profile at unit chord, upper surface first.

    Source format: a label line followed by one ``x y`` pair per line.
    """

    def __new__(cls, points):
        return super().__new__(cls, tuple(Vector(*p) for p in points))

    @classmethod
    def from_lines(cls, lines, source='<lines>'):
        lines = iter(lines)
        header = next(lines, None)
        if header is None:
            raise ParseError('No header line', source)

        points = [
            _parse_point(line, source, lineno)
            for lineno, line in enumerate(lines, 2)
            if line.strip()
        ]
        if not points:
            raise ParseError('No points after header {!r}'.format(header.strip()),
                             source)
        logger.info('Loaded %d points of %r from %s',
                    len(points), header.strip(), source)
        return cls(points)

    @classmethod
    def load(cls, path):
        with open(path) as fp:
            return cls.from_lines(fp, source=str(path))

    def polygon(self):
        return csg.Polygon(self.points)

    def shape(self, length):
        return self.polygon() * csg.scale([length, length])


def load_airfoil(path):
    return Airfoil.load(path)
