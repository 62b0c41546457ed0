"""Write one of the parts as an OpenSCAD file.

    python -m aeroscad --airfoil airfoils/mh44.dat ribs --first 0 --last 3
"""

import argparse
import logging
import sys

from . import assembly, hinge
from .airfoil import Airfoil
from .errors import Error
from .csg import Scene
from .fuselage import Fuselage
from .wing import Wing

logger = logging.getLogger('aeroscad')

DEFAULT_AIRFOIL = 'airfoils/mh44.dat'


def _wing(args):
    return Wing(
        Airfoil.load(args.airfoil),
        inner_length=args.inner_length,
        outer_length=args.outer_length,
        wingspan=args.wingspan,
    )


def _ribs(args):
    last = args.count if args.last is None else args.last
    return assembly.wing_ribs(_wing(args), range(args.first, last),
                              args.thickness, args.count)


PARTS = {
    'airfoil': lambda args: assembly.extrude_airfoil(
        Airfoil.load(args.airfoil), args.inner_length, 10.),
    'wing': lambda args: _wing(args).extruded_rib_shape(),
    'plane': lambda args: assembly.assemble_plane(_wing(args), Fuselage()),
    'ribs': _ribs,
    'all-ribs': lambda args: _wing(args).all_wing_ribs(args.thickness, args.count),
    'control-surface': lambda args: _wing(args).control_surface(0.45, 30.),
    'fuselage': lambda args: Fuselage().get(),
    'hinge': lambda args: hinge.hinge(args.teeth, args.tooth_height, args.hinge_thickness),
    'test-hinge': lambda args: hinge.test_hinge(),
    'test-mount': lambda args: hinge.test_mount(),
}


def get_parser():
    parser = argparse.ArgumentParser(
        prog='aeroscad', description='Generate OpenSCAD models of plane parts')
    parser.add_argument('part', choices=sorted(PARTS))
    parser.add_argument('-o', '--output', default='out.scad',
                        help='Output .scad file (default: %(default)s)')
    parser.add_argument('--detail', type=int, default=25,
                        help='$fn of round shapes (default: %(default)s)')
    parser.add_argument('--airfoil', default=DEFAULT_AIRFOIL,
                        help='Profile file at unit chord (default: %(default)s)')
    parser.add_argument('-v', '--verbose', action='store_true')

    wing = parser.add_argument_group('wing')
    wing.add_argument('--inner-length', type=float, default=140.)
    wing.add_argument('--outer-length', type=float, default=100.)
    wing.add_argument('--wingspan', type=float, default=500.)

    ribs = parser.add_argument_group('ribs')
    ribs.add_argument('--thickness', type=float, default=5.)
    ribs.add_argument('--count', type=int, default=8)
    ribs.add_argument('--first', type=int, default=0)
    ribs.add_argument('--last', type=int, default=None,
                      help='Index after the last rib (default: count)')

    hinge_group = parser.add_argument_group('hinge')
    hinge_group.add_argument('--teeth', type=int, default=5)
    hinge_group.add_argument('--tooth-height', type=float, default=4.)
    hinge_group.add_argument('--hinge-thickness', type=float, default=4.)
    return parser


def main(argv=None):
    args = get_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s',
    )
    try:
        obj = PARTS[args.part](args)
        Scene(fn=args.detail)(obj).write(args.output)
    except (OSError, Error) as err:
        logger.error('Failed to build %s: %s', args.part, err)
        return 1
    logger.info('Wrote %s to %s', args.part, args.output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
