#    Copyright (C) 2024 The gridticks authors
#
#    This file is part of gridticks.
#
#    gridticks is free software: you can redistribute it and/or modify it
#    under the terms of the GNU General Public License as published by
#    the Free Software Foundation, either version 2 of the License, or
#    (at your option) any later version.
#
#    gridticks is distributed in the hope that it will be useful, but
#    WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU
#    General Public License for more details.
#
#    You should have received a copy of the GNU General Public License
#    along with gridticks. If not, see <https://www.gnu.org/licenses/>.
#
##############################################################################

"""Main command line program: print the ticks for a range."""

import sys
import argparse
import logging

from gridticks import utils
from gridticks import setting
from gridticks import ticks

copyr='''gridticks %s

Copyright (C) 2024 The gridticks authors
Licenced under the GNU General Public Licence (version 2 or greater)
'''

def makeParser():
    parser = argparse.ArgumentParser(
        description='Print the tick values and labels for an axis.')
    parser.add_argument(
        '--version', action='version',
        version=copyr % utils.version())
    parser.add_argument(
        'min', type=float,
        help='minimum value of the range')
    parser.add_argument(
        'max', type=float,
        help='maximum value of the range')
    parser.add_argument(
        '--domain', type=float, default=256, metavar='PX',
        help='length of the axis in pixels (default 256)')
    parser.add_argument(
        '--vertical', action='store_true',
        help='ticks are for a vertical axis')
    parser.add_argument(
        '--descending', action='store_true',
        help='range runs from maximum to minimum')
    parser.add_argument(
        '--pretty', action='store_true',
        help='search for round, well spaced ticks')
    parser.add_argument(
        '--format', metavar='FMT',
        help='format for labels, e.g. %%.3f or %%Vg (default %%.2f)')
    parser.add_argument(
        '--spacing', type=float, metavar='PX',
        help='minimum pixels between labels')
    parser.add_argument(
        '--max-ticks', type=int, metavar='N',
        help='most ticks to generate')
    parser.add_argument(
        '--font-size', type=float, default=10., metavar='PT',
        help='label font size (default 10)')
    parser.add_argument(
        '--timeout', type=float, default=5., metavar='S',
        help='stop waiting for ticks after this many seconds (default 5); '
        'the program only exits once the abandoned search finishes')
    parser.add_argument(
        '--verbose', action='store_true',
        help='print debugging output')
    return parser

def run(argv=None):
    '''Run the main program, returning the exit status.'''

    parser = makeParser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(name)s: %(message)s')

    try:
        config = setting.TickSpacing()
        config.enablePrettyTicks = args.pretty
        if args.spacing is not None:
            config.minimumHorizontalSpacing = args.spacing
            config.minimumVerticalSpacing = args.spacing
        if args.max_ticks is not None:
            config.tickCountSanityCheck = args.max_ticks

        style = setting.Text()
        style.size = args.font_size

        ra = ticks.ContinuousRange(
            args.min, args.max, domain=args.domain,
            descending=args.descending)
    except (utils.InvalidType, ticks.InvalidRange) as e:
        sys.stderr.write('gridticks: invalid argument: %s\n' % e)
        return 1

    vf = utils.makeValueFormatter(args.format) if args.format else None

    try:
        result = ticks.generateTicksWithTimeout(
            utils.FixedFontMetrics(), ra, args.vertical, style=style,
            vf=vf, config=config, timeout=args.timeout)
    except ticks.TickTimeout as e:
        sys.stderr.write('gridticks: %s\n' % e)
        return 1

    for tick in result:
        sys.stdout.write('%r\t%s\n' % (tick.value, tick.label))
    return 0

def main():
    sys.exit(run())

if __name__ == '__main__':
    main()
