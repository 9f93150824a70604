# Copyright © 2026 The gohex authors
#
# This library is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License as published by the Free Software Foundation; either
# version 2 of the licence, or (at your option) any later version.
#
# This library is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this library; if not, see <http://www.gnu.org/licenses/>.

import argparse
import contextlib
import os
import sys

from .config import Configuration, GohexError
from .config import DEFAULT_COLUMNS, DEFAULT_INDENT, DEFAULT_PACKAGE, DEFAULT_VARIABLE
from .generator import generate

PROG = 'gohex'
STDIO = '-'


def build_parser():
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage='%(prog)s [flags] [infile [outfile]]',
        description='Write a Go source file declaring the contents of '
                    'infile (or stdin) as a byte slice.',
        add_help=False)
    parser.add_argument('-c', '--columns', type=int, default=DEFAULT_COLUMNS,
                        help='number of columns to format per line '
                             f'(default {DEFAULT_COLUMNS})')
    parser.add_argument('-h', '--help', action='store_true',
                        help='print this summary')
    parser.add_argument('-i', '--indent', type=int, default=DEFAULT_INDENT,
                        help='number of tabs to indent the byte slice '
                             f'(default {DEFAULT_INDENT})')
    parser.add_argument('-p', '--package', default=DEFAULT_PACKAGE,
                        help='name for Go package, or empty for none '
                             f'(default "{DEFAULT_PACKAGE}")')
    parser.add_argument('-s', '--strip', action='store_true',
                        help='output byte slice without declarations')
    parser.add_argument('-v', '--variable', default=DEFAULT_VARIABLE,
                        help='name for Go variable of the byte slice '
                             f'(default "{DEFAULT_VARIABLE}")')
    parser.add_argument('files', nargs='*', metavar='FILE',
                        help='input file and output file, "-" for stdin '
                             'or stdout')
    return parser


def report_error(message):
    print(f'{PROG}: {message}', file=sys.stderr)


def is_stdio(name):
    return name is None or name == STDIO


def open_input(name):
    if is_stdio(name):
        return contextlib.nullcontext(sys.stdin.buffer)
    return open(name, 'rb')


def open_output(name):
    if is_stdio(name):
        return contextlib.nullcontext(sys.stdout.buffer)
    return open(name, 'wb')


def run(config, infile=None, outfile=None):
    '''Convert infile to outfile, both defaulting to standard streams.

    OSError from opening, reading, writing or flushing propagates.
    '''
    with open_input(infile) as source, open_output(outfile) as sink:
        count = generate(source, sink, config)
        sink.flush()
    return count


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.help:
        parser.print_help(file=sys.stderr)
        return 1

    config = Configuration(columns=args.columns,
                           indent=args.indent,
                           variable=args.variable,
                           package=args.package,
                           strip=args.strip)
    try:
        config.validate()
    except GohexError as e:
        report_error(e)
        return 1

    if len(args.files) > 2:
        report_error('invalid number of arguments')
        parser.print_help(file=sys.stderr)
        return 1

    infile, outfile = (args.files + [None, None])[:2]

    try:
        run(config, infile, outfile)
    except BrokenPipeError as e:
        if is_stdio(outfile):
            # stdout went away; keep the interpreter from flushing it again at exit
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
            os.close(devnull)
        report_error(e)
        return 1
    except OSError as e:
        report_error(e)
        return 1

    return 0
