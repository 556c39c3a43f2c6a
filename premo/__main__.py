#!/usr/bin/env python3
"""
Copyright 2026 Ryan Wick (rrwick@gmail.com)

This file is part of Premo. Premo is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software Foundation, either
version 3 of the License, or (at your option) any later version. Premo is distributed in the hope
that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License for more
details. You should have received a copy of the GNU General Public License along with Premo. If
not, see <http://www.gnu.org/licenses/>.
"""

import argparse
import sys

from .config import validate_settings, ConfigError
from .help_formatter import MyParser, MyHelpFormatter
from .log import bold
from .misc import check_python_version, get_ascii_art
from .premo import premo
from . import settings
from .version import __version__


def main():
    check_python_version()
    args = parse_args(sys.argv[1:])
    try:
        config = validate_settings(args)
    except ConfigError as e:
        sys.exit(f'\nError: {e}')
    premo(config)


def parse_args(args):
    description = 'R|' + get_ascii_art() + '\n' + \
                  bold('Premo: MosaikAligner parameter generation for paired-end reads')
    parser = MyParser(description=description, formatter_class=MyHelpFormatter, add_help=False)

    io_args = parser.add_argument_group('Input & output')
    io_args.add_argument('-fq1', '--fq1', type=str, dest='fq1',
                         help='Input FASTQ file, mate 1 (required)')
    io_args.add_argument('-fq2', '--fq2', type=str, dest='fq2',
                         help='Input FASTQ file, mate 2 (required)')
    io_args.add_argument('-mosaik', '--mosaik', type=str, dest='mosaik',
                         help='Directory containing the MosaikBuild and MosaikAligner '
                              'executables (required)')
    io_args.add_argument('-out', '--out', type=str, dest='out',
                         help='Output file (JSON) for the generated Mosaik parameters and the '
                              'raw batch results (required)')
    io_args.add_argument('-ref', '--ref', type=str, dest='ref',
                         help='MosaikBuild-generated reference archive (required)')
    io_args.add_argument('-tmp', '--tmp', type=str, dest='tmp',
                         help='Scratch directory for generated files (required)')
    io_args.add_argument('-annpe', '--annpe', type=str, dest='annpe',
                         help='Neural network filename, paired-end')
    io_args.add_argument('-annse', '--annse', type=str, dest='annse',
                         help='Neural network filename, single-end')
    io_args.add_argument('-jmp', '--jmp', type=str, dest='jmp',
                         help='Stub for jump database files')
    io_args.add_argument('-keep', '--keep', action='store_true', dest='keep',
                         help='Keep generated files (default: delete them after each batch)')

    premo_args = parser.add_argument_group('Bootstrapping')
    premo_args.add_argument('-delta-fl', '--delta_fl', type=float, dest='delta_fl',
                            default=settings.DEFAULT_DELTA_FRAGMENT_LENGTH,
                            help='Stop when the overall median fragment length changes by less '
                                 'than this fraction after a new batch')
    premo_args.add_argument('-delta-rl', '--delta_rl', type=float, dest='delta_rl',
                            default=settings.DEFAULT_DELTA_READ_LENGTH,
                            help='Stop when the overall median read length changes by less than '
                                 'this fraction after a new batch')
    premo_args.add_argument('-n', '--batch_size', type=int, dest='batch_size',
                            default=settings.DEFAULT_BATCH_SIZE,
                            help='Number of read pairs to align per batch')

    mosaik_args = parser.add_argument_group('Mosaik parameter generation')
    mosaik_args.add_argument('-st', '--st', type=str, dest='st',
                             help='Sequencing technology: ' + ', '.join(settings.SEQ_TECHS) +
                                  ' (required)')
    mosaik_args.add_argument('-act-intercept', '--act_intercept', type=int, dest='act_intercept',
                             default=settings.DEFAULT_ACT_INTERCEPT,
                             help='Alignment candidate threshold intercept: generated -act will '
                                  'be (slope * read length) + intercept')
    mosaik_args.add_argument('-act-slope', '--act_slope', type=float, dest='act_slope',
                             default=settings.DEFAULT_ACT_SLOPE,
                             help='Alignment candidate threshold slope')
    mosaik_args.add_argument('-bwm', '--bwm', type=float, dest='bwm',
                             default=settings.DEFAULT_BW_MULTIPLIER,
                             help='Banded Smith-Waterman multiplier: generated -bw will be '
                                  '(multiplier * read length), rounded up')
    mosaik_args.add_argument('-odd-bw', '--odd_bw', action='store_true', dest='odd_bw',
                             help='Make the generated -bw parameter an odd number')
    mosaik_args.add_argument('-mhp', '--mhp', type=int, dest='mhp', default=settings.DEFAULT_MHP,
                             help='Maximum hash positions, used in batch runs and included in '
                                  'the generated parameters')
    mosaik_args.add_argument('-mmp', '--mmp', type=float, dest='mmp', default=settings.DEFAULT_MMP,
                             help='Mismatch percent, used in batch runs and included in the '
                                  'generated parameters')
    mosaik_args.add_argument('-hs', '--hs', type=int, dest='hs',
                             default=settings.DEFAULT_HASH_SIZE,
                             help='Hash size, used in batch runs and included in the generated '
                                  'parameters')

    other_args = parser.add_argument_group('Other')
    other_args.add_argument('-v', '--verbose', action='store_true', dest='verbose',
                            help='Display extra output (to stderr)')
    other_args.add_argument('-h', '--help', action='help', default=argparse.SUPPRESS,
                            help='Show this help message and exit')
    other_args.add_argument('-version', '--version', action='version',
                            version='Premo v' + __version__,
                            help="Show program's version number and exit")

    # If no arguments were used, print the help text.
    if len(args) == 0:
        parser.print_help(file=sys.stderr)
        sys.exit(1)

    return parser.parse_args(args)


if __name__ == '__main__':
    main()
