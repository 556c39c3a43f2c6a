"""
This module turns the parsed command-line arguments into a validated, immutable Settings object.
All problems are collected and reported together, so the user can fix them in one go.

Copyright 2026 Ryan Wick (rrwick@gmail.com)

This file is part of Premo. Premo is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software Foundation, either
version 3 of the License, or (at your option) any later version. Premo is distributed in the hope
that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License for more
details. You should have received a copy of the GNU General Public License along with Premo. If
not, see <http://www.gnu.org/licenses/>.
"""

import collections
import pathlib

from . import settings


Settings = collections.namedtuple('Settings', [
    'fastq_1', 'fastq_2', 'mosaik_path', 'out', 'reference', 'scratch_dir', 'seq_tech',
    'ann_pe', 'ann_se', 'jump_db', 'keep', 'verbose',
    'batch_size', 'delta_fragment_length', 'delta_read_length',
    'act_intercept', 'act_slope', 'bw_multiplier', 'odd_bw', 'mhp', 'mmp', 'hash_size'])


class ConfigError(Exception):
    pass


REQUIRED = [('fq1', 'FASTQ filename, mate 1'),
            ('fq2', 'FASTQ filename, mate 2'),
            ('mosaik', 'path/to/Mosaik/bin'),
            ('out', 'output filename'),
            ('ref', 'Mosaik reference archive'),
            ('tmp', 'scratch directory for generated files'),
            ('st', 'sequencing technology')]


def validate_settings(args):
    missing = [f'-{name} ({description})' for name, description in REQUIRED
               if not getattr(args, name)]
    invalid = get_invalid_settings(args)

    if missing or invalid:
        message = ''
        if missing:
            message += 'the following parameters are missing:\n  ' + '\n  '.join(missing)
        if invalid:
            if message:
                message += '\n'
            message += 'the following parameters are invalid:\n  ' + '\n  '.join(invalid)
        raise ConfigError(message)

    return Settings(fastq_1=pathlib.Path(args.fq1), fastq_2=pathlib.Path(args.fq2),
                    mosaik_path=pathlib.Path(args.mosaik), out=pathlib.Path(args.out),
                    reference=pathlib.Path(args.ref), scratch_dir=pathlib.Path(args.tmp),
                    seq_tech=args.st,
                    ann_pe=pathlib.Path(args.annpe) if args.annpe else None,
                    ann_se=pathlib.Path(args.annse) if args.annse else None,
                    jump_db=args.jmp if args.jmp else None,
                    keep=args.keep, verbose=args.verbose,
                    batch_size=args.batch_size,
                    delta_fragment_length=args.delta_fl, delta_read_length=args.delta_rl,
                    act_intercept=args.act_intercept, act_slope=args.act_slope,
                    bw_multiplier=args.bwm, odd_bw=args.odd_bw,
                    mhp=args.mhp, mmp=args.mmp, hash_size=args.hs)


def get_invalid_settings(args):
    invalid = []
    if args.act_intercept < 0:
        invalid.append('-act-intercept cannot be negative')
    if args.act_slope <= 0.0:
        invalid.append('-act-slope must be a positive, non-zero value')
    if args.batch_size <= 0:
        invalid.append('-n must be a positive, non-zero value')
    if args.bwm <= 0.0:
        invalid.append('-bwm must be a positive, non-zero value')
    if args.delta_fl <= 0.0:
        invalid.append('-delta-fl must be a positive, non-zero value')
    if args.delta_rl <= 0.0:
        invalid.append('-delta-rl must be a positive, non-zero value')
    if args.mhp <= 0:
        invalid.append('-mhp must be a positive, non-zero value')
    if args.mmp < 0.0 or args.mmp > 1.0:
        invalid.append('-mmp must be in the range [0.0 - 1.0]')
    if args.hs < settings.MIN_HASH_SIZE or args.hs > settings.MAX_HASH_SIZE:
        invalid.append(f'-hs must be in the range [{settings.MIN_HASH_SIZE} - '
                       f'{settings.MAX_HASH_SIZE}]')
    if args.st and args.st not in settings.SEQ_TECHS:
        invalid.append(f'-st must be one of: {", ".join(settings.SEQ_TECHS)}')
    return invalid
