"""
This module builds Premo's JSON output: the overall and per-batch length statistics, the settings
used and the MosaikAligner parameters derived from them.

Copyright 2026 Ryan Wick (rrwick@gmail.com)

This file is part of Premo. Premo is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software Foundation, either
version 3 of the License, or (at your option) any later version. Premo is distributed in the hope
that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License for more
details. You should have received a copy of the GNU General Public License along with Premo. If
not, see <http://www.gnu.org/licenses/>.
"""

import json
import math
import sys

from .log import log
from .stats import get_median


def write_output(config, current_result, batch_results):
    output = get_output(config, current_result, batch_results)
    try:
        with open(config.out, 'wt') as out_file:
            json.dump(output, out_file, indent=2)
            out_file.write('\n')
    except OSError as e:
        sys.exit(f'\nError: could not write final output file {config.out} ({e.strerror})')
    log(f'Results saved to {config.out}')


def get_output(config, current_result, batch_results):
    return {'overall result': current_result.to_json(),
            'batch results': [r.to_json() for r in batch_results],
            'settings': get_settings_json(config),
            'parameters': {'MosaikAligner': get_mosaik_aligner_parameters(config,
                                                                          current_result)}}


def get_settings_json(config):
    return {'act intercept': config.act_intercept,
            'act slope': config.act_slope,
            'bandwidth multiplier': config.bw_multiplier,
            'batch size': config.batch_size,
            'delta fragment length': config.delta_fragment_length,
            'delta read length': config.delta_read_length,
            'hash size': config.hash_size,
            'mhp': config.mhp,
            'mmp': config.mmp,
            'seq tech': config.seq_tech}


def get_mosaik_aligner_parameters(config, current_result):
    read_length = get_median_or_none(current_result.read_lengths)
    fragment_length = get_median_or_none(current_result.fragment_lengths)
    if read_length is None:
        act, bw = None, None
    else:
        act = (config.act_slope * read_length) + config.act_intercept
        bw = get_bandwidth(config.bw_multiplier, read_length, config.odd_bw)
    return {'-act': act,
            '-bw': bw,
            '-ls': fragment_length,
            '-mhp': config.mhp,
            '-mmp': config.mmp,
            '-hs': config.hash_size,
            '-st': config.seq_tech}


def get_bandwidth(multiplier, read_length, force_odd):
    bandwidth = int(math.ceil(multiplier * read_length))
    if force_odd and bandwidth % 2 == 0:
        bandwidth += 1
    return bandwidth


def get_median_or_none(samples):
    if not samples:
        return None
    return get_median(sorted(samples))
