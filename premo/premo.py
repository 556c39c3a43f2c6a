"""
This module contains Premo's main loop. Batches of read pairs are aligned one after another, and
their read/fragment lengths are pooled until the pooled medians stop moving (or the input runs
out).

Copyright 2026 Ryan Wick (rrwick@gmail.com)

This file is part of Premo. Premo is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software Foundation, either
version 3 of the License, or (at your option) any later version. Premo is distributed in the hope
that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License for more
details. You should have received a copy of the GNU General Public License along with Premo. If
not, see <http://www.gnu.org/licenses/>.
"""

import sys

from .alignment import PipelineConsistencyError
from .batch import Batch, BatchOutcome
from .fastq import FastqReader, FastqOpenError
from .log import log, section_header, explanation, verbose_log, dim, green
from .misc import check_scratch_directory
from .output import write_output
from .result import Result
from .software import CommandRunner, check_mosaik
from .stats import is_converged, get_median


def premo(config, runner=None):
    welcome_message()
    check_scratch_directory(config.scratch_dir)
    check_mosaik(config.mosaik_path)
    if runner is None:
        runner = CommandRunner(config.verbose)

    reader_1, reader_2 = open_input_files(config)
    with reader_1, reader_2:
        try:
            current_result, batch_results, _ = bootstrap(config, reader_1, reader_2, runner)
        except PipelineConsistencyError as e:
            sys.exit(f'\nError: batch alignments are inconsistent - {e}')
    if not batch_results:
        sys.exit('\nError: the input FASTQ files do not contain any reads')

    write_output(config, current_result, batch_results)
    finished_message(config)


def welcome_message():
    section_header('Starting Premo')
    explanation('Premo generates MosaikAligner parameters for paired-end sequencing data. It '
                'aligns batches of read pairs sampled from the input until the overall median '
                'read length and median fragment length stop changing.')


def finished_message(config):
    section_header('Finished!')
    explanation(f'The MosaikAligner parameters (and the results they were derived from) are in '
                f'{config.out}.')


def open_input_files(config):
    failed = []
    readers = []
    for filename in [config.fastq_1, config.fastq_2]:
        try:
            readers.append(FastqReader(filename))
        except FastqOpenError as e:
            failed.append(str(e))
    if failed:
        for reader in readers:
            reader.close()
        sys.exit('\nError: could not open the following input FASTQ file(s):\n  ' +
                 '\n  '.join(failed))
    verbose_log('input FASTQ files opened OK', config.verbose)
    return readers[0], readers[1]


def bootstrap(config, reader_1, reader_2, runner):
    """
    Runs batches until convergence or the end of the input. Returns the overall result, the list
    of per-batch results and the outcome of the last batch run.
    """
    section_header('Bootstrapping')
    explanation(f'Each batch contains up to {config.batch_size:,} read pairs. Premo stops when '
                f'adding a batch changes the overall median fragment length by no more than '
                f'{config.delta_fragment_length} and the overall median read length by no more '
                f'than {config.delta_read_length} (as fractions of their previous values).')

    current_result, batch_results = Result(), []
    finished, batch_number = False, 0
    outcome = None

    while not finished:
        verbose_log(f'running batch: {batch_number}', config.verbose)
        batch = Batch(batch_number, config, reader_1, reader_2, runner)
        status = batch.run()
        outcome = status.outcome

        if outcome == BatchOutcome.NO_DATA:
            if batch_number > 0:
                log('No more read pairs in the input')
            break

        if outcome == BatchOutcome.ERROR:
            sys.exit(f'\nError: batch {batch_number} failed - {status.error}')

        batch_results.append(batch.result)
        previous_result = current_result.copy()
        current_result.append(batch.result)
        log_batch(batch_number, batch.pair_count, current_result)
        if batch_number == 0 and not current_result.fragment_lengths:
            log('Warning: no read pairs in the first batch had both mates aligned to the same '
                'reference, so the fragment length cannot converge')

        if outcome == BatchOutcome.HIT_END_OF_INPUT:
            log('Reached the end of the input read pairs')
            finished = True
        elif batch_number > 0:
            finished = check_finished(previous_result, current_result, config)
            if finished:
                log(green('Median read length and fragment length have converged'))

        batch_number += 1

    log()
    return current_result, batch_results, outcome


def check_finished(previous_result, current_result, config):
    return (is_converged(previous_result.fragment_lengths, current_result.fragment_lengths,
                         config.delta_fragment_length) and
            is_converged(previous_result.read_lengths, current_result.read_lengths,
                         config.delta_read_length))


def log_batch(batch_number, pair_count, current_result):
    read_median = format_median(current_result.read_lengths)
    fragment_median = format_median(current_result.fragment_lengths)
    log(f'batch {batch_number}: {pair_count:,} read pairs  ' +
        dim(f'overall median read length = {read_median}, '
            f'overall median fragment length = {fragment_median}'))


def format_median(samples):
    if not samples:
        return 'n/a'
    return f'{get_median(sorted(samples)):.1f}'
