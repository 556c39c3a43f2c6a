"""
This module contains the Batch class, which carries one bootstrap sample through the whole
pipeline: copying read pairs out of the inputs, running Mosaik on them and measuring the read and
fragment lengths in the resulting alignments.

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
import enum

from .alignment import iterate_mate_pairs, both_mapped_to_same_reference, get_fragment_length, \
    AlignmentFileError
from .fastq import FastqWriter, FastqError
from .log import verbose_log
from .result import Result
from .software import get_mosaik_build_command, get_mosaik_aligner_command, \
    run_mosaik_command, MosaikError
from . import settings


class BatchOutcome(enum.Enum):
    NORMAL = 'normal'
    HIT_END_OF_INPUT = 'hit end of input'
    NO_DATA = 'no data'
    ERROR = 'error'


BatchStatus = collections.namedtuple('BatchStatus', ['outcome', 'error'])


class Batch(object):

    def __init__(self, batch_number, config, reader_1, reader_2, runner):
        self.batch_number = batch_number
        self.config = config
        self.reader_1 = reader_1
        self.reader_2 = reader_2
        self.runner = runner
        self.result = Result()
        self.pair_count = 0

        prefix = config.scratch_dir / f'{settings.GENERATED_FILE_PREFIX}{batch_number}'
        self.fastq_1 = prefix.with_name(prefix.name + '_mate1.fq')
        self.fastq_2 = prefix.with_name(prefix.name + '_mate2.fq')
        self.read_archive = prefix.with_name(prefix.name + '_reads.mkb')
        self.bam_stub = prefix.with_name(prefix.name + '_aligned')
        self.bam = self.bam_stub.with_name(self.bam_stub.name + '.bam')
        self.mosaik_log = self.bam_stub.with_name(self.bam_stub.name + '.mosaiklog')
        self.multiple_bam = self.bam_stub.with_name(self.bam_stub.name + '.multiple.bam')
        self.special_bam = self.bam_stub.with_name(self.bam_stub.name + '.special.bam')
        self.stat_file = self.bam_stub.with_name(self.bam_stub.name + '.stat')

    def generated_files(self):
        return [self.fastq_1, self.fastq_2, self.read_archive, self.bam, self.mosaik_log,
                self.multiple_bam, self.special_bam, self.stat_file]

    def run(self):
        """
        Returns a BatchStatus. Problems with the input files, Mosaik or its output give an ERROR
        outcome, but a PipelineConsistencyError is allowed to propagate because it means the
        alignments themselves can't be trusted.
        """
        try:
            outcome = self.generate_temp_fastq_files()
            if outcome == BatchOutcome.NO_DATA:
                return BatchStatus(outcome, '')
            self.run_mosaik_pipeline()
            self.parse_alignment_file()
            self.result.remove_outliers()
            return BatchStatus(outcome, '')
        except (FastqError, MosaikError, AlignmentFileError) as e:
            return BatchStatus(BatchOutcome.ERROR, str(e))
        finally:
            self.clean_up()

    def generate_temp_fastq_files(self):
        """
        Copies the next batch of read pairs to the temporary FASTQ files.
        """
        outcome = BatchOutcome.NORMAL
        with FastqWriter(self.fastq_1) as writer_1, FastqWriter(self.fastq_2) as writer_2:
            while self.pair_count < self.config.batch_size:
                record_1 = self.reader_1.read_next()
                if record_1 is None:
                    outcome = BatchOutcome.HIT_END_OF_INPUT
                    break
                record_2 = self.reader_2.read_next()
                if record_2 is None:
                    raise FastqError(f'{self.reader_2.filename} has fewer reads than '
                                     f'{self.reader_1.filename}')
                writer_1.write(record_1)
                writer_2.write(record_2)
                self.pair_count += 1

        if self.pair_count == 0:
            return BatchOutcome.NO_DATA
        if outcome == BatchOutcome.NORMAL and self.reader_1.at_end():
            outcome = BatchOutcome.HIT_END_OF_INPUT
        verbose_log(f'  batch {self.batch_number}: {self.pair_count:,} read pairs written to '
                    f'{self.fastq_1} and {self.fastq_2}', self.config.verbose)
        return outcome

    def run_mosaik_pipeline(self):
        log_filename = None if self.config.verbose else self.mosaik_log
        run_mosaik_command(self.runner,
                           get_mosaik_build_command(self.config, self.fastq_1, self.fastq_2,
                                                    self.read_archive),
                           log_filename)
        run_mosaik_command(self.runner,
                           get_mosaik_aligner_command(self.config, self.read_archive,
                                                      self.bam_stub),
                           log_filename)

    def parse_alignment_file(self):
        read_lengths, fragment_lengths = [], []
        for mate_1, mate_2 in iterate_mate_pairs(self.bam):
            read_lengths.append(mate_1.length)
            if mate_2 is None:
                continue
            read_lengths.append(mate_2.length)
            if both_mapped_to_same_reference(mate_1, mate_2):
                fragment_lengths.append(get_fragment_length(mate_1, mate_2))
        self.result = Result(read_lengths, fragment_lengths)

    def clean_up(self):
        if self.config.keep:
            return
        for f in self.generated_files():
            if f.is_file():
                f.unlink()
                verbose_log(f'  deleted {f}', self.config.verbose)
