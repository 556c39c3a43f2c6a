"""
Shared fixtures for Premo's tests. To run the tests, execute `python3 -m pytest` from the root
Premo directory.

Copyright 2026 Ryan Wick (rrwick@gmail.com)

This file is part of Premo. Premo is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software Foundation, either
version 3 of the License, or (at your option) any later version. Premo is distributed in the hope
that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License for more
details. You should have received a copy of the GNU General Public License along with Premo. If
not, see <http://www.gnu.org/licenses/>.
"""

import pathlib
import tempfile

import pysam
import pytest

import premo.config
import premo.fastq
import premo.settings


@pytest.fixture
def scratch_dir():
    with tempfile.TemporaryDirectory() as temp_dir:
        yield pathlib.Path(temp_dir)


@pytest.fixture
def make_config(scratch_dir):
    def _make_config(**kwargs):
        values = dict(fastq_1=scratch_dir / 'input_1.fastq', fastq_2=scratch_dir / 'input_2.fastq',
                      mosaik_path=pathlib.Path('/opt/mosaik/bin'), out=scratch_dir / 'out.json',
                      reference=pathlib.Path('ref.dat'), scratch_dir=scratch_dir,
                      seq_tech='illumina', ann_pe=None, ann_se=None, jump_db=None,
                      keep=False, verbose=False,
                      batch_size=premo.settings.DEFAULT_BATCH_SIZE,
                      delta_fragment_length=premo.settings.DEFAULT_DELTA_FRAGMENT_LENGTH,
                      delta_read_length=premo.settings.DEFAULT_DELTA_READ_LENGTH,
                      act_intercept=premo.settings.DEFAULT_ACT_INTERCEPT,
                      act_slope=premo.settings.DEFAULT_ACT_SLOPE,
                      bw_multiplier=premo.settings.DEFAULT_BW_MULTIPLIER, odd_bw=False,
                      mhp=premo.settings.DEFAULT_MHP, mmp=premo.settings.DEFAULT_MMP,
                      hash_size=premo.settings.DEFAULT_HASH_SIZE)
        values.update(kwargs)
        return premo.config.Settings(**values)
    return _make_config


def write_read_pairs(filename_1, filename_2, pair_count, read_length=100):
    with premo.fastq.FastqWriter(filename_1) as writer_1, \
            premo.fastq.FastqWriter(filename_2) as writer_2:
        for i in range(pair_count):
            writer_1.write(premo.fastq.FastqRecord(f'@read_{i}/1', 'A' * read_length,
                                                   'I' * read_length))
            writer_2.write(premo.fastq.FastqRecord(f'@read_{i}/2', 'C' * read_length,
                                                   'I' * read_length))


@pytest.fixture
def read_pairs():
    return write_read_pairs


def make_alignment(name, sequence, flag, reference_id, template_length):
    a = pysam.AlignedSegment()
    a.query_name = name
    a.query_sequence = sequence
    a.flag = flag
    a.mapping_quality = 60 if reference_id >= 0 else 0
    a.reference_id = reference_id
    if reference_id >= 0:
        a.reference_start = 1000
        a.cigartuples = [(0, len(sequence))]
    a.template_length = template_length
    a.query_qualities = pysam.qualitystring_to_array('I' * len(sequence))
    return a


def write_bam(filename, pairs):
    """
    Each pair is ((seq_1, ref_id_1, tlen_1), (seq_2, ref_id_2, tlen_2)). A reference id of -1
    makes an unmapped read.
    """
    header = {'HD': {'VN': '1.0'},
              'SQ': [{'LN': 1000000, 'SN': 'chr1'}, {'LN': 1000000, 'SN': 'chr2'}]}
    with pysam.AlignmentFile(str(filename), 'wb', header=header) as bam:
        for i, (mate_1, mate_2) in enumerate(pairs):
            for mate, first_or_second in [(mate_1, 64), (mate_2, 128)]:
                if mate is None:
                    continue
                seq, ref_id, tlen = mate
                flag = 1 | first_or_second | (4 if ref_id < 0 else 0)
                bam.write(make_alignment(f'pair_{i}', seq, flag, ref_id, tlen))


@pytest.fixture
def bam_writer():
    return write_bam


class FakeMosaik(object):
    """
    Stands in for CommandRunner. MosaikBuild just touches its archive, and MosaikAligner writes
    a BAM where every pair is mapped to chr1 with the next insert size from insert_sizes (the last
    one repeats).
    """
    def __init__(self, insert_sizes=(100,), build_status=0, aligner_status=0):
        self.insert_sizes = list(insert_sizes)
        self.build_status = build_status
        self.aligner_status = aligner_status
        self.commands = []
        self.fastqs = None

    def run(self, command, log_filename=None):
        command = [str(c) for c in command]
        self.commands.append(command)
        program = pathlib.Path(command[0]).name
        if program == premo.settings.MOSAIK_BUILD:
            self.fastqs = (command[command.index('-q') + 1], command[command.index('-q2') + 1])
            pathlib.Path(command[command.index('-out') + 1]).touch()
            return self.build_status
        if self.aligner_status != 0:
            return self.aligner_status
        insert_size = self.insert_sizes[0]
        if len(self.insert_sizes) > 1:
            self.insert_sizes.pop(0)
        reads_1 = premo.fastq.FastqReader(self.fastqs[0])
        reads_2 = premo.fastq.FastqReader(self.fastqs[1])
        pairs = []
        with reads_1, reads_2:
            while True:
                record_1, record_2 = reads_1.read_next(), reads_2.read_next()
                if record_1 is None:
                    break
                pairs.append(((record_1.sequence, 0, insert_size),
                              (record_2.sequence, 0, -insert_size)))
        write_bam(command[command.index('-out') + 1] + '.bam', pairs)
        return self.aligner_status


@pytest.fixture
def fake_mosaik():
    return FakeMosaik
