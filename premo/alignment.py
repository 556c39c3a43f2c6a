"""
This module reads MosaikAligner's BAM output. Mosaik writes the two mates of each pair as
consecutive records, so pairs are formed by simply taking the records two at a time.

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

import pysam


class AlignmentFileError(Exception):
    pass


class PipelineConsistencyError(Exception):
    pass


Mate = collections.namedtuple('Mate', ['length', 'is_mapped', 'reference_id', 'insert_size'])


def iterate_mate_pairs(bam_filename):
    """
    Yields (mate_1, mate_2) tuples. If the file has an odd number of records, the last one is
    yielded with None for its partner.
    """
    try:
        bam = pysam.AlignmentFile(str(bam_filename), 'rb', check_sq=False)
    except (OSError, ValueError) as e:
        raise AlignmentFileError(f'could not open generated BAM file {bam_filename} to parse '
                                 f'alignments ({e})')
    with bam:
        mate_1 = None
        try:
            for alignment in bam.fetch(until_eof=True):
                mate = Mate(alignment.query_length, not alignment.is_unmapped,
                            alignment.reference_id, alignment.template_length)
                if mate_1 is None:
                    mate_1 = mate
                else:
                    yield mate_1, mate
                    mate_1 = None
        except (OSError, ValueError) as e:
            raise AlignmentFileError(f'could not read alignments from {bam_filename} ({e})')
        if mate_1 is not None:
            yield mate_1, None


def both_mapped_to_same_reference(mate_1, mate_2):
    return mate_1.is_mapped and mate_2.is_mapped and mate_1.reference_id == mate_2.reference_id


def get_fragment_length(mate_1, mate_2):
    if abs(mate_1.insert_size) != abs(mate_2.insert_size):
        raise PipelineConsistencyError(f'mates have different insert sizes '
                                       f'({mate_1.insert_size} and {mate_2.insert_size})')
    return mate_1.length + abs(mate_1.insert_size) + mate_2.length
