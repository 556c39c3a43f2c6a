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

from .stats import remove_outliers, get_container_stats


class Result(object):
    """
    Read lengths and fragment lengths observed in one or more batches.
    """
    def __init__(self, read_lengths=None, fragment_lengths=None):
        self.read_lengths = list(read_lengths) if read_lengths else []
        self.fragment_lengths = list(fragment_lengths) if fragment_lengths else []

    def __repr__(self):
        return f'Result({len(self.read_lengths)} reads, {len(self.fragment_lengths)} fragments)'

    def is_empty(self):
        return not self.read_lengths and not self.fragment_lengths

    def copy(self):
        return Result(self.read_lengths, self.fragment_lengths)

    def append(self, other):
        self.read_lengths += other.read_lengths
        self.fragment_lengths += other.fragment_lengths

    def remove_outliers(self):
        self.read_lengths = remove_outliers(self.read_lengths)
        self.fragment_lengths = remove_outliers(self.fragment_lengths)

    def to_json(self):
        return {'fragment length': get_container_stats(self.fragment_lengths),
                'read length': get_container_stats(self.read_lengths)}
