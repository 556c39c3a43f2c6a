"""
This module contains some tests for Premo. To run them, execute `python3 -m pytest` from the root
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

import gzip
import pytest

import premo.misc


def test_is_gzipped_1(scratch_dir):
    filename = scratch_dir / 'test.txt'
    filename.write_text('@read\nACGT\n+\nIIII\n')
    assert not premo.misc.is_gzipped(filename)


def test_is_gzipped_2(scratch_dir):
    # The file name doesn't matter, only its contents.
    filename = scratch_dir / 'test.fastq'
    with gzip.open(str(filename), 'wt') as f:
        f.write('@read\nACGT\n+\nIIII\n')
    assert premo.misc.is_gzipped(filename)


def test_is_gzipped_3(scratch_dir):
    with pytest.raises(OSError):
        premo.misc.is_gzipped(scratch_dir / 'missing.fastq')


def test_get_open_func_1(scratch_dir):
    filename = scratch_dir / 'test.txt'
    filename.write_text('ACGT\n')
    assert premo.misc.get_open_func(filename) == open


def test_get_open_func_2(scratch_dir):
    filename = scratch_dir / 'test.txt.gz'
    with gzip.open(str(filename), 'wt') as f:
        f.write('ACGT\n')
    assert premo.misc.get_open_func(filename) == gzip.open


def test_check_scratch_directory_1(scratch_dir, capsys):
    directory = scratch_dir / 'a' / 'b'
    premo.misc.check_scratch_directory(directory)
    assert directory.is_dir()
    _, err = capsys.readouterr()
    assert 'Creating scratch directory' in err


def test_check_scratch_directory_2(scratch_dir, capsys):
    premo.misc.check_scratch_directory(scratch_dir)
    assert scratch_dir.is_dir()
    _, err = capsys.readouterr()
    assert 'Creating' not in err


def test_check_scratch_directory_3(scratch_dir):
    filename = scratch_dir / 'file'
    filename.write_text('not a directory\n')
    with pytest.raises(SystemExit) as e:
        premo.misc.check_scratch_directory(filename)
    assert 'already exists as a file' in str(e.value)


def test_get_ascii_art():
    assert len(premo.misc.get_ascii_art().splitlines()) == 6
