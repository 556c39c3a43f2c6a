"""
This module contains a streaming reader and writer for FASTQ files. The reader transparently
handles gzipped input and tolerates sequences/qualities that are wrapped over multiple lines.

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
import gzip

from .misc import get_open_func


FastqRecord = collections.namedtuple('FastqRecord', ['header', 'sequence', 'qualities'])


class FastqError(Exception):
    pass


class FastqOpenError(FastqError):
    pass


class FastqReadError(FastqError):
    pass


class FastqWriteError(FastqError):
    pass


class MalformedRecord(FastqError):
    pass


class LengthMismatch(FastqError):
    pass


class FastqReader(object):
    """
    Reads one FASTQ record at a time. read_next returns None when the file ends cleanly (i.e.
    where the next header would be) and raises a FastqError when a record is broken.
    """
    def __init__(self, filename=None):
        self.filename = ''
        self.last_error = ''
        self._file = None
        self._next_line = None
        if filename is not None:
            self.open(filename)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def open(self, filename):
        self.close()
        try:
            self._file = get_open_func(filename)(str(filename), 'rt')
        except OSError as e:
            self._fail(FastqOpenError, f'could not open input FASTQ file {filename} '
                                       f'({e.strerror or e})')
        self.filename = str(filename)
        self.last_error = ''

    def is_open(self):
        return self._file is not None

    def close(self):
        if self._file is not None:
            self._file.close()
            self._file = None
        self._next_line = None
        self.filename = ''

    def at_end(self):
        """
        Returns True if there are no more records, i.e. only blank lines (if anything) remain.
        """
        self._skip_blank_lines()
        return self._peek_line() == ''

    def read_next(self):
        if not self.is_open():
            self._fail(FastqReadError, 'cannot read from an unopened FASTQ reader')

        self._skip_blank_lines()
        header = self._get_line()
        if header == '':
            return None
        header = header.rstrip('\r\n')
        if not header.startswith('@'):
            self._fail(MalformedRecord, f'malformed FASTQ entry in {self.filename} - expected '
                                        f"'@' in header, instead found: {header[:1]}")

        sequence_parts = []
        while True:
            next_line = self._peek_line()
            if next_line == '':
                self._fail(MalformedRecord, f'malformed FASTQ entry in {self.filename} - '
                                            f'{header} ended before its qualities')
            if next_line.startswith('+'):
                break
            sequence_parts.append(self._get_line().rstrip('\r\n'))
        sequence = ''.join(sequence_parts)
        self._get_line()  # the '+' separator

        quality_parts, quality_length = [], 0
        while quality_length < len(sequence):
            line = self._get_line()
            if line == '':
                break
            line = line.rstrip('\r\n')
            quality_parts.append(line)
            quality_length += len(line)
        qualities = ''.join(quality_parts)

        if len(qualities) != len(sequence):
            self._fail(LengthMismatch, f'malformed FASTQ entry in {self.filename} - the number '
                                       f'of qualities does not match the number of bases '
                                       f'for {header}')
        return FastqRecord(header, sequence, qualities)

    def _peek_line(self):
        if self._next_line is None:
            self._next_line = self._read_line()
        return self._next_line

    def _get_line(self):
        line = self._peek_line()
        self._next_line = None
        return line

    def _skip_blank_lines(self):
        while True:
            line = self._peek_line()
            if line == '' or line.strip():
                return
            self._get_line()

    def _read_line(self):
        try:
            return self._file.readline()
        except (OSError, EOFError, UnicodeDecodeError) as e:
            self._fail(FastqReadError, f'could not read from input FASTQ file {self.filename} '
                                       f'({e})')

    def _fail(self, error_class, message):
        self.last_error = message
        raise error_class(message)


class FastqWriter(object):
    """
    Writes FASTQ records in the plain four-line layout. The output is gzipped if the filename
    ends in .gz.
    """
    def __init__(self, filename=None):
        self.filename = ''
        self._file = None
        if filename is not None:
            self.open(filename)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def open(self, filename):
        self.close()
        open_func = gzip.open if str(filename).endswith('.gz') else open
        try:
            self._file = open_func(str(filename), 'wt')
        except OSError as e:
            raise FastqWriteError(f'could not create FASTQ file {filename} '
                                  f'({e.strerror or e})')
        self.filename = str(filename)

    def is_open(self):
        return self._file is not None

    def write(self, record):
        if not self.is_open():
            raise FastqWriteError('cannot write to an unopened FASTQ writer')
        try:
            self._file.write(f'{record.header}\n{record.sequence}\n+\n{record.qualities}\n')
        except OSError as e:
            raise FastqWriteError(f'could not write to FASTQ file {self.filename} '
                                  f'({e.strerror or e})')

    def close(self):
        if self._file is not None:
            try:
                self._file.close()
            except OSError as e:
                raise FastqWriteError(f'could not write to FASTQ file {self.filename} '
                                      f'({e.strerror or e})')
            finally:
                self._file = None
                self.filename = ''
