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

import gzip
import pathlib
import sys

from .log import log, bold_yellow


GZIP_MAGIC = b'\x1f\x8b'


def is_gzipped(filename):
    """
    Looks at the first two bytes of a file to see if they match the gzip magic number. Raises
    OSError if the file can't be opened.
    """
    with open(str(filename), 'rb') as unknown_file:
        file_start = unknown_file.read(len(GZIP_MAGIC))
    return file_start == GZIP_MAGIC


def get_open_func(filename):
    if is_gzipped(filename):
        return gzip.open
    else:  # plain text
        return open


def check_python_version():
    if sys.version_info.major < 3 or sys.version_info.minor < 6:
        sys.exit('\nError: Premo requires Python 3.6 or later')


def check_scratch_directory(directory: pathlib.Path):
    if directory.is_file():
        sys.exit(f'\nError: scratch directory ({directory}) already exists as a file')
    if directory.is_dir():
        log(f'Scratch directory: {directory}')
    else:
        log(f'Creating scratch directory: {directory}')
        try:
            directory.mkdir(parents=True)
        except OSError as e:
            sys.exit(f'\nError: could not create scratch directory {directory} ({e.strerror})')
    log()


def get_ascii_art():
    ascii_art = (bold_yellow(r" _____") + '\n' +
                 bold_yellow(r"|  __ \ ") + '\n' +
                 bold_yellow(r"| |__) | __ ___ _ __ ___   ___") + '\n' +
                 bold_yellow(r"|  ___/ '__/ _ \ '_ ` _ \ / _ \ ") + '\n' +
                 bold_yellow(r"| |   | | |  __/ | | | | | (_) |") + '\n' +
                 bold_yellow(r"|_|   |_|  \___|_| |_| |_|\___/") + '\n')
    return ascii_art
