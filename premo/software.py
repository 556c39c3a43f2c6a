"""
This module contains everything that touches the Mosaik executables: checking that they are
installed, building their command lines and running them.

Copyright 2026 Ryan Wick (rrwick@gmail.com)

This file is part of Premo. Premo is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software Foundation, either
version 3 of the License, or (at your option) any later version. Premo is distributed in the hope
that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License for more
details. You should have received a copy of the GNU General Public License along with Premo. If
not, see <http://www.gnu.org/licenses/>.
"""

import os
import subprocess
import sys

from .log import log, verbose_log
from . import settings


class MosaikError(Exception):
    pass


class CommandRunner(object):
    """
    Runs an external command to completion and returns its exit status. When a log file is
    given, the command's stdout and stderr are appended to it, otherwise they go to the terminal.
    Tests swap this out for a fake, so nothing else in Premo calls subprocess directly.
    """
    def __init__(self, verbose=False):
        self.verbose = verbose

    def run(self, command, log_filename=None):
        command = [str(c) for c in command]
        verbose_log('  ' + ' '.join(command), self.verbose)
        if log_filename is None:
            return subprocess.run(command).returncode
        with open(log_filename, 'at') as log_file:
            return subprocess.run(command, stdout=log_file, stderr=subprocess.STDOUT).returncode


def run_mosaik_command(runner, command, log_filename=None):
    program = os.path.basename(str(command[0]))
    try:
        exit_status = runner.run(command, log_filename)
    except OSError as e:
        raise MosaikError(f'could not run {command[0]} ({e.strerror or e})')
    if exit_status != 0:
        message = f'{program} failed with exit status {exit_status}'
        if log_filename is not None:
            message += f' (see {log_filename})'
        raise MosaikError(message)


def get_mosaik_build_command(config, fastq_1, fastq_2, read_archive):
    command = [config.mosaik_path / settings.MOSAIK_BUILD,
               '-q', fastq_1, '-q2', fastq_2, '-out', read_archive, '-st', config.seq_tech]
    if not config.verbose:
        command.append('-quiet')
    return command


def get_mosaik_aligner_command(config, read_archive, bam_stub):
    command = [config.mosaik_path / settings.MOSAIK_ALIGNER,
               '-ia', config.reference, '-in', read_archive, '-out', bam_stub,
               '-hs', config.hash_size, '-mhp', config.mhp, '-mmp', config.mmp, '-kd', '-pd']
    if config.ann_pe is not None:
        command += ['-annpe', config.ann_pe]
    if config.ann_se is not None:
        command += ['-annse', config.ann_se]
    if config.jump_db is not None:
        command += ['-j', config.jump_db]
    if not config.verbose:
        command.append('-quiet')
    return command


def check_mosaik(mosaik_path):
    log('Checking required software:')
    for program in [settings.MOSAIK_BUILD, settings.MOSAIK_ALIGNER]:
        executable = mosaik_path / program
        if not executable.is_file():
            sys.exit(f'\nError: unable to find {program} in {mosaik_path} - make sure that the '
                     f'-mosaik option points to the directory containing the Mosaik binaries.')
        if not os.access(str(executable), os.X_OK):
            sys.exit(f'\nError: {executable} is not executable')
        log(f'  {program}: {executable}')
    log()
