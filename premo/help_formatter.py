"""
This module contains some subclasses for customising Premo's argument parsing and help text.

Copyright 2026 Ryan Wick (rrwick@gmail.com)

This file is part of Premo. Premo is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software Foundation, either
version 3 of the License, or (at your option) any later version. Premo is distributed in the hope
that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License for more
details. You should have received a copy of the GNU General Public License along with Premo. If
not, see <http://www.gnu.org/licenses/>.
"""

import argparse
import os
import shutil
import subprocess
import sys


END_FORMATTING = '\033[0m'
BOLD = '\033[1m'
DIM = '\033[2m'


class MyParser(argparse.ArgumentParser):
    """
    This subclass of ArgumentParser exits with a status of 1 (like all of Premo's other errors)
    instead of argparse's usual 2.
    """
    def error(self, message):
        self.print_usage(sys.stderr)
        sys.exit(f'\nError: {message}')


class MyHelpFormatter(argparse.HelpFormatter):
    """
    This is a custom formatter class for argparse. It appends default values to the help text,
    bolds the group headings and dims the option descriptions (if the terminal has colours).
    http://stackoverflow.com/questions/3853722
    """
    def __init__(self, prog):
        terminal_width = shutil.get_terminal_size().columns
        os.environ['COLUMNS'] = str(terminal_width)
        max_help_position = min(max(24, terminal_width // 3), 40)
        self.colours = get_colours_from_tput()
        super().__init__(prog, max_help_position=max_help_position)

    def _get_help_string(self, action):
        """
        Override this function to add default values, but only when 'default' is not already in the
        help text.
        """
        help_text = action.help
        if action.default != argparse.SUPPRESS and action.default is not None \
                and action.default is not False:
            if 'default' not in help_text.lower():
                help_text += ' (default: {})'.format(action.default)
        return help_text

    def start_section(self, heading):
        if self.colours > 1:
            heading = BOLD + heading + END_FORMATTING
        super().start_section(heading)

    def _split_lines(self, text, width):
        lines = argparse.HelpFormatter._split_lines(self, text, width)
        if self.colours > 8:
            lines = [DIM + line + END_FORMATTING for line in lines]
        return lines

    def _fill_text(self, text, width, indent):
        """
        Descriptions that start with 'R|' are printed as-is, so the ASCII art survives.
        """
        if text.startswith('R|'):
            return ''.join(indent + line for line in text[2:].splitlines(keepends=True))
        else:
            return argparse.HelpFormatter._fill_text(self, text, width, indent)


def get_colours_from_tput():
    try:
        return int(subprocess.check_output(['tput', 'colors'],
                                           stderr=subprocess.DEVNULL).decode().strip())
    except (ValueError, subprocess.CalledProcessError, FileNotFoundError, AttributeError):
        return 1
