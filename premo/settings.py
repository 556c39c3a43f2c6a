"""
This module contains some hard-coded settings used in various parts of Premo. The defaults for
user-facing options live here too, so the help text and the validation code agree on them.

Copyright 2026 Ryan Wick (rrwick@gmail.com)

This file is part of Premo. Premo is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software Foundation, either
version 3 of the License, or (at your option) any later version. Premo is distributed in the hope
that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License for more
details. You should have received a copy of the GNU General Public License along with Premo. If
not, see <http://www.gnu.org/licenses/>.
"""

# Bootstrapping
DEFAULT_BATCH_SIZE = 1000
DEFAULT_DELTA_FRAGMENT_LENGTH = 0.01
DEFAULT_DELTA_READ_LENGTH = 0.01

# MosaikAligner parameter generation
DEFAULT_ACT_INTERCEPT = 13
DEFAULT_ACT_SLOPE = 0.2
DEFAULT_BW_MULTIPLIER = 2.5
DEFAULT_MHP = 200
DEFAULT_MMP = 0.15
DEFAULT_HASH_SIZE = 15
MIN_HASH_SIZE = 4
MAX_HASH_SIZE = 32

SEQ_TECHS = ['454', 'helicos', 'illumina', 'illumina_long', 'sanger', 'solid']

# Values further than this many IQRs outside of the quartiles are dropped from each batch before
# it is added to the overall result (Tukey's 'far out' fence).
OUTLIER_IQR_MULTIPLIER = 3.0

GENERATED_FILE_PREFIX = 'premo_batch'

MOSAIK_BUILD = 'MosaikBuild'
MOSAIK_ALIGNER = 'MosaikAligner'
