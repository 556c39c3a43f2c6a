"""
This module contains the summary statistics used to decide when bootstrapping has converged.

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

import numpy as np

from . import settings


Quartiles = collections.namedtuple('Quartiles', ['q1', 'q2', 'q3'])


def get_median(sorted_samples):
    """
    Expects a non-empty, sorted sequence.
    """
    count = len(sorted_samples)
    pivot = count // 2
    if count % 2 == 0:
        return (sorted_samples[pivot - 1] + sorted_samples[pivot]) / 2.0
    else:
        return float(sorted_samples[pivot])


def get_quartiles(sorted_samples):
    """
    Q1 and Q3 are the medians of the lower and upper halves. When there is an odd number of
    values, the centre value goes in both halves.
    """
    count = len(sorted_samples)
    pivot = count // 2
    if count % 2 == 0:
        low, high = sorted_samples[:pivot], sorted_samples[pivot:]
    else:
        low, high = sorted_samples[:pivot + 1], sorted_samples[pivot:]
    return Quartiles(get_median(low), get_median(sorted_samples), get_median(high))


def remove_outliers(samples, multiplier=settings.OUTLIER_IQR_MULTIPLIER):
    """
    Returns the samples (in their original order) which fall within multiplier IQRs of the
    quartiles.
    """
    if len(samples) == 0:
        return []
    values = np.asarray(samples)
    q1, _, q3 = get_quartiles(np.sort(values))
    iqr = q3 - q1
    keep = (values >= q1 - multiplier * iqr) & (values <= q3 + multiplier * iqr)
    return values[keep].tolist()


def is_converged(previous, current, delta):
    """
    Returns True if the median has moved by no more than delta (as a fraction of the previous
    median).
    """
    if len(previous) == 0 or len(current) == 0:
        return False
    previous_median = get_median(sorted(previous))
    current_median = get_median(sorted(current))
    if previous_median == 0.0:
        return current_median == 0.0
    observed_delta = abs(current_median - previous_median) / previous_median
    return observed_delta <= delta


def get_container_stats(samples):
    stats = {'count': len(samples)}
    if len(samples) > 0:
        quartiles = get_quartiles(sorted(samples))
        stats['median'] = quartiles.q2
        stats['Q1'] = quartiles.q1
        stats['Q3'] = quartiles.q3
    return stats
