#    Copyright (C) 2024 The gridticks authors
#
#    This file is part of gridticks.
#
#    gridticks is free software: you can redistribute it and/or modify it
#    under the terms of the GNU General Public License as published by
#    the Free Software Foundation, either version 2 of the License, or
#    (at your option) any later version.
#
#    gridticks is distributed in the hope that it will be useful, but
#    WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU
#    General Public License for more details.
#
#    You should have received a copy of the GNU General Public License
#    along with gridticks. If not, see <https://www.gnu.org/licenses/>.
#
##############################################################################

"""Small numeric helpers used by the tick generators."""

import math

# largest granularity returned by roundToForDelta
_startingdeltabound = 10.**10

def roundToForDelta(delta):
    """Return a rounding granularity for the order of magnitude of delta.

    e.g. 17 -> 1, 0.17 -> 0.01
    Returns 0 if delta is zero, negative or too small to represent.
    """
    cursor = _startingdeltabound
    while cursor > 0:
        if delta > cursor:
            return cursor / 10.
        cursor /= 10.
    return 0.

def roundUp(value, unit):
    """Round value up to the nearest multiple of unit.

    value is returned unchanged if unit is zero or the multiple
    cannot be computed."""
    if unit == 0:
        return value
    quotient = value / unit
    if not math.isfinite(quotient):
        return value
    return math.ceil(quotient) * unit

def minInt(a, b):
    """Minimum of two integers."""
    return a if a < b else b

def sqr(x):
    return x*x
