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

"""Ranges of values drawn over a number of pixels."""

import math
import numbers
import numpy as N

class InvalidRange(ValueError):
    """Raised when a range is constructed from invalid values."""
    pass

class Range(object):
    """Interface used by the tick generators.

    domain is the length in pixels the range is drawn over, which is
    independent of the minimum and maximum values.
    """

    def getMin(self):
        raise NotImplementedError

    def getMax(self):
        raise NotImplementedError

    def getDomain(self):
        raise NotImplementedError

    def isDescending(self):
        raise NotImplementedError

class ContinuousRange(Range):
    """A linear range of values.

    minval and maxval are swapped if given in the wrong order.
    """

    def __init__(self, minval=0., maxval=0., domain=0, descending=False):
        minval = float(minval)
        maxval = float(maxval)
        if math.isnan(minval) or math.isnan(maxval):
            raise InvalidRange('Range limits cannot be NaN')
        if minval > maxval:
            minval, maxval = maxval, minval

        if ( not isinstance(domain, numbers.Real) or
             not math.isfinite(domain) or domain < 0 ):
            raise InvalidRange(
                'Domain must be a finite number of pixels >= 0')

        self.min = minval
        self.max = maxval
        self.domain = domain
        self.descending = bool(descending)

    def getMin(self):
        return self.min

    def getMax(self):
        return self.max

    def getDomain(self):
        return self.domain

    def isDescending(self):
        return self.descending

    def getDelta(self):
        """Difference between the maximum and minimum."""
        return self.max - self.min

    def isZero(self):
        """Whether the range has not been set up."""
        return self.min == 0 and self.max == 0 and self.domain == 0

    def translate(self, value):
        """Convert data values (scalar or array) to pixel offsets
        within the domain."""

        vals = N.asarray(value, dtype=float)
        delta = self.getDelta()
        if delta == 0:
            pixels = N.zeros(vals.shape)
        else:
            with N.errstate(invalid='ignore', over='ignore'):
                pixels = N.ceil( (vals - self.min) / delta * self.domain )
        if self.descending:
            pixels = self.domain - pixels

        if pixels.ndim == 0:
            return float(pixels)
        return pixels

    def __str__(self):
        return 'ContinuousRange [%.2f,%.2f] => %s' % (
            self.min, self.max, self.domain)

    def __repr__(self):
        return 'ContinuousRange(%r, %r, domain=%r, descending=%r)' % (
            self.min, self.max, self.domain, self.descending)
