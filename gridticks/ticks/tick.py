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

"""Labelled positions along an axis."""

from collections import namedtuple

import numpy as N

from .. import utils

class Tick(namedtuple('Tick', ('value', 'label'))):
    """A label on an axis.

    Ticks are ordered by value only; two ticks are equal if both the
    value and label match. So Tick(1, "a") <= Tick(1, "b") and >= it,
    yet the two are not equal. Compare values directly where labels
    should not matter.
    """

    __slots__ = ()

    def __lt__(self, other):
        return self.value < other.value

    def __le__(self, other):
        return self.value <= other.value

    def __gt__(self, other):
        return self.value > other.value

    def __ge__(self, other):
        return self.value >= other.value

class Ticks(list):
    """A list of Tick, in the order they were generated."""

    def values(self):
        """Tick values as a numpy array."""
        return N.array([t.value for t in self], dtype=float)

    def labels(self):
        """Tick labels as a list."""
        return [t.label for t in self]

    def sort(self, *, key=None, reverse=False):
        """Sort ticks, by value unless another key is given."""
        if key is None:
            key = lambda t: t.value
        list.sort(self, key=key, reverse=reverse)

    def order(self):
        """+1 if values ascend, -1 if they descend, otherwise 0."""
        return utils.checkOrder(self.values())

    def __str__(self):
        return ', '.join(
            ['[%d: %s]' % (i, t.label) for i, t in enumerate(self)])
