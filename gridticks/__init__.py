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

"""Place human readable, non-overlapping ticks along a plot axis.

e.g.

from gridticks import ContinuousRange, FixedFontMetrics
from gridticks import generatePrettyContinuousTicks

ra = ContinuousRange(37.5, 60.1, domain=256)
ticks = generatePrettyContinuousTicks(FixedFontMetrics(), ra, False)
"""

from .utils import version, TextMeasurer, FixedFontMetrics, \
    floatValueFormatter, intValueFormatter, percentValueFormatter, \
    formatNumber, makeValueFormatter, InvalidType
from .setting import TickSpacing, Text, \
    DefaultMinimumTickHorizontalSpacing, DefaultMinimumTickVerticalSpacing, \
    DefaultTickCountSanityCheck, PrettyTicksTolerance
from .ticks import *
