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

"""Measure tick labels with Qt font metrics.

A QGuiApplication must exist before fonts can be measured.
"""

from .. import qtall as qt
from .textmetrics import TextMeasurer

FontMetrics = qt.QFontMetricsF

# inches per metre, for converting dpi to dots per metre
_inchespermetre = 1/0.0254

class QtFontMetrics(TextMeasurer):
    """Measure text as it would be drawn on a device of the given dpi."""

    def __init__(self, dpi=96):
        self.dpi = dpi
        self.device = qt.QImage(1, 1, qt.QImage.Format.Format_ARGB32)
        dpm = int(round(dpi*_inchespermetre))
        self.device.setDotsPerMeterX(dpm)
        self.device.setDotsPerMeterY(dpm)

    def makeQFont(self, style):
        '''Return a QFont object corresponding to the style.'''
        weight = qt.QFont.Weight.Normal
        if style.bold:
            weight = qt.QFont.Weight.Bold
        f = qt.QFont(style.font)
        f.setPointSizeF(style.size)
        f.setWeight(weight)
        f.setItalic(style.italic)
        return f

    def measureText(self, text, style):
        metrics = FontMetrics(self.makeQFont(style), self.device)
        return metrics.horizontalAdvance(text), metrics.height()
