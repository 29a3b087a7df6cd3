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

"""Measuring the size of tick labels.

The tick generators only need to know how many pixels a label takes
up. A measurer has a single method, measureText(text, style), which
returns (width, height) in pixels. style is a setting.Text (or
anything with font, size, bold and italic attributes).

A Qt implementation lives in qtmetrics, which is not imported here so
that the generators can be used without a display.
"""

class TextMeasurer(object):
    """Interface of text measurers."""

    def measureText(self, text, style):
        """Return (width, height) of text in pixels."""
        raise NotImplementedError

class FixedFontMetrics(TextMeasurer):
    """A fixed (hacked) font metric giving the same results on every
    platform.

    Every character is charwidth pixels wide and lines are height
    pixels high for a 10pt font; other sizes scale linearly. Bold text
    is 10% wider.
    """

    refsize = 10.

    def __init__(self, charwidth=6., height=12.):
        self.charwidth = charwidth
        self.height = height

    def measureText(self, text, style):
        scale = style.size / self.refsize
        width = len(text) * self.charwidth * scale
        if style.bold:
            width *= 1.1
        return width, self.height * scale
