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

"""Collections of settings used by the tick generators."""

from . import setting
from .settings import Settings

# minimum distance in pixels between the labels of horizontal ticks
DefaultMinimumTickHorizontalSpacing = 20.
# minimum distance in pixels between the labels of vertical ticks
DefaultMinimumTickVerticalSpacing = 20.
# the most ticks ever generated along an axis
DefaultTickCountSanityCheck = 1 << 10
# ranges narrower than this are not given pretty ticks
PrettyTicksTolerance = 1e-10

class TickSpacing(Settings):
    '''Parameters of the tick generators.'''

    def __init__(self, name='ticks', **args):
        Settings.__init__(self, name, **args)

        self.add( setting.Float(
            'minimumHorizontalSpacing',
            DefaultMinimumTickHorizontalSpacing,
            minval=0.,
            descr = 'Minimum pixels between labels on a horizontal axis',
            usertext = 'Horizontal spacing') )
        self.add( setting.Float(
            'minimumVerticalSpacing',
            DefaultMinimumTickVerticalSpacing,
            minval=0.,
            descr = 'Minimum pixels between labels on a vertical axis',
            usertext = 'Vertical spacing') )
        self.add( setting.Int(
            'tickCountSanityCheck',
            DefaultTickCountSanityCheck,
            minval=2,
            descr = 'Maximum number of ticks generated',
            usertext = 'Maximum ticks') )
        self.add( setting.Float(
            'prettyTicksTolerance',
            PrettyTicksTolerance,
            minval=1e-300,
            descr = 'Smallest range given pretty ticks, also the tolerance '
            'for a tick lying on zero',
            usertext = 'Pretty tolerance') )
        self.add( setting.Bool(
            'enablePrettyTicks', False,
            descr = 'Search for round, well spaced ticks',
            usertext = 'Pretty ticks') )

    def minimumSpacing(self, isvertical):
        """Minimum label spacing for the axis orientation."""
        if isvertical:
            return self.minimumVerticalSpacing
        return self.minimumHorizontalSpacing

class Text(Settings):
    '''Text settings.'''

    def __init__(self, name='text', **args):
        Settings.__init__(self, name, **args)

        self.add( setting.Str(
            'font', 'Sans',
            descr = 'Font name',
            usertext = 'Font') )
        self.add( setting.Float(
            'size', 10.,
            minval=0.,
            descr = 'Font size in points',
            usertext = 'Size') )
        self.add( setting.Bool(
            'italic', False,
            descr = 'Italic font',
            usertext = 'Italic') )
        self.add( setting.Bool(
            'bold', False,
            descr = 'Bold font',
            usertext = 'Bold') )
