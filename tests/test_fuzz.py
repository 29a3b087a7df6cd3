#    Copyright (C) 2024 The gridticks authors
#
#    This program is free software; you can redistribute it and/or modify
#    it under the terms of the GNU General Public License as published by
#    the Free Software Foundation; either version 2 of the License, or
#    (at your option) any later version.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU General Public License for more details.
#
#    You should have received a copy of the GNU General Public License
#    along with this program; if not, write to the Free Software
#    Foundation, Inc., 59 Temple Place, Suite 330, Boston, MA  02111-1307  USA
###############################################################################

"""Check the tick generators behave on many random ranges."""

import random
import unittest

import numpy as N

from gridticks import utils
from gridticks import setting
from gridticks import ticks

class TestRandomRanges(unittest.TestCase):

    numranges = 200

    def randomRange(self, rand):
        """Return a random ContinuousRange."""
        scale = 10.**rand.randint(-30, 30)
        minval = rand.uniform(-100, 100) * scale
        # keep the span well above the float resolution of minval
        span = max(abs(minval), scale) * 10.**rand.uniform(-5, 2)
        return ticks.ContinuousRange(
            minval, minval+span, domain=rand.randint(0, 4096),
            descending=rand.random() < 0.5)

    def testPretty(self):
        rand = random.Random(4242)
        metrics = utils.FixedFontMetrics()
        config = setting.TickSpacing()
        config.enablePrettyTicks = True

        for i in range(self.numranges):
            ra = self.randomRange(rand)
            isvertical = rand.random() < 0.5
            tcks = ticks.generateTicksWithTimeout(
                metrics, ra, isvertical, config=config, timeout=10.)

            vals = tcks.values()
            self.assertTrue(N.all(vals >= ra.getMin()), repr(ra))
            self.assertTrue(N.all(vals <= ra.getMax()), repr(ra))
            if ra.isDescending():
                vals = vals[::-1]
            self.assertTrue(N.all(N.diff(vals) >= 0), repr(ra))
            self.assertTrue(len(tcks) <= 2*config.tickCountSanityCheck)

    def testContinuous(self):
        rand = random.Random(1234)
        metrics = utils.FixedFontMetrics()

        for i in range(self.numranges):
            ra = self.randomRange(rand)
            tcks = ticks.generateContinuousTicks(metrics, ra, False)

            self.assertTrue(len(tcks) >= 2)
            first, last = tcks[0].value, tcks[-1].value
            if ra.isDescending():
                first, last = last, first
            self.assertEqual(first, ra.getMin())
            self.assertEqual(last, ra.getMax())
            self.assertTrue(
                len(tcks) <= setting.DefaultTickCountSanityCheck+1)

if __name__ == '__main__':
    unittest.main()
