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

import math
import unittest

from gridticks import utils

class TestMathUtils(unittest.TestCase):

    def testRoundToForDelta(self):
        self.assertEqual(utils.roundToForDelta(17), 1.)
        self.assertAlmostEqual(utils.roundToForDelta(0.17), 0.01)
        self.assertEqual(utils.roundToForDelta(10), 0.1)
        self.assertEqual(utils.roundToForDelta(1e100), 1e9)
        self.assertEqual(utils.roundToForDelta(0), 0.)
        self.assertEqual(utils.roundToForDelta(-5), 0.)

        r = utils.roundToForDelta(1e-100)
        self.assertTrue(math.isfinite(r))
        self.assertTrue(1e-103 < r < 1e-100)

    def testRoundUp(self):
        self.assertEqual(utils.roundUp(0.123, 0.1), 0.2)
        self.assertEqual(utils.roundUp(3, 2), 4)
        self.assertEqual(utils.roundUp(4, 2), 4)
        self.assertEqual(utils.roundUp(-3, 2), -2)
        self.assertEqual(utils.roundUp(1.234, 0), 1.234)
        self.assertEqual(utils.roundUp(math.inf, 1.), math.inf)
        self.assertEqual(utils.roundUp(1e300, 1e-300), 1e300)

    def testMinIntSqr(self):
        self.assertEqual(utils.minInt(3, 5), 3)
        self.assertEqual(utils.minInt(5, -3), -3)
        self.assertEqual(utils.sqr(3), 9)
        self.assertEqual(utils.sqr(-0.5), 0.25)

    def testCheckOrder(self):
        self.assertEqual(utils.checkOrder([1, 2, 3]), 1)
        self.assertEqual(utils.checkOrder([3, 2, 1]), -1)
        self.assertEqual(utils.checkOrder([1, 3, 2]), 0)
        self.assertEqual(utils.checkOrder([1, float('nan')]), 0)

if __name__ == '__main__':
    unittest.main()
