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

import os
import sys
import unittest

from gridticks import setting
from gridticks import ticks

# fonts can be measured without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

try:
    from gridticks import qtall as qt
    from gridticks.utils.qtmetrics import QtFontMetrics
except ImportError:
    qt = None

app = None

@unittest.skipIf(qt is None, 'PyQt6 not available')
class TestQtFontMetrics(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        global app
        if qt.QGuiApplication.instance() is None:
            app = qt.QGuiApplication(sys.argv[:1])

    def testMeasure(self):
        metrics = QtFontMetrics(dpi=96)
        style = setting.Text()

        w10, h10 = metrics.measureText('10.00', style)
        self.assertTrue(w10 > 0)
        self.assertTrue(h10 > 0)

        style.size = 20.
        w20, h20 = metrics.measureText('10.00', style)
        self.assertTrue(w20 > w10)
        self.assertTrue(h20 > h10)

        self.assertEqual(metrics.measureText('', style)[0], 0.)

    def testFont(self):
        style = setting.Text()
        style.update(bold=True, italic=True, size=12.)
        font = QtFontMetrics().makeQFont(style)
        self.assertEqual(font.pointSizeF(), 12.)
        self.assertTrue(font.italic())
        self.assertEqual(font.weight(), qt.QFont.Weight.Bold)

    def testTicks(self):
        metrics = QtFontMetrics()
        ra = ticks.ContinuousRange(0., 100., domain=400)

        tcks = ticks.generatePrettyContinuousTicks(metrics, ra, False)
        self.assertTrue(len(tcks) >= 2)
        self.assertTrue(all(0. <= v <= 100. for v in tcks.values()))

        tcks = ticks.generateContinuousTicks(metrics, ra, True)
        self.assertEqual(tcks[0].value, 0.)
        self.assertEqual(tcks[-1].value, 100.)

if __name__ == '__main__':
    unittest.main()
