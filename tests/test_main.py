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

import io
import unittest
import contextlib

from gridticks import utils
from gridticks import gridticks_main

def runMain(argv):
    """Run the program, returning the exit status and (value, label)
    pairs printed."""
    out = io.StringIO()
    err = io.StringIO()
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        status = gridticks_main.run(argv)
    ticks = [l.split('\t') for l in out.getvalue().splitlines()]
    return status, [(float(v), lab) for v, lab in ticks], err.getvalue()

class TestMain(unittest.TestCase):

    def testTicks(self):
        status, ticks, err = runMain(['0', '10'])
        self.assertEqual(status, 0)
        self.assertEqual(
            [t[1] for t in ticks], ['0.00', '3.34', '6.67', '10.00'])
        self.assertEqual(ticks[0][0], 0.)
        self.assertEqual(ticks[-1][0], 10.)

    def testDescending(self):
        status, ticks, err = runMain(['0', '10', '--descending'])
        self.assertEqual(status, 0)
        self.assertEqual(ticks[0][0], 10.)
        self.assertEqual(ticks[-1][0], 0.)

    def testFormat(self):
        status, ticks, err = runMain(['0', '10', '--format', '%.1f'])
        self.assertEqual(status, 0)
        self.assertEqual(ticks[0][1], '0.0')
        self.assertEqual(ticks[-1][1], '10.0')

    def testPretty(self):
        status, ticks, err = runMain(['37.5', '60.1', '--pretty'])
        self.assertEqual(status, 0)
        self.assertTrue(len(ticks) >= 2)
        for value, label in ticks:
            self.assertTrue(37.5 <= value <= 60.1)
            self.assertEqual(label, '%.2f' % value)

    def testInvalid(self):
        status, ticks, err = runMain(['0', '10', '--domain=nan'])
        self.assertEqual(status, 1)
        self.assertEqual(ticks, [])
        self.assertIn('invalid argument', err)

        status, ticks, err = runMain(['0', '10', '--max-ticks', '1'])
        self.assertEqual(status, 1)

        status, ticks, err = runMain(['0', '10', '--spacing=-5'])
        self.assertEqual(status, 1)

    def testTimeoutHelp(self):
        helptext = gridticks_main.makeParser().format_help()
        self.assertIn('--timeout', helptext)
        self.assertIn('abandoned search', ' '.join(helptext.split()))

class TestVersion(unittest.TestCase):

    def testVersion(self):
        ver = utils.version()
        self.assertEqual(len(utils.versionToTuple(ver)), 3)
        self.assertEqual(utils.versionToTuple('2.1.1'), (2, 1, 1))

if __name__ == '__main__':
    unittest.main()
