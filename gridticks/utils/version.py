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

"""
Return gridticks' version number
"""

import os.path
import logging

logger = logging.getLogger(__name__)

resourceDirectory = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

_errmsg = """Failed to find VERSION file.

This is probably because the resource files are not installed in the
python module directory.
"""

_ver = None
def version():
    """Return the version number as a string."""

    global _ver
    if _ver:
        return _ver

    filename = os.path.join(resourceDirectory, "VERSION")
    try:
        with open(filename) as f:
            _ver = f.readline().strip()
    except EnvironmentError:
        logger.error(_errmsg)
        raise
    return _ver

def versionToTuple(ver):
    """Convert version to tuple, e.g. '2.1.1' -> (2,1,1)."""
    return tuple([int(x) for x in ver.split('.')])
