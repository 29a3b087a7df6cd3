#!/usr/bin/env python3

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
#    You should have received a copy of the GNU General Public License along
#    with this program; if not, write to the Free Software Foundation, Inc.,
#    51 Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA.
##############################################################################

"""
gridticks setuptools script
"""

import os.path

from setuptools import setup, find_packages

def readVersion():
    """Get the version from the VERSION file in the package."""
    filename = os.path.join(
        os.path.dirname(os.path.abspath(__file__)), 'gridticks', 'VERSION')
    with open(filename) as f:
        return f.readline().strip()

setup(
    name='gridticks',
    version=readVersion(),
    description='Axis tick positions and labels for plots',
    license='GPL-2.0-or-later',
    python_requires='>=3.8',
    packages=find_packages(include=['gridticks', 'gridticks.*']),
    package_data={'gridticks': ['VERSION']},
    install_requires=[
        'numpy',
        'PyQt6',
    ],
    entry_points={
        'console_scripts': [
            'gridticks = gridticks.gridticks_main:main',
        ],
    },
)
