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

"""Typed values used to configure the tick generators.

e.g.

s = Float('minimumHorizontalSpacing', 20., minval=0.)
s.val = 30
s.fromUIText('25.5')

Assigning a value of the wrong type, or out of range, raises
InvalidType and leaves the old value in place.
"""

import numpy as N

from ..utils import InvalidType

class Setting(object):
    """A named value of a particular type, with a default."""

    typename = 'setting'

    def __init__(self, name, value, descr='', usertext=''):
        """name: setting name
        value: default and initial value
        descr: description of the setting
        usertext: name of setting for user
        """
        self.name = name
        self.descr = descr
        self.usertext = usertext
        self.readonly = False
        self.parent = None
        # functions called with the setting after each change
        self.onmodified = []

        self._val = self.normalize(value)
        self.default = self._val

    def _constructorArgs(self):
        """Keyword arguments needed to build a copy of this setting."""
        return {'descr': self.descr, 'usertext': self.usertext}

    def copy(self):
        """Return an independent setting with the same value and
        default."""
        obj = self.__class__(self.name, self._val, **self._constructorArgs())
        obj.default = self.default
        obj.readonly = self.readonly
        return obj

    def get(self):
        return self._val

    def set(self, v):
        if self.readonly:
            raise InvalidType('Setting %s is read only' % self.name)
        self._val = self.normalize(v)
        for callback in self.onmodified:
            callback(self)

    val = property(get, set, None, 'Get or modify the value of the setting')

    def isDefault(self):
        return self._val == self.default

    def resetToDefault(self):
        self.set(self.default)

    def normalize(self, val):
        """Return val in the form stored, raising InvalidType if it
        cannot be converted."""
        return val

    def toUIText(self):
        return str(self._val)

    def fromUIText(self, text):
        """Convert text typed by a user into a value for the setting.

        Raises InvalidType if this is not possible."""
        return self.normalize(text)

    def __repr__(self):
        return '<%s %s=%r>' % (self.__class__.__name__, self.name, self._val)

class Str(Setting):
    """Text, such as a font name."""

    typename = 'str'

    def normalize(self, val):
        if not isinstance(val, str):
            raise InvalidType('%s must be a string' % self.name)
        return val

class Bool(Setting):
    """An on or off switch."""

    typename = 'bool'

    _truetext = ('true', '1', 't', 'y', 'yes')
    _falsetext = ('false', '0', 'f', 'n', 'no')

    def normalize(self, val):
        # ints are accepted so that 0 and 1 work
        if type(val) not in (bool, int):
            raise InvalidType('%s must be True or False' % self.name)
        return bool(val)

    def fromUIText(self, text):
        t = text.strip().lower()
        if t in self._truetext:
            return True
        if t in self._falsetext:
            return False
        raise InvalidType('%s must be True or False' % self.name)

class _Number(Setting):
    """A number lying between minval and maxval inclusive."""

    # types accepted on assignment
    numbertypes = ()

    def __init__(self, name, value, minval, maxval, **args):
        self.minval = minval
        self.maxval = maxval
        Setting.__init__(self, name, value, **args)

    def _constructorArgs(self):
        args = Setting._constructorArgs(self)
        args.update(minval=self.minval, maxval=self.maxval)
        return args

    def convert(self, val):
        """Convert an accepted number to the stored type."""
        return val

    def normalize(self, val):
        if ( not isinstance(val, self.numbertypes) or
             isinstance(val, bool) ):
            raise InvalidType('%s must be a %s' % (self.name, self.typename))
        val = self.convert(val)
        if not (self.minval <= val <= self.maxval):
            raise InvalidType('%s must be in the range %s to %s' % (
                self.name, self.minval, self.maxval))
        return val

class Int(_Number):
    """A whole number, such as a count of ticks."""

    typename = 'int'
    numbertypes = (int,)

    def __init__(self, name, value, minval=-1000000, maxval=1000000, **args):
        _Number.__init__(self, name, value, minval, maxval, **args)

    def fromUIText(self, text):
        try:
            i = int(text.strip())
        except ValueError:
            raise InvalidType('Not an integer')
        return self.normalize(i)

class Float(_Number):
    """A finite real number, such as a spacing in pixels."""

    typename = 'float'
    numbertypes = (int, float)

    def __init__(self, name, value, minval=-1e200, maxval=1e200, **args):
        _Number.__init__(self, name, value, minval, maxval, **args)

    def convert(self, val):
        val = float(val)
        if not N.isfinite(val):
            raise InvalidType('%s must be finite' % self.name)
        return val

    def toUIText(self):
        return repr(self._val)

    def fromUIText(self, text):
        try:
            f = float(text)
        except ValueError:
            raise InvalidType('Not a number')
        return self.normalize(f)
