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

"""Named groups of settings."""

class Settings(object):
    """An ordered group of Setting objects.

    Values can be read and assigned as attributes or items, e.g.
    s.size = 12 or s['size']. The Setting objects themselves are
    returned by get().
    """

    def __init__(self, name, descr='', usertext=''):
        # bypass __setattr__, which looks settings up in this dict
        self.__dict__['setdict'] = {}
        self.name = name
        self.descr = descr
        self.usertext = usertext
        self.setnames = []
        self.parent = None

    def add(self, setting, posn=-1, readonly=False):
        """Add setting at position posn (default last)."""
        name = setting.name
        if name in self.setdict:
            raise RuntimeError('Setting %s already in %s' % (name, self.name))
        self.setdict[name] = setting
        if posn < 0:
            self.setnames.append(name)
        else:
            self.setnames.insert(posn, name)
        setting.parent = self
        if readonly:
            setting.readonly = True

    def remove(self, name):
        self.setnames.remove(name)
        del self.setdict[name]

    def get(self, name):
        """Return the Setting object called name."""
        return self.setdict[name]

    def getNames(self):
        return self.setnames

    def __iter__(self):
        """Iterate over the Setting objects in order."""
        for name in self.setnames:
            yield self.setdict[name]

    def __contains__(self, name):
        return name in self.setdict

    def __setattr__(self, name, val):
        d = self.__dict__['setdict']
        if name in d:
            d[name].val = val
        else:
            self.__dict__[name] = val

    def __getattr__(self, name):
        # only called when normal lookup fails
        try:
            return self.__dict__['setdict'][name].val
        except KeyError:
            raise AttributeError("'%s' is not a setting" % name)

    def __getitem__(self, name):
        try:
            return self.setdict[name].val
        except KeyError:
            raise KeyError("'%s' is not a setting" % name)

    def update(self, **values):
        """Set several settings at once, e.g. s.update(size=12)."""
        for name in values:
            if name not in self.setdict:
                raise KeyError("'%s' is not a setting" % name)
        for name, val in values.items():
            self.setdict[name].val = val

    def resetToDefaults(self):
        for setting in self:
            setting.resetToDefault()

    def copy(self):
        """Return a copy of the same class holding copies of the
        settings."""
        s = self.__class__.__new__(self.__class__)
        Settings.__init__(s, self.name, descr=self.descr,
                          usertext=self.usertext)
        for setting in self:
            s.add(setting.copy())
        return s

    def __repr__(self):
        return '<%s %s: %s>' % (
            self.__class__.__name__, self.name,
            ', '.join(['%s=%r' % (s.name, s.val) for s in self]))
