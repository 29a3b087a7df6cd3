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

"""Value formatters: functions mapping a tick value to its label."""

import re
import math
import numpy as N

_formaterror = 'FormatError'

def floatValueFormatter(v):
    """Default formatter, two decimal places."""
    return floatValueFormatterWithFormat(v, '%.2f')

def floatValueFormatterWithFormat(v, fmt):
    """Format v using the C format string fmt."""
    try:
        return fmt % v
    except (TypeError, ValueError):
        return _formaterror

def intValueFormatter(v):
    """Format the value as an integer, truncating towards zero."""
    if not N.isfinite(v):
        return str(v)
    return '%d' % int(v)

def percentValueFormatter(v):
    """Format a fraction as a percentage, e.g. 0.5 -> 50.00%"""
    return floatValueFormatterWithFormat(v*100, '%.2f%%')

def sciToHuman(text, cleanup=False):
    """Convert C scientific output, e.g. 1.50e+03, to 1.50×10^{3}.

    If cleanup, trailing zeros are removed and a mantissa of 1 is
    dropped.
    """
    mantissa, exponent = text.split('e')
    if cleanup:
        if '.' in mantissa:
            mantissa = mantissa.rstrip('0').rstrip('.')
        if mantissa == '1':
            return '10^{%i}' % int(exponent)
    return '%s×10^{%i}' % (mantissa, int(exponent))

def formatSciNotation(num, formatargs):
    """Format num as X×10^{Y}.

    formatargs controls the mantissa as in %e, e.g. '.2'. Without it,
    trailing zeros are removed.
    """
    if not N.isfinite(num):
        return str(num)

    fmt = '%' + formatargs + 'e' if formatargs else '%.10e'
    try:
        text = fmt % num
    except (TypeError, ValueError):
        return _formaterror
    return sciToHuman(text, cleanup=not formatargs)

def formatGeneral(num, fmtarg):
    """Normal notation, switching to X×10^{Y} for large and small
    values."""
    if not N.isfinite(num):
        return str(num)

    if fmtarg:
        try:
            text = ('%' + fmtarg + 'g') % num
        except ValueError:
            return _formaterror
        if 'e' in text:
            text = sciToHuman(text)
        return text

    # %g switches too late for axis labels
    a = abs(num)
    if a >= 1e4 or 1e-110 < a < 1e-2:
        return formatSciNotation(num, '')
    return '%.10g' % num

# SI prefixes from 1e-24 to 1e24
engsuffixes = ( 'y', 'z', 'a', 'f', 'p', 'n', 'μ', 'm', '',
                'k', 'M', 'G', 'T', 'P', 'E', 'Z', 'Y' )
_engzero = engsuffixes.index('')

def formatEngineering(num, fmtarg):
    """Format with an SI suffix, e.g. 1.5k or 2m."""
    if not N.isfinite(num):
        return str(num)

    power = 0
    if num != 0:
        power = int(math.floor(math.log10(abs(num))/3 + 1e-9))
        power = min(max(power, -_engzero), len(engsuffixes)-1-_engzero)

    try:
        text = ('%' + fmtarg + 'g') % (num / 10.**(3*power))
    except ValueError:
        return _formaterror
    return text + engsuffixes[power+_engzero]

# formatters for the V extensions
_vformatters = {
    'Ve': formatSciNotation,
    'Vg': formatGeneral,
    'VE': formatEngineering,
}

# a format expression, including the V extensions
_formatRE = re.compile(r'%([-0-9.+# ]*)(V.|[A-Za-z%])')

def formatNumber(num, formatstr):
    """Format num using a C format string with extensions:

     %Ve    scientific notation X×10^{Y}
     %Vg    normal notation, scientific outside 10^-2 to 10^4
     %VE    engineering notation with SI suffix

    Text outside format expressions is copied.
    """

    def replace(match):
        farg, ftype = match.groups()
        if ftype == '%':
            return '%'
        if ftype[0] == 'V':
            if ftype not in _vformatters:
                return _formaterror
            # use a true minus sign
            return _vformatters[ftype](num, farg).replace('-', '−')
        return floatValueFormatterWithFormat(num, '%' + farg + ftype)

    return _formatRE.sub(replace, formatstr)

def makeValueFormatter(formatstr):
    """Return a formatter function using formatNumber with formatstr."""
    def formatter(v):
        return formatNumber(v, formatstr)
    return formatter
