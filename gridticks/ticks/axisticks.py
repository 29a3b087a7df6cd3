# axisticks.py
# algorithms to work out what ticks to put on an axis

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

"""Algorithms for working out ticks along an axis.

Two approaches are provided. generateContinuousTicks spaces ticks
evenly, as many as the labels leave room for.
generatePrettyContinuousTicks searches for a set of round,
evenly spaced ticks scoring best on simplicity, coverage, density and
legibility, following Talbot, Lin and Hanrahan, "An Extension of
Wilkinson's Algorithm for Positioning Tick Labels on Axes" (2010).
Unlike the paper, ticks are never placed outside the range.

Each generator measures one label with the measurer passed in, see
utils.textmetrics.
"""

import math
import logging
import concurrent.futures

from .. import utils
from .. import setting
from .tick import Tick, Ticks

logger = logging.getLogger(__name__)

# nice steps, in order of preference
prettysteps = (1., 5., 2., 2.5, 4., 3.)

# weights of the four scores
simplicityweight = 0.2
coverageweight = 0.25
densityweight = 0.5
legibilityweight = 0.05

# exponent used when the step estimate underflows to zero
_minsteplog = -324

class TickTimeout(RuntimeError):
    """Raised when ticks take too long to generate."""
    pass

def _defaults(style, vf, config):
    """Fill in defaults for missing arguments."""
    if style is None:
        style = setting.Text()
    if vf is None:
        vf = utils.floatValueFormatter
    if config is None:
        config = setting.TickSpacing()
    return style, vf, config

def _labelSize(measurer, text, style, isvertical):
    """Size of label along the axis."""
    width, height = measurer.measureText(text, style)
    return height if isvertical else width

def generateContinuousTicks(measurer, ra, isvertical, style=None, vf=None,
                            config=None):
    """Generate evenly spaced ticks from the minimum to maximum of ra.

    measurer: measures the labels (see utils.textmetrics)
    ra: the range (see ranges.Range)
    isvertical: whether the axis is vertical
    style: setting.Text for the labels
    vf: function to convert a value to a label
    config: setting.TickSpacing

    Both ends of the range are always included.
    """

    style, vf, config = _defaults(style, vf, config)

    minval, maxval = ra.getMin(), ra.getMax()
    descending = ra.isDescending()
    if descending:
        first, last = maxval, minval
    else:
        first, last = minval, maxval

    ticks = Ticks()
    ticks.append( Tick(first, vf(first)) )

    ticksize = ( _labelSize(measurer, vf(minval), style, isvertical) +
                 config.minimumSpacing(isvertical) )

    domain = float(ra.getDomain())
    remainder = domain - ticksize*2
    numticks = remainder / ticksize if ticksize > 0 else 0.
    numticks = int(math.floor(numticks)) if math.isfinite(numticks) else 0

    rangedelta = abs(maxval - minval)
    tickstep = rangedelta / numticks if numticks > 0 else 0.

    roundto = utils.roundToForDelta(rangedelta) / 10
    numticks = utils.minInt(numticks, config.tickCountSanityCheck)

    logger.debug('continuous ticks: %i intermediate, step %g, rounding %g',
                 max(numticks-1, 0), tickstep, roundto)

    for x in range(1, numticks):
        offset = utils.roundUp(tickstep*x, roundto)
        if descending:
            val = maxval - offset
        else:
            val = minval + offset
        ticks.append( Tick(val, vf(val)) )

    ticks.append( Tick(last, vf(last)) )
    return ticks

def allowGeneratePrettyContinuousTicks(enableprettyticks, ra,
                                       tolerance=setting.PrettyTicksTolerance):
    """Whether generatePrettyContinuousTicks should be used for ra.

    The search does a lot of arithmetic which goes wrong for ranges
    narrower than tolerance.
    """
    return bool(enableprettyticks) and abs(ra.getMax()-ra.getMin()) > tolerance

def _simplicity(numsteps, stepindex, skip, tickmin, tickmax, tickstep,
                tolerance):
    if tickmin <= 0 and tickmax >= 0 and math.fmod(tickmin, tickstep) < tolerance:
        haszerotick = 1
    else:
        haszerotick = 0
    return 1 - stepindex/(numsteps-1) - skip + haszerotick

def _simplicityMax(stepindex, numsteps, skip):
    return 2 - stepindex/(numsteps-1) - skip

def _coverage(rangemin, rangemax, tickmin, tickmax):
    scale = 0.1*(rangemax-rangemin)
    denom = utils.sqr(scale)
    if math.isinf(denom):
        # huge ranges: normalise first to avoid inf/inf
        return 1 - 0.5*( utils.sqr((rangemax-tickmax)/scale) +
                         utils.sqr((rangemin-tickmin)/scale) )
    return 1 - 0.5*( utils.sqr(rangemax-tickmax) +
                     utils.sqr(rangemin-tickmin) ) / denom

def _coverageMax(rangemin, rangemax, span):
    if span <= rangemax-rangemin:
        return 1.

    cmax = 1 - ( utils.sqr((rangemax-rangemin)/2) /
                 utils.sqr(0.1*(rangemax-rangemin)) )
    if math.isnan(cmax):
        cmax = 1 - utils.sqr( ((rangemax-rangemin)/2) /
                              (0.1*(rangemax-rangemin)) )
    return cmax

def _density(count, desired, rangemin, rangemax, tickmin, tickmax):
    try:
        tickdensity = (count-1) / (tickmax-tickmin)
        desireddensity = (desired-1) / (
            max(tickmax, rangemax) - min(tickmin, rangemin))
        ratio = tickdensity / desireddensity
        return 2 - max(ratio, 1/ratio)
    except ZeroDivisionError:
        return -math.inf

def _densityMax(count, desired):
    if count >= desired:
        return 2 - (count-1)/(desired-1)
    return 1.

def _pow10(exponent):
    try:
        return 10.**exponent
    except OverflowError:
        return math.inf

def _searchPrettyTicks(rangemin, rangemax, labelsize, availablespace,
                       desired, tolerance):
    """Branch and bound search for the best scoring tick set.

    Returns (tickmin, tickstep, count) or None if no set lies within
    the range.
    """

    numsteps = len(prettysteps)
    rangespan = rangemax - rangemin

    best = None
    bestscore = -2.
    skip = 1

    while True:
        for stepindex, prettystep in enumerate(prettysteps):
            simplicitymax = _simplicityMax(stepindex, numsteps, skip)

            if ( simplicityweight*simplicitymax +
                 coverageweight +
                 densityweight +
                 legibilityweight ) < bestscore:
                return best

            count = 2
            while True:
                densitymax = _densityMax(count, desired)

                if ( simplicityweight*simplicitymax +
                     coverageweight +
                     densityweight*densitymax +
                     legibilityweight ) < bestscore:
                    break

                delta = rangespan / (count+1) / skip / prettystep
                if delta > 0:
                    steplog = math.ceil(math.log10(delta))
                else:
                    steplog = _minsteplog

                while True:
                    tickstep = skip * prettystep * _pow10(steplog)
                    if not math.isfinite(tickstep):
                        break

                    coveragemax = _coverageMax(
                        rangemin, rangemax, tickstep*(count-1))

                    if ( simplicityweight*simplicitymax +
                         coverageweight*coveragemax +
                         densityweight*densitymax +
                         legibilityweight ) < bestscore:
                        break

                    if tickstep == 0:
                        steplog += 1
                        continue

                    lowmult = rangemin / tickstep
                    highmult = rangemax / tickstep
                    if not (math.isfinite(lowmult) and math.isfinite(highmult)):
                        # step too small to enumerate
                        steplog += 1
                        continue

                    minstart = math.floor(highmult)*skip - (count-1)*skip
                    maxstart = math.ceil(lowmult)*skip

                    if minstart > maxstart:
                        steplog += 1
                        continue

                    for start in range(minstart, maxstart+1):
                        tickmin = start * (tickstep / skip)
                        tickmax = tickmin + tickstep*(count-1)

                        coverage = _coverage(rangemin, rangemax, tickmin, tickmax)
                        simplicity = _simplicity(
                            numsteps, stepindex, skip, tickmin, tickmax,
                            tickstep, tolerance)
                        density = _density(
                            count, desired, rangemin, rangemax, tickmin, tickmax)

                        # format, font size and orientation are chosen
                        # by the caller, so only overlap counts
                        legibility = 1.
                        if labelsize*count > availablespace:
                            legibility = -math.inf

                        score = ( simplicityweight*simplicity +
                                  coverageweight*coverage +
                                  densityweight*density +
                                  legibilityweight*legibility )

                        # ticks outside the range are not allowed
                        if ( score > bestscore and
                             tickmin >= rangemin and tickmax <= rangemax ):
                            best = (tickmin, tickstep, count)
                            bestscore = score

                    steplog += 1
                count += 1
        skip += 1

def generatePrettyContinuousTicks(measurer, ra, isvertical, style=None,
                                  vf=None, config=None):
    """Generate ticks at visually pleasing intervals.

    Arguments are as for generateContinuousTicks. Returns an empty
    Ticks if the range is empty, there is no domain or no set of ticks
    fits inside the range without the labels overlapping.

    Tick i is tickmin + step*i, descending ranges getting the same
    values in reverse. Accumulating the step instead would change the
    lowest bits of the values and could miss the final tick.
    """

    style, vf, config = _defaults(style, vf, config)

    rangemin, rangemax = ra.getMin(), ra.getMax()
    availablespace = float(ra.getDomain())

    if not (rangemin < rangemax) or not (availablespace > 0):
        return Ticks()

    # the coverage score cannot be computed for these
    rangespan = rangemax - rangemin
    if not math.isfinite(rangespan) or utils.sqr(0.1*rangespan) == 0:
        logger.debug('range %g to %g too extreme for pretty ticks',
                     rangemin, rangemax)
        return Ticks()

    labelsize = max(
        _labelSize(measurer, vf(rangemin), style, isvertical), 1.)
    paddedlabelsize = labelsize + config.minimumSpacing(isvertical)

    # fewer than 2 breaks the density calculation
    sanity = config.tickCountSanityCheck
    desired = min( max( math.floor(min(availablespace/paddedlabelsize,
                                       sanity)), 2), sanity )

    best = _searchPrettyTicks(
        rangemin, rangemax, labelsize, availablespace, desired,
        config.prettyTicksTolerance)

    ticks = Ticks()
    if best is None:
        logger.debug('no pretty ticks within %g to %g', rangemin, rangemax)
        return ticks

    tickmin, tickstep, count = best
    logger.debug('pretty ticks: %i from %g with step %g (desired %i)',
                 count, tickmin, tickstep, desired)

    if ra.isDescending():
        indices = range(count-1, -1, -1)
    else:
        indices = range(count)
    for i in indices:
        val = tickmin + tickstep*i
        ticks.append( Tick(val, vf(val)) )
    return ticks

def generateTicks(measurer, ra, isvertical, style=None, vf=None, config=None):
    """Generate ticks, using the pretty algorithm if enabled in config
    and the range allows it."""

    style, vf, config = _defaults(style, vf, config)
    if allowGeneratePrettyContinuousTicks(
            config.enablePrettyTicks, ra, config.prettyTicksTolerance):
        return generatePrettyContinuousTicks(
            measurer, ra, isvertical, style, vf, config)
    return generateContinuousTicks(
        measurer, ra, isvertical, style, vf, config)

def generateTicksWithTimeout(measurer, ra, isvertical, style=None, vf=None,
                             config=None, timeout=5.):
    """Call generateTicks, raising TickTimeout if it takes longer than
    timeout seconds.

    Python threads cannot be stopped, so a call which times out keeps
    running in the background and its result is thrown away.
    The interpreter waits for that thread before exiting.
    """

    executor = concurrent.futures.ThreadPoolExecutor(max_workers=1)
    try:
        future = executor.submit(
            generateTicks, measurer, ra, isvertical, style, vf, config)
        try:
            return future.result(timeout=timeout)
        except concurrent.futures.TimeoutError:
            logger.warning('tick generation for %s timed out after %gs',
                           ra, timeout)
            raise TickTimeout(
                'Ticks for %s took longer than %g seconds' % (ra, timeout))
    finally:
        executor.shutdown(wait=False)
