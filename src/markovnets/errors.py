"""
Copyright 2013, Justin P. Sheek <jsheek@gmail.com>

This file is part of markov-nets, hereafter referred to as MN.

    MN is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    MN is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with MN.  If not, see <http://www.gnu.org/licenses/>.
"""

'''
Errors raised by MarkovNets and the samplers that run on them.
'''

class MarkovNetError(Exception):
    """
    Base class for every error raised by this package.
    """

class InvalidArgument(MarkovNetError, ValueError):
    """
    A sampler was configured with a malformed parameter,
    e.g. nsamples < 1 or a negative burn_in.
    """

class UnknownVariable(MarkovNetError, KeyError):
    """
    A structural query named a random variable that is not in the network.
    """

class MissingVariable(MarkovNetError, KeyError):
    """
    An initial sample does not assign every random variable in the network.
    """

class InconsistentAssignment(MarkovNetError, ValueError):
    """
    An initial sample disagrees with the evidence on a shared variable.
    """

class DegenerateDistribution(MarkovNetError, ZeroDivisionError):
    """
    The combined local potential of a random variable sums to zero,
    so there is no conditional distribution to draw from.
    """
