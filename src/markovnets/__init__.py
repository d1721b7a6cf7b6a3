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
Markov random fields over discrete random variables: structure queries,
conditioning on evidence, and Gibbs sampling.
'''

from markovnets.errors import (DegenerateDistribution, InconsistentAssignment,
                               InvalidArgument, MarkovNetError, MissingVariable,
                               UnknownVariable)
from markovnets.factor import Factor
from markovnets.gibbs import GibbsSampler, gibbs_sample, gibbs_sweep, random_assignment
from markovnets.graph import UndirectedGraph
from markovnets.network import MarkovNet

__all__ = [
    "DegenerateDistribution",
    "Factor",
    "GibbsSampler",
    "InconsistentAssignment",
    "InvalidArgument",
    "MarkovNet",
    "MarkovNetError",
    "MissingVariable",
    "UndirectedGraph",
    "UnknownVariable",
    "gibbs_sample",
    "gibbs_sweep",
    "random_assignment",
]
