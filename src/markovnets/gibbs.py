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
Gibbs sampling for MarkovNets.
'''

import functools
import logging
import numbers
import operator

import numpy
import pandas

from markovnets.errors import (DegenerateDistribution, InconsistentAssignment,
                               InvalidArgument, MissingVariable)
from markovnets.factor import Factor

logger = logging.getLogger(__name__)

class GibbsSampler:
    """
    The GibbsSampler houses the parameters of the Gibbs sampling algorithm.

    evidence -- the assignment that all samples must be consistent with
                (i.e. {'A' : 1} means all samples must have A = 1).
                Use to sample conditional distributions.
    burn_in  -- the first burn_in sweeps will be discarded. They will not be
                returned. The thinning parameter does not affect the burn in
                period. This is used to ensure that the Gibbs sampler
                converges to the target stationary distribution before
                actual samples are drawn.
    thinning -- for every thinning + 1 sweeps, only the last is kept.
                Thinning is used to reduce autocorrelation between samples.
                Thinning is not used during the burn in period.
                e.g. If thinning is 1, samples will be drawn in groups of two
                and only the second sample will be in the output.
    initial_sample -- the initial assignment of every variable. If None,
                the initial sample is chosen at random.

    The parameters are validated when sampling starts, not here.
    """
    def __init__(self, evidence = None, burn_in = 100, thinning = 0,
                 initial_sample = None):
        self._evidence = dict(evidence or {})
        self._burn_in = burn_in
        self._thinning = thinning
        self._initial_sample = None if initial_sample is None else dict(initial_sample)

    def __repr__(self):
        return ("GibbsSampler(evidence = {}, burn_in = {}, thinning = {}, "
                "initial_sample = {})").format(self._evidence, self._burn_in,
                                               self._thinning, self._initial_sample)

    @property
    def evidence(self):
        return dict(self._evidence)
    @property
    def burn_in(self):
        return self._burn_in
    @property
    def thinning(self):
        return self._thinning
    @property
    def initial_sample(self):
        if self._initial_sample is None:
            return None
        return dict(self._initial_sample)

    def sample(self, network, nsamples, rng = None):
        """
        Return nsamples Gibbs samples of the network as a DataFrame.
        """
        return gibbs_sample(network, nsamples, self._burn_in,
                            thinning = self._thinning,
                            evidence = self._evidence,
                            initial_sample = self._initial_sample,
                            rng = rng)

def _check_count(name, value, least):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgument("{} must be an integer, not {!r}.".format(name, value))
    if value < least:
        raise InvalidArgument("{} must be at least {}, not {}.".format(name, least, value))

def _check_initial_sample(network, initial_sample, evidence):
    for rvar in network.names:
        if rvar not in initial_sample:
            raise MissingVariable(
                "initial_sample must assign every variable in the MarkovNet; "
                "{!r} is missing.".format(rvar))
    for (rvar, state) in evidence.items():
        if rvar in initial_sample and initial_sample[rvar] != state:
            raise InconsistentAssignment(
                "initial_sample has {!r} = {}, but the evidence has {}.".format(
                    rvar, initial_sample[rvar], state))

def _check_potential(potential):
    total = potential.beliefs.sum()
    if not total > 0:
        raise DegenerateDistribution("The local potential sums to {}.".format(total))

def random_assignment(network, rng):
    """
    Return an assignment of every variable in the network, each state drawn
    uniformly, independently and in index order.

    It need not have positive probability under the network.
    """
    return {rvar : Factor.uniform((rvar,), {rvar : network.cardinality(rvar)}).sample(rng)[0]
            for rvar in network.names}

def gibbs_sweep(network, current_sample, rng, results = None):
    """
    Resample every variable of the network once, in index order, from its
    conditional distribution given the current states of all the others.

    Each new state is written into current_sample before the next variable
    is visited. If results (a dict of lists keyed by name) is given, the new
    states are appended to it as well.

    Return current_sample.
    """
    for rvar in network.names:
        other_assignment = dict(current_sample)
        del other_assignment[rvar]
        local_factors = [network.factors[factor_index].condition(other_assignment)
                         for factor_index in network.name_to_factor_indices[rvar]]
        local_potential = functools.reduce(operator.mul, local_factors)
        try:
            _check_potential(local_potential)
        except DegenerateDistribution as error:
            raise DegenerateDistribution(
                "Cannot resample {!r} given {}: {}".format(rvar, other_assignment, error)) from None
        (state,) = local_potential.sample(rng)
        current_sample[rvar] = state
        if results is not None:
            results[rvar].append(state)
    return current_sample

def gibbs_sample(network, nsamples, burn_in, thinning = 0, evidence = None,
                 initial_sample = None, rng = None):
    """
    Return nsamples Gibbs samples of the network as a DataFrame with one
    column per unobserved variable, in index order, and one row per sample.

    This Gibbs sampler only supports discrete MarkovNets, and samples are
    drawn following a Categorical Distribution with probabilities equal to
    the normalized potentials.

    rng -- a numpy Generator, a seed, or None for fresh entropy. All draws
           are taken from it in sweep order, so a seed reproduces the output.

    See GibbsSampler for the other parameters.
    """
    evidence = dict(evidence or {})
    #check parameters for correctness
    _check_count("nsamples", nsamples, 1)
    _check_count("burn_in", burn_in, 0)
    _check_count("thinning", thinning, 0)
    if initial_sample is not None:
        _check_initial_sample(network, initial_sample, evidence)
    rng = numpy.random.default_rng(rng)

    #reduce the MarkovNet according to the evidence
    reduced_network = network.evidence_reduce(evidence)
    logger.info("Gibbs sampling %d samples of %d variables (burn_in = %d, thinning = %d).",
                nsamples, len(reduced_network), burn_in, thinning)

    if initial_sample is None:
        current_sample = random_assignment(reduced_network, rng)
        logger.debug("Random initial sample %s.", current_sample)
    else:
        current_sample = {rvar : initial_sample[rvar] for rvar in reduced_network.names}

    for _ in range(burn_in):
        gibbs_sweep(reduced_network, current_sample, rng)
    logger.debug("Burn in complete after %d sweeps.", burn_in)

    results = {rvar : [] for rvar in reduced_network.names}
    for _ in range(nsamples):
        #first skip over the thinning
        for _ in range(thinning):
            gibbs_sweep(reduced_network, current_sample, rng)
        gibbs_sweep(reduced_network, current_sample, rng, results)

    logger.info("Gibbs sampling finished after %d sweeps.",
                burn_in + nsamples * (thinning + 1))
    return pandas.DataFrame(results, columns = list(reduced_network.names),
                            index = pandas.RangeIndex(nsamples), dtype = int)
