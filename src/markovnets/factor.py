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
Dense discrete factors.

A Factor is the only potential representation shipped with MN, but a
MarkovNet and the Gibbs sampler only rely on the following behavior,
so any other representation providing it can be dropped in:

    factor.scope                -- ordered tuple of variable names
    factor.beliefs              -- array of nonnegative weights over the scope
    factor.condition(assignment) -> Factor
    factor * other              -> Factor
'''

import functools
from collections.abc import Sequence as AbstractSequence

import numpy

class Factor:
    """
    A Factor is a mapping between the joint instantiations of a collection
    of discrete random variables (its scope) and the nonnegative reals,
    called "beliefs".

    Random variables are referred to by name. The states of a random
    variable are the category indices 0..n-1, where n is the length of the
    matching axis of the beliefs array.

    This definition includes, as practical examples:
    (1) potentials of a Markov random field (unnormalized)
    (2) probabilities (normalized discrete factors)

    In Physics, a Factor is typically called a (Field) Potential or
    a Local (Field) Operator.
    """

    @staticmethod
    def marginalize(factor, scope):
        """
        Return a Factor that has the beliefs of the input factor
        about the random variables in the input scope "summed out".

        The scope of the output will match that of the input factor,
        except the random variables of the input scope will be removed.

        If this results in an empty scope, then a Factor will be created
        that has a 0-rank array for its beliefs. This is useful when
        calculating the partition function, which can be thought of as
        the joint distribution marginalized to an empty scope.

        Any random variables in the input scope that are not in the
        input factor's scope will be silently ignored.

        Does not modify the input.
        """
        removal_scope = set(scope)
        restricted_scope = tuple(rvar for rvar in factor.scope
                                 if rvar not in removal_scope)
        summed_axes = tuple(axis for (axis, rvar) in enumerate(factor.scope)
                            if rvar in removal_scope)
        summed_beliefs = numpy.asarray(factor.beliefs.sum(axis = summed_axes))
        return Factor(restricted_scope, summed_beliefs)
    @staticmethod
    def product(factorA, factorB):
        """
        Return a Factor that combines the scope and beliefs of the input factors.

        factorA.scope, factorB.scope -> new_factor.scope:
        [c, a, d, e], [e, f, d] -> [c, a, d, e, f]
        factorA.beliefs.shape, factorB.beliefs.shape -> new_factor.shape:
        (4, 2, 5, 6), (6, 7, 5) -> (4, 2, 5, 6, 7)

        Does not modify the input.
        """
        B_not_A_scope = tuple(rvar for rvar in factorB.scope
                              if rvar not in factorA.scope)
        combined_scope = factorA.scope + B_not_A_scope
        subscopeB = [rvar for rvar in combined_scope if rvar in factorB.scope]
        permutationB = tuple(map(factorB.scope.index, subscopeB))
        sliceA = tuple(slice(None) if rvar in factorA.scope else numpy.newaxis
                       for rvar in combined_scope)
        sliceB = tuple(slice(None) if rvar in factorB.scope else numpy.newaxis
                       for rvar in combined_scope)
        #the variables in factorA.scope remain un-permuted in the combined scope
        beliefA = factorA.beliefs[sliceA]
        beliefB = factorB.beliefs.transpose(permutationB)[sliceB]
        #0-rank inputs come back as scalars when the combined scope is empty
        combined_beliefs = numpy.asarray(beliefA * beliefB)
        return Factor(combined_scope, combined_beliefs)
    @staticmethod
    def joint(*factors):
        """
        Return a Factor that combines the scope and beliefs of the input factors.

        factorA.scope, factorB.scope, factorC.scope
            -> new_factor.scope:
        [c, a, d, e], [e, f, d], [g, e, a]
            -> [c, a, d, e, f, g]

        The joint of no factors at all is the unit Factor.

        Does not modify the input.
        """
        return functools.reduce(Factor.product, factors, Factor.unit())
    @staticmethod
    def uniform(target_scope, cardinalities):
        """
        Return a Factor whose beliefs are uniform over the target scope's states.

        cardinalities -- a mapping from each name in the scope to its number
                          of states
        """
        target_shape = tuple(cardinalities[rvar] for rvar in target_scope)
        uniform_beliefs = numpy.ones(target_shape)
        return Factor(target_scope, uniform_beliefs)
    @staticmethod
    def unit():
        """
        Return the unit Factor: empty scope, a single belief of 1.
        """
        return Factor((), numpy.array(1.0))

    def __init__(self, scope, beliefs):
        """
        Return a Factor that knows about the random variables in the input
        scope and has the input beliefs about them.

        scope   -- an indexed collection of distinct random variable names
                    that this factor has beliefs about
        beliefs -- a numpy array (possibly 0-rank) of nonnegative real
                    numbers with
                    (1) beliefs.ndim == len(scope)
                    (2) beliefs.shape[k] is the number of states of scope[k]
                    (3) Order of axes should reflect the order of random
                        variables in the scope!
        """
        if not isinstance(beliefs, numpy.ndarray):
            raise NotImplementedError("'beliefs' must be a numpy array.")
        assert issubclass(beliefs.dtype.type, (numpy.integer, numpy.floating)), \
                "The beliefs must all be real numbers."
        assert isinstance(scope, AbstractSequence) and not isinstance(scope, str), \
                "The scope must be an indexed collection."
        assert beliefs.ndim == len(scope), \
                "The beliefs do not match the scope."
        assert len(set(scope)) == len(scope), \
                "The scope must contain unique random variables."
        assert (beliefs >= 0).all(), \
                "The beliefs must be nonnegative."
        self._scope = tuple(scope)
        self._beliefs = beliefs

    def __mul__(self, other):
        return Factor.product(self, other)
    def __repr__(self):
        return "Factor({!r}, shape = {})".format(self._scope, self._beliefs.shape)

    @property
    def scope(self):
        return self._scope
    @property
    def beliefs(self):
        return self._beliefs
    @property
    def cardinalities(self):
        return dict(zip(self._scope, self._beliefs.shape))
    @property
    def probabilities(self):
        #only makes probabilistic sense in the case of joint distributions
        return self.beliefs / self.beliefs.sum()

    def cardinality(self, rvar):
        return self._beliefs.shape[self._scope.index(rvar)]

    def condition(self, assignment):
        """
        Return a Factor whose beliefs are those of this factor with the
        assigned random variables fixed to their assigned states.

        Entries of the assignment that name random variables outside this
        factor's scope are ignored. The assigned random variables are
        removed from the scope; if none of them is in scope, this factor is
        returned as is.

        Does not modify the input.
        """
        observed = {rvar : assignment[rvar] for rvar in self._scope
                    if rvar in assignment}
        if not observed:
            return self
        for (rvar, state) in observed.items():
            if not 0 <= state < self.cardinality(rvar):
                raise IndexError("{} is not a valid state of {!r}.".format(state, rvar))
        hidden_scope = tuple(rvar for rvar in self._scope if rvar not in observed)
        subslice = tuple(observed[rvar] if rvar in observed else slice(None)
                         for rvar in self._scope)
        #indexing every axis with an integer yields a scalar, not a 0-rank array
        return Factor(hidden_scope, numpy.asarray(self._beliefs[subslice]))

    def sample(self, rng = None):
        """
        Return a joint instantiation of the scope, as a tuple of states,
        drawn with probability proportional to the beliefs.
        """
        rng = numpy.random.default_rng(rng)
        cumulative_measures = self.beliefs.ravel().cumsum()
        random_measure = rng.random() * cumulative_measures[-1]
        flat_indices = numpy.argwhere(cumulative_measures > random_measure)
        if len(flat_indices):
            flat_index = flat_indices[0][0]
        else:
            #rounding put the measure on the upper edge; take the last state with weight
            flat_index = numpy.flatnonzero(self.beliefs.ravel())[-1]
        return tuple(int(index) for index
                     in numpy.unravel_index(flat_index, self.beliefs.shape))
