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
Markov random fields over discrete random variables.
'''

import logging
import types

from markovnets.errors import UnknownVariable
from markovnets.graph import UndirectedGraph

logger = logging.getLogger(__name__)

class MarkovNet:
    """
    A MarkovNet (Markov random field) represents a probability distribution
    over a set of discrete random variables, P(x_1, x_2, ..., x_n), as the
    normalized product of a collection of Factors.

    Its undirected graph has one vertex per random variable, and an edge
    between two random variables whenever some factor has both of them in
    its scope.

    The graph and the lookup tables below are built together, once, from
    the factors; a MarkovNet is never modified afterward. Conditioning on
    evidence (see evidence_reduce) builds a new MarkovNet instead.

    names                  -- index -> name, in order of first appearance
    name_to_index          -- name -> index (the inverse of names)
    name_to_factor_indices -- name -> indices of the factors whose scope
                              contains that name
    """
    def __init__(self, factors = ()):
        """
        Return the MarkovNet induced by the input factors.

        The factors are shared, not copied.
        """
        self._factors = tuple(factors)
        #unique names, in order of first appearance
        unique_names = {}
        for factor in self._factors:
            for rvar in factor.scope:
                unique_names.setdefault(rvar, len(unique_names))
        self._names = tuple(unique_names)
        self._name_to_index = types.MappingProxyType(unique_names)
        self._cardinalities = {}
        (self._graph, self._name_to_factor_indices) = self._build_graph()
        logger.debug("Built MarkovNet with %d variables and %d edges from %d factors.",
                     len(self._names), sum(1 for _ in self._graph.edges()),
                     len(self._factors))

    def _build_graph(self):
        graph = UndirectedGraph(len(self._names))
        factor_indices = {rvar : [] for rvar in self._names}
        for (factor_index, factor) in enumerate(self._factors):
            for (rvar, num_states) in zip(factor.scope, factor.beliefs.shape):
                if factor_index not in factor_indices[rvar]:
                    factor_indices[rvar].append(factor_index)
                known_states = self._cardinalities.setdefault(rvar, num_states)
                if known_states != num_states:
                    raise ValueError(
                        "Factor {} gives {!r} {} states, but an earlier factor gives it {}.".format(
                            factor_index, rvar, num_states, known_states))
            indices = [self._name_to_index[rvar] for rvar in factor.scope]
            for (k, u) in enumerate(indices):
                for v in indices[k + 1 :]:
                    graph.add_edge(u, v)
        return (graph, types.MappingProxyType({rvar : tuple(indices)
                                               for (rvar, indices) in factor_indices.items()}))

    def __len__(self):
        return len(self._names)
    def __contains__(self, rvar):
        return rvar in self._name_to_index
    def __iter__(self):
        return iter(self._names)
    def __repr__(self):
        return "MarkovNet(variables = {}, factors = {})".format(
            list(self._names), len(self._factors))

    @property
    def graph(self):
        return self._graph
    @property
    def factors(self):
        return self._factors
    @property
    def names(self):
        return self._names
    @property
    def name_to_index(self):
        return self._name_to_index
    @property
    def name_to_factor_indices(self):
        return self._name_to_factor_indices

    def get(self, index):
        return self._names[index]
    def index(self, rvar):
        try:
            return self._name_to_index[rvar]
        except KeyError:
            raise UnknownVariable(rvar) from None
    def cardinality(self, rvar):
        """
        Return the number of states of the random variable, on which every
        factor that has it in scope agrees.
        """
        if rvar not in self._cardinalities:
            raise UnknownVariable(rvar)
        return self._cardinalities[rvar]
    def edges(self):
        for (u, v) in self._graph.edges():
            yield (self._names[u], self._names[v])

    def neighbors(self, rvar):
        """
        Return the names of the random variables adjacent to rvar.
        """
        return [self._names[j] for j in self._graph.neighbors(self.index(rvar))]
    def markov_blanket(self, rvar):
        """
        Return the Markov blanket of rvar, which, in an undirected model,
        is exactly its set of neighbors.
        """
        return self.neighbors(rvar)
    def has_edge(self, source, target):
        """
        Whether an edge joins source and target.

        Unknown names are not an error; they simply have no edges.
        """
        u = self._name_to_index.get(source)
        v = self._name_to_index.get(target)
        return u is not None and v is not None and self._graph.has_edge(u, v)

    def is_independent(self, x, y, given = ()):
        """
        Return whether the random variables in x are separated from those
        in y by the random variables in given.

        Every edge touching a vertex in given is cut (the vertices stay);
        x and y are independent unless some connected component of what is
        left holds a member of each.
        """
        x_index = {self.index(rvar) for rvar in x}
        y_index = {self.index(rvar) for rvar in y}
        g_index = {self.index(rvar) for rvar in given}
        cut_graph = self._graph.copy()
        for g in g_index:
            cut_graph.del_node_edges(g)
        for component in cut_graph.connected_components():
            if component & x_index and component & y_index:
                return False
        return True

    def evidence_reduce(self, evidence):
        """
        Return the MarkovNet obtained by conditioning every factor on the
        evidence, a mapping from names to observed states.

        Evidence about random variables outside a factor's scope is ignored
        by that factor. Random variables that are observed drop out of the
        reduced network entirely.

        Does not modify this MarkovNet.
        """
        reduced_factors = []
        for factor in self._factors:
            small_evidence = {rvar : evidence[rvar] for rvar in factor.scope
                              if rvar in evidence}
            reduced_factors.append(factor.condition(small_evidence))
        logger.debug("Reducing MarkovNet on evidence %s.", dict(evidence))
        return MarkovNet(reduced_factors)
