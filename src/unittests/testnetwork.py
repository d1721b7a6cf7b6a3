'''
Created on Mar 2, 2013

@author: Justin
'''

import itertools
import unittest

import numpy

from markovnets import Factor, MarkovNet, UnknownVariable

class Test(unittest.TestCase):

    def setUp(self):
        #A - B - C
        self.ab = Factor(['A', 'B'], numpy.array([[1.0, 2.0], [3.0, 4.0]]))
        self.bc = Factor(['B', 'C'], numpy.array([[5.0, 1.0, 2.0], [1.0, 5.0, 2.0]]))
        self.chain = MarkovNet([self.ab, self.bc])
        #one factor, two binary variables, uniform
        self.pair = MarkovNet([Factor(['A', 'B'], numpy.ones((2, 2)))])

    def testNames(self):
        self.assertEqual(self.chain.names, ('A', 'B', 'C'))
        self.assertEqual(list(self.chain), ['A', 'B', 'C'])
        self.assertEqual(len(self.chain), 3)
        for (index, rvar) in enumerate(self.chain.names):
            self.assertEqual(self.chain.name_to_index[rvar], index)
            self.assertEqual(self.chain.index(rvar), index)
            self.assertEqual(self.chain.get(index), rvar)
        assert 'B' in self.chain
        assert 'Z' not in self.chain
        with self.assertRaises(UnknownVariable):
            self.chain.index('Z')

    def testFactorIndices(self):
        self.assertEqual(self.chain.name_to_factor_indices,
                         {'A' : (0,), 'B' : (0, 1), 'C' : (1,)})
        self.assertEqual(self.chain.factors, (self.ab, self.bc))
        self.assertIs(self.chain.factors[0], self.ab)

    def testCardinality(self):
        self.assertEqual(self.chain.cardinality('B'), 2)
        self.assertEqual(self.chain.cardinality('C'), 3)
        with self.assertRaises(UnknownVariable):
            self.chain.cardinality('Z')

    def testCardinalitiesMustAgree(self):
        with self.assertRaises(ValueError):
            MarkovNet([Factor(['A'], numpy.ones(1)), Factor(['A', 'B'], numpy.ones((3, 2)))])
        with self.assertRaises(ValueError):
            MarkovNet([Factor(['A', 'B'], numpy.ones((2, 2))), Factor(['B', 'C'], numpy.ones((3, 2)))])
        network = MarkovNet([Factor(['A'], numpy.ones(3)), Factor(['A', 'B'], numpy.ones((3, 2)))])
        self.assertEqual(network.cardinality('A'), 3)

    def testLookupTablesAreReadOnly(self):
        with self.assertRaises(TypeError):
            self.chain.name_to_index['Z'] = 7
        with self.assertRaises(TypeError):
            self.chain.name_to_factor_indices['Z'] = (0,)
        assert 'Z' not in self.chain
        self.assertEqual(dict(self.chain.name_to_index), {'A' : 0, 'B' : 1, 'C' : 2})

    def testGraph(self):
        self.assertEqual(self.chain.graph.order(), 3)
        self.assertEqual(list(self.chain.graph.edges()), [(0, 1), (1, 2)])
        self.assertEqual(list(self.chain.edges()), [('A', 'B'), ('B', 'C')])

    def testEmptyNetwork(self):
        network = MarkovNet()
        self.assertEqual(len(network), 0)
        self.assertEqual(network.names, ())
        self.assertEqual(network.graph.order(), 0)

    def testEdgesMatchScopes(self):
        scopes = [['A', 'B', 'C'], ['C', 'D'], ['E'], ['D', 'F', 'A'], ['B', 'C']]
        factors = [Factor(scope, numpy.ones((2,) * len(scope))) for scope in scopes]
        network = MarkovNet(factors)
        self.assertEqual(network.names, ('A', 'B', 'C', 'D', 'E', 'F'))
        for (u, v) in itertools.permutations(network.names, 2):
            cooccur = any(u in scope and v in scope for scope in scopes)
            self.assertEqual(network.has_edge(u, v), cooccur, (u, v))
        for rvar in network.names:
            expected = tuple(k for (k, scope) in enumerate(scopes) if rvar in scope)
            self.assertEqual(network.name_to_factor_indices[rvar], expected)

    def testNeighbors(self):
        self.assertEqual(self.chain.neighbors('B'), ['A', 'C'])
        self.assertEqual(self.chain.neighbors('A'), ['B'])
        with self.assertRaises(UnknownVariable):
            self.chain.neighbors('Z')

    def testMarkovBlanket(self):
        for rvar in self.chain.names:
            self.assertEqual(self.chain.markov_blanket(rvar), self.chain.neighbors(rvar))
        with self.assertRaises(UnknownVariable):
            self.chain.markov_blanket('Z')

    def testHasEdge(self):
        assert self.chain.has_edge('A', 'B')
        assert self.chain.has_edge('B', 'A')
        assert not self.chain.has_edge('A', 'C')
        #unknown names are not an error
        assert not self.chain.has_edge('A', 'Z')
        assert not self.chain.has_edge('Z', 'Y')

    def testIndependenceInChain(self):
        assert self.chain.is_independent(['A'], ['C'], ['B'])
        assert not self.chain.is_independent(['A'], ['C'], [])
        assert not self.chain.is_independent(['A'], ['B'], ['C'])

    def testIndependenceInPair(self):
        assert not self.pair.is_independent(['A'], ['B'], [])

    def testIndependenceIsSymmetric(self):
        scopes = [['A', 'B'], ['B', 'C'], ['C', 'D'], ['D', 'A'], ['E', 'F']]
        network = MarkovNet([Factor(scope, numpy.ones((2, 2))) for scope in scopes])
        names = network.names
        for x in names:
            for y in names:
                for given in itertools.chain([()], itertools.combinations(names, 1),
                                             itertools.combinations(names, 2)):
                    self.assertEqual(network.is_independent([x], [y], given),
                                     network.is_independent([y], [x], given))

    def testIndependenceInLoop(self):
        #A - B - C - D - A, and E - F apart
        scopes = [['A', 'B'], ['B', 'C'], ['C', 'D'], ['D', 'A'], ['E', 'F']]
        network = MarkovNet([Factor(scope, numpy.ones((2, 2))) for scope in scopes])
        assert not network.is_independent(['A'], ['C'], ['B'])
        assert network.is_independent(['A'], ['C'], ['B', 'D'])
        assert network.is_independent(['A', 'B'], ['E'], [])
        assert not network.is_independent(['A', 'E'], ['F'], [])

    def testIndependenceDoesNotModifyGraph(self):
        self.chain.is_independent(['A'], ['C'], ['B'])
        self.assertEqual(list(self.chain.edges()), [('A', 'B'), ('B', 'C')])

    def testIndependenceUnknownVariable(self):
        with self.assertRaises(UnknownVariable):
            self.chain.is_independent(['A'], ['Z'], [])
        with self.assertRaises(UnknownVariable):
            self.chain.is_independent(['A'], ['C'], ['Z'])

    def testEvidenceReduce(self):
        reduced = self.chain.evidence_reduce({'B' : 1})
        self.assertEqual(reduced.names, ('A', 'C'))
        assert not reduced.has_edge('A', 'C')
        self.assertEqual(len(reduced.factors), 2)
        self.assertEqual(reduced.factors[0].scope, ('A',))
        assert numpy.allclose(reduced.factors[0].beliefs, [2.0, 4.0])
        self.assertEqual(reduced.factors[1].scope, ('C',))
        assert numpy.allclose(reduced.factors[1].beliefs, [1.0, 5.0, 2.0])
        #the original is untouched
        self.assertEqual(self.chain.names, ('A', 'B', 'C'))
        self.assertEqual(self.chain.factors[0].scope, ('A', 'B'))

    def testEvidenceReduceIgnoresUnknownVariables(self):
        reduced = self.chain.evidence_reduce({'Z' : 3})
        self.assertEqual(reduced.names, self.chain.names)
        for (factor, original) in zip(reduced.factors, self.chain.factors):
            self.assertIs(factor, original)

    def testEvidenceReduceEmpty(self):
        reduced = self.chain.evidence_reduce({})
        self.assertIsNot(reduced, self.chain)
        self.assertEqual(reduced.names, self.chain.names)
        self.assertEqual(list(reduced.edges()), list(self.chain.edges()))

    def testEvidenceReduceKeepsPartialScopes(self):
        network = MarkovNet([Factor(['A', 'B', 'C'], numpy.ones((2, 2, 2)))])
        reduced = network.evidence_reduce({'B' : 0})
        self.assertEqual(reduced.names, ('A', 'C'))
        assert reduced.has_edge('A', 'C')

    def testEvidenceReduceEverything(self):
        reduced = self.chain.evidence_reduce({'A' : 0, 'B' : 1, 'C' : 2})
        self.assertEqual(len(reduced), 0)
        self.assertEqual(len(reduced.factors), 2)
        self.assertEqual(reduced.factors[0].scope, ())

    def testEvidenceReduceIsIdempotent(self):
        evidence = {'B' : 0, 'Z' : 1}
        once = self.chain.evidence_reduce(evidence)
        twice = once.evidence_reduce(evidence)
        self.assertEqual(twice.names, once.names)
        self.assertEqual(list(twice.edges()), list(once.edges()))
        self.assertEqual(twice.name_to_factor_indices, once.name_to_factor_indices)
        for (factor, other) in zip(twice.factors, once.factors):
            self.assertEqual(factor.scope, other.scope)
            assert numpy.array_equal(factor.beliefs, other.beliefs)

if __name__ == "__main__":
    unittest.main()
