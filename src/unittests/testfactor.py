'''
Created on Feb 12, 2013

@author: Justin
'''

import unittest

import numpy

from markovnets import Factor

class Test(unittest.TestCase):

    def setUp(self):
        self.scopes = []
        self.raw_beliefs = []
        self.shapes = []
        self.scopes.append(['A'])
        self.scopes.append(['B', 'A'])
        self.scopes.append(['C', 'B'])
        self.raw_beliefs.append([0.11, 0.89])
        self.raw_beliefs.append([0.59, 0.41, 0.22, 0.78])
        self.raw_beliefs.append([0.39, 0.61, 0.06, 0.94])
        self.shapes.append((2))
        self.shapes.append((2, 2))
        self.shapes.append((2, 2))

        self.beliefs = [numpy.reshape(belief, shape, order = 'F') for \
                        (belief, shape) in zip(self.raw_beliefs, self.shapes)]
        self.factors = [Factor(scope, belief) for \
                        (scope, belief) in zip(self.scopes, self.beliefs)]

    def testOrdering(self):
        for (factor, belief) in zip(self.factors, self.raw_beliefs):
            assert numpy.allclose(factor.beliefs.ravel(order = 'F'), belief)

    def testFactorInputValidation(self):
        with self.assertRaises(AssertionError):
            Factor("SPAM", self.beliefs[0])
        with self.assertRaises(NotImplementedError):
            Factor(['A'], "EGGS")
        with self.assertRaises(AssertionError):
            Factor(['A', 'A'], self.beliefs[1])
        with self.assertRaises(AssertionError):
            Factor(['A'], self.beliefs[1])
        with self.assertRaises(AssertionError):
            Factor(['A'], numpy.array([0.5, -0.5]))

    def testCardinalities(self):
        factor = Factor(['A', 'B'], numpy.ones((2, 3)))
        self.assertEqual(factor.scope, ('A', 'B'))
        self.assertEqual(factor.cardinalities, {'A' : 2, 'B' : 3})
        self.assertEqual(factor.cardinality('B'), 3)

    def testCondition(self):
        conditioned = self.factors[1].condition({'A' : 1})
        self.assertEqual(conditioned.scope, ('B',))
        assert numpy.allclose(conditioned.beliefs, self.beliefs[1][:, 1])

        #evidence outside the scope is ignored
        conditioned = self.factors[1].condition({'A' : 0, 'Z' : 7})
        self.assertEqual(conditioned.scope, ('B',))
        assert numpy.allclose(conditioned.beliefs, self.beliefs[1][:, 0])

        self.assertIs(self.factors[1].condition({'Z' : 0}), self.factors[1])
        self.assertIs(self.factors[1].condition({}), self.factors[1])

    def testConditionEveryVariable(self):
        conditioned = self.factors[1].condition({'A' : 0, 'B' : 1})
        self.assertEqual(conditioned.scope, ())
        self.assertIsInstance(conditioned.beliefs, numpy.ndarray)
        self.assertEqual(conditioned.beliefs.ndim, 0)
        self.assertAlmostEqual(float(conditioned.beliefs), 0.41)

    def testConditionInvalidState(self):
        with self.assertRaises(IndexError):
            self.factors[1].condition({'A' : 2})
        with self.assertRaises(IndexError):
            self.factors[1].condition({'A' : -1})

    def testMarginalization(self):
        self.marginals = []
        self.marginals.append([1])
        self.marginals.append([1, 1])
        self.marginals.append([1, 1])
        for (factor, scope, marginal) in zip(self.factors, self.scopes, self.marginals):
            actual_marginal = Factor.marginalize(factor, [scope[0]]).beliefs
            assert numpy.allclose(actual_marginal, marginal)

    def testMarginalizationIgnoresUnknownVariables(self):
        marginal = Factor.marginalize(self.factors[1], ['Z'])
        self.assertEqual(marginal.scope, ('B', 'A'))
        assert numpy.allclose(marginal.beliefs, self.beliefs[1])

    def testMultiplication(self):
        self.raw_derived_beliefs = []
        self.derived_shapes = []
        self.derived_factors = []
        self.raw_derived_beliefs.append([0.0649, 0.1958, 0.0451, 0.6942])
        self.raw_derived_beliefs.append([0.025311, 0.076362, 0.002706, 0.041652, \
                                  0.039589, 0.119438, 0.042394, 0.652548])
        self.derived_shapes.append((2, 2))
        self.derived_shapes.append((2, 2, 2))
        self.derived_beliefs = [numpy.reshape(belief, shape, order = 'F') for \
                                (belief, shape) in zip(self.raw_derived_beliefs, self.derived_shapes)]
        self.derived_factors.append(Factor.product(self.factors[0], self.factors[1]))
        self.derived_factors.append(self.derived_factors[0] * self.factors[2])
        self.assertEqual(self.derived_factors[0].scope, ('A', 'B'))
        self.assertEqual(self.derived_factors[1].scope, ('A', 'B', 'C'))
        for (factor, belief) in zip(self.derived_factors, self.derived_beliefs):
            assert numpy.allclose(factor.beliefs, belief)

    def testJoint(self):
        joint = Factor.joint(*self.factors)
        chained = Factor.product(Factor.product(self.factors[0], self.factors[1]),
                                 self.factors[2])
        self.assertEqual(set(joint.scope), {'A', 'B', 'C'})
        self.assertEqual(joint.scope, chained.scope)
        assert numpy.allclose(joint.beliefs, chained.beliefs)

    def testEmptyJoint(self):
        unit = Factor.joint()
        self.assertEqual(unit.scope, ())
        self.assertEqual(float(unit.beliefs), 1.0)

    def testUniform(self):
        uniform = Factor.uniform(['A', 'B'], {'A' : 2, 'B' : 3})
        self.assertEqual(uniform.scope, ('A', 'B'))
        assert numpy.allclose(uniform.probabilities, numpy.full((2, 3), 1 / 6))

    def testEvidenceJointMarginalWorkflow(self):
        self.raw_probabilities = [0.0858, 0.0468, 0.1342, 0.7332]
        self.probabilities = numpy.reshape(self.raw_probabilities, (2, 2), order = 'F')
        self.reduced_probabilities = numpy.sum(self.probabilities, axis = 0)
        #Evidence
        evidence = {'A' : 1}
        #Joint
        self.joint_factor = Factor.joint(*(factor.condition(evidence)
                                           for factor in self.factors))
        self.assertEqual(self.joint_factor.scope, ('B', 'C'))
        #Marginal
        self.reduced_factor = Factor.marginalize(self.joint_factor, ['B'])
        assert numpy.allclose(self.reduced_factor.probabilities, self.reduced_probabilities)

    def testRandomSampling(self):
        rng = numpy.random.default_rng(6441)
        other_rng = numpy.random.default_rng(6441)
        draws = [self.factors[1].sample(rng) for _ in range(8)]
        self.assertEqual(draws, [self.factors[1].sample(other_rng) for _ in range(8)])
        for draw in draws:
            self.assertEqual(len(draw), 2)
            assert all(state in (0, 1) for state in draw)

    def testSamplingSkipsZeroBeliefs(self):
        factor = Factor(['A', 'B'], numpy.array([[0.0, 1.0, 0.0], [0.0, 0.0, 0.0]]))
        rng = numpy.random.default_rng(0)
        for _ in range(20):
            self.assertEqual(factor.sample(rng), (0, 1))

if __name__ == "__main__":
    unittest.main()
