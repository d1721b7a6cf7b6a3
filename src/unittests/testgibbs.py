'''
Created on Mar 9, 2013

@author: Justin
'''

import unittest

import numpy
import pandas
import pandas.testing
import scipy.stats

from markovnets import (DegenerateDistribution, Factor, GibbsSampler,
                        InconsistentAssignment, InvalidArgument, MarkovNet,
                        MissingVariable, gibbs_sample, gibbs_sweep,
                        random_assignment)

class Test(unittest.TestCase):

    def setUp(self):
        #A - B - C
        self.ab = Factor(['A', 'B'], numpy.array([[1.0, 2.0], [3.0, 4.0]]))
        self.bc = Factor(['B', 'C'], numpy.array([[5.0, 1.0], [1.0, 5.0]]))
        self.chain = MarkovNet([self.ab, self.bc])
        #one factor, two binary variables, uniform
        self.pair = MarkovNet([Factor(['A', 'B'], numpy.ones((2, 2)))])
        #A and B must agree
        self.equal = MarkovNet([Factor(['A', 'B'], numpy.eye(2))])

    def testInvalidArguments(self):
        with self.assertRaises(InvalidArgument):
            gibbs_sample(self.chain, 0, 10)
        with self.assertRaises(InvalidArgument):
            gibbs_sample(self.chain, 10, -1)
        with self.assertRaises(InvalidArgument):
            gibbs_sample(self.chain, 10, 10, thinning = -1)
        with self.assertRaises(InvalidArgument):
            gibbs_sample(self.chain, 2.5, 10)
        with self.assertRaises(ValueError):
            GibbsSampler(burn_in = -1).sample(self.chain, 10)

    def testMissingVariable(self):
        with self.assertRaises(MissingVariable):
            gibbs_sample(self.chain, 10, 10, initial_sample = {'A' : 0, 'B' : 0})

    def testInconsistentAssignment(self):
        with self.assertRaises(InconsistentAssignment):
            gibbs_sample(self.chain, 10, 10, evidence = {'B' : 1},
                         initial_sample = {'A' : 0, 'B' : 0, 'C' : 0})

    def testValidationHappensBeforeSampling(self):
        degenerate = MarkovNet([Factor(['A'], numpy.zeros(2))])
        with self.assertRaises(InvalidArgument):
            gibbs_sample(degenerate, 0, 0)

    def testOutputShape(self):
        samples = gibbs_sample(self.chain, 7, 5, thinning = 2, rng = 1)
        self.assertIsInstance(samples, pandas.DataFrame)
        self.assertEqual(list(samples.columns), ['A', 'B', 'C'])
        self.assertEqual(len(samples), 7)
        assert samples.isin([0, 1]).all().all()

    def testEvidenceIsRemoved(self):
        samples = gibbs_sample(self.chain, 20, 5, evidence = {'B' : 1}, rng = 2)
        self.assertEqual(list(samples.columns), ['A', 'C'])
        self.assertEqual(len(samples), 20)
        for (_, row) in samples.iterrows():
            assignment = dict(row, B = 1)
            for factor in self.chain.factors:
                self.assertGreater(float(factor.condition(assignment).beliefs), 0)

    def testEverythingObserved(self):
        samples = gibbs_sample(self.chain, 4, 3, evidence = {'A' : 0, 'B' : 0, 'C' : 1})
        self.assertEqual(samples.shape, (4, 0))

    def testSeedReproducesSamples(self):
        first = gibbs_sample(self.chain, 50, 10, thinning = 1, rng = 6441)
        second = gibbs_sample(self.chain, 50, 10, thinning = 1,
                              rng = numpy.random.default_rng(6441))
        pandas.testing.assert_frame_equal(first, second)

    def testThinningKeepsEveryLastSweep(self):
        initial_sample = {'A' : 1, 'B' : 0, 'C' : 1}
        dense = gibbs_sample(self.chain, 10, 3, initial_sample = initial_sample, rng = 11)
        thinned = gibbs_sample(self.chain, 5, 3, thinning = 1,
                               initial_sample = initial_sample, rng = 11)
        pandas.testing.assert_frame_equal(
            thinned, dense.iloc[1 :: 2].reset_index(drop = True))

    def testInitialSampleMayCarryEvidence(self):
        samples = gibbs_sample(self.chain, 5, 0, evidence = {'B' : 1},
                               initial_sample = {'A' : 0, 'B' : 1, 'C' : 0, 'Z' : 4},
                               rng = 3)
        self.assertEqual(list(samples.columns), ['A', 'C'])

    def testZeroProbabilityStatesAreNeverDrawn(self):
        samples = gibbs_sample(self.equal, 200, 0, initial_sample = {'A' : 1, 'B' : 1},
                               rng = 5)
        assert (samples['A'] == samples['B']).all()
        assert (samples['A'] == 1).all()

    def testDegenerateDistribution(self):
        network = MarkovNet([Factor(['A', 'B'], numpy.array([[1.0, 0.0], [0.0, 0.0]]))])
        with self.assertRaises(DegenerateDistribution):
            gibbs_sample(network, 1, 0, initial_sample = {'A' : 1, 'B' : 1})
        with self.assertRaises(DegenerateDistribution):
            gibbs_sample(network, 1, 0, evidence = {'A' : 1}, rng = 0)

    def testSweepUpdatesInPlace(self):
        current_sample = {'A' : 0, 'B' : 1}
        results = {'A' : [], 'B' : []}
        returned = gibbs_sweep(self.equal, current_sample, numpy.random.default_rng(0),
                               results)
        self.assertIs(returned, current_sample)
        #B is resampled given the new value of A, not the old one
        self.assertEqual(current_sample, {'A' : 1, 'B' : 1})
        self.assertEqual(results, {'A' : [1], 'B' : [1]})

    def testSweepDrawsFromLocalPotential(self):
        network = MarkovNet([Factor(['A'], numpy.array([1.0, 3.0, 0.0, 2.0]))])
        rng = numpy.random.default_rng(21)
        other_rng = numpy.random.default_rng(21)
        for _ in range(10):
            current_sample = gibbs_sweep(network, {'A' : 0}, rng)
            self.assertEqual((current_sample['A'],), network.factors[0].sample(other_rng))
            self.assertNotEqual(current_sample['A'], 2)

    def testRandomAssignment(self):
        network = MarkovNet([Factor(['A', 'B'], numpy.ones((2, 5))),
                             Factor(['B', 'C'], numpy.ones((5, 3)))])
        rng = numpy.random.default_rng(8)
        for _ in range(20):
            assignment = random_assignment(network, rng)
            self.assertEqual(list(assignment), ['A', 'B', 'C'])
            assert 0 <= assignment['A'] < 2
            assert 0 <= assignment['B'] < 5
            assert 0 <= assignment['C'] < 3

    def testUniformPairIsUniform(self):
        samples = gibbs_sample(self.pair, 4000, 50, rng = 2013)
        counts = samples.groupby(['A', 'B']).size()
        self.assertEqual(len(counts), 4)
        (_, p_value) = scipy.stats.chisquare(counts.values)
        self.assertGreater(p_value, 0.001)
        for frequency in counts.values / len(samples):
            self.assertAlmostEqual(frequency, 0.25, delta = 0.03)

    def testConditionalMarginal(self):
        evidence = {'A' : 0}
        exact = Factor.joint(*(factor.condition(evidence) for factor in self.chain.factors))
        exact = Factor.marginalize(exact, ['B']).probabilities
        samples = gibbs_sample(self.chain, 5000, 100, evidence = evidence, rng = 9)
        frequency = (samples['C'] == 0).mean()
        self.assertAlmostEqual(frequency, exact[0], delta = 0.04)

    def testLogsRun(self):
        with self.assertLogs('markovnets.gibbs', level = 'INFO'):
            gibbs_sample(self.pair, 1, 0, rng = 0)

class TestGibbsSampler(unittest.TestCase):

    def setUp(self):
        self.network = MarkovNet([Factor(['A', 'B'], numpy.array([[1.0, 2.0], [3.0, 4.0]])),
                                  Factor(['B', 'C'], numpy.array([[5.0, 1.0], [1.0, 5.0]]))])

    def testDefaults(self):
        sampler = GibbsSampler()
        self.assertEqual(sampler.evidence, {})
        self.assertEqual(sampler.burn_in, 100)
        self.assertEqual(sampler.thinning, 0)
        self.assertIsNone(sampler.initial_sample)

    def testParametersAreCopied(self):
        evidence = {'B' : 1}
        sampler = GibbsSampler(evidence, burn_in = 5)
        evidence['A'] = 0
        sampler.evidence['C'] = 0
        self.assertEqual(sampler.evidence, {'B' : 1})

    def testSampleMatchesGibbsSample(self):
        sampler = GibbsSampler({'B' : 0}, burn_in = 5, thinning = 2)
        pandas.testing.assert_frame_equal(
            sampler.sample(self.network, 30, rng = 4),
            gibbs_sample(self.network, 30, 5, thinning = 2, evidence = {'B' : 0}, rng = 4))

if __name__ == "__main__":
    unittest.main()
