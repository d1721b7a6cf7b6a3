'''
Created on Mar 2, 2013

@author: Justin
'''

import unittest

from markovnets import UndirectedGraph

class Test(unittest.TestCase):

    def setUp(self):
        #0 - 1 - 2   3 - 4   5
        self.graph = UndirectedGraph(6)
        self.graph.add_edges([(0, 1), (1, 2), (3, 4)])

    def testNodes(self):
        self.assertEqual(self.graph.nodes(), [0, 1, 2, 3, 4, 5])
        self.assertEqual(self.graph.order(), 6)
        self.assertEqual(len(self.graph), 6)
        assert 5 in self.graph
        assert 6 not in self.graph

    def testEdgesAreUndirected(self):
        assert self.graph.has_edge(0, 1)
        assert self.graph.has_edge(1, 0)
        assert not self.graph.has_edge(0, 2)
        assert not self.graph.has_edge(0, 9)
        self.assertEqual(list(self.graph.edges()), [(0, 1), (1, 2), (3, 4)])

    def testAddEdgeIsIdempotent(self):
        self.graph.add_edge(1, 0)
        self.graph.add_edge(0, 1)
        self.assertEqual(list(self.graph.edges()), [(0, 1), (1, 2), (3, 4)])
        self.assertEqual(self.graph.node_order(1), 2)

    def testSelfLoopsAreIgnored(self):
        self.graph.add_edge(5, 5)
        self.assertEqual(self.graph.neighbors(5), [])

    def testAddEdgeAddsNodes(self):
        self.graph.add_edge(5, 7)
        self.assertEqual(self.graph.nodes(), [0, 1, 2, 3, 4, 5, 7])
        self.assertEqual(self.graph.neighbors(7), [5])

    def testNeighbors(self):
        self.assertEqual(self.graph.neighbors(1), [0, 2])
        self.assertEqual(self.graph.neighbors(5), [])
        with self.assertRaises(KeyError):
            self.graph.neighbors(9)

    def testDelNodeEdges(self):
        self.graph.del_node_edges(1)
        assert 1 in self.graph
        self.assertEqual(self.graph.neighbors(1), [])
        self.assertEqual(self.graph.neighbors(0), [])
        self.assertEqual(list(self.graph.edges()), [(3, 4)])

    def testDelEdge(self):
        self.graph.del_edge(2, 1)
        assert not self.graph.has_edge(1, 2)
        assert self.graph.has_edge(0, 1)

    def testCopyIsIndependent(self):
        copied = self.graph.copy()
        copied.del_node_edges(1)
        copied.add_edge(2, 5)
        assert self.graph.has_edge(0, 1)
        assert not self.graph.has_edge(2, 5)
        self.assertEqual(copied.nodes(), self.graph.nodes())

    def testConnectedComponents(self):
        self.assertEqual(self.graph.connected_components(),
                         [{0, 1, 2}, {3, 4}, {5}])
        self.graph.del_node_edges(1)
        self.assertEqual(self.graph.connected_components(),
                         [{0}, {1}, {2}, {3, 4}, {5}])

    def testEmptyGraph(self):
        graph = UndirectedGraph()
        self.assertEqual(graph.nodes(), [])
        self.assertEqual(graph.connected_components(), [])

if __name__ == "__main__":
    unittest.main()
