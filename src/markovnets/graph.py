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
Undirected graphs over integer vertices.
'''

import collections

class UndirectedGraph:
    """
    Encapsulates the adjacency list representation of an undirected graph,
    although as a dict of sets: {u : {v, ...}, ...}.

    Every edge is stored in both directions, so u in self._adjacency[v]
    if and only if v in self._adjacency[u].

    Vertices are usually the indices 0..n-1 of a MarkovNet, but any
    hashable, orderable vertex will do.
    """
    def __init__(self, order = 0):
        """
        Return an UndirectedGraph with the vertices 0..order-1 and no edges.
        """
        self._adjacency = {vertex : set() for vertex in range(order)}

    def __contains__(self, vertex):
        return vertex in self._adjacency
    def __len__(self):
        return len(self._adjacency)
    def __iter__(self):
        return iter(self.nodes())
    def __repr__(self):
        return "UndirectedGraph(nodes = {}, edges = {})".format(
            self.nodes(), list(self.edges()))

    def _edge_gen(self):
        for (head, tails) in sorted(self._adjacency.items()):
            for tail in sorted(tails):
                if head < tail:
                    yield (head, tail)

    def add_node(self, vertex):
        self._adjacency.setdefault(vertex, set())
    def add_nodes(self, vertices):
        for vertex in vertices:
            self.add_node(vertex)
    def add_edge(self, u, v):
        """
        Connect u and v, adding either vertex if it is new.

        Adding an existing edge, or a self loop, does nothing.
        """
        if u == v:
            return
        self.add_node(u)
        self.add_node(v)
        self._adjacency[u].add(v)
        self._adjacency[v].add(u)
    def add_edges(self, edges):
        for (u, v) in edges:
            self.add_edge(u, v)
    def del_edge(self, u, v):
        self._adjacency[u].discard(v)
        self._adjacency[v].discard(u)
    def del_node_edges(self, vertex):
        """
        Remove every edge incident to the vertex; the vertex itself stays.
        """
        for neighbor in self._adjacency[vertex]:
            self._adjacency[neighbor].discard(vertex)
        self._adjacency[vertex].clear()

    def nodes(self):
        return sorted(self._adjacency)
    def edges(self):
        return self._edge_gen()
    def order(self):
        return len(self._adjacency)
    def node_order(self, vertex):
        return len(self._adjacency[vertex])
    def neighbors(self, vertex):
        return sorted(self._adjacency[vertex])
    def has_edge(self, u, v):
        return u in self._adjacency and v in self._adjacency[u]
    def copy(self):
        graph = UndirectedGraph()
        graph._adjacency = {vertex : set(tails)
                            for (vertex, tails) in self._adjacency.items()}
        return graph

    def connected_components(self):
        """
        Return the connected components as a list of vertex sets.

        Components are found by breadth first search, seeded from the
        smallest vertex not yet visited, so they come out ordered by
        their smallest vertex.
        """
        visited = set()
        components = []
        for root in self.nodes():
            if root in visited:
                continue
            component = {root}
            frontier = collections.deque([root])
            while frontier:
                node = frontier.popleft()
                for neighbor in self._adjacency[node]:
                    if neighbor not in component:
                        component.add(neighbor)
                        frontier.append(neighbor)
            visited |= component
            components.append(component)
        return components
