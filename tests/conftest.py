import random

import pytest

from weighted_digraph import WeightedDiGraph


def make_graph(edges, vertices=()):
    """Graph from (u, v, capacity) triples; extra isolated `vertices` allowed."""
    graph = WeightedDiGraph()
    for value in vertices:
        if not graph.has_vertex(value):
            graph.add_vertex(value)
    for u, v, capacity in edges:
        for node in (u, v):
            if not graph.has_vertex(node):
                graph.add_vertex(node)
        graph.add_edge(u, v, capacity)
    return graph


def random_graph(seed, n=6, p=0.4, max_capacity=10):
    """
    Random graph on 0..n-1, source 0 and sink n-1.  Antiparallel edges and
    zero capacities may appear.
    """
    rng = random.Random(seed)
    graph = make_graph([], vertices=range(n))
    for u in range(n):
        for v in range(n):
            if u != v and rng.random() < p:
                graph.add_edge(u, v, rng.randint(0, max_capacity))
    return graph


@pytest.fixture
def scenario_a():
    # two disjoint S-T routes of 10 plus a useless cross edge
    return make_graph([
        ("S", "A", 10),
        ("S", "B", 10),
        ("A", "T", 10),
        ("B", "T", 10),
        ("A", "B", 1),
    ])


@pytest.fixture
def single_edge():
    return make_graph([("S", "T", 5)])


@pytest.fixture
def clrs_graph():
    # Cormen et al., figure 26.1; max flow 23
    return make_graph([
        ("s", "v1", 16),
        ("s", "v2", 13),
        ("v1", "v3", 12),
        ("v2", "v1", 4),
        ("v2", "v4", 14),
        ("v3", "v2", 9),
        ("v3", "t", 20),
        ("v4", "v3", 7),
        ("v4", "t", 4),
    ])


@pytest.fixture
def antiparallel_graph():
    # a <-> b both carry capacity; max flow s -> t is 5
    return make_graph([
        ("s", "a", 4),
        ("s", "b", 3),
        ("a", "b", 2),
        ("b", "a", 2),
        ("a", "t", 2),
        ("b", "t", 3),
    ])
