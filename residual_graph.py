from typing import Any, Hashable

from flow_arithmetic import FlowArithmetic
from weighted_digraph import WeightedDiGraph


def add_residual_edge(
    residual: WeightedDiGraph,
    u: Hashable,
    v: Hashable,
    capacity: Any,
    zero: Any,
) -> None:
    """
    Set forward residual arc u -> v to `capacity` and make sure the reverse
    arc v -> u exists.  An existing reverse arc keeps its capacity.
    """
    residual.add_edge(u, v, capacity)
    if not residual.has_edge(v, u):
        residual.add_edge(v, u, zero)


def build_residual_graph(graph: WeightedDiGraph, arithmetic: FlowArithmetic) -> WeightedDiGraph:
    """
    Build a fresh residual graph from `graph`; the input is left untouched.

    Every edge (u -> v, c) becomes a forward arc with capacity c paired with a
    reverse arc (v -> u).  The reverse arc starts at `arithmetic.zero` unless
    the input already has the antiparallel edge, whose capacity is kept no
    matter which of the two edges is visited first.
    """
    residual = WeightedDiGraph()

    # -- clone vertices
    for value in graph.vertices:
        residual.add_vertex(value)

    # -- clone edges, forward + reverse
    for u, v, capacity in graph.edges():
        add_residual_edge(residual, u, v, capacity, arithmetic.zero)

    return residual
