from dataclasses import dataclass
from itertools import product
from typing import Any, Hashable, List, Set, Tuple

from flow_arithmetic import FlowArithmetic
from weighted_digraph import WeightedDiGraph


@dataclass
class MinCut:
    """
    An s-t cut of the original graph.

    Attributes:
        source_side: vertices on the source side of the cut
        sink_side: the remaining vertices
        cut_edges: (u, v, capacity) for every positive-capacity original edge
                   going from the source side to the sink side
        capacity: sum of the capacities of `cut_edges`
    """

    source_side: Set[Hashable]
    sink_side: Set[Hashable]
    cut_edges: List[Tuple[Hashable, Hashable, Any]]
    capacity: Any


def reachable_from(residual: WeightedDiGraph, source: Hashable, arithmetic: FlowArithmetic) -> Set[Hashable]:
    """
    Vertices reachable from `source` over residual arcs with capacity left.
    """
    visited = set()
    stack = [source]
    while stack:
        u = stack.pop()
        if u in visited:
            continue
        visited.add(u)
        for v, capacity in residual.vertices[u].out_edges.items():
            if v not in visited and capacity > arithmetic.zero:
                stack.append(v)
    return visited


def cut_capacity(
    graph: WeightedDiGraph,
    source_side: Set[Hashable],
    arithmetic: FlowArithmetic,
) -> Tuple[List[Tuple[Hashable, Hashable, Any]], Any]:
    """
    Edges leaving `source_side` and their total capacity.
    """
    cut_edges = [
        (u, v, capacity)
        for u, v, capacity in graph.edges()
        if u in source_side and v not in source_side and capacity > arithmetic.zero
    ]
    return cut_edges, arithmetic.sum(c for _, _, c in cut_edges)


def find_min_cut(
    graph: WeightedDiGraph,
    residual: WeightedDiGraph,
    source: Hashable,
    arithmetic: FlowArithmetic,
) -> MinCut:
    """
    Read the minimum cut off a residual graph on which no augmenting path is
    left.  The source side is everything still reachable from `source`.
    """
    source_side = reachable_from(residual, source, arithmetic)
    sink_side = set(graph.vertices) - source_side
    cut_edges, capacity = cut_capacity(graph, source_side, arithmetic)
    return MinCut(source_side, sink_side, cut_edges, capacity)


def brute_force_min_cut_value(
    graph: WeightedDiGraph,
    source: Hashable,
    sink: Hashable,
    arithmetic: FlowArithmetic,
) -> Any:
    """
    Minimum s-t cut capacity by trying every partition of the other vertices.
    Exponential in the number of vertices, only meant for small graphs.
    """
    graph.find_vertex(source)
    graph.find_vertex(sink)
    others = [v for v in graph.vertices if v not in (source, sink)]

    best = None
    for mask in product((False, True), repeat=len(others)):
        source_side = {source}
        source_side.update(v for v, on_source_side in zip(others, mask) if on_source_side)
        _, capacity = cut_capacity(graph, source_side, arithmetic)
        if best is None or capacity < best:
            best = capacity
    return best
