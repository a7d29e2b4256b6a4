from typing import Dict, Hashable, Tuple

import numpy as np
from ortools.graph.python import max_flow

from weighted_digraph import WeightedDiGraph


def ortools_max_flow(
    graph: WeightedDiGraph,
    source: Hashable,
    sink: Hashable,
) -> Tuple[int, Dict[Tuple[Hashable, Hashable], int]]:
    """
    Maximum flow with OR-Tools' SimpleMaxFlow, for cross-checking.
    Capacities must be non-negative integers; fractional ones raise ValueError.

    Returns (flow_value, flows) where flows[(u, v)] is the flow on edge u -> v.
    """
    edges = list(graph.edges())
    for u, v, c in edges:
        if int(c) != c:
            raise ValueError(f"OR-Tools needs integer capacities, edge ({u!r}, {v!r}) has {c}")

    # nothing leaves the source or reaches the sink
    if not graph.find_vertex(source).out_edges or not graph.find_vertex(sink).in_edges:
        return 0, {(u, v): 0 for u, v, _ in edges}

    # OR-Tools wants dense integer node ids
    index = {value: i for i, value in enumerate(graph.vertices)}

    # Instantiate a SimpleMaxFlow solver.
    smf = max_flow.SimpleMaxFlow()

    # Define three parallel arrays: start_nodes, end_nodes, and the capacities.
    start_nodes = np.array([index[u] for u, _, _ in edges])
    end_nodes = np.array([index[v] for _, v, _ in edges])
    capacities = np.array([int(c) for _, _, c in edges])

    # Add arcs in bulk.
    all_arcs = smf.add_arcs_with_capacity(start_nodes, end_nodes, capacities)

    status = smf.solve(index[source], index[sink])

    if status != smf.OPTIMAL:
        raise RuntimeError(f"There was an issue with the max flow input. Status: {status}")

    solution_flows = smf.flows(all_arcs)
    flows = {(u, v): int(flow) for (u, v, _), flow in zip(edges, solution_flows)}

    return int(smf.optimal_flow()), flows
