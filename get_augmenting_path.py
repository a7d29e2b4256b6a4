from collections import deque
from typing import Dict, Hashable, List, Optional

from flow_arithmetic import FlowArithmetic
from weighted_digraph import WeightedDiGraph


def get_augmenting_path(
    residual: WeightedDiGraph,
    source: Hashable,
    sink: Hashable,
    arithmetic: FlowArithmetic,
) -> Optional[List[Hashable]]:
    """
    BFS over residual arcs with capacity > zero.
    Returns the fewest-hop path [source, ..., sink], or None if the sink is
    not reachable.  Among equally short paths the first one discovered (in
    outgoing-edge order) wins.
    """
    # parent lookup to trace the path back from the sink
    parent: Dict[Hashable, Optional[Hashable]] = {v: None for v in residual.vertices}

    visited = {source}
    queue = deque([source])

    found = False

    while queue:
        current = queue.popleft()

        if current == sink:
            found = True
            break

        for v, capacity in residual.vertices[current].out_edges.items():
            # only arcs with capacity left
            if v in visited or not capacity > arithmetic.zero:
                continue
            parent[v] = current
            visited.add(v)
            queue.append(v)

    # Sink not reachable
    if not found:
        return None

    # reconstruct the path: sink -> source onto a stack, then pop
    stack = [sink]
    v = sink
    while v != source:
        v = parent[v]
        stack.append(v)

    path = []
    while stack:
        path.append(stack.pop())

    return path
