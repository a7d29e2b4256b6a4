import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Tuple

from flow_arithmetic import INTEGER, FlowArithmetic
from get_augmenting_path import get_augmenting_path
from min_cut import MinCut, find_min_cut
from residual_graph import build_residual_graph
from weighted_digraph import WeightedDiGraph

logger = logging.getLogger(__name__)


class MaxIterationsExceeded(RuntimeError):
    """
    Raised when the augmentation loop hits `max_iterations` before the
    residual graph runs out of augmenting paths.
    """


@dataclass(frozen=True)
class Augmentation:
    """One augmentation step: the path used, its bottleneck, running total."""

    path: Tuple[Hashable, ...]
    bottleneck: Any
    total: Any


@dataclass
class MaxFlowResult:
    """
    Everything one Edmonds-Karp run produced.

    `residual` is the saturated residual graph owned by this result; `graph`
    is the caller's input, which the run never modifies.
    """

    flow_value: Any
    source: Hashable
    sink: Hashable
    graph: WeightedDiGraph
    residual: WeightedDiGraph
    arithmetic: FlowArithmetic
    augmentations: List[Augmentation] = field(default_factory=list)

    def edge_flows(self) -> Dict[Tuple[Hashable, Hashable], Any]:
        """
        Flow on every original edge, replayed from the augmentation steps.
        Flow pushed against an antiparallel edge cancels, so at most one edge
        of such a pair carries flow.
        """
        zero = self.arithmetic.zero
        net: Dict[Tuple[Hashable, Hashable], Any] = {}
        for step in self.augmentations:
            for a, b in zip(step.path, step.path[1:]):
                net[(a, b)] = self.arithmetic.add(net.get((a, b), zero), step.bottleneck)
                net[(b, a)] = self.arithmetic.subtract(net.get((b, a), zero), step.bottleneck)

        flows = {}
        for u, v, _ in self.graph.edges():
            flow = net.get((u, v), zero)
            flows[(u, v)] = flow if flow > zero else zero
        return flows

    def min_cut(self) -> MinCut:
        return find_min_cut(self.graph, self.residual, self.source, self.arithmetic)


class EdmondsKarpMaxFlow:
    """
    Edmonds-Karp maximum flow on a `WeightedDiGraph`.

    Repeatedly augments along a shortest (fewest-hop) path in the residual
    graph until the sink is unreachable, which bounds the number of
    augmentations by O(V * E).

    Attributes:
        arithmetic (FlowArithmetic): operations over the capacity type
        max_iterations (Optional[int]): stop with `MaxIterationsExceeded`
            after this many augmentations; None means no limit
    """

    def __init__(self, arithmetic: FlowArithmetic = INTEGER, max_iterations: Optional[int] = None) -> None:
        self.arithmetic = arithmetic
        self.max_iterations = max_iterations

    def compute_max_flow(self, graph: WeightedDiGraph, source: Hashable, sink: Hashable) -> Any:
        return self.run(graph, source, sink).flow_value

    def run(self, graph: WeightedDiGraph, source: Hashable, sink: Hashable) -> MaxFlowResult:
        """
        Compute the maximum flow from `source` to `sink`.

        Raises
        ------
        VertexNotFoundError
            `source` or `sink` is not in `graph`; raised before any residual
            graph is built.
        ValueError
            `source == sink`.
        MaxIterationsExceeded
            the iteration bound was reached.
        """
        graph.find_vertex(source)
        graph.find_vertex(sink)
        if source == sink:
            raise ValueError(f"source and sink must differ, got {source!r} for both")

        ops = self.arithmetic

        # ---------------- build residual network ----------------
        residual = build_residual_graph(graph, ops)

        # ---------------- augment along shortest paths ----------------
        max_flow = ops.zero
        augmentations: List[Augmentation] = []
        while True:
            path = get_augmenting_path(residual, source, sink, ops)
            if path is None:
                break

            if self.max_iterations is not None and len(augmentations) >= self.max_iterations:
                raise MaxIterationsExceeded(
                    f"no convergence after {self.max_iterations} augmentations"
                )

            bottleneck = self._bottleneck(residual, path)
            self._augment(residual, path, bottleneck)

            max_flow = ops.add(max_flow, bottleneck)
            augmentations.append(Augmentation(tuple(path), bottleneck, max_flow))
            logger.debug("augmented %s by %s, total %s", path, bottleneck, max_flow)

        logger.info(
            "max flow %r -> %r: %s after %d augmentations",
            source, sink, max_flow, len(augmentations),
        )
        return MaxFlowResult(max_flow, source, sink, graph, residual, ops, augmentations)

    def _bottleneck(self, residual: WeightedDiGraph, path: List[Hashable]) -> Any:
        bottleneck = self.arithmetic.infinity
        for a, b in zip(path, path[1:]):
            capacity = residual.vertices[a].out_edges[b]
            if capacity < bottleneck:
                bottleneck = capacity
        return bottleneck

    def _augment(self, residual: WeightedDiGraph, path: List[Hashable], bottleneck: Any) -> None:
        ops = self.arithmetic
        for a, b in zip(path, path[1:]):
            forward = residual.vertices[a].out_edges
            backward = residual.vertices[b].out_edges
            # subtract from forward arcs, add to backward arcs
            residual.add_edge(a, b, ops.subtract(forward[b], bottleneck))
            residual.add_edge(b, a, ops.add(backward[a], bottleneck))


def compute_max_flow(
    graph: WeightedDiGraph,
    source: Hashable,
    sink: Hashable,
    arithmetic: FlowArithmetic = INTEGER,
) -> Any:
    """
    Maximum flow value from `source` to `sink` in `graph`.

    Parameters
    ----------
    graph : WeightedDiGraph
        Edge weights are capacities.  Not modified.
    source, sink : hashable
        Vertex ids; both must be in `graph`.
    arithmetic : FlowArithmetic
        Operations matching the capacity type (default: integers).

    Returns
    -------
    The total flow, `arithmetic.zero` if the sink is unreachable.
    """
    return EdmondsKarpMaxFlow(arithmetic).compute_max_flow(graph, source, sink)


def edmonds_karp_steps(
    graph: WeightedDiGraph,
    source: Hashable,
    sink: Hashable,
    arithmetic: FlowArithmetic = INTEGER,
) -> Tuple[List[Augmentation], Any]:
    """
    Same as `compute_max_flow` but also returns every augmentation step.

    Returns
    -------
    steps, max_flow
    """
    result = EdmondsKarpMaxFlow(arithmetic).run(graph, source, sink)
    return result.augmentations, result.flow_value
