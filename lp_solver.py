from typing import Any, Dict, Hashable, List, Optional

import pandas as pd
import pulp as pl
from pulp import LpMaximize, LpProblem, LpStatus, LpVariable, lpSum

from weighted_digraph import WeightedDiGraph


class MaxFlowLPSolver:
    """
    Maximum flow as a linear program, used to cross-check Edmonds-Karp.

        maximize    Σ f(s, v) - Σ f(v, s)
        subject to  0 <= f(u, v) <= c(u, v)               for every edge
                    Σ f(u, v) == Σ f(v, w)                for every v != s, t

    Attributes:
        graph (WeightedDiGraph): the input graph, capacities as edge weights
        problem (LpProblem): The linear programming problem
        flow_vars (Dict[tuple, LpVariable]): Flow variables for each edge
    """

    def __init__(self, graph: WeightedDiGraph, source: Hashable, sink: Hashable) -> None:
        graph.find_vertex(source)
        graph.find_vertex(sink)
        self.graph = graph
        self.source = source
        self.sink = sink
        self.problem = LpProblem("Max_Flow", LpMaximize)
        self.flow_vars: Dict[tuple, LpVariable] = {}
        self._solution: Optional[Dict[str, Any]] = None
        self._built = False

    def build_model(self) -> None:
        self._add_flow_vars()
        self._add_objective()
        self._add_flow_conservation_constraints()
        self._built = True

    def _add_flow_vars(self) -> None:
        """
        One bounded variable per edge.  Names use the edge position because
        vertex ids need not be valid LP identifiers.
        """
        for i, (u, v, capacity) in enumerate(self.graph.edges()):
            self.flow_vars[(u, v)] = LpVariable(f"f_{i}", lowBound=0, upBound=float(capacity))

    def _add_objective(self) -> None:
        """
        Net flow leaving the source.
        """
        self.problem += (
            lpSum(var for (u, _), var in self.flow_vars.items() if u == self.source)
            - lpSum(var for (_, v), var in self.flow_vars.items() if v == self.source)
        )

    def _add_flow_conservation_constraints(self) -> None:
        for node in self.graph.vertices:
            if node in (self.source, self.sink):
                continue
            inflow = lpSum(var for (_, v), var in self.flow_vars.items() if v == node)
            outflow = lpSum(var for (u, _), var in self.flow_vars.items() if u == node)
            self.problem += (inflow - outflow == 0)

    def solve(self) -> Dict[str, Any]:
        """
        Solve the optimization problem.

        Returns:
            Dict containing:
                - status: Solution status
                - objective_value: Optimal objective value
                - flows: Dictionary of edge flows
        Raises:
            RuntimeError: If model hasn't been built
        """
        if not self._built:
            raise RuntimeError("Model must be built before solving")

        if not self.flow_vars:
            # no edges, no flow
            self._solution = {'status': 'Optimal', 'objective_value': 0.0, 'flows': {}}
            return self._solution

        status = self.problem.solve(pl.PULP_CBC_CMD(msg=False))

        if status != pl.LpStatusOptimal:
            self._solution = {
                'status': LpStatus[status],
                'objective_value': None,
                'flows': None
            }
            return self._solution

        self._solution = {
            'status': 'Optimal',
            'objective_value': pl.value(self.problem.objective) or 0.0,
            'flows': {
                edge: var.value()
                for edge, var in self.flow_vars.items()
            }
        }
        return self._solution

    def get_result_df(self) -> pd.DataFrame:
        """
        Generate a DataFrame with one row per edge carrying flow.

        Columns: from, to, flow, capacity
        """
        if not self._solution or self._solution['status'] != 'Optimal':
            raise RuntimeError("No optimal solution available")

        results: List[List] = []
        for (u, v), flow in self._solution['flows'].items():
            if flow and flow > 0:
                results.append([u, v, flow, self.graph.get_weight(u, v)])

        return pd.DataFrame(results, columns=["from", "to", "flow", "capacity"])
