import argparse
import logging
import os
import sys
from datetime import datetime

import pandas as pd

from edmonds_karp import EdmondsKarpMaxFlow
from flow_arithmetic import ARITHMETICS, get_arithmetic
from load_data import Edges, construct_graph
from weighted_digraph import VertexNotFoundError

output_dir = "results/"

SOLVERS = ["edmonds-karp", "lp", "ortools"]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Maximum s-t flow of a directed network read from CSV")
    parser.add_argument("--edges", required=True, help="CSV file, one row per directed edge")
    parser.add_argument("--source", required=True)
    parser.add_argument("--sink", required=True)
    parser.add_argument("--from-col", default="u")
    parser.add_argument("--to-col", default="v")
    parser.add_argument("--capacity-col", default="capacity")
    parser.add_argument("--arithmetic", default="int", choices=sorted(ARITHMETICS))
    parser.add_argument("--solver", default="edmonds-karp", choices=SOLVERS)
    parser.add_argument("--output-dir", default=output_dir)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def solve(graph, source, sink, solver, arithmetic):
    """
    Returns (flow_value, result_df) for the chosen solver.
    """
    if solver == "lp":
        from lp_solver import MaxFlowLPSolver

        lp = MaxFlowLPSolver(graph, source, sink)
        lp.build_model()
        result = lp.solve()
        if result['status'] != 'Optimal':
            raise RuntimeError(f"LP solver status: {result['status']}")
        return result['objective_value'], lp.get_result_df()

    if solver == "ortools":
        from ortools_solver import ortools_max_flow

        flow_value, flows = ortools_max_flow(graph, source, sink)
    else:
        result = EdmondsKarpMaxFlow(arithmetic).run(graph, source, sink)
        flow_value, flows = result.flow_value, result.edge_flows()

        cut = result.min_cut()
        print(f"Min cut capacity: {cut.capacity}")
        for u, v, capacity in cut.cut_edges:
            print(f"  {u} -> {v}  {capacity}")

    rows = [
        [u, v, flow, graph.get_weight(u, v)]
        for (u, v), flow in flows.items()
        if flow > 0
    ]
    return flow_value, pd.DataFrame(rows, columns=["from", "to", "flow", "capacity"])


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        arithmetic = get_arithmetic(args.arithmetic)
        edges = Edges(
            file_path=args.edges,
            from_colname=args.from_col,
            to_colname=args.to_col,
            capacity_colname=args.capacity_col,
        )
        G = construct_graph(edges, arithmetic)

        print("solving...")
        flow_value, result_df = solve(G, args.source, args.sink, args.solver, arithmetic)
    except (VertexNotFoundError, ValueError, RuntimeError) as e:
        print(f"Error: {e}")
        print("Please check the input data and the source/sink ids.")
        return 1

    print(f"Max flow: {flow_value}")

    os.makedirs(args.output_dir, exist_ok=True)
    csv_filename = f'max_flow_results_{datetime.now().strftime("%Y%m%d_%H%M%S")}.csv'
    result_df.to_csv(os.path.join(args.output_dir, csv_filename), index=False)
    print(f"Results saved to {csv_filename}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
