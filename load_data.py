import logging

import pandas as pd

from flow_arithmetic import INTEGER, FlowArithmetic
from weighted_digraph import WeightedDiGraph

logger = logging.getLogger(__name__)


class Edges:
    """
    Edge list read from a CSV file: one row per directed edge.

    Every column is read as text: vertex ids then compare equal to ids given
    on the command line, and capacities are parsed by the chosen arithmetic.
    """

    def __init__(self, file_path: str, from_colname: str, to_colname: str, capacity_colname: str):
        self.from_colname = from_colname
        self.to_colname = to_colname
        self.capacity_colname = capacity_colname
        self.edges_df = pd.read_csv(file_path, dtype=str).dropna()

        required_columns = [from_colname, to_colname, capacity_colname]
        missing = [col for col in required_columns if col not in self.edges_df.columns]
        if missing:
            raise ValueError(f"CSV must contain columns: {required_columns}, missing {missing}")

    def find_duplicates(self) -> pd.DataFrame:
        """
        Find all rows sharing the same (from, to) pair.

        Returns:
            DataFrame containing only the duplicate rows, sorted by from and to.
            If no duplicates are found, returns an empty DataFrame.
        """
        duplicates = self.edges_df[self.edges_df.duplicated(
            subset=[self.from_colname, self.to_colname],
            keep=False
        )]

        if not duplicates.empty:
            duplicates = duplicates.sort_values([self.from_colname, self.to_colname])

        return duplicates


def construct_graph(edges: Edges, arithmetic: FlowArithmetic = INTEGER) -> WeightedDiGraph:
    """
    Build a `WeightedDiGraph` from an edge list.  Capacities are parsed with
    `arithmetic.parse`; for a repeated (from, to) pair the last row wins.
    """
    dups = edges.find_duplicates()
    if not dups.empty:
        logger.warning("%d rows share a (from, to) pair, keeping the last of each", len(dups))

    graph = WeightedDiGraph()
    for _, row in edges.edges_df.iterrows():
        u, v = row[edges.from_colname], row[edges.to_colname]
        for node in (u, v):
            if not graph.has_vertex(node):
                graph.add_vertex(node)
        graph.add_edge(u, v, arithmetic.parse(str(row[edges.capacity_colname])))

    return graph
