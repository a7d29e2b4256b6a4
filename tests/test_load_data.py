from fractions import Fraction

import pytest

from edmonds_karp import compute_max_flow
from flow_arithmetic import FRACTION, INTEGER
from load_data import Edges, construct_graph

CSV = """u,v,capacity
S,A,10
S,B,10
A,T,10
B,T,10
A,B,1
"""


@pytest.fixture
def edges_csv(tmp_path):
    path = tmp_path / "edges.csv"
    path.write_text(CSV)
    return path


def test_construct_graph(edges_csv):
    edges = Edges(str(edges_csv), "u", "v", "capacity")
    graph = construct_graph(edges, INTEGER)

    assert set(graph) == {"S", "A", "B", "T"}
    assert graph.get_weight("A", "B") == 1
    assert compute_max_flow(graph, "S", "T") == 20


def test_numeric_ids_are_text(tmp_path):
    path = tmp_path / "edges.csv"
    path.write_text("from,to,cap\n0,1,4\n1,2,3\n")
    graph = construct_graph(Edges(str(path), "from", "to", "cap"))

    assert set(graph) == {"0", "1", "2"}
    assert compute_max_flow(graph, "0", "2") == 3


def test_fraction_capacities(tmp_path):
    path = tmp_path / "edges.csv"
    path.write_text("u,v,capacity\ns,t,1/3\ns,a,1/2\na,t,1/4\n")
    graph = construct_graph(Edges(str(path), "u", "v", "capacity"), FRACTION)

    assert compute_max_flow(graph, "s", "t", FRACTION) == Fraction(7, 12)


def test_missing_column(edges_csv):
    with pytest.raises(ValueError, match="missing"):
        Edges(str(edges_csv), "u", "v", "cap")


def test_duplicates_last_row_wins(tmp_path):
    path = tmp_path / "edges.csv"
    path.write_text("u,v,capacity\ns,t,1\ns,t,7\n")
    edges = Edges(str(path), "u", "v", "capacity")

    assert len(edges.find_duplicates()) == 2
    assert construct_graph(edges).get_weight("s", "t") == 7


def test_incomplete_rows_dropped(tmp_path):
    path = tmp_path / "edges.csv"
    path.write_text("u,v,capacity\ns,t,4\ns,a,\n")
    edges = Edges(str(path), "u", "v", "capacity")

    assert edges.find_duplicates().empty
    assert set(construct_graph(edges)) == {"s", "t"}

