from typing import Any, Dict, Hashable, Iterator, Tuple

import networkx as nx

from vertex import Vertex


class VertexNotFoundError(KeyError):
    """
    Raised when an operation references a vertex id that is not in the graph.
    """

    def __init__(self, vertex: Hashable) -> None:
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self) -> str:
        return f"vertex {self.vertex!r} not found in graph"


class DuplicateVertexError(ValueError):
    """
    Raised by `WeightedDiGraph.add_vertex` when the id already exists.
    """

    def __init__(self, vertex: Hashable) -> None:
        super().__init__(f"vertex {vertex!r} already exists in graph")
        self.vertex = vertex


class WeightedDiGraph:
    """
    Adjacency-list weighted directed graph keyed by vertex identity.

    Each vertex owns a mapping from neighbor id to edge weight.  At most one
    edge exists per ordered pair (u, v): adding it again overwrites the weight.

    Attributes:
        vertices (Dict[Hashable, Vertex]): vertex id -> vertex record
    """

    def __init__(self) -> None:
        self.vertices: Dict[Hashable, Vertex] = {}

    def add_vertex(self, value: Hashable) -> Vertex:
        if value in self.vertices:
            raise DuplicateVertexError(value)
        vertex = Vertex(value)
        self.vertices[value] = vertex
        return vertex

    def add_edge(self, source: Hashable, target: Hashable, weight: Any) -> None:
        """
        Insert or overwrite the directed edge source -> target.

        Raises:
            VertexNotFoundError: if either endpoint is absent
        """
        u = self.find_vertex(source)
        v = self.find_vertex(target)
        u.out_edges[target] = weight
        v.in_edges[source] = weight

    def find_vertex(self, value: Hashable) -> Vertex:
        try:
            return self.vertices[value]
        except KeyError:
            raise VertexNotFoundError(value) from None

    def has_vertex(self, value: Hashable) -> bool:
        return value in self.vertices

    def has_edge(self, source: Hashable, target: Hashable) -> bool:
        return source in self.vertices and target in self.vertices[source].out_edges

    def get_weight(self, source: Hashable, target: Hashable) -> Any:
        """
        Weight of edge source -> target.

        Raises:
            VertexNotFoundError: if `source` is absent
            KeyError: if the vertex exists but the edge does not
        """
        return self.find_vertex(source).out_edges[target]

    def edges(self) -> Iterator[Tuple[Hashable, Hashable, Any]]:
        for u, vertex in self.vertices.items():
            for v, weight in vertex.out_edges.items():
                yield u, v, weight

    @property
    def edge_count(self) -> int:
        return sum(vertex.out_degree() for vertex in self.vertices.values())

    def copy(self) -> "WeightedDiGraph":
        """Return an independent copy with the same vertices and edges."""
        clone = WeightedDiGraph()
        for value in self.vertices:
            clone.add_vertex(value)
        for u, v, weight in self.edges():
            clone.add_edge(u, v, weight)
        return clone

    # ------------------------------------------------------------------ networkx

    @classmethod
    def from_networkx(cls, G: nx.DiGraph, capacity: str = "capacity") -> "WeightedDiGraph":
        """
        Build a graph from an `nx.DiGraph`, reading each edge's weight from
        the `capacity` attribute.  Edges without the attribute are rejected.
        """
        graph = cls()
        for node in G.nodes():
            graph.add_vertex(node)
        for u, v, data in G.edges(data=True):
            if capacity not in data:
                raise ValueError(f"edge ({u!r}, {v!r}) has no '{capacity}' attribute")
            graph.add_edge(u, v, data[capacity])
        return graph

    def to_networkx(self, capacity: str = "capacity") -> nx.DiGraph:
        G = nx.DiGraph()
        G.add_nodes_from(self.vertices)
        for u, v, weight in self.edges():
            G.add_edge(u, v, **{capacity: weight})
        return G

    # ------------------------------------------------------------------ dunder

    def __contains__(self, value: Hashable) -> bool:
        return value in self.vertices

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeightedDiGraph):
            return NotImplemented
        if self.vertices.keys() != other.vertices.keys():
            return False
        return all(
            vertex.out_edges == other.vertices[value].out_edges
            for value, vertex in self.vertices.items()
        )

    def __repr__(self) -> str:
        return f"WeightedDiGraph(vertices={len(self)}, edges={self.edge_count})"
