from typing import Any, Dict, Hashable


class Vertex:
    """
    One vertex of a weighted directed graph.
    `out_edges` maps neighbor id -> weight and is what the flow algorithms
    read; `in_edges` mirrors it from the other side for convenience.
    """

    __slots__ = (
        "value",       # vertex identity (any hashable)
        "out_edges",   # neighbor id -> edge weight
        "in_edges",    # predecessor id -> edge weight
    )

    def __init__(self, value: Hashable) -> None:
        self.value = value
        self.out_edges: Dict[Hashable, Any] = {}
        self.in_edges: Dict[Hashable, Any] = {}

    # ------------------------------------------------------------------ helpers

    def out_degree(self) -> int:
        return len(self.out_edges)

    # ------------------------------------------------------------------ dunder

    def __repr__(self) -> str:
        return f"Vertex({self.value!r}, out={self.out_edges!r})"
