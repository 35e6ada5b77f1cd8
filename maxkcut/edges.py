"""Weighted undirected edges of a graph with vertices numbered from 1."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Sequence

from .util import ExceptionType, MKCError


@dataclass
class Edge:
    """An undirected weighted edge between two vertices."""

    vertex_i: int
    vertex_j: int
    weight: float

    def add_weight(self, weight: float) -> None:
        self.weight += weight

    def __str__(self) -> str:
        return f"({self.vertex_i}, {self.vertex_j}) weight = {self.weight}"


class Edges:
    """Edge set of a graph with a constant-time lookup by vertex pair."""

    def __init__(self, number_vertices: int) -> None:
        self._edges: list[Edge] = []
        self._number_vertices = number_vertices
        self._index: list[int | None] = []
        self._maximal_cliques: list[list[int]] = []
        self._create_index()

    def _create_index(self) -> None:
        self._index = [None] * self.complete_edge_count()

    @property
    def number_vertices(self) -> int:
        return self._number_vertices

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def maximal_cliques(self) -> list[list[int]]:
        return [list(clique) for clique in self._maximal_cliques]

    def set_number_vertices(self, number: int) -> None:
        """Change the vertex count and reset the pair index."""
        self._number_vertices = number
        self._create_index()

    def _validate(self, vi: int, vj: int) -> None:
        n = self._number_vertices
        if vi > n or vj > n or vi <= 0 or vj <= 0:
            raise MKCError(
                "Vertices larger than dimension or not possible. "
                f"Got ({vi},{vj})",
                ExceptionType.VERTEX_ZERO_OR_NEGATIVE,
            )

    def add_edge(self, vi: int, vj: int, weight: float, sum_if_repeated: bool = False) -> bool:
        """Add an edge; return False if it exists and weights are not summed."""
        if vi > self._number_vertices or vj > self._number_vertices:
            raise MKCError(
                f"Vertices larger than dimension in add_edge(). Got ({vi},{vj})",
                ExceptionType.STOP_EXECUTION,
            )
        self._validate(vi, vj)
        if vi == vj:
            raise MKCError(f"Loop edges are not allowed. Got ({vi},{vj})", ExceptionType.STOP_EXECUTION)

        pos = self.position(vi, vj)
        existing = self._index[pos]
        if existing is None:
            self._edges.append(Edge(vi, vj, weight))
            self._index[pos] = len(self._edges) - 1
            if self.is_complete():
                self._maximal_cliques = [list(range(1, self._number_vertices + 1))]
        elif sum_if_repeated:
            self._edges[existing].add_weight(weight)
        else:
            return False
        return True

    def complete_edge_count(self, dim: int | None = None) -> int:
        """Number of edges of a complete graph on ``dim`` vertices (default: this graph)."""
        if dim is None:
            dim = self._number_vertices
        return int(((dim - 1) * dim) / 2.0)

    def degree(self, vertex: int) -> int:
        return len(self.adjacent_vertices(vertex))

    def vertex_min_degree(self, degrees: Sequence[int], allowed: Sequence[bool]) -> int:
        """Return the allowed vertex of smallest degree, or -1; lists are indexed by vertex."""
        min_degree = self._number_vertices + 1
        selected = -1
        for v in range(1, self._number_vertices + 1):
            if allowed[v] and degrees[v] < min_degree:
                min_degree = degrees[v]
                selected = v
        return selected

    def is_complete(self) -> bool:
        return self.complete_edge_count() == len(self._edges)

    def make_chordal(self) -> None:
        """Add zero-weight edges by a min-degree heuristic and record the cliques found."""
        if self.is_complete():
            return

        n = self._number_vertices
        degrees = [0] + [self.degree(v) for v in range(1, n + 1)]
        allowed = [True] * (n + 1)
        min_size_degree = 2
        self._maximal_cliques = []

        for _ in range(n - 2):
            vertex = self.vertex_min_degree(degrees, allowed)
            allowed[vertex] = False
            if degrees[vertex] >= min_size_degree and not self.in_maximal_clique(vertex):
                clique = self.adjacent_vertices(vertex)
                clique.append(vertex)
                self._maximal_cliques.append(clique)
                for a, v_i in enumerate(clique):
                    for v_j in clique[a + 1:]:
                        self.add_edge(v_i, v_j, 0.0)

    def make_complete(self) -> None:
        """Add zero-weight edges until every pair of vertices is joined."""
        n = self._number_vertices
        for v_i in range(1, n):
            for v_j in range(v_i + 1, n + 1):
                self.add_edge(v_i, v_j, 0.0)

    def adjacent_vertices(self, vertex: int) -> list[int]:
        return [v for v in range(1, self._number_vertices + 1) if self.edge_between(vertex, v) is not None]

    def in_maximal_clique(self, vertex: int) -> bool:
        return any(vertex in clique for clique in self._maximal_cliques)

    def edge_between(self, vi: int, vj: int) -> Edge | None:
        """Return the edge joining ``vi`` and ``vj``, or None."""
        self._validate(vi, vj)
        if vi == vj:
            return None
        index = self._index[self.position(vi, vj)]
        return None if index is None else self.edge_at(index)

    def edge_at(self, index: int) -> Edge | None:
        if 0 <= index < len(self._edges):
            return self._edges[index]
        return None

    def has_edge(self, vi: int, vj: int) -> bool:
        return self.edge_between(vi, vj) is not None

    def total_weight(self) -> float:
        return sum(edge.weight for edge in self._edges)

    def position(self, vi: int, vj: int) -> int:
        """Slot of the pair in the complete-graph index (order of arguments is irrelevant)."""
        if vi > vj:
            vi, vj = vj, vi
        max_vi = self.complete_edge_count(vi)
        return ((vj - 1) + (vi - 1) * self._number_vertices - max_vi) - vi

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def __str__(self) -> str:
        return "Edges: \n" + "".join(f"{edge}\n" for edge in self._edges)


@dataclass(frozen=True)
class MKCInstance:
    """A max-k-cut instance: a graph and the number of partitions."""

    graph: Any
    k: int