"""Weighted directed graphs: topological order, longest paths and DOT output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TextIO

MAGENTA = "\033[35m"
RESET = "\033[0m"


class GraphInputError(ValueError):
    """The graph description is malformed."""


@dataclass(frozen=True)
class Edge:
    """An outgoing arc to vertex ``target`` carrying ``weight``."""

    target: int
    weight: int


class Graph:
    """Directed graph over at most ``capacity`` vertices, stored as adjacency lists.

    Vertices are indices; ``labels`` maps each index to the number shown for it.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._adjacency: list[list[Edge]] = [[] for _ in range(capacity)]
        self.labels: list[int] = []

    @property
    def vertex_count(self) -> int:
        return len(self.labels)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.capacity:
            raise IndexError(f"vertex {vertex} is out of range")

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Add an arc u -> v; unlabelled vertices are labelled by their index."""
        self._check(u)
        self._check(v)
        top = max(u, v)
        if top >= len(self.labels):
            self.labels.extend(range(len(self.labels), top + 1))
        self._adjacency[u].append(Edge(v, weight))

    def topological_order(self) -> list[int]:
        """Vertices in reverse depth-first post-order, starting from index 0."""
        count = self.vertex_count
        visited = [False] * count
        postorder: list[int] = []
        for start in range(count):
            if visited[start]:
                continue
            visited[start] = True
            stack = [(start, iter(self._adjacency[start]))]
            while stack:
                vertex, edges = stack[-1]
                for edge in edges:
                    if not visited[edge.target]:
                        visited[edge.target] = True
                        stack.append((edge.target, iter(self._adjacency[edge.target])))
                        break
                else:
                    stack.pop()
                    postorder.append(vertex)
        return postorder[::-1]

    def longest_paths(self, source: int) -> list[Optional[int]]:
        """Longest path length from source to every vertex; None where unreachable."""
        if not 0 <= source < self.vertex_count:
            raise IndexError(f"vertex {source} is out of range")
        dist: list[Optional[int]] = [None] * self.vertex_count
        dist[source] = 0
        for u in self.topological_order():
            base = dist[u]
            if base is None:
                continue
            for edge in self._adjacency[u]:
                candidate = base + edge.weight
                current = dist[edge.target]
                if current is None or current < candidate:
                    dist[edge.target] = candidate
        return dist

    def format_longest_paths(self, source: int) -> str:
        """Render the longest paths from source as a titled list."""
        origin = self.labels[source] if 0 <= source < self.vertex_count else source
        lines = [f"{MAGENTA}ДЛИННЕЙШИЕ ПУТИ ИЗ ВЕРШИНЫ {origin}{RESET}\n"]
        for vertex, distance in enumerate(self.longest_paths(source)):
            if distance is not None:
                lines.append(f"{origin} ==> {self.labels[vertex]} [{distance:3d}]\n")
        lines.append("\n")
        return "".join(lines)

    def to_dot(self, name: str) -> str:
        """Describe the graph in the DOT language."""
        lines = [f"digraph {name} {{\n"]
        for vertex in range(self.vertex_count):
            for edge in self._adjacency[vertex]:
                lines.append(
                    f"{self.labels[vertex]} -> {self.labels[edge.target]} "
                    f"[label={edge.weight}];\n"
                )
        lines.append("}\n")
        return "".join(lines)


def parse_graph(stream: TextIO) -> Graph:
    """Read a vertex count followed by ``u v w`` triples.

    Reading stops at the end of input or at a triple whose first number is -1.
    Raises GraphInputError for malformed input, a zero weight, or more
    distinct vertices than declared.
    """
    tokens = stream.read().split()
    try:
        count = int(tokens[0])
    except (IndexError, ValueError):
        raise GraphInputError("Ошибка ввода.") from None
    if count <= 0:
        raise GraphInputError("Ошибка ввода.")

    graph = Graph(count)
    indices: dict[int, int] = {}

    def index_of(label: int) -> int:
        if label not in indices:
            if len(graph.labels) >= count:
                raise GraphInputError("Ошибка ввода. Введенно больше вершин, чем заявлено")
            indices[label] = len(graph.labels)
            graph.labels.append(label)
        return indices[label]

    rest = tokens[1:]
    for start in range(0, len(rest), 3):
        triple = rest[start:start + 3]
        if len(triple) < 3:
            raise GraphInputError("Ошибка ввода.")
        try:
            u, v, w = (int(token) for token in triple)
        except ValueError:
            raise GraphInputError("Ошибка ввода.") from None
        if w == 0:
            raise GraphInputError("Ошибка ввода. Метка дуги не может равняться нулю.")
        if u == -1:
            break
        source = index_of(u)
        target = index_of(v)
        graph.add_edge(source, target, w)
    return graph