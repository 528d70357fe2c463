"""Undirected weighted graph and its text-format reader."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, TextIO

_EDGE_SEPARATOR = "--"
_COMMENT_MARK = "//"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Edge:
    """One entry in a vertex's adjacency list."""

    target: str
    weight: int = 1


class Graph:
    """An undirected graph with named vertices and integer edge weights.

    Vertices are kept in the order the reader exposes them: the most
    recently added vertex first. Each vertex's neighbours keep the order
    in which their edges were added.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._adjacency: dict[str, list[Edge]] = {}
        self.edge_count = 0

    def add_vertex(self, name: str) -> None:
        """Add a vertex unless one with that name already exists."""
        self._adjacency.setdefault(name, [])

    def add_edge(self, first: str, second: str, weight: int = 1) -> None:
        """Add an undirected edge, creating its end vertices as needed."""
        self.add_vertex(first)
        self.add_vertex(second)
        self._adjacency[first].append(Edge(second, weight))
        self._adjacency[second].append(Edge(first, weight))
        self.edge_count += 1

    def neighbours(self, name: str) -> tuple[Edge, ...]:
        """Return the edges leaving vertex ``name``; KeyError if it is absent."""
        return tuple(self._adjacency[name])

    @property
    def vertices(self) -> tuple[str, ...]:
        """Vertex names, most recently added first."""
        return tuple(reversed(self._adjacency))

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, name: object) -> bool:
        return name in self._adjacency

    def __iter__(self) -> Iterator[str]:
        return iter(self.vertices)

    def describe(self) -> str:
        """Return a human-readable listing of the graph and its adjacency."""
        rule = "---------------------------------\n"
        parts = [
            f"Nome grafo: {self.name}\n",
            f"Quantidade de vértices: {self.vertex_count}\n",
            f"Quantidade de arestas: {self.edge_count}\n",
            rule,
        ]
        for vertex in self.vertices:
            neighbours = "".join(f" {edge.target}, " for edge in self._adjacency[vertex])
            parts.append(f"{vertex}: {neighbours}\n")
        parts.append(rule)
        return "".join(parts)


def _first_token(text: str) -> str | None:
    tokens = text.split()
    return tokens[0] if tokens else None


def _parse_edge(graph: Graph, line: str, separator_at: int) -> None:
    first = line[:separator_at].rstrip(" ")
    rest = line[separator_at + len(_EDGE_SEPARATOR):].lstrip(" ")
    tokens = rest.split(None, 1)
    if not tokens:
        raise ValueError(f"edge line without a second vertex: {line!r}")
    second = tokens[0]
    weight = 1
    if len(tokens) > 1:
        match = _LEADING_INT.match(tokens[1])
        if match:
            weight = int(match.group(1))
    graph.add_edge(first, second, weight)


def parse_graph(lines: Iterable[str]) -> Graph:
    """Build a graph from lines in the graph text format.

    The first plain line names the graph, ``a -- b [weight]`` lines add
    edges (weight 1 when omitted) and other lines add lone vertices.
    Lines containing ``//`` and lines of at most one character are ignored.
    """
    graph = Graph()
    for raw in lines:
        line = raw.split("\n", 1)[0]
        if _COMMENT_MARK in line or len(line) <= 1:
            continue
        separator_at = line.find(_EDGE_SEPARATOR)
        if separator_at >= 0:
            _parse_edge(graph, line, separator_at)
            continue
        token = _first_token(line)
        if token is None:
            continue
        if not graph.name:
            graph.name = token
        else:
            graph.add_vertex(token)
    return graph


def read_graph(stream: TextIO) -> Graph:
    """Read a graph from an open text stream."""
    return parse_graph(stream)