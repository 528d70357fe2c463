"""Structural queries on a graph: bipartiteness, components, diameters and cuts."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import IntEnum

from .graph import Edge, Graph


class _State(IntEnum):
    UNSEEN = 0
    OPEN = 1
    DONE = 2


def is_bipartite(graph: Graph) -> bool:
    """Return True when the vertices of ``graph`` can be two-coloured."""
    state: dict[str, _State] = {}
    depth: dict[str, int] = {}
    for root in graph.vertices:
        if state.get(root, _State.UNSEEN) is not _State.UNSEEN:
            continue
        state[root] = _State.OPEN
        depth[root] = 0
        queue = deque([root])
        while queue:
            vertex = queue.popleft()
            for edge in graph.neighbours(vertex):
                neighbour = edge.target
                seen = state.get(neighbour, _State.UNSEEN)
                if seen is _State.OPEN:
                    if depth[vertex] == depth[neighbour]:
                        return False
                elif seen is _State.UNSEEN:
                    queue.append(neighbour)
                    state[neighbour] = _State.OPEN
                    depth[neighbour] = depth[vertex] + 1
            state[vertex] = _State.DONE
    return True


def _label_components(graph: Graph) -> dict[str, int]:
    """Map every vertex to the index of its connected component."""
    labels: dict[str, int] = {}
    for root in graph.vertices:
        if root in labels:
            continue
        label = len(set(labels.values()))
        labels[root] = label
        queue = deque([root])
        while queue:
            vertex = queue.popleft()
            for edge in graph.neighbours(vertex):
                if edge.target not in labels:
                    labels[edge.target] = label
                    queue.append(edge.target)
    return labels


def component_count(graph: Graph) -> int:
    """Return the number of connected components of ``graph``."""
    return len(set(_label_components(graph).values()))


def _farthest_cost(graph: Graph, root: str) -> int:
    """Largest shortest-path cost from ``root`` to any vertex it reaches."""
    cost = {root: 0}
    state = {root: _State.OPEN}
    queue = [root]
    while queue:
        position, vertex = min(enumerate(queue), key=lambda item: cost[item[1]])
        del queue[position]
        for edge in graph.neighbours(vertex):
            neighbour = edge.target
            seen = state.get(neighbour, _State.UNSEEN)
            candidate = cost[vertex] + edge.weight
            if seen is _State.OPEN:
                if candidate < cost[neighbour]:
                    cost[neighbour] = candidate
            elif seen is _State.UNSEEN:
                cost[neighbour] = candidate
                state[neighbour] = _State.OPEN
                queue.append(neighbour)
        state[vertex] = _State.DONE
    return max(
        (value for vertex, value in cost.items() if state[vertex] is _State.DONE),
        default=0,
    ) if cost else 0


def diameters(graph: Graph) -> list[int]:
    """Return the weighted diameter of each component, in non-decreasing order."""
    labels = _label_components(graph)
    longest = dict.fromkeys(labels.values(), 0)
    for root in graph.vertices:
        reach = _farthest_cost(graph, root)
        label = labels[root]
        if reach > longest[label]:
            longest[label] = reach
    return sorted(longest.values())


@dataclass
class _Frame:
    vertex: str
    edges: tuple[Edge, ...]
    position: int = 0
    children: int = 0
    highest_child_low: int = -1
    child: str | None = None


def _lowpoint(graph: Graph) -> tuple[set[str], set[tuple[str, int]]]:
    """Depth-first lowpoint search.

    Returns the cut vertices and the bridges, the latter as
    ``(vertex, position in its adjacency list)`` pairs.
    """
    state: dict[str, _State] = {}
    parent: dict[str, str | None] = {}
    depth: dict[str, int] = {}
    low: dict[str, int] = {}
    cut: set[str] = set()
    bridges: set[tuple[str, int]] = set()

    for root in graph.vertices:
        if state.get(root, _State.UNSEEN) is not _State.UNSEEN:
            continue
        depth[root] = 0
        low[root] = 0
        parent[root] = None
        state[root] = _State.OPEN
        stack = [_Frame(root, graph.neighbours(root))]
        while stack:
            frame = stack[-1]
            vertex = frame.vertex
            if frame.child is not None:
                child = frame.child
                frame.child = None
                if low[child] < low[vertex]:
                    low[vertex] = low[child]
                if low[child] > frame.highest_child_low:
                    frame.highest_child_low = low[child]
                if depth[vertex] < low[child]:
                    bridges.add((vertex, frame.position))
                frame.position += 1
                continue
            if frame.position < len(frame.edges):
                neighbour = frame.edges[frame.position].target
                seen = state.get(neighbour, _State.UNSEEN)
                if seen is _State.UNSEEN:
                    frame.children += 1
                    parent[neighbour] = vertex
                    depth[neighbour] = depth[vertex] + 1
                    low[neighbour] = low[vertex] + 1
                    state[neighbour] = _State.OPEN
                    frame.child = neighbour
                    stack.append(_Frame(neighbour, graph.neighbours(neighbour)))
                    continue
                if (
                    seen is _State.OPEN
                    and parent.get(vertex) != neighbour
                    and depth[neighbour] < low[vertex]
                ):
                    low[vertex] = depth[neighbour]
                if parent.get(neighbour) == vertex and depth[vertex] < low[neighbour]:
                    bridges.add((vertex, frame.position))
                frame.position += 1
                continue
            vertex_depth = depth[vertex]
            if (vertex_depth != 0 and vertex_depth <= frame.highest_child_low) or (
                vertex_depth == 0 and frame.children > 1
            ):
                cut.add(vertex)
            state[vertex] = _State.DONE
            stack.pop()
    return cut, bridges


def cut_vertices(graph: Graph) -> list[str]:
    """Return the names of the cut vertices in alphabetical order."""
    cut, _ = _lowpoint(graph)
    return sorted(cut)


def cut_edges(graph: Graph) -> list[tuple[str, str]]:
    """Return the cut edges as name pairs, each pair and the list in alphabetical order."""
    _, bridges = _lowpoint(graph)
    pairs = []
    for vertex in graph.vertices:
        for position, edge in enumerate(graph.neighbours(vertex)):
            if (vertex, position) in bridges:
                if vertex > edge.target:
                    pairs.append((edge.target, vertex))
                else:
                    pairs.append((vertex, edge.target))
    pairs.sort(key=lambda pair: pair[0])
    return pairs


def format_diameters(graph: Graph) -> str:
    """Diameters as a space-separated string."""
    return " ".join(str(value) for value in diameters(graph))


def format_cut_vertices(graph: Graph) -> str:
    """Cut vertex names as a space-separated string."""
    return " ".join(cut_vertices(graph))


def format_cut_edges(graph: Graph) -> str:
    """Cut edges as a flat space-separated list of vertex names."""
    return " ".join(name for pair in cut_edges(graph) for name in pair)