"""Command that reads a graph from standard input and reports its properties."""

from __future__ import annotations

import argparse
import sys

from .analysis import (
    component_count,
    format_cut_edges,
    format_cut_vertices,
    format_diameters,
    is_bipartite,
)
from .graph import Graph, read_graph


def report(graph: Graph) -> str:
    """Return the full text report for ``graph``."""
    bipartite = "sim" if is_bipartite(graph) else "não"
    return "".join(
        [
            graph.describe(),
            f"bipartido: {bipartite}\n",
            f"{component_count(graph)} componentes\n",
            f"diametros: {format_diameters(graph)}\n",
            f"vértices de corte: {format_cut_vertices(graph)}\n",
            f"arestas de corte: {format_cut_edges(graph)}\n",
        ]
    )


def main(argv: list[str] | None = None) -> int:
    """Read a graph from standard input and print its report."""
    parser = argparse.ArgumentParser(
        prog="grafo",
        description="Read a graph from standard input and report its properties.",
    )
    parser.parse_args(argv)
    graph = read_graph(sys.stdin)
    sys.stdout.write(report(graph))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())