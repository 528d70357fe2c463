# grafo

Reads an undirected, weighted graph from a small text format and reports on its structure:

- whether it is bipartite
- how many connected components it has
- the diameter of each component, measured by edge weights
- its cut vertices (articulation points)
- its cut edges (bridges)

## Input format

Each item goes on its own line. Lines that contain `//` anywhere are skipped, as are lines of at most one character and lines holding only blanks.

- The first line that is not an edge gives the graph's name (its first word).
- A line such as `a -- b 7` is an edge between `a` and `b` with weight 7. The weight is optional and defaults to 1.
- Any other line names a vertex (its first word). Use this for isolated vertices. Vertices that appear in an edge do not need their own line.

```
triangle_with_vertex

one -- two 12
two -- four 24
four -- one 41

three
```

An edge line with nothing after `--` raises `ValueError`.

## Command line

The `grafo` command reads a graph from standard input. It prints a description of the graph (its name, vertex and edge counts, and each vertex with its neighbours) followed by its analysis:

```
grafo < triangle.txt
```

The report labels are in Portuguese (`bipartido`, `componentes`, `diametros`, `vértices de corte`, `arestas de corte`). The command takes no options besides `--help`.

## Library

```python
from grafo.graph import read_graph
from grafo.analysis import (
    is_bipartite, component_count, diameters, cut_vertices, cut_edges,
)

with open("triangle.txt", encoding="utf-8") as stream:
    graph = read_graph(stream)

is_bipartite(graph)      # False
component_count(graph)   # 2
diameters(graph)         # [0, 36]
cut_vertices(graph)      # []
cut_edges(graph)         # []
```

- `grafo.graph.Graph` holds the graph. `add_vertex(name)` and `add_edge(first, second, weight)` build it; `neighbours(name)` returns a vertex's `Edge` entries (each with `target` and `weight`); `vertices` lists names with the most recently added first; `vertex_count`, `edge_count` and `name` describe it; `describe()` returns the text listing the command prints.
- `parse_graph(lines)` builds a graph from any iterable of lines; `read_graph(stream)` reads one from an open text stream.
- `diameters` returns the largest shortest-path cost within each component, in non-decreasing order.
- `cut_vertices` returns names in alphabetical order.
- `cut_edges` returns `(u, v)` pairs with each pair in alphabetical order; the list is ordered by the first name of each pair.
- `format_diameters`, `format_cut_vertices` and `format_cut_edges` return the same results as space-separated strings.
- `grafo.cli.report(graph)` returns the full text report for a graph.

## Running the tests

```
pip install -e .[test]
pytest
```