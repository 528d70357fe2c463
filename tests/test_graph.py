import io

import pytest

from grafo.graph import Edge, Graph, parse_graph, read_graph

EXAMPLE = """\
// o nome do grafo
triângulo_com_vértice

// uma lista com três arestas e seus pesos
um -- dois 12
dois -- quatro 24
quatro -- um 41

// um vértice isolado
três
"""


def test_example_counts_and_name():
    graph = read_graph(io.StringIO(EXAMPLE))
    assert graph.name == "triângulo_com_vértice"
    assert graph.vertex_count == 4
    assert len(graph) == 4
    assert graph.edge_count == 3


def test_example_neighbours_and_weights():
    graph = parse_graph(EXAMPLE.splitlines(keepends=True))
    assert graph.neighbours("um") == (Edge("dois", 12), Edge("quatro", 41))
    assert graph.neighbours("três") == ()


def test_vertices_most_recent_first():
    graph = parse_graph(EXAMPLE.splitlines())
    assert graph.vertices == ("três", "quatro", "dois", "um")
    assert list(graph) == list(graph.vertices)


def test_default_weight_is_one():
    graph = parse_graph(["g", "alpha -- beta"])
    assert graph.neighbours("alpha") == (Edge("beta", 1),)
    assert graph.neighbours("beta") == (Edge("alpha", 1),)


def test_spacing_around_separator():
    graph = parse_graph(["g", "alpha   --   beta 5"])
    assert "alpha" in graph
    assert graph.neighbours("beta") == (Edge("alpha", 5),)


def test_weight_with_trailing_garbage_uses_leading_digits():
    graph = parse_graph(["g", "aa -- bb 7x"])
    assert graph.neighbours("aa")[0].weight == 7


def test_non_numeric_weight_falls_back_to_one():
    graph = parse_graph(["g", "aa -- bb heavy"])
    assert graph.neighbours("aa")[0].weight == 1


def test_edge_before_name_keeps_name_pending():
    graph = parse_graph(["aa -- bb", "title", "cc"])
    assert graph.name == "title"
    assert set(graph.vertices) == {"aa", "bb", "cc"}


def test_missing_second_vertex_raises():
    with pytest.raises(ValueError):
        parse_graph(["g", "aa --   "])


def test_unknown_vertex_neighbours_raises():
    graph = parse_graph(["g", "aa -- bb"])
    with pytest.raises(KeyError):
        graph.neighbours("nope")


def test_add_vertex_is_idempotent():
    graph = Graph("g")
    graph.add_vertex("aa")
    graph.add_vertex("aa")
    assert graph.vertex_count == 1


def test_repeated_edges_each_counted():
    graph = Graph("g")
    graph.add_edge("aa", "bb", 3)
    graph.add_edge("aa", "bb", 4)
    assert graph.edge_count == 2
    assert [e.weight for e in graph.neighbours("bb")] == [3, 4]


def test_self_loop_appears_twice_in_adjacency():
    graph = Graph("g")
    graph.add_edge("aa", "aa", 2)
    assert graph.edge_count == 1
    assert graph.neighbours("aa") == (Edge("aa", 2), Edge("aa", 2))


def test_adjacency_is_symmetric():
    graph = parse_graph(EXAMPLE.splitlines())
    for vertex in graph:
        for edge in graph.neighbours(vertex):
            assert Edge(vertex, edge.weight) in graph.neighbours(edge.target)


def test_describe_layout():
    graph = parse_graph(EXAMPLE.splitlines())
    lines = graph.describe().splitlines()
    assert lines[0] == "Nome grafo: triângulo_com_vértice"
    assert lines[1] == "Quantidade de vértices: 4"
    assert lines[2] == "Quantidade de arestas: 3"
    assert lines[3] == "---------------------------------"
    assert lines[-1] == "---------------------------------"
    assert lines[4] == "três: "
    assert lines[-2] == "um:  dois,  quatro, "
    assert len(lines) == 4 + graph.vertex_count + 1