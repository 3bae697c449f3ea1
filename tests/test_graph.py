import pytest

from sccgraph import DuplicateVertex, GraphError, UnknownVertex
from sccgraph.core.graph import Graph, Vertex, build_graph


def test_add_vertex_returns_handle_in_insertion_order():
    graph = Graph()
    b = graph.add_vertex("b")
    a = graph.add_vertex("a")
    c = graph.add_vertex("c")

    assert graph.vertices() == (b, a, c)
    assert [v.name for v in graph] == ["b", "a", "c"]
    assert len(graph) == 3
    assert graph.vertex("a") is a


def test_duplicate_vertex_rejected():
    graph = Graph()
    graph.add_vertex("v1")
    with pytest.raises(DuplicateVertex) as excinfo:
        graph.add_vertex("v1")
    assert excinfo.value.name == "v1"
    assert isinstance(excinfo.value, GraphError)
    assert len(graph) == 1


def test_vertex_name_must_be_str():
    with pytest.raises(TypeError):
        Graph().add_vertex(1)


def test_edges_keep_order_and_duplicates():
    graph = Graph()
    v1 = graph.add_vertex("v1")
    v2 = graph.add_vertex("v2")
    v3 = graph.add_vertex("v3")

    graph.add_edge(v1, v3)
    graph.add_edge(v1, v2)
    graph.add_edge(v1, v3)

    assert v1.neighbours == (v3, v2, v3)
    assert v1.out_degree() == 3
    assert graph.edge_count() == 3
    assert graph.has_edge(v1, v2)
    assert not graph.has_edge(v2, v1)


def test_add_edge_accepts_names():
    graph = Graph()
    a = graph.add_vertex("a")
    b = graph.add_vertex("b")
    graph.add_edge("a", b)
    graph.add_edge(b, "a")
    assert a.neighbours == (b,)
    assert b.neighbours == (a,)


def test_unknown_vertex_from_other_graph():
    graph = Graph()
    v1 = graph.add_vertex("v1")
    other = Graph()
    stranger = other.add_vertex("v2")

    with pytest.raises(UnknownVertex):
        graph.add_edge(v1, stranger)
    with pytest.raises(UnknownVertex):
        graph.add_edge(stranger, v1)
    assert v1.neighbours == ()


def test_same_name_from_other_graph_is_still_foreign():
    graph = Graph()
    v1 = graph.add_vertex("v1")
    twin = Graph().add_vertex("v1")

    assert twin == v1
    assert twin not in graph
    with pytest.raises(UnknownVertex):
        graph.add_edge(v1, twin)


def test_unregistered_vertex_rejected():
    graph = Graph()
    v1 = graph.add_vertex("v1")
    with pytest.raises(UnknownVertex):
        graph.add_edge(v1, Vertex("loose"))
    with pytest.raises(UnknownVertex) as excinfo:
        graph.add_edge("v1", "missing")
    assert excinfo.value.name == "missing"
    assert "missing" in str(excinfo.value)


def test_vertex_lookup_behaves_like_mapping():
    graph = Graph()
    with pytest.raises(KeyError):
        graph.vertex("nope")


def test_vertex_identity_is_name():
    assert Vertex("x") == Vertex("x")
    assert hash(Vertex("x")) == hash(Vertex("x"))
    assert Vertex("x") != Vertex("y")
    assert len({Vertex("x"), Vertex("x")}) == 1
    with pytest.raises(AttributeError):
        Vertex("x").name = "y"


def test_membership_checks():
    graph = Graph()
    v = graph.add_vertex("v")
    assert v in graph
    assert "v" in graph
    assert "w" not in graph
    assert 3 not in graph


def test_debug_rendering():
    graph = build_graph(["v1", "v2"], [("v1", "v2")])
    v1 = graph.vertex("v1")
    assert repr(v1) == "Vertex(name='v1', neighbours=['v2'])"
    assert repr(graph) == (
        "Graph(vertices=[Vertex(name='v1', neighbours=['v2']), Vertex(name='v2', neighbours=[])])"
    )


def test_build_graph_validates_edges():
    with pytest.raises(UnknownVertex):
        build_graph(["a"], [("a", "b")])
