import logging

import pytest
from pytreegen.exceptions import InvalidVertexError
from pytreegen.GenericGraph import GenericGraph


def make_path(n):
    g = GenericGraph(n)
    for i in range(n - 1):
        g._add_edge_unsafe(i, i + 1)
    return g


def test_extend_identity_labels():
    g = GenericGraph()
    assert g.n == 0
    g.extend(4)
    assert g.n == 4
    assert g.m == 0
    assert [g.vertex_label(v) for v in range(4)] == [0, 1, 2, 3]
    g.extend(2)
    assert g.n == 4


def test_label_lookup_out_of_range():
    g = GenericGraph(3)
    with pytest.raises(InvalidVertexError):
        g.vertex_by_label(3)
    with pytest.raises(InvalidVertexError):
        g.vertex_label(-1)


def test_adjacency_in_insertion_order():
    g = GenericGraph(4)
    g._add_edge_unsafe(0, 2)
    g._add_edge_unsafe(0, 1)
    g._add_edge_unsafe(3, 0)
    assert g.internal_edges(0) == [2, 1, 3]
    assert g.neighbors(3) == [0]


def test_shuffle_keeps_internal_edges():
    g = make_path(10)
    internal_before = g.internal_edge_list
    g.shuffle(rng=0)
    assert g.internal_edge_list == internal_before
    labels = [g.vertex_label(v) for v in range(10)]
    assert sorted(labels) == list(range(10))
    for label in range(10):
        assert g.vertex_label(g.vertex_by_label(label)) == label
    assert g.edges == [(labels[u], labels[v]) for u, v in internal_before]


def test_shuffled_leaves_receiver_unchanged():
    g = make_path(10)
    h = g.shuffled(rng=1)
    assert g.edges == [(i, i + 1) for i in range(9)]
    assert h.n == 10
    assert h.m == 9
    assert h is not g


def test_shuffle_all_but_keeps_fixed_labels():
    g = make_path(12)
    g.shuffle_all_but([0, 5], rng=2)
    assert g.vertex_by_label(0) == 0
    assert g.vertex_by_label(5) == 5
    assert sorted(g.vertex_label(v) for v in range(12)) == list(range(12))


def test_shuffle_all_but_rejects_unknown_label():
    g = make_path(3)
    with pytest.raises(InvalidVertexError):
        g.shuffle_all_but([7])


def test_edge_weights():
    g = make_path(3)
    assert g.edge_weight(0) is None
    g.set_edge_weight(1, 2.5)
    assert g.edge_weights == [None, 2.5]
    g.set_edge_weights(["a", "b"])
    assert g.edge_weight(0) == "a"
    with pytest.raises(ValueError):
        g.set_edge_weights([1])
    with pytest.raises(IndexError):
        g.edge_weight(5)


def test_vertex_weights_follow_vertices_on_shuffle():
    g = make_path(6)
    g.set_vertex_weights([10, 11, 12, 13, 14, 15])
    owner = g.vertex_by_label(2)
    g.shuffle(rng=3)
    assert g.vertex_weight(g.vertex_label(owner)) == 12
    assert sorted(g.vertex_weights) == [10, 11, 12, 13, 14, 15]
    with pytest.raises(ValueError):
        g.set_vertex_weights([1, 2])


def test_normalize_edges_orients_parent_first():
    g = GenericGraph(4)
    g._add_edge_unsafe(1, 0)
    g._add_edge_unsafe(2, 1)
    g._add_edge_unsafe(3, 1)
    g.set_edge_weight(0, "w")
    g.normalize_edges()
    assert g.internal_edge_list == [(0, 1), (1, 2), (1, 3)]
    assert g.edge_weight(0) == "w"


def test_normalize_edges_on_forest():
    g = GenericGraph(5)
    g._add_edge_unsafe(1, 0)
    g._add_edge_unsafe(4, 3)
    g._add_edge_unsafe(3, 2)
    g.normalize_edges()
    assert g.internal_edge_list == [(0, 1), (3, 4), (2, 3)]


def test_normalize_edges_warns_when_relabelled(caplog):
    g = make_path(10)
    g.shuffle(rng=4)
    with caplog.at_level(logging.WARNING):
        g.normalize_edges()
    assert "relabelled" in caplog.text


def test_copy_is_deep():
    g = make_path(3)
    h = g.copy()
    h._add_edge_unsafe(0, 2)
    assert g.m == 2
    assert h.m == 3
