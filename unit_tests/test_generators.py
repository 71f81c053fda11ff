import itertools
from collections import Counter

import numpy as np
import pytest
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import connected_components
from scipy.stats import chisquare

from pytreegen.exceptions import GenerationLimitExceededError, InvalidSizeError
from pytreegen.generators import (
    bamboo,
    binary,
    caterpillar,
    check_large_parameter,
    kary,
    random_kruskal,
    random_prim,
    random_tree,
    star,
)
from pytreegen.RandomSource import RandomSource


GENERATORS = {
    "bamboo": lambda s: bamboo(s),
    "star": lambda s: star(s),
    "binary": lambda s: binary(s),
    "kary3": lambda s: kary(s, 3),
    "caterpillar": lambda s: caterpillar(s, max(1, s // 2), rng=0),
    "random_tree": lambda s: random_tree(s, rng=0),
    "random_prim": lambda s: random_prim(s, rng=0),
    "random_prim_long": lambda s: random_prim(s, elongation=3, rng=0),
    "random_prim_short": lambda s: random_prim(s, elongation=-3, rng=0),
    "random_kruskal": lambda s: random_kruskal(s, rng=0),
}


def assert_is_tree(t, size):
    assert t.n == size
    assert t.m == size - 1
    assert t.is_connected()
    if size > 1:
        rows, cols = zip(*t.edges)
        graph = coo_matrix((np.ones(t.m), (rows, cols)), shape=(size, size))
        n_components, _ = connected_components(graph, directed=False)
        assert n_components == 1


def depths(t, root=0):
    parents = t.parents(root)
    result = []
    for v in range(t.n):
        depth = 0
        while v != root:
            v = parents[v]
            depth += 1
        result.append(depth)
    return result


@pytest.mark.parametrize("name", sorted(GENERATORS))
@pytest.mark.parametrize("size", [1, 2, 3, 10, 57])
def test_generators_produce_trees(name, size):
    assert_is_tree(GENERATORS[name](size), size)


@pytest.mark.parametrize("name", sorted(GENERATORS))
def test_generators_reject_non_positive_size(name):
    with pytest.raises(InvalidSizeError, match="must be positive"):
        GENERATORS[name](0)


def test_bamboo_edges():
    assert set(bamboo(5).edges) == {(0, 1), (1, 2), (2, 3), (3, 4)}


def test_star_edges():
    assert set(star(4).edges) == {(0, 1), (0, 2), (0, 3)}


def test_kary_parents():
    parents = kary(7, 2).parents(0)
    for i in range(1, 7):
        assert parents[i] == (i - 1) // 2
    assert binary(7).edges == kary(7, 2).edges


def test_kary_rejects_zero_arity():
    with pytest.raises(InvalidSizeError):
        kary(5, 0)


@pytest.mark.parametrize(
    "tree",
    [bamboo(9), star(9), kary(20, 3), random_tree(40, rng=4), random_prim(40, rng=4)],
)
def test_normalized_edges_are_parent_first(tree):
    parents = tree.parents(0)
    for u, v in tree.edges:
        assert parents[v] == u


def test_caterpillar_spine():
    t = caterpillar(30, 6, rng=2)
    assert_is_tree(t, 30)
    assert t.edges[:5] == [(i, i + 1) for i in range(5)]
    parents = t.parents(0)
    for leaf in range(6, 30):
        assert parents[leaf] < 6
        assert t.neighbors(leaf) == [parents[leaf]]


def test_caterpillar_parameters():
    assert set(caterpillar(5, 5, rng=0).edges) == set(bamboo(5).edges)
    with pytest.raises(InvalidSizeError, match="Length of the caterpillar"):
        caterpillar(5, 0)
    with pytest.raises(InvalidSizeError):
        caterpillar(5, 6)


def test_random_tree_is_reproducible():
    assert random_tree(50, rng=123).edges == random_tree(50, rng=123).edges
    assert random_tree(50, rng=RandomSource(9)).edges == random_tree(50, rng=9).edges


class FixedCode(RandomSource):
    """Source whose only array draw is a given Prüfer code."""

    def __init__(self, code):
        super().__init__(0)
        self.code = code

    def random_array(self, size, n):
        assert size == len(self.code)
        return np.array(self.code, dtype=int)


def test_random_tree_decodes_pruefer_code():
    # code [3, 3, 3] on 5 vertices is the star around 3
    t = random_tree(5, rng=FixedCode([3, 3, 3]))
    assert {frozenset(e) for e in t.edges} == {
        frozenset((3, v)) for v in (0, 1, 2, 4)
    }


def test_random_tree_pruefer_bijection():
    size = 5
    trees = set()
    for code in itertools.product(range(size), repeat=size - 2):
        t = random_tree(size, rng=FixedCode(list(code)))
        assert_is_tree(t, size)
        trees.add(frozenset(frozenset(e) for e in t.edges))
    assert len(trees) == size ** (size - 2)


def test_random_tree_is_uniform():
    rng = RandomSource(2024)
    draws = 3200
    counts = Counter(
        frozenset(frozenset(e) for e in random_tree(4, rng=rng).edges)
        for _ in range(draws)
    )
    assert len(counts) == 16
    assert chisquare(list(counts.values())).pvalue > 0.001


def test_random_prim_elongation():
    long_tree = random_prim(100, elongation=1000, rng=1)
    assert max(depths(long_tree)) >= 90

    short_tree = random_prim(100, elongation=-1000, rng=1)
    assert len(short_tree.neighbors(0)) >= 90


def test_random_prim_parent_precedes_child():
    for u, v in random_prim(60, elongation=2, rng=3).edges:
        assert u < v


def test_random_kruskal_reproducible_and_bounded():
    assert random_kruskal(30, rng=5).edges == random_kruskal(30, rng=5).edges
    with pytest.raises(GenerationLimitExceededError):
        random_kruskal(10, rng=5, max_iterations=1)
    assert_is_tree(random_kruskal(10, rng=5, max_iterations=10_000), 10)


def test_size_ceiling():
    with pytest.raises(InvalidSizeError, match="too large"):
        bamboo(11, max_size=10)
    with pytest.raises(InvalidSizeError):
        random_tree(11, max_size=10)
    assert_is_tree(bamboo(11, max_size=None), 11)
    check_large_parameter(10, max_size=10)
