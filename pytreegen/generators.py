"""
Tree generators
===============

Each generator returns a freshly built, connected :class:`~pytreegen.Tree.Tree`
on ``size`` vertices labelled ``0..size-1``.

Deterministic shapes: :func:`bamboo`, :func:`star`, :func:`kary`,
:func:`binary`. Randomised shapes: :func:`caterpillar`, :func:`random_tree`
(uniform over all labeled trees), :func:`random_prim` (tunable towards paths or
stars) and :func:`random_kruskal` (rejection sampling of random edges).

Randomised generators take an ``rng`` argument (see
:func:`~pytreegen.RandomSource.check_random_source`); the same seed always
yields the same tree. Every generator also takes ``max_size``, the largest
accepted ``size``; ``None`` disables the check.
"""

import heapq
import logging
from typing import Optional

from pytreegen.exceptions import (
    GenerationLimitExceededError,
    InternalInconsistencyError,
    InvalidSizeError,
)
from pytreegen.RandomSource import check_random_source
from pytreegen.Tree import Tree

DEFAULT_MAX_SIZE = 5_000_000


def check_large_parameter(value: int, max_size: Optional[int] = DEFAULT_MAX_SIZE) -> None:
    """Reject a size parameter above ``max_size``.

    Parameters
    ----------
    value : int
        The requested size.
    max_size : int or None, optional
        Ceiling on ``value``. ``None`` disables the check.

    Raises
    ------
    InvalidSizeError
        If ``value`` exceeds ``max_size``.
    """

    if max_size is None:
        logging.debug("Size ceiling disabled, accepting %d", value)
        return
    if value > max_size:
        raise InvalidSizeError(
            f"Parameter {value} is too large (maximum allowed is {max_size})"
        )


def _check_size(size: int, max_size: Optional[int]) -> None:
    if size <= 0:
        raise InvalidSizeError("Number of vertices in the tree must be positive")
    check_large_parameter(size, max_size)


def bamboo(size: int, max_size: Optional[int] = DEFAULT_MAX_SIZE) -> Tree:
    """Path ``0 - 1 - ... - (size-1)``."""
    _check_size(size, max_size)
    t = Tree(1)
    for i in range(size - 1):
        t.add_edge(i, i + 1)
    t.normalize_edges()
    return t


def star(size: int, max_size: Optional[int] = DEFAULT_MAX_SIZE) -> Tree:
    """Vertex 0 adjacent to every other vertex."""
    _check_size(size, max_size)
    t = Tree(1)
    for i in range(1, size):
        t.add_edge(0, i)
    t.normalize_edges()
    return t


def kary(size: int, k: int, max_size: Optional[int] = DEFAULT_MAX_SIZE) -> Tree:
    """Complete ``k``-ary tree by index: vertex ``i`` hangs off ``(i - 1) // k``."""
    _check_size(size, max_size)
    if k <= 0:
        raise InvalidSizeError("Arity of the tree must be positive")

    t = Tree(1)
    for i in range(1, size):
        t.add_edge((i - 1) // k, i)
    t.normalize_edges()
    return t


def binary(size: int, max_size: Optional[int] = DEFAULT_MAX_SIZE) -> Tree:
    """Complete binary tree by index, ``kary(size, 2)``."""
    return kary(size, 2, max_size=max_size)


def caterpillar(
    size: int,
    length: int,
    rng=None,
    max_size: Optional[int] = DEFAULT_MAX_SIZE,
) -> Tree:
    """Path of ``length`` vertices with the remaining vertices hung on it.

    Parameters
    ----------
    size : int
        Total number of vertices.
    length : int
        Number of spine vertices, ``0 < length <= size``. The spine is
        ``bamboo(length)``; every vertex ``i >= length`` is attached to a
        uniformly random spine vertex.
    rng : None, int, numpy.random.Generator or RandomSource, optional
        Source of randomness.
    max_size : int or None, optional
        Ceiling on ``size``.

    Returns
    -------
    Tree
    """

    if size <= 0:
        raise InvalidSizeError("Number of vertices in the tree must be positive")
    if length <= 0:
        raise InvalidSizeError("Length of the caterpillar must be positive")
    check_large_parameter(size, max_size)
    if length > size:
        raise InvalidSizeError(
            "Length of the caterpillar must not exceed the number of vertices"
        )

    rng = check_random_source(rng)
    t = bamboo(length, max_size=max_size)
    for i in range(length, size):
        t.add_edge(rng.next(length), i)
    t.normalize_edges()
    return t


def random_tree(size: int, rng=None, max_size: Optional[int] = DEFAULT_MAX_SIZE) -> Tree:
    """Tree drawn uniformly from all ``size ** (size - 2)`` labeled trees.

    A random Prüfer code of length ``size - 2`` is decoded: each code value
    in turn is joined to the smallest current leaf, which is then removed,
    and becomes a leaf itself once its last occurrence is consumed. The two
    leaves left at the end are joined directly.

    Parameters
    ----------
    size : int
        Number of vertices.
    rng : None, int, numpy.random.Generator or RandomSource, optional
        Source of randomness.
    max_size : int or None, optional
        Ceiling on ``size``.

    Returns
    -------
    Tree
    """

    _check_size(size, max_size)
    if size == 1:
        return Tree(1)

    rng = check_random_source(rng)
    code = rng.random_array(size - 2, size).tolist()
    degree = [1] * size
    for v in code:
        degree[v] += 1

    leaves = [v for v in range(size) if degree[v] == 1]
    heapq.heapify(leaves)

    t = Tree(size)
    for v in code:
        to = heapq.heappop(leaves)
        degree[v] -= 1
        if degree[v] == 1:
            heapq.heappush(leaves, v)
        t.add_edge(v, to)

    if len(leaves) != 2:
        raise InternalInconsistencyError("Prüfer decoding must end with two leaves")
    t.add_edge(min(leaves), max(leaves))
    t.normalize_edges()
    return t


def random_prim(
    size: int,
    elongation: int = 0,
    rng=None,
    max_size: Optional[int] = DEFAULT_MAX_SIZE,
) -> Tree:
    """Tree where each vertex ``v > 0`` picks its parent among ``0..v-1``.

    Parameters
    ----------
    size : int
        Number of vertices.
    elongation : int, optional
        Skew of the parent choice, passed to
        :meth:`~pytreegen.RandomSource.RandomSource.wnext`. ``0`` picks parents
        uniformly; positive values favour recent vertices and give long,
        path-like trees; negative values favour early vertices and give
        shallow, star-like trees.
    rng : None, int, numpy.random.Generator or RandomSource, optional
        Source of randomness.
    max_size : int or None, optional
        Ceiling on ``size``.

    Returns
    -------
    Tree
    """

    _check_size(size, max_size)
    rng = check_random_source(rng)
    t = Tree(1)
    for v in range(1, size):
        t.add_edge(rng.wnext(v, elongation), v)
    t.normalize_edges()
    return t


def random_kruskal(
    size: int,
    rng=None,
    max_iterations: Optional[int] = None,
    max_size: Optional[int] = DEFAULT_MAX_SIZE,
) -> Tree:
    """Tree grown by adding uniformly random edges that do not close a cycle.

    Pairs of distinct vertices are drawn until the tree is connected; a pair
    whose endpoints are already connected is rejected. The number of draws is
    unbounded unless ``max_iterations`` is given.

    Parameters
    ----------
    size : int
        Number of vertices.
    rng : None, int, numpy.random.Generator or RandomSource, optional
        Source of randomness.
    max_iterations : int or None, optional
        Maximum number of pairs to draw before giving up.
    max_size : int or None, optional
        Ceiling on ``size``.

    Returns
    -------
    Tree

    Raises
    ------
    GenerationLimitExceededError
        If ``max_iterations`` draws did not produce a connected tree.
    """

    _check_size(size, max_size)
    rng = check_random_source(rng)
    t = Tree(size)
    iterations = 0
    while not t.is_connected():
        if max_iterations is not None and iterations >= max_iterations:
            raise GenerationLimitExceededError(
                f"random_kruskal did not connect {size} vertices "
                f"within {max_iterations} draws"
            )
        iterations += 1
        u, v = rng.nextp(size)
        if t.can_add_edge(u, v):
            t.add_edge(u, v)

    logging.debug(
        "random_kruskal(%d): %d draws, %d rejected", size, iterations, iterations - t.m
    )
    return t
