"""
Tree module
===========

:class:`Tree` is a :class:`~pytreegen.GenericGraph.GenericGraph` whose edge
insertion is guarded by a union-find tracker, so that a ``Tree`` is a forest
at every moment of its construction and a tree once it is connected with
``n - 1`` edges.

Besides incremental construction (:meth:`Tree.add_edge`,
:meth:`Tree.can_add_edge`) it offers BFS parent extraction
(:meth:`Tree.parents`) and two composition operators that build a new tree
out of two existing ones without modifying either:

* :meth:`Tree.link` joins the trees with one extra edge;
* :meth:`Tree.glue` fuses a vertex of one tree with a vertex of the other.

Trees of standard shapes are built by the functions in
:mod:`pytreegen.generators`.
"""

from collections import deque
from typing import Any, Optional

import numpy as np

from pytreegen.exceptions import (
    CycleDetectedError,
    DisconnectedGraphError,
    InternalInconsistencyError,
    InvalidVertexError,
)
from pytreegen.GenericGraph import GenericGraph
from pytreegen.GraphClosure import GraphClosureTracker


class Tree(GenericGraph):
    """A labeled forest that refuses edges closing a cycle.

    Parameters
    ----------
    num_vertices : int, optional
        Number of isolated vertices to start with. Default is 0.
    """

    def __init__(self, num_vertices: int = 0):
        self.GCT = GraphClosureTracker()
        super().__init__(num_vertices)

    def extend(self, new_size: int) -> None:
        super().extend(new_size)
        self.GCT.extend(new_size)

    def add_edge(self, u: int, v: int, weight: Optional[Any] = None) -> None:
        """Insert an edge between the vertices labelled ``u`` and ``v``.

        Missing vertices are created first, so ``add_edge`` can grow the tree.

        Parameters
        ----------
        u, v : int
            Vertex labels.
        weight : Any, optional
            Payload attached to the new edge. ``None`` attaches nothing.

        Raises
        ------
        InvalidVertexError
            If a label is negative.
        CycleDetectedError
            If ``u`` and ``v`` are already connected. The tree is left as it
            was, apart from vertices created by the implicit extension.
        """

        if u < 0 or v < 0:
            raise InvalidVertexError("Vertex labels must be non-negative")
        self.extend(max(u, v) + 1)

        u = self.vertex_by_label(u)
        v = self.vertex_by_label(v)

        if not self.GCT.union(u, v):
            raise CycleDetectedError("A cycle appeared in the tree")

        index = self._add_edge_unsafe(u, v)
        if weight is not None:
            self.set_edge_weight(index, weight)

    def can_add_edge(self, u: int, v: int) -> bool:
        """True iff the vertices labelled ``u`` and ``v`` are in different
        components, i.e. ``add_edge(u, v)`` would succeed."""
        u = self.vertex_by_label(u)
        v = self.vertex_by_label(v)
        return not self.GCT.is_connected(u, v)

    def is_connected(self) -> bool:
        """True iff all vertices lie in a single component."""
        return len(self.GCT) <= 1

    def parents(self, root: int) -> np.ndarray:
        """Parent of every vertex when the tree is rooted at ``root``.

        Parameters
        ----------
        root : int
            Label of the root.

        Returns
        -------
        np.ndarray
            Integer array indexed by label; entry ``v`` is the label of the
            vertex through which a breadth-first search from ``root`` first
            reached ``v``. The root is its own parent.

        Raises
        ------
        DisconnectedGraphError
            If the tree is not connected.
        """

        if not self.is_connected():
            raise DisconnectedGraphError("Tree is not connected")
        root = self.vertex_by_label(root)

        parents = [0] * self.n
        parents[root] = root
        used = [False] * self.n
        used[root] = True
        queue = deque([root])
        while queue:
            v = queue.popleft()
            for to in self.internal_edges(v):
                if not used[to]:
                    used[to] = True
                    parents[to] = v
                    queue.append(to)

        result = np.empty(self.n, dtype=int)
        for vertex, parent in enumerate(parents):
            result[self.vertex_label(vertex)] = self.vertex_label(parent)
        return result

    def link(self, v_in_this: int, other: "Tree", v_in_other: int) -> "Tree":
        """Join this tree and ``other`` with a single bridging edge.

        Vertices of ``other`` are relabelled by adding ``self.n``; the bridge
        goes from ``v_in_this`` to the shifted ``v_in_other``. Edge weights of
        ``other`` are carried over. Neither input is modified.

        Returns
        -------
        Tree
            A tree on ``self.n + other.n`` vertices.
        """

        if not 0 <= v_in_this < self.n:
            raise InvalidVertexError("Cannot link a nonexistent vertex")
        if not 0 <= v_in_other < other.n:
            raise InvalidVertexError("Cannot link to a nonexistent vertex")

        offset = self.n
        t = self.copy()
        t.extend(offset + other.n)

        for (a, b), w in zip(other.edges, other.edge_weights):
            t.add_edge(a + offset, b + offset, w)

        t.add_edge(v_in_this, v_in_other + offset)

        return t

    def glue(self, v_in_this: int, other: "Tree", v_in_other: int) -> "Tree":
        """Fuse vertex ``v_in_other`` of ``other`` into ``v_in_this``.

        A label ``v`` of ``other`` becomes ``self.n + v`` below ``v_in_other``,
        ``v_in_this`` at ``v_in_other`` and ``self.n + v - 1`` above it. Edge
        weights of ``other`` are carried over. Neither input is modified.

        Returns
        -------
        Tree
            A tree on ``self.n + other.n - 1`` vertices.
        """

        if not 0 <= v_in_this < self.n:
            raise InvalidVertexError("Cannot glue a nonexistent vertex")
        if not 0 <= v_in_other < other.n:
            raise InvalidVertexError("Cannot glue to a nonexistent vertex")

        offset = self.n

        def new_label(v: int) -> int:
            if v < v_in_other:
                return offset + v
            elif v == v_in_other:
                return v_in_this
            else:
                return offset + v - 1

        t = self.copy()

        for (a, b), w in zip(other.edges, other.edge_weights):
            t.add_edge(new_label(a), new_label(b), w)

        if t.n != self.n + other.n - 1:
            raise InternalInconsistencyError(
                f"glue produced {t.n} vertices, expected {self.n + other.n - 1}"
            )

        return t
