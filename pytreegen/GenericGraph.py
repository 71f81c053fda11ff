"""
Generic graph storage
=====================

:class:`GenericGraph` keeps an undirected edge list over dense *internal*
vertex indices ``0..n-1`` together with an adjacency list, optional edge and
vertex weights, and a pair of inverse arrays mapping internal indices to the
*labels* callers see. Relabelling (shuffling) only rewrites the two label
arrays; edge data always stays in internal form.

Subclasses add structure on top of the raw insertion primitive
:meth:`GenericGraph._add_edge_unsafe`, which performs no checks.
"""

import copy
import logging
from collections import deque
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from pytreegen.exceptions import InvalidVertexError
from pytreegen.RandomSource import check_random_source


class GenericGraph:
    """Undirected multigraph storage with a label indirection layer."""

    def __init__(self, num_vertices: int = 0):
        self._n = 0
        self._edges: List[Tuple[int, int]] = []
        # per internal vertex: (neighbour, edge index) in insertion order
        self._adjacency: List[List[Tuple[int, int]]] = []
        self._edge_weights: Dict[int, Any] = {}
        self._vertex_weights: Dict[int, Any] = {}
        self._label_of: List[int] = []
        self._internal_of: List[int] = []
        self._relabelled = False
        self.extend(num_vertices)

    @property
    def n(self) -> int:
        """Number of vertices."""
        return self._n

    @property
    def m(self) -> int:
        """Number of edges."""
        return len(self._edges)

    def extend(self, new_size: int) -> None:
        """Grow the graph to ``new_size`` vertices; new vertices keep their
        internal index as label. No-op if the graph is already that large."""
        if new_size <= self._n:
            return
        self._adjacency.extend([] for _ in range(self._n, new_size))
        self._label_of.extend(range(self._n, new_size))
        self._internal_of.extend(range(self._n, new_size))
        self._n = new_size

    # ---------- label map ---------------------------------------------------

    def vertex_by_label(self, label: int) -> int:
        """Internal index of the vertex carrying ``label``."""
        if not 0 <= label < self._n:
            raise InvalidVertexError(f"vertex label {label} is out of range")
        return self._internal_of[label]

    def vertex_label(self, vertex: int) -> int:
        """Label of the vertex with internal index ``vertex``."""
        if not 0 <= vertex < self._n:
            raise InvalidVertexError(f"vertex index {vertex} is out of range")
        return self._label_of[vertex]

    def shuffle(self, rng=None) -> "GenericGraph":
        """Relabel the vertices with a uniformly random permutation.

        The permutation is composed with the current labelling, so the
        result is uniform regardless of earlier shuffles. Edges, weights and
        connectivity are untouched when seen through internal indices.

        Parameters
        ----------
        rng : None, int, numpy.random.Generator or RandomSource, optional
            Source of randomness.

        Returns
        -------
        GenericGraph
            ``self``, for chaining.
        """

        perm = check_random_source(rng).permutation(self._n).tolist()
        self._label_of = [perm[label] for label in self._label_of]
        self._rebuild_internal_of()
        return self

    def shuffled(self, rng=None) -> "GenericGraph":
        """Return a shuffled copy, leaving this graph unchanged."""
        return self.copy().shuffle(rng)

    def shuffle_all_but(self, fixed: Iterable[int], rng=None) -> "GenericGraph":
        """Shuffle labels while every label in ``fixed`` stays on its vertex.

        Parameters
        ----------
        fixed : Iterable[int]
            Labels that must not move.
        rng : None, int, numpy.random.Generator or RandomSource, optional
            Source of randomness.

        Returns
        -------
        GenericGraph
            ``self``, for chaining.
        """

        fixed = set(fixed)
        for label in fixed:
            self.vertex_by_label(label)
        movable = [label for label in range(self._n) if label not in fixed]
        targets = list(movable)
        check_random_source(rng).shuffle(targets)
        new_label = list(range(self._n))
        for source, target in zip(movable, targets):
            new_label[source] = target
        self._label_of = [new_label[label] for label in self._label_of]
        self._rebuild_internal_of()
        return self

    def _rebuild_internal_of(self) -> None:
        for vertex, label in enumerate(self._label_of):
            self._internal_of[label] = vertex
        self._relabelled = any(
            label != vertex for vertex, label in enumerate(self._label_of)
        )

    # ---------- edges -------------------------------------------------------

    def _add_edge_unsafe(self, u: int, v: int) -> int:
        """Append an edge between internal vertices ``u`` and ``v`` and
        return its index."""
        index = len(self._edges)
        self._edges.append((u, v))
        self._adjacency[u].append((v, index))
        if u != v:
            self._adjacency[v].append((u, index))
        return index

    def internal_edges(self, vertex: int) -> List[int]:
        """Neighbours of internal vertex ``vertex`` in edge insertion order."""
        return [to for to, _ in self._adjacency[vertex]]

    @property
    def internal_edge_list(self) -> List[Tuple[int, int]]:
        """Edges as pairs of internal indices."""
        return list(self._edges)

    @property
    def edges(self) -> List[Tuple[int, int]]:
        """Edges as pairs of labels, in insertion order."""
        label_of = self._label_of
        return [(label_of[u], label_of[v]) for u, v in self._edges]

    def neighbors(self, label: int) -> List[int]:
        """Labels of the vertices adjacent to the vertex ``label``."""
        vertex = self.vertex_by_label(label)
        return [self._label_of[to] for to, _ in self._adjacency[vertex]]

    def normalize_edges(self) -> None:
        """Orient every edge parent-before-child.

        Each component is traversed breadth-first from its smallest internal
        index and every tree edge is rewritten as ``(parent, child)``. The
        order of edges and of adjacency lists is kept, so edge weights stay
        attached to the same edges.
        """

        if self._relabelled:
            logging.warning(
                "Normalizing edges of a relabelled graph; orientation follows "
                "internal indices, not labels."
            )

        seen = [False] * self._n
        for start in range(self._n):
            if seen[start]:
                continue
            seen[start] = True
            queue = deque([start])
            while queue:
                v = queue.popleft()
                for to, index in self._adjacency[v]:
                    if not seen[to]:
                        seen[to] = True
                        self._edges[index] = (v, to)
                        queue.append(to)

    # ---------- weights -----------------------------------------------------

    def set_edge_weight(self, index: int, weight: Any) -> None:
        if not 0 <= index < self.m:
            raise IndexError(f"edge index {index} is out of range")
        self._edge_weights[index] = weight

    def edge_weight(self, index: int) -> Optional[Any]:
        """Weight of edge ``index``, or ``None`` if it was never set."""
        if not 0 <= index < self.m:
            raise IndexError(f"edge index {index} is out of range")
        return self._edge_weights.get(index)

    def set_edge_weights(self, weights: Sequence[Any]) -> None:
        if len(weights) != self.m:
            raise ValueError("number of weights must match the number of edges")
        self._edge_weights = dict(enumerate(weights))

    @property
    def edge_weights(self) -> List[Optional[Any]]:
        return [self._edge_weights.get(i) for i in range(self.m)]

    def set_vertex_weight(self, label: int, weight: Any) -> None:
        self._vertex_weights[self.vertex_by_label(label)] = weight

    def vertex_weight(self, label: int) -> Optional[Any]:
        """Weight of the vertex ``label``, or ``None`` if it was never set."""
        return self._vertex_weights.get(self.vertex_by_label(label))

    def set_vertex_weights(self, weights: Sequence[Any]) -> None:
        """Set vertex weights, ``weights[label]`` going to vertex ``label``."""
        if len(weights) != self._n:
            raise ValueError("number of weights must match the number of vertices")
        self._vertex_weights = {
            self._internal_of[label]: w for label, w in enumerate(weights)
        }

    @property
    def vertex_weights(self) -> List[Optional[Any]]:
        """Vertex weights indexed by label."""
        return [
            self._vertex_weights.get(self._internal_of[label])
            for label in range(self._n)
        ]

    # ---------- misc --------------------------------------------------------

    def copy(self) -> "GenericGraph":
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(n={self.n}, m={self.m})"
