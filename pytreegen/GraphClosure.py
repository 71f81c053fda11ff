from typing import Iterator, List, Set


class GraphClosureTracker:
    """
    A growable Union-Find (Disjoint Set) structure over dense integer ids.

    Uses union by size and path compression. The number of components is
    tracked as a counter, so ``len(tracker)`` is O(1); the component sets
    themselves are only materialised on iteration.
    """

    def __init__(self, num_nodes: int = 0):
        """
        Initialize the tracker with a specified number of singleton nodes.

        Parameters
        ----------
        num_nodes : int
            The initial number of nodes.
        """

        self.parent: List[int] = list(range(num_nodes))
        self.size: List[int] = [1] * num_nodes
        self.num_nodes = num_nodes
        self.num_components = num_nodes

    def extend(self, num_nodes: int) -> None:
        """
        Grow the universe to ``num_nodes`` nodes, each new node a singleton.
        Does nothing if the tracker is already at least that large.

        Parameters
        ----------
        num_nodes : int
            The requested number of nodes.
        """

        if num_nodes > self.num_nodes:
            added = num_nodes - self.num_nodes
            self.parent.extend(range(self.num_nodes, num_nodes))
            self.size.extend([1] * added)
            self.num_components += added
            self.num_nodes = num_nodes

    def find(self, node: int) -> int:
        """
        Find the root representative of the set containing the node.

        Parameters
        ----------
        node : int
            The node whose component root is to be found.

        Returns
        -------
        int
            The root node of the component. Stable until the next union.
        """

        self.extend(node + 1)
        root = node
        while self.parent[root] != root:
            root = self.parent[root]
        # path compression, iterative so deep chains cannot hit the recursion limit
        while self.parent[node] != root:
            self.parent[node], node = root, self.parent[node]
        return root

    def union(self, node1: int, node2: int) -> bool:
        """
        Merge the components containing node1 and node2.

        Parameters
        ----------
        node1 : int
            First node.
        node2 : int
            Second node.

        Returns
        -------
        bool
            True if the two nodes were in different components and a merge
            happened, False if they were already connected.
        """

        root1 = self.find(node1)
        root2 = self.find(node2)

        if root1 == root2:
            return False

        # Attach the smaller component under the larger one
        if self.size[root1] < self.size[root2]:
            root1, root2 = root2, root1
        self.parent[root2] = root1
        self.size[root1] += self.size[root2]
        self.num_components -= 1
        return True

    def is_connected(self, node1: int, node2: int) -> bool:
        """
        Check whether two nodes are in the same connected component.

        Parameters
        ----------
        node1 : int
            First node.
        node2 : int
            Second node.

        Returns
        -------
        bool
            True if node1 and node2 are connected, False otherwise.
        """

        return self.find(node1) == self.find(node2)

    def subgraph_is_already_connected(self, nodes: List[int]) -> bool:
        """
        Check whether all nodes in the list belong to the same connected component.

        Parameters
        ----------
        nodes : List[int]
            A list of node indices.

        Returns
        -------
        bool
            True if all nodes are connected, False otherwise.
        """

        if not nodes:
            return True  # Empty list is trivially connected
        root = self.find(nodes[0])
        return all(self.find(node) == root for node in nodes)

    def component_size(self, node: int) -> int:
        """Number of nodes in the component containing ``node``."""
        return self.size[self.find(node)]

    def copy(self) -> "GraphClosureTracker":
        """Return an independent copy of the tracker."""
        other = GraphClosureTracker()
        other.parent = list(self.parent)
        other.size = list(self.size)
        other.num_nodes = self.num_nodes
        other.num_components = self.num_components
        return other

    def __iter__(self) -> Iterator[Set[int]]:
        """
        Iterate over the current connected components.

        Returns
        -------
        Iterator[Set[int]]
            An iterator over sets of node indices, ordered by smallest member.
        """

        components = {}
        for node in range(self.num_nodes):
            components.setdefault(self.find(node), set()).add(node)
        return iter(components.values())

    def __len__(self) -> int:
        """
        Return the number of connected components.

        Returns
        -------
        int
            The number of components currently being tracked.
        """

        return self.num_components
