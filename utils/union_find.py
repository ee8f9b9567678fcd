"""
Union-Find (Disjoint Set Union) data structure.

Efficient data structure for tracking disjoint sets of integer elements 0..n-1:
- find(x): Which set contains x? - O(α(n)) amortized
- union(x, y): Merge sets containing x and y - O(α(n)) amortized
- connected(x, y): Are x and y in the same set? - O(α(n)) amortized

Where α(n) is the inverse Ackermann function (effectively constant ≤ 4).

The forest is stored as a flat array of parent indices, so elements are
plain integers and no node objects are allocated.
"""

from numbers import Integral

from localtypes import Quotient


class InvalidSize(ValueError):
    """Raised when a disjoint set is created with a negative element count."""

    pass


class IndexOutOfRange(IndexError):
    """Raised when an element lies outside [0, n)."""

    pass


class DisjointSet:
    """
    Union-Find with path compression and union by size.

    Example:
        >>> ds = DisjointSet(5)
        >>> ds.union(1, 2)
        1
        >>> ds.union(2, 3)
        1
        >>> ds.connected(1, 3)
        True
        >>> ds.connected(1, 4)
        False
        >>> ds.num_sets
        3
    """

    def __init__(self, n: int) -> None:
        if not isinstance(n, int) or isinstance(n, bool):
            raise InvalidSize(f"Size must be an integer, got: {n!r}")
        if n < 0:
            raise InvalidSize(f"Size must be non-negative, got: {n}")

        self._parent: list[int] = list(range(n))
        self._size: list[int] = [1] * n
        self._num_sets = n

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def num_sets(self) -> int:
        """Number of distinct sets, O(1)."""
        return self._num_sets

    def _check(self, element: int) -> None:
        if not isinstance(element, Integral) or isinstance(element, bool):
            raise IndexOutOfRange(f"Element must be an integer, got: {element!r}")
        if not 0 <= element < len(self._parent):
            raise IndexOutOfRange(
                f"Element {element} is outside [0, {len(self._parent)})"
            )

    def find(self, element: int) -> int:
        """
        Find the representative (root) of the set containing element.

        Uses path compression: flattens the tree by pointing all nodes
        along the path directly to the root.
        """
        self._check(element)
        parent = self._parent

        # Find root
        root = element
        while parent[root] != root:
            root = parent[root]

        # Path compression: point all nodes to root
        current = element
        while parent[current] != root:
            next_node = parent[current]
            parent[current] = root
            current = next_node

        return root

    def union(self, x: int, y: int) -> int:
        """
        Merge the sets containing x and y.

        Uses union by size: attaches the smaller tree under the root of the
        larger one. On equal sizes y's root goes under x's root.

        Returns the representative of the merged set.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return root_x

        if self._size[root_x] < self._size[root_y]:
            root_x, root_y = root_y, root_x

        self._parent[root_y] = root_x
        self._size[root_x] += self._size[root_y]
        self._num_sets -= 1
        return root_x

    def connected(self, x: int, y: int) -> bool:
        """Check if x and y are in the same set."""
        return self.find(x) == self.find(y)

    def set_size(self, element: int) -> int:
        """Number of elements in the set containing element."""
        return self._size[self.find(element)]

    def get_all_sets(self) -> Quotient[int, int]:
        """
        Get all disjoint sets as a dictionary.

        Returns:
            Mapping from each set's representative to its members.
        """
        sets: dict[int, set[int]] = {}
        for element in range(len(self._parent)):
            sets.setdefault(self.find(element), set()).add(element)
        return {root: frozenset(members) for root, members in sets.items()}
