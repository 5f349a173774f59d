"""Disjoint-set forest used by the Kruskal algorithms."""


class UnionFind:
    """Union-find over the integers ``0..num-1`` with path compression and union by size."""

    def __init__(self, num: int) -> None:
        self._rep = list(range(num))
        self._size = [1] * num

    def _check(self, i: int) -> None:
        if i < 0:
            raise IndexError(f"element {i} out of range")

    def find(self, i: int) -> int:
        """Return the representative of the set containing ``i``."""
        self._check(i)
        rep = self._rep
        root = i
        while rep[root] != root:
            root = rep[root]
        current = i
        while current != root:
            rep[current], current = root, rep[current]
        return root

    def union(self, i: int, j: int) -> bool:
        """Merge the sets of ``i`` and ``j``; return False if already joined."""
        root_i = self.find(i)
        root_j = self.find(j)
        if root_i == root_j:
            return False
        if self._size[root_i] < self._size[root_j]:
            self._rep[root_i] = root_j
            self._size[root_j] += self._size[root_i]
        else:
            self._rep[root_j] = root_i
            self._size[root_i] += self._size[root_j]
        return True