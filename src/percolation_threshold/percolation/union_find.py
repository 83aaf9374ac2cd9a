"""
Weighted quick-union with path compression.

A generic disjoint-set structure over a fixed universe of integer elements
0..n-1. Storage is allocated once at construction; sets only ever merge.
Parent and size tables are plain lists, indexed one element at a time.
"""


class WeightedQuickUnionUF:
    """
    Disjoint-set (union-find) over ``n`` integer-labeled elements.

    Union is by size (the smaller tree is linked under the larger root) and
    ``find`` compresses the path it walks, so both operations run in
    near-constant amortized time.

    Example:
        uf = WeightedQuickUnionUF(10)
        uf.union(3, 4)
        uf.connected(3, 4)   # True
        uf.count             # 9
    """

    def __init__(self, n: int):
        """
        Initialize a universe of ``n`` singleton sets.

        Args:
            n: Number of elements (must be > 0)
        """
        if n <= 0:
            raise ValueError(f"n must be > 0, got {n}")

        self._parent = list(range(n))
        self._size = [1] * n
        self._count = n

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def count(self) -> int:
        """Number of disjoint sets."""
        return self._count

    def _validate(self, p: int) -> None:
        n = len(self._parent)
        if p < 0 or p >= n:
            raise IndexError(f"index {p} is not between 0 and {n - 1}")

    def find(self, p: int) -> int:
        """
        Return the root of the set containing ``p``.

        Every element on the walked path is re-pointed at the root.
        """
        self._validate(p)
        parent = self._parent

        root = p
        while root != parent[root]:
            root = parent[root]

        while p != root:
            next_p = parent[p]
            parent[p] = root
            p = next_p

        return root

    def connected(self, p: int, q: int) -> bool:
        """True iff ``p`` and ``q`` are in the same set."""
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> None:
        """Merge the sets containing ``p`` and ``q`` (no-op if already merged)."""
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return

        if self._size[root_p] < self._size[root_q]:
            self._parent[root_p] = root_q
            self._size[root_q] += self._size[root_p]
        else:
            self._parent[root_q] = root_p
            self._size[root_p] += self._size[root_q]

        self._count -= 1
