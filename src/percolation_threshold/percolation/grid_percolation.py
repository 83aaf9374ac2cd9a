"""
Site percolation on an n-by-n grid.

Sites start blocked and are opened one at a time. Connectivity is tracked
incrementally with two disjoint-set universes sharing the same layout:

    grid1: sites + virtual TOP + virtual BOTTOM, answers percolates()
    grid2: sites + virtual TOP only,            answers is_full()

grid2 is never joined to BOTTOM. Otherwise, once the grid percolates, every
open bottom-row site would reach TOP through BOTTOM and report full
("backwash").
"""

import numpy as np

from .union_find import WeightedQuickUnionUF


# (d_row, d_col) for up, down, left, right
NEIGHBOR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Percolation:
    """
    Open/blocked state of an n-by-n grid with incremental connectivity.

    Rows and columns are 1-based: valid coordinates are 1..n.

    Example:
        perc = Percolation(3)
        perc.open(1, 2)
        perc.open(2, 2)
        perc.open(3, 2)
        perc.percolates()   # True
    """

    def __init__(self, n: int):
        """
        Create an n-by-n grid with every site blocked.

        Args:
            n: Grid size (must be > 0)
        """
        if n <= 0:
            raise ValueError(f"Grid size must be > 0, got {n}")

        self._n = n
        self.sites = np.zeros((n, n), dtype=bool)
        self._n_open = 0

        self.grid1 = WeightedQuickUnionUF(n * n + 2)
        self.grid2 = WeightedQuickUnionUF(n * n + 2)
        self.top = n * n
        self.bottom = n * n + 1

    @property
    def n(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n * self._n

    def _in_bounds(self, row: int, col: int) -> bool:
        return 1 <= row <= self._n and 1 <= col <= self._n

    def _validate(self, row: int, col: int) -> None:
        for value in (row, col):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"Site coordinates must be integers, got ({row!r}, {col!r})")
        if not self._in_bounds(row, col):
            raise ValueError(
                f"Site ({row}, {col}) is outside the grid; "
                f"row and col must be in [1, {self._n}]"
            )

    def _index(self, row: int, col: int) -> int:
        return (row - 1) * self._n + (col - 1)

    def open(self, row: int, col: int) -> None:
        """
        Open site (row, col) and connect it to its open neighbors.

        Opening an already-open site does nothing.
        """
        self._validate(row, col)
        if self.sites[row - 1, col - 1]:
            return

        self.sites[row - 1, col - 1] = True
        self._n_open += 1
        index = self._index(row, col)

        if row == 1:
            self.grid1.union(index, self.top)
            self.grid2.union(index, self.top)
        # BOTTOM only exists in grid1
        if row == self._n:
            self.grid1.union(index, self.bottom)

        for d_row, d_col in NEIGHBOR_OFFSETS:
            nb_row, nb_col = row + d_row, col + d_col
            if self._in_bounds(nb_row, nb_col) and self.sites[nb_row - 1, nb_col - 1]:
                nb_index = self._index(nb_row, nb_col)
                self.grid1.union(index, nb_index)
                self.grid2.union(index, nb_index)

    def is_open(self, row: int, col: int) -> bool:
        """Is site (row, col) open?"""
        self._validate(row, col)
        return bool(self.sites[row - 1, col - 1])

    def is_full(self, row: int, col: int) -> bool:
        """Is site (row, col) open and connected to the top row?"""
        self._validate(row, col)
        if not self.sites[row - 1, col - 1]:
            return False
        return self.grid2.connected(self._index(row, col), self.top)

    def number_of_open_sites(self) -> int:
        return self._n_open

    def open_fraction(self) -> float:
        """Fraction of the n*n sites that are open."""
        return self._n_open / (self._n * self._n)

    def percolates(self) -> bool:
        """Is there a path of open sites from the top row to the bottom row?"""
        return self.grid1.connected(self.top, self.bottom)
