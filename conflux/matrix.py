"""Matrices over the finite field Z(p) with Gaussian elimination."""

from __future__ import annotations


class MatrixTooNarrowError(ValueError):
    """Raised when a matrix has fewer columns than rows and cannot be reduced."""

    def __init__(self) -> None:
        super().__init__("matrix is too narrow to reduce")


class Matrix:
    """A rectangular array of integers over Z(p), addressed by (column, row)."""

    def __init__(self, columns: int, rows: int, value: int, p: int) -> None:
        self.columns = columns
        self.rows = rows
        self.p = p
        self._cells = [value % p] * (columns * rows)

    def get(self, i: int, j: int) -> int:
        """Return the value at column i, row j."""
        return self._cells[i + j * self.columns]

    def set(self, i: int, j: int, value: int) -> None:
        """Store a value at column i, row j."""
        self._cells[i + j * self.columns] = value % self.p

    def reduce(self) -> None:
        """Perform Gaussian elimination in place."""
        if self.columns < self.rows:
            raise MatrixTooNarrowError()
        for j in range(self.rows):
            self._process_row_forward(j)
        for j in range(self.rows - 1, 0, -1):
            self._back_substitute(j)

    def _back_substitute(self, j: int) -> None:
        if self.get(j, j) != 1:
            return
        last = self.rows - 1
        for j2 in range(j - 1, -1, -1):
            scmult = self.get(j, j2)
            self._rowsub(last, j, j2, scmult)
            self.set(j, j2, 0)

    def _process_row_forward(self, j: int) -> None:
        v = self.get(j, j)
        if v == 0:
            jswap = next(
                (jf for jf in range(j + 1, self.rows) if self.get(j, jf) != 0),
                None,
            )
            if jswap is None:
                return
            self._swap_rows(j, jswap)
            v = self.get(j, j)
        if v != 1:
            self._scmult_row(j, j, pow(v, -1, self.p))
        for j2 in range(j + 1, self.rows):
            self._rowsub(j, j, j2, self.get(j, j2))

    def _swap_rows(self, j1: int, j2: int) -> None:
        c = self.columns
        s1, s2 = slice(j1 * c, (j1 + 1) * c), slice(j2 * c, (j2 + 1) * c)
        self._cells[s1], self._cells[s2] = self._cells[s2], self._cells[s1]

    def _scmult_row(self, scol: int, j: int, sc: int) -> None:
        for i in range(scol, self.columns):
            self.set(i, j, self.get(i, j) * sc)

    def _rowsub(self, scol: int, src: int, dst: int, scmult: int) -> None:
        for i in range(scol, self.columns):
            sval = self.get(i, src)
            if sval:
                self.set(i, dst, self.get(i, dst) - sval * scmult)

    def __str__(self) -> str:
        return "".join(
            "| "
            + "".join(f"{self.get(col, row)} " for col in range(self.columns))
            + "|\n"
            for row in range(self.rows)
        )