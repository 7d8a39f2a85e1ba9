"""Square matrices of integers or floating-point numbers, and their text format."""

from __future__ import annotations

from enum import Enum
from os import PathLike
from typing import Iterable, Sequence, Union

Number = Union[int, float]


class MatrixError(ValueError):
    """Raised for malformed matrix input or incompatible operands."""


class ElementType(Enum):
    """Element type of a matrix; the value is the flag used in the text format."""

    INT = 0
    DOUBLE = 1


def _convert(element_type: ElementType, value) -> Number:
    if element_type is ElementType.INT:
        return int(value)
    return float(value)


def _format_element(element_type: ElementType, value: Number) -> str:
    if element_type is ElementType.INT:
        return str(value)
    return f"{value:.6f}"


def _parse_count(token: str, what: str) -> int:
    try:
        count = int(token)
    except ValueError as exc:
        raise MatrixError(f"invalid {what}: {token!r}") from exc
    if count < 0:
        raise MatrixError(f"invalid {what}: {token!r}")
    return count


def _parse_type(token: str) -> ElementType:
    flag = _parse_count(token, "type flag")
    try:
        return ElementType(flag)
    except ValueError as exc:
        raise MatrixError(f"undefined matrix type flag: {flag}") from exc


def _parse_element(element_type: ElementType, token: str) -> Number:
    try:
        return _convert(element_type, token)
    except ValueError as exc:
        raise MatrixError(f"invalid matrix element: {token!r}") from exc


class SquareMatrix:
    """A mutable square matrix whose elements all share one element type."""

    def __init__(self, rows: Sequence[Sequence[Number]], element_type: ElementType) -> None:
        self.element_type = ElementType(element_type)
        n = len(rows)
        if any(len(row) != n for row in rows):
            raise MatrixError("rows do not form a square matrix")
        self._rows = [[_convert(self.element_type, v) for v in row] for row in rows]

    @property
    def size(self) -> int:
        """Number of rows (and columns)."""
        return len(self._rows)

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "SquareMatrix":
        """Build a matrix from tokens: size, type flag, then the elements row by row."""
        it = iter(tokens)
        try:
            size = _parse_count(next(it), "matrix size")
        except StopIteration:
            raise MatrixError("missing matrix size") from None
        if size == 0:
            raise MatrixError("can't load a size 0 matrix")
        try:
            element_type = _parse_type(next(it))
        except StopIteration:
            raise MatrixError("missing type flag") from None
        try:
            rows = [
                [_parse_element(element_type, next(it)) for _ in range(size)]
                for _ in range(size)
            ]
        except StopIteration:
            raise MatrixError("not enough matrix elements") from None
        return cls(rows, element_type)

    def _check_compatible(self, other: "SquareMatrix", verb: str) -> None:
        if self.size != other.size:
            raise MatrixError(f"can't {verb} matrices of different sizes")
        if self.element_type is not other.element_type:
            raise MatrixError(f"can't {verb} matrices of different element types")

    def __add__(self, other: "SquareMatrix") -> "SquareMatrix":
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        self._check_compatible(other, "add")
        rows = [[a + b for a, b in zip(ra, rb)] for ra, rb in zip(self._rows, other._rows)]
        return SquareMatrix(rows, self.element_type)

    def __mul__(self, other: "SquareMatrix") -> "SquareMatrix":
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        self._check_compatible(other, "multiply")
        zero = _convert(self.element_type, 0)
        columns = list(zip(*other._rows))
        rows = [
            [sum((a * b for a, b in zip(row, col)), zero) for col in columns]
            for row in self._rows
        ]
        return SquareMatrix(rows, self.element_type)

    def _check_index(self, i: int, j: int) -> None:
        if not (0 <= i < self.size and 0 <= j < self.size):
            raise IndexError("indices out of range")

    def __getitem__(self, index: tuple[int, int]) -> Number:
        i, j = index
        self._check_index(i, j)
        return self._rows[i][j]

    def __setitem__(self, index: tuple[int, int], value: Number) -> None:
        i, j = index
        self._check_index(i, j)
        self._rows[i][j] = _convert(self.element_type, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self.element_type is other.element_type and self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def main_diag_sum(self) -> Number:
        """Sum of the elements on the main diagonal."""
        zero = _convert(self.element_type, 0)
        return sum((row[i] for i, row in enumerate(self._rows)), zero)

    def secondary_diag_sum(self) -> Number:
        """Sum of the elements on the anti-diagonal."""
        zero = _convert(self.element_type, 0)
        return sum((row[i] for i, row in enumerate(reversed(self._rows))), zero)

    def swap_rows(self, row1: int, row2: int) -> None:
        """Exchange two rows in place."""
        self._check_index(row1, row2)
        self._rows[row1], self._rows[row2] = self._rows[row2], self._rows[row1]

    def swap_columns(self, col1: int, col2: int) -> None:
        """Exchange two columns in place."""
        self._check_index(col1, col2)
        for row in self._rows:
            row[col1], row[col2] = row[col2], row[col1]

    def format(self) -> str:
        """Render the matrix as bracketed rows with right-aligned columns."""
        cells = [[_format_element(self.element_type, v) for v in row] for row in self._rows]
        width = max((len(c) for row in cells for c in row), default=0)
        lines = ("[" + ", ".join(c.rjust(width) for c in row) + "]" for row in cells)
        return "[" + ",\n ".join(lines) + "]"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"SquareMatrix({self._rows!r}, {self.element_type})"


def read_matrices(text: str) -> tuple[SquareMatrix, SquareMatrix]:
    """Read two matrices sharing a header of size and type flag from text.

    Elements pass through their printed form, so floating-point values keep
    six decimal places.
    """
    tokens = iter(text.split())
    try:
        size_token = next(tokens)
        type_token = next(tokens)
    except StopIteration:
        raise MatrixError("missing matrix size or type flag") from None
    size = _parse_count(size_token, "matrix size")
    element_type = _parse_type(type_token)
    header = [str(size), str(element_type.value)]

    def take() -> list[str]:
        out = []
        for _ in range(size * size):
            try:
                token = next(tokens)
            except StopIteration:
                raise MatrixError("not enough matrix elements") from None
            out.append(_format_element(element_type, _parse_element(element_type, token)))
        return out

    first = SquareMatrix.from_tokens(header + take())
    second = SquareMatrix.from_tokens(header + take())
    return first, second


def read_matrices_file(path: Union[str, "PathLike[str]"]) -> tuple[SquareMatrix, SquareMatrix]:
    """Read two matrices from the file at path."""
    with open(path, encoding="utf-8") as handle:
        return read_matrices(handle.read())