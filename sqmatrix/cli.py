"""Command-line report over two square matrices read from a text file."""

from __future__ import annotations

import sys
from typing import Callable, Optional, Sequence

from .matrices import ElementType, MatrixError, SquareMatrix, read_matrices_file

DEFAULT_FILE = "Lab9_Test_File.txt"

_RULE = "================================="
_INT_MIN = -(2**31)
_DOUBLE_MIN = 2.2250738585072014e-308


def _heading(title: str) -> str:
    return f"{_RULE} {title} {_RULE}"


def _fmt(matrix: SquareMatrix, value) -> str:
    if matrix.element_type is ElementType.INT:
        return str(value)
    return f"{value:.6f}"


def _warn(where: str, message: str) -> None:
    print(f"Error in '{where}': {message}", file=sys.stderr)


def _attempt(action: Callable[[], None], where: str) -> None:
    try:
        action()
    except IndexError:
        _warn(where, "Indices out of range.")


def _get(matrix: SquareMatrix, i: int, j: int):
    try:
        return matrix[i, j]
    except IndexError:
        _warn("get_value", "Indices out of range.")
        return _INT_MIN if matrix.element_type is ElementType.INT else _DOUBLE_MIN


def _set(matrix: SquareMatrix, i: int, j: int, value) -> None:
    try:
        matrix[i, j] = value
    except IndexError:
        _warn("set_value", "Indices out of range.")


def report(a: SquareMatrix, b: SquareMatrix) -> str:
    """Exercise every matrix operation on a and b and return the printed report.

    Like the operations it shows, the report swaps rows and columns of a and b
    and updates one element of each in place.
    """
    total = a + b
    product = a * b
    out: list[str] = []
    add = out.append

    add(_heading("TYPE FLAGS"))
    add("(type_flag == 0) -------> int")
    add("(type_flag == 1) -------> double")
    add("")

    add(_heading("QUESTION 1"))
    add("------------ FIRST MATRIX (A) ------------")
    add(f"A.size = {a.size}")
    add(f"A.type_flag = {a.element_type.value}")
    add("A.array = ")
    add(a.format())
    add("")
    add("------------ SECOND MATRIX (B) ------------")
    add(f"B.size = {a.size}")
    add(f"B.type_flag = {b.element_type.value}")
    add("B.array = ")
    add(b.format())
    add("")

    add(_heading("QUESTION 2"))
    add("------------ SUM OF A AND B ------------")
    add("AplusB.array = ")
    add(total.format())
    add("")

    add(_heading("QUESTION 3"))
    add("------------ PRODUCT OF A AND B ------------")
    add("AtimesB.array = ")
    add(product.format())
    add("")

    add(_heading("QUESTION 4"))
    for name, m in (("A", a), ("B", b)):
        add(f"------------ DIAGONAL SUMS OF {name} ------------")
        add(f"{name}'s main diagonal sum = {_fmt(m, m.main_diag_sum())}")
        add(f"{name}'s secondary diagonal sum = {_fmt(m, m.secondary_diag_sum())}")
        add("")

    add(_heading("QUESTION 5"))
    for name, m, (r1, r2) in (("A", a, (0, 2)), ("B", b, (1, 3))):
        add(f"------------ SWAPPING ROWS OF {name} ------------")
        _attempt(lambda m=m, r1=r1, r2=r2: m.swap_rows(r1, r2), "swap_rows")
        add(f"===> Swapped rows {r1} and {r2} of {name}.")
        add(f"{name}.array = ")
        add(m.format())
        add("")

    add(_heading("QUESTION 6"))
    for name, m, (c1, c2) in (("A", a, (1, 2)), ("B", b, (0, 3))):
        add(f"------------ SWAPPING COLUMNS OF {name} ------------")
        _attempt(lambda m=m, c1=c1, c2=c2: m.swap_columns(c1, c2), "swap_columns")
        add(f"===> Swapped columns {c1} and {c2} of {name}.")
        add(f"{name}.array = ")
        add(m.format())
        add("")

    add(_heading("QUESTION 7"))
    for name, m, (i, j), new_value in (("A", a, (2, 1), 1633), ("B", b, (0, 3), 1483)):
        add(f"------------ UPDATING ELEMENTS OF {name} ------------")
        add(f"{name}[{i}][{j}] before updating = {_fmt(m, _get(m, i, j))}")
        _set(m, i, j, new_value)
        add(f"===> Updated value of {name}[{i}][{j}] to {_fmt(m, _get(m, i, j))}")
        add(f"{name}.array = ")
        add(m.format())
        add("")

    return "\n".join(out) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read two matrices from the named file (or the default one) and print the report."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else DEFAULT_FILE
    try:
        a, b = read_matrices_file(path)
    except OSError:
        if args:
            _warn("main()", "Could not open specified file.")
        else:
            _warn("main()", f"Could not open default file '{DEFAULT_FILE}'.")
        return 1
    except MatrixError as exc:
        _warn("main()", str(exc))
        return 1
    sys.stdout.write(report(a, b))
    return 0


if __name__ == "__main__":
    sys.exit(main())