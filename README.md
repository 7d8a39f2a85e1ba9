# sqmatrix

Square matrices of integers or floating-point numbers, read in pairs from a
plain text file. The package supports addition and multiplication, main and
secondary diagonal sums, row and column swaps, and element access.

## Input format

A file holds whitespace-separated tokens:

```
<size> <type flag> <size*size elements of A> <size*size elements of B>
```

The type flag is `0` for integers and `1` for floating-point numbers. Elements
are given row by row. For example, here is a pair of 2×2 integer matrices:

```
2 0
1 2
3 4
5 6
7 8
```

When read, floating-point elements are rounded to six decimal places. A
size of 0, an unknown type flag, a token that is not a number, or too few
elements raises `MatrixError`.

## Command line

```
sqmatrix [path]
```

The same command is available as `python -m sqmatrix.cli [path]`.

It reads the two matrices from `path`. Without a path it reads
`Lab9_Test_File.txt` in the current directory. It then prints a report that
shows:

- both matrices, with their size and type flag;
- their sum and their product;
- the main and secondary diagonal sums of each;
- the matrices after some fixed operations: rows 0 and 2 of A are swapped, and
  rows 1 and 3 of B; columns 1 and 2 of A are swapped, and columns 0 and 3 of
  B; A[2][1] is set to 1633 and B[0][3] to 1483.

If one of these operations uses an index that is out of range for the
matrices, a warning goes to standard error and the report goes on. If the file
cannot be opened or its contents are malformed, an error goes to standard
error and the exit status is 1.

## Library use

```python
from sqmatrix.matrices import ElementType, SquareMatrix, read_matrices

a, b = read_matrices("2 0  1 2 3 4  5 6 7 8")
print(a + b)
print(a * b)
print(a.main_diag_sum(), a.secondary_diag_sum())

a.swap_rows(0, 1)
a.swap_columns(0, 1)
a[1, 0] = 42
print(a[1, 0], a.size)

m = SquareMatrix([[1.5, 2.0], [0.0, 1.0]], ElementType.DOUBLE)
print(m.format())
```

- `SquareMatrix(rows, element_type)` builds a matrix from a list of rows. Each
  value is converted to the element type. `MatrixError` is raised if the rows
  are not square.
- `SquareMatrix.from_tokens(tokens)` builds one matrix from a size token, a
  type flag token and the elements.
- `read_matrices(text)` and `read_matrices_file(path)` read a pair of matrices
  in the format above.
- `+` and `*` return new matrices. They raise `MatrixError` if the operands
  differ in size or element type.
- `m[i, j]` reads or writes an element. `swap_rows` and `swap_columns` change
  the matrix in place. An index out of range raises `IndexError`.
- `format()` (also `str(m)`) renders the matrix as bracketed rows with
  right-aligned columns. Floating-point values are shown with six decimal
  places.
- `ElementType.INT` and `ElementType.DOUBLE` have the values 0 and 1, the type
  flags of the file format.

`report(a, b)` in `sqmatrix.cli` returns the command's report as a string.
Like the command, it swaps rows and columns of `a` and `b` and updates one
element of each in place.