# solvermarket

Readers for Matrix Market (`.mtx`) coordinate files that produce compressed
sparse row (CSR) matrices and dense vectors as NumPy arrays, plus a small
helper that reports the timings of a linear-solver run.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Reading a sparse matrix

`solvermarket.csr_matrix.CSRMatrix` holds a square matrix. Only the
`matrix coordinate` format is accepted, with `general` or `symmetric`
symmetry. The first number of the size line is taken as the matrix size `n`.
Entries are sorted by row and then by column, and the 1-based indices of the
file become 0-based indices.

```python
from solvermarket.csr_matrix import CSRMatrix, MatrixView

matrix = CSRMatrix.from_file("system.mtx", MatrixView.FULL)
print(matrix.n, matrix.nnz)
print(matrix.offsets)   # row start positions, length n + 1
print(matrix.columns)   # column index of each stored entry
print(matrix.values)    # value of each stored entry
```

`from_file` and the constructor take `dtype` (default `numpy.float64`) for
the values and `index_dtype` (default `numpy.int64`) for offsets and
columns. An existing matrix can be filled with
`matrix.read_matrix_market_file(filename, view, matrix_type)`.

The `MatrixView` tells the reader what part of the matrix the file should
hold: `FULL`, `LOWER` or `UPPER`. Asking for `LOWER` when the file has
entries above the diagonal, or `UPPER` when it has entries below, is an
error. With `FULL`, a file holding only one triangle is accepted with a
logged warning. A `MatrixType` (`GENERAL` or `SYMMETRIC`) may be passed to
insist on the header's symmetry; by default (`MatrixType.NONE`) the type is
taken from the header. Symmetric files are stored as written: the missing
triangle is not filled in.

The matrix answers `is_full()`, `is_lower()`, `is_upper()`, `is_general()`,
`is_symmetric()`, `has_valid_view()` and `has_valid_type()`, and keeps the
view and type in its `view` and `matrix_type` attributes.

## Reading a vector

`solvermarket.vector.Vector` reads an `n x 1` coordinate file whose declared
entry count equals `n`. Every entry must be in column 1; rows not listed in
the file stay zero.

```python
from solvermarket.vector import Vector

rhs = Vector.from_file("rhs.mtx")
ones = Vector(len(rhs), 1.0)
print(rhs.values, rhs.n)
```

`Vector(n, value, dtype)` builds a vector of `n` copies of `value`;
`Vector()` builds an empty one that `read_matrix_market_file(filename)` can
fill.

## Host and device arrays

Both classes keep a second set of arrays (`device_offsets`,
`device_columns`, `device_values` for matrices, `device_values` for
vectors). `send_to_device()` copies the host arrays into them; these are
ordinary NumPy arrays. Calling it before anything has been allocated raises
`RuntimeError`.

## Errors

Every reading failure raises `solvermarket.errors.MtxReaderError`. Its
`status` attribute is a `MtxReaderStatus` member naming the cause, such as
`FILE_NOT_FOUND`, `UNSUPPORTED_OBJECT`, `UNSUPPORTED_MATRIX_TYPE`,
`TYPE_READ_IS_NOT_TYPE_GIVEN`, `WRONG_NNZ`, `NOT_A_VECTOR`,
`OUT_OF_BOUND_ROW_INDEX`, `OUT_OF_BOUND_COL_INDEX` or
`WRONG_HEADER_OR_NO_HEADER`. A line that cannot be parsed as numbers raises
`ValueError`.

```python
from solvermarket.csr_matrix import CSRMatrix, MatrixView
from solvermarket.errors import MtxReaderError, MtxReaderStatus

try:
    CSRMatrix.from_file("missing.mtx", MatrixView.FULL)
except MtxReaderError as exc:
    assert exc.status is MtxReaderStatus.FILE_NOT_FOUND
```

Progress and warnings (such as empty rows) are sent to the standard
`logging` module under the `solvermarket` logger names.

## Reporting solver runs

`solvermarket.output.solver_market_output(setup_time, solve_time, success,
argv, log_path="solver_output.log", stream=None)` writes a summary of a run
(the command line, whether it succeeded, setup time in seconds and solve
time in milliseconds) to `stream` (standard output by default) and appends
one line with the same facts to `log_path`. Times may be `datetime.timedelta`
objects or numbers of seconds. `format_report` and `format_log_line` return
the same text without writing anything.

## What this package does not do

It does not solve linear systems and has no command-line program: it reads
matrices and right-hand sides into arrays and formats timing reports, and
the solving itself is left to whatever solver you pass those arrays to.