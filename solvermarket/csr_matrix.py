"""Square sparse matrices in CSR form, read from Matrix Market coordinate files."""

from __future__ import annotations

import logging
import os
from enum import Enum
from typing import Iterable

import numpy as np

from .errors import MtxReaderError, MtxReaderStatus

logger = logging.getLogger(__name__)

_BANNER = "%%MatrixMarket"


class MatrixView(Enum):
    """Which part of the matrix the stored entries are meant to describe."""

    NONE = 0
    FULL = 1
    LOWER = 2
    UPPER = 3


class MatrixType(Enum):
    """Symmetry declared in the Matrix Market header."""

    NONE = 0
    GENERAL = 1
    SYMMETRIC = 2


_SYMMETRIES = {"general": MatrixType.GENERAL, "symmetric": MatrixType.SYMMETRIC}


def _parse_header(line: str, requested: MatrixType) -> MatrixType:
    fields = line.split() + [""] * 5
    _banner, obj, fmt, _field, symmetry = fields[:5]
    if obj != "matrix" or fmt != "coordinate":
        raise MtxReaderError(
            MtxReaderStatus.UNSUPPORTED_OBJECT,
            "Only 'matrix coordinate' format is supported.",
        )
    try:
        read_type = _SYMMETRIES[symmetry]
    except KeyError:
        raise MtxReaderError(
            MtxReaderStatus.UNSUPPORTED_MATRIX_TYPE,
            f"Unsupported matrix type: {symmetry}",
        ) from None
    if requested is not MatrixType.NONE and requested is not read_type:
        raise MtxReaderError(
            MtxReaderStatus.TYPE_READ_IS_NOT_TYPE_GIVEN,
            f"Matrix type read in mtx header: {read_type.name} "
            f"but reader was called with type {requested.name}",
        )
    logger.info("Matrix type read in mtx header: %s", read_type.name)
    return read_type


def _parse_lines(lines: Iterable[str], requested: MatrixType):
    """Return the header type, the size line and the 0-based entries."""
    read_type = None
    shape = None
    entries = []
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        if read_type is None:
            if line.startswith(_BANNER):
                read_type = _parse_header(line, requested)
            continue
        if line.startswith("%"):
            continue
        fields = line.split()
        try:
            if shape is None:
                shape = (int(fields[0]), int(fields[1]), int(fields[2]))
                logger.info("n0= %d, n1= %d, nnz= %d", *shape)
            else:
                entries.append((int(fields[0]) - 1, int(fields[1]) - 1, float(fields[2])))
        except (IndexError, ValueError) as exc:
            raise ValueError(f"Malformed Matrix Market line: {line!r}") from exc
    return read_type, shape, entries


class CSRMatrix:
    """A square sparse matrix in compressed sparse row form.

    Host arrays are ``offsets``, ``columns`` and ``values``; ``send_to_device``
    copies them into the ``device_*`` arrays.
    """

    def __init__(self, dtype=np.float64, index_dtype=np.int64):
        self.dtype = np.dtype(dtype)
        self.index_dtype = np.dtype(index_dtype)
        self.n = 0
        self.nnz = 0
        self.view = MatrixView.NONE
        self.matrix_type = MatrixType.NONE
        self.offsets = np.zeros(0, dtype=self.index_dtype)
        self.columns = np.zeros(0, dtype=self.index_dtype)
        self.values = np.zeros(0, dtype=self.dtype)
        self.device_offsets = np.zeros(0, dtype=self.index_dtype)
        self.device_columns = np.zeros(0, dtype=self.index_dtype)
        self.device_values = np.zeros(0, dtype=self.dtype)
        self._allocated = False

    @classmethod
    def from_file(
        cls,
        filename,
        view,
        matrix_type=MatrixType.NONE,
        dtype=np.float64,
        index_dtype=np.int64,
    ):
        """Build a matrix from a Matrix Market coordinate file."""
        matrix = cls(dtype=dtype, index_dtype=index_dtype)
        matrix.read_matrix_market_file(filename, view, matrix_type)
        return matrix

    def read_matrix_market_file(self, filename, view, matrix_type=MatrixType.NONE):
        """Fill the matrix from a file; raise MtxReaderError on any problem."""
        view = MatrixView(view)
        matrix_type = MatrixType(matrix_type)
        try:
            handle = open(os.fspath(filename), encoding="utf-8")
        except OSError as exc:
            raise MtxReaderError(
                MtxReaderStatus.FILE_NOT_FOUND, f"Could not open file {filename}"
            ) from exc
        logger.info("Reading file %s", filename)
        with handle:
            read_type, shape, entries = _parse_lines(handle, matrix_type)

        if read_type is None:
            raise MtxReaderError(
                MtxReaderStatus.WRONG_HEADER_OR_NO_HEADER, "No header found in mtx file."
            )
        if shape is None:
            raise MtxReaderError(
                MtxReaderStatus.WRONG_HEADER_OR_NO_HEADER, "No size line found in mtx file."
            )
        n, _ncols, declared_nnz = shape
        nnz = len(entries)
        if nnz != declared_nnz:
            raise MtxReaderError(
                MtxReaderStatus.WRONG_NNZ,
                f"{nnz} entries in the mtx file, {declared_nnz} announced in the header",
            )

        entries.sort(key=lambda entry: (entry[0], entry[1]))

        found_lower = any(i > j for i, j, _ in entries)
        found_upper = any(i < j for i, j, _ in entries)
        if found_lower and view is MatrixView.UPPER:
            raise MtxReaderError(
                MtxReaderStatus.UPPER_VIEW_BUT_LOWER_FOUND,
                "mview is upper, but lower elements found",
            )
        if found_upper and view is MatrixView.LOWER:
            raise MtxReaderError(
                MtxReaderStatus.LOWER_VIEW_BUT_UPPER_FOUND,
                "mview is lower, but upper elements found",
            )
        if not (found_upper and found_lower) and view is MatrixView.FULL:
            logger.warning("mview is full, but only lower or upper elements found")

        for i, j, _ in entries:
            if not 0 <= i < n:
                raise MtxReaderError(
                    MtxReaderStatus.OUT_OF_BOUND_ROW_INDEX, f"Invalid row index {i}"
                )
            if not 0 <= j < n:
                raise MtxReaderError(
                    MtxReaderStatus.OUT_OF_BOUND_COL_INDEX, f"Invalid col index {j}"
                )

        rows = np.fromiter((i for i, _, _ in entries), dtype=np.int64, count=nnz)
        counts = np.bincount(rows, minlength=n)
        offsets = np.zeros(n + 1, dtype=self.index_dtype)
        np.cumsum(counts, out=offsets[1:])
        columns = np.fromiter((j for _, j, _ in entries), dtype=self.index_dtype, count=nnz)
        values = np.fromiter((v for _, _, v in entries), dtype=self.dtype, count=nnz)

        for row in np.flatnonzero(counts == 0):
            logger.warning("Row %d is empty", row)

        self.n = n
        self.nnz = nnz
        self.view = view
        self.matrix_type = read_type
        self.offsets = offsets
        self.columns = columns
        self.values = values
        self.device_offsets = np.zeros_like(offsets)
        self.device_columns = np.zeros_like(columns)
        self.device_values = np.zeros_like(values)
        self._allocated = True
        logger.info("Read completed with %d nonzeros", nnz)

    def send_to_device(self):
        """Copy the host arrays into the device arrays."""
        if not self._allocated:
            raise RuntimeError(
                "Cannot send to device a CSR matrix that has not been allocated"
            )
        np.copyto(self.device_offsets, self.offsets)
        np.copyto(self.device_columns, self.columns)
        np.copyto(self.device_values, self.values)
        logger.info("Values successfully sent to device")

    def is_full(self):
        return self.view is MatrixView.FULL

    def is_lower(self):
        return self.view is MatrixView.LOWER

    def is_upper(self):
        return self.view is MatrixView.UPPER

    def is_general(self):
        return self.matrix_type is MatrixType.GENERAL

    def is_symmetric(self):
        return self.matrix_type is MatrixType.SYMMETRIC

    def has_valid_view(self):
        return self.view is not MatrixView.NONE

    def has_valid_type(self):
        return self.matrix_type is not MatrixType.NONE