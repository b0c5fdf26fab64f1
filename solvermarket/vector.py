"""Dense vectors read from Matrix Market coordinate files with a single column."""

from __future__ import annotations

import logging
import os
from typing import Iterable

import numpy as np

from .errors import MtxReaderError, MtxReaderStatus

logger = logging.getLogger(__name__)

_BANNER = "%%MatrixMarket"
_SYMMETRIES = ("general", "symmetric")


def _check_header(line: str) -> None:
    fields = line.split() + [""] * 5
    _banner, obj, fmt, _field, symmetry = fields[:5]
    if obj != "matrix" or fmt != "coordinate":
        raise MtxReaderError(
            MtxReaderStatus.UNSUPPORTED_OBJECT,
            "Only 'matrix coordinate' format supported.",
        )
    if symmetry not in _SYMMETRIES:
        raise MtxReaderError(
            MtxReaderStatus.UNSUPPORTED_MATRIX_TYPE,
            f"Unsupported matrix type: {symmetry}",
        )


def _check_size(nrows: int, ncols: int, declared_nnz: int) -> None:
    if ncols != 1:
        raise MtxReaderError(
            MtxReaderStatus.NOT_A_VECTOR, f"Not a vector (ncols = {ncols})"
        )
    if nrows != declared_nnz:
        raise MtxReaderError(
            MtxReaderStatus.NOT_A_VECTOR,
            f"Not a vector (nrows = {nrows} != nnz = {declared_nnz})",
        )


def _check_entry(i: int, j: int, nrows: int) -> None:
    if not 0 <= i < nrows:
        raise MtxReaderError(
            MtxReaderStatus.OUT_OF_BOUND_ROW_INDEX, f"Invalid row index {i}"
        )
    if j != 1:
        raise MtxReaderError(
            MtxReaderStatus.OUT_OF_BOUND_COL_INDEX, f"Invalid col index != 1 {j}"
        )


def _parse_lines(lines: Iterable[str]):
    """Return the number of rows and the 0-based (row, value) entries."""
    header_found = False
    nrows = None
    entries = []
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        if not header_found:
            if line.startswith(_BANNER):
                _check_header(line)
                header_found = True
            continue
        if line.startswith("%"):
            continue
        fields = line.split()
        try:
            if nrows is None:
                size = (int(fields[0]), int(fields[1]), int(fields[2]))
            else:
                i, j, value = int(fields[0]) - 1, int(fields[1]), float(fields[2])
        except (IndexError, ValueError) as exc:
            raise ValueError(f"Malformed Matrix Market line: {line!r}") from exc
        if nrows is None:
            _check_size(*size)
            nrows = size[0]
        else:
            _check_entry(i, j, nrows)
            entries.append((i, value))

    if not header_found or nrows is None:
        raise MtxReaderError(
            MtxReaderStatus.WRONG_HEADER_OR_NO_HEADER,
            "Invalid Matrix Market header or size line.",
        )
    return nrows, entries


class Vector:
    """A dense vector with host ``values`` and a ``device_values`` copy."""

    def __init__(self, n=None, value=0.0, dtype=np.float64):
        self.dtype = np.dtype(dtype)
        self._allocated = False
        self.values = np.zeros(0, dtype=self.dtype)
        self.device_values = np.zeros(0, dtype=self.dtype)
        if n is not None:
            self._allocate(n)
            self.values.fill(value)

    def _allocate(self, n: int) -> None:
        n = int(n)
        if n < 0:
            raise ValueError(f"Vector size must be non-negative, got {n}")
        self.values = np.zeros(n, dtype=self.dtype)
        self.device_values = np.zeros(n, dtype=self.dtype)
        self._allocated = True

    @classmethod
    def from_file(cls, filename, dtype=np.float64):
        """Build a vector from a single-column Matrix Market file."""
        vector = cls(dtype=dtype)
        vector.read_matrix_market_file(filename)
        return vector

    @property
    def n(self) -> int:
        return len(self.values)

    @property
    def nnz(self) -> int:
        """Same as ``n``: zeros are kept in a dense vector."""
        return len(self.values)

    def read_matrix_market_file(self, filename):
        """Fill the vector from a file; raise MtxReaderError on any problem."""
        try:
            handle = open(os.fspath(filename), encoding="utf-8")
        except OSError as exc:
            raise MtxReaderError(
                MtxReaderStatus.FILE_NOT_FOUND, f"Could not open file: {filename}"
            ) from exc
        logger.info("Reading file %s", filename)
        with handle:
            nrows, entries = _parse_lines(handle)

        self._allocate(nrows)
        for i, value in entries:
            self.values[i] = value
        logger.info(
            "Successfully read vector with %d entries, %d non-zeros",
            nrows,
            len(entries),
        )

    def send_to_device(self):
        """Copy the host values into the device values."""
        if not self._allocated:
            raise RuntimeError("Cannot send to device a vector that has not been allocated")
        np.copyto(self.device_values, self.values)
        logger.info("Values successfully sent to device")

    def __len__(self):
        return len(self.values)