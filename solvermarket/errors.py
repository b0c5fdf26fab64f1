"""Status codes and the exception raised by the Matrix Market readers."""

from __future__ import annotations

from enum import IntEnum


class MtxReaderStatus(IntEnum):
    """Outcome of reading a Matrix Market file."""

    SUCCESS = 0
    FILE_NOT_FOUND = 1
    MEM_ALLOC_FAILED = 2
    WRONG_NNZ = 3
    UPPER_VIEW_BUT_LOWER_FOUND = 4
    LOWER_VIEW_BUT_UPPER_FOUND = 5
    OUT_OF_BOUND_ROW_INDEX = 6
    OUT_OF_BOUND_COL_INDEX = 7
    UNSUPPORTED_OBJECT = 8
    UNSUPPORTED_MATRIX_TYPE = 9
    TYPE_READ_IS_NOT_TYPE_GIVEN = 10
    NOT_A_VECTOR = 11
    WRONG_HEADER_OR_NO_HEADER = 12


class MtxReaderError(Exception):
    """Raised when a Matrix Market file cannot be read; carries a status."""

    def __init__(self, status, message):
        super().__init__(message)
        self.status = MtxReaderStatus(status)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.status.name}, {self.message!r})"