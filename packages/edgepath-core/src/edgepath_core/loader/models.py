"""Errors raised while reading edge files."""

from __future__ import annotations


class EdgeFileError(Exception):
    """Wraps a read or parse failure with the file and line it came from."""

    def __init__(
        self,
        path: str,
        reason: str,
        line_number: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.path = path
        self.reason = reason
        self.line_number = line_number
        where = f"{path}:{line_number}" if line_number is not None else path
        super().__init__(f"{where}: {reason}")
        self.__cause__ = cause
