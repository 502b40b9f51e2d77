"""Typed failures raised while shortening or expanding argument lists.

Every error carries a stable ``code`` (the same code ends up in
``ServiceError.code``), the path involved when there is one, and a
``detail`` dict for structured output.
"""

from __future__ import annotations

from typing import Any


class ResponseFileError(Exception):
    """Base class for all response-file failures."""

    code = "RESPONSE_FILE_ERROR"

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    @property
    def detail(self) -> dict[str, Any]:
        if self.path is None:
            return {}
        return {"path": self.path}


class TempFileCreateError(ResponseFileError):
    code = "TEMP_FILE_CREATE_FAILED"


class TempFileWriteError(ResponseFileError):
    code = "TEMP_FILE_WRITE_FAILED"


class TempFileCloseError(ResponseFileError):
    code = "TEMP_FILE_CLOSE_FAILED"


class ResponseFileReadError(ResponseFileError):
    code = "RESPONSE_FILE_READ_FAILED"


class UnsupportedEscapeError(ResponseFileError):
    """A line holds a backslash escape other than ``\\\\`` or ``\\n``.

    Attributes:
        sequence: The offending sequence, e.g. ``"\\\\t"``. A backslash
            left dangling at the end of a line is reported as ``"\\\\"``.
        line: 1-based line number within *path*, when known.
    """

    code = "UNSUPPORTED_ESCAPE_SEQUENCE"

    def __init__(
        self,
        sequence: str,
        *,
        path: str | None = None,
        line: int | None = None,
    ) -> None:
        msg = f"unsupported escape sequence: {sequence!r}"
        if path is not None:
            where = f"{path}:{line}" if line is not None else path
            msg = f"{where}: {msg}"
        super().__init__(msg, path=path)
        self.sequence = sequence
        self.line = line

    @property
    def detail(self) -> dict[str, Any]:
        detail = {**super().detail, "sequence": self.sequence}
        if self.line is not None:
            detail["line"] = self.line
        return detail


class NestingTooDeepError(ResponseFileError):
    """Nested response files exceeded ``ExpandOptions.max_depth``."""

    code = "NESTING_TOO_DEEP"

    def __init__(self, path: str, max_depth: int) -> None:
        super().__init__(
            f"response file nesting exceeds max depth {max_depth}: {path}",
            path=path,
        )
        self.max_depth = max_depth

    @property
    def detail(self) -> dict[str, Any]:
        return {**super().detail, "max_depth": self.max_depth}


class UnencodableArgumentError(ResponseFileError):
    """An argument cannot be written as UTF-8.

    Only lone surrogates in U+DC80..U+DCFF (undecodable OS bytes) survive
    the file codec; any other lone surrogate lands here.
    """

    code = "ARGUMENT_NOT_ENCODABLE"

    def __init__(self, index: int, arg: str, reason: str) -> None:
        super().__init__(f"argument {index} cannot be encoded: {reason}: {arg!r}")
        self.index = index
        self.reason = reason

    @property
    def detail(self) -> dict[str, Any]:
        return {"index": self.index, "reason": self.reason}
