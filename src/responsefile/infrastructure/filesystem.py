"""Filesystem operations for response files.

Thin wrappers around the OS primitives the shortener and expander need.
Each primitive translates ``OSError`` into the matching
:class:`~responsefile.domain.errors.ResponseFileError` so callers deal
with a single error family. Temporary file names are generated by
:func:`tempfile.mkstemp`, which guarantees uniqueness across concurrent
callers.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import BinaryIO

from responsefile.domain.codec import FILE_ENCODING, FILE_ERRORS
from responsefile.domain.errors import (
    ResponseFileReadError,
    TempFileCloseError,
    TempFileCreateError,
    TempFileWriteError,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Temporary files
# ---------------------------------------------------------------------------


def create_temp_file(prefix: str, directory: Path | None = None) -> tuple[BinaryIO, str]:
    """Create a new, uniquely named temporary file opened for binary writing.

    Returns ``(handle, path)``. The caller owns both.
    """
    try:
        fd, path = tempfile.mkstemp(prefix=prefix, dir=directory)
    except OSError as exc:
        msg = f"cannot create response file: {exc}"
        raise TempFileCreateError(msg) from exc
    logger.debug("Created response file %s", path)
    return os.fdopen(fd, "wb"), path


def write_and_close(handle: BinaryIO, path: str, data: bytes) -> None:
    """Write *data* to *handle* and close it.

    On failure the file is removed before the error propagates.
    """
    try:
        handle.write(data)
    except OSError as exc:
        try:
            handle.close()
        except OSError:
            logger.debug("Closing %s after a failed write also failed", path, exc_info=True)
        remove_quietly(path)
        msg = f"cannot write response file: {exc}"
        raise TempFileWriteError(msg, path=path) from exc
    try:
        handle.close()
    except OSError as exc:
        remove_quietly(path)
        msg = f"cannot close response file: {exc}"
        raise TempFileCloseError(msg, path=path) from exc


def remove_quietly(path: str) -> None:
    """Best-effort removal. A failure is logged, never raised."""
    try:
        os.remove(path)
    except OSError:
        logger.warning("Could not remove response file %s", path, exc_info=True)
    else:
        logger.debug("Removed response file %s", path)


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------


def read_response_file(path: str) -> str:
    """Read the whole response file at *path* as text."""
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        msg = f"cannot read response file: {exc}"
        raise ResponseFileReadError(msg, path=path) from exc
    logger.debug("Read response file %s (%d bytes)", path, len(raw))
    return raw.decode(FILE_ENCODING, FILE_ERRORS)
