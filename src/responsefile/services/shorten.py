"""Shortening — collapse a long argument list into a single ``@path``.

The temporary file belongs to the caller. :func:`shorten` hands back a
:class:`ReleaseHandle` that must be called once the shortened list has
been consumed, on every code path::

    with shorten(args, ShortenOptions(arg_length_limit=-1)) as short_args:
        subprocess.run([tool, *short_args], check=True)

INVARIANT: ``expand(shorten(args).args) == args`` for every ``args``.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import NamedTuple

from responsefile.config.models import ShortenOptions
from responsefile.domain.codec import FILE_ENCODING, FILE_ERRORS, render_lines
from responsefile.domain.errors import UnencodableArgumentError
from responsefile.infrastructure.filesystem import (
    create_temp_file,
    remove_quietly,
    write_and_close,
)

logger = logging.getLogger(__name__)


class ReleaseHandle:
    """Deletes the response file created by :func:`shorten`.

    Calling the handle more than once is harmless: the file is removed at
    most once. A handle without a path is a no-op, returned when no
    response file was needed.
    """

    def __init__(self, path: str | None = None) -> None:
        self.path = path
        self._released = path is None

    @property
    def released(self) -> bool:
        return self._released

    def __call__(self) -> None:
        if self._released:
            return
        self._released = True
        if self.path is not None:
            remove_quietly(self.path)

    def __repr__(self) -> str:
        return f"ReleaseHandle(path={self.path!r}, released={self._released})"


class Shortened(NamedTuple):
    """Result of :func:`shorten`: the argument list to use and its release handle.

    Usable as a context manager yielding ``args`` and releasing on exit.
    """

    args: list[str]
    release: ReleaseHandle

    @property
    def uses_response_file(self) -> bool:
        return self.release.path is not None

    def __enter__(self) -> list[str]:
        return self.args

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()


def arg_byte_length(args: list[str]) -> int:
    """Total encoded length of *args*, without separators.

    Raises:
        UnencodableArgumentError: An argument holds a lone surrogate that
            the file codec cannot write.
    """
    total = 0
    for index, arg in enumerate(args):
        try:
            total += len(arg.encode(FILE_ENCODING, FILE_ERRORS))
        except UnicodeEncodeError as exc:
            raise UnencodableArgumentError(index, arg, exc.reason) from exc
    return total


def shorten(args: list[str], options: ShortenOptions | None = None) -> Shortened:
    """Produce an argument list which uses a response file if *args* is too long.

    When no response file is needed, *args* itself is returned together
    with a no-op release handle. Otherwise every argument is encoded into
    a new temporary file and the result is ``["@<path>"]``.

    Raises:
        UnencodableArgumentError: An argument cannot be written as UTF-8.
        TempFileCreateError: The temporary file could not be created.
        TempFileWriteError: Writing failed; the file has been removed.
        TempFileCloseError: Closing failed; the file has been removed.
    """
    opts = options or ShortenOptions()

    arg_len = arg_byte_length(args)
    if arg_len == 0 or arg_len <= opts.effective_limit:
        return Shortened(args, ReleaseHandle())

    data = render_lines(args).encode(FILE_ENCODING, FILE_ERRORS)
    handle, path = create_temp_file(opts.prefix, opts.temp_dir)
    write_and_close(handle, path, data)
    logger.debug(
        "Shortened %d arguments (%d bytes, limit %d) into %s",
        len(args),
        arg_len,
        opts.effective_limit,
        path,
    )
    return Shortened([f"@{path}"], ReleaseHandle(path))
