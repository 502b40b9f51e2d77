"""responsefile — shorten long argument lists into ``@path`` response files and expand them back.

Response files are newline-separated plaintext files which hold lists of
arguments. They are commonly used on systems with low argument length
limits, such as Windows, and are read by programs like GCC, Go's
compiler and linker, Windows toolchains, and ninja. An argument starting
with ``@`` names such a file; backslash and newline inside an argument
are escaped with backslashes.
"""

from __future__ import annotations

from responsefile.config.models import DEFAULT_ARG_LENGTH_LIMIT, ExpandOptions, ShortenOptions
from responsefile.domain.codec import decode_arg, encode_arg
from responsefile.domain.errors import (
    NestingTooDeepError,
    ResponseFileError,
    ResponseFileReadError,
    TempFileCloseError,
    TempFileCreateError,
    TempFileWriteError,
    UnencodableArgumentError,
    UnsupportedEscapeError,
)
from responsefile.services.expand import expand
from responsefile.services.shorten import ReleaseHandle, Shortened, shorten

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_ARG_LENGTH_LIMIT",
    "ExpandOptions",
    "NestingTooDeepError",
    "ReleaseHandle",
    "ResponseFileError",
    "ResponseFileReadError",
    "ShortenOptions",
    "Shortened",
    "TempFileCloseError",
    "TempFileCreateError",
    "TempFileWriteError",
    "UnencodableArgumentError",
    "UnsupportedEscapeError",
    "__version__",
    "decode_arg",
    "encode_arg",
    "expand",
    "shorten",
]
