"""Line codec for response files.

A response file holds one argument per line. Arguments may themselves
contain newlines, so backslash and newline are escaped:

- ``\\`` is written as ``\\\\``
- a newline is written as ``\\n`` (backslash, letter n)

Every other character is written verbatim.

INVARIANT: ``decode_arg(encode_arg(a)) == a`` for every string ``a``.
"""

from __future__ import annotations

from collections.abc import Iterable

from responsefile.domain.errors import UnsupportedEscapeError

# Codec for the bytes on disk. surrogateescape lets arguments that came
# from undecodable OS bytes (see sys.argv) round-trip unchanged.
FILE_ENCODING = "utf-8"
FILE_ERRORS = "surrogateescape"


def encode_arg(arg: str) -> str:
    """Encode one argument as a single response-file line."""
    if "\\" not in arg and "\n" not in arg:
        return arg
    out: list[str] = []
    for ch in arg:
        if ch == "\\":
            out.append("\\\\")
        elif ch == "\n":
            out.append("\\n")
        else:
            out.append(ch)
    return "".join(out)


def decode_arg(line: str) -> str:
    """Decode one response-file line back into its argument.

    Raises:
        UnsupportedEscapeError: On a backslash followed by anything other
            than ``\\`` or ``n``, or a backslash at the very end of the line.
    """
    if "\\" not in line:
        return line
    out: list[str] = []
    escaping = False
    for ch in line:
        if escaping:
            if ch == "\\":
                out.append("\\")
            elif ch == "n":
                out.append("\n")
            else:
                raise UnsupportedEscapeError("\\" + ch)
            escaping = False
        elif ch == "\\":
            escaping = True
        else:
            out.append(ch)
    if escaping:
        raise UnsupportedEscapeError("\\")
    return "".join(out)


def render_lines(args: Iterable[str]) -> str:
    """Render a whole response file: every encoded argument plus a newline."""
    return "".join(f"{encode_arg(arg)}\n" for arg in args)


def split_lines(content: str) -> list[str]:
    """Split file content into encoded lines, ready for :func:`decode_arg`.

    An empty file has no lines; a final newline does not start a new one.
    One trailing ``\\r`` is stripped from each line so CRLF files work.
    """
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]
