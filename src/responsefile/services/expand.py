"""Expansion — replace ``@path`` arguments with the arguments in those files.

Response files may reference further response files; those are expanded
in place, in file order. With ``ExpandOptions.max_depth`` unset there is
no bound on nesting, so a file that references itself recurses until
Python's recursion limit is hit.
"""

from __future__ import annotations

import logging

from responsefile.config.models import ExpandOptions
from responsefile.domain.codec import decode_arg, split_lines
from responsefile.domain.errors import NestingTooDeepError, UnsupportedEscapeError
from responsefile.infrastructure.filesystem import read_response_file
from responsefile.services.telemetry import trace_span

logger = logging.getLogger(__name__)

REFERENCE_PREFIX = "@"


def expand(args: list[str], options: ExpandOptions | None = None) -> list[str]:
    """Produce an argument list with every response file replaced by its arguments.

    *args* itself is returned when it holds no ``@path`` argument;
    otherwise a new list is built. Any failure aborts the whole call.

    Raises:
        ResponseFileReadError: A referenced file could not be read.
        UnsupportedEscapeError: A line held a malformed escape.
        NestingTooDeepError: Nesting went past ``options.max_depth``.
    """
    return _expand(args, options or ExpandOptions(), depth=0)


def _expand(args: list[str], opts: ExpandOptions, *, depth: int) -> list[str]:
    expanded: list[str] | None = None
    for i, arg in enumerate(args):
        if not arg.startswith(REFERENCE_PREFIX):
            if expanded is not None:
                expanded.append(arg)
            continue
        if expanded is None:
            expanded = list(args[:i])
        expanded.extend(_read_args(arg[len(REFERENCE_PREFIX) :], opts, depth=depth))
    if expanded is None:
        return args
    return expanded


def _read_args(path: str, opts: ExpandOptions, *, depth: int) -> list[str]:
    """Decode the arguments held in *path*, expanding nested references."""
    if opts.max_depth is not None and depth > opts.max_depth:
        raise NestingTooDeepError(path, opts.max_depth)

    with trace_span("read_response_file", path=path, depth=depth) as span:
        content = read_response_file(path)
        if span:
            span.fields["chars"] = len(content)

    result: list[str] = []
    for lineno, line in enumerate(split_lines(content), start=1):
        try:
            arg = decode_arg(line)
        except UnsupportedEscapeError as exc:
            raise UnsupportedEscapeError(exc.sequence, path=path, line=lineno) from exc
        if arg.startswith(REFERENCE_PREFIX):
            logger.debug("Nested response file %s in %s:%d", arg, path, lineno)
            result.extend(_expand([arg], opts, depth=depth + 1))
        else:
            result.append(arg)
    return result
