"""ResponseFileService — shorten, expand, and exec as ServiceResult operations.

The library functions raise; this layer catches
:class:`~responsefile.domain.errors.ResponseFileError` and reports it as
structured data so the CLI can route it to stderr with exit code 1.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from responsefile.config.models import ShortenOptions
from responsefile.domain.errors import ResponseFileError
from responsefile.services.base import BaseService
from responsefile.services.expand import expand
from responsefile.services.result import ServiceError, ServiceResult
from responsefile.services.shorten import arg_byte_length, shorten
from responsefile.services.telemetry import traced


class ResponseFileService(BaseService):
    """Response-file operations configured from :class:`ResponseFileSettings`."""

    def _shorten_options(self, limit: int | None) -> ShortenOptions:
        opts = self._settings.shorten
        if limit is None:
            return opts
        return opts.model_copy(update={"arg_length_limit": limit})

    @traced
    def shorten(self, args: Sequence[str], *, limit: int | None = None) -> ServiceResult:
        """Shorten *args* and keep the response file for the caller.

        Nothing releases the file; its path is reported so the caller can
        remove it once done.
        """
        opts = self._shorten_options(limit)
        try:
            shortened = shorten(list(args), opts)
        except ResponseFileError as exc:
            return self._fail("shorten", exc)
        return ServiceResult(
            ok=True,
            op="shorten",
            data={
                "args": shortened.args,
                "response_file": shortened.uses_response_file,
                "path": shortened.release.path,
                "arg_bytes": arg_byte_length(list(args)),
                "limit": opts.effective_limit,
            },
        )

    @traced
    def expand(self, args: Sequence[str]) -> ServiceResult:
        """Expand every ``@path`` argument in *args*."""
        try:
            expanded = expand(list(args), self._settings.expand)
        except ResponseFileError as exc:
            return self._fail("expand", exc)
        return ServiceResult(
            ok=True,
            op="expand",
            data={"args": expanded, "count": len(expanded)},
        )

    @traced
    def run(
        self,
        command: str,
        args: Sequence[str],
        *,
        limit: int | None = None,
    ) -> ServiceResult:
        """Run *command* with *args*, shortened if needed.

        The response file is released once the command exits, whether or
        not it succeeded.
        """
        try:
            shortened = shorten(list(args), self._shorten_options(limit))
        except ResponseFileError as exc:
            return self._fail("exec", exc)

        with shortened as short_args:
            try:
                completed = subprocess.run([command, *short_args], check=False)
            except OSError as exc:
                return ServiceResult(
                    ok=False,
                    op="exec",
                    error=ServiceError(
                        code="EXEC_FAILED",
                        message=f"cannot run {command}: {exc}",
                        detail={"command": command},
                    ),
                )
        return ServiceResult(
            ok=True,
            op="exec",
            data={
                "command": command,
                "returncode": completed.returncode,
                "response_file": shortened.uses_response_file,
            },
        )
