"""Pydantic option models with code-baked defaults.

Sparse TOML contract: defaults baked here, ``responsefile.toml`` only
contains overrides under ``[shorten]`` and ``[expand]``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

# Windows limits a command line to around 32KiB.
DEFAULT_ARG_LENGTH_LIMIT = 30 << 10


class ShortenOptions(BaseModel):
    """[shorten] section and the options of :func:`responsefile.shorten`.

    Attributes:
        arg_length_limit: Number of bytes which can be passed directly as
            arguments. 0 means :data:`DEFAULT_ARG_LENGTH_LIMIT`; a negative
            value always creates a response file for non-empty input.
        prefix: File name prefix of created response files.
        temp_dir: Directory for response files; None uses the system default.
    """

    model_config = {"frozen": True}

    arg_length_limit: int = 0
    prefix: str = "responsefile"
    temp_dir: Path | None = None

    @property
    def effective_limit(self) -> int:
        if self.arg_length_limit == 0:
            return DEFAULT_ARG_LENGTH_LIMIT
        return self.arg_length_limit


class ExpandOptions(BaseModel):
    """[expand] section and the options of :func:`responsefile.expand`.

    Attributes:
        max_depth: How deeply response files may reference other response
            files. None leaves nesting unbounded; 0 rejects any nesting.
    """

    model_config = {"frozen": True}

    max_depth: int | None = Field(default=None, ge=0)
