"""Shared pytest fixtures for responsefile tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from responsefile.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("responsefile")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """`-v` CLI runs enable telemetry for the rest of the thread."""
    yield
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def at_file(tmp_path: Path) -> Callable[[str], str]:
    """Write *content* to a fresh file and return its ``@path`` reference.

    Content is written byte-for-byte (no newline translation).
    """
    counter = 0

    def _write(content: str) -> str:
        nonlocal counter
        counter += 1
        path = tmp_path / f"args{counter}.rsp"
        path.write_bytes(content.encode("utf-8"))
        return f"@{path}"

    return _write


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty directory with no config or env overrides."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RESPONSEFILE_CONFIG", raising=False)
    monkeypatch.delenv("RESPONSEFILE_SHORTEN__ARG_LENGTH_LIMIT", raising=False)
