"""Tests for ResponseFileService — ServiceResult wrappers and exec."""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from responsefile.config.models import ExpandOptions, ShortenOptions
from responsefile.config.settings import ResponseFileSettings
from responsefile.services.response import ResponseFileService

# Prints its raw arguments, then the lines of the response file it was given.
_ECHO = (
    "import sys\n"
    "print('RAW=' + '|'.join(sys.argv[1:]))\n"
    "with open(sys.argv[1][1:], encoding='utf-8') as f:\n"
    "    print('FILE=' + f.read().replace('\\n', '|'))\n"
)


@pytest.fixture
def make_service(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Callable[..., ResponseFileService]:
    monkeypatch.delenv("RESPONSEFILE_CONFIG", raising=False)

    def _make(**overrides: object) -> ResponseFileService:
        settings = ResponseFileSettings.from_cli(
            start=tmp_path,
            shorten=overrides.pop("shorten", ShortenOptions(temp_dir=tmp_path)),
            **overrides,
        )
        return ResponseFileService(settings)

    return _make


class TestShorten:
    def test_short_args_pass_through(
        self, make_service: Callable[..., ResponseFileService]
    ) -> None:
        result = make_service().shorten(["a", "b"])
        assert result.ok
        assert result.op == "shorten"
        assert result.data["args"] == ["a", "b"]
        assert result.data["response_file"] is False
        assert result.data["path"] is None
        assert result.data["arg_bytes"] == 2

    def test_limit_override_keeps_file(
        self, make_service: Callable[..., ResponseFileService], tmp_path: Path
    ) -> None:
        result = make_service().shorten(["a", "b"], limit=-1)
        assert result.ok
        assert result.data["response_file"] is True
        path = Path(result.data["path"])
        assert result.data["args"] == [f"@{path}"]
        assert path.read_text() == "a\nb\n"
        assert path.parent == tmp_path

    def test_settings_limit_used(
        self, make_service: Callable[..., ResponseFileService], tmp_path: Path
    ) -> None:
        svc = make_service(shorten=ShortenOptions(arg_length_limit=1, temp_dir=tmp_path))
        result = svc.shorten(["ab"])
        assert result.data["response_file"] is True
        assert result.data["limit"] == 1

    def test_create_failure_reported(
        self, make_service: Callable[..., ResponseFileService], tmp_path: Path
    ) -> None:
        svc = make_service(shorten=ShortenOptions(temp_dir=tmp_path / "missing"))
        result = svc.shorten(["a"], limit=-1)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "TEMP_FILE_CREATE_FAILED"

    def test_unencodable_argument_reported(
        self, make_service: Callable[..., ResponseFileService]
    ) -> None:
        result = make_service().shorten(["\ud800"], limit=-1)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "ARGUMENT_NOT_ENCODABLE"
        assert result.error.detail == {"index": 0, "reason": "surrogates not allowed"}


class TestExpand:
    def test_expands(
        self, make_service: Callable[..., ResponseFileService], at_file: Callable[[str], str]
    ) -> None:
        result = make_service().expand(["x", at_file("y\nz\n")])
        assert result.ok
        assert result.data == {"args": ["x", "y", "z"], "count": 3}

    def test_read_error(
        self, make_service: Callable[..., ResponseFileService], tmp_path: Path
    ) -> None:
        result = make_service().expand([f"@{tmp_path / 'missing.rsp'}"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "RESPONSE_FILE_READ_FAILED"
        assert result.error.detail["path"].endswith("missing.rsp")

    def test_escape_error(
        self, make_service: Callable[..., ResponseFileService], at_file: Callable[[str], str]
    ) -> None:
        result = make_service().expand([at_file("\\z\n")])
        assert result.error is not None
        assert result.error.code == "UNSUPPORTED_ESCAPE_SEQUENCE"
        assert result.error.detail["line"] == 1

    def test_max_depth_from_settings(
        self, make_service: Callable[..., ResponseFileService], at_file: Callable[[str], str]
    ) -> None:
        inner = at_file("x\n")
        svc = make_service(expand=ExpandOptions(max_depth=0))
        result = svc.expand([at_file(f"{inner}\n")])
        assert result.error is not None
        assert result.error.code == "NESTING_TOO_DEEP"


class TestRun:
    def test_runs_with_response_file_and_releases(
        self,
        make_service: Callable[..., ResponseFileService],
        tmp_path: Path,
        capfd: pytest.CaptureFixture[str],
    ) -> None:
        script = tmp_path / "echo.py"
        script.write_text(f"#!{sys.executable}\n{_ECHO}")
        script.chmod(0o755)
        result = make_service().run(str(script), ["one", "two\nlines"], limit=-1)
        assert result.ok
        assert result.data["returncode"] == 0
        assert result.data["response_file"] is True
        out = capfd.readouterr().out
        assert "RAW=@" in out
        assert "FILE=one|two\\nlines|" in out
        assert list(tmp_path.glob("responsefile*")) == []

    def test_short_args_passed_directly(
        self,
        make_service: Callable[..., ResponseFileService],
        capfd: pytest.CaptureFixture[str],
    ) -> None:
        result = make_service().run(sys.executable, ["-c", "import sys; sys.exit(3)"])
        assert result.ok
        assert result.data["returncode"] == 3
        assert result.data["response_file"] is False

    def test_missing_command(
        self, make_service: Callable[..., ResponseFileService], tmp_path: Path
    ) -> None:
        result = make_service().run(str(tmp_path / "no-such-binary"), ["a"], limit=-1)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "EXEC_FAILED"
        assert list(tmp_path.glob("responsefile*")) == []
