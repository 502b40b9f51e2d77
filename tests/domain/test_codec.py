"""Tests for the response-file line codec."""

from __future__ import annotations

import pytest

from responsefile.domain.codec import decode_arg, encode_arg, render_lines, split_lines
from responsefile.domain.errors import UnsupportedEscapeError


class TestEncodeArg:
    def test_plain_unchanged(self) -> None:
        arg = "-o out.exe"
        assert encode_arg(arg) is arg

    def test_backslash_doubled(self) -> None:
        assert encode_arg("C:\\Windows\\System32") == "C:\\\\Windows\\\\System32"

    def test_newline_escaped(self) -> None:
        assert encode_arg("line1\nline2") == "line1\\nline2"

    def test_carriage_return_verbatim(self) -> None:
        assert encode_arg("a\rb\n") == "a\rb\\n"

    def test_never_contains_newline(self) -> None:
        assert "\n" not in encode_arg("\n\n\\\n")

    def test_empty(self) -> None:
        assert encode_arg("") == ""

    def test_unicode_verbatim(self) -> None:
        assert encode_arg("héllo\\wörld ✓") == "héllo\\\\wörld ✓"


class TestDecodeArg:
    def test_plain_unchanged(self) -> None:
        line = "foo bar"
        assert decode_arg(line) is line

    def test_escaped_backslash(self) -> None:
        assert decode_arg("a\\\\b") == "a\\b"

    def test_escaped_newline(self) -> None:
        assert decode_arg("a\\nb") == "a\nb"

    def test_backslash_then_n_literal(self) -> None:
        # "\\\\n" decodes to a backslash followed by the letter n
        assert decode_arg("\\\\n") == "\\n"

    @pytest.mark.parametrize("line", ["\\t", "foo\\x", "\\r", "\\ ", "\\é"])
    def test_unsupported_escape(self, line: str) -> None:
        with pytest.raises(UnsupportedEscapeError, match="unsupported escape sequence") as info:
            decode_arg(line)
        assert info.value.sequence == "\\" + line[-1]

    def test_trailing_backslash_rejected(self) -> None:
        with pytest.raises(UnsupportedEscapeError) as info:
            decode_arg("foo\\")
        assert info.value.sequence == "\\"

    def test_error_has_no_location(self) -> None:
        with pytest.raises(UnsupportedEscapeError) as info:
            decode_arg("\\q")
        assert info.value.path is None
        assert info.value.line is None


class TestRoundTrip:
    @pytest.mark.parametrize(
        "arg",
        [
            "",
            "plain",
            "\\",
            "\n",
            "\\n",
            "a\r\nb",
            "trailing\\",
            "mixed \\\n\\\\\n\n",
            "日本語\\パス\n✓",
            "\udcff\udc80",
        ],
    )
    def test_decode_inverts_encode(self, arg: str) -> None:
        assert decode_arg(encode_arg(arg)) == arg


class TestRenderLines:
    def test_one_line_per_arg(self) -> None:
        assert render_lines(["foo", "bar"]) == "foo\nbar\n"

    def test_empty_list(self) -> None:
        assert render_lines([]) == ""

    def test_empty_args_keep_their_lines(self) -> None:
        assert render_lines(["", ""]) == "\n\n"

    def test_escapes_each_arg(self) -> None:
        assert render_lines(["a\nb", "c\\d"]) == "a\\nb\nc\\\\d\n"


class TestSplitLines:
    def test_empty_content_has_no_lines(self) -> None:
        assert split_lines("") == []

    def test_trailing_newline_does_not_add_line(self) -> None:
        assert split_lines("a\nb\n") == ["a", "b"]

    def test_missing_final_newline(self) -> None:
        assert split_lines("nolf") == ["nolf"]

    def test_single_newline_is_one_empty_line(self) -> None:
        assert split_lines("\n") == [""]

    def test_blank_lines_preserved(self) -> None:
        assert split_lines("a\n\n\nb") == ["a", "", "", "b"]

    def test_crlf_stripped(self) -> None:
        assert split_lines("crlf\r\nnext\r\n") == ["crlf", "next"]

    def test_only_one_carriage_return_stripped(self) -> None:
        assert split_lines("x\r\r\n") == ["x\r"]

    def test_render_then_split(self) -> None:
        args = ["", "a b", "c\\nd"]
        lines = split_lines(render_lines(args))
        assert lines == [encode_arg(a) for a in args]
        assert [decode_arg(line) for line in lines] == args
