"""Line model and file loading tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from dotenv_lint.entries import FileEntry, LineEntry, ScanError, load_file, parse_lines


def test_get_key_returns_verbatim_text_before_first_delimiter() -> None:
    assert _line("FOO=BAR").get_key() == "FOO"
    assert _line(" FOO =BAR").get_key() == " FOO "
    assert _line("foo=bar=baz").get_key() == "foo"
    assert _line("foo=bar=baz").get_value() == "bar=baz"


def test_get_key_is_none_without_delimiter_or_left_side() -> None:
    assert _line("FOO").get_key() is None
    assert _line("=FOO").get_key() is None
    assert _line("").get_key() is None
    assert _line("=FOO").get_value() is None


def test_empty_value_is_not_none() -> None:
    assert _line("FOO=").get_value() == ""


def test_comment_and_blank_flags() -> None:
    assert _line("  # note").is_comment
    assert not _line("FOO=#bar").is_comment
    assert _line("   ").is_blank
    assert not _line("FOO").is_blank


def test_line_number_must_fit_file() -> None:
    file_entry = FileEntry(path=Path(".env"), file_name=".env", total_lines=2)
    with pytest.raises(ValueError):
        LineEntry(number=3, file=file_entry, raw_string="FOO=BAR")
    with pytest.raises(ValueError):
        LineEntry(number=0, file=file_entry, raw_string="FOO=BAR")


def test_parse_lines_numbers_lines_in_file_order() -> None:
    lines = parse_lines("A=1\r\nB=2\n\nC=3\n", Path("config/.env"))
    assert [line.number for line in lines] == [1, 2, 3, 4]
    assert [line.raw_string for line in lines] == ["A=1", "B=2", "", "C=3"]
    assert lines[0].file.total_lines == 4
    assert lines[0].file.file_name == ".env"


def test_parse_lines_splits_only_at_line_endings() -> None:
    lines = parse_lines("A=x\x0cy\nB=\x85z\u2028\rFOO-BAR=1\r\n", Path(".env"))
    assert [line.raw_string for line in lines] == ["A=x\x0cy", "B=\x85z\u2028\rFOO-BAR=1"]
    assert lines[1].number == lines[1].file.total_lines == 2


def test_parse_lines_handles_missing_final_newline_and_empty_text() -> None:
    assert [line.raw_string for line in parse_lines("A=1\n\nB=2", Path(".env"))] == [
        "A=1",
        "",
        "B=2",
    ]
    assert parse_lines("", Path(".env")) == []


def test_load_file_keeps_form_feed_inside_value(tmp_path: Path) -> None:
    path = tmp_path / ".env"
    path.write_bytes(b"A=x\x0cy\r\nFOO-BAR=1\n")
    lines = load_file(path)
    assert [line.raw_string for line in lines] == ["A=x\x0cy", "FOO-BAR=1"]
    assert lines[1].number == 2


def test_load_file_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / ".env"
    path.write_bytes(b"FOO=\xff\xfe\n")
    with pytest.raises(ScanError):
        load_file(path)


def test_load_file_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ScanError):
        load_file(tmp_path / ".env")


def _line(raw: str) -> LineEntry:
    return LineEntry(
        number=1,
        file=FileEntry(path=Path(".env"), file_name=".env", total_lines=1),
        raw_string=raw,
    )
