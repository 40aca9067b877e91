"""Unit tests for splitting annotated sources into sections."""

from __future__ import annotations

import pytest

from lit_pages.languages import LanguageDescriptor, default_registry
from lit_pages.splitter import Section, decode_source, split_sections

GO = LanguageDescriptor("go", "//")


def _pairs(sections: list[Section]) -> list[tuple[str, str]]:
    return [(section.raw_docs, section.raw_code) for section in sections]


def test_docs_are_grouped_with_following_code() -> None:
    text = "\n".join(["// Title", "// desc", "x := 1", "// more", "y := 2"])
    assert _pairs(split_sections(text, GO)) == [
        ("Title\ndesc\n", "x := 1\n"),
        ("more\n", "y := 2\n"),
    ]


def test_sections_start_unrendered() -> None:
    (section,) = split_sections("// doc\ncode", GO)
    assert section.docs_html == ""
    assert section.code_html == ""


def test_source_without_comments_is_one_code_section() -> None:
    text = "package main\n\nfunc main() {}"
    assert _pairs(split_sections(text, GO)) == [("", text + "\n")]


def test_source_with_only_comments_has_no_code() -> None:
    text = "// one\n// two\n   // three"
    assert _pairs(split_sections(text, GO)) == [("one\ntwo\nthree\n", "")]


def test_empty_source_yields_single_empty_section() -> None:
    assert _pairs(split_sections("", GO)) == [("", "")]


def test_trailing_newline_ends_the_last_line() -> None:
    text = "package main\n\nfunc main() {}\n"
    assert _pairs(split_sections(text, GO)) == [("", text)]
    assert _pairs(split_sections("// doc\n", GO)) == [("doc\n", "")]


def test_leading_code_gets_its_own_section() -> None:
    text = "package main\n// docs\nfunc main() {}"
    assert _pairs(split_sections(text, GO)) == [
        ("", "package main\n"),
        ("docs\n", "func main() {}\n"),
    ]


def test_carriage_returns_are_preserved() -> None:
    text = "// doc\r\nx := 1\r\n// next\r\ny"
    assert _pairs(split_sections(text, GO)) == [
        ("doc\r\n", "x := 1\r\n"),
        ("next\r\n", "y\n"),
    ]


@pytest.mark.parametrize(
    "lines",
    [
        ["// a", "code", "code", "// b", "// c", "more", "// tail"],
        ["x", "// a", "y", "// b", "z"],
        ["// only"],
        ["no", "comments", "here"],
        ["", "// after blank", "", "x"],
    ],
)
def test_sections_preserve_line_order(lines: list[str]) -> None:
    """Flattening docs then code per section replays the source lines."""
    sections = split_sections("\n".join(lines), GO)
    replayed: list[str] = []
    for section in sections:
        replayed.extend(section.raw_docs.splitlines())
        replayed.extend(section.raw_code.splitlines())
    expected = [GO.strip_comment(line) if GO.is_comment(line) else line for line in lines]
    assert replayed == expected


@pytest.mark.parametrize(
    ("lines", "count"),
    [
        (["// a", "x"], 1),
        (["x", "// a", "y"], 2),
        (["x", "y", "// a", "// b", "z", "// c"], 3),
        (["// a", "// b"], 1),
    ],
)
def test_one_flush_per_code_run_followed_by_comment(lines: list[str], count: int) -> None:
    assert len(split_sections("\n".join(lines), GO)) == count


def test_decoded_bytes_split_with_python_comments() -> None:
    python = default_registry().lookup(".py")
    assert python is not None
    text = decode_source("# héllo\nprint(1)".encode())
    assert _pairs(split_sections(text, python)) == [("héllo\n", "print(1)\n")]


def test_decode_source_replaces_invalid_utf8() -> None:
    assert "�" in decode_source(b"x = b'\xff'")


def test_decode_source_keeps_carriage_returns() -> None:
    assert decode_source(b"a\r\nb\r\n") == "a\r\nb\r\n"
    assert decode_source("already text") == "already text"
