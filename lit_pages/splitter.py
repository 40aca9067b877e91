r"""Split annotated source text into documentation/code sections.

Lines are consumed in order. Comment lines accumulate into the current
documentation block and other lines into the current code block; a new
:class:`Section` starts whenever a comment follows code, so each section pairs
a documentation block with the code it describes.

Example
-------
>>> from lit_pages.languages import default_registry
>>> go = default_registry().lookup(".go")
>>> text = "// Title\n// desc\nx := 1\n// more\ny := 2"
>>> [(s.raw_docs, s.raw_code) for s in split_sections(text, go)]
[('Title\ndesc\n', 'x := 1\n'), ('more\n', 'y := 2\n')]
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from .languages import LanguageDescriptor


@dc.dataclass(slots=True)
class Section:
    """A documentation block and the code that follows it.

    Attributes
    ----------
    raw_docs : str
        Comment text with prefixes stripped, one newline per source line.
    raw_code : str
        Code lines verbatim, one newline per source line.
    docs_html : str
        Rendered documentation; empty until the section is rendered.
    code_html : str
        Highlighted code block; empty until the section is rendered.
    """

    raw_docs: str
    raw_code: str
    docs_html: str = ""
    code_html: str = ""


def split_sections(text: str, language: LanguageDescriptor) -> list[Section]:
    r"""Split ``text`` into sections using ``language``'s comment prefix.

    Parameters
    ----------
    text : str
        Source content. Only ``"\n"`` separates lines; a ``"\r"`` stays part
        of its line, and a trailing ``"\n"`` ends the last line.
    language : LanguageDescriptor
        Descriptor whose comment pattern identifies documentation lines.

    Returns
    -------
    list[Section]
        Sections in source order. Never empty: content without any comment
        yields one section with empty documentation.
    """
    sections: list[Section] = []
    docs: list[str] = []
    code: list[str] = []
    has_code = False

    lines = text.split("\n")
    if lines[-1] == "":
        # A final newline terminates the last line rather than opening a new one.
        lines.pop()

    for line in lines:
        if language.is_comment(line):
            if has_code:
                sections.append(Section("".join(docs), "".join(code)))
                docs, code = [], []
                has_code = False
            docs.append(language.strip_comment(line) + "\n")
        else:
            has_code = True
            code.append(line + "\n")

    sections.append(Section("".join(docs), "".join(code)))
    return sections


def decode_source(content: bytes | str) -> str:
    """Return ``content`` as text, decoding bytes as UTF-8.

    Invalid byte sequences become U+FFFD. No newline translation happens, so
    a ``"\\r"`` survives into the split lines.
    """
    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    return content


__all__ = ["Section", "decode_source", "split_sections"]
