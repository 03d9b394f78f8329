"""Lenient markup tree with formatting-preserving serialization.

Start tags are located with the standard library ``HTMLParser`` (which
tolerates unclosed elements, stray markup and server-side template noise)
and kept as source spans. Only start tags whose attributes were changed are
re-rendered; every other byte of the document is emitted unchanged.
"""

from __future__ import annotations

import html
import re
from html.parser import HTMLParser

_TAG_NAME_RE = re.compile(r"<[^\s/>]+")
# Attribute tokens as HTMLParser reads them: any run not starting with
# whitespace, "/" or ">" is a name, and an unquoted value runs to whitespace
# or ">" (so a trailing "/" belongs to the value).
_ATTR_RE = re.compile(
    r"""[\s/]*(?P<name>[^\s/>][^\s/=>]*)"""
    r"""(?:\s*=\s*(?P<value>"[^"]*"|'[^']*'|(?!['"])[^\s>]*))?"""
)


class Element:
    """A start tag in the source document with its attribute map."""

    def __init__(
        self,
        tag: str,
        attrs: dict[str, str | None],
        start: int,
        raw: str,
    ) -> None:
        self.tag = tag
        self.attrs = attrs
        self.start = start
        self.raw = raw
        self._rendered = raw
        self.modified = False

    @property
    def end(self) -> int:
        return self.start + len(self.raw)

    def get(self, name: str, default: str | None = None) -> str | None:
        value = self.attrs.get(name.lower())
        return default if value is None else value

    def has(self, name: str) -> bool:
        return name.lower() in self.attrs

    def set_attribute(self, name: str, value: str) -> None:
        """Set *name* to *value*, editing the start tag text in place.

        An existing attribute keeps its position and spelling; a new one is
        appended right after the last attribute (or the tag name), ahead of
        any whitespace and the closing ``>`` or ``/>``.
        """
        name = name.lower()
        quoted = f'"{html.escape(value, quote=True)}"'
        text = self._rendered
        tokens = _attribute_tokens(text)
        match = next((m for m in tokens if m.group("name").lower() == name), None)
        if match is not None:
            original_name = match.group("name")
            text = f"{text[:match.start('name')]}{original_name}={quoted}{text[match.end():]}"
        else:
            head = _TAG_NAME_RE.match(text)
            at = tokens[-1].end() if tokens else (head.end() if head else len(text))
            text = f"{text[:at]} {name}={quoted}{text[at:]}"
        self._rendered = text
        self.attrs[name] = value
        self.modified = True

    def to_html(self) -> str:
        return self._rendered

    def __repr__(self) -> str:
        return f"Element({self.tag!r}, start={self.start}, attrs={self.attrs!r})"


def _attribute_tokens(tag_text: str) -> list[re.Match[str]]:
    """Every attribute token of a start tag, in source order."""
    head = _TAG_NAME_RE.match(tag_text)
    if head is None:
        return []
    tokens: list[re.Match[str]] = []
    pos = head.end()
    while pos < len(tag_text):
        m = _ATTR_RE.match(tag_text, pos)
        if m is None:
            pos += 1
            continue
        tokens.append(m)
        pos = m.end()
    return tokens


class _StartTagCollector(HTMLParser):
    """Record every start tag together with its absolute source offset."""

    def __init__(self, line_starts: list[int]) -> None:
        super().__init__(convert_charrefs=True)
        self._line_starts = line_starts
        self.elements: list[Element] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        raw = self.get_starttag_text()
        if raw is None:
            return
        line, column = self.getpos()
        attr_map: dict[str, str | None] = {}
        for key, value in attrs:
            # First occurrence wins, as in browsers.
            attr_map.setdefault(key, value)
        start = self._line_starts[line - 1] + column
        self.elements.append(Element(tag, attr_map, start, raw))


def _line_starts(text: str) -> list[int]:
    starts = [0]
    index = text.find("\n")
    while index != -1:
        starts.append(index + 1)
        index = text.find("\n", index + 1)
    return starts


class MarkupDocument:
    """Parsed markup file: source text plus its start tags in document order."""

    def __init__(self, source: str, elements: list[Element]) -> None:
        self.source = source
        self.elements = elements

    @classmethod
    def parse(cls, text: str) -> MarkupDocument:
        collector = _StartTagCollector(_line_starts(text))
        collector.feed(text)
        collector.close()
        elements = [el for el in collector.elements if text.startswith(el.raw, el.start)]
        return cls(text, elements)

    @property
    def modified(self) -> bool:
        return any(el.modified for el in self.elements)

    def scripts(self) -> list[Element]:
        """``<script>`` elements carrying a ``src`` attribute."""
        return [el for el in self.elements if el.tag == "script" and el.has("src")]

    def stylesheets(self) -> list[Element]:
        """``<link>`` elements with ``rel`` containing ``stylesheet`` and an ``href``."""
        return [
            el
            for el in self.elements
            if el.tag == "link"
            and "stylesheet" in (el.get("rel") or "").lower().split()
            and el.has("href")
        ]

    def serialize(self) -> str:
        pieces: list[str] = []
        pos = 0
        for el in self.elements:
            if not el.modified:
                continue
            pieces.append(self.source[pos : el.start])
            pieces.append(el.to_html())
            pos = el.end
        pieces.append(self.source[pos:])
        return "".join(pieces)
