"""Readers for Valve's key/value text format (``.acf`` and ``.vdf`` files).

Two readers live here. :func:`extract_value` is the flat, line-oriented lookup
used for app manifests: it only needs the top-level scalar keys (``appid``,
``name``, ``installdir``, ``SizeOnDisk``) and matches the quoted key on a
single line. :func:`parse_vdf` understands nested blocks and is used for
configuration files such as ``libraryfolders.vdf``.
"""
from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Tuple

from .errors import ValidationError

Token = Tuple[str, Optional[str]]

_WHITESPACE = "\r\n\t "


def extract_value(content: str, key: str) -> str:
    """Return the quoted value that follows ``"<key>"`` on the first matching line."""

    needle = f'"{key}"'
    for line in content.splitlines():
        line = line.strip()
        start = line.find(needle)
        if start < 0:
            continue
        after_key = line[start + len(needle):]
        open_quote = after_key.find('"')
        if open_quote < 0:
            continue
        rest = after_key[open_quote + 1:]
        close_quote = rest.find('"')
        if close_quote < 0:
            continue
        return rest[:close_quote]
    raise ValidationError(f"key {key} not found")


def _read_quoted(text: str, i: int) -> Tuple[str, int]:
    buf: List[str] = []
    length = len(text)
    while i < length:
        ch = text[i]
        if ch == "\\" and i + 1 < length:
            buf.append(text[i + 1])
            i += 2
            continue
        i += 1
        if ch == '"':
            break
        buf.append(ch)
    return "".join(buf), i


def _tokenize(text: str) -> Iterator[Token]:
    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        if ch in _WHITESPACE:
            i += 1
        elif text.startswith("//", i):
            while i < length and text[i] not in "\r\n":
                i += 1
        elif ch == '"':
            value, i = _read_quoted(text, i + 1)
            yield ("STRING", value)
        elif ch in "{}":
            yield ("LBRACE" if ch == "{" else "RBRACE", None)
            i += 1
        else:
            start = i
            while i < length and text[i] not in _WHITESPACE + "{}":
                i += 1
            yield ("STRING", text[start:i])


class _Parser:
    def __init__(self, tokens: List[Token]) -> None:
        self.tokens = tokens
        self.pos = 0

    def parse_block(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        key: Optional[str] = None
        while self.pos < len(self.tokens):
            kind, value = self.tokens[self.pos]
            self.pos += 1
            if kind == "RBRACE":
                break
            if kind == "LBRACE":
                nested = self.parse_block()
                if key is not None:
                    result[key] = nested
                    key = None
            elif key is None:
                key = value or ""
            else:
                result[key] = value
                key = None
        return result


def parse_vdf(text: str) -> Dict[str, Any]:
    """Parse nested VDF text into dictionaries of strings.

    A dangling key without a value is dropped. Unbalanced closing braces end
    the current block instead of failing.
    """

    tokens = list(_tokenize(text))
    if not tokens:
        return {}
    return _Parser(tokens).parse_block()


__all__ = ["extract_value", "parse_vdf"]
