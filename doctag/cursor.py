"""Scanning cursor over the argument text of a single tag occurrence."""

from __future__ import annotations

import re
from typing import Optional, Pattern, Union

from .errors import MalformedIdentifier, MalformedType, MissingArgument

_HORIZONTAL_WS = re.compile(r"[ \t]*")
_WHITESPACE = re.compile(r"\s*")
_IDENT = re.compile(r"[A-Za-z0-9_$]+")
_IDENT_CHAIN = re.compile(r"[A-Za-z0-9_$]+(?:\.[A-Za-z0-9_$]+)*")
_WORD = re.compile(r"\S+")

RegexLike = Union[str, Pattern[str]]


class Cursor:
    """Stateful reader over an immutable text buffer.

    Tag parsers consume the buffer through the combinators below; each call
    advances ``position`` past what it read and nothing else is mutated. The
    whitespace skippers return the cursor so calls can be chained, e.g.
    ``cursor.hw().ident_chain()``.
    """

    def __init__(self, text: str, position: int = 0) -> None:
        self._text = text
        self.position = position

    def at_end(self) -> bool:
        return self.position >= len(self._text)

    def remaining(self) -> str:
        return self._text[self.position :]

    def skip_horizontal_whitespace(self) -> "Cursor":
        """Advance past spaces and tabs, stopping at newlines."""
        self.position = _HORIZONTAL_WS.match(self._text, self.position).end()
        return self

    hw = skip_horizontal_whitespace

    def skip_whitespace(self) -> "Cursor":
        """Advance past any whitespace, newlines included."""
        self.position = _WHITESPACE.match(self._text, self.position).end()
        return self

    def look(self, pattern: RegexLike) -> bool:
        """Return True when ``pattern`` matches at the current position."""
        return _compile(pattern).match(self._text, self.position) is not None

    def match(self, pattern: RegexLike) -> Optional[str]:
        """Consume and return the text matched by ``pattern``, or None."""
        found = _compile(pattern).match(self._text, self.position)
        if found is None:
            return None
        self.position = found.end()
        return found.group(0)

    def ident(self) -> str:
        """Read a single identifier token."""
        found = _IDENT.match(self._text, self.position)
        if found is None:
            raise MalformedIdentifier(
                f"Expected identifier at offset {self.position}, found {self._describe()}",
                position=self.position,
            )
        self.position = found.end()
        return found.group(0)

    def ident_chain(self) -> str:
        """Read dot-separated identifiers such as ``Ext.data.Store``."""
        found = _IDENT_CHAIN.match(self._text, self.position)
        if found is None:
            raise MalformedIdentifier(
                f"Expected identifier chain at offset {self.position}, found {self._describe()}",
                position=self.position,
            )
        self.position = found.end()
        return found.group(0)

    def type_expr(self) -> str:
        """Read a ``{...}`` type expression and return its stripped contents."""
        start = self.position
        if not self._text.startswith("{", start):
            raise MalformedType(
                f"Expected '{{' at offset {start}, found {self._describe()}",
                position=start,
            )
        depth = 0
        for index in range(start, len(self._text)):
            char = self._text[index]
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    self.position = index + 1
                    return self._text[start + 1 : index].strip()
        raise MalformedType(f"Unbalanced braces in type starting at offset {start}", position=start)

    def word(self) -> str:
        """Read a run of non-whitespace characters."""
        found = _WORD.match(self._text, self.position)
        if found is None:
            raise MissingArgument(
                f"Expected an argument at offset {self.position}, found {self._describe()}",
                position=self.position,
            )
        self.position = found.end()
        return found.group(0)

    def rest_of_line(self) -> str:
        """Return text up to the next newline and move past that newline."""
        end = self._text.find("\n", self.position)
        if end == -1:
            line = self._text[self.position :]
            self.position = len(self._text)
            return line
        line = self._text[self.position : end]
        self.position = end + 1
        return line

    def _describe(self) -> str:
        if self.at_end():
            return "end of text"
        snippet = self._text[self.position : self.position + 12]
        return repr(snippet)


def _compile(pattern: RegexLike) -> Pattern[str]:
    if isinstance(pattern, str):
        return re.compile(pattern)
    return pattern


__all__ = ["Cursor"]
