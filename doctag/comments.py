"""Capture `/** ... */` doc comments from source text."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional, Tuple

from .models import Comment

# "/**" must not be immediately closed ("/**/") or be a "/***" banner.
_DOC_BLOCK = re.compile(r"/\*\*(?![*/])(.*?)\*/", re.DOTALL)
_GUTTER = re.compile(r"^[ \t]*\*(?: |\t)?", re.MULTILINE)


def strip_gutter(body: str) -> Tuple[str, int]:
    """Remove the leading ``*`` column that doc comments conventionally carry.

    Returns the cleaned text and the number of blank lines dropped from the
    top, so callers can keep line numbers pointing at the source.
    """
    lines = [line.rstrip() for line in _GUTTER.sub("", body).split("\n")]
    skipped = 0
    while lines and not lines[0].strip():
        lines.pop(0)
        skipped += 1
    while lines and not lines[-1].strip():
        lines.pop()
    return "\n".join(lines), skipped


def extract_comments(source: str, file: Optional[str] = None) -> List[Comment]:
    """Return every doc comment in ``source`` in order of appearance."""
    comments: List[Comment] = []
    for found in _DOC_BLOCK.finditer(source):
        text, skipped = strip_gutter(found.group(1))
        line = source.count("\n", 0, found.start(1)) + 1 + skipped
        comments.append(Comment(text=text, file=file, line=line))
    return comments


def read_comments(path: Path) -> List[Comment]:
    source = path.read_text(encoding="utf-8", errors="ignore")
    return extract_comments(source, file=path.as_posix())


__all__ = ["extract_comments", "read_comments", "strip_gutter"]
