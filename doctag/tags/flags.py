"""Argument-less marker tags."""

from __future__ import annotations

from typing import List, Sequence

from ..cursor import Cursor
from .base import MergedFragment, RawRecord, TagDefinition, keep_last


class FlagTag(TagDefinition):
    """A tag whose presence alone sets a boolean field."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        super().__init__()

    def parse(self, cursor: Cursor) -> RawRecord:
        return self.record()

    def process_doc(self, records: Sequence[RawRecord]) -> MergedFragment:
        return {self.key: True}


class AccessTag(TagDefinition):
    """`@private`, `@protected` and `@public` share the `access` field."""

    key = "access"

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        super().__init__()

    def parse(self, cursor: Cursor) -> RawRecord:
        return self.record(access=self.pattern)

    def process_doc(self, records: Sequence[RawRecord]) -> MergedFragment:
        return {"access": keep_last(records, "access")}


FLAG_PATTERNS = ("singleton", "static", "chainable", "abstract")
ACCESS_PATTERNS = ("private", "protected", "public")


def flag_tags() -> List[TagDefinition]:
    return [FlagTag(pattern) for pattern in FLAG_PATTERNS]


def access_tags() -> List[TagDefinition]:
    return [AccessTag(pattern) for pattern in ACCESS_PATTERNS]
