"""The `@class` tag."""

from __future__ import annotations

from typing import Sequence

from ..cursor import Cursor
from .base import MergedFragment, RawRecord, TagDefinition, first_wins


class ClassTag(TagDefinition):
    """`@class Foo.Bar`: names the class a comment documents."""

    pattern = "class"
    key = "class"
    fields = ("name",)

    def parse(self, cursor: Cursor) -> RawRecord:
        return self.record(name=cursor.hw().ident_chain())

    def process_doc(self, records: Sequence[RawRecord]) -> MergedFragment:
        # Later @class tags are parsed for errors but never override the first.
        return {"name": first_wins(records, "name")}
