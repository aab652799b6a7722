"""Tags tracking authorship and the version history of an entity."""

from __future__ import annotations

import re
from typing import Sequence

from ..cursor import Cursor
from ..errors import MissingArgument
from .base import MergedFragment, RawRecord, TagDefinition, concatenate, first_wins, keep_last

_VERSION = re.compile(r"v?\d+(?:\.\w+)*(?=\s|$)")


class SinceTag(TagDefinition):
    pattern = "since"
    key = "since"

    def parse(self, cursor: Cursor) -> RawRecord:
        return self.record(since=cursor.hw().word())

    def process_doc(self, records: Sequence[RawRecord]) -> MergedFragment:
        return {"since": first_wins(records, "since")}


class DeprecatedTag(TagDefinition):
    """`@deprecated [version] [text]`; the last declaration wins."""

    pattern = "deprecated"
    key = "deprecated"

    def parse(self, cursor: Cursor) -> RawRecord:
        version = cursor.hw().match(_VERSION)
        text = cursor.remaining().strip()
        return self.record(deprecated={"version": version, "text": text})

    def process_doc(self, records: Sequence[RawRecord]) -> MergedFragment:
        return {"deprecated": keep_last(records, "deprecated")}


class AuthorTag(TagDefinition):
    pattern = "author"
    key = "authors"

    def parse(self, cursor: Cursor) -> RawRecord:
        start = cursor.hw().position
        author = cursor.rest_of_line().strip()
        if not author:
            raise MissingArgument("@author requires a name", position=start)
        return self.record(authors=author)

    def process_doc(self, records: Sequence[RawRecord]) -> MergedFragment:
        return {"authors": concatenate(records, "authors")}
