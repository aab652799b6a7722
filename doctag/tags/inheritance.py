"""Tags describing how a class relates to other classes."""

from __future__ import annotations

import re
from typing import List, Sequence

from ..cursor import Cursor
from .base import MergedFragment, RawRecord, TagDefinition, concatenate, first_wins, keep_last

_LIST_SEPARATOR = re.compile(r"[ \t]*(,)?[ \t]*")
_CLASS_LIKE = re.compile(r"[A-Z$_]|[A-Za-z0-9_$]+\.")


def _ident_chain_list(cursor: Cursor) -> List[str]:
    """Read one or more identifier chains separated by commas or spaces.

    A space-separated name continues the list only when it looks like a class
    (dotted or capitalised); otherwise the list ends and the rest is prose.
    """
    names = [cursor.hw().ident_chain()]
    while True:
        start = cursor.position
        separator = _LIST_SEPARATOR.match(cursor.remaining())
        cursor.position += separator.end()
        comma = separator.group(1) is not None
        if (
            cursor.position == start
            or cursor.at_end()
            or not cursor.look(r"[A-Za-z0-9_$]")
            or (not comma and not cursor.look(_CLASS_LIKE))
        ):
            cursor.position = start
            return names
        names.append(cursor.ident_chain())


class ExtendsTag(TagDefinition):
    """`@extends Parent.Class`; the last declaration wins."""

    pattern = "extends"
    key = "extends"

    def parse(self, cursor: Cursor) -> RawRecord:
        return self.record(extends=cursor.hw().ident_chain())

    def process_doc(self, records: Sequence[RawRecord]) -> MergedFragment:
        return {"extends": keep_last(records, "extends")}


class AugmentsTag(ExtendsTag):
    """JSDoc spelling of `@extends`."""

    pattern = "augments"


class MixinsTag(TagDefinition):
    pattern = "mixins"
    key = "mixins"

    def parse(self, cursor: Cursor) -> RawRecord:
        return self.record(mixins=_ident_chain_list(cursor))

    def process_doc(self, records: Sequence[RawRecord]) -> MergedFragment:
        return {"mixins": concatenate(records, "mixins")}


class AlternateClassNameTag(TagDefinition):
    pattern = "alternateClassName"
    key = "alternateClassNames"

    def parse(self, cursor: Cursor) -> RawRecord:
        return self.record(alternateClassNames=_ident_chain_list(cursor))

    def process_doc(self, records: Sequence[RawRecord]) -> MergedFragment:
        return {"alternateClassNames": concatenate(records, "alternateClassNames")}


class MemberOfTag(TagDefinition):
    """`@member Owner.Class`: the class a member belongs to."""

    pattern = "member"
    key = "owner"

    def parse(self, cursor: Cursor) -> RawRecord:
        return self.record(owner=cursor.hw().ident_chain())

    def process_doc(self, records: Sequence[RawRecord]) -> MergedFragment:
        return {"owner": first_wins(records, "owner")}
