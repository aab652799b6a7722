"""Tags describing a callable's parameters and return value."""

from __future__ import annotations

from typing import Sequence

from ..cursor import Cursor
from ..errors import MissingArgument
from .base import MergedFragment, RawRecord, TagDefinition, concatenate
from .members import parse_type_and_name


class ParamTag(TagDefinition):
    """`@param {Type} name description` or `@param {Type} [name=default] ...`."""

    pattern = "param"
    key = "params"

    def parse(self, cursor: Cursor) -> RawRecord:
        start = cursor.position
        type_, name = parse_type_and_name(cursor)
        if name["name"] is None:
            raise MissingArgument("@param requires a parameter name", position=start)
        description = cursor.hw().remaining().strip()
        param = dict(name, type=type_, description=description)
        return self.record(params=[param])

    def process_doc(self, records: Sequence[RawRecord]) -> MergedFragment:
        return {"params": concatenate(records, "params")}


class ReturnTag(TagDefinition):
    """`@return {Type} description`; the first declaration wins."""

    pattern = "return"
    key = "return"

    def parse(self, cursor: Cursor) -> RawRecord:
        type_ = cursor.type_expr() if cursor.hw().look(r"\{") else None
        description = cursor.remaining().strip()
        return self.record(type=type_, description=description)

    def process_doc(self, records: Sequence[RawRecord]) -> MergedFragment:
        first = records[0]
        return {"return": {"type": first["type"], "description": first["description"]}}


class ReturnsTag(ReturnTag):
    pattern = "returns"
