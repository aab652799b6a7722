"""Tags declaring the member a comment documents (method, event, property, cfg)."""

from __future__ import annotations

import re
from typing import Any, Dict, Optional, Sequence, Tuple

from ..cursor import Cursor
from ..errors import MissingArgument
from .base import MergedFragment, RawRecord, TagDefinition, require_exactly_one

_IDENT_START = re.compile(r"[A-Za-z0-9_$]")
_DEFAULT_VALUE = re.compile(r"[^\]]*")


def parse_type_and_name(cursor: Cursor) -> Tuple[Optional[str], Dict[str, Any]]:
    """Read an optional `{Type}` followed by `name` or `[name=default]`.

    Returns the type and a mapping with ``name``, ``optional`` and ``default``.
    A missing name yields ``None``; the caller decides whether that is an error.
    """
    type_ = None
    if cursor.hw().look(r"\{"):
        type_ = cursor.type_expr()
    cursor.hw()
    if cursor.match(r"\["):
        name = cursor.hw().ident_chain()
        default = None
        if cursor.hw().match("="):
            default = cursor.hw().match(_DEFAULT_VALUE).strip() or None
        if cursor.hw().match(r"\]") is None:
            raise MissingArgument(
                f"Unclosed '[' around optional name '{name}'", position=cursor.position
            )
        return type_, {"name": name, "optional": True, "default": default}
    name = cursor.ident_chain() if cursor.look(_IDENT_START) else None
    return type_, {"name": name, "optional": False, "default": None}


class MemberTag(TagDefinition):
    """Shared behaviour for tags that declare the member kind.

    A comment documents a single member; two of these tags in one comment
    are reported as conflicting.
    """

    key = "member"

    def parse(self, cursor: Cursor) -> RawRecord:
        type_, name = parse_type_and_name(cursor)
        return self.record(kind=self.pattern, type=type_, **name)

    def process_doc(self, records: Sequence[RawRecord]) -> MergedFragment:
        record = require_exactly_one(records, self.key)
        member = {name: record[name] for name in ("kind", "name", "type", "optional", "default")}
        return {"member": member}


class MethodTag(MemberTag):
    pattern = "method"


class EventTag(MemberTag):
    pattern = "event"


class PropertyTag(MemberTag):
    pattern = "property"


class CfgTag(MemberTag):
    pattern = "cfg"
