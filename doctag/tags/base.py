"""Base classes and fold helpers for tag definition plugins."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence, Tuple

from ..cursor import Cursor
from ..errors import ConflictingTags

RawRecord = Dict[str, Any]
MergedFragment = Dict[str, Any]


class TagDefinition(ABC):
    """Contract for one `@pattern` annotation.

    ``pattern`` is the literal text after ``@``. ``key`` names the group the
    parsed records are folded under; aliases share a key with their primary
    definition and the registry folds the whole group with the first
    definition registered for that key. ``fields`` lists the metadata fields
    the fold may emit.
    """

    pattern: str = ""
    key: str = ""
    fields: Tuple[str, ...] = ()

    def __init__(self) -> None:
        if not self.pattern:
            raise TypeError(f"{type(self).__name__} must define a pattern")
        if not self.key:
            self.key = self.pattern
        if not self.fields:
            self.fields = (self.key,)

    @abstractmethod
    def parse(self, cursor: Cursor) -> RawRecord:
        """Parse one occurrence's argument text into a raw record."""

    @abstractmethod
    def process_doc(self, records: Sequence[RawRecord]) -> MergedFragment:
        """Fold every record of this key, in textual order, into one fragment."""

    def record(self, **values: Any) -> RawRecord:
        """Return a raw record tagged with this definition's pattern."""
        return {"tagname": self.pattern, **values}

    def __repr__(self) -> str:
        return f"<{type(self).__name__} @{self.pattern} key={self.key!r}>"


def first_wins(records: Sequence[RawRecord], name: str) -> Any:
    return records[0][name]


def keep_last(records: Sequence[RawRecord], name: str) -> Any:
    return records[-1][name]


def concatenate(records: Sequence[RawRecord], name: str) -> List[Any]:
    """Flatten list values and collect scalars across every record."""
    values: List[Any] = []
    for record in records:
        value = record[name]
        if isinstance(value, list):
            values.extend(value)
        else:
            values.append(value)
    return values


def require_exactly_one(records: Sequence[RawRecord], key: str) -> RawRecord:
    if len(records) != 1:
        raise ConflictingTags(key, [str(record.get("tagname")) for record in records])
    return records[0]


__all__ = [
    "MergedFragment",
    "RawRecord",
    "TagDefinition",
    "concatenate",
    "first_wins",
    "keep_last",
    "require_exactly_one",
]
