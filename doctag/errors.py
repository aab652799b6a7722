"""Error taxonomy for tag parsing, folding, and registry configuration."""

from __future__ import annotations

from typing import Optional, Sequence


class DocTagError(RuntimeError):
    """Base class for doctag failures."""


class TagParseError(DocTagError):
    """Raised when a single tag occurrence cannot be parsed."""

    def __init__(self, message: str, *, position: Optional[int] = None) -> None:
        super().__init__(message)
        self.position = position


class MalformedIdentifier(TagParseError):
    """An identifier (or dotted identifier chain) was expected but not found."""


class MalformedType(TagParseError):
    """A `{Type}` expression was expected but missing or unbalanced."""


class MissingArgument(TagParseError):
    """A tag requires an argument that was not supplied."""


class ConflictingTags(DocTagError):
    """Raised by a fold when occurrences of one key cannot be merged."""

    def __init__(self, key: str, patterns: Sequence[str]) -> None:
        joined = ", ".join(f"@{pattern}" for pattern in patterns)
        super().__init__(f"Expected exactly one '{key}' tag, found {len(patterns)}: {joined}")
        self.key = key
        self.patterns = list(patterns)


class RegistryError(DocTagError):
    """Raised when the tag registry is misconfigured."""


class DuplicatePattern(RegistryError):
    """Two tag definitions claim the same pattern."""


class DuplicateField(RegistryError):
    """Two different tag keys would populate the same metadata field."""


class FrozenRegistry(RegistryError):
    """A registration was attempted after the registry was frozen."""


__all__ = [
    "ConflictingTags",
    "DocTagError",
    "DuplicateField",
    "DuplicatePattern",
    "FrozenRegistry",
    "MalformedIdentifier",
    "MalformedType",
    "MissingArgument",
    "RegistryError",
    "TagParseError",
]
