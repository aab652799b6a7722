"""Tag definition implementations and discovery utilities."""

from __future__ import annotations

from importlib import metadata
from typing import Iterable, List, Sequence, Set

from .base import TagDefinition
from .class_tag import ClassTag
from .flags import access_tags, flag_tags
from .inheritance import AlternateClassNameTag, AugmentsTag, ExtendsTag, MemberOfTag, MixinsTag
from .members import CfgTag, EventTag, MethodTag, PropertyTag
from .signature import ParamTag, ReturnsTag, ReturnTag
from .versions import AuthorTag, DeprecatedTag, SinceTag

_ENTRY_POINT_GROUP = "doctag.tags"


def builtin_tags() -> List[TagDefinition]:
    """Return fresh instances of every built-in definition, in registration order."""
    return [
        ClassTag(),
        AlternateClassNameTag(),
        ExtendsTag(),
        AugmentsTag(),
        MixinsTag(),
        MemberOfTag(),
        MethodTag(),
        EventTag(),
        PropertyTag(),
        CfgTag(),
        ParamTag(),
        ReturnTag(),
        ReturnsTag(),
        *access_tags(),
        *flag_tags(),
        SinceTag(),
        DeprecatedTag(),
        AuthorTag(),
    ]


def discover_tags(
    enabled: Sequence[str] | None = None,
    disabled: Sequence[str] = (),
    *,
    plugins: bool = True,
) -> List[TagDefinition]:
    """Return tag definitions, honoring optional enabled/disabled pattern names.

    Built-ins come first, followed by definitions published under the
    ``doctag.tags`` entry point group. Duplicate patterns are left in place so
    the registry can reject them.
    """

    enabled_set: Set[str] | None = set(enabled) if enabled else None
    disabled_set = set(disabled)
    requested: Set[str] = set(enabled_set or ())

    definitions: List[TagDefinition] = []

    def _add(definition: TagDefinition) -> None:
        if not isinstance(definition, TagDefinition):
            raise TypeError(f"Tag factory returned {definition!r}, not a TagDefinition")
        requested.discard(definition.pattern)
        if definition.pattern in disabled_set:
            return
        if enabled_set is not None and definition.pattern not in enabled_set:
            return
        definitions.append(definition)

    for definition in builtin_tags():
        _add(definition)

    if plugins:
        for entry in _iter_entry_points():
            try:
                loaded = entry.load()
            except Exception as exc:
                raise RuntimeError(f"Failed to load tag entry point '{entry.name}': {exc}") from exc
            for definition in _coerce_definitions(loaded):
                _add(definition)

    if requested:
        missing = ", ".join(sorted(requested))
        raise ValueError(f"Unknown tags requested: {missing}")

    return definitions


def _coerce_definitions(obj: object) -> List[TagDefinition]:
    """Accept a definition, a definition class, or a factory returning either one or a list."""
    if isinstance(obj, TagDefinition):
        return [obj]
    if isinstance(obj, type) and issubclass(obj, TagDefinition):
        return [obj()]
    if callable(obj):
        produced = obj()
        if isinstance(produced, TagDefinition):
            return [produced]
        if isinstance(produced, (list, tuple)) and all(isinstance(item, TagDefinition) for item in produced):
            return list(produced)
    raise TypeError("Tag entry point must be a TagDefinition, subclass, or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points().select(group=_ENTRY_POINT_GROUP)


__all__ = [
    "TagDefinition",
    "builtin_tags",
    "discover_tags",
]
