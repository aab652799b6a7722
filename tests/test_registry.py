"""Tests for the tag registry."""

from __future__ import annotations

from typing import Sequence

import pytest

from doctag.config import TagConfig
from doctag.cursor import Cursor
from doctag.errors import DuplicateField, DuplicatePattern, FrozenRegistry
from doctag.processor import DocCommentProcessor
from doctag.registry import TagRegistry, build_registry
from doctag.tags import builtin_tags
from doctag.tags.base import TagDefinition
from doctag.tags.class_tag import ClassTag
from doctag.tags.inheritance import AugmentsTag, ExtendsTag


class NameTag(TagDefinition):
    """Test tag that claims the same field as @class."""

    pattern = "name"
    key = "label"
    fields = ("name",)

    def parse(self, cursor: Cursor):
        return self.record(name=cursor.hw().ident_chain())

    def process_doc(self, records: Sequence[dict]):
        return {"name": records[-1]["name"]}


def test_lookup_returns_definition_or_none(registry: TagRegistry) -> None:
    assert isinstance(registry.lookup("class"), ClassTag)
    assert registry.lookup("wobble") is None
    assert "class" in registry
    assert "wobble" not in registry


def test_duplicate_pattern_is_rejected() -> None:
    with pytest.raises(DuplicatePattern):
        TagRegistry.build([ClassTag(), ClassTag()])


def test_duplicate_pattern_fails_before_any_comment_is_processed() -> None:
    registry = TagRegistry()
    registry.register(ClassTag())
    with pytest.raises(DuplicatePattern):
        registry.register(ClassTag())


def test_fields_shared_by_different_keys_are_rejected_on_freeze() -> None:
    registry = TagRegistry()
    registry.register(ClassTag())
    registry.register(NameTag())
    with pytest.raises(DuplicateField):
        registry.freeze()
    assert not registry.frozen


def test_processor_construction_validates_registry() -> None:
    registry = TagRegistry()
    registry.register(ClassTag())
    registry.register(NameTag())
    with pytest.raises(DuplicateField):
        DocCommentProcessor(registry)


def test_aliases_share_a_key_and_the_first_definition_folds() -> None:
    registry = TagRegistry.build([ExtendsTag(), AugmentsTag()])
    assert registry.keys() == ["extends"]
    assert type(registry.folder("extends")) is ExtendsTag
    assert len(registry) == 2


def test_frozen_registry_rejects_registration(registry: TagRegistry) -> None:
    assert registry.frozen
    with pytest.raises(FrozenRegistry):
        registry.register(NameTag())


def test_keys_follow_registration_order(registry: TagRegistry) -> None:
    keys = registry.keys()
    assert keys[0] == "class"
    assert keys.index("extends") < keys.index("member") < keys.index("authors")


def test_builtin_registry_is_valid() -> None:
    registry = TagRegistry.build(builtin_tags())
    assert len(registry) == len(builtin_tags())


def test_build_registry_honours_tag_config() -> None:
    registry = build_registry(TagConfig(enabled=["class", "extends"], plugins=False))
    assert [definition.pattern for definition in registry] == ["class", "extends"]

    registry = build_registry(TagConfig(disabled=["author"], plugins=False))
    assert "author" not in registry
    assert "class" in registry
