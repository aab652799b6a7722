"""Tests for marker, access, version and author tags."""

from __future__ import annotations

from doctag.processor import DocCommentProcessor


def test_flags_set_boolean_fields(processor: DocCommentProcessor) -> None:
    result = processor.process_text("@class Ext.Msg\n@singleton\n@static\n@singleton")
    assert result.metadata == {"name": "Ext.Msg", "singleton": True, "static": True}


def test_access_keeps_last_declaration(processor: DocCommentProcessor) -> None:
    result = processor.process_text("@private\n@protected")
    assert result.metadata == {"access": "protected"}


def test_since_keeps_first_version(processor: DocCommentProcessor) -> None:
    result = processor.process_text("@since 4.1.0\n@since 5.0")
    assert result.metadata == {"since": "4.1.0"}


def test_since_requires_a_version(processor: DocCommentProcessor) -> None:
    result = processor.process_text("@since\n@class Foo")
    assert result.metadata == {"name": "Foo"}
    assert [d.kind for d in result.diagnostics] == ["MissingArgument"]


def test_deprecated_with_and_without_version(processor: DocCommentProcessor) -> None:
    result = processor.process_text("@deprecated 4.0 Use {@link Ext.Other} instead.")
    assert result.metadata == {
        "deprecated": {"version": "4.0", "text": "Use {@link Ext.Other} instead."}
    }

    result = processor.process_text("@deprecated\n@deprecated Going away")
    assert result.metadata == {"deprecated": {"version": None, "text": "Going away"}}


def test_authors_are_concatenated(processor: DocCommentProcessor) -> None:
    result = processor.process_text("@author Ann Smith <ann at example.org>\n@author Bob")
    assert result.metadata == {"authors": ["Ann Smith <ann at example.org>", "Bob"]}


def test_author_email_is_not_a_tag(processor: DocCommentProcessor) -> None:
    result = processor.process_text("@author Ann <ann@example.org>")
    assert result.metadata == {"authors": ["Ann <ann@example.org>"]}
    assert result.diagnostics == []


def test_deprecated_version_must_be_a_whole_word(processor: DocCommentProcessor) -> None:
    result = processor.process_text("@deprecated 2nd edition only")
    assert result.metadata == {"deprecated": {"version": None, "text": "2nd edition only"}}

    result = processor.process_text("@deprecated v5.1.0-beta removed")
    assert result.metadata["deprecated"]["version"] is None
