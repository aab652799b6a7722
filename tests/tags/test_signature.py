"""Tests for @param and @return."""

from __future__ import annotations

from doctag.processor import DocCommentProcessor


def test_params_are_collected_in_order(processor: DocCommentProcessor) -> None:
    result = processor.process_text(
        "@method load\n"
        "@param {String} url The URL to load\n"
        "@param {Object} [options] Extra options\n"
        "@param {Number} [timeout=30]\n"
    )
    params = result.metadata["params"]
    assert [p["name"] for p in params] == ["url", "options", "timeout"]
    assert params[0] == {
        "name": "url",
        "optional": False,
        "default": None,
        "type": "String",
        "description": "The URL to load",
    }
    assert params[1]["optional"] is True
    assert params[2]["default"] == "30"
    assert params[2]["description"] == ""


def test_param_without_name_is_reported(processor: DocCommentProcessor) -> None:
    result = processor.process_text("@param {String}\n@param {Number} count")
    assert [p["name"] for p in result.metadata["params"]] == ["count"]
    assert [d.kind for d in result.diagnostics] == ["MissingArgument"]


def test_param_with_unbalanced_type_is_reported(processor: DocCommentProcessor) -> None:
    result = processor.process_text("@param {String name")
    assert result.metadata == {}
    assert [d.kind for d in result.diagnostics] == ["MalformedType"]


def test_return_and_returns_share_first_wins(processor: DocCommentProcessor) -> None:
    result = processor.process_text("@returns {Boolean} True on success\n@return {String} ignored")
    assert result.metadata == {"return": {"type": "Boolean", "description": "True on success"}}


def test_return_without_type(processor: DocCommentProcessor) -> None:
    result = processor.process_text("@return the loaded record")
    assert result.metadata == {"return": {"type": None, "description": "the loaded record"}}
