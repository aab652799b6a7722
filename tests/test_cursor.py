"""Tests for the argument-text cursor."""

from __future__ import annotations

import pytest

from doctag.cursor import Cursor
from doctag.errors import MalformedIdentifier, MalformedType, MissingArgument


@pytest.mark.parametrize("chain", ["Foo", "Foo.Bar", "Ext.data.Store", "$el", "_private.x1", "a.b.c.d"])
def test_ident_chain_reads_dotted_identifiers(chain: str) -> None:
    cursor = Cursor(chain)
    assert cursor.ident_chain() == chain
    assert cursor.at_end()


def test_ident_chain_leaves_trailing_text_and_whitespace() -> None:
    cursor = Cursor("Foo.Bar  the rest")
    assert cursor.ident_chain() == "Foo.Bar"
    assert cursor.remaining() == "  the rest"


def test_ident_chain_does_not_consume_trailing_dot() -> None:
    cursor = Cursor("Foo.")
    assert cursor.ident_chain() == "Foo"
    assert cursor.remaining() == "."


def test_ident_chain_rejects_non_identifier_start() -> None:
    cursor = Cursor("{Foo}")
    with pytest.raises(MalformedIdentifier) as excinfo:
        cursor.ident_chain()
    assert excinfo.value.position == 0
    assert cursor.position == 0


def test_ident_chain_rejects_end_of_text() -> None:
    with pytest.raises(MalformedIdentifier):
        Cursor("").ident_chain()


def test_horizontal_whitespace_stops_at_newline() -> None:
    cursor = Cursor(" \t \nFoo")
    cursor.skip_horizontal_whitespace()
    assert cursor.remaining() == "\nFoo"
    with pytest.raises(MalformedIdentifier):
        cursor.ident_chain()


def test_hw_chains_into_ident_chain() -> None:
    assert Cursor("   My.Class").hw().ident_chain() == "My.Class"


def test_skip_whitespace_crosses_newlines() -> None:
    cursor = Cursor(" \n\t Foo")
    assert cursor.skip_whitespace().ident() == "Foo"


def test_ident_reads_single_token() -> None:
    cursor = Cursor("Foo.Bar")
    assert cursor.ident() == "Foo"
    assert cursor.remaining() == ".Bar"


def test_type_expr_handles_nested_braces() -> None:
    cursor = Cursor("{ Object<{a: Number}> } name")
    assert cursor.type_expr() == "Object<{a: Number}>"
    assert cursor.remaining() == " name"


def test_type_expr_requires_opening_brace() -> None:
    with pytest.raises(MalformedType):
        Cursor("String name").type_expr()


def test_type_expr_rejects_unbalanced_braces() -> None:
    cursor = Cursor("{String name")
    with pytest.raises(MalformedType):
        cursor.type_expr()
    assert cursor.position == 0


def test_word_reads_non_whitespace_run() -> None:
    cursor = Cursor("4.1.0-beta rest")
    assert cursor.word() == "4.1.0-beta"
    with pytest.raises(MissingArgument):
        Cursor("   ").word()


def test_rest_of_line_advances_past_newline() -> None:
    cursor = Cursor("first line\nsecond")
    assert cursor.rest_of_line() == "first line"
    assert cursor.rest_of_line() == "second"
    assert cursor.at_end()
    assert cursor.rest_of_line() == ""


def test_look_and_match() -> None:
    cursor = Cursor("[name=3]")
    assert cursor.look(r"\[")
    assert cursor.position == 0
    assert cursor.match(r"\[") == "["
    assert cursor.match(r"\d") is None
    assert cursor.position == 1
