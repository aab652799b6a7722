"""Tests for doc comment extraction."""

from __future__ import annotations

import textwrap
from pathlib import Path

from doctag.comments import extract_comments, read_comments, strip_gutter

SOURCE = textwrap.dedent(
    """\
    /* plain comment @class Ignored */
    /**
     * A data store.
     *
     * @class App.Store
     * @extends App.Base
     */
    Ext.define('App.Store', {
        /** @cfg {Number} pageSize */
        pageSize: 25
    });
    /***************/
    """
)


def test_extract_comments_finds_doc_blocks_only() -> None:
    comments = extract_comments(SOURCE, file="store.js")

    assert len(comments) == 2
    assert comments[0].text == "A data store.\n\n@class App.Store\n@extends App.Base"
    assert comments[0].file == "store.js"
    assert comments[0].line == 3
    assert comments[1].text == " @cfg {Number} pageSize"
    assert comments[1].line == 9


def test_strip_gutter_reports_skipped_lines() -> None:
    text, skipped = strip_gutter("\n *\n * @class Foo\n ")
    assert text == "@class Foo"
    assert skipped == 2


def test_read_comments_uses_posix_path(tmp_path: Path) -> None:
    path = tmp_path / "widget.js"
    path.write_text("/**\n * @class Widget\n */\n", encoding="utf-8")

    comments = read_comments(path)

    assert [comment.text for comment in comments] == ["@class Widget"]
    assert comments[0].file == path.as_posix()
    assert comments[0].line == 2
