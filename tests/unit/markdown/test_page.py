"""Tests for page splitting, metadata parsing and template expansion."""
from __future__ import annotations

import pytest

from lingssg.core.markdown import (
    CompileError,
    ExpandError,
    Metadata,
    MissingMetadataTerminator,
    ParseError,
    RawPageParts,
    compile_page,
    split_page,
)


class TestSplitPage:
    def test_splits_at_terminator(self) -> None:
        parts = split_page("title: A\n+++\nbody\n")
        assert parts == RawPageParts(metadata="title: A\n", content="body\n")

    def test_terminator_line_is_stripped(self) -> None:
        parts = split_page("title: A\n  +++  \nbody")
        assert parts.content == "body"

    def test_only_first_terminator_counts(self) -> None:
        parts = split_page("title: A\n+++\none\n+++\ntwo")
        assert parts.content == "one\n+++\ntwo"

    def test_longer_marker_is_not_a_terminator(self) -> None:
        with pytest.raises(MissingMetadataTerminator):
            split_page("title: A\n++++\nbody")

    def test_missing_terminator(self) -> None:
        with pytest.raises(MissingMetadataTerminator) as excinfo:
            split_page("title: A\nbody")
        assert isinstance(excinfo.value, CompileError)


class TestMetadata:
    def test_layout_defaults(self) -> None:
        assert Metadata.from_mapping({"title": "A"}) == Metadata(title="A", layout="default.html")

    def test_custom_layout(self) -> None:
        assert Metadata.from_mapping({"title": "A", "layout": "notes.html"}).layout == "notes.html"

    @pytest.mark.parametrize(
        "data",
        [None, {}, {"title": 3}, ["title", "A"], {"title": "A", "layout": 1}],
    )
    def test_invalid(self, data) -> None:
        with pytest.raises(ParseError):
            Metadata.from_mapping(data)

    def test_invalid_yaml(self) -> None:
        with pytest.raises(ParseError):
            split_page("title: [unclosed\n+++\nbody").parse()


class TestCompilePage:
    def test_template_extends_layout(self) -> None:
        page = compile_page("title: Vowels\nlayout: notes.html\n+++\nSome text\n")
        assert page.template == (
            '{% extends "notes.html" %}'
            "{% block title %}{{ title }}{% endblock title %}"
            "{% block content %}<p>Some text</p>{% endblock content %}"
        )
        assert page.base_context == {"layout": "notes.html", "title": "Vowels"}

    def test_template_calls_survive(self) -> None:
        page = compile_page('title: T\n+++\nSee {{ transc(in="h{e}", ty=Phonemic) }}.\n')
        assert '<p>See {{ transc(in="h{e}", ty=Phonemic) }}.</p>' in page.template

    def test_unclosed_template_block(self) -> None:
        with pytest.raises(ExpandError):
            compile_page("title: T\n+++\nbroken {{ call(\n")

    def test_unsupported_markdown(self) -> None:
        with pytest.raises(ExpandError):
            compile_page("title: T\n+++\n```\ncode\n```\n")
