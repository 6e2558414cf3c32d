"""Page compilation: metadata + Markdown body -> Jinja2 child template.

A page source looks like:

    title: Vowels
    layout: notes.html
    +++
    # Front vowels
    ...

Everything above the first ``+++`` line is YAML metadata; the rest is
Markdown. The compiled template extends the page layout and fills the
``title`` and ``content`` blocks.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict

import yaml
from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from .errors import METADATA_TERMINATOR, MissingMetadataTerminator, ParseError
from .to_html import ToHtmlContext, to_html

logger = logging.getLogger(__name__)

DEFAULT_LAYOUT = "default.html"


@dataclass(frozen=True)
class Metadata:
    title: str
    layout: str = DEFAULT_LAYOUT

    @classmethod
    def from_mapping(cls, data: Any) -> "Metadata":
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ParseError("Page metadata must be a mapping")
        title = data.get("title")
        if not isinstance(title, str):
            raise ParseError("Page metadata requires a string 'title'", context={"title": title})
        layout = data.get("layout", DEFAULT_LAYOUT)
        if not isinstance(layout, str):
            raise ParseError("Page metadata 'layout' must be a string", context={"layout": layout})
        return cls(title=title, layout=layout)


@dataclass
class Page:
    template: str
    base_context: Dict[str, Any] = field(default_factory=dict)


@dataclass
class PageParts:
    metadata: Metadata
    ast: SyntaxTreeNode

    def expand(self) -> Page:
        content = to_html(self.ast, ToHtmlContext())
        template = (
            f"{{% extends {json.dumps(self.metadata.layout)} %}}"
            "{% block title %}{{ title }}{% endblock title %}"
            f"{{% block content %}}{content}{{% endblock content %}}"
        )
        context = {"layout": self.metadata.layout, "title": self.metadata.title}
        return Page(template=template, base_context=context)


@dataclass(frozen=True)
class RawPageParts:
    metadata: str
    content: str

    @classmethod
    def split(cls, code: str) -> "RawPageParts":
        """Split at the first line equal to ``+++`` once stripped."""
        start = 0
        while start < len(code):
            newline = code.find("\n", start)
            end = len(code) if newline < 0 else newline + 1
            if code[start:end].strip() == METADATA_TERMINATOR:
                return cls(metadata=code[:start], content=code[end:])
            start = end
        raise MissingMetadataTerminator()

    def parse(self) -> PageParts:
        try:
            raw_metadata = yaml.safe_load(self.metadata)
        except yaml.YAMLError as err:
            raise ParseError(f"Invalid page metadata: {err}") from err
        metadata = Metadata.from_mapping(raw_metadata)
        tokens = _markdown().parse(self.content)
        return PageParts(metadata=metadata, ast=SyntaxTreeNode(tokens))


def _markdown() -> MarkdownIt:
    return MarkdownIt("commonmark")


def split_page(code: str) -> RawPageParts:
    return RawPageParts.split(code)


def compile_page(code: str) -> Page:
    """Split, parse and expand a page source.

    Raises:
        CompileError: any split, parse or expansion failure
    """
    page = split_page(code).parse().expand()
    logger.debug("Compiled page %r (layout %s)", page.base_context["title"], page.base_context["layout"])
    return page


__all__ = [
    "DEFAULT_LAYOUT",
    "Metadata",
    "Page",
    "PageParts",
    "RawPageParts",
    "split_page",
    "compile_page",
]
