"""Markdown page compilation."""
from __future__ import annotations

from .errors import (
    METADATA_TERMINATOR,
    CompileError,
    ExpandError,
    MissingMetadataTerminator,
    ParseError,
    SlugifyError,
    SplitError,
    ToHtmlError,
    UnclosedBlock,
    UnsupportedNode,
)
from .page import DEFAULT_LAYOUT, Metadata, Page, PageParts, RawPageParts, compile_page, split_page
from .slugify import slugify
from .to_html import HtmlRenderer, ToHtmlContext, to_html

__all__ = [
    "METADATA_TERMINATOR",
    "CompileError",
    "SplitError",
    "MissingMetadataTerminator",
    "ParseError",
    "ExpandError",
    "ToHtmlError",
    "UnsupportedNode",
    "SlugifyError",
    "UnclosedBlock",
    "DEFAULT_LAYOUT",
    "Metadata",
    "Page",
    "PageParts",
    "RawPageParts",
    "split_page",
    "compile_page",
    "slugify",
    "HtmlRenderer",
    "ToHtmlContext",
    "to_html",
]
