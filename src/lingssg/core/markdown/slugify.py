"""Heading slugs for section anchors."""
from __future__ import annotations

from typing import Iterable, List

from markdown_it.tree import SyntaxTreeNode

from .errors import SlugifyError

_TEXT_TYPES = ("text", "text_special")


def slugify_text(value: str, buf: List[str]) -> None:
    """Append the slug of ``value`` to ``buf``.

    Leading non-letters are dropped; after the first letter, digits and ``_``
    are kept and any other non-letter becomes ``-``.
    """
    for ch in value:
        if ch.isascii() and ch.isalpha():
            buf.append(ch)
        elif buf:
            if (ch.isascii() and ch.isdigit()) or ch == "_":
                buf.append(ch)
            else:
                buf.append("-")


def slugify_nodes(nodes: Iterable[SyntaxTreeNode], buf: List[str]) -> None:
    for node in nodes:
        if node.type in _TEXT_TYPES:
            slugify_text(node.content, buf)
        elif node.type == "inline":
            slugify_nodes(node.children, buf)
        else:
            raise SlugifyError(node.type)


def slugify(nodes: Iterable[SyntaxTreeNode]) -> str:
    buf: List[str] = []
    slugify_nodes(nodes, buf)
    return "".join(buf)


__all__ = ["slugify", "slugify_nodes", "slugify_text"]
