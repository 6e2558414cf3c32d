"""Render a Markdown syntax tree to an HTML template fragment.

The output is a Jinja2 template body, not final HTML: ``{{ ... }}`` blocks
found in text are copied through unescaped so that template function calls
written in Markdown survive to the rendering step.

Headings open nested sections:

    <h2 id="section_intro-scope"><a href="#section_intro-scope">Scope</a></h2>
    <div class="section-body"> ... </div>

A heading closes every open section at the same or a deeper level first.
Nodes without a rendering rule raise :class:`UnsupportedNode`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, List

from markdown_it.tree import SyntaxTreeNode
from markupsafe import escape

from .errors import UnclosedBlock, UnsupportedNode
from .slugify import slugify

TEMPLATE_BLOCK_START = "{{"
TEMPLATE_BLOCK_END = "}}"

ORDERED_LIST_CLASSES = ("arabic", "latin", "roman")
UNORDERED_LIST_CLASSES = ("disc", "square", "circle")


@dataclass
class ToHtmlContext:
    """Mutable state carried through one page rendering."""

    slugs: Dict[str, int] = field(default_factory=dict)
    sections: List[str] = field(default_factory=list)
    ord_list_depth: int = 0
    unord_list_depth: int = 0

    @property
    def section_depth(self) -> int:
        return len(self.sections)

    def enter_ord_list(self) -> int:
        depth = self.ord_list_depth
        self.ord_list_depth += 1
        return depth

    def leave_ord_list(self) -> None:
        self.ord_list_depth = max(0, self.ord_list_depth - 1)

    def enter_unord_list(self) -> int:
        depth = self.unord_list_depth
        self.unord_list_depth += 1
        return depth

    def leave_unord_list(self) -> None:
        self.unord_list_depth = max(0, self.unord_list_depth - 1)

    def enter_section(self, depth: int, title_slug: str, buf: List[str]) -> str:
        """Close sections at ``depth`` or deeper, open a new one, return its unique slug."""
        self._prepare_section_level(depth, buf)
        self.sections.append(title_slug)
        return self._make_slug()

    def leave_section(self, depth: int, buf: List[str]) -> None:
        self._prepare_section_level(depth, buf)

    def _make_slug(self) -> str:
        base_slug = "-".join(self.sections).lower()
        count = self.slugs.get(base_slug, 0) + 1
        self.slugs[base_slug] = count
        if count > 1:
            return f"{base_slug}-{count}"
        return base_slug

    def _prepare_section_level(self, new_depth: int, buf: List[str]) -> None:
        close_count = len(self.sections) - new_depth
        if close_count >= 0:
            for _ in range(close_count + 1):
                self.sections.pop()
                buf.append("</div>")


class _ExpandState(Enum):
    BLOCK_ROOT = "block_root"
    STRING_LITERAL = "string_literal"
    ESCAPING = "escaping"


def _template_block_len(expanding: str, value: str) -> int:
    """Length of the ``{{ ... }}`` block at the start of ``expanding``."""
    length = len(TEMPLATE_BLOCK_START)
    state = _ExpandState.BLOCK_ROOT
    while True:
        if length >= len(expanding):
            raise UnclosedBlock(value)
        ch = expanding[length]
        if state is _ExpandState.BLOCK_ROOT:
            if expanding.startswith(TEMPLATE_BLOCK_END, length):
                return length + len(TEMPLATE_BLOCK_END)
            if ch == '"':
                state = _ExpandState.STRING_LITERAL
        elif state is _ExpandState.STRING_LITERAL:
            if ch == '"':
                state = _ExpandState.BLOCK_ROOT
            elif ch == "\\":
                state = _ExpandState.ESCAPING
        else:
            state = _ExpandState.STRING_LITERAL
        length += 1


def render_text(value: str, buf: List[str]) -> None:
    """Escape ``value`` for HTML, keeping ``{{ ... }}`` blocks verbatim."""
    while True:
        start = value.find(TEMPLATE_BLOCK_START)
        if start < 0:
            buf.append(str(escape(value)))
            return
        buf.append(str(escape(value[:start])))
        expanding = value[start:]
        length = _template_block_len(expanding, value)
        buf.append(expanding[:length])
        value = expanding[length:]


class HtmlRenderer:
    """Visitor over :class:`SyntaxTreeNode` producing HTML chunks."""

    def __init__(self, context: ToHtmlContext | None = None) -> None:
        self.context = context or ToHtmlContext()
        self._handlers: Dict[str, Callable[[SyntaxTreeNode, List[str]], None]] = {
            "root": self._root,
            "inline": self._children,
            "paragraph": self._paragraph,
            "text": self._text,
            "text_special": self._text,
            "softbreak": self._softbreak,
            "html_block": self._html,
            "html_inline": self._html,
            "link": self._link,
            "image": self._image,
            "heading": self._heading,
            "bullet_list": self._bullet_list,
            "ordered_list": self._ordered_list,
            "list_item": self._list_item,
        }

    def render(self, node: SyntaxTreeNode) -> str:
        buf: List[str] = []
        self.visit(node, buf)
        return "".join(buf)

    def visit(self, node: SyntaxTreeNode, buf: List[str]) -> None:
        handler = self._handlers.get(node.type)
        if handler is None:
            raise UnsupportedNode(node.type)
        handler(node, buf)

    def visit_all(self, nodes: Iterable[SyntaxTreeNode], buf: List[str]) -> None:
        for child in nodes:
            self.visit(child, buf)

    def _children(self, node: SyntaxTreeNode, buf: List[str]) -> None:
        self.visit_all(node.children, buf)

    def _root(self, node: SyntaxTreeNode, buf: List[str]) -> None:
        self.visit_all(node.children, buf)
        self.context.leave_section(1, buf)

    def _paragraph(self, node: SyntaxTreeNode, buf: List[str]) -> None:
        buf.append("<p>")
        self.visit_all(node.children, buf)
        buf.append("</p>")

    def _text(self, node: SyntaxTreeNode, buf: List[str]) -> None:
        render_text(node.content, buf)

    def _softbreak(self, node: SyntaxTreeNode, buf: List[str]) -> None:
        buf.append("\n")

    def _html(self, node: SyntaxTreeNode, buf: List[str]) -> None:
        buf.append(node.content)

    def _link(self, node: SyntaxTreeNode, buf: List[str]) -> None:
        buf.append(f'<a href="{escape(node.attrs.get("href", ""))}"')
        title = node.attrs.get("title")
        if title:
            buf.append(f' title="{escape(title)}"')
        buf.append(">")
        self.visit_all(node.children, buf)
        buf.append("</a>")

    def _image(self, node: SyntaxTreeNode, buf: List[str]) -> None:
        src = escape(node.attrs.get("src", ""))
        alt = escape(node.content)
        buf.append(
            f'<div class="img-wrapper"><img src="{src}" alt="{alt}"/>'
            f'<div class="img-legend">{alt}</div></div>'
        )

    def _heading(self, node: SyntaxTreeNode, buf: List[str]) -> None:
        depth = min(int(node.tag[1:]), 6)
        title_slug = slugify(node.children)
        full_slug = self.context.enter_section(depth, title_slug, buf)
        buf.append(f'<h{depth} id="section_{full_slug}"><a href="#section_{full_slug}">')
        self.visit_all(node.children, buf)
        buf.append(f"</a></h{depth}>")
        buf.append('<div class="section-body">')

    def _ordered_list(self, node: SyntaxTreeNode, buf: List[str]) -> None:
        depth = self.context.enter_ord_list()
        css = ORDERED_LIST_CLASSES[depth % len(ORDERED_LIST_CLASSES)]
        buf.append(f'<ol class="list-{css}"')
        start = node.attrs.get("start")
        if start is not None:
            buf.append(f' start="{start}"')
        buf.append(">")
        self.visit_all(node.children, buf)
        buf.append("</ol>")
        self.context.leave_ord_list()

    def _bullet_list(self, node: SyntaxTreeNode, buf: List[str]) -> None:
        depth = self.context.enter_unord_list()
        css = UNORDERED_LIST_CLASSES[depth % len(UNORDERED_LIST_CLASSES)]
        buf.append(f'<ul class="list-{css}">')
        self.visit_all(node.children, buf)
        buf.append("</ul>")
        self.context.leave_unord_list()

    def _list_item(self, node: SyntaxTreeNode, buf: List[str]) -> None:
        buf.append("<li>")
        self.visit_all(node.children, buf)
        buf.append("</li>")


def to_html(node: SyntaxTreeNode, context: ToHtmlContext | None = None) -> str:
    """Render a parsed Markdown tree to an HTML template fragment."""
    return HtmlRenderer(context).render(node)


__all__ = [
    "TEMPLATE_BLOCK_START",
    "TEMPLATE_BLOCK_END",
    "ToHtmlContext",
    "HtmlRenderer",
    "render_text",
    "to_html",
]
