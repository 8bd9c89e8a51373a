"""Uniform view of parsed nodes for the renderer.

`PrettyNode` wraps a node produced by the parser and answers the handful of
questions the renderer asks: what markup opens and closes it, which text
lines it carries, its children, and whether it is laid out inline.

Context that depends on ancestors (inside a preformatted region, inside a
raw-text element, inherited inline layout) is computed top-down when the
wrapper is created, so wrappers only ever point at their wrapper parent.
"""

from __future__ import annotations

import textwrap
from enum import Enum
from typing import Any

from .constants import (
    PREFORMATTED_ELEMENTS,
    RAW_TEXT_ELEMENTS,
    UNTERMINATED_ELEMENTS,
    VOID_ELEMENTS,
    WHITESPACE,
)
from .errors import InvariantError
from .markup import DEFAULT_DOCTYPE, escape, serialize_doctype, serialize_end_tag, serialize_start_tag


class Kind(Enum):
    DOCUMENT = "document"
    DOCTYPE = "doctype"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"


_KIND_BY_NAME = {
    "#document": Kind.DOCUMENT,
    "#document-fragment": Kind.DOCUMENT,
    "!doctype": Kind.DOCTYPE,
    "#text": Kind.TEXT,
    "#comment": Kind.COMMENT,
}


def node_kind(node: Any) -> Kind:
    return _KIND_BY_NAME.get(node.name, Kind.ELEMENT)


def html_tag(node: Any) -> str | None:
    """Tag name of an HTML-namespace element, None for anything else."""
    if node_kind(node) is not Kind.ELEMENT:
        return None
    if getattr(node, "namespace", None) not in {None, "html"}:
        return None
    return str(node.name)


def content_root(node: Any) -> Any:
    """The node that actually holds the children (template contents for <template>)."""
    if html_tag(node) == "template":
        content = getattr(node, "template_content", None)
        if content is not None:
            return content
    return node


def child_nodes(node: Any) -> list[Any]:
    return list(getattr(content_root(node), "children", None) or [])


def is_preformatted(node: Any) -> bool:
    return html_tag(node) in PREFORMATTED_ELEMENTS


def runs_to_end(node: Any) -> bool:
    """True when `node` is, or ends with, an element that consumes the rest of the input."""
    while node is not None:
        if html_tag(node) in UNTERMINATED_ELEMENTS:
            return True
        kids = child_nodes(node)
        node = kids[-1] if kids else None
    return False


def split_lines(data: str) -> list[str]:
    """Split trimmed text into lines.

    Trailing whitespace is dropped from every line and continuation lines
    lose their common indentation, so text that already went through the
    renderer once comes back out unchanged.
    """
    if not data:
        return []
    first, _, rest = data.partition("\n")
    lines = [first]
    if rest:
        lines.extend(textwrap.dedent(rest).split("\n"))
    return [line.rstrip(WHITESPACE) for line in lines]


class PrettyNode:
    """Renderer-facing wrapper around one parsed node.

    `as_document` turns any node into a pass-through root: it contributes no
    markup of its own and its children are laid out at its depth. This is how
    an unwrapped fragment body is rendered.
    """

    __slots__ = (
        "_children",
        "in_preformatted",
        "in_raw_text",
        "inline",
        "keep_doctype",
        "kind",
        "node",
        "parent",
        "tag",
    )

    def __init__(
        self,
        node: Any,
        parent: PrettyNode | None = None,
        *,
        as_document: bool = False,
        keep_doctype: bool = False,
    ) -> None:
        self.node = node
        self.parent = parent
        self.kind = Kind.DOCUMENT if as_document else node_kind(node)
        self.tag = html_tag(node) if self.kind is Kind.ELEMENT else None
        self.keep_doctype = keep_doctype
        self._children: list[PrettyNode] | None = None

        if parent is None:
            self.in_preformatted = False
            self.in_raw_text = False
        else:
            self.in_preformatted = parent.in_preformatted or parent.tag in PREFORMATTED_ELEMENTS
            self.in_raw_text = parent.tag in RAW_TEXT_ELEMENTS

        self._check_invariants()
        self.inline = self._compute_inline()

    def __repr__(self) -> str:
        return f"PrettyNode({self.kind.name}, {self.node.name!r}, inline={self.inline})"

    @property
    def is_void(self) -> bool:
        return self.tag in VOID_ELEMENTS

    def _check_invariants(self) -> None:
        if self.kind is Kind.DOCUMENT:
            return
        if self.kind is Kind.DOCTYPE or self.is_void:
            if child_nodes(self.node):
                msg = f"<{self.node.name}> must not have children"
                raise InvariantError(msg)

    def _compute_inline(self) -> bool:
        if self.kind is Kind.DOCUMENT:
            return False
        if self.tag in PREFORMATTED_ELEMENTS:
            return True
        kids = child_nodes(self.node)
        if self.kind is Kind.ELEMENT and not kids:
            return True
        # A <plaintext> line would swallow the newline written after it.
        if len(kids) == 1 and node_kind(kids[0]) is Kind.TEXT and self.tag not in UNTERMINATED_ELEMENTS:
            data = kids[0].data or ""
            if "\n" not in data and "\r" not in data:
                return True
        return self.parent is not None and self.parent.inline

    def start(self) -> str:
        if self.kind is Kind.ELEMENT:
            tag = serialize_start_tag(str(self.node.name), self.node.attrs, is_void=self.is_void)
            if self.tag in PREFORMATTED_ELEMENTS:
                # The parser drops one newline right after <pre>/<textarea>.
                kids = child_nodes(self.node)
                if kids and node_kind(kids[0]) is Kind.TEXT and (kids[0].data or "").startswith("\n"):
                    tag += "\n"
            return tag
        if self.kind is Kind.COMMENT:
            return "<!--"
        if self.kind is Kind.DOCTYPE:
            if self.keep_doctype:
                return serialize_doctype(self.node.data)
            return DEFAULT_DOCTYPE
        return ""

    def end(self) -> str:
        if self.kind is Kind.ELEMENT:
            if self.is_void or runs_to_end(self.node):
                return ""
            return serialize_end_tag(str(self.node.name))
        if self.kind is Kind.COMMENT:
            return "-->"
        return ""

    def text(self) -> list[str]:
        if self.kind not in (Kind.TEXT, Kind.COMMENT):
            return []
        data: str = self.node.data or ""
        if self.kind is Kind.TEXT and not self.in_raw_text:
            data = escape(data)
        if self.in_preformatted:
            return [data]
        return split_lines(data.strip(WHITESPACE))

    def children(self) -> list[PrettyNode]:
        if self._children is None:
            if self.kind in (Kind.TEXT, Kind.COMMENT, Kind.DOCTYPE):
                self._children = []
            else:
                self._children = [
                    PrettyNode(child, self, keep_doctype=self.keep_doctype) for child in child_nodes(self.node)
                ]
        return self._children
