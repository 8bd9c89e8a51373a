"""Fragment unwrapping.

Input such as `<p>hi</p>` parses into a full `html/head/body` scaffold that
the author never wrote. When that is the case the populated section is
rendered in place of the document, so the output looks like the input.

Heuristic: the tree must be exactly `#document > html > (head, body)`, none
of the three carrying attributes, with at most one of head and body
populated. In `auto` mode the source must additionally contain no doctype,
`<html`, `<head` or `<body` markup outside comments and raw text, so an
explicit scaffold is kept.
"""

from __future__ import annotations

import re
from typing import Any

from .tree import child_nodes

UNWRAP_MODES = ("auto", "always", "never")

_SCAFFOLD_RE = re.compile(r"<(?:!doctype|html|head|body)(?=[\s/>]|$)", re.IGNORECASE)

# Spans whose content the parser never reads as tags: comments, and the bodies
# of raw-text and RCDATA elements. An unclosed span runs to the end of input.
_OPAQUE_RE = re.compile(
    r"<!--.*?(?:-->|\Z)"
    r"|<(script|style|xmp|iframe|noembed|noframes|textarea|title)(?=[\s/>])[^>]*>.*?(?:</\1\s*>|\Z)"
    r"|<plaintext(?=[\s/>]).*",
    re.IGNORECASE | re.DOTALL,
)


def has_scaffold_markup(source: str) -> bool:
    """True when the source itself spells out a doctype, html, head or body tag."""
    return _SCAFFOLD_RE.search(_OPAQUE_RE.sub("", source)) is not None


def synthesized_content(root: Any) -> Any | None:
    """Return the populated head or body of a bare scaffold, or None.

    Body wins when both are empty.
    """
    if root.name != "#document":
        return None
    top = child_nodes(root)
    if len(top) != 1 or top[0].name != "html" or top[0].attrs:
        return None
    sections = child_nodes(top[0])
    if [s.name for s in sections] != ["head", "body"] or any(s.attrs for s in sections):
        return None
    head, body = sections
    if child_nodes(head) and child_nodes(body):
        return None
    return head if child_nodes(head) else body


def unwrap(root: Any, source: str | None = None, mode: str = "auto") -> Any:
    """Pick the node to render for `root`."""
    if mode == "never":
        return root
    if mode == "auto" and source is not None and has_scaffold_markup(source):
        return root
    content = synthesized_content(root)
    return root if content is None else content
