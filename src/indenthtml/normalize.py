"""Whitespace normalization.

Drops text nodes that hold nothing but whitespace so the renderer can choose
the layout itself. Preformatted subtrees are left exactly as parsed, and
elements and comments are never removed.
"""

from __future__ import annotations

from typing import Any

from .constants import WHITESPACE
from .tree import content_root, is_preformatted


def is_whitespace(text: str | None) -> bool:
    return not (text or "").strip(WHITESPACE)


def normalize(node: Any) -> Any:
    """Remove whitespace-only text children below `node`, in place.

    Returns `node`. Running it again on its own output changes nothing.
    """
    if is_preformatted(node):
        return node
    container = content_root(node)
    for child in list(getattr(container, "children", None) or []):
        if child.name == "#text" and is_whitespace(child.data):
            container.remove_child(child)
        else:
            normalize(child)
    return node
