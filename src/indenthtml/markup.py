"""Markup strings for parsed nodes: escaping, start/end tags and doctypes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

DEFAULT_DOCTYPE = "<!DOCTYPE html>"


def escape(text: str | None) -> str:
    if not text:
        return ""
    # "&" first, or the other replacements would be double-encoded.
    return str(text).replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")


def serialize_start_tag(name: str, attrs: Mapping[str, str | None] | None, *, is_void: bool = False) -> str:
    """Build `<name a b="v">`.

    Attributes keep the parser's order. Empty values are written as bare
    names, anything else is escaped and double quoted. Void elements get the
    self-closing ` />` form.
    """
    parts: list[str] = ["<", name]
    if attrs:
        for key, value in attrs.items():
            parts.extend([" ", key])
            if value is None or value == "":
                continue
            parts.extend(['="', escape(str(value)), '"'])

    parts.append(" />" if is_void else ">")
    return "".join(parts)


def serialize_end_tag(name: str) -> str:
    return f"</{name}>"


def serialize_doctype(doctype: Any) -> str:
    """Reproduce a parsed doctype, falling back to `<!DOCTYPE html>`.

    The parser stores either a plain string or an object with `name`,
    `public_id` and `system_id`.
    """
    if doctype is None:
        return DEFAULT_DOCTYPE
    if isinstance(doctype, str):
        return f"<!DOCTYPE {doctype}>" if doctype else DEFAULT_DOCTYPE

    name: str = getattr(doctype, "name", None) or "html"
    public_id: str | None = getattr(doctype, "public_id", None)
    system_id: str | None = getattr(doctype, "system_id", None)

    parts: list[str] = ["<!DOCTYPE ", name]
    if public_id:
        parts.append(f' PUBLIC "{public_id}"')
        if system_id:
            parts.append(f' "{system_id}"')
    elif system_id:
        parts.append(f' SYSTEM "{system_id}"')
    parts.append(">")
    return "".join(parts)
