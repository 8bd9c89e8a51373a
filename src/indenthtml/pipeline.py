"""Parse, normalize and render in one pass."""

from __future__ import annotations

from typing import Any, BinaryIO, TextIO

from justhtml import JustHTML, ParseError, StrictModeError

from .config import PrettyOptions
from .errors import InputParseError, StreamError
from .fragment import unwrap
from .normalize import normalize
from .render import Renderer
from .tree import PrettyNode


def decode(source: str | bytes, encoding: str = "utf-8") -> str:
    """Turn raw input into text, dropping a leading byte order mark."""
    if isinstance(source, (bytes, bytearray)):
        try:
            text = bytes(source).decode(encoding)
        except UnicodeDecodeError as exc:
            msg = f"input is not valid {encoding}: {exc.reason} at byte {exc.start}"
            raise InputParseError(msg) from exc
    else:
        text = source
    if text.startswith("\ufeff"):
        text = text[1:]
    return text


def parse(text: str, options: PrettyOptions | None = None) -> JustHTML:
    options = options or PrettyOptions()
    try:
        return JustHTML(text, collect_errors=options.collect_errors or options.strict, strict=options.strict)
    except StrictModeError as exc:
        error: ParseError | None = getattr(exc, "error", None)
        raise InputParseError(f"parse error {error or exc}", [error] if error else []) from exc


def prepare(doc: JustHTML, source: str | None = None, options: PrettyOptions | None = None) -> PrettyNode:
    """Pick the node to render, strip insignificant whitespace and wrap it."""
    options = options or PrettyOptions()
    target = normalize(unwrap(doc.root, source, options.unwrap))
    return PrettyNode(target, as_document=True, keep_doctype=options.keep_doctype)


def prettify(source: str | bytes, options: PrettyOptions | None = None) -> str:
    """Return `source` as indented HTML."""
    options = options or PrettyOptions()
    text = decode(source, options.encoding)
    node = prepare(parse(text, options), text, options)
    return Renderer(options.indent_unit).to_string(node)


def pretty_print(
    stream: BinaryIO | TextIO,
    sink: TextIO,
    options: PrettyOptions | None = None,
) -> list[Any]:
    """Read all of `stream`, then write the indented document to `sink`.

    Returns the parser's errors (empty unless `options.collect_errors`).
    Output already written stays written if a later write fails.
    """
    options = options or PrettyOptions()
    try:
        data = stream.read()
    except OSError as exc:
        msg = f"cannot read input: {exc}"
        raise StreamError(msg) from exc

    text = decode(data, options.encoding)
    doc = parse(text, options)
    node = prepare(doc, text, options)
    try:
        Renderer(options.indent_unit).render(node, sink)
    except OSError as exc:
        msg = f"cannot write output: {exc}"
        raise StreamError(msg) from exc
    return list(doc.errors or [])
