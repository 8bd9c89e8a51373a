"""Indented HTML output.

The renderer walks a `PrettyNode` tree depth first. A block node puts its
start tag, every text line and its end tag on their own lines, indented to
its depth. An inline node is written as one run of markup, and the parent
that holds it supplies the indentation before it and the newline after it.
"""

from __future__ import annotations

import io
from typing import Any, TextIO

from .constants import DEFAULT_INDENT_WIDTH
from .tree import PrettyNode


class Renderer:
    __slots__ = ("indent",)

    def __init__(self, indent: str = " " * DEFAULT_INDENT_WIDTH) -> None:
        self.indent = indent

    def render(self, node: Any, out: TextIO) -> None:
        """Write `node` to `out`. Accepts a `PrettyNode` or a bare parsed node."""
        if not isinstance(node, PrettyNode):
            node = PrettyNode(node)
        self._print(out, node, 0)

    def to_string(self, node: Any) -> str:
        buf = io.StringIO()
        self.render(node, buf)
        return buf.getvalue()

    def _print(self, out: TextIO, node: PrettyNode, depth: int) -> None:
        write = out.write
        pad = self.indent * depth
        start = node.start()
        end = node.end()
        lines = node.text()
        inline = node.inline
        block = not inline

        if start:
            if block:
                write(pad)
            write(start)
            if block:
                write("\n")

        line_pad = pad + self.indent if start else pad
        for line in lines:
            # Blank lines get no indentation.
            if block and line:
                write(line_pad)
            write(line)
            if block:
                write("\n")

        # Pass-through nodes (the document) keep their children at their own depth.
        child_depth = depth if not (start or end or lines) else depth + 1
        child_pad = self.indent * child_depth
        for child in node.children():
            framed = block and child.inline
            if framed:
                write(child_pad)
            self._print(out, child, child_depth)
            if framed:
                write("\n")

        if end:
            if block:
                write(pad)
            write(end)
            if block:
                write("\n")
