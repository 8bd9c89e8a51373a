"""Element sets used by the pretty printer.

Usage:
    from indenthtml.constants import VOID_ELEMENTS, PREFORMATTED_ELEMENTS

References:
    - https://html.spec.whatwg.org/multipage/syntax.html#void-elements
    - https://html.spec.whatwg.org/multipage/syntax.html#raw-text-elements
"""

# Section 12.1.2, "Elements". Void elements can't have any contents.
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "command",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    },
)

# Whitespace inside these is significant: no indentation, no added newlines.
PREFORMATTED_ELEMENTS = frozenset({"pre", "textarea"})

# The parser does not decode markup inside these, so their text is emitted verbatim.
RAW_TEXT_ELEMENTS = frozenset({"script", "style", "xmp", "iframe", "noembed", "noframes", "plaintext"})

WHITESPACE = " \t\r\n"

DEFAULT_INDENT_WIDTH = 4
DEFAULT_TAB_WIDTH = 1

# The parser reads everything after these start tags as text, so no end tag
# may follow them, not even the end tags of their ancestors.
UNTERMINATED_ELEMENTS = frozenset({"plaintext"})
