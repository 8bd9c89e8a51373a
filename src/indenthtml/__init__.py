from .config import PrettyOptions
from .errors import ConfigError, IndentHTMLError, InputParseError, InvariantError, StreamError
from .markup import escape
from .normalize import normalize
from .pipeline import parse, prettify, pretty_print
from .render import Renderer
from .tree import Kind, PrettyNode

__all__ = [
    "ConfigError",
    "IndentHTMLError",
    "InputParseError",
    "InvariantError",
    "Kind",
    "PrettyNode",
    "PrettyOptions",
    "Renderer",
    "StreamError",
    "escape",
    "normalize",
    "parse",
    "prettify",
    "pretty_print",
]
