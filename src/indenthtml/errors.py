"""Exception taxonomy.

Library code raises these; only the command line turns them into exit codes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class IndentHTMLError(Exception):
    """Base class for every error raised by indenthtml."""


class InputParseError(IndentHTMLError):
    """The input could not be turned into a tree.

    `errors` holds the parser's `ParseError` objects when there are any.
    """

    def __init__(self, message: str, errors: Sequence[Any] = ()) -> None:
        super().__init__(message)
        self.errors = list(errors)


class ConfigError(IndentHTMLError):
    """Invalid or conflicting options."""


class StreamError(IndentHTMLError):
    """Reading the input or writing the output failed."""


class InvariantError(IndentHTMLError):
    """The tree handed to the printer breaks a structural invariant.

    This is a bug in whatever built the tree, never something to recover from.
    """
