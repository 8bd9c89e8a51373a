"""Printer options."""

from __future__ import annotations

import codecs
from dataclasses import dataclass

from .constants import DEFAULT_INDENT_WIDTH, DEFAULT_TAB_WIDTH
from .errors import ConfigError
from .fragment import UNWRAP_MODES


@dataclass(frozen=True, slots=True)
class PrettyOptions:
    """Everything that shapes the output.

    - `width`: indent characters per level. Defaults to 4 spaces, or 1 tab
      when `use_tabs` is set.
    - `unwrap`: fragment handling, one of "auto", "always", "never".
    - `keep_doctype`: reproduce the parsed doctype instead of `<!DOCTYPE html>`.
    - `strict`: turn the first parse error into an `InputParseError`.
    - `collect_errors`: keep the parser's errors for reporting.
    - `encoding`: used to decode byte input.
    """

    width: int | None = None
    use_tabs: bool = False
    unwrap: str = "auto"
    keep_doctype: bool = False
    strict: bool = False
    collect_errors: bool = False
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.width is not None and (isinstance(self.width, bool) or self.width <= 0):
            msg = f"indent width must be a positive integer, got {self.width}"
            raise ConfigError(msg)
        if self.unwrap not in UNWRAP_MODES:
            msg = f"unwrap mode must be one of {', '.join(UNWRAP_MODES)}, got {self.unwrap!r}"
            raise ConfigError(msg)
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            msg = f"unknown encoding: {self.encoding}"
            raise ConfigError(msg) from exc

    @property
    def indent_unit(self) -> str:
        if self.use_tabs:
            return "\t" * (self.width or DEFAULT_TAB_WIDTH)
        return " " * (self.width or DEFAULT_INDENT_WIDTH)
