"""Command line entry point: HTML on stdin, indented HTML on stdout."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import BinaryIO, TextIO

from .config import PrettyOptions
from .errors import ConfigError, IndentHTMLError
from .pipeline import pretty_print

PROG = "indenthtml"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Read HTML from standard input and write it back indented.",
    )
    parser.add_argument(
        "-w", "--width", type=int, default=None, help="Number of spaces or tabs per level (default: 4, or 1 with -t)",
    )
    parser.add_argument("-t", "--tab", action="store_true", help="Indent with tabs")
    parser.add_argument("--fragment", action="store_true", help="Always drop a bare html/head/body scaffold")
    parser.add_argument("--document", action="store_true", help="Never drop the html/head/body scaffold")
    parser.add_argument(
        "--keep-doctype", action="store_true", help="Reproduce the input doctype instead of <!DOCTYPE html>",
    )
    parser.add_argument("--strict", action="store_true", help="Fail on the first parse error")
    parser.add_argument("--show-errors", action="store_true", help="Report parse errors on stderr")
    parser.add_argument("--encoding", default="utf-8", help="Input encoding (default: utf-8)")
    return parser


def options_from_args(args: argparse.Namespace) -> PrettyOptions:
    if args.fragment and args.document:
        msg = "--fragment and --document are mutually exclusive"
        raise ConfigError(msg)
    unwrap = "always" if args.fragment else "never" if args.document else "auto"
    return PrettyOptions(
        width=args.width,
        use_tabs=args.tab,
        unwrap=unwrap,
        keep_doctype=args.keep_doctype,
        strict=args.strict,
        collect_errors=args.show_errors,
        encoding=args.encoding,
    )


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: BinaryIO | TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    stdin = stdin if stdin is not None else sys.stdin.buffer
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    args = build_parser().parse_args(argv)
    try:
        options = options_from_args(args)
        errors = pretty_print(stdin, stdout, options)
        stdout.flush()
    except ConfigError as exc:
        print(f"{PROG}: {exc}", file=stderr)
        return EXIT_USAGE
    except IndentHTMLError as exc:
        print(f"{PROG}: {exc}", file=stderr)
        return EXIT_FAILURE
    except OSError as exc:
        print(f"{PROG}: cannot write output: {exc}", file=stderr)
        return EXIT_FAILURE

    for error in errors:
        print(f"{PROG}: {error}", file=stderr)
    return EXIT_OK
