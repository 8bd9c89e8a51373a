from __future__ import annotations

import io
import unittest

from indenthtml.cli import EXIT_FAILURE, EXIT_OK, EXIT_USAGE, main


class BrokenOutput(io.StringIO):
    def write(self, s):
        raise OSError("broken pipe")


def run(argv: list[str], data: bytes) -> tuple[int, str, str]:
    stdout = io.StringIO()
    stderr = io.StringIO()
    code = main(argv, stdin=io.BytesIO(data), stdout=stdout, stderr=stderr)
    return code, stdout.getvalue(), stderr.getvalue()


class TestCli(unittest.TestCase):
    def test_defaults(self):
        """Four-space indentation, output on stdout, nothing on stderr."""
        code, out, err = run([], b"<ul><li>a</li><li>b</li></ul>")
        assert code == EXIT_OK
        assert out == "<ul>\n    <li>a</li>\n    <li>b</li>\n</ul>\n"
        assert err == ""

    def test_width(self):
        code, out, _ = run(["-w", "2"], b"<ul><li>a</li></ul>")
        assert code == EXIT_OK
        assert out == "<ul>\n  <li>a</li>\n</ul>\n"

    def test_tab(self):
        assert run(["-t"], b"<ul><li>a</li></ul>")[1] == "<ul>\n\t<li>a</li>\n</ul>\n"
        assert run(["-t", "-w", "2"], b"<ul><li>a</li></ul>")[1] == "<ul>\n\t\t<li>a</li>\n</ul>\n"

    def test_non_positive_width(self):
        code, out, err = run(["-w", "0"], b"<p>x</p>")
        assert code == EXIT_USAGE
        assert out == ""
        assert err.startswith("indenthtml: indent width")

    def test_non_numeric_width_is_a_usage_error(self):
        """argparse rejects it before main() builds any options."""
        with self.assertRaises(SystemExit) as ctx:
            run(["-w", "wide"], b"")
        assert ctx.exception.code == EXIT_USAGE

    def test_conflicting_flags(self):
        code, _, err = run(["--fragment", "--document"], b"<p>x</p>")
        assert code == EXIT_USAGE
        assert "mutually exclusive" in err

    def test_fragment_and_document(self):
        html = b"<html><body><p>x</p></body></html>"
        assert run(["--fragment"], html)[1] == "<p>x</p>\n"
        assert run(["--document"], b"<p>x</p>")[1].startswith("<html>\n    <head></head>\n")

    def test_keep_doctype(self):
        html = b'<!DOCTYPE html PUBLIC "-//W3C//DTD HTML 4.01//EN" "http://www.w3.org/TR/html4/strict.dtd"><p>x</p>'
        out = run(["--keep-doctype"], html)[1]
        assert out.splitlines()[0] == (
            '<!DOCTYPE html PUBLIC "-//W3C//DTD HTML 4.01//EN" "http://www.w3.org/TR/html4/strict.dtd">'
        )

    def test_invalid_input_bytes(self):
        code, _, err = run([], b"<p>\xff\xfe</p>")
        assert code == EXIT_FAILURE
        assert "not valid utf-8" in err

    def test_encoding(self):
        code, out, _ = run(["--encoding", "latin-1"], b"<p>caf\xe9</p>")
        assert code == EXIT_OK
        assert out == "<p>café</p>\n"

    def test_unknown_encoding(self):
        code, _, err = run(["--encoding", "klingon"], b"<p>x</p>")
        assert code == EXIT_USAGE
        assert "unknown encoding" in err

    def test_strict(self):
        """A parse error in strict mode aborts before anything is written."""
        code, out, err = run(["--strict"], b"<p>\x00</p>")
        assert code == EXIT_FAILURE
        assert out == ""
        assert err.startswith("indenthtml: parse error")

    def test_show_errors(self):
        """Reported errors are diagnostics only; the document is still printed."""
        code, _, err = run(["--show-errors"], b"<p>\x00</p>")
        assert code == EXIT_OK
        assert err.startswith("indenthtml: ")

    def test_write_failure(self):
        """A broken output stream is reported, not raised."""
        stderr = io.StringIO()
        code = main([], stdin=io.BytesIO(b"<p>x</p>"), stdout=BrokenOutput(), stderr=stderr)
        assert code == EXIT_FAILURE
        assert "cannot write output" in stderr.getvalue()

    def test_plaintext_input(self):
        """Everything after <plaintext> is text, so no end tags follow it."""
        code, out, _ = run([], b"<div><plaintext>a < b")
        assert code == EXIT_OK
        assert out == "<div>\n    <plaintext>\n        a < b\n"
