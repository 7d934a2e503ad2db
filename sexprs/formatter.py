"""Code layout and terminal syntax highlighting, with a command-line entry point."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from pygments import highlight as _pygments_highlight
from pygments.formatters import TerminalTrueColorFormatter
from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

from .errors import Error, ErrorType
from .naive import format_code_naive

_PROGRAM = "sexprs-format"
_STYLE = "monokai"


def highlight(source: Any, lang: str) -> str:
    """Colour ``source`` with 24-bit terminal escapes for the language of extension ``lang``."""
    try:
        lexer = get_lexer_for_filename(f"source.{lang}", stripnl=False, ensurenl=False)
    except ClassNotFound:
        raise Error(
            f"syntax not found for language {lang!r}", ErrorType.HIGHLIGHT
        ) from None
    formatter = TerminalTrueColorFormatter(style=_STYLE)
    return _pygments_highlight(str(source), lexer, formatter)


def format_code_string(source: Any) -> str:
    """Lay out source text with the naive token formatter."""
    return format_code_naive(str(source))


def highlight_code_string(source: Any) -> str:
    """Lay out source text and colour it as code."""
    return highlight(format_code_string(source), "rs")


def main(argv: list[str] | None = None) -> int:
    """Print each file named on the command line, laid out and (unless -n) highlighted."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(f"USAGE: {_PROGRAM} [-hn] <FILE>", file=sys.stderr)
        return 1
    use_highlight = True
    paths: list[Path] = []
    for arg in args:
        if arg == "-h":
            use_highlight = True
        elif arg == "-n":
            use_highlight = False
        elif Path(arg).is_file():
            paths.append(Path(arg).resolve())
        else:
            print(f"unexpected argument: {arg!r}", file=sys.stderr)
            return 1
    for path in paths:
        try:
            code = path.read_text(encoding="utf-8")
        except OSError as error:
            print(Error(error), file=sys.stderr)
            return 1
        if use_highlight:
            print(highlight_code_string(code))
        else:
            print(format_code_string(code))
    return 0