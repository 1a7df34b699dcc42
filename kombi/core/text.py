# kombi/core/text.py
"""Character-level parsers and text helpers.

- `satisfy(pred)`  : one character for which `pred` holds
- `pattern(src)`   : a regular expression anchored at the current input.
                     Compiled with the `regex` module, so Unicode property
                     classes (`\\p{Nd}`, `\\p{XID_Start}` ...) are available.
- `eof`            : matches only the empty input (never added implicitly)
- `caret_snippet`  : the line containing an offset, with `^` under it
"""

from __future__ import annotations
from typing import Callable, Tuple

import regex as _uregex

from .outcome import Success, FAILURE, ParseOutcome
from .parser import Parser


def satisfy(pred: Callable[[str], bool]) -> Parser[str]:
    def satisfy(tokens: str) -> ParseOutcome[str]:
        if tokens and pred(tokens[0]):
            return Success(tokens[0], tokens[1:])
        return FAILURE
    return Parser(satisfy)


def pattern(src: str, flags: int = 0) -> Parser[str]:
    """Match `src` at the start of the input; result is the matched text."""
    rx = _uregex.compile(src, flags)

    def pattern(tokens: str) -> ParseOutcome[str]:
        m = rx.match(tokens)
        if m is None:
            return FAILURE
        return Success(m.group(0), tokens[m.end():])
    return Parser(pattern, f"/{src}/")


def _eof(tokens: str) -> ParseOutcome[str]:
    if tokens:
        return FAILURE
    return Success("", tokens)

eof: Parser[str] = Parser(_eof, "EOF")

# --------- Diagnostics ---------

def _line_bounds(src: str, pos: int) -> Tuple[int, int]:
    """Return the [start, end) range of the line holding `pos`."""
    start = src.rfind("\n", 0, pos)
    start = 0 if start < 0 else start + 1
    end = src.find("\n", pos)
    end = len(src) if end < 0 else end
    return start, end


def line_col(src: str, pos: int) -> Tuple[int, int]:
    """1-based line/column of offset `pos`."""
    start, _ = _line_bounds(src, pos)
    return src.count("\n", 0, pos) + 1, (pos - start) + 1


def caret_snippet(src: str, pos: int) -> str:
    start, end = _line_bounds(src, pos)
    line = src[start:end]
    caret = " " * (pos - start) + "^"
    return f"{line}\n{caret}"
