# kombi/core/__init__.py
"""Combinator engine for kombi.

This package provides:
- Parse outcomes (`Success`, `FAILURE`) and the `NoMatch` step signal
- The immutable `Parser` value and its combinators
- Character-level helpers (`satisfy`, `pattern`, `eof`)

It knows nothing about any particular grammar.
"""

from .outcome import Success, Failure, FAILURE, ParseOutcome, NoMatch
from .parser import (
    Parser, literal, pure, any_of, many0, many1, lazy,
)
from .text import satisfy, pattern, eof, caret_snippet, line_col
