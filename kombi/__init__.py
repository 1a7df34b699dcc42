# kombi/__init__.py
"""kombi: a small monadic parser-combinator engine and an arithmetic grammar."""

from .core import (
    Parser, Success, Failure, FAILURE, NoMatch,
    literal, pure, any_of, many0, many1, lazy,
    satisfy, pattern, eof,
)
from .arith import EXPR, ExpressionError, parse_expression, evaluate

__version__ = "0.1.0"
