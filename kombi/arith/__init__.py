# kombi/arith/__init__.py
"""Arithmetic grammar (`+ - * /`, parentheses, unary minus) on kombi.core."""

from .grammar import DIGIT, SPACE, NUM, FACTOR, F2, TERM, T2, EXPR
from .runtime import ExpressionError, parse_expression, evaluate, format_number
from .loader import load_expression_text
