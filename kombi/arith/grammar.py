# kombi/arith/grammar.py
"""Signed integer arithmetic built only from kombi.core combinators.

    digit     := '0'..'9'
    space     := (' ')*
    num       := digit+
    factor    := '(' space expr space ')' | '-' factor | num
    term      := factor F2
    F2        := space ('*' | '/') space factor F2 | <1>
    expr      := term T2
    T2        := space ('+' | '-') space term T2 | <0>

F2/T2 are right-recursive continuations. Each one folds its operand into the
value of the rest of the chain as soon as that resolves: F2 yields the factor
still to multiply by, T2 the offset still to add. Their base cases are the
identity elements, so a rule with no operators keeps its value.

Values are floats. Overflow gives inf, and dividing by zero gives inf or nan
instead of raising.

Every nested parenthesis, unary minus and chained operator adds Python stack
frames, so deep or long input raises RecursionError (about 50 nested
parentheses under the default limit). many0 loops, so digit and space runs
do not count.
"""

from __future__ import annotations
import math

from ..core import Parser, literal, pure, any_of, many0, many1, lazy


def _reciprocal(n: float) -> float:
    if n == 0:
        return math.copysign(math.inf, n)
    return 1 / n


DIGIT: Parser[str] = any_of(*map(literal, "0123456789")).named("DIGIT")

SPACE: Parser[list] = many0(literal(" ")).named("SPACE")

NUM: Parser[float] = (
    many1(DIGIT)
    .map(lambda digits: float("".join(digits)))
).named("NUM")

FACTOR: Parser[float] = any_of(
    literal("(")
    .use_right(SPACE)
    .use_right(lazy(lambda: EXPR))
    .use_left(SPACE)
    .use_left(literal(")")),

    literal("-")
    .use_right(lazy(lambda: FACTOR))
    .map(lambda n: -n),

    NUM,
).named("FACTOR")

F2: Parser[float] = any_of(
    SPACE
    .use_right(literal("*"))
    .use_right(SPACE)
    .use_right(FACTOR)
    .chain(lambda n1: F2
    .map(lambda n2: n1 * n2)),

    SPACE
    .use_right(literal("/"))
    .use_right(SPACE)
    .use_right(FACTOR)
    .chain(lambda n1: F2
    .map(lambda n2: _reciprocal(n1) * n2)),

    pure(1.0),
).named("F2")

TERM: Parser[float] = (
    FACTOR
    .chain(lambda n1: F2
    .map(lambda n2: n1 * n2))
).named("TERM")

T2: Parser[float] = any_of(
    SPACE
    .use_right(literal("+"))
    .use_right(SPACE)
    .use_right(TERM)
    .chain(lambda n1: T2
    .map(lambda n2: n1 + n2)),

    SPACE
    .use_right(literal("-"))
    .use_right(SPACE)
    .use_right(TERM)
    .chain(lambda n1: T2
    .map(lambda n2: -n1 + n2)),

    pure(0.0),
).named("T2")

EXPR: Parser[float] = (
    TERM
    .chain(lambda n1: T2
    .map(lambda n2: n1 + n2))
).named("EXPR")
