# kombi/arith/runtime.py
"""Entry points for the arithmetic grammar.

- `parse_expression(text)` runs `EXPR` and hands back the raw outcome.
  Trailing text is left in `remaining`; nothing forces full consumption.
- `evaluate(text, strict=False)` is the convenience caller. It raises
  `ExpressionError` instead of returning `FAILURE`, and with `strict=True`
  also rejects leftover input. The error message carries a caret snippet.
  Which inputs succeed is decided by `EXPR` alone.
"""

from __future__ import annotations
import math
from decimal import Decimal
from typing import Union

from ..core import Success, Failure, caret_snippet, line_col
from .grammar import EXPR


class ExpressionError(SyntaxError):
    """Input is not (entirely) an arithmetic expression."""

    def __init__(self, message: str, pos: int, remaining: str):
        super().__init__(message)
        self.pos = pos
        self.remaining = remaining


def parse_expression(text: str) -> Union[Success[float], Failure]:
    """Run `EXPR` on `text`.

    Returns
    -------
    Success[float] | Failure
        ``Success(value, remaining)`` or ``FAILURE``. ``remaining`` may be
        non-empty; trailing text is not an error here.

    Raises
    ------
    RecursionError
        The grammar recurses once per nested parenthesis, per unary minus and
        per chained binary operator. Under the default interpreter limit of
        1000 frames, roughly 50 nested parentheses, 90 unary minuses or a
        flat chain of about 110 operators is already too deep.
    """
    return EXPR.parse(text)


def evaluate(text: str, strict: bool = False) -> float:
    """Evaluate `text` and return its value.

    Parameters
    ----------
    text : str
        Input expression, e.g. ``"-5 * -(4 + -2)"``.
    strict : bool
        Require the expression to cover the whole input.

    Returns
    -------
    float
        The value. Division by zero yields ``inf``/``nan``, not an error.

    Raises
    ------
    ExpressionError
        `EXPR` does not match, or (``strict``) input is left over.
    RecursionError
        Input nests too deeply; see `parse_expression`.
    """
    res = parse_expression(text)
    if not res:
        raise ExpressionError(
            "Parse error at 1:1: input is not an expression\n"
            + caret_snippet(text, 0),
            0, text,
        )
    if strict and res.remaining:
        pos = len(text) - len(res.remaining)
        line, col = line_col(text, pos)
        raise ExpressionError(
            f"Parse error at {line}:{col}: unexpected {res.remaining[0]!r} after expression\n"
            + caret_snippet(text, pos),
            pos, res.remaining,
        )
    return res.result


def format_number(value: float) -> str:
    """Render a value like JavaScript's Number-to-string.

    Integers print without a fraction below 1e21. Other values use the
    shortest round-trip digits, in fixed notation for exponents -7 < e < 21
    and as ``1e-7`` / ``1.5e+22`` otherwise.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    r = repr(value)
    if "e" not in r:
        return r
    mantissa, exp = r.split("e")
    e = int(exp)
    if -7 < e < 21:
        return format(Decimal(r), "f")
    return f"{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"
