# kombi/core/parser.py
from __future__ import annotations
from typing import Callable, Generic, List, Optional, TypeVar
from .outcome import Success, FAILURE, ParseOutcome, NoMatch

# Monadic combinator engine:
# - A Parser wraps a pure function str -> Success(result, remaining) | FAILURE.
# - Failure never consumes; alternatives always restart on the original input.
# - Every combinator returns a new Parser. Nothing here holds per-parse state.

T = TypeVar("T")
U = TypeVar("U")


class Parser(Generic[T]):
    __slots__ = ("_fn", "name")

    def __init__(self, fn: Callable[[str], ParseOutcome[T]], name: Optional[str] = None):
        self._fn = fn
        self.name = name

    def __repr__(self) -> str:
        return f"Parser({self.name})" if self.name else f"Parser({self._fn.__name__})"

    # ---- Construction ----
    @staticmethod
    def from_fn(fn: Callable[[str], Optional[ParseOutcome[T]]]) -> "Parser[T]":
        """Wrap a raw parse function. A `None` return counts as failure."""
        def from_fn(tokens: str) -> ParseOutcome[T]:
            return fn(tokens) or FAILURE
        return Parser(from_fn)

    def named(self, name: str) -> "Parser[T]":
        return Parser(self._fn, name)

    # ---- Public entrypoint ----
    def parse(self, text: str) -> ParseOutcome[T]:
        return self._fn(text)

    # ---- Primitives ----
    @staticmethod
    def literal(s: str) -> "Parser[str]":
        def literal(tokens: str) -> ParseOutcome[str]:
            if not tokens.startswith(s):
                return FAILURE
            return Success(s, tokens[len(s):])
        return Parser(literal, repr(s))

    @staticmethod
    def pure(value: T) -> "Parser[T]":  # aka of, unit, return
        def pure(tokens: str) -> ParseOutcome[T]:
            return Success(value, tokens)
        return Parser(pure)

    of = pure

    # ---- Alternation ----
    def or_(self, p2: "Parser[T]") -> "Parser[T]":
        def or_(tokens: str) -> ParseOutcome[T]:
            return self.parse(tokens) or p2.parse(tokens)
        return Parser(or_)

    __or__ = or_

    @staticmethod
    def any(*ps: "Parser[T]") -> "Parser[T]":
        if not ps:
            raise TypeError("Parser.any() needs at least one alternative")
        acc = ps[0]
        for p in ps[1:]:
            acc = acc.or_(p)
        return acc

    # ---- Sequencing ----
    def chain(self, step: Callable[[T], "Parser[U]"]) -> "Parser[U]":  # aka bind, flatMap
        def chain(tokens: str) -> ParseOutcome[U]:
            res1 = self.parse(tokens)
            if not res1:
                return FAILURE
            try:
                p2 = step(res1.result)
            except NoMatch:
                return FAILURE
            return p2.parse(res1.remaining)
        return Parser(chain)

    def map(self, f: Callable[[T], U]) -> "Parser[U]":
        return self.chain(lambda x: Parser.pure(f(x)))

    def use_right(self, p2: "Parser[U]") -> "Parser[U]":
        return self.chain(lambda _: p2)

    def use_right_lazy(self, make: Callable[[], "Parser[U]"]) -> "Parser[U]":
        # right side is rebuilt on every run, like lazy()
        return self.chain(lambda _: make())

    def use_left(self, p2: "Parser[U]") -> "Parser[T]":
        return self.chain(lambda left: p2.chain(lambda _: Parser.pure(left)))

    # ---- Repetition ----
    @staticmethod
    def many0(p: "Parser[T]") -> "Parser[List[T]]":
        def many0(tokens: str) -> ParseOutcome[List[T]]:
            out: List[T] = []
            cur = tokens
            while True:
                res = p.parse(cur)
                # zero-width success would loop forever; stop before collecting it
                if not res or len(res.remaining) == len(cur):
                    break
                out.append(res.result)
                cur = res.remaining
            return Success(out, cur)
        return Parser(many0)

    @staticmethod
    def many1(p: "Parser[T]") -> "Parser[List[T]]":
        return p.chain(lambda r: Parser.many0(p).map(lambda rs: [r, *rs]))

    # ---- Recursion ----
    @staticmethod
    def lazy(make: Callable[[], "Parser[T]"]) -> "Parser[T]":
        """Defer building the parser until it runs.

        `make` is called again on every parse; nothing is cached. This is what
        lets two module-level rules refer to each other.
        """
        def lazy(tokens: str) -> ParseOutcome[T]:
            return make().parse(tokens)
        return Parser(lazy)


# module-level spellings
literal = Parser.literal
pure = Parser.pure
any_of = Parser.any
many0 = Parser.many0
many1 = Parser.many1
lazy = Parser.lazy
