import pytest

from kombi.core import (
    Parser, Success, FAILURE, NoMatch,
    literal, pure, any_of, many0, many1, lazy,
)


def test_literal_consumes_exact_prefix():
    assert literal("ab").parse("abcd") == Success("ab", "cd")
    assert literal("ab").parse("ab") == Success("ab", "")


def test_literal_fails_without_partial_match():
    assert literal("ab").parse("ac") is FAILURE
    assert literal("ab").parse("a") is FAILURE
    assert literal("ab").parse("AB") is FAILURE
    assert literal("ab").parse(" ab") is FAILURE


def test_pure_consumes_nothing():
    assert pure(7).parse("xyz") == Success(7, "xyz")
    assert Parser.of("v").parse("") == Success("v", "")


def test_outcome_truthiness():
    assert Success(0, "")
    assert Success(None, "rest")
    assert not FAILURE


def test_or_prefers_first_success():
    p = literal("a").map(lambda _: 1).or_(literal("a").map(lambda _: 2))
    assert p.parse("ab") == Success(1, "b")


def test_or_retries_on_original_input():
    p = literal("ab") | literal("ac")
    assert p.parse("acd") == Success("ac", "d")
    assert p.parse("ad") is FAILURE


def test_any_is_left_fold_of_or():
    p = any_of(literal("x"), literal("y"), literal("z"))
    assert p.parse("z1") == Success("z", "1")
    assert p.parse("w") is FAILURE


def test_any_requires_alternatives():
    with pytest.raises(TypeError):
        any_of()


def test_chain_skips_step_on_failure():
    calls = []

    def step(x):
        calls.append(x)
        return pure(x)

    assert literal("a").chain(step).parse("b") is FAILURE
    assert calls == []


def test_chain_runs_step_result_on_remainder():
    p = literal("a").chain(lambda r: literal(r * 2))
    assert p.parse("aaab") == Success("aa", "b")
    assert p.parse("ab") is FAILURE


def test_chain_choice_depends_on_value():
    digit = any_of(*map(literal, "123"))
    counted = digit.chain(lambda n: many0(literal("x")).map(
        lambda xs: len(xs) == int(n)))
    assert counted.parse("2xx") == Success(True, "")
    assert counted.parse("3xx") == Success(False, "")


def test_chain_step_nomatch_is_plain_failure():
    def step(r):
        raise NoMatch()

    p = literal("a").chain(step) | literal("ab")
    assert p.parse("abc") == Success("ab", "c")


def test_chain_step_errors_propagate():
    def step(r):
        raise ValueError("boom")

    with pytest.raises(ValueError):
        literal("a").chain(step).parse("a")


def test_map_keeps_remainder():
    assert literal("12").map(int).parse("123") == Success(12, "3")
    assert literal("12").map(int).parse("21") is FAILURE


def test_many0_boundaries():
    assert many0(literal("a")).parse("bbb") == Success([], "bbb")
    assert many0(literal("a")).parse("aaab") == Success(["a", "a", "a"], "b")
    assert many0(literal("a")).parse("") == Success([], "")


def test_many0_stops_on_zero_width_success():
    assert many0(pure(1)).parse("x") == Success([], "x")


def test_many0_handles_long_runs():
    text = "a" * 5000 + "!"
    res = many0(literal("a")).parse(text)
    assert len(res.result) == 5000
    assert res.remaining == "!"


def test_many1_boundaries():
    assert many1(literal("a")).parse("bbb") is FAILURE
    assert many1(literal("a")).parse("ab") == Success(["a"], "b")


def test_use_right_and_use_left():
    assert literal("(").use_right(literal("x")).parse("(x)") == Success("x", ")")
    assert literal("x").use_left(literal(")")).parse("x)!") == Success("x", "!")
    assert literal("x").use_left(literal(")")).parse("x!") is FAILURE


def test_use_right_lazy_rebuilds_each_run():
    built = []

    def make():
        built.append(1)
        return literal("b")

    p = literal("a").use_right_lazy(make)
    assert p.parse("ab") == Success("b", "")
    assert p.parse("ab") == Success("b", "")
    assert len(built) == 2


def test_lazy_defers_and_reinvokes():
    built = []

    def make():
        built.append(1)
        return literal("q")

    p = lazy(make)
    assert built == []
    assert p.parse("q") == Success("q", "")
    assert p.parse("q") == Success("q", "")
    assert len(built) == 2


def test_lazy_allows_self_reference():
    # nested := '[' nested ']' | ''
    nested = literal("[").use_right(lazy(lambda: nested)).use_left(literal("]")).map(
        lambda d: d + 1) | pure(0)
    assert nested.parse("[[[]]]x") == Success(3, "x")


def test_from_fn_treats_none_as_failure():
    p = Parser.from_fn(lambda s: Success(s[:1], s[1:]) if s else None)
    assert p.parse("ab") == Success("a", "b")
    assert p.parse("") is FAILURE


def test_named_only_changes_repr():
    p = literal("a").named("A")
    assert repr(p) == "Parser(A)"
    assert p.parse("ab") == Success("a", "b")
