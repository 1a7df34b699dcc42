# kombi/kombic.py
"""kombic – kombi CLI

사용 예)
    $ python -m kombi.kombic eval "-5 * -(4 + -2) / (0 + 5) - 3 * 2 is pretty cool"
    $ python -m kombi.kombic eval --input tests/tmp/expr.txt --strict -D
    $ python -m kombi.kombic check "1 + (2 * 3"
    $ python -m kombi.kombic eval "-(4+-2)"        # '-'로 시작하는 식도 그대로 전달
    $ python -m kombi.kombic eval -- "-5*2"

기능
----
- eval  : 식을 계산해 값을 출력 (기본: 뒤에 남는 텍스트는 무시)
- check : 입력 전체가 올바른 식인지 검사 (eval --strict 와 같은 판정)

디버그 모드(-D/--debug)를 켜면 남은 입력(remaining)과 소비 길이를 stderr로 출력합니다.
"""

from __future__ import annotations
import argparse
import sys
from typing import Optional

# ------------------------------
# 헬퍼
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _read_source(args) -> str:
    if args.text is not None:
        return args.text
    from .arith.loader import load_expression_text
    return load_expression_text(args.input)

# ------------------------------
# 파이프라인
# ------------------------------

def _run(text: str, strict: bool, debug: bool) -> float:
    """EXPR 실행 → (strict면) 전체 소비 검사 → 값 반환."""
    from .arith.runtime import parse_expression, evaluate

    if debug:
        res = parse_expression(text)
        if res:
            used = len(text) - len(res.remaining)
            _eprint(f"[DEBUG] EXPR matched | consumed={used} remaining={res.remaining!r}")
        else:
            _eprint("[DEBUG] EXPR did not match")

    return evaluate(text, strict=strict)

# ------------------------------
# 커맨드 구현
# ------------------------------

def cmd_eval(args) -> int:
    from .arith.runtime import format_number
    try:
        text = _read_source(args)
        value = _run(text, strict=args.strict, debug=args.debug)
    except SyntaxError as e:
        _eprint("[SYNTAX ERROR]")
        _eprint(str(e))
        return 2
    except RecursionError:
        _eprint("[ERROR] expression nested too deeply")
        return 3
    except Exception as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    print(format_number(value))
    return 0


def cmd_check(args) -> int:
    from .arith.runtime import format_number
    try:
        text = _read_source(args)
        value = _run(text, strict=True, debug=args.debug)
    except SyntaxError as e:
        _eprint("[SYNTAX ERROR]")
        _eprint(str(e))
        return 2
    except RecursionError:
        _eprint("[ERROR] expression nested too deeply")
        return 3
    except Exception as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    print(f"[CHECK OK] length={len(text)} value={format_number(value)}")
    return 0

# ------------------------------
# 엔트리포인트
# ------------------------------

def _add_source(p: argparse.ArgumentParser) -> None:
    src_group = p.add_mutually_exclusive_group(required=True)
    src_group.add_argument("text", nargs="?", help="직접 입력한 식")
    src_group.add_argument("--input", help="식이 담긴 텍스트 파일 경로")


_FLAGS = {"--strict", "-D", "--debug", "-h", "--help"}


def _guard_expression(argv: list[str]) -> list[str]:
    """'-'로 시작하는 식(예: "-(4+-2)", "-5*2")이 옵션으로 오인되지 않도록
    해당 인자를 꺼내 맨 뒤의 '--' 다음으로 옮긴다."""
    if not argv or argv[0] not in ("eval", "check") or "--" in argv:
        return argv
    rest = argv[1:]
    i = 0
    while i < len(rest):
        tok = rest[i]
        if tok == "--input":
            i += 2
            continue
        if tok in _FLAGS or tok.startswith("--input="):
            i += 1
            continue
        if tok.startswith("-"):
            return [argv[0], *rest[:i], *rest[i + 1:], "--", tok]
        return argv
    return argv


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="kombic", description="kombi arithmetic expression CLI")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_eval = sub.add_parser("eval", help="식을 계산해 값을 출력합니다")
    _add_source(p_eval)
    p_eval.add_argument("--strict", action="store_true", help="입력 전체가 식이어야 함(뒤에 남는 텍스트 불허)")
    p_eval.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_eval.set_defaults(func=cmd_eval)

    p_check = sub.add_parser("check", help="입력 전체가 올바른 식인지 검사합니다")
    _add_source(p_check)
    p_check.add_argument("-D", "--debug", action="store_true", help="디버그 정보를 상세 출력")
    p_check.set_defaults(func=cmd_check)

    if argv is None:
        argv = sys.argv[1:]
    args = ap.parse_args(_guard_expression(list(argv)))
    return int(args.func(args))

if __name__ == "__main__":
    sys.exit(main())
