"""입력 식 파일 로더"""

from __future__ import annotations
from pathlib    import Path


def load_expression_text(path: str) -> str:
    """
    Load Expression Text

    줄바꿈을 '\\n'으로 통일하고, 끝의 개행 하나는 제거한다.
    """
    text = Path(path).read_text(encoding="utf-8")
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    if text.endswith("\n"):
        text = text[:-1]
    return text
