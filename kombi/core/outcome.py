# kombi/core/outcome.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")

# ---- Parse outcome definitions ----

@dataclass(frozen=True)
class Success(Generic[T]):
    result: T
    remaining: str  # always a suffix of the input the parser was given

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Reason-less non-match. Use the shared `FAILURE` instance."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "FAILURE"


FAILURE = Failure()

ParseOutcome = Union[Success[T], Failure]


class NoMatch(Exception):
    """Raised by a `chain` step to fail like any other non-match."""
