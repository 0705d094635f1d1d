from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from wordfold.core.errors import ReduceError


class TokenKind(str, Enum):
    WORD = "word"
    PLUS = "plus"
    MINUS = "minus"


OPERATOR_KINDS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    column: int  # 1-based offset into the expression

    @property
    def is_operator(self) -> bool:
        return self.kind is not TokenKind.WORD


@dataclass(frozen=True)
class Sample:
    name: str
    expression: str
    expected: Optional[str] = None


@dataclass(frozen=True)
class SampleResult:
    sample: Sample
    actual: Optional[str]
    error: Optional[ReduceError] = None

    @property
    def ok(self) -> bool:
        if self.error is not None:
            return False
        if self.sample.expected is None:
            return True
        return self.actual == self.sample.expected
