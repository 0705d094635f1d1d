from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ReduceError(Exception):
    """Base error envelope. The CLI prints these; library callers catch them."""

    code: str
    message: str
    expression: Optional[str] = None
    column: Optional[int] = None

    def __str__(self) -> str:
        loc = self.expression if self.expression is not None else "<expression>"
        if self.column is not None:
            loc = f"{loc}:{self.column}"
        return f"{loc}: {self.code}: {self.message}"


class EmptyExpression(ReduceError):
    pass


class MissingOperand(ReduceError):
    pass


class OperandNotFound(ReduceError):
    pass
