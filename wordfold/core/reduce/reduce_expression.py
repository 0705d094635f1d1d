from __future__ import annotations

from typing import Optional

from wordfold.core.errors import EmptyExpression, MissingOperand, OperandNotFound
from wordfold.core.model import Token, TokenKind
from wordfold.core.tokenize.tokenize_expression import tokenize


def reduce_expression(expression: str) -> str:
    """Reduce a whitespace-separated word expression to a single string.

    ``+`` appends the right word to the left operand, ``-`` strikes the first
    occurrence of the right word out of it. Raises a ReduceError subclass on
    malformed input; never returns partial output.
    """

    return reduce_tokens(tokenize(expression), expression=expression)


def reduce_tokens(tokens: list[Token], expression: Optional[str] = None) -> str:
    if not tokens:
        raise EmptyExpression(
            code="E_EMPTY_EXPRESSION",
            message="expression has no tokens",
            expression=expression,
        )

    words: list[str] = []
    has_operand = False
    pending: Optional[Token] = None

    for tok in tokens:
        if tok.kind is TokenKind.WORD:
            if pending is None:
                words.append(tok.text)
                has_operand = True
                continue
            left = " ".join(words)
            result = _apply(pending, left, tok, expression)
            # an emptied operand contributes no word to later joins
            words = [result] if result else []
            pending = None
            continue

        if not has_operand:
            raise MissingOperand(
                code="E_MISSING_OPERAND",
                message=f"operator '{tok.text}' has no left operand",
                expression=expression,
                column=tok.column,
            )
        if pending is not None:
            raise MissingOperand(
                code="E_MISSING_OPERAND",
                message=f"operator '{pending.text}' is followed by operator '{tok.text}'",
                expression=expression,
                column=tok.column,
            )
        pending = tok

    if pending is not None:
        raise MissingOperand(
            code="E_MISSING_OPERAND",
            message=f"operator '{pending.text}' has no right operand",
            expression=expression,
            column=pending.column,
        )

    return " ".join(words)


def _apply(op: Token, left: str, right: Token, expression: Optional[str]) -> str:
    if op.kind is TokenKind.PLUS:
        return concatenate(left, right.text)
    if op.kind is TokenKind.MINUS:
        result = strike(left, right.text)
        if result is None:
            raise OperandNotFound(
                code="E_OPERAND_NOT_FOUND",
                message=f"'{right.text}' does not occur in '{left}'",
                expression=expression,
                column=right.column,
            )
        return result
    raise ValueError(f"not an operator token: {op!r}")  # pragma: no cover


def concatenate(left: str, right: str) -> str:
    return left + right


def strike(left: str, right: str) -> Optional[str]:
    """Remove the first literal occurrence of ``right`` from ``left``.

    Returns None when ``right`` does not occur. A double space left at the seam
    collapses to one, and a seam space at either end is dropped.
    """

    idx = left.find(right)
    if idx < 0:
        return None

    head = left[:idx]
    tail = left[idx + len(right) :]

    if not head:
        return tail.lstrip(" ")
    if not tail:
        return head.rstrip(" ")
    if head.endswith(" ") and tail.startswith(" "):
        tail = tail[1:]
    return head + tail
