from __future__ import annotations

import re

from wordfold.core.model import OPERATOR_KINDS, Token, TokenKind


_TOKEN_RE = re.compile(r"\S+")


def tokenize(expression: str) -> list[Token]:
    """Split an expression on runs of whitespace.

    Only a bare ``+`` or ``-`` is an operator; ``well-known`` or ``+1`` are words.
    Never fails: blank input yields an empty list and the reducer decides.
    """

    tokens: list[Token] = []
    for m in _TOKEN_RE.finditer(expression):
        text = m.group(0)
        kind = OPERATOR_KINDS.get(text, TokenKind.WORD)
        tokens.append(Token(kind=kind, text=text, column=m.start() + 1))
    return tokens
