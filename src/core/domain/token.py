"""
Token — Lexer output

A token is a number (kept as text until evaluation to avoid repeated
parse/format cycles), an operator, or a bracket.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.core.domain.operator import Operator


class TokenType(str, Enum):
    """Kinds of tokens produced by the lexer."""

    NUMBER = "NUMBER"
    OPERATOR = "OPERATOR"
    LEFT_BRACKET = "LEFT_BRACKET"
    RIGHT_BRACKET = "RIGHT_BRACKET"


@dataclass(frozen=True)
class Token:
    """Immutable token. `text` is set for numbers, `operator` for operators."""

    type: TokenType
    text: str = ""
    operator: Optional[Operator] = None

    @classmethod
    def number(cls, text: str) -> "Token":
        return cls(TokenType.NUMBER, text=text)

    @classmethod
    def of(cls, operator: Operator) -> "Token":
        return cls(TokenType.OPERATOR, operator=operator)

    @classmethod
    def left_bracket(cls) -> "Token":
        return cls(TokenType.LEFT_BRACKET, text="(")

    @classmethod
    def right_bracket(cls) -> "Token":
        return cls(TokenType.RIGHT_BRACKET, text=")")

    @property
    def is_number(self) -> bool:
        return self.type is TokenType.NUMBER

    @property
    def is_operator(self) -> bool:
        return self.type is TokenType.OPERATOR

    def __str__(self) -> str:
        if self.operator is not None:
            return self.operator.symbol
        return self.text
