"""
Lexer — standardized text → token sequence

Numbers are accumulated character by character into the last NUMBER token.
Every '-' is rewritten into a negation group '(0-' so that the evaluator
only ever sees binary operators:

    8-4        →  8 + ( 0 - 4 )
    12/-3      →  12 / ( 0 - 3 )
    2-(17-5)   →  2 + ( 0 - ( 17 + ( 0 - 5 ) ) )
    -6*(-3-5)  →  ( 0 - 6 ) * ( ( 0 - 3 + ( 0 - 5 ) ) )

NEGATION GROUPS:
1. '-' after a number or ')' is a subtraction: a '+' is inserted first and
   the group ends before the next operator that does not bind tighter than
   subtraction (so 10-7%3 == 10-(7%3))
2. Any other '-' is a negation: the group ends before the next operator that
   does not bind tighter than multiplication (so -2^2 == -(2^2), -7%3 == (-7)%3)
3. Every group also ends before the ')' of its bracket depth or at the end
4. A subtraction does not close a group that opened its bracket level or
   followed a '+': adding to it gives the same value. The group then
   becomes a sum and ends like a subtraction group.
5. '-' right after a literal 0 that opens a bracket level is already a
   negation and is emitted as is: "8+(0-4)" and "8-4" give the same tokens.
"""

from dataclasses import dataclass
from typing import Final, Optional

from src.calculator.registry import SymbolRegistry
from src.core.domain.operator import MULTIPLICATIVE_PRECEDENCE, Operator
from src.core.domain.token import Token, TokenType
from src.core.errors import (
    ConsecutiveOperatorsError,
    MalformedNumberError,
    OperandRequiredError,
    UnrecognizedSymbolError,
)

DIGITS: Final[str] = "0123456789"

# Negation binds like multiplication: its group spans tighter operators only
NEGATION_PRECEDENCE: Final[int] = MULTIPLICATIVE_PRECEDENCE


@dataclass
class _NegationGroup:
    """An open '(0-' group waiting for its closing bracket."""

    # Operator before the group, None at the start of a bracket level
    left: Optional[Operator]
    # Operators that do not bind tighter than this end the group
    bound: int
    is_sum: bool = False

    def absorbs_addition(self, addition: Operator) -> bool:
        return self.is_sum or self.left is None or self.left == addition

    def ends_before(self, operator: Operator) -> bool:
        # A sum keeps operators of its own precedence: 1-2-3+4 stays one group
        if self.is_sum:
            return operator.precedence < self.bound
        return operator.precedence <= self.bound


class Lexer:
    """Tokenization stage of the calculator."""

    def __init__(self, registry: SymbolRegistry):
        self._registry = registry

    def tokenize(self, expression: str) -> list[Token]:
        """
        Convert a standardized expression into tokens.

        Args:
            expression: Output of the Standardizer

        Returns:
            Token list, negations rewritten as subtractions from zero

        Raises:
            MalformedNumberError: '1.2.3', '2.', '.+'
            UnrecognizedSymbolError: Character that is not a registered operator
            ConsecutiveOperatorsError: Two operators in a row ('-' excepted)
            OperandRequiredError: Expression made of a single operator
        """
        tokens: list[Token] = []
        # One list of open negation groups per bracket depth
        levels: list[list[_NegationGroup]] = [[]]

        for index, char in enumerate(expression):
            if char in DIGITS or char == ".":
                self._add_number_char(tokens, expression, index)
            elif char == "(":
                tokens.append(Token.left_bracket())
                levels.append([])
            elif char == ")":
                self._close_groups(tokens, levels[-1], len(levels[-1]))
                tokens.append(Token.right_bracket())
                if len(levels) > 1:
                    levels.pop()
            else:
                operator = self._registry.operator(char)
                if operator is None:
                    raise UnrecognizedSymbolError(f"Unrecognized operator: {char}")
                if len(expression) == 1:
                    raise OperandRequiredError(
                        f"Malformed expression: operator {char} requires numbers to operate on"
                    )

                if operator == self._registry.subtraction:
                    self._add_subtraction(tokens, levels[-1])
                else:
                    self._add_operator(tokens, levels[-1], operator)

        for level in reversed(levels):
            self._close_groups(tokens, level, len(level))

        return tokens

    # -------------------------------------------------------------------------
    # Numbers
    # -------------------------------------------------------------------------

    @staticmethod
    def _add_number_char(tokens: list[Token], expression: str, index: int) -> None:
        char = expression[index]

        if char == ".":
            is_last = index + 1 == len(expression)
            if is_last or expression[index + 1] not in DIGITS:
                raise MalformedNumberError(
                    "Malformed number: digits must trail the decimal point"
                )

        if not tokens or not tokens[-1].is_number:
            tokens.append(Token.number("0." if char == "." else char))
            return

        current = tokens[-1].text
        if char == "." and "." in current:
            raise MalformedNumberError(
                "Malformed number: cannot contain more than one decimal point"
            )
        tokens[-1] = Token.number(current + char)

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def _add_operator(
        self, tokens: list[Token], groups: list[_NegationGroup], operator: Operator
    ) -> None:
        if tokens and tokens[-1].is_operator:
            raise ConsecutiveOperatorsError(
                f"Consecutive operators found: {tokens[-1]}{operator.symbol}"
            )

        open_groups = 0
        while open_groups < len(groups) and groups[-1 - open_groups].ends_before(operator):
            open_groups += 1
        self._close_groups(tokens, groups, open_groups)

        tokens.append(Token.of(operator))

    def _add_subtraction(self, tokens: list[Token], groups: list[_NegationGroup]) -> None:
        subtraction = self._registry.subtraction
        addition = self._registry.addition

        if self._follows_leading_zero(tokens):
            tokens.append(Token.of(subtraction))
            return

        previous = tokens[-1] if tokens else None
        if previous is not None and previous.type in (TokenType.NUMBER, TokenType.RIGHT_BRACKET):
            open_groups = 0
            while open_groups < len(groups) and not groups[-1 - open_groups].absorbs_addition(addition):
                open_groups += 1
            self._close_groups(tokens, groups, open_groups)
            if groups:
                groups[-1].is_sum = True
                groups[-1].bound = subtraction.precedence

            tokens.append(Token.of(addition))
            left = addition
            bound = subtraction.precedence
        else:
            left = previous.operator if previous is not None else None
            bound = NEGATION_PRECEDENCE

        tokens.extend([Token.left_bracket(), Token.number("0"), Token.of(subtraction)])
        groups.append(_NegationGroup(left=left, bound=bound))

    @staticmethod
    def _follows_leading_zero(tokens: list[Token]) -> bool:
        """Whether the tokens end in '0' at the start of the expression or after '('."""
        if not tokens or tokens[-1] != Token.number("0"):
            return False
        return len(tokens) == 1 or tokens[-2].type is TokenType.LEFT_BRACKET

    @staticmethod
    def _close_groups(tokens: list[Token], groups: list[_NegationGroup], count: int) -> None:
        """Close the `count` innermost negation groups."""
        for _ in range(count):
            groups.pop()
            tokens.append(Token.right_bracket())
