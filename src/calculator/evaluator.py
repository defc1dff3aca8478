"""
Evaluator — token sequence → float

Dual-stack operator-precedence evaluation: an operand stack of floats and an
operator stack where None is the sentinel pushed for '('. The sentinel has
the lowest precedence, so any operator is stacked on top of it.

CRITICAL INVARIANTS:
1. Operands are applied in source order: op(b, a) where a is popped first
2. An operator is stacked only if it binds tighter than the stack top,
   otherwise the top is reduced first
3. Stack underflow is reported as OperandRequiredError, never IndexError
"""

from typing import Final, Optional

from src.core.domain.operator import Operator
from src.core.domain.token import Token, TokenType
from src.core.errors import MathSyntaxError, OperandRequiredError, UnbalancedBracketsError

# Marker pushed on the operator stack for '('
_SENTINEL: Final = None


class Evaluator:
    """Evaluation stage of the calculator. Holds no state between calls."""

    def evaluate(self, tokens: list[Token]) -> float:
        """
        Compute the value of a token sequence.

        Args:
            tokens: Lexer output

        Returns:
            Result, possibly ±inf or NaN (IEEE-754 arithmetic)

        Raises:
            OperandRequiredError: Operator without operands, or nothing to evaluate
            UnbalancedBracketsError: ')' without '(' or '(' without ')'
            MathSyntaxError: Two operands without an operator between them
        """
        operands: list[float] = []
        operators: list[Optional[Operator]] = []

        for index, token in enumerate(tokens):
            if token.type is TokenType.NUMBER:
                operands.append(float(token.text))

            elif token.type is TokenType.OPERATOR:
                self._check_operands(tokens, index)
                operator = token.operator
                while (
                    operators
                    and operators[-1] is not _SENTINEL
                    and not operator.binds_tighter_than(operators[-1])
                ):
                    self._reduce(operands, operators)
                operators.append(operator)

            elif token.type is TokenType.LEFT_BRACKET:
                operators.append(_SENTINEL)

            else:
                while operators and operators[-1] is not _SENTINEL:
                    self._reduce(operands, operators)
                if not operators:
                    raise UnbalancedBracketsError("Closing bracket without an opening bracket")
                operators.pop()

        while operators:
            if operators[-1] is _SENTINEL:
                raise UnbalancedBracketsError("Opening bracket without a closing bracket")
            self._reduce(operands, operators)

        if not operands:
            raise OperandRequiredError("Malformed expression: nothing to evaluate")
        if len(operands) > 1:
            raise MathSyntaxError(
                f"Malformed expression: missing operator between {len(operands)} operands"
            )

        return operands[0]

    @staticmethod
    def _check_operands(tokens: list[Token], index: int) -> None:
        """A binary operator needs an operand on each side."""
        symbol = str(tokens[index])

        if index == 0 or index == len(tokens) - 1:
            raise OperandRequiredError(
                f"Malformed expression: operator {symbol} requires numbers to operate on"
            )

        previous = tokens[index - 1]
        if previous.is_operator or previous.type is TokenType.LEFT_BRACKET:
            raise OperandRequiredError(
                f"Malformed expression: operator {symbol} has no left operand"
            )

        if tokens[index + 1].type is TokenType.RIGHT_BRACKET:
            raise OperandRequiredError(
                f"Malformed expression: operator {symbol} has no right operand"
            )

    @staticmethod
    def _reduce(operands: list[float], operators: list[Optional[Operator]]) -> None:
        """Pop one operator and two operands, push the result."""
        if len(operands) < 2:
            raise OperandRequiredError(
                "Malformed expression: operator requires numbers to operate on"
            )

        a = operands.pop()
        b = operands.pop()
        operator = operators.pop()
        operands.append(operator.apply(b, a))
