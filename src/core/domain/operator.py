"""
Operator — Binary operator model

Immutable Pydantic model of a binary operator: a single-character symbol,
a precedence (higher binds tighter) and the operation it performs.

Built-in precedences:
- ADDITIVE_PRECEDENCE (+, -)        = 10
- MULTIPLICATIVE_PRECEDENCE (*, /)  = 20
- EXPONENT_PRECEDENCE (^)           = 30
"""

import math
from typing import Callable, Final

from pydantic import BaseModel, Field, field_validator

from src.core.errors import DivisionByZeroError
from src.core.math.numerical_safeguards import ieee_divide, ieee_pow

# =============================================================================
# PRECEDENCE LEVELS
# =============================================================================

ADDITIVE_PRECEDENCE: Final[int] = 10
MULTIPLICATIVE_PRECEDENCE: Final[int] = 20
EXPONENT_PRECEDENCE: Final[int] = 30

# Characters that belong to numbers or brackets and can never be operators
RESERVED_CHARACTERS: Final[str] = "0123456789.()"


# =============================================================================
# OPERATOR MODEL
# =============================================================================


class Operator(BaseModel):
    """
    Binary operator used by the calculator.

    Immutable model (frozen=True): operators are shared by every evaluation
    of a calculator and by its nested sub-calculators.

    Equal precedence resolves left to right unless right_associative is set,
    in which case an incoming operator of the same precedence is stacked
    instead of reducing the one below it (a^b^c == a^(b^c)).
    """

    symbol: str = Field(..., min_length=1, max_length=1, description="Operator character")
    precedence: int = Field(..., description="Order of precedence, higher binds tighter")
    operation: Callable[[float, float], float] = Field(
        ..., description="Binary operation, called as operation(lhs, rhs)"
    )
    right_associative: bool = Field(False, description="Group a^b^c as a^(b^c)")

    model_config = {"frozen": True}

    @field_validator("symbol")
    @classmethod
    def validate_symbol(cls, v: str) -> str:
        """Operators cannot reuse number, bracket or whitespace characters."""
        if v in RESERVED_CHARACTERS or v.isspace():
            raise ValueError(f"operator symbol {v!r} is reserved")
        return v

    def apply(self, lhs: float, rhs: float) -> float:
        """
        Apply the operation to two operands.

        Args:
            lhs: Left-hand operand
            rhs: Right-hand operand

        Returns:
            Result of the operation
        """
        return self.operation(lhs, rhs)

    def binds_tighter_than(self, other: "Operator") -> bool:
        """
        Whether this operator, arriving after `other`, must be stacked on top of it.

        Args:
            other: Operator currently on top of the stack

        Returns:
            True if precedence is greater (or equal for a right-associative operator)
        """
        if self.right_associative:
            return self.precedence >= other.precedence
        return self.precedence > other.precedence


# =============================================================================
# OPERATIONS
# =============================================================================


def _modulus(lhs: float, rhs: float) -> float:
    """Euclidean modulus, the result is always in [0, |rhs|)."""
    if rhs == 0.0:
        raise DivisionByZeroError(f"Modulus by zero: {lhs} % {rhs}")
    remainder = math.fmod(lhs, rhs)
    if remainder < 0:
        remainder += abs(rhs)
    return remainder


# =============================================================================
# DEFAULT OPERATORS
# =============================================================================

ADDITION: Final[Operator] = Operator(
    symbol="+", precedence=ADDITIVE_PRECEDENCE, operation=lambda lhs, rhs: lhs + rhs
)

SUBTRACTION: Final[Operator] = Operator(
    symbol="-", precedence=ADDITIVE_PRECEDENCE, operation=lambda lhs, rhs: lhs - rhs
)

MULTIPLICATION: Final[Operator] = Operator(
    symbol="*", precedence=MULTIPLICATIVE_PRECEDENCE, operation=lambda lhs, rhs: lhs * rhs
)

DIVISION: Final[Operator] = Operator(
    symbol="/", precedence=MULTIPLICATIVE_PRECEDENCE, operation=ieee_divide
)

EXPONENT: Final[Operator] = Operator(
    symbol="^", precedence=EXPONENT_PRECEDENCE, operation=ieee_pow, right_associative=True
)

# Not enabled by default, register it explicitly
MODULUS: Final[Operator] = Operator(
    symbol="%", precedence=MULTIPLICATIVE_PRECEDENCE, operation=_modulus
)

BUILTIN_OPERATORS: Final[tuple[Operator, ...]] = (
    ADDITION,
    SUBTRACTION,
    MULTIPLICATION,
    DIVISION,
    EXPONENT,
)

# Optional operators addressable by name (configuration files)
OPERATOR_LIBRARY: Final[dict[str, Operator]] = {
    "modulus": MODULUS,
}
