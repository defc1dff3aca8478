"""
Domain models and value objects.

Contains the symbols a calculator is built from (Operator, Constant,
Function), their argument validators, and the Token produced by the lexer.
"""

from src.core.domain.constant import (
    BUILTIN_CONSTANTS,
    CONSTANT_LIBRARY,
    E,
    PHI,
    PI,
    Constant,
)
from src.core.domain.function import (
    BUILTIN_FUNCTIONS,
    FUNCTION_LIBRARY,
    Function,
)
from src.core.domain.operator import (
    ADDITION,
    ADDITIVE_PRECEDENCE,
    BUILTIN_OPERATORS,
    DIVISION,
    EXPONENT,
    EXPONENT_PRECEDENCE,
    MODULUS,
    MULTIPLICATION,
    MULTIPLICATIVE_PRECEDENCE,
    OPERATOR_LIBRARY,
    SUBTRACTION,
    Operator,
)
from src.core.domain.token import Token, TokenType
from src.core.domain.validators import RangeValidator

__all__ = [
    # Operators
    "Operator",
    "ADDITION",
    "SUBTRACTION",
    "MULTIPLICATION",
    "DIVISION",
    "EXPONENT",
    "MODULUS",
    "BUILTIN_OPERATORS",
    "OPERATOR_LIBRARY",
    "ADDITIVE_PRECEDENCE",
    "MULTIPLICATIVE_PRECEDENCE",
    "EXPONENT_PRECEDENCE",
    # Constants
    "Constant",
    "PI",
    "E",
    "PHI",
    "BUILTIN_CONSTANTS",
    "CONSTANT_LIBRARY",
    # Functions
    "Function",
    "BUILTIN_FUNCTIONS",
    "FUNCTION_LIBRARY",
    # Validators
    "RangeValidator",
    # Tokens
    "Token",
    "TokenType",
]
