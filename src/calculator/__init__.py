"""
Extensible arithmetic expression calculator.

The public surface is the Calculator facade, its configuration and the
error taxonomy. Standardizer, Lexer and Evaluator are internal stages,
imported from their own modules by tests.
"""

from src.calculator.calculator import Calculator
from src.calculator.config import CalculatorConfig, load_config
from src.calculator.registry import SymbolRegistry
from src.core.errors import (
    ConsecutiveOperatorsError,
    DivisionByZeroError,
    DuplicateSymbolError,
    FunctionSyntaxError,
    MalformedNumberError,
    MathSyntaxError,
    NonFiniteResultError,
    OperandRequiredError,
    RangeError,
    UnbalancedBracketsError,
    UnrecognizedSymbolError,
)

__all__ = [
    # Facade
    "Calculator",
    "CalculatorConfig",
    "load_config",
    "SymbolRegistry",
    # Errors
    "MathSyntaxError",
    "DuplicateSymbolError",
    "UnbalancedBracketsError",
    "FunctionSyntaxError",
    "RangeError",
    "NonFiniteResultError",
    "MalformedNumberError",
    "UnrecognizedSymbolError",
    "ConsecutiveOperatorsError",
    "OperandRequiredError",
    "DivisionByZeroError",
]
