"""
Calculator — evaluation facade

    raw text → lower-case → Standardizer → Lexer → Evaluator → float

The symbol registry and the three stages are built once per Calculator and
reused by every evaluate() call. Stage errors propagate unchanged.
"""

import logging
from typing import Iterable, Optional

from src.calculator.config import CalculatorConfig
from src.calculator.evaluator import Evaluator
from src.calculator.lexer import Lexer
from src.calculator.registry import SymbolRegistry
from src.calculator.standardizer import Standardizer
from src.core.domain.constant import Constant
from src.core.domain.function import Function
from src.core.domain.operator import Operator

logger = logging.getLogger(__name__)


class Calculator:
    """
    Arithmetic expression calculator.

    Examples:
        >>> Calculator().evaluate("19 + 4 * (3 + 6)^2")
        343.0
        >>> from src.core.domain.operator import MODULUS
        >>> Calculator(operators=[MODULUS]).evaluate("24 % 2")
        0.0
    """

    def __init__(
        self,
        operators: Optional[Iterable[Operator]] = None,
        constants: Optional[Iterable[Constant]] = None,
        functions: Optional[Iterable[Function]] = None,
    ):
        """
        Build a calculator from caller symbols merged with the built-ins.

        Args:
            operators: Added to + - * / ^
            constants: Replace pi and e when given
            functions: Replace the default functions when given

        Raises:
            DuplicateSymbolError: If any alias collides
        """
        self._init_stages(SymbolRegistry.create(operators, constants, functions))

    @classmethod
    def from_registry(cls, registry: SymbolRegistry) -> "Calculator":
        """Calculator over an existing registry (nested function arguments)."""
        calculator = cls.__new__(cls)
        calculator._init_stages(registry)
        return calculator

    @classmethod
    def from_config(cls, config: CalculatorConfig) -> "Calculator":
        return cls(
            operators=config.operators,
            constants=config.constants,
            functions=config.functions,
        )

    def _init_stages(self, registry: SymbolRegistry) -> None:
        self._registry = registry
        self._standardizer = Standardizer(registry)
        self._lexer = Lexer(registry)
        self._evaluator = Evaluator()

    @property
    def registry(self) -> SymbolRegistry:
        return self._registry

    def evaluate(self, expression: str) -> float:
        """
        Evaluate an expression.

        Args:
            expression: Arithmetic expression, aliases are case-insensitive

        Returns:
            Result as float (±inf or NaN on IEEE-754 overflow and division by zero)

        Raises:
            MathSyntaxError: Any subclass, see src.core.errors
        """
        logger.debug("Evaluating %r", expression)

        standardized = self._standardizer.standardize(expression.lower())
        logger.debug("Standardized %r → %r", expression, standardized)

        tokens = self._lexer.tokenize(standardized)
        result = self._evaluator.evaluate(tokens)

        logger.debug("Result %r = %r", expression, result)
        return result
