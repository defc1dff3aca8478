"""
Symbol Registry — operator, constant and function tables

Merge policy (SymbolRegistry.create):
- operators: built-in + - * / ^ PLUS the caller's operators
- constants: the caller's constants REPLACE the defaults (pi, e) when given
- functions: the caller's functions REPLACE the defaults when given

CRITICAL INVARIANTS:
1. Every symbol is unique across operators, constants and functions
   (case-insensitive for constants and functions)
2. A duplicate fails construction with DuplicateSymbolError listing
   every colliding alias
3. The registry is read-only after construction and safe to share
"""

import logging
from collections import Counter
from typing import Iterable, Optional

from src.core.domain.constant import BUILTIN_CONSTANTS, Constant
from src.core.domain.function import BUILTIN_FUNCTIONS, Function
from src.core.domain.operator import ADDITION, BUILTIN_OPERATORS, SUBTRACTION, Operator
from src.core.errors import DuplicateSymbolError

logger = logging.getLogger(__name__)


class SymbolRegistry:
    """
    Read-only symbol tables of one calculator.

    Sub-calculators created for nested function arguments share the
    registry of their parent.
    """

    def __init__(
        self,
        operators: Iterable[Operator],
        constants: Iterable[Constant],
        functions: Iterable[Function],
    ):
        """
        Build the tables from final symbol lists (no defaults added).

        Args:
            operators: Every operator of the calculator
            constants: Every constant of the calculator
            functions: Every function of the calculator

        Raises:
            DuplicateSymbolError: If any symbol is registered twice
        """
        self._operators: tuple[Operator, ...] = tuple(operators)
        self._constants: tuple[Constant, ...] = tuple(constants)
        self._functions: tuple[Function, ...] = tuple(functions)

        self._check_unique()

        self._operator_table: dict[str, Operator] = {op.symbol: op for op in self._operators}
        self._constant_table: dict[str, Constant] = {
            alias: constant for constant in self._constants for alias in constant.symbols
        }
        self._function_table: dict[str, Function] = {
            alias: function for function in self._functions for alias in function.symbols
        }

        logger.debug(
            "Symbol registry built: %d operators, %d constant aliases, %d function aliases",
            len(self._operator_table),
            len(self._constant_table),
            len(self._function_table),
        )

    @classmethod
    def create(
        cls,
        operators: Optional[Iterable[Operator]] = None,
        constants: Optional[Iterable[Constant]] = None,
        functions: Optional[Iterable[Function]] = None,
    ) -> "SymbolRegistry":
        """
        Merge caller symbols with the built-in baseline.

        Args:
            operators: Added to the built-in operators
            constants: Replace the default constants when not None
            functions: Replace the default functions when not None

        Returns:
            SymbolRegistry

        Raises:
            DuplicateSymbolError: On any alias collision
        """
        return cls(
            operators=BUILTIN_OPERATORS + tuple(operators or ()),
            constants=BUILTIN_CONSTANTS if constants is None else constants,
            functions=BUILTIN_FUNCTIONS if functions is None else functions,
        )

    def _check_unique(self) -> None:
        symbols: list[str] = [op.symbol for op in self._operators]
        symbols += [alias for constant in self._constants for alias in constant.symbols]
        symbols += [alias for function in self._functions for alias in function.symbols]

        duplicates = [symbol for symbol, count in Counter(symbols).items() if count > 1]
        if duplicates:
            raise DuplicateSymbolError(duplicates)

    # -------------------------------------------------------------------------
    # Tables
    # -------------------------------------------------------------------------

    @property
    def operators(self) -> tuple[Operator, ...]:
        return self._operators

    @property
    def constants(self) -> tuple[Constant, ...]:
        return self._constants

    @property
    def functions(self) -> tuple[Function, ...]:
        return self._functions

    @property
    def operator_symbols(self) -> str:
        """All operator characters, in registration order."""
        return "".join(self._operator_table)

    @property
    def addition(self) -> Operator:
        """Operator inserted by the lexer in front of a rewritten subtraction."""
        return self._operator_table.get(ADDITION.symbol, ADDITION)

    @property
    def subtraction(self) -> Operator:
        """Operator used by the lexer for negation groups."""
        return self._operator_table.get(SUBTRACTION.symbol, SUBTRACTION)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def is_operator(self, symbol: str) -> bool:
        return symbol in self._operator_table

    def operator(self, symbol: str) -> Optional[Operator]:
        """Operator registered for a single character, or None."""
        return self._operator_table.get(symbol)

    def constant(self, alias: str) -> Optional[Constant]:
        """Constant registered for an alias (case-insensitive), or None."""
        return self._constant_table.get(alias.lower())

    def function(self, alias: str) -> Optional[Function]:
        """Function registered for an alias (case-insensitive), or None."""
        return self._function_table.get(alias.lower())

    def constant_aliases(self) -> list[tuple[str, Constant]]:
        """(alias, constant) pairs, longest alias first."""
        return sorted(self._constant_table.items(), key=lambda item: len(item[0]), reverse=True)

    def function_aliases(self) -> list[tuple[str, Function]]:
        """(alias, function) pairs, longest alias first."""
        return sorted(self._function_table.items(), key=lambda item: len(item[0]), reverse=True)
