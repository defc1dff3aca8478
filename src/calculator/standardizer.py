"""
Standardizer — rewrites raw expression text into lexer input

Steps, strictly in this order:
1. remove_whitespace
2. fix_brackets             — too many ')' fails, missing ')' are appended
3. fix_repeating_operators  — '--' → '+', '+-' → '-' until stable
4. compute_functions        — alias(arg) → (result), arguments evaluated recursively
5. replace_constants        — alias → (value)
6. add_multiplication_signs — 2(3) → 2*(3), (3)2 → (3)*2

The output contains only digits, '.', registered operators and brackets.
Standardizing already standardized text returns it unchanged.
"""

import re
from typing import Final

from src.calculator.registry import SymbolRegistry
from src.core.errors import FunctionSyntaxError, UnbalancedBracketsError
from src.core.math.numerical_safeguards import format_plain

_WHITESPACE: Final[re.Pattern] = re.compile(r"\s+")


class Standardizer:
    """Text normalization stage of the calculator."""

    def __init__(self, registry: SymbolRegistry):
        self._registry = registry

    def standardize(self, expression: str) -> str:
        """
        Run every standardization step.

        Args:
            expression: Lower-cased raw expression

        Returns:
            Standardized expression

        Raises:
            UnbalancedBracketsError: More ')' than '('
            FunctionSyntaxError: Function alias not followed by '('
            RangeError: Function argument outside its domain
            MathSyntaxError: Any error raised while evaluating a function argument
        """
        expression = self.remove_whitespace(expression)
        expression = self.fix_brackets(expression)
        expression = self.fix_repeating_operators(expression)
        expression = self.compute_functions(expression)
        expression = self.replace_constants(expression)
        return self.add_multiplication_signs(expression)

    @staticmethod
    def remove_whitespace(expression: str) -> str:
        return _WHITESPACE.sub("", expression)

    @staticmethod
    def fix_brackets(expression: str) -> str:
        """
        Balance brackets.

        Raises:
            UnbalancedBracketsError: If there are more closing than opening brackets
        """
        opening = expression.count("(")
        closing = expression.count(")")

        if closing > opening:
            raise UnbalancedBracketsError(
                f"Expression has too many closing brackets: {closing} ')' for {opening} '('"
            )

        return expression + ")" * (opening - closing)

    @staticmethod
    def fix_repeating_operators(expression: str) -> str:
        """Collapse sign sequences; '++' is left for the lexer to reject."""
        while "--" in expression or "+-" in expression:
            expression = expression.replace("--", "+")
            expression = expression.replace("+-", "-")
        return expression

    def compute_functions(self, expression: str) -> str:
        """
        Replace every function call by its result, longest alias first.

        The argument of each call is evaluated by a sub-calculator sharing
        this registry, so it may contain any expression, nested calls included.

        Raises:
            FunctionSyntaxError: If an alias is not followed by '('
            UnbalancedBracketsError: If a call has no closing bracket
        """
        # Imported here: the calculator module imports this one
        from src.calculator.calculator import Calculator

        for alias, function in self._registry.function_aliases():
            start = expression.find(alias)
            while start != -1:
                open_index = start + len(alias)
                if open_index >= len(expression) or expression[open_index] != "(":
                    raise FunctionSyntaxError(
                        f"Function identifier not followed by parentheses: {alias}?"
                    )

                close_index = self._find_closing_bracket(expression, open_index)
                argument = expression[open_index + 1:close_index]

                value = Calculator.from_registry(self._registry).evaluate(argument)
                result = function.apply(value)

                expression = expression[:start] + f"({result})" + expression[close_index + 1:]
                start = expression.find(alias)

        return expression

    @staticmethod
    def _find_closing_bracket(expression: str, open_index: int) -> int:
        depth = 0
        for index in range(open_index + 1, len(expression)):
            char = expression[index]
            if char == "(":
                depth += 1
            elif char == ")":
                if depth == 0:
                    return index
                depth -= 1

        raise UnbalancedBracketsError(
            f"Function call at position {open_index} has no closing bracket"
        )

    def replace_constants(self, expression: str) -> str:
        """Substitute every constant alias, longest first, by its plain decimal value."""
        for alias, constant in self._registry.constant_aliases():
            expression = expression.replace(alias, f"({format_plain(constant.value)})")
        return expression

    def add_multiplication_signs(self, expression: str) -> str:
        """
        Insert implicit multiplication next to brackets.

        - x( → x*(  when x is not an operator and not '('
        - )x → )*x  when x is not an operator and not ')'
        """
        operators = self._registry.operator_symbols
        chars = list(expression)

        index = 1
        while index < len(chars):
            previous, current = chars[index - 1], chars[index]
            if current == "(" and previous not in operators and previous != "(":
                chars.insert(index, "*")
            elif previous == ")" and current not in operators and current != ")":
                chars.insert(index, "*")
            index += 1

        return "".join(chars)
