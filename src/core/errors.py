"""
Math Syntax Errors — single exception taxonomy of the calculator

Every failure of the evaluation pipeline is reported as a subclass of
MathSyntaxError with a human readable message. Errors are terminal for the
call that raised them: no stage retries, recovers or returns partial results.
"""


# =============================================================================
# BASE
# =============================================================================


class MathSyntaxError(Exception):
    """Malformed expression or invalid calculator configuration."""


# =============================================================================
# REGISTRY
# =============================================================================


class DuplicateSymbolError(MathSyntaxError):
    """
    Two symbols of the registry share an alias.

    Attributes:
        symbols: every colliding alias, sorted
    """

    def __init__(self, symbols: list[str]):
        self.symbols = sorted(symbols)
        super().__init__(
            "Symbols must be unique, duplicates found: " + ", ".join(self.symbols)
        )


# =============================================================================
# STANDARDIZER
# =============================================================================


class UnbalancedBracketsError(MathSyntaxError):
    """More closing brackets than opening ones."""


class FunctionSyntaxError(MathSyntaxError):
    """Function identifier not followed by an opening bracket."""


class RangeError(MathSyntaxError):
    """Function argument outside the accepted interval of its validator."""


class NonFiniteResultError(MathSyntaxError):
    """Function produced NaN or an infinite value."""


# =============================================================================
# LEXER
# =============================================================================


class MalformedNumberError(MathSyntaxError):
    """Number literal with several decimal points or no digit after the point."""


class UnrecognizedSymbolError(MathSyntaxError):
    """Character is neither a digit, a bracket nor a registered operator."""


class ConsecutiveOperatorsError(MathSyntaxError):
    """Two operators without an operand between them."""


# =============================================================================
# EVALUATOR
# =============================================================================


class OperandRequiredError(MathSyntaxError):
    """Operator without a left or right operand."""


class DivisionByZeroError(MathSyntaxError):
    """Operator that has no IEEE-754 result for a zero divisor (modulus)."""
