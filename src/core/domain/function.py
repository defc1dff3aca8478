"""
Function — Unary function model

Immutable Pydantic model of a unary function. The operation returns the
result as text: the standardizer splices it back into the expression, so it
has to be lossless and free of scientific notation (see format_plain).

Built-in functions carry a RangeValidator where their mathematical domain
is narrower than the reals.
"""

import math
from typing import Callable, Final, Optional

from pydantic import BaseModel, Field, field_validator

from src.core.domain.validators import RangeValidator
from src.core.errors import NonFiniteResultError
from src.core.math.numerical_safeguards import format_plain


# =============================================================================
# FUNCTION MODEL
# =============================================================================


class Function(BaseModel):
    """
    Unary function used by the calculator.

    The first alias is the primary one, used in error messages.
    Aliases are stored lower-cased.
    """

    symbols: tuple[str, ...] = Field(..., min_length=1, description="Aliases, first is primary")
    operation: Callable[[float], str] = Field(..., description="Operation returning plain decimal text")
    validator: Optional[RangeValidator] = Field(None, description="Domain check on the argument")

    model_config = {"frozen": True}

    @field_validator("symbols")
    @classmethod
    def validate_symbols(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Aliases must be non-empty strings."""
        if any(symbol == "" for symbol in v):
            raise ValueError("function symbols must not be empty")
        return tuple(symbol.lower() for symbol in v)

    @classmethod
    def numeric(
        cls,
        operation: Callable[[float], float],
        *symbols: str,
        validator: Optional[RangeValidator] = None,
    ) -> "Function":
        """
        Build a function from a float -> float callable.

        The result is formatted with format_plain.

        Args:
            operation: Numeric operation
            *symbols: Aliases, first is primary
            validator: Optional domain check

        Returns:
            Function instance
        """
        return cls(
            symbols=symbols,
            operation=lambda value: format_plain(operation(value)),
            validator=validator,
        )

    @property
    def name(self) -> str:
        """Primary alias."""
        return self.symbols[0]

    def apply(self, value: float) -> str:
        """
        Validate the argument and compute the function.

        Args:
            value: Evaluated argument

        Returns:
            Result as plain decimal text

        Raises:
            RangeError: If the validator rejects value
            NonFiniteResultError: If the result is NaN/Inf or overflows
        """
        if self.validator is not None:
            self.validator.validate_or_raise(value, self.name)

        try:
            return self.operation(value)
        except (OverflowError, ValueError) as e:
            raise NonFiniteResultError(
                f"{self.name} has no finite result for {value}"
            ) from e


# =============================================================================
# OPERATIONS
# =============================================================================


def _sign(value: float) -> float:
    """-1, 0 or 1; NaN has no sign."""
    if math.isnan(value):
        raise ValueError("sign of NaN")
    if value == 0.0:
        return 0.0
    return math.copysign(1.0, value)


def _degrees(value: float) -> float:
    return value * 180 / math.pi


def _radians(value: float) -> float:
    return value * math.pi / 180


# =============================================================================
# DOMAINS
# =============================================================================

NON_NEGATIVE: Final[RangeValidator] = RangeValidator(min=0.0)
POSITIVE: Final[RangeValidator] = RangeValidator(min=0.0, min_inclusive=False)
UNIT_INTERVAL: Final[RangeValidator] = RangeValidator(min=-1.0, max=1.0)
OPEN_UNIT_INTERVAL: Final[RangeValidator] = RangeValidator(
    min=-1.0, max=1.0, min_inclusive=False, max_inclusive=False
)
AT_LEAST_ONE: Final[RangeValidator] = RangeValidator(min=1.0)


# =============================================================================
# DEFAULT FUNCTIONS
# =============================================================================

ABS: Final[Function] = Function.numeric(math.fabs, "abs")
SQRT: Final[Function] = Function.numeric(math.sqrt, "sqrt", "root", "√", validator=NON_NEGATIVE)
CBRT: Final[Function] = Function.numeric(math.cbrt, "cbrt", "sqrt3", "root3")

SIN: Final[Function] = Function.numeric(math.sin, "sin")
COS: Final[Function] = Function.numeric(math.cos, "cos")
TAN: Final[Function] = Function.numeric(math.tan, "tan")
ASIN: Final[Function] = Function.numeric(
    math.asin, "asin", "arcsin", "sin^-1", "sin^(-1)", validator=UNIT_INTERVAL
)
ACOS: Final[Function] = Function.numeric(
    math.acos, "acos", "arccos", "cos^-1", "cos^(-1)", validator=UNIT_INTERVAL
)
ATAN: Final[Function] = Function.numeric(math.atan, "atan", "arctan", "tan^-1", "tan^(-1)")

SINH: Final[Function] = Function.numeric(math.sinh, "sinh")
COSH: Final[Function] = Function.numeric(math.cosh, "cosh")
TANH: Final[Function] = Function.numeric(math.tanh, "tanh")
ASINH: Final[Function] = Function.numeric(math.asinh, "asinh", "arcsinh", "sinh^-1", "sinh^(-1)")
ACOSH: Final[Function] = Function.numeric(
    math.acosh, "acosh", "arccosh", "cosh^-1", "cosh^(-1)", validator=AT_LEAST_ONE
)
ATANH: Final[Function] = Function.numeric(
    math.atanh, "atanh", "arctanh", "tanh^-1", "tanh^(-1)", validator=OPEN_UNIT_INTERVAL
)

FLOOR: Final[Function] = Function.numeric(math.floor, "floor")
CEIL: Final[Function] = Function.numeric(math.ceil, "ceil")
SIGN: Final[Function] = Function.numeric(_sign, "sign", "sgn")

LN: Final[Function] = Function.numeric(math.log, "ln", "loge", "log_e", validator=POSITIVE)
LOG2: Final[Function] = Function.numeric(math.log2, "log2", "log_2", validator=POSITIVE)
LOG10: Final[Function] = Function.numeric(math.log10, "log10", "log_10", "log", validator=POSITIVE)

DEG: Final[Function] = Function.numeric(_degrees, "deg")
RAD: Final[Function] = Function.numeric(_radians, "rad")

BUILTIN_FUNCTIONS: Final[tuple[Function, ...]] = (
    SQRT, CBRT,
    SIN, COS, TAN, ASIN, ACOS, ATAN,
    SINH, COSH, TANH, ASINH, ACOSH, ATANH,
    FLOOR, CEIL, SIGN,
    LN, LOG2, LOG10,
    DEG, RAD,
    ABS,
)

# Functions addressable by primary alias (configuration files)
FUNCTION_LIBRARY: Final[dict[str, Function]] = {
    function.name: function for function in BUILTIN_FUNCTIONS
}
