"""
Constant — Named numeric constant model

Immutable Pydantic model of a constant: a float value and one or more
case-insensitive aliases. Aliases are substituted by the value during
standardization, longest alias first.
"""

import math
from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# CONSTANT MODEL
# =============================================================================


class Constant(BaseModel):
    """
    Named constant used by the calculator.

    Aliases are stored lower-cased because expressions are lower-cased
    before evaluation.
    """

    value: float = Field(..., description="Numeric value of the constant")
    symbols: tuple[str, ...] = Field(..., min_length=1, description="Aliases, first is primary")

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: float) -> float:
        """Constants are spliced into text, so they must be finite."""
        if not math.isfinite(v):
            raise ValueError(f"constant value must be finite, got {v}")
        return v

    @field_validator("symbols")
    @classmethod
    def validate_symbols(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Aliases must be non-empty strings."""
        if any(symbol == "" for symbol in v):
            raise ValueError("constant symbols must not be empty")
        return tuple(symbol.lower() for symbol in v)

    @property
    def name(self) -> str:
        """Primary alias."""
        return self.symbols[0]


# =============================================================================
# DEFAULT CONSTANTS
# =============================================================================

PI: Final[Constant] = Constant(value=math.pi, symbols=("pi", "π"))

E: Final[Constant] = Constant(value=math.e, symbols=("e",))

# Golden ratio, not enabled by default
PHI: Final[Constant] = Constant(value=1.6180339887498948, symbols=("phi", "φ"))

BUILTIN_CONSTANTS: Final[tuple[Constant, ...]] = (PI, E)

CONSTANT_LIBRARY: Final[dict[str, Constant]] = {
    constant.name: constant for constant in (PI, E, PHI)
}
