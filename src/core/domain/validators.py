"""
Function Validators — domain checks for function arguments

A validator runs on the evaluated argument of a function before the
function is applied. Failure raises RangeError with the function name,
the accepted interval and the offending value.
"""

import math

from pydantic import BaseModel, Field, field_validator

from src.core.errors import RangeError
from src.core.math.numerical_safeguards import format_bound


class RangeValidator(BaseModel):
    """
    Accepts values inside an interval.

    Bounds default to ±inf. An infinite bound is always rendered open,
    whatever its inclusive flag says.

    Examples:
        >>> RangeValidator(min=0.0, min_inclusive=False).interval
        '(0, inf)'
        >>> RangeValidator(min=-1.0, max=1.0).interval
        '[-1, 1]'
    """

    min: float = Field(-math.inf, description="Lower bound")
    max: float = Field(math.inf, description="Upper bound")
    min_inclusive: bool = Field(True, description="Lower bound belongs to the interval")
    max_inclusive: bool = Field(True, description="Upper bound belongs to the interval")

    model_config = {"frozen": True}

    @field_validator("max")
    @classmethod
    def validate_max_not_below_min(cls, v: float, info) -> float:
        """Lower bound cannot exceed the upper bound."""
        if "min" in info.data:
            lower = info.data["min"]
            if lower > v:
                raise ValueError(f"min {lower} exceeds max {v}")
        return v

    @property
    def interval(self) -> str:
        """Interval in bracket notation, e.g. '[-1, 1]' or '(0, inf)'."""
        left = "[" if self.min_inclusive and math.isfinite(self.min) else "("
        right = "]" if self.max_inclusive and math.isfinite(self.max) else ")"
        return f"{left}{format_bound(self.min)}, {format_bound(self.max)}{right}"

    def contains(self, value: float) -> bool:
        """
        Whether value lies inside the interval.

        NaN is not rejected here, it is left to the function itself.
        """
        if value < self.min or (not self.min_inclusive and value == self.min):
            return False
        if value > self.max or (not self.max_inclusive and value == self.max):
            return False
        return True

    def validate_or_raise(self, value: float, function_name: str) -> None:
        """
        Check a function argument.

        Args:
            value: Evaluated function argument
            function_name: Primary alias of the function (for the message)

        Raises:
            RangeError: If value is outside the interval
        """
        if not self.contains(value):
            raise RangeError(
                f"{function_name} requires the value to be in the range "
                f"{self.interval} but got {format_bound(value)}."
            )
