"""
Core math modules

IEEE-754 arithmetic helpers and lossless number formatting.
"""

from src.core.math.numerical_safeguards import (
    NEGATIVE_INFINITY_TEXT,
    POSITIVE_INFINITY_TEXT,
    format_bound,
    format_plain,
    ieee_divide,
    ieee_pow,
    is_valid_float,
)

__all__ = [
    # Constants
    "NEGATIVE_INFINITY_TEXT",
    "POSITIVE_INFINITY_TEXT",
    # Finiteness
    "is_valid_float",
    # IEEE-754 arithmetic
    "ieee_divide",
    "ieee_pow",
    # Formatting
    "format_bound",
    "format_plain",
]
