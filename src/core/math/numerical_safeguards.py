"""
Numerical Safeguards — IEEE-754 Arithmetic & Lossless Formatting

The calculator computes in the 64-bit floating-point domain. Python raises
where IEEE-754 arithmetic returns a special value (ZeroDivisionError,
OverflowError, ValueError), so the binary operators go through the helpers
below to keep the IEEE semantics.

Function and constant values are re-injected into expression text, so they
need a formatting that is:
- lossless (parsing the text gives back the same float)
- never in scientific notation ("1e-07" would read as the constant e)
- free of trailing zeros and of a trailing decimal point

CRITICAL INVARIANTS:
1. ieee_divide / ieee_pow never raise, they return ±inf or NaN instead
2. float(format_plain(x)) == x for every finite x
3. format_plain output matches [-]?[0-9]+(\\.[0-9]+)?
"""

import math
from decimal import Decimal
from typing import Final

# =============================================================================
# CONSTANTS
# =============================================================================

# Textual form of infinite interval bounds (used in range error messages)
POSITIVE_INFINITY_TEXT: Final[str] = "inf"
NEGATIVE_INFINITY_TEXT: Final[str] = "-inf"


# =============================================================================
# FINITENESS CHECKS
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Check that a float is finite (not NaN, not ±inf).

    Args:
        value: Value to check

    Returns:
        True if the value is finite, False for NaN or Inf
    """
    return math.isfinite(value)


# =============================================================================
# IEEE-754 ARITHMETIC
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Division with IEEE-754 semantics.

    Division by zero does not raise:
    - x / ±0 with x != 0 → ±inf (sign is the XOR of both signs)
    - 0 / 0 and NaN / 0 → NaN

    Args:
        numerator: Dividend
        denominator: Divisor

    Returns:
        numerator / denominator

    Examples:
        >>> ieee_divide(9.0, 4.0)
        2.25
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator):
        return math.nan

    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)


def ieee_pow(base: float, exponent: float) -> float:
    """
    Power with IEEE-754 semantics.

    math.pow raises where the C library returns a special value:
    - overflow → ±inf (negative only for a negative base and an odd integer exponent)
    - 0 ** negative → inf
    - negative ** non-integer → NaN

    Args:
        base: Base
        exponent: Exponent

    Returns:
        base ** exponent

    Examples:
        >>> ieee_pow(2.0, 10.0)
        1024.0
        >>> ieee_pow(10.0, 400.0)
        inf
        >>> ieee_pow(0.0, -1.0)
        inf
        >>> ieee_pow(-8.0, 1.0 / 3.0)
        nan
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        odd_integer_exponent = exponent.is_integer() and int(exponent) % 2 == 1
        if base < 0 and odd_integer_exponent:
            return -math.inf
        return math.inf
    except ValueError:
        # math domain error
        if base == 0.0:
            return math.inf
        return math.nan


# =============================================================================
# LOSSLESS FORMATTING
# =============================================================================


def format_plain(value: float) -> str:
    """
    Format a finite float as plain decimal text without loss.

    Uses the shortest round-trip representation (repr) and expands it
    through Decimal so that no exponent is ever emitted.

    Args:
        value: Finite value to format

    Returns:
        Decimal text with trailing zeros and a trailing point removed

    Raises:
        ValueError: If value is NaN or Inf

    Examples:
        >>> format_plain(8.0)
        '8'
        >>> format_plain(0.5)
        '0.5'
        >>> format_plain(1e-07)
        '0.0000001'
        >>> format_plain(1e22)
        '10000000000000000000000'
        >>> format_plain(-0.0)
        '0'
    """
    if not is_valid_float(value):
        raise ValueError(f"value must be a finite float, got {value}")

    if value == 0.0:
        return "0"

    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_bound(value: float) -> str:
    """
    Format an interval bound, allowing ±inf.

    Args:
        value: Bound of a validation interval

    Returns:
        "inf" / "-inf" for infinite bounds, format_plain otherwise
    """
    if math.isinf(value):
        return POSITIVE_INFINITY_TEXT if value > 0 else NEGATIVE_INFINITY_TEXT
    return format_plain(value)
