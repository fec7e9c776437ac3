"""
Standardize numeric inputs into exact sign and decimal digit strings.

Integers of any size, Decimal and Fraction values are converted without a float intermediate. Floats
and other fixed-precision types use their shortest round-trip repr, expanded to positional
notation, so 1e16 becomes "10000000000000000" rather than "1e+16".
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import math
import operator
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Protocol, Self, SupportsIndex, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .digits import split_decimal
from .formatters import fmt_type, fmt_value

logger = logging.getLogger(__name__)


@runtime_checkable
class SupportsFloat(Protocol):
    """Protocol for duck-typed numeric conversion."""

    def __float__(self) -> float: ...


Numeric = int | float | Decimal | Fraction | SupportsIndex | SupportsFloat

# Fraction digits expanded from a non-terminating Fraction when the caller asks for no count
FRACTION_DIGITS = 28


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class NumericDigits:
    """
    Sign and magnitude of a number as decimal digit strings.

    Attributes:
        negative: True for values below zero. Negative zero keeps its sign here, it is
            dropped later because zero is never displayed with a sign.
        integer: Integer digits of the magnitude, "0" or longer; may carry leading zeros.
        fraction: Fraction digits of the magnitude without the dot, may be empty.

    Examples:
        >>> NumericDigits.from_value(-12345)
        NumericDigits(negative=True, integer='12345', fraction='')
        >>> NumericDigits.from_value(1.25)
        NumericDigits(negative=False, integer='1', fraction='25')
        >>> NumericDigits.from_value(Decimal("1E+3"))
        NumericDigits(negative=False, integer='1000', fraction='')
    """
    negative: bool
    integer: str
    fraction: str = ""

    @classmethod
    def from_value(cls, value: Numeric, *, fraction_digits: int = FRACTION_DIGITS) -> Self:
        """
        Build digits from an arbitrary-precision integer or a fixed-precision number.

        Args:
            value: Number to convert.
            fraction_digits: Exact fraction digits expanded from a non-integral Fraction.
                A non-terminating expansion is cut there and one extra '1' digit is appended,
                so rounding past that point still sees a non-zero tail.

        Raises:
            TypeError: If value is bool or not a supported numeric type.
            ValueError: If value is NaN or infinite.

        Examples:
            >>> NumericDigits.from_value(Fraction(-7, 4))
            NumericDigits(negative=True, integer='1', fraction='75')
            >>> NumericDigits.from_value(Fraction(1, 3), fraction_digits=3)
            NumericDigits(negative=False, integer='0', fraction='3331')
        """
        number = std_numeric(value)

        if isinstance(number, int):
            return cls(negative=number < 0, integer=str(abs(number)))

        if isinstance(number, Fraction):
            return cls._from_fraction(number, max(0, fraction_digits))

        if isinstance(number, float):
            if not math.isfinite(number):
                raise ValueError(f"cannot display non-finite value {fmt_value(value)}")
            number = Decimal(repr(float(number)))
        elif not number.is_finite():
            raise ValueError(f"cannot display non-finite value {fmt_value(value)}")

        # copy_abs() and the 'f' format are exact, no context rounding applies
        integer, fraction = split_decimal(format(number.copy_abs(), "f"))
        return cls(negative=number.is_signed(), integer=integer or "0", fraction=fraction)

    @classmethod
    def _from_fraction(cls, number: Fraction, fraction_digits: int) -> Self:
        """Long division of numerator by denominator, exact up to fraction_digits digits."""
        integer, remainder = divmod(abs(number.numerator), number.denominator)
        scaled, remainder = divmod(remainder * 10 ** fraction_digits, number.denominator)
        fraction = str(scaled).rjust(fraction_digits, "0") if fraction_digits else ""
        if remainder:
            fraction += "1"
        else:
            fraction = fraction.rstrip("0")
        return cls(negative=number < 0, integer=str(integer), fraction=fraction)

    @property
    def is_zero(self) -> bool:
        """True when every digit of the magnitude is zero."""
        return not self.integer.strip("0") and not self.fraction.strip("0")


# Methods --------------------------------------------------------------------------------------------------------------

def std_numeric(value: Numeric) -> int | float | Decimal | Fraction:
    """
    Convert numeric types to standard Python int, float, Decimal or Fraction.

    Exact types stay exact: Python int (arbitrary precision), types implementing __index__
    (NumPy integers) and integer-valued Fraction become int; Decimal and non-integral Fraction
    pass through unchanged. Everything else with __float__ (NumPy floats, mpmath) becomes float.

    Detection Priority:
        1. bool is rejected, it is an int subclass that is rarely meant as a number
        2. int, float, Decimal pass through (int subclasses are converted to plain int)
        3. __index__() → int
        4. .item() → int or float (array scalars)
        5. Fraction → int when integer-valued, else the Fraction itself
        6. __float__() → float

    Raises:
        TypeError: For bool and unsupported types (str, None, containers).

    Examples:
        >>> std_numeric(10**30)
        1000000000000000000000000000000
        >>> std_numeric(Fraction(6, 3))
        2
        >>> std_numeric(Fraction(1, 4))
        Fraction(1, 4)
    """
    if isinstance(value, bool):
        raise TypeError(f"boolean values not supported, got {fmt_value(value)}")

    if isinstance(value, int):
        return operator.index(value)

    if isinstance(value, (float, Decimal)):
        return value

    if hasattr(value, "__index__"):
        try:
            return operator.index(value)
        except (TypeError, ValueError) as exc:
            raise TypeError(f"cannot convert {fmt_type(value)} to int via __index__: {exc}") from exc

    item = getattr(value, "item", None)
    if callable(item):
        try:
            result = item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, (int, float)) and not isinstance(result, bool):
            return result

    if isinstance(value, Fraction):
        return value.numerator if value.denominator == 1 else value

    if isinstance(value, SupportsFloat):
        try:
            result = float(value)
        except (TypeError, ValueError) as exc:
            raise TypeError(f"cannot convert {fmt_type(value)} to float: {exc}") from exc
        logger.debug("converted %s to fixed-precision float %r", fmt_type(value), result)
        return result

    raise TypeError(
        f"unsupported numeric type: {fmt_type(value)}. "
        f"Expected int, float, Decimal, Fraction or types implementing __index__ or __float__"
    )
