"""
Decimal digit string arithmetic for big number display.

All operations work on strings of decimal digits without converting them to int or float,
so integer parts of any length and fractional parts of any length are scaled, truncated
and rounded without precision loss.

Digit strings are plain str objects holding only '0'..'9'. Integer digit strings may carry
leading zeros, fraction digit strings may carry trailing zeros; normalization is explicit.
"""

# ## Carry propagation
#
# Increments run right-to-left: trailing '9' digits roll over to '0' and the first non-'9'
# digit is bumped by one. An integer digit string grows by one digit when every digit rolls
# over ("999" -> "1000"). A fraction keeps its length and reports the carry instead, which
# the caller applies to the integer part.

# Standard library -----------------------------------------------------------------------------------------------------
from enum import StrEnum, unique


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Rounding(StrEnum):
    """
    Rounding policies applied at the last kept fractional digit.

    Attributes:
        ROUND: Half-up on the boundary digit, "1.25" -> "1.3" at one decimal.
        FLOOR: Truncate toward zero magnitude, never increments.
        CEIL: Increment when any discarded digit is non-zero.
    """
    ROUND = "round"
    FLOOR = "floor"
    CEIL = "ceil"


# Methods --------------------------------------------------------------------------------------------------------------

def split_decimal(number: str) -> tuple[str, str]:
    """
    Split a non-negative decimal string at its decimal point.

    Examples:
        >>> split_decimal("123.456")
        ('123', '456')
        >>> split_decimal("123")
        ('123', '')
        >>> split_decimal(".5")
        ('', '5')
    """
    integer, _, fraction = number.partition(".")
    return integer, fraction


def strip_leading_zeros(digits: str) -> str:
    """Remove leading zeros from an integer digit string, "0" for empty or all-zero input."""
    return digits.lstrip("0") or "0"


def trim_trailing_zeros(digits: str, min_keep: int = 0) -> str:
    """
    Remove trailing zeros from a fraction digit string, never shortening it below min_keep.

    Input shorter than min_keep is returned unchanged, no padding is done here.

    Examples:
        >>> trim_trailing_zeros("12000", 1)
        '12'
        >>> trim_trailing_zeros("12000", 3)
        '120'
        >>> trim_trailing_zeros("0000", 2)
        '00'
    """
    min_keep = max(0, min_keep)
    return digits[:min_keep] + digits[min_keep:].rstrip("0")


def increment_digits(digits: str) -> str:
    """
    Add one to an integer digit string.

    Every position is carried independently, so leading zeros survive the increment
    ("009" -> "010"); use strip_leading_zeros() to normalize. Full carry grows the
    string by one digit.

    Examples:
        >>> increment_digits("128")
        '129'
        >>> increment_digits("999")
        '1000'
    """
    head = digits.rstrip("9")
    zeros = "0" * (len(digits) - len(head))
    if not head:
        return "1" + zeros
    return head[:-1] + _next_digit(head[-1]) + zeros


def increment_fraction(fraction: str) -> tuple[str, bool]:
    """
    Add one unit in the last place to a fraction digit string of fixed length.

    Returns:
        tuple[str, bool]: The incremented fraction of the same length, and whether the carry
            propagated past the leftmost digit into the integer part. An empty fraction has no
            capacity and always carries.

    Examples:
        >>> increment_fraction("129")
        ('130', False)
        >>> increment_fraction("999")
        ('000', True)
        >>> increment_fraction("")
        ('', True)
    """
    head = fraction.rstrip("9")
    zeros = "0" * (len(fraction) - len(head))
    if not head:
        return zeros, True
    return head[:-1] + _next_digit(head[-1]) + zeros, False


def round_at(integer: str, fraction: str, length: int, mode: Rounding | str) -> tuple[str, str]:
    """
    Round an (integer, fraction) digit string pair to a fraction of the given length.

    For length <= 0 the fraction is dropped entirely and the integer is incremented:
      - FLOOR: never;
      - CEIL: when any fractional digit is non-zero;
      - ROUND: when the first fractional digit is '5' or greater.

    For length > 0 the fraction is padded with zeros (or cut) to length + 1 digits, the first
    `length` digits are kept and the boundary digit decides:
      - FLOOR: never increments;
      - CEIL: increments when any original digit at or past `length` is non-zero;
      - ROUND: increments when the boundary digit is '5' or greater (half-up).
    Carry out of the kept fraction increments the integer part. In both regimes the integer
    part is returned without leading zeros.

    Args:
        integer: Integer digits, leading zeros allowed.
        fraction: Fraction digits, any length.
        length: Number of fraction digits to keep.
        mode: Rounding policy, Rounding member or its string value.

    Returns:
        tuple[str, str]: Rounded integer digits and fraction digits of exactly `length` digits
            (empty when length <= 0).

    Raises:
        ValueError: If mode is not a known rounding policy.

    Examples:
        >>> round_at("1", "2449", 2, "round")
        ('1', '24')
        >>> round_at("1", "9999", 2, "round")
        ('2', '00')
        >>> round_at("1", "290100", 2, "ceil")
        ('1', '30')
        >>> round_at("0009", "999", 2, "round")
        ('10', '00')
    """
    mode = Rounding(mode)

    if length <= 0:
        if mode is Rounding.CEIL:
            carry = _has_nonzero(fraction)
        elif mode is Rounding.ROUND:
            # Only the leading digit is inspected, there is no fraction left to represent more
            carry = fraction[:1] >= "5"
        else:
            carry = False
        return strip_leading_zeros(increment_digits(integer) if carry else integer), ""

    padded = fraction.ljust(length + 1, "0")[:length + 1]
    kept, boundary = padded[:length], padded[length]

    if mode is Rounding.CEIL:
        carry = _has_nonzero(fraction[length:])
    elif mode is Rounding.ROUND:
        carry = boundary >= "5"
    else:
        carry = False

    if carry:
        kept, overflow = increment_fraction(kept)
        if overflow:
            integer = increment_digits(integer)

    return strip_leading_zeros(integer), kept


def shape_fraction(fraction: str,
                   min_decimals: int,
                   max_decimals: int,
                   force_decimals: int | None = None,
                   remove_zeros: bool = True) -> str:
    """
    Shape fraction digits for output.

    - force_decimals set: pad with zeros and cut to exactly force_decimals digits;
    - remove_zeros False: pad with zeros and cut to exactly max_decimals digits;
    - otherwise: pad to min_decimals, cut to max_decimals, then drop trailing zeros
      down to (but not below) min_decimals.

    Applying it twice with the same arguments gives the same result as applying it once.

    Examples:
        >>> shape_fraction("12", 0, 5, force_decimals=4)
        '1200'
        >>> shape_fraction("2", 0, 3, remove_zeros=False)
        '200'
        >>> shape_fraction("1200", 1, 4)
        '12'
    """
    if force_decimals is not None:
        return fraction.ljust(force_decimals, "0")[:force_decimals]

    if not remove_zeros:
        return fraction.ljust(max_decimals, "0")[:max_decimals]

    shaped = fraction.ljust(min_decimals, "0")[:max_decimals]
    if len(shaped) > min_decimals:
        shaped = trim_trailing_zeros(shaped, min_decimals)
    return shaped


# Private Methods ------------------------------------------------------------------------------------------------------

def _has_nonzero(digits: str) -> bool:
    return bool(digits.strip("0"))


def _next_digit(digit: str) -> str:
    return chr(ord(digit) + 1)
