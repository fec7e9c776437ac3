"""
Big number display formatting for dashboards, games, status lines and logs.

Scales numbers by powers of 1000 and labels them with a magnitude suffix: 1500 → "1.5K",
12345678901234567890 → "12.34a". Scaling, truncation and rounding run on decimal digit
strings, so arbitrary-precision integers never lose digits to a float intermediate.
"""

# ## Scope
#
# Formatting is one-way (number → human-readable string); formatted strings are not meant
# to be parsed back. Keep the original value (NumberFormatData.input) for round-tripping.

# ## Values above the suffix table
#
# Magnitudes past the last suffix are pinned to the last group; the extra digits stay in
# the integer part. With suffixes ("", "K", "M"), 10**60 displays as 10**54 followed by "M".

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
from dataclasses import dataclass
from typing import Any, NamedTuple, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .digits import Rounding, round_at, shape_fraction, strip_leading_zeros
from .formatters import fmt_type, fmt_value
from .numeric import Numeric, NumericDigits
from .sentinels import UNSET, UnsetType, ifunset
from .suffixes import SuffixTable, validate_suffixes

__all__ = [
    'BigNumberFormatter',
    'NumberFormatData',
    'NumberFormatOptions',
    'Rounding',
    'big_number',
    'big_number_data',
    'default_formatter',
    'get_suffixes',
    'set_suffixes',
]

DEFAULT_MAX_DECIMALS = 2


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class NumberFormatOptions:
    """
    Formatting controls for big number display.

    Field types are validated at construction, numeric ranges are not: out-of-range values
    are clamped per call (negative decimals → 0, max_decimals below min_decimals → min_decimals),
    so merged options never inherit an earlier clamp.

    Attributes:
        min_decimals: Minimum fractional digits shown, zero-padded.
        max_decimals: Maximum fractional digits kept. None means the default of 2.
        force_decimals: When set, the fraction is padded or cut to exactly this many digits,
            overriding min_decimals, max_decimals and remove_zeros.
        remove_zeros: Trim trailing fractional zeros beyond min_decimals. When False the
            fraction is padded to max_decimals.
        rounding: Rounding policy at the last kept digit. None truncates.
        suffixes: Per-call suffix table override. None uses the formatter table.

    Examples:
        >>> opts = NumberFormatOptions(max_decimals=1, rounding="ceil")
        >>> opts.rounding
        <Rounding.CEIL: 'ceil'>
        >>> opts.merge(rounding=None).rounding is None
        True
    """
    min_decimals: int = 0
    max_decimals: int | None = DEFAULT_MAX_DECIMALS
    force_decimals: int | None = None
    remove_zeros: bool = True
    rounding: Rounding | None = None
    suffixes: tuple[str, ...] | None = None

    def __post_init__(self):
        """Validate field types and normalize rounding and suffixes."""
        _validate_int("min_decimals", self.min_decimals)
        _validate_int("max_decimals", self.max_decimals, allow_none=True)
        _validate_int("force_decimals", self.force_decimals, allow_none=True)

        if not isinstance(self.remove_zeros, bool):
            raise TypeError(f"remove_zeros must be bool, got {fmt_type(self.remove_zeros)}")

        if self.rounding is not None:
            if not isinstance(self.rounding, str):
                raise TypeError(f"rounding must be Rounding | str | None, got {fmt_type(self.rounding)}")
            try:
                rounding = Rounding(self.rounding)
            except ValueError as exc:
                raise ValueError(f"rounding expected one of 'round', 'floor', 'ceil' "
                                 f"but found {fmt_value(self.rounding)}") from exc
            object.__setattr__(self, 'rounding', rounding)

        if self.suffixes is not None:
            object.__setattr__(self, 'suffixes', validate_suffixes(self.suffixes))

    def merge(self,
              # Attrs override
              min_decimals: int | UnsetType = UNSET,
              max_decimals: int | None | UnsetType = UNSET,
              force_decimals: int | None | UnsetType = UNSET,
              remove_zeros: bool | UnsetType = UNSET,
              rounding: Rounding | str | None | UnsetType = UNSET,
              suffixes: abc.Sequence[str] | None | UnsetType = UNSET,
              ) -> "NumberFormatOptions":
        """
        Create a new NumberFormatOptions instance with merged configuration options.

        Parameters not provided (UNSET) are inherited from the current instance; pass None
        explicitly to clear max_decimals, force_decimals, rounding or suffixes.
        """
        return NumberFormatOptions(
            min_decimals=ifunset(min_decimals, default=self.min_decimals),
            max_decimals=ifunset(max_decimals, default=self.max_decimals),
            force_decimals=ifunset(force_decimals, default=self.force_decimals),
            remove_zeros=ifunset(remove_zeros, default=self.remove_zeros),
            rounding=ifunset(rounding, default=self.rounding),
            suffixes=ifunset(suffixes, default=self.suffixes),
        )


@dataclass(frozen=True)
class NumberFormatData:
    """
    Structured big number display result.

    Attributes:
        input: The original value, unchanged.
        value: Integer part after scaling, "-" prefixed for negative input unless it is "0".
        decimals: Fraction digits without the dot, may be empty.
        suffix: Magnitude suffix of the chosen group.

    Examples:
        >>> data = big_number_data(-12_345)
        >>> data.value, data.decimals, data.suffix
        ('-12', '34', 'K')
        >>> str(data)
        '-12.34K'
    """
    input: Any
    value: str
    decimals: str
    suffix: str

    def __str__(self) -> str:
        return f"{self.number}{self.suffix}"

    @property
    def number(self) -> str:
        """Number part without suffix, "12.34" for "12.34K"."""
        return f"{self.value}.{self.decimals}" if self.decimals else self.value


class _Precision(NamedTuple):
    """Per-call decimal limits after clamping."""
    min_decimals: int
    max_decimals: int
    force_decimals: int | None

    @classmethod
    def resolve(cls, options: NumberFormatOptions) -> Self:
        min_decimals = max(0, options.min_decimals)
        max_decimals = DEFAULT_MAX_DECIMALS if options.max_decimals is None else options.max_decimals
        max_decimals = max(min_decimals, max_decimals)
        force_decimals = None if options.force_decimals is None else max(0, options.force_decimals)
        return cls(min_decimals, max_decimals, force_decimals)

    @property
    def keep_decimals(self) -> int:
        """Fraction digits kept before output shaping, enough for force_decimals too."""
        return max(self.max_decimals, self.force_decimals or 0)


class BigNumberFormatter:
    """
    Formats numbers as scaled values with magnitude suffixes.

    Each formatter holds its own SuffixTable, seeded at construction with the given suffixes
    or SuffixConf.BIG_NUMBER_SUFFIXES, and default options that per-call options and keyword
    overrides are merged over. The module-level functions use `default_formatter`.

    Args:
        suffixes: Initial suffix table, index 0 is the unscaled group.
        options: Default formatting options of this formatter.

    Examples:
        >>> fmt = BigNumberFormatter(suffixes=["", " Thousand", " Million"])
        >>> fmt.big_number(2_500_000)
        '2.5 Million'
        >>> fmt.big_number(1999, max_decimals=1)
        '1.9 Thousand'
        >>> fmt.big_number(1999, max_decimals=1, rounding="round")
        '2 Thousand'
    """

    def __init__(self,
                 suffixes: abc.Sequence[str] | None = None,
                 options: NumberFormatOptions | None = None) -> None:
        if not isinstance(options, (NumberFormatOptions, type(None))):
            raise TypeError(f"options must be NumberFormatOptions | None, got {fmt_type(options)}")
        self._table = SuffixTable(suffixes)
        self._options = options if options is not None else NumberFormatOptions()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(table={self._table!r}, options={self._options!r})"

    @property
    def options(self) -> NumberFormatOptions:
        return self._options

    @property
    def suffixes(self) -> tuple[str, ...]:
        """Current suffix table."""
        return self._table.current

    def set_suffixes(self, suffixes: abc.Sequence[str]) -> tuple[str, ...]:
        """
        Replace the suffix table for subsequent calls without a per-call suffixes override.

        Returns:
            tuple[str, ...]: The previous table.
        """
        return self._table.replace(suffixes)

    def big_number(self,
                   value: Numeric,
                   options: NumberFormatOptions | abc.Mapping[str, Any] | None = None,
                   **overrides) -> str:
        """
        Format a number as a scaled string with magnitude suffix, "1.5K" for 1500.

        See big_number_data() for arguments.
        """
        return str(self.big_number_data(value, options, **overrides))

    def big_number_data(self,
                        value: Numeric,
                        options: NumberFormatOptions | abc.Mapping[str, Any] | None = None,
                        **overrides) -> NumberFormatData:
        """
        Format a number into structured value, decimals and suffix parts.

        The magnitude group is ⌊(integer digit count - 1) / 3⌋ capped at the last suffix
        index. Integer digits moved behind the decimal point by scaling lead the fraction;
        the input's own fraction digits follow only in the unscaled group. Without a rounding
        policy the fraction is truncated, otherwise it is rounded on the digit strings.

        Args:
            value: int of any size, float, Decimal, Fraction or a NumPy-like scalar.
            options: NumberFormatOptions used instead of the formatter default options, or a
                mapping of its fields merged over the formatter default options.
            **overrides: NumberFormatOptions fields, merged last.

        Returns:
            NumberFormatData: Structured result, str() renders "value[.decimals]suffix".

        Raises:
            TypeError: If value is not a supported numeric type or an option has a wrong type.
            ValueError: If value is NaN or infinite, or an option value is invalid.
        """
        opts = self._merge_options(options, overrides)
        suffixes = opts.suffixes if opts.suffixes is not None else self._table.current
        precision = _Precision.resolve(opts)
        digits = NumericDigits.from_value(value, fraction_digits=precision.keep_decimals + 1)

        if digits.is_zero:
            decimals = _shape(precision, "", opts.remove_zeros)
            return NumberFormatData(input=value, value="0", decimals=decimals, suffix=suffixes[0])

        integer = strip_leading_zeros(digits.integer)
        group = _magnitude_group(integer, len(suffixes))

        head = max(1, len(integer) - group * 3)
        scaled_int, scaled_frac = integer[:head], integer[head:]
        if group == 0:
            scaled_frac += digits.fraction

        if opts.rounding is None:
            out_int, out_frac = strip_leading_zeros(scaled_int), scaled_frac[:precision.keep_decimals]
        else:
            out_int, out_frac = round_at(scaled_int, scaled_frac, precision.keep_decimals, opts.rounding)

        decimals = _shape(precision, out_frac, opts.remove_zeros)
        signed = f"-{out_int}" if digits.negative and out_int != "0" else out_int
        return NumberFormatData(input=value, value=signed, decimals=decimals, suffix=suffixes[group])

    def _merge_options(self,
                       options: NumberFormatOptions | abc.Mapping[str, Any] | None,
                       overrides: dict[str, Any]) -> NumberFormatOptions:
        if options is None:
            opts = self._options
        elif isinstance(options, NumberFormatOptions):
            opts = options
        elif isinstance(options, abc.Mapping):
            opts = self._options.merge(**options)
        else:
            raise TypeError(f"options must be NumberFormatOptions | Mapping | None, got {fmt_type(options)}")
        return opts.merge(**overrides) if overrides else opts


# Methods --------------------------------------------------------------------------------------------------------------

def _magnitude_group(integer: str, groups: int) -> int:
    """Power-of-1000 bucket of an integer digit string, clamped to [0, groups - 1]."""
    group = (len(integer) - 1) // 3
    return max(0, min(group, groups - 1))


def _shape(precision: _Precision, fraction: str, remove_zeros: bool) -> str:
    return shape_fraction(fraction,
                          precision.min_decimals,
                          precision.max_decimals,
                          precision.force_decimals,
                          remove_zeros)


def _validate_int(name: str, value: Any, *, allow_none: bool = False) -> None:
    if value is None and allow_none:
        return
    if not isinstance(value, int) or isinstance(value, bool):
        expected = "int | None" if allow_none else "int"
        raise TypeError(f"{name} must be {expected}, got {fmt_type(value)}")


# Default formatter ----------------------------------------------------------------------------------------------------

default_formatter = BigNumberFormatter()


def big_number(value: Numeric,
               options: NumberFormatOptions | abc.Mapping[str, Any] | None = None,
               **overrides) -> str:
    """
    Format a number with the default formatter.

    Examples:
        >>> big_number(1500)
        '1.5K'
        >>> big_number(1_201_500, max_decimals=1, rounding="ceil")
        '1.3M'
        >>> big_number(0, min_decimals=2)
        '0.00'
    """
    return default_formatter.big_number(value, options, **overrides)


def big_number_data(value: Numeric,
                    options: NumberFormatOptions | abc.Mapping[str, Any] | None = None,
                    **overrides) -> NumberFormatData:
    """Format a number into NumberFormatData with the default formatter."""
    return default_formatter.big_number_data(value, options, **overrides)


def set_suffixes(suffixes: abc.Sequence[str]) -> tuple[str, ...]:
    """Replace the default formatter suffix table, returns the previous table."""
    return default_formatter.set_suffixes(suffixes)


def get_suffixes() -> tuple[str, ...]:
    """Current suffix table of the default formatter."""
    return default_formatter.suffixes
