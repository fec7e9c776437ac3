#
# bigfmt Magnitude Suffix Tables
#

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
import logging
import string
import threading
from itertools import product

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type, fmt_value

logger = logging.getLogger(__name__)


# Methods --------------------------------------------------------------------------------------------------------------

def alpha_suffixes(width: int = 1) -> tuple[str, ...]:
    """
    Lowercase letter suffixes of the given width in idle-game order: "a".."z", "aa".."zz", ...
    """
    if not isinstance(width, int) or isinstance(width, bool):
        raise TypeError(f"width must be int, got {fmt_type(width)}")
    if width < 1:
        raise ValueError(f"width must be >= 1, got {width}")
    return tuple("".join(letters) for letters in product(string.ascii_lowercase, repeat=width))


def validate_suffixes(suffixes: abc.Sequence[str]) -> tuple[str, ...]:
    """
    Check a suffix table and freeze it into a tuple.

    Index 0 is the unscaled group and must exist, so an empty table is rejected.

    Raises:
        TypeError: If suffixes is not a sequence of str.
        ValueError: If suffixes is empty.
    """
    if isinstance(suffixes, (str, bytes)) or not isinstance(suffixes, abc.Sequence):
        raise TypeError(f"suffixes must be a sequence of str, got {fmt_type(suffixes)}")

    table = tuple(suffixes)
    if not table:
        raise ValueError("suffixes must contain at least the unscaled group suffix")

    for index, suffix in enumerate(table):
        if not isinstance(suffix, str):
            raise TypeError(f"suffixes[{index}] must be str, got {fmt_value(suffix)}")
    return table


# Classes --------------------------------------------------------------------------------------------------------------

# @formatter:off

class SuffixConf:
    """
    Default suffix tables, indexed by magnitude group (powers of 1000).

    Attributes:
        SHORT_SCALE: Short-scale English abbreviations, up to trillions.

        BIG_NUMBER_SUFFIXES: Default table of BigNumberFormatter. Short scale up to
            quadrillions ("Q"), then letter runs "a".."z" and "aa".."zz", so 10^18 is "1a"
            and 10^96 is "1aa".
    """
    SHORT_SCALE = (
        "",   # units
        "K",  # thousand       = 10³
        "M",  # million        = 10⁶
        "B",  # billion        = 10⁹
        "T",  # trillion       = 10¹²
    )

    BIG_NUMBER_SUFFIXES = SHORT_SCALE + (
        "Q",  # quadrillion    = 10¹⁵
    ) + alpha_suffixes(1) + alpha_suffixes(2)

# @formatter:on


class SuffixTable:
    """
    Replaceable suffix table shared by formatting calls.

    The table is an immutable tuple; replace() swaps the whole reference under a lock, so
    readers see either the old or the new table and never a partial one. Formatting calls
    read `current` once and use that snapshot for the rest of the call.

    Examples:
        >>> table = SuffixTable(["", "K", "M"])
        >>> table.current
        ('', 'K', 'M')
        >>> table.replace(["", " Thousand"])
        ('', 'K', 'M')
        >>> table.current[1]
        ' Thousand'
    """

    __slots__ = ("_lock", "_suffixes")

    def __init__(self, suffixes: abc.Sequence[str] | None = None) -> None:
        self._lock = threading.Lock()
        self._suffixes = validate_suffixes(SuffixConf.BIG_NUMBER_SUFFIXES if suffixes is None else suffixes)

    def __repr__(self) -> str:
        table = self.current
        head = ", ".join(repr(s) for s in table[:6])
        more = ", ..." if len(table) > 6 else ""
        return f"SuffixTable([{head}{more}], groups={len(table)})"

    @property
    def current(self) -> tuple[str, ...]:
        """Snapshot of the active table."""
        with self._lock:
            return self._suffixes

    def replace(self, suffixes: abc.Sequence[str]) -> tuple[str, ...]:
        """
        Replace the whole table.

        Returns:
            tuple[str, ...]: The previous table, handy for restoring it later.

        Raises:
            TypeError: If suffixes is not a sequence of str.
            ValueError: If suffixes is empty.
        """
        table = validate_suffixes(suffixes)
        with self._lock:
            previous, self._suffixes = self._suffixes, table
        logger.debug("suffix table replaced: %d groups, last suffix %r", len(table), table[-1])
        return previous
