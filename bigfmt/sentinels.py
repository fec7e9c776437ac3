"""
Sentinel for distinguishing an omitted argument from an explicit None.

Formatting options use None as a real value ("no forced decimals", "no rounding",
"use the formatter suffix table"), so merge() overrides default to UNSET instead.

Example:
    >>> def merge(self, rounding: Rounding | None | UnsetType = UNSET):
    ...     rounding = ifunset(rounding, default=self.rounding)
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any, Final

__all__ = [
    'UNSET',
    'UnsetType',
    'ifunset',
]


# Sentinel Types -------------------------------------------------------------------------------------------------------

class UnsetType:
    """
    Sentinel type for UNSET.

    Singleton, falsy, compared by identity and preserved by pickling.
    """
    __slots__ = ()

    _instance: 'UnsetType | None' = None

    def __new__(cls) -> 'UnsetType':
        """Ensures singleton behavior."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return '<UNSET>'

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple:
        """Ensure pickling returns the singleton instance."""
        return (self.__class__, ())


# Sentinel Objects -----------------------------------------------------------------------------------------------------

UNSET: Final[UnsetType] = UnsetType()


# Helper Functions -----------------------------------------------------------------------------------------------------

def ifunset(value: Any, *, default: Any) -> Any:
    """Return default if value is UNSET, otherwise return value."""
    return default if value is UNSET else value
