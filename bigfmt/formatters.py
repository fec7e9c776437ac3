"""
Compact type and value formatting for exception messages.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------

def class_name(obj: Any, fully_qualified: bool = False) -> str:
    """
    Get the class name of an object or a class.

    Builtins are never module-qualified, so both `class_name(10)` and `class_name(int)`
    return 'int'; user classes are qualified only when fully_qualified is True.
    """
    cls = obj if isinstance(obj, type) else type(obj)
    name = getattr(cls, "__qualname__", None) or getattr(cls, "__name__", "object")
    module = getattr(cls, "__module__", "builtins")
    if fully_qualified and module != "builtins":
        return f"{module}.{name}"
    return name


def fmt_type(obj: Any, *, fully_qualified: bool = False) -> str:
    """
    Format type information of an object or a type.

    Examples:
        >>> fmt_type(42)
        '<int>'
        >>> fmt_type(str)
        '<str>'
    """
    return f"<{class_name(obj, fully_qualified=fully_qualified)}>"


def fmt_value(obj: Any, *, max_repr: int = 120, ellipsis: str = "...") -> str:
    """
    Format a single value as a type-value pair.

    Broken __repr__ implementations are reported instead of raised, and long reprs are
    truncated to max_repr characters including the ellipsis.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("K")
        "<str: 'K'>"
    """
    try:
        text = repr(obj)
    except Exception as exc:
        text = f"repr failed: {class_name(exc)}"

    if len(text) > max_repr:
        keep = max(0, max_repr - len(ellipsis))
        text = text[:keep] + ellipsis

    return f"<{class_name(obj)}: {text}>"
