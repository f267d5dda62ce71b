"""
Unsigned 64-bit arithmetic for parsed byte quantities.

Python ints never overflow, so the 64-bit range is enforced here explicitly
and the caller picks what happens when a product leaves it.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import warnings
from typing import Literal

# Local ----------------------------------------------------------------------------------------------------------------
from .units import U64_MAX
from .formatters import fmt_value

OnOverflow = Literal["raise", "wrap", "saturate", "warn"]


# Methods --------------------------------------------------------------------------------------------------------------

def is_u64(value) -> bool:
    """True if value is an int (bool excluded) within [0, 2**64 - 1]."""
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= U64_MAX


def scale_size(base: int, multiplier: int, *, on_overflow: OnOverflow = "raise") -> int:
    """
    Multiply a parsed value by its unit multiplier within the unsigned 64-bit range.

    Parameters
    ----------
    base : int
        Parsed numeric value, 0 <= base <= 2**64 - 1.

    multiplier : int
        Unit multiplier, 0 <= multiplier <= 2**64 - 1.

    on_overflow : {"raise", "wrap", "saturate", "warn"}, default "raise"
        What to do when base * multiplier exceeds 2**64 - 1:

        - "raise": Raise OverflowError
        - "wrap": Reduce the product modulo 2**64, like unchecked u64 arithmetic
        - "saturate": Clamp the product to 2**64 - 1
        - "warn": Wrap as "wrap" does and emit a RuntimeWarning

    Returns
    -------
    int
        The product, always within the unsigned 64-bit range.

    Raises
    ------
    TypeError
        If base or multiplier is not an int, or is a bool.
    ValueError
        If base or multiplier is outside the unsigned 64-bit range, or on_overflow is unknown.
    OverflowError
        If the product overflows and on_overflow="raise".

    Examples
    --------
    >>> scale_size(16, 1024 ** 2)
    16777216
    >>> scale_size(2 ** 63, 4, on_overflow="wrap")
    0
    >>> scale_size(2 ** 63, 4, on_overflow="saturate")
    18446744073709551615
    """
    for name, operand in (("base", base), ("multiplier", multiplier)):
        if not isinstance(operand, int) or isinstance(operand, bool):
            raise TypeError(f"{name} must be an int, got {fmt_value(operand)}")
        if not is_u64(operand):
            raise ValueError(f"{name} must be within [0, {U64_MAX}], got {operand}")

    if on_overflow not in ("raise", "wrap", "saturate", "warn"):
        raise ValueError(f"on_overflow must be 'raise', 'wrap', 'saturate' or 'warn', got {on_overflow!r}")

    product = base * multiplier
    if product <= U64_MAX:
        return product

    if on_overflow == "raise":
        raise OverflowError(f"{base} * {multiplier} does not fit in 64 bits")
    elif on_overflow == "saturate":
        return U64_MAX

    wrapped = product & U64_MAX
    if on_overflow == "warn":
        warnings.warn(
            f"{base} * {multiplier} overflows 64 bits, wrapped to {wrapped}",
            RuntimeWarning,
            stacklevel=2
        )
    return wrapped
