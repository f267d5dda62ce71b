"""
Formatting utilities for byte counts, radix conversions and error messages.

human_readable() decomposes a byte count into binary units, largest first.
fmt_radix() and fmt_conversions() render an integer with conventional radix markers.
fmt_exception() and fmt_value() produce type=value strings for error messages.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .units import DISPLAY_UNITS, RADIX_MARKERS, conv_conf, valid_bases

RADIX_FORMAT_CODES = {16: "x", 8: "o", 2: "b", 10: "d"}

CONVERSIONS = (("dec", 10), ("hex", 16), ("oct", 8), ("bin", 2))

# Methods --------------------------------------------------------------------------------------------------------------

def human_readable(value: int) -> str:
    """
    Render a byte count as a greedy, largest-unit-first sum of binary units.

    Units whose count would be zero are omitted and terms are separated by single spaces.

    Args:
        value: Non-negative number of bytes.

    Returns:
        str: The decomposition, "0B" for zero.

    Raises:
        TypeError: If value is not an int, or is a bool.
        ValueError: If value is negative.

    Examples:
        >>> human_readable(0)
        '0B'
        >>> human_readable(1024)
        '1KiB'
        >>> human_readable(5 * 1024 ** 2 + 3 * 1024 + 7)
        '5MiB 3KiB 7B'
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"value must be an int, got {fmt_value(value)}")
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")

    if value == 0:
        return "0B"

    terms = []
    remaining = value
    for threshold, label in DISPLAY_UNITS:
        if remaining >= threshold:
            count, remaining = divmod(remaining, threshold)
            terms.append(f"{count}{label}")
    return " ".join(terms)


def fmt_radix(value: int, base: int) -> str:
    """
    Render a non-negative int in the given base with its radix marker: 0x, 0, 0b or none for decimal.

    Examples:
        >>> fmt_radix(255, 16)
        '0xff'
        >>> fmt_radix(8, 8)
        '010'
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"value must be an int, got {fmt_value(value)}")
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    if base not in RADIX_MARKERS:
        raise ValueError(f"Invalid base: {base}, expected one of {valid_bases}")
    return f"{RADIX_MARKERS[base]}{value:{RADIX_FORMAT_CODES[base]}}"


def fmt_conversions(value: int, indent: str = conv_conf.INDENT) -> str:
    """
    Return the 'conversions:' block listing value in decimal, hex, octal and binary, one per line.
    """
    lines = ["conversions:"]
    lines += [f"{indent}{name}: {fmt_radix(value, base)}" for name, base in CONVERSIONS]
    return "\n".join(lines)


def fmt_exception(exc: BaseException) -> str:
    """
    Format an exception as a type=message pair, or just the type name when the message is empty.

    Examples:
        >>> fmt_exception(ValueError("bad input"))
        'ValueError=bad input'
        >>> fmt_exception(RuntimeError())
        'RuntimeError'
    """
    exc_type = type(exc).__name__
    exc_msg = str(exc)
    return f"{exc_type}={exc_msg}" if exc_msg else exc_type


def fmt_value(obj: Any) -> str:
    """
    Format a value as a type=repr pair for exception messages.

    Examples:
        >>> fmt_value(42)
        'int=42'
        >>> fmt_value("abc")
        "str='abc'"
    """
    return f"{type(obj).__name__}={obj!r}"
