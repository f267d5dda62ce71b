#
# unitconv Size String Parsers
#

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import IntErrorKind, ParseError, StripError
from .formatters import fmt_value
from .units import RADIX_DIGITS, RADIX_PREFIXES, SIZE_SUFFIXES, U64_MAX, valid_bases


# Methods --------------------------------------------------------------------------------------------------------------

def parse_size(value: str) -> tuple[int, int]:
    """
    Split a size string into its numeric value and unit multiplier.

    The input is lowercased, then at most one size suffix (kib, mib, ..., kb, mb, ...) is
    stripped from the end. The rest is read as hex, binary or octal when it starts with
    0x, 0b or 0, and as decimal otherwise. The literal "0" is decimal zero.

    Args:
        value: Size string such as "1mib", "0x10KiB", "010", "42".

    Returns:
        tuple[int, int]: (value, multiplier), multiplier is 1 when there is no suffix.

    Raises:
        TypeError: If value is not a str.
        ParseError: If the digits are empty, invalid for their base, or overflow 64 bits.
        StripError: If a matched prefix or suffix could not be removed.

    Examples:
        >>> parse_size("0x10mib")
        (16, 1048576)
        >>> parse_size("010")
        (8, 1)
        >>> parse_size("0")
        (0, 1)
    """
    if not isinstance(value, str):
        raise TypeError(f"value must be a str, got {fmt_value(value)}")

    text = value.lower()

    multiplier = 1
    for suffix, unit_multiplier in SIZE_SUFFIXES:
        if text.endswith(suffix):
            multiplier = unit_multiplier
            text = strip_suffix(text, suffix)
            break

    if text != "0":
        for prefix, base in RADIX_PREFIXES:
            if text.startswith(prefix):
                return parse_uint(strip_prefix(text, prefix), base), multiplier

    return parse_uint(text, 10), multiplier


def parse_uint(text: str, base: int = 10) -> int:
    """
    Parse an unsigned 64-bit integer from bare digits of the given base.

    Stricter than int(): no sign, whitespace, underscores or radix prefix are accepted
    and only ASCII digits count. Letters must be lowercase.

    Raises:
        ValueError: If base is not one of 2, 8, 10, 16.
        ParseError: With kind EMPTY, INVALID_DIGIT or POS_OVERFLOW.
    """
    if base not in RADIX_DIGITS:
        raise ValueError(f"Invalid base: {base}, expected one of {valid_bases}")

    if not text:
        raise ParseError(IntErrorKind.EMPTY, text)

    allowed = RADIX_DIGITS[base]
    if any(char not in allowed for char in text):
        raise ParseError(IntErrorKind.INVALID_DIGIT, text)

    number = int(text, base)
    if number > U64_MAX:
        raise ParseError(IntErrorKind.POS_OVERFLOW, text)
    return number


def strip_prefix(text: str, prefix: str) -> str:
    """Remove prefix from text; raise StripError if text does not start with it."""
    if not prefix or not text.startswith(prefix):
        raise StripError(f"Failed to strip prefix '{prefix}' from '{text}'")
    return text[len(prefix):]


def strip_suffix(text: str, suffix: str) -> str:
    """Remove suffix from text; raise StripError if text does not end with it."""
    if not suffix or not text.endswith(suffix):
        raise StripError(f"Failed to strip suffix '{suffix}' from '{text}'")
    return text[:-len(suffix)]
