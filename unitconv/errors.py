"""
Conversion errors raised while parsing size strings.

Errors:
    ConvError: Base class, a ValueError subclass
    StripError: A matched prefix or suffix could not be removed from the input
    ParseError: The remaining digits are empty, malformed or overflow 64 bits

Errors compare by variant only: any two ParseError-s are equal regardless of
their message or kind, and a ParseError never equals a StripError.

Example:
    >>> ParseError(IntErrorKind.EMPTY) == ParseError(IntErrorKind.INVALID_DIGIT)
    True
    >>> ParseError(IntErrorKind.EMPTY) == StripError("Failed to strip suffix")
    False
"""

# Standard library -----------------------------------------------------------------------------------------------------
from enum import StrEnum, unique
from typing import Any, ClassVar

__all__ = [
    'ConvError',
    'IntErrorKind',
    'ParseError',
    'StripError',
]


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class IntErrorKind(StrEnum):
    """
    Reasons an unsigned integer could not be parsed.

    Attributes:
        EMPTY (str)         : Nothing left to parse
        INVALID_DIGIT (str) : A character is not a digit of the selected base
        POS_OVERFLOW (str)  : Value does not fit in 64 unsigned bits
    """
    EMPTY = "cannot parse integer from empty string"
    INVALID_DIGIT = "invalid digit found in string"
    POS_OVERFLOW = "number too large to fit in target type"


class ConvError(ValueError):
    """Base class for size conversion errors."""

    label: ClassVar[str] = "Conversion failed"

    def __str__(self) -> str:
        detail = super().__str__()
        return f"{self.label}: {detail}" if detail else self.label

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ConvError):
            return type(self) is type(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(type(self))


class StripError(ConvError):
    label = "Failed to strip string prefix/suffix"


class ParseError(ConvError):
    """
    Unsigned integer parse failure.

    The kind attribute tells why parsing failed; it does not take part in equality.
    """
    label = "Failed to parse input"

    def __init__(self, kind: IntErrorKind | str, text: str | None = None):
        self.kind = IntErrorKind(kind)
        self.text = text
        super().__init__(self.kind.value)
