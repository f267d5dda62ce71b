#
# unitconv Units of Measurement Tables
#

# Standard library -----------------------------------------------------------------------------------------------------
from string import digits, hexdigits
from typing import Final

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict


# @formatter:off

class ConvConf:
    PROG = "unitconv"
    EXIT_OK = 0
    EXIT_FAILURE = 255          # what a -1 exit status truncates to
    INDENT = "\t"
    ERROR_PREFIX = "Failed to parse argument, Error: "


conv_conf = ConvConf()

U64_MAX: Final[int] = 2**64 - 1

B:   Final[int] = 1
KIB: Final[int] = 1024 * B
MIB: Final[int] = 1024 * KIB
GIB: Final[int] = 1024 * MIB
TIB: Final[int] = 1024 * GIB
PIB: Final[int] = 1024 * TIB

KB: Final[int] = 1000 * B
MB: Final[int] = 1000 * KB
GB: Final[int] = 1000 * MB
TB: Final[int] = 1000 * GB
PB: Final[int] = 1000 * TB

# Scan order matters, first match wins
SIZE_SUFFIXES: Final[tuple[tuple[str, int], ...]] = (
    ("kib", KIB), ("mib", MIB), ("gib", GIB), ("tib", TIB), ("pib", PIB),
    ("kb", KB),   ("mb", MB),   ("gb", GB),   ("tb", TB),   ("pb", PB),
)

# "0" must stay last, it prefixes the other two
RADIX_PREFIXES: Final[tuple[tuple[str, int], ...]] = (
    ("0x", 16), ("0b", 2), ("0", 8),
)

# Descending, greedy decomposition relies on it
DISPLAY_UNITS: Final[tuple[tuple[int, str], ...]] = (
    (PIB, "PiB"), (TIB, "TiB"), (GIB, "GiB"), (MIB, "MiB"), (KIB, "KiB"), (B, "B"),
)

RADIX_DIGITS = frozendict({
    2: frozenset("01"),
    8: frozenset("01234567"),
    10: frozenset(digits),
    16: frozenset(hexdigits.lower()),
})

RADIX_MARKERS = frozendict({16: "0x", 8: "0", 2: "0b", 10: ""})

valid_bases = tuple(sorted(RADIX_DIGITS.keys()))
valid_suffixes = tuple(suffix for suffix, _ in SIZE_SUFFIXES)
# @formatter:on


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# A prefix listed after one of its own prefixes would never be reached.
for _i, (_prefix, _) in enumerate(RADIX_PREFIXES):
    for _earlier, _ in RADIX_PREFIXES[:_i]:
        if _prefix.startswith(_earlier):
            raise AssertionError(
                f"Configuration Error: radix prefix '{_prefix}' is shadowed by '{_earlier}'."
            )

if len(set(valid_suffixes)) != len(valid_suffixes) or any(s != s.lower() for s in valid_suffixes):
    raise AssertionError("Configuration Error: size suffixes must be unique and lowercase.")

if any(not 0 < m <= U64_MAX for _, m in SIZE_SUFFIXES):
    raise AssertionError("Configuration Error: size multipliers must fit in 64 bits.")

_thresholds = [threshold for threshold, _ in DISPLAY_UNITS]
if _thresholds != [1024**n for n in range(len(_thresholds) - 1, -1, -1)]:
    raise AssertionError(
        "Configuration Error: display units must be descending powers of 1024 ending with 1."
    )

if set(RADIX_MARKERS.keys()) != set(RADIX_DIGITS.keys()):
    raise AssertionError("Configuration Error: radix markers and radix digits must cover the same bases.")

del _i, _prefix, _earlier, _thresholds
