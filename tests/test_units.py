#
# unitconv - Units Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from unitconv.units import (
    DISPLAY_UNITS,
    RADIX_DIGITS,
    RADIX_MARKERS,
    RADIX_PREFIXES,
    SIZE_SUFFIXES,
    U64_MAX,
    ConvConf,
)


# Tests ----------------------------------------------------------------------------------------------------------------

class TestTables:

    def test_suffix_order_binary_before_decimal(self):
        names = [name for name, _ in SIZE_SUFFIXES]
        assert names == ["kib", "mib", "gib", "tib", "pib", "kb", "mb", "gb", "tb", "pb"]

    def test_suffix_multipliers(self):
        multipliers = dict(SIZE_SUFFIXES)
        assert multipliers["kib"] == 1024
        assert multipliers["pib"] == 1024**5
        assert multipliers["kb"] == 1000
        assert multipliers["pb"] == 1000**5

    def test_radix_prefix_order(self):
        assert RADIX_PREFIXES == (("0x", 16), ("0b", 2), ("0", 8))

    def test_display_units_are_ordered_pairs(self):
        assert DISPLAY_UNITS == (
            (1024**5, "PiB"), (1024**4, "TiB"), (1024**3, "GiB"), (1024**2, "MiB"), (1024, "KiB"), (1, "B"),
        )
        assert isinstance(DISPLAY_UNITS, tuple)

    def test_display_units_descending(self):
        assert [label for _, label in DISPLAY_UNITS] == ["PiB", "TiB", "GiB", "MiB", "KiB", "B"]
        thresholds = [threshold for threshold, _ in DISPLAY_UNITS]
        assert thresholds == sorted(thresholds, reverse=True)
        assert thresholds[-1] == 1

    def test_radix_tables_are_frozen(self):
        assert isinstance(RADIX_DIGITS, frozendict)
        assert isinstance(RADIX_MARKERS, frozendict)
        with pytest.raises(TypeError):
            RADIX_MARKERS[16] = "#"

    def test_radix_digits(self):
        assert RADIX_DIGITS[2] == frozenset("01")
        assert "f" in RADIX_DIGITS[16]
        assert "F" not in RADIX_DIGITS[16]
        assert "8" not in RADIX_DIGITS[8]

    def test_limits_and_conf(self):
        assert U64_MAX == 18446744073709551615
        assert ConvConf.EXIT_OK == 0
        assert ConvConf.EXIT_FAILURE == 255

