"""
Test suite for scale_size() and is_u64() - unsigned 64-bit range handling.
"""

import warnings

import pytest

# Local ----------------------------------------------------------------------------------------------------------------

from unitconv.numeric import is_u64, scale_size
from unitconv.units import MIB, PIB, U64_MAX


class TestIsU64:

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(0, True, id="zero"),
            pytest.param(U64_MAX, True, id="max"),
            pytest.param(U64_MAX + 1, False, id="above-max"),
            pytest.param(-1, False, id="negative"),
            pytest.param(True, False, id="bool"),
            pytest.param(1.0, False, id="float"),
            pytest.param("1", False, id="str"),
        ],
    )
    def test_range(self, value, expected):
        assert is_u64(value) is expected


class TestScaleSize:
    """Products within range are exact regardless of on_overflow."""

    @pytest.mark.parametrize("on_overflow", ["raise", "wrap", "saturate", "warn"])
    def test_in_range(self, on_overflow):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert scale_size(16, MIB, on_overflow=on_overflow) == 16 * MIB

    def test_exact_max(self):
        assert scale_size(U64_MAX, 1) == U64_MAX

    def test_overflow_raise(self):
        with pytest.raises(OverflowError, match="does not fit in 64 bits"):
            scale_size(16384, PIB)

    def test_overflow_wrap(self):
        assert scale_size(16385, PIB, on_overflow="wrap") == PIB
        assert scale_size(2**63, 4, on_overflow="wrap") == 0

    def test_overflow_saturate(self):
        assert scale_size(16384, PIB, on_overflow="saturate") == U64_MAX

    def test_overflow_warn(self):
        with pytest.warns(RuntimeWarning, match="overflows 64 bits"):
            assert scale_size(16385, PIB, on_overflow="warn") == PIB


class TestScaleSizeValidation:

    @pytest.mark.parametrize(
        "base, multiplier",
        [
            pytest.param(1.0, 1, id="float-base"),
            pytest.param(1, "1", id="str-multiplier"),
            pytest.param(True, 1, id="bool-base"),
        ],
    )
    def test_type_error(self, base, multiplier):
        with pytest.raises(TypeError, match="must be an int"):
            scale_size(base, multiplier)

    @pytest.mark.parametrize(
        "base, multiplier",
        [
            pytest.param(-1, 1, id="negative-base"),
            pytest.param(1, U64_MAX + 1, id="huge-multiplier"),
        ],
    )
    def test_value_error(self, base, multiplier):
        with pytest.raises(ValueError, match="must be within"):
            scale_size(base, multiplier)

    def test_unknown_policy(self):
        with pytest.raises(ValueError, match="on_overflow must be"):
            scale_size(1, 1, on_overflow="clamp")
