from decimal import Decimal, localcontext

import pytest

from confluxscan_sdk.exceptions import FormatError
from confluxscan_sdk.formatters.units import format_unit, to_base_units


class TestToBaseUnits:
    """Tests for parsing raw amounts"""

    def test_decimal_string(self):
        assert to_base_units("1000000000000000000") == 10 ** 18

    def test_hex_string(self):
        assert to_base_units("0x10") == 16
        assert to_base_units("0xDE0B6B3A7640000") == 10 ** 18

    def test_int_passes_through(self):
        assert to_base_units(42) == 42

    def test_integral_float_in_scientific_notation(self):
        """1.5e18 is integral and converts exactly"""
        assert to_base_units(1.5e18) == 1500000000000000000

    @pytest.mark.parametrize("value", [1.5, "1.5", "abc", "", True, None, float("inf")])
    def test_rejects_non_integers(self, value):
        with pytest.raises(FormatError):
            to_base_units(value)


class TestFormatUnit:
    """Tests for exact scaling by a power of ten"""

    def test_whole_amount_has_no_fraction(self):
        assert format_unit("1000000000000000000", 18) == "1"

    def test_fraction_is_trimmed(self):
        assert format_unit("1500000000000000000", 18) == "1.5"

    def test_small_amount_keeps_leading_zeros(self):
        assert format_unit("1", 18) == "0.000000000000000001"

    def test_zero_decimals(self):
        assert format_unit("12345", 0) == "12345"

    def test_negative_amount(self):
        assert format_unit("-1500000000000000000", 18) == "-1.5"

    def test_gas_scale(self):
        assert format_unit(1000000000, 9) == "1"

    @pytest.mark.parametrize("decimals", range(19))
    @pytest.mark.parametrize("value", [0, 1, 999, 10 ** 18, 2 ** 64 + 1, 2 ** 256, 2 ** 256 + 7])
    def test_round_trip_is_exact(self, value, decimals):
        """Scaling back by 10^decimals restores the integer, beyond float range included"""
        with localcontext() as ctx:
            ctx.prec = 200
            assert Decimal(format_unit(str(value), decimals)) * 10 ** decimals == value

    def test_negative_decimals_rejected(self):
        with pytest.raises(FormatError):
            format_unit("100", -1)

    def test_unparseable_value_raises(self):
        with pytest.raises(FormatError):
            format_unit("not a number", 18)
