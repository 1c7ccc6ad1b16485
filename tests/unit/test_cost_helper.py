from decimal import Decimal, InvalidOperation

import pytest

from payreport.payment.helper import get_cost_as_string, get_minor_units, get_rounded_cost


class TestRoundedCost:
    def test_two_decimal_currency(self):
        assert get_rounded_cost("10.005", "USD") == Decimal("10.01")

    def test_zero_decimal_currency(self):
        assert get_rounded_cost(Decimal("1500.5"), "JPY") == Decimal("1501")

    def test_three_decimal_currency(self):
        assert get_rounded_cost(1.2345, "KWD") == Decimal("1.235")

    def test_lowercase_code(self):
        assert get_minor_units("vnd") == 0

    def test_malformed_amount_raises(self):
        with pytest.raises(InvalidOperation):
            get_rounded_cost("abc", "USD")


class TestCostAsString:
    def test_symbol_prefix(self):
        assert get_cost_as_string(Decimal("1234.5"), "USD") == "$1,234.50"

    def test_code_prefix_without_symbol(self):
        assert get_cost_as_string(1000, "RUB") == "RUB 1,000.00"

    def test_no_minor_units(self):
        assert get_cost_as_string(250000, "VND") == "₫250,000"

    def test_negative_amount(self):
        assert get_cost_as_string(Decimal("-5"), "EUR") == "-€5.00"

    def test_string_amount(self):
        assert get_cost_as_string("19.99", "gbp") == "£19.99"
