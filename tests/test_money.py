"""Tests for currency helpers."""

from decimal import Decimal

import pytest

from components.core.money import to_currency
from components.debt.repository import remaining_balance
from components.summary.repository import spent_percentage


class TestToCurrency:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("10", Decimal("10.00")),
            (15.99, Decimal("15.99")),
            ("0.005", Decimal("0.01")),
            ("2.675", Decimal("2.68")),
            (None, Decimal("0.00")),
        ],
    )
    def test_quantizes_to_cents(self, value, expected):
        assert to_currency(value) == expected

    def test_float_input_goes_through_str(self):
        # 0.1 + 0.2 as float is 0.30000000000000004
        assert to_currency(0.1 + 0.2) == Decimal("0.30")


class TestRemainingBalance:
    def test_partial_payment(self):
        assert remaining_balance(Decimal("2500.00"), Decimal("600.00")) == Decimal("1900.00")

    def test_overpayment_floors_at_zero(self):
        assert remaining_balance(Decimal("1900.00"), Decimal("2000.00")) == Decimal("0.00")

    def test_exact_payment(self):
        assert remaining_balance(Decimal("99.99"), Decimal("99.99")) == Decimal("0.00")


class TestSpentPercentage:
    def test_zero_income(self):
        assert spent_percentage(Decimal("100"), Decimal("0")) == 0

    def test_rounds_to_whole_percent(self):
        assert spent_percentage(Decimal("1480.49"), Decimal("5000.00")) == 30

    def test_capped_at_hundred(self):
        assert spent_percentage(Decimal("7000"), Decimal("5000")) == 100
