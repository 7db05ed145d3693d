from decimal import Decimal

import pytest

from lodging.shared.domain import Currency, Money


class TestMoney:
    def test_of_float_avoids_binary_rounding(self):
        money = Money.of(150.1, Currency("INR"))
        assert money.amount == Decimal("150.1")

    def test_zero_is_allowed(self):
        assert Money.of(0, Currency("INR")).amount == Decimal("0")

    def test_negative_amount_raises_error(self):
        with pytest.raises(ValueError, match="Amount cannot be negative"):
            Money.of("-1", Currency("INR"))

    def test_non_numeric_amount_raises_error(self):
        with pytest.raises(ValueError, match="Invalid amount"):
            Money.of("abc", Currency("INR"))

    def test_nan_amount_raises_error(self):
        with pytest.raises(ValueError, match="Invalid amount"):
            Money.of(float("nan"), Currency("INR"))

    def test_multiply(self):
        money = Money.of("150.0", Currency("INR"))
        assert money.multiply(2) == Money(Decimal("300.0"), Currency("INR"))


class TestCurrency:
    def test_code_is_upper_cased(self):
        assert str(Currency("inr")) == "INR"

    def test_invalid_code_raises_error(self):
        with pytest.raises(ValueError, match="Invalid currency code"):
            Currency("RUPEE")
