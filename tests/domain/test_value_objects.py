"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from checkout.domain.exceptions import ValidationError
from checkout.domain.model.value_objects import Money


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float_keeps_short_form(self):
        assert Money.of(14.99).amount == Decimal("14.99")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_non_decimal_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10)  # type: ignore[arg-type]

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"

    def test_plain_keeps_precision_as_given(self):
        assert Money.of("14.99").plain == "14.99"
        assert Money.of("15").plain == "15"

    def test_fixed_always_has_two_decimals(self):
        assert Money.of("6").fixed == "6.00"

    def test_zero(self):
        assert Money.zero().is_zero()
        assert not Money.of("0.01").is_zero()

    @pytest.mark.parametrize("amount", ["inf", "-Infinity", "nan", "sNaN"])
    def test_non_finite_rejected(self, amount):
        with pytest.raises(ValidationError, match="must be finite"):
            Money.of(amount, signed=True)


class TestSignedMoney:

    def test_negative_allowed(self):
        assert Money.of("-5", signed=True).plain == "-5"

    def test_sum_with_signed_stays_signed(self):
        total = Money.zero() + Money.of("-5", signed=True)
        assert total.amount == Decimal("-5")
        assert total.signed

    def test_subtraction_below_zero_allowed(self):
        result = Money.of("5", signed=True) - Money.of("10")
        assert result.amount == Decimal("-5")

    def test_sign_does_not_affect_equality(self):
        assert Money.of("5", signed=True) == Money.of("5")

    def test_percent_of_negative_amount(self):
        assert Money.of("-10", signed=True).percent(20).amount == Decimal("-2.00")


class TestMoneyPercent:

    def test_rounds_up_to_the_cent(self):
        # 59.99 * 25% = 14.9975
        assert Money.of("59.99").percent(25) == Money.of("15.00")

    def test_rounds_down_to_the_cent(self):
        # 15.99 * 20% = 3.198
        assert Money.of("15.99").percent(20) == Money.of("3.20")

    def test_midpoint_rounds_to_even(self):
        # 0.25 * 10% = 0.025
        assert Money.of("0.25").percent(10) == Money.of("0.02")

    def test_zero_percent(self):
        assert Money.of("99.99").percent(0).is_zero()
