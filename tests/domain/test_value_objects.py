"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from autoparts.domain.exceptions import InvalidInputError, ValidationError
from autoparts.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        assert Money(Decimal("10.50")).amount == Decimal("10.50")

    def test_zero_allowed(self):
        assert Money.zero().amount == Decimal("0")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="no puede ser negativo"):
            Money(Decimal("-1"))

    def test_non_finite_amount_rejected(self):
        with pytest.raises(ValidationError, match="El precio debe ser un número."):
            Money(Decimal("Infinity"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="debe ser un Decimal"):
            Money(10.5)

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_zero(self):
        assert Money.of("7.50") * 0 == Money.zero()

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5

    def test_arithmetic_keeps_every_digit(self):
        price = Money.of("999999999999999.99")
        total = price * 10**20 + Money.of("0.01")
        assert str(total) == "$" + "9" * 17 + "0" * 18 + ".01"

    def test_arithmetic_on_huge_amounts_does_not_overflow(self):
        total = Money(Decimal("9E+999999")) * 10
        assert total.amount == Decimal("9E+1000000")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"


class TestMoneyOf:

    def test_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_surrounding_whitespace_ignored(self):
        assert Money.of("  4.20 ").amount == Decimal("4.20")

    @pytest.mark.parametrize("raw", ["cheap", "", "1,50", "NaN", "Infinity"])
    def test_not_a_number_rejected(self, raw):
        with pytest.raises(InvalidInputError, match="El precio debe ser un número."):
            Money.of(raw)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="no puede ser negativo"):
            Money.of("-5")

    @pytest.mark.parametrize("raw", ["1E+15", "9E+999999", "1234567890123456789012345678.99"])
    def test_too_large_rejected(self, raw):
        with pytest.raises(InvalidInputError, match="El precio es demasiado grande."):
            Money.of(raw)

    def test_largest_accepted_price(self):
        assert Money.of("999999999999999.99").amount == Decimal("999999999999999.99")

    def test_zero_with_large_exponent_accepted(self):
        assert Money.of("0E+20") == Money.zero()


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_allowed(self):
        assert Quantity(0).value == 0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="no puede ser negativa"):
            Quantity(-3)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="debe ser un número entero"):
            Quantity(2.5)

    def test_str(self):
        assert str(Quantity(7)) == "7"
