"""Tests for Money and Quantity value objects."""

from decimal import Decimal, localcontext

import pytest

from cafepos.domain.exceptions import ValidationError
from cafepos.domain.model.value_objects import MAX_AMOUNT, UNSET, Money, Quantity


class TestMoney:

    def test_create_from_string(self):
        m = Money.of("10.50")
        assert m.amount == Decimal("10.50")

    def test_create_from_float_goes_through_str(self):
        assert Money.of(0.1) + Money.of(0.2) == Money.of("0.30")

    def test_rounds_half_up_to_the_cent(self):
        assert Money.of("2.345").amount == Decimal("2.35")
        assert Money.of("2.344").amount == Decimal("2.34")

    def test_negative_raises(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money.of("-1.00")

    def test_non_decimal_raises(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)  # type: ignore[arg-type]

    def test_garbage_raises(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_infinite_raises(self):
        with pytest.raises(ValidationError, match="finite"):
            Money(Decimal("Infinity"))

    def test_largest_amount_accepted(self):
        assert Money.of("99999999999.99").amount == MAX_AMOUNT

    def test_amount_above_maximum_raises(self):
        with pytest.raises(ValidationError, match="cannot exceed"):
            Money.of("1e30")

    def test_overflowing_product_raises(self):
        with pytest.raises(ValidationError, match="cannot exceed"):
            Money.of("60000000000") * 2

    def test_unrepresentable_rounding_raises(self):
        with localcontext() as ctx:
            ctx.prec = 5
            with pytest.raises(ValidationError, match="Invalid money amount"):
                Money(Decimal("123456.78"))

    def test_add(self):
        assert Money.of("10.00") + Money.of("5.50") == Money.of("15.50")

    def test_multiply(self):
        assert Money.of("2.50") * 3 == Money.of("7.50")

    def test_multiply_rejects_float_and_bool(self):
        with pytest.raises(TypeError):
            Money.of("2.50") * 1.5  # type: ignore[operator]
        with pytest.raises(TypeError):
            Money.of("2.50") * True

    def test_comparisons(self):
        assert Money.of("1.00") < Money.of("2.00")
        assert Money.of("2.00") >= Money.of("2.00")

    def test_cents_round_trip(self):
        assert Money.of("12.34").cents == 1234
        assert Money.from_cents(1234) == Money.of("12.34")

    def test_divide_rounds_to_cent(self):
        assert Money.of("10.00").divide(3) == Money.of("3.33")
        assert Money.of("0.05").divide(2) == Money.of("0.03")

    def test_divide_by_zero_raises(self):
        with pytest.raises(ValidationError):
            Money.of("1.00").divide(0)

    def test_zero(self):
        assert Money.zero().is_zero
        assert not Money.of("0.01").is_zero

    def test_str(self):
        assert str(Money.of("4.5")) == "$4.50"

    def test_immutable(self):
        m = Money.of("10.00")
        with pytest.raises(AttributeError):
            m.amount = Decimal("20.00")  # type: ignore[misc]


class TestQuantity:

    def test_positive(self):
        assert Quantity(5).value == 5

    def test_zero_raises(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_raises(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-1)

    def test_non_int_raises(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(1.5)  # type: ignore[arg-type]

    def test_bool_raises(self):
        with pytest.raises(ValidationError):
            Quantity(True)


class TestUnset:

    def test_is_singleton_and_falsy(self):
        from cafepos.domain.model.value_objects import _Unset

        assert _Unset() is UNSET
        assert not UNSET
        assert UNSET is not None
        assert repr(UNSET) == "UNSET"
