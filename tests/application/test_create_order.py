"""Integration tests for the CreateOrder use case.

Uses in-memory fake repositories, no database.
"""

from decimal import Decimal

import pytest

from cafepos.application.create_order import (
    ITEM_TOO_LARGE,
    MISSING_ITEM_FIELD,
    NON_POSITIVE_ITEM,
    CreateOrderHandler,
)
from cafepos.application.dto import OrderItemSpec
from cafepos.domain.exceptions import ValidationError
from cafepos.domain.model.order import OrderStatus, OrderType
from tests.fakes import FakeOrderRepository, FixedClock, utc

NOW = utc(2024, 3, 10, 9, 30)


def _setup() -> tuple[CreateOrderHandler, FakeOrderRepository]:
    order_repo = FakeOrderRepository()
    handler = CreateOrderHandler(order_repo, FixedClock(NOW))
    return handler, order_repo


def _espresso(qty=2, price=2.50) -> OrderItemSpec:
    return OrderItemSpec(product_id=1, product_name="Espresso", quantity=qty, unit_price=price)


class TestCreateOrderHappyPath:

    def test_returns_id_and_total(self):
        handler, _ = _setup()
        created = handler.handle("Sam", [_espresso()])
        assert created.id
        assert created.total == Decimal("5.00")

    def test_persists_pending_order_with_snapshot(self):
        handler, order_repo = _setup()
        created = handler.handle("Sam", [
            _espresso(),
            OrderItemSpec(product_id=7, product_name="Croissant", quantity=1, unit_price="3.50"),
        ])
        saved = order_repo.get_by_id(created.id)
        assert saved is not None
        assert saved.status == OrderStatus.PENDING
        assert saved.created_at == NOW
        assert [(i.product_name, str(i.unit_price)) for i in saved.items] == [
            ("Espresso", "$2.50"),
            ("Croissant", "$3.50"),
        ]
        assert saved.total.amount == Decimal("8.50")

    def test_defaults_type_and_notes(self):
        handler, order_repo = _setup()
        created = handler.handle("Sam", [_espresso()])
        saved = order_repo.get_by_id(created.id)
        assert saved.order_type == OrderType.DINE_IN
        assert saved.notes == ""

    def test_keeps_type_and_notes(self):
        handler, order_repo = _setup()
        created = handler.handle("Sam", [_espresso()], order_type="takeaway", notes="oat milk")
        saved = order_repo.get_by_id(created.id)
        assert saved.order_type == OrderType.TAKEAWAY
        assert saved.notes == "oat milk"

    def test_ids_are_unique(self):
        handler, _ = _setup()
        a = handler.handle("Sam", [_espresso()])
        b = handler.handle("Sam", [_espresso()])
        assert a.id != b.id

    def test_unit_price_rounded_to_cent(self):
        handler, _ = _setup()
        created = handler.handle("Sam", [_espresso(qty=3, price="0.333")])
        assert created.total == Decimal("0.99")

    def test_numeric_strings_accepted(self):
        handler, _ = _setup()
        created = handler.handle("Sam", [_espresso(qty="2", price="2.50")])
        assert created.total == Decimal("5.00")


class TestCreateOrderValidation:

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_customer_name_required(self, name):
        handler, order_repo = _setup()
        with pytest.raises(ValidationError, match="Customer name and items are required"):
            handler.handle(name, [_espresso()])
        assert order_repo.list_summaries() == []

    @pytest.mark.parametrize("items", [None, []])
    def test_items_required(self, items):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Customer name and items are required"):
            handler.handle("Sam", items)

    @pytest.mark.parametrize("spec", [
        OrderItemSpec(product_name="Espresso", quantity=1, unit_price=2.5),
        OrderItemSpec(product_id=1, quantity=1, unit_price=2.5),
        OrderItemSpec(product_id=1, product_name="Espresso", unit_price=2.5),
        OrderItemSpec(product_id=1, product_name="Espresso", quantity=1),
        OrderItemSpec(product_id=1, product_name="  ", quantity=1, unit_price=2.5),
    ])
    def test_missing_item_field(self, spec):
        handler, _ = _setup()
        with pytest.raises(ValidationError) as exc_info:
            handler.handle("Sam", [spec])
        assert str(exc_info.value) == MISSING_ITEM_FIELD

    def test_zero_quantity_counts_as_missing(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError) as exc_info:
            handler.handle("Sam", [_espresso(qty=0)])
        assert str(exc_info.value) == MISSING_ITEM_FIELD

    def test_negative_quantity_is_non_positive(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError) as exc_info:
            handler.handle("Sam", [_espresso(qty=-1)])
        assert str(exc_info.value) == NON_POSITIVE_ITEM

    def test_negative_price_is_non_positive(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError) as exc_info:
            handler.handle("Sam", [_espresso(price=-2.5)])
        assert str(exc_info.value) == NON_POSITIVE_ITEM

    def test_price_rounding_to_zero_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError) as exc_info:
            handler.handle("Sam", [_espresso(price="0.001")])
        assert str(exc_info.value) == NON_POSITIVE_ITEM

    def test_fractional_quantity_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="whole number"):
            handler.handle("Sam", [_espresso(qty=1.5)])

    def test_non_numeric_price_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="must be a number"):
            handler.handle("Sam", [_espresso(price="cheap")])

    def test_unknown_order_type_rejected(self):
        handler, order_repo = _setup()
        with pytest.raises(ValidationError, match="Invalid order type"):
            handler.handle("Sam", [_espresso()], order_type="drive-thru")
        assert order_repo.list_summaries() == []

    def test_first_bad_item_reported_and_nothing_written(self):
        handler, order_repo = _setup()
        with pytest.raises(ValidationError) as exc_info:
            handler.handle("Sam", [
                _espresso(),
                _espresso(qty=-3),
                OrderItemSpec(product_id=2),
            ])
        assert str(exc_info.value) == NON_POSITIVE_ITEM
        assert order_repo.list_summaries() == []

    @pytest.mark.parametrize("qty, price", [
        (1, "1e30"),
        (10**27, 2.50),
        (10**12, 100000000),
    ])
    def test_oversized_line_rejected_and_nothing_written(self, qty, price):
        handler, order_repo = _setup()
        with pytest.raises(ValidationError) as exc_info:
            handler.handle("Sam", [_espresso(qty=qty, price=price)])
        assert str(exc_info.value) == ITEM_TOO_LARGE
        assert order_repo.list_summaries() == []

    def test_largest_line_accepted(self):
        handler, _ = _setup()
        created = handler.handle("Sam", [_espresso(qty=1, price="99999999999.99")])
        assert created.total == Decimal("99999999999.99")

    def test_oversized_order_total_rejected(self):
        handler, order_repo = _setup()
        with pytest.raises(ValidationError, match="cannot exceed"):
            handler.handle("Sam", [
                _espresso(qty=1, price="60000000000"),
                _espresso(qty=1, price="60000000000"),
            ])
        assert order_repo.list_summaries() == []
