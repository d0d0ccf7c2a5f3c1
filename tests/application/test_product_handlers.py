"""Tests for the menu use cases: add, update, remove, show."""

import pytest

from cafepos.application.add_product import AddProductHandler, parse_price
from cafepos.application.create_order import CreateOrderHandler
from cafepos.application.dto import OrderItemSpec, ProductChanges
from cafepos.application.remove_product import RemoveProductHandler
from cafepos.application.show_products import ShowProductsHandler
from cafepos.application.update_product import UpdateProductHandler
from cafepos.domain.exceptions import EntityNotFoundError, ValidationError
from cafepos.domain.model.value_objects import Money
from tests.fakes import FakeOrderRepository, FakeProductRepository, FixedClock, utc


def _add(repo, name="Latte", price="4.50", category="Coffee", **kw):
    return AddProductHandler(repo).handle(
        name=name, description="desc", price=price, category=category, **kw
    )


class TestParsePrice:

    @pytest.mark.parametrize("raw", [None, "", "0", 0, "-1", "abc", True])
    def test_rejects(self, raw):
        with pytest.raises(ValidationError, match="Price must be a positive number"):
            parse_price(raw)

    def test_accepts_number_and_string(self):
        assert parse_price(3.5) == Money.of("3.50")
        assert parse_price("3.50") == Money.of("3.50")


class TestAddProduct:

    def test_assigns_id(self):
        repo = FakeProductRepository()
        product = _add(repo)
        assert product.id == 1
        assert repo.get_by_id(1).name == "Latte"

    def test_missing_fields(self):
        with pytest.raises(ValidationError, match="Name, description, price, and category are required"):
            _add(FakeProductRepository(), price=None)

    def test_unavailable_hidden_from_menu(self):
        repo = FakeProductRepository()
        _add(repo, available=False)
        assert ShowProductsHandler(repo).handle() == []


class TestUpdateProduct:

    def test_only_given_fields_change(self):
        repo = FakeProductRepository()
        product = _add(repo)
        UpdateProductHandler(repo).handle(product.id, ProductChanges(price="4.75"))
        updated = repo.get_by_id(product.id)
        assert updated.price == Money.of("4.75")
        assert updated.name == "Latte"
        assert updated.category == "Coffee"

    def test_toggle_availability(self):
        repo = FakeProductRepository()
        product = _add(repo)
        UpdateProductHandler(repo).handle(product.id, ProductChanges(available=False))
        assert repo.count_available() == 0

    def test_bad_price(self):
        repo = FakeProductRepository()
        product = _add(repo)
        with pytest.raises(ValidationError):
            UpdateProductHandler(repo).handle(product.id, ProductChanges(price=0))

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            UpdateProductHandler(FakeProductRepository()).handle(9, ProductChanges(name="X"))

    def test_price_change_leaves_existing_orders_alone(self):
        products = FakeProductRepository()
        orders = FakeOrderRepository()
        product = _add(products, price="4.50")
        created = CreateOrderHandler(orders, FixedClock(utc(2024, 3, 10))).handle(
            "Sam",
            [OrderItemSpec(product.id, product.name, 2, product.price.amount)],
        )

        UpdateProductHandler(products).handle(product.id, ProductChanges(price="9.99", name="Big Latte"))

        saved = orders.get_by_id(created.id)
        assert saved.items[0].product_name == "Latte"
        assert saved.total == Money.of("9.00")


class TestRemoveAndShowProduct:

    def test_remove(self):
        repo = FakeProductRepository()
        product = _add(repo)
        RemoveProductHandler(repo).handle(product.id)
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            ShowProductsHandler(repo).handle_one(product.id)

    def test_remove_unknown(self):
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            RemoveProductHandler(FakeProductRepository()).handle(5)

    def test_menu_sorted_by_category_then_name(self):
        repo = FakeProductRepository()
        _add(repo, name="Mocha", category="Coffee")
        _add(repo, name="Croissant", category="Pastry")
        _add(repo, name="Americano", category="Coffee")
        assert [p.name for p in ShowProductsHandler(repo).handle()] == [
            "Americano",
            "Mocha",
            "Croissant",
        ]
