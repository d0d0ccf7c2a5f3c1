"""Tests for the SalesAggregationService domain service."""

from datetime import date, datetime, timezone

from cafepos.domain.model.order import OrderStatus, OrderSummary, OrderType
from cafepos.domain.model.product import Product
from cafepos.domain.model.sales import SoldItem
from cafepos.domain.model.value_objects import Money
from cafepos.domain.service.sales_aggregation import SalesAggregationService
from tests.fakes import FixedClock, utc


def _summary(order_id: str, created_at: datetime, total: str) -> OrderSummary:
    return OrderSummary(
        id=order_id,
        customer_name="Sam",
        total_amount=Money.of(total),
        status=OrderStatus.PENDING,
        order_type=OrderType.DINE_IN,
        notes="",
        created_at=created_at,
        item_count=1,
    )


def _sold(order_id, product_id, name, qty, line_total, created_at) -> SoldItem:
    return SoldItem(
        order_id=order_id,
        product_id=product_id,
        product_name=name,
        quantity=qty,
        line_total=Money.of(line_total),
        created_at=created_at,
    )


def _product(product_id: int, name: str, price: str = "3.00") -> Product:
    return Product(
        id=product_id,
        name=name,
        description=name,
        price=Money.of(price),
        category="Coffee",
    )


class TestTrailingWindows:

    def test_trailing_dates_end_today_oldest_first(self):
        service = SalesAggregationService(FixedClock(utc(2024, 3, 10)))
        days = service.trailing_dates(7)
        assert days[0] == date(2024, 3, 4)
        assert days[-1] == date(2024, 3, 10)
        assert len(days) == 7

    def test_trailing_window_start(self):
        service = SalesAggregationService(FixedClock(utc(2024, 3, 31, 9)))
        assert service.trailing_window_start(30) == utc(2024, 3, 1, 9)


class TestDailyTotals:

    def test_groups_by_day_sorted(self):
        service = SalesAggregationService(FixedClock(utc(2024, 3, 10)))
        totals = service.daily_totals([
            _summary("b", utc(2024, 3, 9, 15), "4.00"),
            _summary("a", utc(2024, 3, 8, 9), "2.50"),
            _summary("c", utc(2024, 3, 9, 8), "6.00"),
        ])
        assert [t.day for t in totals] == [date(2024, 3, 8), date(2024, 3, 9)]
        assert totals[1].order_count == 2
        assert totals[1].revenue == Money.of("10.00")
        assert totals[1].avg_order_value == Money.of("5.00")

    def test_calendar_day_follows_clock_time_zone(self):
        clock = FixedClock(utc(2024, 3, 10), tz_name="America/New_York")
        service = SalesAggregationService(clock)
        # 02:00 UTC on the 9th is still the 8th in New York
        totals = service.daily_totals([_summary("a", utc(2024, 3, 9, 2), "2.50")])
        assert totals[0].day == date(2024, 3, 8)

    def test_exact_sums_over_many_orders(self):
        service = SalesAggregationService(FixedClock(utc(2024, 3, 10)))
        orders = [_summary(str(i), utc(2024, 3, 10, 8), "0.10") for i in range(1000)]
        (total,) = service.daily_totals(orders)
        assert total.revenue == Money.of("100.00")

    def test_series_zero_fills(self):
        service = SalesAggregationService(FixedClock(utc(2024, 3, 10)))
        days = service.trailing_dates(3)
        series = service.daily_series([_summary("a", utc(2024, 3, 9), "2.50")], days)
        assert [s.order_count for s in series] == [0, 1, 0]
        assert series[0].revenue == Money.zero()
        assert series[0].avg_order_value == Money.zero()


class TestTopSellers:

    def test_ranks_by_quantity(self):
        t = utc(2024, 3, 10)
        ranked = SalesAggregationService.top_sellers([
            _sold("o1", 1, "Espresso", 2, "5.00", t),
            _sold("o2", 2, "Latte", 5, "22.50", t),
            _sold("o3", 1, "Espresso", 1, "2.50", t),
        ], limit=5)
        assert [(r.product_name, r.quantity_sold, r.order_count) for r in ranked] == [
            ("Latte", 5, 1),
            ("Espresso", 3, 2),
        ]

    def test_same_id_different_name_kept_apart(self):
        t = utc(2024, 3, 10)
        ranked = SalesAggregationService.top_sellers([
            _sold("o1", 1, "Espresso", 2, "5.00", t),
            _sold("o2", 1, "Espresso Doppio", 2, "7.00", t),
        ], limit=5)
        assert len(ranked) == 2

    def test_ties_broken_by_product_id(self):
        t = utc(2024, 3, 10)
        ranked = SalesAggregationService.top_sellers([
            _sold("o1", 9, "Zed", 1, "1.00", t),
            _sold("o2", 3, "Ay", 1, "1.00", t),
        ], limit=5)
        assert [r.product_id for r in ranked] == [3, 9]

    def test_limit(self):
        t = utc(2024, 3, 10)
        items = [_sold(f"o{i}", i, f"P{i}", i, "1.00", t) for i in range(1, 8)]
        assert len(SalesAggregationService.top_sellers(items, limit=5)) == 5


class TestProductPerformance:

    def test_includes_products_without_sales(self):
        since = datetime(2024, 2, 10, tzinfo=timezone.utc)
        rows = SalesAggregationService.product_performance(
            products=[_product(1, "Espresso"), _product(2, "Latte")],
            items=[_sold("o1", 1, "Espresso", 2, "5.00", utc(2024, 3, 1))],
            since=since,
            limit=10,
        )
        assert [(r.product.name, r.quantity_sold) for r in rows] == [
            ("Espresso", 2),
            ("Latte", 0),
        ]
        assert rows[1].revenue == Money.zero()
        assert rows[1].order_count == 0

    def test_window_limits_quantity_and_revenue_not_order_count(self):
        since = datetime(2024, 2, 10, tzinfo=timezone.utc)
        rows = SalesAggregationService.product_performance(
            products=[_product(1, "Espresso")],
            items=[
                _sold("old", 1, "Espresso", 4, "10.00", utc(2024, 1, 1)),
                _sold("new", 1, "Espresso", 1, "2.50", utc(2024, 3, 1)),
            ],
            since=since,
            limit=10,
        )
        assert rows[0].quantity_sold == 1
        assert rows[0].revenue == Money.of("2.50")
        assert rows[0].order_count == 2

    def test_sales_of_removed_products_are_ignored(self):
        since = datetime(2024, 2, 10, tzinfo=timezone.utc)
        rows = SalesAggregationService.product_performance(
            products=[_product(1, "Espresso")],
            items=[_sold("o1", 42, "Gone", 3, "9.00", utc(2024, 3, 1))],
            since=since,
            limit=10,
        )
        assert [r.product.id for r in rows] == [1]
