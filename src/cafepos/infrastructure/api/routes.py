"""FastAPI routes for orders, dashboard, products and customers.

Route functions translate JSON in and out and nothing more; every rule
lives in the use-case handlers.  Domain exceptions propagate to the
handlers registered in ``app.py``, which map them to status codes.
"""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query

from cafepos.application.add_customer import AddCustomerHandler
from cafepos.application.add_product import AddProductHandler
from cafepos.application.create_order import CreateOrderHandler
from cafepos.application.dashboard_summary import DashboardSummaryHandler
from cafepos.application.dto import (
    CustomerChanges,
    OrderDTO,
    OrderItemSpec,
    OrderSummaryDTO,
    ProductChanges,
)
from cafepos.application.list_orders import ListOrdersHandler
from cafepos.application.order_stats import OrderStatsHandler
from cafepos.application.product_performance import ProductPerformanceHandler
from cafepos.application.remove_customer import RemoveCustomerHandler
from cafepos.application.remove_product import RemoveProductHandler
from cafepos.application.show_customers import ShowCustomersHandler
from cafepos.application.show_order import ShowOrderHandler
from cafepos.application.show_products import ShowProductsHandler
from cafepos.application.update_customer import UpdateCustomerHandler
from cafepos.application.update_order_status import UpdateOrderStatusHandler
from cafepos.application.update_product import UpdateProductHandler
from cafepos.domain.model.customer import Customer
from cafepos.domain.model.product import Product
from cafepos.infrastructure.api.dependencies import Services, get_services
from cafepos.infrastructure.api.schemas import (
    CreateCustomerRequest,
    CreateOrderRequest,
    CreateProductRequest,
    UpdateCustomerRequest,
    UpdateProductRequest,
    UpdateStatusRequest,
)

order_router = APIRouter(prefix="/orders", tags=["orders"])
dashboard_router = APIRouter(prefix="/dashboard", tags=["dashboard"])
product_router = APIRouter(prefix="/products", tags=["products"])
customer_router = APIRouter(prefix="/customers", tags=["customers"])


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------
def _summary_json(s: OrderSummaryDTO) -> dict:
    return {
        "id": s.id,
        "customer_name": s.customer_name,
        "total_amount": s.total,
        "status": s.status,
        "order_type": s.order_type,
        "notes": s.notes,
        "created_at": s.created_at,
        "item_count": s.item_count,
    }


def _order_json(o: OrderDTO) -> dict:
    return {
        "id": o.id,
        "customer_name": o.customer_name,
        "total_amount": o.total,
        "status": o.status,
        "order_type": o.order_type,
        "notes": o.notes,
        "created_at": o.created_at,
        "items": [
            {
                "product_id": i.product_id,
                "product_name": i.product_name,
                "quantity": i.quantity,
                "unit_price": i.unit_price,
                "total_price": i.line_total,
            }
            for i in o.items
        ],
    }


def _product_json(p: Product) -> dict:
    return {
        "id": p.id,
        "name": p.name,
        "description": p.description,
        "price": p.price.amount,
        "category": p.category,
        "available": p.available,
        "created_at": p.created_at,
    }


def _customer_json(c: Customer) -> dict:
    return {
        "id": c.id,
        "name": c.name,
        "phone": c.phone,
        "email": c.email,
        "created_at": c.created_at,
    }


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
@order_router.get("")
def list_orders(services: Services = Depends(get_services)):
    return [_summary_json(s) for s in ListOrdersHandler(services.orders).handle()]


@order_router.get("/{order_id}")
def get_order(order_id: str, services: Services = Depends(get_services)):
    return _order_json(ShowOrderHandler(services.orders).handle(order_id))


@order_router.post("", status_code=201)
def create_order(
    body: CreateOrderRequest, services: Services = Depends(get_services)
):
    specs = (
        [OrderItemSpec(**item.model_dump()) for item in body.items]
        if body.items is not None
        else None
    )
    created = CreateOrderHandler(services.orders, services.clock).handle(
        customer_name=body.customer_name,
        item_specs=specs,
        order_type=body.order_type,
        notes=body.notes,
    )
    return {
        "id": created.id,
        "message": "Order created successfully",
        "total_amount": created.total,
    }


@order_router.patch("/{order_id}/status")
def update_order_status(
    order_id: str,
    body: UpdateStatusRequest,
    services: Services = Depends(get_services),
):
    change = UpdateOrderStatusHandler(services.orders).handle(order_id, body.status)
    return {
        "message": "Order status updated successfully",
        "orderId": change.order_id,
        "newStatus": change.status,
    }


# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------
@dashboard_router.get("")
def dashboard_summary(services: Services = Depends(get_services)):
    config = services.config
    summary = DashboardSummaryHandler(
        order_repo=services.orders,
        product_repo=services.products,
        clock=services.clock,
        recent_limit=config.recent_orders_limit,
        trend_days=config.revenue_trend_days,
        popular_window_days=config.popular_window_days,
        popular_limit=config.top_products_limit,
    ).handle()
    return {
        "todayOrders": summary.today_orders,
        "todayRevenue": summary.today_revenue,
        "pendingOrders": summary.pending_orders,
        "totalProducts": summary.total_products,
        "recentOrders": [_summary_json(s) for s in summary.recent_orders],
        "weeklyRevenue": [
            {"date": d.date, "order_count": d.order_count, "revenue": d.revenue}
            for d in summary.weekly_revenue
        ],
        "popularProducts": [
            {
                "product_id": p.product_id,
                "product_name": p.product_name,
                "total_sold": p.total_sold,
                "order_count": p.order_count,
            }
            for p in summary.popular_products
        ],
    }


@dashboard_router.get("/orders")
def order_stats(
    start_date: date | None = Query(default=None, alias="startDate"),
    end_date: date | None = Query(default=None, alias="endDate"),
    services: Services = Depends(get_services),
):
    rows = OrderStatsHandler(services.orders, services.clock).handle(start_date, end_date)
    return [
        {
            "date": r.date,
            "order_count": r.order_count,
            "revenue": r.revenue,
            "avg_order_value": r.avg_order_value,
        }
        for r in rows
    ]


@dashboard_router.get("/products")
def product_performance(
    limit: int | None = Query(default=None),
    services: Services = Depends(get_services),
):
    rows = ProductPerformanceHandler(
        order_repo=services.orders,
        product_repo=services.products,
        clock=services.clock,
        window_days=services.config.popular_window_days,
    ).handle(limit if limit is not None else services.config.performance_default_limit)
    return [
        {
            "id": r.id,
            "name": r.name,
            "category": r.category,
            "price": r.price,
            "total_sold": r.total_sold,
            "total_revenue": r.total_revenue,
            "order_count": r.order_count,
        }
        for r in rows
    ]


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------
@product_router.get("")
def list_products(services: Services = Depends(get_services)):
    return [_product_json(p) for p in ShowProductsHandler(services.products).handle()]


@product_router.get("/{product_id}")
def get_product(product_id: int, services: Services = Depends(get_services)):
    return _product_json(ShowProductsHandler(services.products).handle_one(product_id))


@product_router.post("", status_code=201)
def create_product(
    body: CreateProductRequest, services: Services = Depends(get_services)
):
    product = AddProductHandler(services.products).handle(
        name=body.name,
        description=body.description,
        price=body.price,
        category=body.category,
        available=body.available,
    )
    return {"id": product.id, "message": "Product created successfully"}


@product_router.put("/{product_id}")
def update_product(
    product_id: int,
    body: UpdateProductRequest,
    services: Services = Depends(get_services),
):
    UpdateProductHandler(services.products).handle(
        product_id, ProductChanges(**body.changes())
    )
    return {"message": "Product updated successfully"}


@product_router.delete("/{product_id}")
def delete_product(product_id: int, services: Services = Depends(get_services)):
    RemoveProductHandler(services.products).handle(product_id)
    return {"message": "Product deleted successfully"}


# ---------------------------------------------------------------------------
# Customers
# ---------------------------------------------------------------------------
@customer_router.get("")
def list_customers(services: Services = Depends(get_services)):
    return [_customer_json(c) for c in ShowCustomersHandler(services.customers).handle()]


@customer_router.get("/{customer_id}")
def get_customer(customer_id: int, services: Services = Depends(get_services)):
    return _customer_json(ShowCustomersHandler(services.customers).handle_one(customer_id))


@customer_router.post("", status_code=201)
def create_customer(
    body: CreateCustomerRequest, services: Services = Depends(get_services)
):
    customer = AddCustomerHandler(services.customers).handle(
        name=body.name, phone=body.phone, email=body.email
    )
    return {"id": customer.id, "message": "Customer created successfully"}


@customer_router.put("/{customer_id}")
def update_customer(
    customer_id: int,
    body: UpdateCustomerRequest,
    services: Services = Depends(get_services),
):
    UpdateCustomerHandler(services.customers).handle(
        customer_id, CustomerChanges(**body.changes())
    )
    return {"message": "Customer updated successfully"}


@customer_router.delete("/{customer_id}")
def delete_customer(customer_id: int, services: Services = Depends(get_services)):
    RemoveCustomerHandler(services.customers).handle(customer_id)
    return {"message": "Customer deleted successfully"}
