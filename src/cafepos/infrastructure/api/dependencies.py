"""Per-app service container handed to route functions."""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Request

from cafepos.domain.clock import Clock
from cafepos.domain.repository.customer_repository import CustomerRepository
from cafepos.domain.repository.order_repository import OrderRepository
from cafepos.domain.repository.product_repository import ProductRepository
from cafepos.infrastructure.config import AppConfig


@dataclass
class Services:
    orders: OrderRepository
    products: ProductRepository
    customers: CustomerRepository
    clock: Clock
    config: AppConfig


def default_services() -> Services:
    """Services backed by the configured database and the system clock."""
    from cafepos.infrastructure import bootstrap
    from cafepos.infrastructure.config import get_config

    return Services(
        orders=bootstrap.order_repository(),
        products=bootstrap.product_repository(),
        customers=bootstrap.customer_repository(),
        clock=bootstrap.clock(),
        config=get_config(),
    )


def get_services(request: Request) -> Services:
    services = request.app.state.services
    if services is None:
        services = default_services()
        request.app.state.services = services
    return services
