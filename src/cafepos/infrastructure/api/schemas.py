"""Pydantic request schemas for the HTTP API.

Types are kept permissive: presence and range rules belong to the use-case
handlers, so a missing or non-positive field reaches them and produces
the same message whichever boundary the request came through.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel

from cafepos.domain.model.value_objects import UNSET


class PartialUpdate(BaseModel):
    """Base for PATCH/PUT bodies where omitted fields mean "unchanged"."""

    def changes(self) -> dict[str, Any]:
        """Every declared field, with ``UNSET`` for those not sent."""
        return {
            name: getattr(self, name) if name in self.model_fields_set else UNSET
            for name in type(self).model_fields
        }


class OrderItemRequest(BaseModel):
    product_id: int | None = None
    product_name: str | None = None
    quantity: int | None = None
    unit_price: Decimal | None = None


class CreateOrderRequest(BaseModel):
    customer_name: str | None = None
    items: list[OrderItemRequest] | None = None
    order_type: str | None = None
    notes: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_name": "Sam",
                    "order_type": "takeaway",
                    "items": [
                        {
                            "product_id": 1,
                            "product_name": "Espresso",
                            "quantity": 2,
                            "unit_price": 2.50,
                        }
                    ],
                }
            ]
        }
    }


class UpdateStatusRequest(BaseModel):
    status: str | None = None


class CreateProductRequest(BaseModel):
    name: str | None = None
    description: str | None = None
    price: Decimal | None = None
    category: str | None = None
    available: bool = True


class UpdateProductRequest(PartialUpdate):
    name: str | None = None
    description: str | None = None
    price: Decimal | None = None
    category: str | None = None
    available: bool | None = None


class CreateCustomerRequest(BaseModel):
    name: str | None = None
    phone: str | None = None
    email: str | None = None


class UpdateCustomerRequest(PartialUpdate):
    name: str | None = None
    phone: str | None = None
    email: str | None = None
