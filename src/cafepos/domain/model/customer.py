"""Customer record.

Orders do not reference customers; they copy the customer's name at
order time.  This record exists for the shop's own contact list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from cafepos.domain.exceptions import ValidationError


def _check_email(email: str | None) -> None:
    if email and "@" not in email:
        raise ValidationError("Invalid email format")


@dataclass
class Customer:

    id: int | None
    name: str
    phone: str | None = None
    email: str | None = None
    created_at: datetime | None = field(default=None)

    @staticmethod
    def create(
        name: str | None,
        phone: str | None = None,
        email: str | None = None,
    ) -> Customer:
        if not name or not name.strip():
            raise ValidationError("Customer name is required")
        _check_email(email)
        return Customer(
            id=None,
            name=name.strip(),
            phone=phone or None,
            email=email or None,
        )

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Customer name is required")
        self.name = name.strip()

    def change_contact(self, phone: str | None, email: str | None) -> None:
        _check_email(email)
        self.phone = phone or None
        self.email = email or None
