"""
Row and result shapes handed to the dashboard views.

Amounts named `amount` on raw rows are integer minor units (cents). Shaped
results carry either a formatted string or, for the edit form, major units.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class Revenue:
    month: str
    revenue: int

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Revenue":
        return cls(month=row["month"], revenue=int(row["revenue"]))


@dataclass(frozen=True)
class CustomerRef:
    name: str
    email: str
    image_url: str

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "CustomerRef":
        return cls(name=row["name"], email=row["email"], image_url=row["image_url"])


@dataclass(frozen=True)
class LatestInvoice:
    id: str
    name: str
    email: str
    image_url: str
    amount: str  # formatted


@dataclass(frozen=True)
class CardData:
    number_of_invoices: int
    number_of_customers: int
    total_paid_invoices: str
    total_pending_invoices: str


@dataclass(frozen=True)
class InvoicesTableRow:
    id: str
    amount: int
    date: str
    status: str
    customers: CustomerRef

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "InvoicesTableRow":
        return cls(
            id=row["id"],
            amount=int(row["amount"]),
            date=row["date"],
            status=row["status"],
            customers=CustomerRef.from_row(row["customers"]),
        )


@dataclass(frozen=True)
class InvoiceForm:
    id: str
    customer_id: str
    amount: float  # major units
    status: str


@dataclass(frozen=True)
class CustomerField:
    id: str
    name: str


@dataclass(frozen=True)
class CustomersTableRow:
    id: str
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: str
    total_paid: str


@dataclass
class PlaceholderData:
    customers: list[dict[str, Any]] = field(default_factory=list)
    invoices: list[dict[str, Any]] = field(default_factory=list)
    revenue: list[dict[str, Any]] = field(default_factory=list)
    seed: Optional[int] = None
