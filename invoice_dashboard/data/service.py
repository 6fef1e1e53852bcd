from __future__ import annotations

import math
from typing import Awaitable, Callable, TypeVar

import pandas as pd

from invoice_dashboard import logs
from invoice_dashboard.config import AppConfig
from invoice_dashboard.data import queries
from invoice_dashboard.data.connection import get_store_client
from invoice_dashboard.data.models import (
    CardData,
    CustomerField,
    CustomersTableRow,
    InvoiceForm,
    InvoicesTableRow,
    LatestInvoice,
    Revenue,
)
from invoice_dashboard.utils import format_currency

LOG = logs.logger(__file__)

T = TypeVar("T")


class DataFetchError(RuntimeError):
    pass


async def _guarded(message: str, context: str, fn: Callable[[], Awaitable[T]]) -> T:
    """
    Run one operation's remote calls and shaping. Any failure is logged with
    the original exception and replaced by DataFetchError(message).
    """
    try:
        return await fn()
    except Exception:
        LOG.error("Database Error: %s (%s)", message, context, exc_info=True)
        raise DataFetchError(message) from None


def _status_totals(df: pd.DataFrame, by: str | list[str]) -> pd.Series:
    # Sums of amount per status; statuses other than paid/pending are ignored by callers
    return df.groupby(by)["amount"].sum()


async def get_revenue(cfg: AppConfig) -> list[Revenue]:
    client = get_store_client(cfg)
    LOG.info("Fetching revenue data...")

    async def _load() -> list[Revenue]:
        rows = await client.select(queries.q_revenue())
        return [Revenue.from_row(row) for row in rows]

    return await _guarded("Failed to fetch revenue data.", "get_revenue", _load)


async def get_latest_invoices(cfg: AppConfig) -> list[LatestInvoice]:
    client = get_store_client(cfg)

    async def _load() -> list[LatestInvoice]:
        rows = await client.select(queries.q_latest_invoices())
        return [
            LatestInvoice(
                id=row["id"],
                name=row["customers"]["name"],
                email=row["customers"]["email"],
                image_url=row["customers"]["image_url"],
                amount=format_currency(row["amount"]),
            )
            for row in rows
        ]

    return await _guarded("Failed to fetch the latest invoices.", "get_latest_invoices", _load)


async def get_card_data(cfg: AppConfig) -> CardData:
    client = get_store_client(cfg)

    async def _load() -> CardData:
        # Sequential on purpose: any failure aborts the whole card set
        invoice_count = await client.count(queries.q_invoice_count())
        customer_count = await client.count(queries.q_customer_count())
        rows = await client.select(queries.q_invoice_status_amounts())

        totals = _status_totals(pd.DataFrame(rows, columns=["amount", "status"]), "status")
        return CardData(
            number_of_invoices=invoice_count,
            number_of_customers=customer_count,
            total_paid_invoices=format_currency(int(totals.get("paid", 0))),
            total_pending_invoices=format_currency(int(totals.get("pending", 0))),
        )

    return await _guarded("Failed to fetch card data.", "get_card_data", _load)


async def get_filtered_invoices(cfg: AppConfig, query: str, current_page: int) -> list[InvoicesTableRow]:
    client = get_store_client(cfg)
    LOG.info("get_filtered_invoices - query:%r page:%s", query, current_page)

    async def _load() -> list[InvoicesTableRow]:
        rows = await client.select(queries.q_filtered_invoices(query, current_page))
        return [InvoicesTableRow.from_row(row) for row in rows]

    return await _guarded(
        "Failed to fetch invoices.",
        f"get_filtered_invoices query={query!r} page={current_page}",
        _load,
    )


async def get_invoices_pages(cfg: AppConfig, query: str) -> int:
    client = get_store_client(cfg)

    async def _load() -> int:
        total = await client.count(queries.q_invoices_pages(query))
        return math.ceil(total / queries.ITEMS_PER_PAGE)

    return await _guarded(
        "Failed to fetch total number of invoices.",
        f"get_invoices_pages query={query!r}",
        _load,
    )


async def get_invoice_by_id(cfg: AppConfig, invoice_id: str) -> InvoiceForm:
    client = get_store_client(cfg)

    async def _load() -> InvoiceForm:
        row = await client.select(queries.q_invoice_by_id(invoice_id))
        return InvoiceForm(
            id=row["id"],
            customer_id=row["customer_id"],
            amount=row["amount"] / 100,
            status=row["status"],
        )

    return await _guarded("Failed to fetch invoice.", f"get_invoice_by_id id={invoice_id!r}", _load)


async def get_customers(cfg: AppConfig) -> list[CustomerField]:
    client = get_store_client(cfg)

    async def _load() -> list[CustomerField]:
        rows = await client.select(queries.q_customers())
        return [CustomerField(id=row["id"], name=row["name"]) for row in rows]

    return await _guarded("Failed to fetch all customers.", "get_customers", _load)


async def get_filtered_customers(cfg: AppConfig, query: str) -> list[CustomersTableRow]:
    client = get_store_client(cfg)

    async def _load() -> list[CustomersTableRow]:
        rows = await client.select(queries.q_filtered_customers(query))

        invoices = pd.DataFrame(
            [
                {"customer_id": customer["id"], "amount": inv["amount"], "status": inv["status"]}
                for customer in rows
                for inv in customer.get("invoices") or []
            ],
            columns=["customer_id", "amount", "status"],
        )
        counts = invoices.groupby("customer_id").size()
        totals = _status_totals(invoices, ["customer_id", "status"])

        return [
            CustomersTableRow(
                id=customer["id"],
                name=customer["name"],
                email=customer["email"],
                image_url=customer["image_url"],
                total_invoices=int(counts.get(customer["id"], 0)),
                total_pending=format_currency(int(totals.get((customer["id"], "pending"), 0))),
                total_paid=format_currency(int(totals.get((customer["id"], "paid"), 0))),
            )
            for customer in rows
        ]

    return await _guarded(
        "Failed to fetch customer table.",
        f"get_filtered_customers query={query!r}",
        _load,
    )
