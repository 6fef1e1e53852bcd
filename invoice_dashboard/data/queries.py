from __future__ import annotations

from dataclasses import replace

from invoice_dashboard.data.connection import TableQuery


ITEMS_PER_PAGE = 6
LATEST_INVOICES_LIMIT = 5


def _quote(value: str) -> str:
    # Double-quoted PostgREST value: reserved characters stay literal
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def ilike_any(columns: tuple[str, ...], query: str) -> str:
    """
    OR predicate matching `query` as a case-insensitive substring of any column.

    >>> ilike_any(("name", "email"), "ev")
    '(name.ilike."*ev*",email.ilike."*ev*")'
    """
    pattern = _quote(f"*{query}*")
    return "(" + ",".join(f"{col}.ilike.{pattern}" for col in columns) + ")"


def page_offset(page: int) -> int:
    return (max(page, 1) - 1) * ITEMS_PER_PAGE


def q_revenue() -> TableQuery:
    return TableQuery(table="revenue", select="*")


def q_latest_invoices() -> TableQuery:
    return TableQuery(
        table="invoices",
        select="amount,id,customers(name,image_url,email)",
        order="date.desc",
        limit=LATEST_INVOICES_LIMIT,
    )


def q_invoice_count() -> TableQuery:
    return TableQuery(table="invoices", select="*")


def q_customer_count() -> TableQuery:
    return TableQuery(table="customers", select="*")


def q_invoice_status_amounts() -> TableQuery:
    return TableQuery(table="invoices", select="amount,status")


def _q_invoices_matching(query: str) -> TableQuery:
    # !inner drops invoices whose customer does not match the filter
    return TableQuery(
        table="invoices",
        select="id,amount,date,status,customers!inner(name,email,image_url)",
        filters=(("customers.or", ilike_any(("email", "name"), query)),),
        order="date.desc",
    )


def q_filtered_invoices(query: str, page: int) -> TableQuery:
    return replace(_q_invoices_matching(query), limit=ITEMS_PER_PAGE, offset=page_offset(page))


def q_invoices_pages(query: str) -> TableQuery:
    return _q_invoices_matching(query)


def q_invoice_by_id(invoice_id: str) -> TableQuery:
    return TableQuery(
        table="invoices",
        select="id,customer_id,amount,status",
        filters=(("id", f"eq.{invoice_id}"),),
        single=True,
    )


def q_customers() -> TableQuery:
    return TableQuery(table="customers", select="id,name", order="name.asc")


def q_filtered_customers(query: str) -> TableQuery:
    return TableQuery(
        table="customers",
        select="id,name,email,image_url,invoices(id,amount,status)",
        filters=(("or", ilike_any(("name", "email"), query)),),
    )
