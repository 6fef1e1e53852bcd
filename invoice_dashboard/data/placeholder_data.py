from __future__ import annotations

import random
import uuid
from datetime import date, timedelta

from faker import Faker

from invoice_dashboard.data.models import PlaceholderData


MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
STATUSES = ["pending", "paid"]


def _customers(fake: Faker, rnd: random.Random, n: int) -> list[dict]:
    rows = []
    for _ in range(n):
        name = fake.unique.name()
        slug = name.lower().replace(" ", "-").replace(".", "")
        rows.append(
            {
                "id": str(uuid.UUID(int=rnd.getrandbits(128), version=4)),
                "name": name,
                "email": f"{slug.replace('-', '.')}@{fake.free_email_domain()}",
                "image_url": f"/customers/{slug}.png",
            }
        )
    return rows


def _invoices(rnd: random.Random, customers: list[dict], n: int, end: date) -> list[dict]:
    rows = []
    for _ in range(n):
        rows.append(
            {
                "id": str(uuid.UUID(int=rnd.getrandbits(128), version=4)),
                "customer_id": rnd.choice(customers)["id"],
                # Minor units (cents)
                "amount": rnd.randint(500, 900_000),
                "status": rnd.choice(STATUSES),
                "date": (end - timedelta(days=rnd.randint(0, 730))).isoformat(),
            }
        )
    return rows


def _revenue(rnd: random.Random) -> list[dict]:
    return [{"month": m, "revenue": rnd.randrange(1000, 5000, 100)} for m in MONTHS]


def build_placeholder_data(
    seed: int = 7,
    n_customers: int = 10,
    n_invoices: int = 15,
    end: date | None = None,
) -> PlaceholderData:
    """Deterministic dashboard dataset for seeding a fresh store."""
    if n_customers < 1:
        raise ValueError("n_customers must be at least 1")

    fake = Faker("en_US")
    fake.seed_instance(seed)
    rnd = random.Random(seed)
    end = end or date(2023, 12, 31)

    customers = _customers(fake, rnd, n_customers)
    return PlaceholderData(
        customers=customers,
        invoices=_invoices(rnd, customers, n_invoices, end),
        revenue=_revenue(rnd),
        seed=seed,
    )
