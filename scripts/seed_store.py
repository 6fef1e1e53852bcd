#!/usr/bin/env python3
"""
Load the placeholder dashboard dataset into the hosted store.

Tables must already exist (customers, invoices, revenue). Rows whose primary
key is already present are skipped, so the script can be re-run.

Usage:
  python scripts/seed_store.py --seed 7 --customers 10 --invoices 15
  python scripts/seed_store.py --dry-run

Environment variables required (unless --dry-run):
  SUPABASE_URL - store base URL
  SUPABASE_ANON_KEY - access key
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from invoice_dashboard.config import get_config
from invoice_dashboard.data.connection import StoreConfigError, StoreError, get_store_client
from invoice_dashboard.data.placeholder_data import build_placeholder_data


async def _seed(client, data) -> None:
    # Parents before children: invoices reference customers
    for table, rows in (("customers", data.customers), ("invoices", data.invoices), ("revenue", data.revenue)):
        await client.insert(table, rows, ignore_duplicates=True)
        print(f"Seeded {table}: {len(rows)} rows")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=7)
    ap.add_argument("--customers", type=int, default=10)
    ap.add_argument("--invoices", type=int, default=15)
    ap.add_argument("--dry-run", action="store_true")
    args = ap.parse_args(argv)

    data = build_placeholder_data(seed=args.seed, n_customers=args.customers, n_invoices=args.invoices)

    if args.dry_run:
        print(f"customers={len(data.customers)} invoices={len(data.invoices)} revenue={len(data.revenue)}")
        return 0

    try:
        client = get_store_client(get_config())
        asyncio.run(_seed(client, data))
    except (StoreConfigError, StoreError) as e:
        print(f"ERROR: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
