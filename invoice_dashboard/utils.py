from __future__ import annotations

import math
from datetime import date, datetime
from typing import Sequence, Union

from invoice_dashboard.data.models import Revenue


def format_currency(amount: float) -> str:
    """Minor units (cents) to a USD display string, e.g. 123456 -> "$1,234.56"."""
    value = amount / 100
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_date_to_local(value: Union[str, date]) -> str:
    """ISO date (or date) to "Dec 6, 2022"."""
    d = datetime.fromisoformat(value).date() if isinstance(value, str) else value
    return f"{d.strftime('%b')} {d.day}, {d.year}"


def generate_y_axis(revenue: Sequence[Revenue]) -> tuple[list[str], int]:
    """
    Y-axis labels for the revenue chart.

    The top of the axis is the highest monthly revenue rounded up to the
    next thousand; labels run from the top down to "$0K" in 1000 steps.
    """
    highest = max((r.revenue for r in revenue), default=0)
    top_label = int(math.ceil(highest / 1000) * 1000)
    labels = [f"${i // 1000}K" for i in range(top_label, -1, -1000)]
    return labels, top_label


def generate_pagination(current_page: int, total_pages: int) -> list[Union[int, str]]:
    # Small result sets: show every page
    if total_pages <= 7:
        return list(range(1, total_pages + 1))

    if current_page <= 3:
        return [1, 2, 3, "...", total_pages - 1, total_pages]

    if current_page >= total_pages - 2:
        return [1, 2, "...", total_pages - 2, total_pages - 1, total_pages]

    return [1, "...", current_page - 1, current_page, current_page + 1, "...", total_pages]
