"""
Logger factory for the dashboard data layer.

Every module asks for its logger with `logger(__file__)` so log lines carry
the module name instead of the full path.
"""

import logging
from pathlib import Path

from invoice_dashboard.config import log_level


def logger(name: str) -> logging.Logger:
    # Convert file paths to module-style names
    if "/" in name or "\\" in name:
        name = Path(name).stem

    log = logging.getLogger(f"invoice_dashboard.{name}")

    # Only configure once per name
    if not log.handlers:
        log.setLevel(getattr(logging, log_level(), logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        log.addHandler(handler)

    return log
