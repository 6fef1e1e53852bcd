"""Data access helpers for the invoice dashboard."""

__version__ = "0.1.0"
