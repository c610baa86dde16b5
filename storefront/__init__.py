"""Storefront demo: catalog, checkout, order ledger and Prometheus metrics."""

__version__ = "1.0.0"
