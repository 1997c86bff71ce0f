"""Pricing and document helpers for the Print Shop Web application."""

__all__ = [
    "binding_fees",
    "page_buckets",
    "page_ranges",
    "pdf_analyzer",
    "pricing",
]
