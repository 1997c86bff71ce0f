"""
Data models for PrintShopWeb.

This module contains dataclasses for:
- OrderMode variants: PlainPrint, Binding, CustomQuote
- OrderRecord / OrderFile: A submitted order as persisted
- PricingInput / PricingResult / PageBuckets: Pricing engine input and output

Order modes and pricing models are frozen; an OrderRecord only changes
status after submission.
"""

from .order import (
    Binding,
    BindingKind,
    ColorMode,
    CustomQuote,
    OrderFile,
    OrderMode,
    OrderRecord,
    OrderStatus,
    PlainPrint,
)
from .pricing import PageBuckets, PricingInput, PricingResult

__all__ = [
    # Order models
    "Binding",
    "BindingKind",
    "ColorMode",
    "CustomQuote",
    "OrderFile",
    "OrderMode",
    "OrderRecord",
    "OrderStatus",
    "PlainPrint",
    # Pricing models
    "PageBuckets",
    "PricingInput",
    "PricingResult",
]
