"""
Core module for PrintShopWeb.

Contains fundamental infrastructure components:
- exceptions: Custom exception hierarchy
"""

from .exceptions import (
    PrintShopError,
    PageRangeError,
    OrderValidationError,
    OrderNotFoundError,
    UnsupportedFileError,
    StoreError,
)

__all__ = [
    "PrintShopError",
    "PageRangeError",
    "OrderValidationError",
    "OrderNotFoundError",
    "UnsupportedFileError",
    "StoreError",
]
