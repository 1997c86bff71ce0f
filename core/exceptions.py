"""
Custom exceptions for PrintShopWeb.

Exception Hierarchy:
    PrintShopError (base)
    ├── PageRangeError        - Page selection cannot be resolved (submission only)
    ├── OrderValidationError  - Order form rejected at submission
    ├── OrderNotFoundError    - Tracking / admin lookup missed
    ├── UnsupportedFileError  - Upload is not a PDF or Word document
    └── StoreError            - Key-value store could not be read or written

Usage:
    Live price previews never raise; they count permissively.
    Submission-time validation raises and the route flashes the message.
"""

from typing import Optional, Dict, Any


class PrintShopError(Exception):
    """
    Base exception for all PrintShopWeb errors.

    All custom exceptions inherit from this class, so routes can catch
    every application error with a single except clause.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional context for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class PageRangeError(PrintShopError):
    """
    A page-range expression is malformed or out of bounds.

    Raised only by the strict resolver. The whole expression is rejected,
    there is no partial acceptance of the valid tokens.
    """

    def __init__(self, expression: str, total_pages: int, token: Optional[str] = None):
        message = f"Invalid page selection: {expression!r}"
        details: Dict[str, Any] = {"total_pages": total_pages}
        if token is not None:
            details["token"] = token
        super().__init__(message, details)
        self.expression = expression
        self.total_pages = total_pages
        self.token = token


class OrderValidationError(PrintShopError):
    """
    The submitted order form failed validation.

    The message is user-facing and is flashed as-is; the order is not stored.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else None
        super().__init__(message, details)
        self.field = field


class OrderNotFoundError(PrintShopError):
    """No order with the given ID exists in the store."""

    def __init__(self, order_id: str):
        super().__init__(
            "Order not found. Please check your order ID.",
            {"order_id": order_id},
        )
        self.order_id = order_id


class UnsupportedFileError(PrintShopError):
    """Upload rejected because it is neither a PDF nor a Word document."""

    def __init__(self, filename: str, content_type: str = ""):
        super().__init__(
            f"{filename} is not a valid file type. Only PDF and Word documents are allowed.",
            {"filename": filename, "content_type": content_type},
        )
        self.filename = filename
        self.content_type = content_type


class StoreError(PrintShopError):
    """The backing key-value store could not be read or written."""

    def __init__(self, operation: str, key: str, reason: str = ""):
        message = f"Store {operation} failed for key {key!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, {"operation": operation, "key": key})
        self.operation = operation
        self.key = key
