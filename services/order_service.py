"""
Order submission, tracking and administration.

Submission flow:
    1. Validate the customer fields and attached files
    2. Build the OrderMode from printType/bindingColorType
    3. Validate the page selection (strict, non-custom modes only)
    4. Price the order with the PricingEngine
    5. Stamp id/date/status and append to the "orders" key

Live quotes use the same engine with the permissive counting path and never
reject a page selection.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any, Iterable, List, Mapping, Optional

import bleach

from core.exceptions import OrderNotFoundError, OrderValidationError, PageRangeError
from logging_config import get_logger
from models.order import (
    CustomQuote,
    OrderFile,
    OrderMode,
    OrderRecord,
    OrderStatus,
    PAPER_SIZES,
    PRINT_SIDES,
    mode_from_fields,
    mode_to_fields,
    uses_custom_ranges,
)
from models.pricing import PricingInput, PricingResult
from modules import page_ranges
from modules.pricing import PricingEngine
from services.kv_store import KeyValueStore


# Module logger
logger = get_logger(__name__)

ORDERS_KEY = "orders"

# Constants
MAX_NAME_LENGTH = 200
MAX_PHONE_LENGTH = 32
MAX_INSTRUCTIONS_LENGTH = 1000
MAX_RANGE_LENGTH = 500
MAX_COPIES = 10000
MIN_NAME_LENGTH = 2
MIN_PHONE_LENGTH = 10


def sanitize_text(text: Optional[str], max_length: Optional[int] = None) -> str:
    """
    Sanitize user input text to prevent XSS and injection attacks.

    Args:
        text: Raw input text
        max_length: Optional maximum length to enforce

    Returns:
        Sanitized text safe for storage and display
    """
    if not text:
        return ""

    text = bleach.clean(str(text).strip(), tags=[], strip=True)

    if max_length and len(text) > max_length:
        text = text[:max_length]

    return text


class OrderService:
    """Owns the order list in the key-value store."""

    def __init__(self, store: KeyValueStore, engine: Optional[PricingEngine] = None):
        self.store = store
        self.engine = engine or PricingEngine()

    # =========================================================================
    # PRICING
    # =========================================================================

    def quote(self, form: Mapping[str, Any], total_pages: int) -> PricingResult:
        """
        Live price preview for the order form.

        Malformed or out-of-range page tokens count as 0 here; only an
        unknown print type is rejected.
        """
        return self.engine.price(PricingInput.from_form(form, total_pages))

    # =========================================================================
    # SUBMISSION
    # =========================================================================

    def submit(
        self,
        form: Mapping[str, Any],
        files: Iterable[Any],
        total_pages: int,
    ) -> OrderRecord:
        """
        Validate, price and store a new order.

        Args:
            form: Order form fields (camelCase wire names)
            files: Attached documents (anything with name/size/type/path)
            total_pages: Page count reported for the uploaded document

        Returns:
            The stored OrderRecord

        Raises:
            OrderValidationError: If any field is rejected; nothing is stored.
        """
        order_files = [
            OrderFile(name=f.name, size=f.size, type=f.type, path=f.path) for f in files
        ]
        if not order_files:
            raise OrderValidationError("Please upload at least one file to print.", field="files")

        full_name = sanitize_text(form.get("fullName"), MAX_NAME_LENGTH)
        if len(full_name) < MIN_NAME_LENGTH:
            raise OrderValidationError("Name must be at least 2 characters.", field="fullName")

        phone_number = sanitize_text(form.get("phoneNumber"), MAX_PHONE_LENGTH)
        if len(phone_number) < MIN_PHONE_LENGTH:
            raise OrderValidationError("Please enter a valid phone number.", field="phoneNumber")

        mode = mode_from_fields(form.get("printType"), form.get("bindingColorType"))
        instructions = sanitize_text(form.get("specialInstructions"), MAX_INSTRUCTIONS_LENGTH)

        record = OrderRecord(
            order_id=self._next_order_id(),
            full_name=full_name,
            phone_number=phone_number,
            print_type=mode_to_fields(mode)["printType"],
            binding_color_type=mode_to_fields(mode)["bindingColorType"],
            order_date=datetime.now(timezone.utc).isoformat(),
            special_instructions=instructions,
            files=order_files,
        )

        if isinstance(mode, CustomQuote):
            # Quote-required orders keep the defaults; staff price them by hand
            record.total_cost = PricingResult.quote().total_cost
        else:
            self._apply_print_options(record, mode, form, total_pages)

        self._append(record)
        logger.info(
            f"Order {record.order_id} stored: {record.print_type}, "
            f"{record.copies} copies, total {record.total_cost}"
        )
        return record

    def _apply_print_options(
        self,
        record: OrderRecord,
        mode: OrderMode,
        form: Mapping[str, Any],
        total_pages: int,
    ) -> None:
        try:
            copies = int(form.get("copies") or 1)
        except (TypeError, ValueError):
            raise OrderValidationError("Invalid number of copies.", field="copies")
        if copies < 1 or copies > MAX_COPIES:
            raise OrderValidationError(
                f"Number of copies must be between 1 and {MAX_COPIES}.", field="copies"
            )

        paper_size = form.get("paperSize") or "a4"
        if paper_size not in PAPER_SIZES:
            raise OrderValidationError("Unsupported paper size.", field="paperSize")

        print_side = form.get("printSide") or "single"
        if print_side not in PRINT_SIDES:
            raise OrderValidationError("Unsupported print side.", field="printSide")

        record.copies = copies
        record.paper_size = paper_size
        record.print_side = print_side

        if uses_custom_ranges(mode):
            record.color_pages = sanitize_text(form.get("colorPages"), MAX_RANGE_LENGTH)
            record.bw_pages = sanitize_text(form.get("bwPages"), MAX_RANGE_LENGTH)
            if not record.color_pages and not record.bw_pages:
                raise OrderValidationError(
                    "Please specify either color or black & white pages.",
                    field="colorPages",
                )
        else:
            record.selected_pages = (
                sanitize_text(form.get("selectedPages"), MAX_RANGE_LENGTH) or page_ranges.ALL_PAGES
            )
            try:
                page_ranges.resolve(record.selected_pages, total_pages)
            except PageRangeError as e:
                logger.warning(f"Rejected page selection: {e}")
                raise OrderValidationError(
                    "Invalid page selection. Please check your page selection.",
                    field="selectedPages",
                ) from e

        result = self.engine.price(
            PricingInput(
                mode=mode,
                total_pages=total_pages,
                duplex=print_side == "double",
                copies=copies,
                selected_pages=record.selected_pages,
                color_pages=record.color_pages or None,
                bw_pages=record.bw_pages or None,
            )
        )
        record.total_cost = result.total_cost

    # =========================================================================
    # TRACKING / ADMIN
    # =========================================================================

    def list_orders(self) -> List[OrderRecord]:
        """All stored orders, oldest first."""
        return [OrderRecord.from_dict(data) for data in self.store.get(ORDERS_KEY, [])]

    def find(self, order_id: str) -> OrderRecord:
        """
        Look up an order by ID (surrounding whitespace ignored).

        Raises:
            OrderNotFoundError: If no order matches.
        """
        wanted = (order_id or "").strip()
        for record in self.list_orders():
            if record.order_id == wanted:
                return record
        raise OrderNotFoundError(wanted)

    def update_status(self, order_id: str, status: str) -> OrderRecord:
        """
        Change an order's status.

        Raises:
            OrderValidationError: If ``status`` is not a known OrderStatus.
            OrderNotFoundError: If no order matches.
        """
        try:
            new_status = OrderStatus(status)
        except ValueError:
            raise OrderValidationError(f"Unknown order status: {status}", field="status")

        orders = self.store.get(ORDERS_KEY, [])
        for data in orders:
            if data.get("orderId") == order_id:
                data["status"] = new_status.value
                self.store.put(ORDERS_KEY, orders)
                logger.info(f"Order {order_id} status updated to {new_status.value}")
                return OrderRecord.from_dict(data)
        raise OrderNotFoundError(order_id)

    def clear_orders(self) -> int:
        """Delete every order; returns how many were removed."""
        removed = len(self.store.get(ORDERS_KEY, []))
        self.store.put(ORDERS_KEY, [])
        logger.info(f"Cleared {removed} orders")
        return removed

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _append(self, record: OrderRecord) -> None:
        orders = self.store.get(ORDERS_KEY, [])
        orders.append(record.to_dict())
        self.store.put(ORDERS_KEY, orders)

    def _next_order_id(self) -> str:
        """``ORD-<epoch millis>``, bumped past any ID already stored."""
        existing = {data.get("orderId") for data in self.store.get(ORDERS_KEY, [])}
        millis = int(time.time() * 1000)
        while f"ORD-{millis}" in existing:
            millis += 1
        return f"ORD-{millis}"
