"""
Order data models.

These models represent a customer's print order as it flows through the
application: upload -> order form (live quote) -> submit -> track / admin.

Order modes:
    PlainPrint(color_mode)          blackAndWhite | color | custom
    Binding(kind, color_mode)       softBinding | spiralBinding
    CustomQuote()                   customPrint, priced manually

The persisted representation uses the camelCase field names the tracking
and admin pages read (``printType``, ``bindingColorType``, ``totalCost``...).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, List, Optional, Union

from core.exceptions import OrderValidationError


class ColorMode(Enum):
    """Which pages print in color."""

    BLACK_AND_WHITE = "blackAndWhite"
    COLOR = "color"
    CUSTOM = "custom"
    """Mixed: separate color and black-and-white page ranges."""


class BindingKind(Enum):
    """Binding variants, valued by their ``printType`` identifier."""

    SOFT = "softBinding"
    SPIRAL = "spiralBinding"


class OrderStatus(Enum):
    """
    Status of a submitted order.

    Lifecycle:
        PENDING -> PROCESSING -> (COMPLETED | CANCELLED)
    """

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def label(self) -> str:
        """Customer-facing text shown on the tracking page."""
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    OrderStatus.PENDING: "Order Received",
    OrderStatus.PROCESSING: "Processing",
    OrderStatus.COMPLETED: "Ready for Pickup",
    OrderStatus.CANCELLED: "Cancelled",
}

CUSTOM_QUOTE_PRINT_TYPE = "customPrint"

PRINT_TYPE_NAMES = {
    "blackAndWhite": "Black & White",
    "color": "Color",
    "custom": "Custom (Mixed)",
    "softBinding": "Soft Binding",
    "spiralBinding": "Spiral Binding",
    "customPrint": "Custom Print (Quote Required)",
}

PAPER_SIZES = ("a4", "a3", "letter", "legal")
PRINT_SIDES = ("single", "double")


# =============================================================================
# ORDER MODES
# =============================================================================

@dataclass(frozen=True)
class PlainPrint:
    """Loose sheets, no binding."""

    color_mode: ColorMode = ColorMode.BLACK_AND_WHITE


@dataclass(frozen=True)
class Binding:
    """Bound document; the binding fee is added before the copies multiplier."""

    kind: BindingKind
    color_mode: ColorMode = ColorMode.BLACK_AND_WHITE


@dataclass(frozen=True)
class CustomQuote:
    """No computed price; staff quote the order by hand."""


OrderMode = Union[PlainPrint, Binding, CustomQuote]


def mode_from_fields(print_type: Optional[str], binding_color_type: Optional[str] = None) -> OrderMode:
    """
    Build an OrderMode from the form's ``printType``/``bindingColorType``.

    Raises:
        OrderValidationError: If either identifier is unknown.
    """
    print_type = print_type or ColorMode.BLACK_AND_WHITE.value

    if print_type == CUSTOM_QUOTE_PRINT_TYPE:
        return CustomQuote()

    try:
        if print_type in (kind.value for kind in BindingKind):
            color_mode = ColorMode(binding_color_type or ColorMode.BLACK_AND_WHITE.value)
            return Binding(kind=BindingKind(print_type), color_mode=color_mode)
        return PlainPrint(color_mode=ColorMode(print_type))
    except ValueError as e:
        raise OrderValidationError(f"Unsupported print type: {e}", field="printType") from e


def mode_to_fields(mode: OrderMode) -> Dict[str, str]:
    """Inverse of mode_from_fields."""
    if isinstance(mode, CustomQuote):
        return {
            "printType": CUSTOM_QUOTE_PRINT_TYPE,
            "bindingColorType": ColorMode.BLACK_AND_WHITE.value,
        }
    if isinstance(mode, Binding):
        return {"printType": mode.kind.value, "bindingColorType": mode.color_mode.value}
    return {
        "printType": mode.color_mode.value,
        "bindingColorType": ColorMode.BLACK_AND_WHITE.value,
    }


def uses_custom_ranges(mode: OrderMode) -> bool:
    """True when the order is priced from colorPages/bwPages."""
    return not isinstance(mode, CustomQuote) and mode.color_mode is ColorMode.CUSTOM


# =============================================================================
# ORDER RECORD
# =============================================================================

@dataclass
class OrderFile:
    """Metadata for one uploaded document attached to an order."""

    name: str
    size: int = 0
    type: str = ""
    path: str = ""

    def __post_init__(self) -> None:
        if not self.path:
            self.path = f"/uploads/{self.name}"

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "size": self.size, "type": self.type, "path": self.path}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrderFile":
        return cls(
            name=data.get("name", ""),
            size=data.get("size", 0),
            type=data.get("type", ""),
            path=data.get("path", ""),
        )


@dataclass
class OrderRecord:
    """
    A submitted order as persisted in the order store.

    ``total_cost`` is copied verbatim from the PricingResult at submission
    time (unrounded). Only ``status`` changes afterwards.
    """

    order_id: str
    full_name: str
    phone_number: str
    print_type: str
    order_date: str
    binding_color_type: str = ColorMode.BLACK_AND_WHITE.value
    copies: int = 1
    paper_size: str = "a4"
    print_side: str = "single"
    selected_pages: str = "all"
    color_pages: str = ""
    bw_pages: str = ""
    special_instructions: str = ""
    files: List[OrderFile] = field(default_factory=list)
    status: str = OrderStatus.PENDING.value
    total_cost: float = 0.0

    @property
    def mode(self) -> OrderMode:
        return mode_from_fields(self.print_type, self.binding_color_type)

    @property
    def print_type_name(self) -> str:
        return PRINT_TYPE_NAMES.get(self.print_type, self.print_type)

    @property
    def status_label(self) -> str:
        try:
            return OrderStatus(self.status).label
        except ValueError:
            return "Unknown Status"

    @property
    def quote_required(self) -> bool:
        return self.print_type == CUSTOM_QUOTE_PRINT_TYPE

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the stored (camelCase) representation."""
        return {
            "orderId": self.order_id,
            "fullName": self.full_name,
            "phoneNumber": self.phone_number,
            "printType": self.print_type,
            "bindingColorType": self.binding_color_type,
            "copies": self.copies,
            "paperSize": self.paper_size,
            "printSide": self.print_side,
            "selectedPages": self.selected_pages,
            "colorPages": self.color_pages,
            "bwPages": self.bw_pages,
            "specialInstructions": self.special_instructions,
            "files": [f.to_dict() for f in self.files],
            "orderDate": self.order_date,
            "status": self.status,
            "totalCost": self.total_cost,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrderRecord":
        """
        Create from the stored representation.

        Older records may lack a status or file paths; those are filled in
        with ``pending`` and ``/uploads/<name>``.
        """
        return cls(
            order_id=data.get("orderId", ""),
            full_name=data.get("fullName", ""),
            phone_number=data.get("phoneNumber", ""),
            print_type=data.get("printType", ColorMode.BLACK_AND_WHITE.value),
            order_date=data.get("orderDate", ""),
            binding_color_type=data.get("bindingColorType") or ColorMode.BLACK_AND_WHITE.value,
            copies=data.get("copies", 1),
            paper_size=data.get("paperSize", "a4"),
            print_side=data.get("printSide", "single"),
            selected_pages=data.get("selectedPages") or "all",
            color_pages=data.get("colorPages") or "",
            bw_pages=data.get("bwPages") or "",
            special_instructions=data.get("specialInstructions") or "",
            files=[OrderFile.from_dict(f) for f in data.get("files", [])],
            status=data.get("status") or OrderStatus.PENDING.value,
            total_cost=data.get("totalCost", 0.0),
        )
