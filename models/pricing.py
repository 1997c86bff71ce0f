"""
Pricing data models.

PricingInput is rebuilt from the live form on every preview request;
PricingResult is ephemeral until submission, when its total is copied into
the OrderRecord.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Any, Mapping, Optional

from .order import OrderMode, mode_from_fields


@dataclass(frozen=True)
class PageBuckets:
    """Page counts per cost bucket."""

    color: int = 0
    bw: int = 0
    custom: bool = False
    """True when counts come from separate color/bw ranges."""

    @property
    def total(self) -> int:
        return self.color + self.bw


def _range_field(form: Mapping[str, Any], name: str) -> Optional[str]:
    """Page-range field as text; JSON clients may send bare numbers."""
    value = form.get(name)
    if value is None or value == "":
        return None
    return str(value).strip() or None


@dataclass(frozen=True)
class PricingInput:
    """Everything the pricing engine needs for one quote."""

    mode: OrderMode
    total_pages: int
    duplex: bool = False
    copies: int = 1
    selected_pages: Optional[str] = "all"
    color_pages: Optional[str] = None
    bw_pages: Optional[str] = None

    @classmethod
    def from_form(cls, form: Mapping[str, Any], total_pages: int) -> "PricingInput":
        """
        Build from order form fields (camelCase wire names).

        Copies that are missing, unparseable or below 1 fall back to 1,
        matching the form's number input which ignores non-positive values.
        """
        try:
            copies = int(form.get("copies") or 1)
        except (TypeError, ValueError):
            copies = 1

        return cls(
            mode=mode_from_fields(form.get("printType"), form.get("bindingColorType")),
            total_pages=total_pages,
            duplex=form.get("printSide") == "double",
            copies=max(copies, 1),
            selected_pages=_range_field(form, "selectedPages") or "all",
            color_pages=_range_field(form, "colorPages"),
            bw_pages=_range_field(form, "bwPages"),
        )


@dataclass(frozen=True)
class PricingResult:
    """
    Outcome of a pricing run.

    ``quote_required`` marks a custom-print order whose price is set by hand;
    its ``total_cost`` of 0 is not a real price.
    """

    total_cost: float = 0.0
    quote_required: bool = False
    buckets: PageBuckets = PageBuckets()

    @classmethod
    def quote(cls) -> "PricingResult":
        return cls(total_cost=0.0, quote_required=True)

    @property
    def display(self) -> str:
        """Two-decimal rendering; the only place rounding happens."""
        if self.quote_required:
            return "Quote required"
        return f"{self.total_cost:.2f}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalCost": self.total_cost,
            "display": self.display,
            "quoteRequired": self.quote_required,
            "colorPages": self.buckets.color,
            "bwPages": self.buckets.bw,
        }
