"""Price quotes for print and binding orders."""

from __future__ import annotations

import math
from typing import Dict

from logging_config import get_logger
from models.order import Binding, BindingKind, CustomQuote
from models.pricing import PageBuckets, PricingInput, PricingResult
from modules import binding_fees
from modules.page_buckets import classify


class PricingEngine:
    """Computes order totals from page buckets, sides, copies and binding."""

    # Currency units per page: (single-sided, double-sided)
    RATES: Dict[str, tuple] = {
        "color": (8, 13),
        "bw": (1.5, 1.6),
    }

    def __init__(self) -> None:
        self.logger = get_logger(__name__)

    @classmethod
    def rate(cls, bucket: str, duplex: bool) -> float:
        single, double = cls.RATES[bucket]
        return double if duplex else single

    def price(self, pricing_input: PricingInput) -> PricingResult:
        """
        Price one order.

        Custom-print orders short-circuit to the quote-required result.
        Mixed (custom color) orders multiply raw page counts by the per-page
        rates; all other orders get duplex sheet halving first. Binding fees
        are added before multiplying by copies.
        """
        mode = pricing_input.mode
        if isinstance(mode, CustomQuote):
            self.logger.debug("Custom print order, quote required")
            return PricingResult.quote()

        buckets = classify(
            mode,
            pricing_input.total_pages,
            selected_pages=pricing_input.selected_pages,
            color_pages=pricing_input.color_pages,
            bw_pages=pricing_input.bw_pages,
        )
        duplex = pricing_input.duplex

        total = self._base_cost(buckets, duplex)

        if isinstance(mode, Binding):
            total += self._binding_fee(mode.kind, buckets.total)

        copies = max(pricing_input.copies, 1)
        total *= copies

        self.logger.debug(
            f"Priced {type(mode).__name__}: color={buckets.color}, bw={buckets.bw}, "
            f"duplex={duplex}, copies={copies}, total={total}"
        )
        return PricingResult(total_cost=max(total, 0.0), buckets=buckets)

    def _base_cost(self, buckets: PageBuckets, duplex: bool) -> float:
        if buckets.custom:
            # Mixed orders are charged per page on both buckets, no sheet halving
            return (
                buckets.color * self.rate("color", duplex)
                + buckets.bw * self.rate("bw", duplex)
            )

        bucket = "color" if buckets.color else "bw"
        sheets = buckets.total
        if duplex:
            sheets = math.ceil(sheets / 2)
        return sheets * self.rate(bucket, duplex)

    @staticmethod
    def _binding_fee(kind: BindingKind, page_count: int) -> float:
        if kind is BindingKind.SOFT:
            return binding_fees.soft_fee()
        return binding_fees.spiral_fee(page_count)
