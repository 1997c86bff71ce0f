"""Split an order's pages into color and black-and-white buckets."""

from __future__ import annotations

from typing import Optional

from models.order import OrderMode, ColorMode, CustomQuote, uses_custom_ranges
from models.pricing import PageBuckets
from modules import page_ranges


def classify(
    mode: OrderMode,
    total_pages: int,
    selected_pages: Optional[str] = None,
    color_pages: Optional[str] = None,
    bw_pages: Optional[str] = None,
) -> PageBuckets:
    """
    Count pages per bucket using the permissive counting path.

    Custom color mode counts the two ranges independently: overlaps and gaps
    between them are accepted as written. Other modes count
    ``selected_pages`` (default ``all``) once and route it to one bucket.
    """
    if isinstance(mode, CustomQuote):
        return PageBuckets()

    if uses_custom_ranges(mode):
        return PageBuckets(
            color=page_ranges.count(color_pages, total_pages),
            bw=page_ranges.count(bw_pages, total_pages),
            custom=True,
        )

    pages = page_ranges.count(selected_pages or page_ranges.ALL_PAGES, total_pages)
    if mode.color_mode is ColorMode.COLOR:
        return PageBuckets(color=pages)
    return PageBuckets(bw=pages)
