"""Binding surcharges, added once before the copies multiplier."""

from __future__ import annotations

import math


SOFT_BINDING_FEE = 25

# (max pages, fee) steps for spiral binding up to 90 pages
SPIRAL_BINDING_STEPS = (
    (50, 25),
    (70, 30),
    (90, 35),
)
SPIRAL_EXTRA_GROUP_PAGES = 20
SPIRAL_EXTRA_GROUP_FEE = 5


def soft_fee() -> int:
    return SOFT_BINDING_FEE


def spiral_fee(page_count: int) -> int:
    """
    Tiered spiral binding fee.

    Above 90 pages every started group of 20 pages adds 5, so 91 and 110
    pages both cost 40.
    """
    for max_pages, fee in SPIRAL_BINDING_STEPS:
        if page_count <= max_pages:
            return fee

    last_max, last_fee = SPIRAL_BINDING_STEPS[-1]
    extra_groups = math.ceil((page_count - last_max) / SPIRAL_EXTRA_GROUP_PAGES)
    return last_fee + extra_groups * SPIRAL_EXTRA_GROUP_FEE
