"""
Page-range expressions: parsing, validation and counting.

Grammar::

    expression := "all" | token ("," token)*
    token      := page | page "-" page

Every page must lie within ``[1, total_pages]`` and ranges must satisfy
``start <= end``. Tokens are trimmed and empty tokens are skipped.

Two entry points share the same token rules but handle bad input differently:

- ``resolve`` / ``validate`` are strict and reject the whole expression on the
  first bad token. Used when an order is submitted.
- ``count`` is permissive: bad tokens contribute 0 and it never raises. Used for
  the live price preview and for custom color/black-and-white fields.

Counts are additive per token, so ``"1,2,2,3"`` counts 4 pages.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterator, Optional, Tuple

from core.exceptions import PageRangeError


ALL_PAGES = "all"

Span = Tuple[int, int]


@dataclass(frozen=True)
class PageSet:
    """
    Resolved page selection.

    Holds the inclusive spans exactly as written, so ``count`` is the sum of
    span lengths (duplicates included) and never needs the pages materialized.
    """

    total_pages: int
    spans: Tuple[Span, ...] = ()

    @classmethod
    def everything(cls, total_pages: int) -> "PageSet":
        if total_pages <= 0:
            return cls(total_pages=max(total_pages, 0))
        return cls(total_pages=total_pages, spans=((1, total_pages),))

    @property
    def count(self) -> int:
        """Number of pages selected, counted per token."""
        return sum(end - start + 1 for start, end in self.spans)

    @property
    def pages(self) -> FrozenSet[int]:
        """Distinct page numbers in the selection."""
        selected = set()
        for start, end in self.spans:
            selected.update(range(start, end + 1))
        return frozenset(selected)

    def __contains__(self, page: object) -> bool:
        if not isinstance(page, int):
            return False
        return any(start <= page <= end for start, end in self.spans)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self.pages))

    def __len__(self) -> int:
        return self.count


def _parse_page(text: str) -> Optional[int]:
    text = text.strip()
    # ASCII digits only
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)


def _tokens(expr: str) -> Iterator[str]:
    for raw in expr.split(","):
        token = raw.strip()
        if token:
            yield token


def _token_span(token: str, total_pages: int) -> Optional[Span]:
    """Return the inclusive span for one token, or None if it is unusable."""
    if "-" in token:
        head, _, tail = token.partition("-")
        start = _parse_page(head)
        end = _parse_page(tail)
    else:
        start = end = _parse_page(token)

    if start is None or end is None:
        return None
    if start < 1 or end > total_pages or start > end:
        return None
    return start, end


def is_all(expr: Optional[str]) -> bool:
    return isinstance(expr, str) and expr.strip() == ALL_PAGES


def resolve(expr: Optional[str], total_pages: int) -> PageSet:
    """
    Strictly resolve ``expr`` against a document of ``total_pages`` pages.

    Raises:
        PageRangeError: If any token is malformed or out of bounds, or if the
            expression selects nothing at all.
    """
    if is_all(expr):
        return PageSet.everything(total_pages)

    if not isinstance(expr, str) or not expr.strip():
        raise PageRangeError(expr if isinstance(expr, str) else "", total_pages)

    spans = []
    for token in _tokens(expr):
        span = _token_span(token, total_pages)
        if span is None:
            raise PageRangeError(expr, total_pages, token=token)
        spans.append(span)

    if not spans:
        raise PageRangeError(expr, total_pages)
    return PageSet(total_pages=total_pages, spans=tuple(spans))


def validate(expr: Optional[str], total_pages: int) -> bool:
    """True if ``expr`` resolves strictly against ``total_pages``."""
    try:
        resolve(expr, total_pages)
    except PageRangeError:
        return False
    return True


def count(expr: Optional[str], total_pages: int) -> int:
    """
    Count selected pages without ever raising.

    Malformed and out-of-range tokens are skipped; a missing expression
    counts as 0.
    """
    if is_all(expr):
        return max(total_pages, 0)
    if not expr or not isinstance(expr, str):
        return 0

    selected = 0
    for token in _tokens(expr):
        span = _token_span(token, total_pages)
        if span is not None:
            selected += span[1] - span[0] + 1
    return selected


def full_range(total_pages: int) -> str:
    """Default selection written into the form once a page count is known."""
    return f"1-{total_pages}"
