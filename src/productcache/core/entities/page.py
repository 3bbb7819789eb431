"""Pagination entities."""

import math
from dataclasses import dataclass, field

from productcache.core.entities.product import Product

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class PageRequest:
    """Normalized offset pagination request.

    Out-of-range values are replaced rather than rejected:
    a page below 1 becomes 1, and a limit below 1 or above
    MAX_LIMIT becomes DEFAULT_LIMIT. A limit of 0 therefore
    means the default page size, not an empty page.
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def normalize(cls, page: int, limit: int) -> "PageRequest":
        """Create a request with page and limit clamped to valid values."""
        if page < 1:
            page = DEFAULT_PAGE
        if limit < 1 or limit > MAX_LIMIT:
            limit = DEFAULT_LIMIT
        return cls(page=page, limit=limit)

    @property
    def offset(self) -> int:
        """Number of rows to skip before this page."""
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class Page:
    """A page of products with pagination metadata."""

    page: int
    limit: int
    total: int
    items: tuple[Product, ...] = field(default_factory=tuple)

    @property
    def total_pages(self) -> int:
        """Number of pages needed to show ``total`` rows."""
        return math.ceil(self.total / self.limit)
