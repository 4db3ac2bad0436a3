"""Page and page-size handling for listings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from smokesignal.http.utils import QueryParam, stringify

PAGE_DEFAULT = 1
PAGE_MIN = 1
PAGE_MAX = 100
PAGE_SIZE_DEFAULT = 10
PAGE_SIZE_MIN = 5
PAGE_SIZE_MAX = 100

LIMITED_PAGE_DEFAULT = 1
LIMITED_PAGE_MIN = 1
LIMITED_PAGE_MAX = 5
LIMITED_PAGE_SIZE_DEFAULT = 5
LIMITED_PAGE_SIZE_MIN = 5
LIMITED_PAGE_SIZE_MAX = 5

ADMIN_PAGE_MAX = 25000
ADMIN_PAGE_SIZE_MIN = 20
ADMIN_PAGE_SIZE_MAX = 100


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


@dataclass(frozen=True)
class Pagination:
    """Requested page and page size, as given in a query string."""

    page: Optional[int] = None
    page_size: Optional[int] = None

    def admin_clamped(self) -> tuple[int, int]:
        """Page and size limited to the ranges of the admin pages."""
        page = _clamp(1 if self.page is None else self.page, 1, ADMIN_PAGE_MAX)
        page_size = _clamp(
            1 if self.page_size is None else self.page_size,
            ADMIN_PAGE_SIZE_MIN,
            ADMIN_PAGE_SIZE_MAX,
        )
        return page, page_size

    def clamped(self) -> tuple[int, int]:
        """Page and size with defaults applied and limited to the public ranges."""
        page = _clamp(PAGE_DEFAULT if self.page is None else self.page, PAGE_MIN, PAGE_MAX)
        page_size = _clamp(
            PAGE_SIZE_DEFAULT if self.page_size is None else self.page_size,
            PAGE_SIZE_MIN,
            PAGE_SIZE_MAX,
        )
        return page, page_size


@dataclass(frozen=True)
class PaginationView:
    """Links to the neighbouring pages of a listing."""

    previous: Optional[int] = None
    previous_url: Optional[str] = None
    next: Optional[int] = None
    next_url: Optional[str] = None

    @classmethod
    def create(
        cls, page_size: int, total: int, page: int, params: Iterable[QueryParam] = ()
    ) -> "PaginationView":
        """Build the view; a next page exists when more than a page was fetched."""
        params = list(params)
        previous = previous_url = None
        if page > 1:
            previous = page - 1
            previous_url = stringify([("page", str(previous)), *params])
        following = following_url = None
        if total > page_size:
            following = page + 1
            following_url = stringify([("page", str(following)), *params])
        return cls(previous, previous_url, following, following_url)