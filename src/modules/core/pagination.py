"""``page`` / ``limit`` pagination with a ``{data, meta}`` envelope.

``page`` defaults to 1 and ``limit`` to ``DEFAULT_PAGE_LIMIT`` (10) when
absent, non-numeric or smaller than 1.  ``skip = (page - 1) * limit`` and
``pages = ceil(total / limit)``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Generic, Mapping, Sequence, TypeVar

from django.conf import settings

T = TypeVar("T")

DEFAULT_PAGE = 1


def _positive_int(raw: Any, default: int) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if value >= 1 else default


@dataclass(frozen=True)
class PageRequest:
    page: int = DEFAULT_PAGE
    limit: int = 10

    @classmethod
    def from_query(cls, params: Mapping[str, Any]) -> PageRequest:
        return cls(
            page=_positive_int(params.get("page"), DEFAULT_PAGE),
            limit=_positive_int(params.get("limit"), settings.DEFAULT_PAGE_LIMIT),
        )

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def take(self) -> int:
        return self.limit


def page_count(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0


@dataclass(frozen=True)
class Page(Generic[T]):
    items: Sequence[T]
    total: int
    page: int
    limit: int

    @property
    def pages(self) -> int:
        return page_count(self.total, self.limit)

    @property
    def meta(self) -> dict[str, int]:
        return {"total": self.total, "page": self.page, "pages": self.pages}


def paginate(queryset, request: PageRequest) -> Page:
    """Slice an ordered queryset and count its total in two queries."""
    total = queryset.count()
    items = list(queryset[request.skip : request.skip + request.take])
    return Page(items=items, total=total, page=request.page, limit=request.limit)


def paginated_payload(page: Page, serializer_class) -> dict[str, Any]:
    return {
        "data": serializer_class(page.items, many=True).data,
        "meta": page.meta,
    }
