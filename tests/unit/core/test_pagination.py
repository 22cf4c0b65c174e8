"""Unit tests for page / limit pagination."""

from __future__ import annotations

import pytest

from modules.core.pagination import Page, PageRequest, page_count

pytestmark = pytest.mark.unit


class TestPageRequest:
    def test_defaults(self):
        request = PageRequest.from_query({})
        assert (request.page, request.limit, request.skip) == (1, 10, 0)

    @pytest.mark.parametrize("page,skip", [("1", 0), ("2", 10), ("3", 20)])
    def test_skip(self, page, skip):
        request = PageRequest.from_query({"page": page, "limit": "10"})
        assert request.skip == skip
        assert request.take == 10

    @pytest.mark.parametrize("raw", ["0", "-3", "abc", "", None])
    def test_invalid_values_fall_back_to_defaults(self, raw):
        request = PageRequest.from_query({"page": raw, "limit": raw})
        assert request.page == 1
        assert request.limit == 10

    def test_limit_follows_settings(self, settings):
        settings.DEFAULT_PAGE_LIMIT = 25
        assert PageRequest.from_query({}).limit == 25


class TestPageMeta:
    @pytest.mark.parametrize(
        "total,limit,pages",
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 10, 3)],
    )
    def test_page_count(self, total, limit, pages):
        assert page_count(total, limit) == pages

    def test_meta(self):
        page = Page(items=[], total=25, page=2, limit=10)
        assert page.meta == {"total": 25, "page": 2, "pages": 3}
