"""
Tests for the paging value types.
"""

import pytest

from library_api.pagination import Page, PageRequest, SortDirection, SortOrder


class TestSortOrder:
    """Tests for SortOrder.parse."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("title", SortOrder("title", SortDirection.ASC)),
            ("title,asc", SortOrder("title", SortDirection.ASC)),
            ("title,DESC", SortOrder("title", SortDirection.DESC)),
            (" author , desc ", SortOrder("author", SortDirection.DESC)),
        ],
    )
    def test_parse(self, raw, expected):
        assert SortOrder.parse(raw) == expected

    @pytest.mark.parametrize("raw", ["", ",desc", "title,sideways"])
    def test_parse_invalid(self, raw):
        with pytest.raises(ValueError):
            SortOrder.parse(raw)


class TestPageRequest:
    """Tests for PageRequest."""

    def test_offset(self):
        assert PageRequest(page=0, size=10).offset == 0
        assert PageRequest(page=3, size=10).offset == 30

    @pytest.mark.parametrize("page,size", [(-1, 10), (0, 0)])
    def test_invalid_values(self, page, size):
        with pytest.raises(ValueError):
            PageRequest(page=page, size=size)


class TestPage:
    """Tests for Page."""

    def test_page_metadata(self):
        page = Page(content=["a", "b"], total_elements=12, page_request=PageRequest(page=0, size=5))

        assert page.total_pages == 3
        assert page.number_of_elements == 2
        assert page.is_first is True
        assert page.is_last is False

    def test_last_page(self):
        page = Page(content=["k", "l"], total_elements=12, page_request=PageRequest(page=2, size=5))

        assert page.is_first is False
        assert page.is_last is True

    def test_empty_page(self):
        page = Page(content=[], total_elements=0, page_request=PageRequest())

        assert page.total_pages == 0
        assert page.is_first is True
        assert page.is_last is True
