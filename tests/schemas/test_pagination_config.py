# tests/schemas/test_pagination_config.py
"""
Tests for the PaginationConfig schema and its navigation view.
"""

import pytest
from pydantic import ValidationError

from fastapi_pagebuilder.core.errors import InvalidInputError, OutOfRangeError
from fastapi_pagebuilder.links.factory import PageLink
from fastapi_pagebuilder.schemas.config import PaginationConfig


class TestPaginationConfig:
    """Tests for PaginationConfig construction."""

    def test_create_basic(self):
        """Should hold the supplied values."""
        config = PaginationConfig(max_navigate=5, total_pages=10, current_page=3, page_link="?p=%d")

        assert config.max_navigate == 5
        assert config.total_pages == 10
        assert config.current_page == 3
        assert config.page_link == "?p=%d"

    def test_first_page_link_from_template(self):
        """Should substitute page 1 into a template eagerly."""
        config = PaginationConfig(max_navigate=5, total_pages=10, page_link="?p=%d")

        assert config.first_page_link == "?p=1"

    def test_first_page_link_from_callable(self, url_generator):
        """Should invoke a callable link with page 1 eagerly."""
        link = PageLink(url_generator, "article_list", {"q": "x"}, "page")
        config = PaginationConfig(max_navigate=5, total_pages=10, page_link=link)

        assert url_generator.generate.call_count == 1
        assert config.first_page_link == link(1)

    def test_first_page_link_is_derived(self):
        """Should ignore an explicitly passed first page link."""
        config = PaginationConfig(
            max_navigate=5, total_pages=10, page_link="?p=%d", first_page_link="/other"
        )

        assert config.first_page_link == "?p=1"

    def test_frozen(self):
        """Should not allow mutation after construction."""
        config = PaginationConfig(max_navigate=5, total_pages=10, page_link="?p=%d")

        with pytest.raises(ValidationError):
            config.current_page = 2

    def test_current_page_beyond_total(self):
        """Should raise OutOfRangeError rather than clamping."""
        with pytest.raises(OutOfRangeError):
            PaginationConfig(max_navigate=5, total_pages=3, current_page=999, page_link="?p=%d")

    def test_empty_result_page_one(self):
        """Should accept page 1 when there are no pages."""
        config = PaginationConfig(max_navigate=5, total_pages=0, page_link="?p=%d")

        assert config.current_page == 1

    def test_max_navigate_zero(self):
        """Should reject max_navigate below 1 as invalid input."""
        with pytest.raises(InvalidInputError) as exc_info:
            PaginationConfig(max_navigate=0, total_pages=3, page_link="?p=%d")
        assert exc_info.value.field == "max_navigate"

    def test_current_page_zero(self):
        """Should raise OutOfRangeError for page 0."""
        with pytest.raises(OutOfRangeError) as exc_info:
            PaginationConfig(max_navigate=5, total_pages=3, current_page=0, page_link="?p=%d")
        assert exc_info.value.page == 0

    def test_out_of_range_page_skips_link_callable(self, url_generator):
        """Should reject the page before rendering any link."""
        link = PageLink(url_generator, "article_list", {}, "page")

        with pytest.raises(OutOfRangeError):
            PaginationConfig(max_navigate=5, total_pages=3, current_page=9, page_link=link)
        url_generator.generate.assert_not_called()

    def test_negative_total_pages(self):
        """Should reject a negative page count."""
        with pytest.raises(ValidationError):
            PaginationConfig(max_navigate=5, total_pages=-1, page_link="?p=%d")

    @pytest.mark.parametrize("template", ["?p=", "?p=%d&q=%d", "?p=%s"])
    def test_bad_template(self, template):
        """Should require exactly one %d placeholder."""
        with pytest.raises(InvalidInputError):
            PaginationConfig(max_navigate=5, total_pages=3, page_link=template)

    def test_escaped_percent_in_template(self):
        """Should allow escaped percent signs next to the placeholder."""
        config = PaginationConfig(max_navigate=5, total_pages=3, page_link="?q=100%%&p=%d")

        assert config.first_page_link == "?q=100%&p=1"

    def test_page_url(self):
        """Should resolve links for arbitrary pages."""
        config = PaginationConfig(max_navigate=5, total_pages=10, page_link="?p=%d")

        assert config.page_url(7) == "?p=7"

    def test_navigation_range(self):
        """Should expose the navigation window."""
        config = PaginationConfig(max_navigate=10, total_pages=33, current_page=7, page_link="?p=%d")

        assert config.navigation_range() == (2, 11)


class TestPaginationView:
    """Tests for PaginationConfig.view()."""

    def test_middle_page(self):
        """Should expose first, prev, current, next, last and the window."""
        config = PaginationConfig(max_navigate=5, total_pages=20, current_page=10, page_link="?p=%d")
        view = config.view()

        assert view.first.link == "?p=1"
        assert view.prev.number == 9
        assert view.current.number == 10
        assert view.current.is_current is True
        assert view.next.link == "?p=11"
        assert view.last.number == 20
        assert [page.number for page in view.pages] == [8, 9, 10, 11, 12]
        assert [page.is_current for page in view.pages] == [False, False, True, False, False]

    def test_first_page(self):
        """Should omit prev on page 1."""
        view = PaginationConfig(max_navigate=5, total_pages=3, page_link="?p=%d").view()

        assert view.prev is None
        assert view.next.number == 2
        assert view.first.is_current is True

    def test_last_page(self):
        """Should omit next on the last page."""
        view = PaginationConfig(
            max_navigate=5, total_pages=3, current_page=3, page_link="?p=%d"
        ).view()

        assert view.next is None
        assert view.last.is_current is True

    def test_no_pages(self):
        """Should omit last and return an empty window when there are no pages."""
        view = PaginationConfig(max_navigate=5, total_pages=0, page_link="?p=%d").view()

        assert view.last is None
        assert view.next is None
        assert view.pages == []
        assert view.current.number == 1
