"""
Tests for the home page -> search -> first result discovery flow.
"""

import pytest

from storefront_e2e.core.exceptions import ProductNotFoundError
from storefront_e2e.discovery.product_finder import ProductFinder
from storefront_fixtures import EMPTY_HTML, HOME_HTML, SEARCH_HTML, build_requests_response


@pytest.fixture
def finder(client):
    return ProductFinder(client)


class TestFindProductUrl:

    def test_finds_first_result(self, finder, mock_session):
        mock_session.request.side_effect = [
            build_requests_response(200, HOME_HTML),
            build_requests_response(200, SEARCH_HTML),
        ]

        url = finder.find_product_url("Joust Duffle Bag")

        assert url == "https://shop.test/joust-duffle-bag.html"
        home_call, search_call = mock_session.request.call_args_list
        assert home_call.args == ("GET", "https://shop.test/")
        assert search_call.args == ("GET", "https://shop.test/catalogsearch/result/")
        assert search_call.kwargs["params"] == {"q": "Joust Duffle Bag", "form_key": "Xy12AbCd34EfGh56"}

    def test_missing_form_key_short_circuits(self, finder, mock_session):
        mock_session.request.return_value = build_requests_response(200, EMPTY_HTML)

        assert finder.find_product_url("Joust Duffle Bag") is None
        assert mock_session.request.call_count == 1

    def test_no_search_results(self, finder, mock_session):
        mock_session.request.side_effect = [
            build_requests_response(200, HOME_HTML),
            build_requests_response(200, EMPTY_HTML),
        ]

        assert finder.find_product_url("Nonexistent Widget") is None

    def test_custom_search_path(self, client, mock_session):
        mock_session.request.side_effect = [
            build_requests_response(200, HOME_HTML),
            build_requests_response(200, SEARCH_HTML),
        ]

        ProductFinder(client, search_path="/search/").find_product_url("bag")

        assert mock_session.request.call_args_list[1].args[1] == "https://shop.test/search/"


class TestRequireProductUrl:

    def test_returns_url(self, finder, mock_session):
        mock_session.request.side_effect = [
            build_requests_response(200, HOME_HTML),
            build_requests_response(200, SEARCH_HTML),
        ]
        assert finder.require_product_url("Joust Duffle Bag").endswith("joust-duffle-bag.html")

    def test_not_found_is_an_assertion_failure(self, finder, mock_session):
        mock_session.request.return_value = build_requests_response(200, EMPTY_HTML)

        with pytest.raises(AssertionError, match="Product URL not found.") as exc_info:
            finder.require_product_url("Joust Duffle Bag")

        assert isinstance(exc_info.value, ProductNotFoundError)
        assert exc_info.value.query == "Joust Duffle Bag"
