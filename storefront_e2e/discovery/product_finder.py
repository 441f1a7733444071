"""
Locate a product detail page the way a shopper would.

Fetch the home page, lift the form key out of it, run a catalog search
and follow the first result. Any missing step yields None instead of
raising; callers that cannot continue without a URL use
``require_product_url``.
"""

from typing import Optional

from storefront_e2e.client.http_client import ApiResponse, StorefrontClient
from storefront_e2e.core.exceptions import ProductNotFoundError
from storefront_e2e.parsing.html_extractor import StorefrontPage
from storefront_e2e.utils.logger import get_logger

logger = get_logger("discovery")

SEARCH_PATH = "/catalogsearch/result/"


class ProductFinder:
    """Product discovery through the storefront's search page."""

    def __init__(self, client: StorefrontClient, search_path: str = SEARCH_PATH):
        self.client = client
        self.search_path = search_path

    def fetch_form_key(self) -> Optional[str]:
        response = self.client.get("/")
        form_key = StorefrontPage(response.text).form_key()
        if form_key is None:
            logger.warning("No form_key on home page (status %s)", response.status_code)
        return form_key

    def search(self, query: str, form_key: str) -> ApiResponse:
        return self.client.get(
            self.search_path,
            params={"q": query, "form_key": form_key},
        )

    def find_product_url(self, query: str) -> Optional[str]:
        """Return the first search result's URL for ``query``, or None."""
        form_key = self.fetch_form_key()
        if form_key is None:
            return None

        response = self.search(query, form_key)
        product_url = StorefrontPage(response.text).first_product_url()
        if product_url is None:
            logger.warning("Search for %r returned no product links (status %s)", query, response.status_code)
            return None

        logger.info("Found %r at %s", query, product_url)
        return product_url

    def require_product_url(self, query: str) -> str:
        product_url = self.find_product_url(query)
        if product_url is None:
            raise ProductNotFoundError(query)
        return product_url
