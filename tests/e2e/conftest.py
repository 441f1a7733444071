"""
Fixtures for live scenarios.

The customer session is created once per run, before the first scenario,
and shared read-only afterwards. Each worker of a parallel runner builds
its own session, so workers never share credentials.
"""

import pytest

from storefront_e2e.client.http_client import StorefrontClient
from storefront_e2e.core.accounts import CustomerSession
from storefront_e2e.core.config import get_config
from storefront_e2e.discovery.product_finder import ProductFinder
from storefront_e2e.parsing.html_extractor import StorefrontPage


@pytest.fixture(scope="session")
def storefront_config():
    return get_config()


@pytest.fixture(scope="session")
def client(storefront_config):
    with StorefrontClient(storefront_config.base_url, timeout=storefront_config.request_timeout) as c:
        yield c


@pytest.fixture(scope="session", autouse=True)
def customer_session(client, storefront_config):
    """Register a unique customer and obtain its token before any scenario runs."""
    return CustomerSession.bootstrap(client, storefront_config)


@pytest.fixture
def product_finder(client):
    return ProductFinder(client)


@pytest.fixture
def product_url(product_finder, storefront_config):
    """Discovered fresh for every scenario; fails immediately when not found."""
    return product_finder.require_product_url(storefront_config.product_query)


@pytest.fixture
def product_page(client, product_url):
    response = client.get(product_url)
    return StorefrontPage(response.text)
