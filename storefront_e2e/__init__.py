"""
Storefront E2E - black-box checks for a live Magento storefront

Harness pieces shared by the scenarios in tests/e2e:
- HTTP client with fluent status/body assertions
- HTML extraction with every theme selector in one place
- Product discovery through the storefront search page
- A per-run customer session (registration + bearer token)
"""

from storefront_e2e.core.config import StorefrontConfig, get_config, set_config
from storefront_e2e.core.accounts import CustomerSession, generate_customer_email
from storefront_e2e.core.exceptions import ConfigError, ProductNotFoundError, StorefrontE2EError
from storefront_e2e.client.http_client import ApiResponse, StorefrontClient
from storefront_e2e.parsing.html_extractor import StorefrontPage, is_valid_price
from storefront_e2e.discovery.product_finder import ProductFinder

__all__ = [
    'StorefrontConfig',
    'get_config',
    'set_config',
    'CustomerSession',
    'generate_customer_email',
    'ConfigError',
    'ProductNotFoundError',
    'StorefrontE2EError',
    'ApiResponse',
    'StorefrontClient',
    'StorefrontPage',
    'is_valid_price',
    'ProductFinder',
]

__version__ = '0.1.0'
