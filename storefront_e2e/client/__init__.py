from storefront_e2e.client.http_client import (
    ApiResponse,
    StorefrontClient,
    not_empty,
    not_none,
    one_of,
)

__all__ = ['ApiResponse', 'StorefrontClient', 'not_empty', 'not_none', 'one_of']
