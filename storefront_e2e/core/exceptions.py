"""
Error types raised by the harness.

Network failures are not wrapped: ``requests.RequestException`` reaches the
scenario unchanged.
"""


class StorefrontE2EError(Exception):
    """Base class for harness errors that are not test assertions."""


class ConfigError(StorefrontE2EError):
    """A configuration value could not be interpreted."""


class ProductNotFoundError(AssertionError):
    """The discovery flow could not locate the product page.

    Subclasses AssertionError so pytest reports it as a failed check
    rather than an error in the harness.
    """

    def __init__(self, query: str, message: str = "Product URL not found."):
        super().__init__(message)
        self.query = query
