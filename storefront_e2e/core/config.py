"""
Configuration management for the storefront E2E harness.

Loads settings from YAML config file, applies environment overrides and
provides typed access.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import yaml

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from storefront_e2e.core.exceptions import ConfigError


def _project_root() -> Path:
    """Return project root (parent of storefront_e2e package)."""
    return Path(__file__).resolve().parent.parent.parent


DEFAULT_CONFIG_PATH = _project_root() / "config" / "default.yaml"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class StorefrontConfig:
    """Configuration for a suite run against one storefront."""

    # Target
    base_url: str = "https://magento.softwaretestingboard.com"
    request_timeout: float = 30.0       # Seconds per request, no retries

    # Catalog fixtures (live data the shop is expected to carry)
    product_query: str = "Joust Duffle Bag"
    category_path: str = "/women/tops-women.html"
    price_filter: str = "100-200"
    sort_order: str = "price"

    # Generated customer
    customer_email_prefix: str = "test"
    customer_email_domain: str = "example.com"
    customer_password: str = "Password1"
    customer_firstname: str = "Test"
    customer_lastname: str = "User"
    registration_email_prefix: str = "testuser"
    registration_password: str = "Test@1234"
    random_email_suffix: bool = False   # Append a random token to the time-based email

    # Pre-existing account (falls back to the generated customer when unset)
    known_username: Optional[str] = None
    known_password: Optional[str] = None

    # Credentials the shop must reject
    invalid_username: str = "invalid@example.com"
    invalid_password: str = "wrongpass"

    # Smoke thresholds
    response_time_threshold_ms: int = 5000

    # Live scenarios only run when explicitly enabled
    run_live: bool = False

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "StorefrontConfig":
        """Load configuration from YAML file."""
        path = config_path or DEFAULT_CONFIG_PATH
        if not path.exists():
            return cls()

        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}

        storefront_config = data.get('storefront', {}) or {}
        catalog_config = data.get('catalog', {}) or {}
        customer_config = data.get('customer', {}) or {}
        accounts_config = data.get('accounts', {}) or {}
        thresholds_config = data.get('thresholds', {}) or {}

        known = accounts_config.get('known', {}) or {}
        invalid = accounts_config.get('invalid', {}) or {}

        return cls(
            base_url=_as_str('base_url', storefront_config.get('base_url', cls.base_url)),
            request_timeout=_as_float('request_timeout', storefront_config.get('request_timeout', cls.request_timeout)),
            run_live=_as_bool('run_live', storefront_config.get('run_live', cls.run_live)),
            product_query=_as_str('product_query', catalog_config.get('product_query', cls.product_query)),
            category_path=_as_str('category_path', catalog_config.get('category_path', cls.category_path)),
            price_filter=_as_str('price_filter', catalog_config.get('price_filter', cls.price_filter)),
            sort_order=_as_str('sort_order', catalog_config.get('sort_order', cls.sort_order)),
            customer_email_prefix=_as_str('customer_email_prefix', customer_config.get('email_prefix', cls.customer_email_prefix)),
            customer_email_domain=_as_str('customer_email_domain', customer_config.get('email_domain', cls.customer_email_domain)),
            customer_password=_as_str('customer_password', customer_config.get('password', cls.customer_password)),
            customer_firstname=_as_str('customer_firstname', customer_config.get('firstname', cls.customer_firstname)),
            customer_lastname=_as_str('customer_lastname', customer_config.get('lastname', cls.customer_lastname)),
            registration_email_prefix=_as_str('registration_email_prefix', customer_config.get('registration_email_prefix', cls.registration_email_prefix)),
            registration_password=_as_str('registration_password', customer_config.get('registration_password', cls.registration_password)),
            random_email_suffix=_as_bool('random_email_suffix', customer_config.get('random_email_suffix', cls.random_email_suffix)),
            known_username=_as_optional_str('accounts.known.username', known.get('username')),
            known_password=_as_optional_str('accounts.known.password', known.get('password')),
            invalid_username=_as_str('invalid_username', invalid.get('username', cls.invalid_username)),
            invalid_password=_as_str('invalid_password', invalid.get('password', cls.invalid_password)),
            response_time_threshold_ms=_as_int(
                'response_time_threshold_ms',
                thresholds_config.get('response_time_ms', cls.response_time_threshold_ms),
            ),
        )

    def apply_env_overrides(self) -> "StorefrontConfig":
        """Override fields from STOREFRONT_* environment variables."""
        if os.getenv("STOREFRONT_BASE_URL"):
            self.base_url = os.environ["STOREFRONT_BASE_URL"]
        if os.getenv("STOREFRONT_TIMEOUT"):
            self.request_timeout = _as_float("STOREFRONT_TIMEOUT", os.environ["STOREFRONT_TIMEOUT"])
        if os.getenv("STOREFRONT_PRODUCT_QUERY"):
            self.product_query = os.environ["STOREFRONT_PRODUCT_QUERY"]
        if os.getenv("STOREFRONT_KNOWN_USERNAME"):
            self.known_username = os.environ["STOREFRONT_KNOWN_USERNAME"]
        if os.getenv("STOREFRONT_KNOWN_PASSWORD"):
            self.known_password = os.environ["STOREFRONT_KNOWN_PASSWORD"]
        if "STOREFRONT_RANDOM_EMAIL_SUFFIX" in os.environ:
            self.random_email_suffix = _as_bool(
                "STOREFRONT_RANDOM_EMAIL_SUFFIX", os.environ["STOREFRONT_RANDOM_EMAIL_SUFFIX"]
            )
        if "STOREFRONT_E2E_LIVE" in os.environ:
            self.run_live = _as_bool("STOREFRONT_E2E_LIVE", os.environ["STOREFRONT_E2E_LIVE"])
        if os.getenv("STOREFRONT_LATENCY_THRESHOLD_MS"):
            self.response_time_threshold_ms = _as_int(
                "STOREFRONT_LATENCY_THRESHOLD_MS", os.environ["STOREFRONT_LATENCY_THRESHOLD_MS"]
            )
        return self

    @property
    def has_known_account(self) -> bool:
        return bool(self.known_username and self.known_password)


def _as_str(name: str, value) -> str:
    """Strings only; YAML turns bare numbers and booleans into other types."""
    if isinstance(value, str):
        return value
    raise ConfigError(f"{name}: expected a string, got {value!r}")


def _as_optional_str(name: str, value) -> Optional[str]:
    if value is None or value == "":
        return None
    return _as_str(name, value)


def _as_bool(name: str, value) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name}: expected a boolean, got {value!r}")


def _as_float(name: str, value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name}: expected a number, got {value!r}")


def _as_int(name: str, value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name}: expected an integer, got {value!r}")


# Global config instance
_config: Optional[StorefrontConfig] = None


def get_config() -> StorefrontConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = StorefrontConfig.from_yaml().apply_env_overrides()
    return _config


def set_config(config: Optional[StorefrontConfig]) -> None:
    """Set (or with ``None``, reset) the global configuration instance."""
    global _config
    _config = config
