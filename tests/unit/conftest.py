"""Offline doubles for the storefront HTTP layer."""

from unittest.mock import MagicMock

import pytest
import requests

from storefront_e2e.client.http_client import StorefrontClient
from storefront_fixtures import BASE_URL


@pytest.fixture
def mock_session():
    """requests.Session double; set ``.request.return_value`` or ``side_effect``."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(mock_session):
    return StorefrontClient(BASE_URL, timeout=5.0, session=mock_session)
