"""
Customer accounts for a suite run.

Registers a throwaway customer through the REST API and exchanges its
credentials for a bearer token. The resulting ``CustomerSession`` is built
once per run and handed to scenarios read-only. Accounts are never deleted.
"""

import time
import uuid
from dataclasses import dataclass
from typing import Optional

from storefront_e2e.api.models import CustomerAccount, CustomerCreateRequest, TokenRequest
from storefront_e2e.client.http_client import ApiResponse, StorefrontClient
from storefront_e2e.core.config import StorefrontConfig
from storefront_e2e.utils.logger import get_logger

logger = get_logger("accounts")

CUSTOMERS_PATH = "/rest/V1/customers"
CUSTOMER_TOKEN_PATH = "/rest/V1/integration/customer/token"
CUSTOMER_ME_PATH = "/rest/V1/customers/me"


def generate_customer_email(prefix: str = "test", domain: str = "example.com", random_suffix: bool = False) -> str:
    """
    Build a registration email unique to this moment.

    The millisecond timestamp keeps repeated runs apart; ``random_suffix``
    adds a short random token for runs started within the same millisecond.
    """
    local_part = f"{prefix}{int(time.time() * 1000)}"
    if random_suffix:
        local_part += f".{uuid.uuid4().hex[:8]}"
    return f"{local_part}@{domain}"


def create_customer(
    client: StorefrontClient,
    email: str,
    password: str,
    firstname: str = "Test",
    lastname: str = "User",
) -> ApiResponse:
    """Register a customer; fails unless the shop answers 200 or 201."""
    body = CustomerCreateRequest(
        customer=CustomerAccount(email=email, firstname=firstname, lastname=lastname),
        password=password,
    )
    response = client.post_model(CUSTOMERS_PATH, body)
    response.assert_status(200, 201)
    logger.info("Registered customer %s", email)
    return response


def request_customer_token(client: StorefrontClient, username: str, password: str) -> ApiResponse:
    return client.post_model(CUSTOMER_TOKEN_PATH, TokenRequest(username=username, password=password))


def parse_token(body: str) -> str:
    """The token endpoint returns a JSON string literal; drop the quotes."""
    return body.replace('"', "").strip()


def create_customer_token(client: StorefrontClient, username: str, password: str) -> str:
    response = request_customer_token(client, username, password)
    response.assert_status(200)
    return parse_token(response.text)


@dataclass(frozen=True)
class CustomerSession:
    """Credentials and token shared by every scenario in a run."""
    email: str
    password: str
    token: str
    customer_id: Optional[int] = None

    @property
    def auth_headers(self):
        return StorefrontClient.bearer(self.token)

    @classmethod
    def bootstrap(cls, client: StorefrontClient, config: StorefrontConfig) -> "CustomerSession":
        """Register a fresh customer and log it in."""
        email = generate_customer_email(
            prefix=config.customer_email_prefix,
            domain=config.customer_email_domain,
            random_suffix=config.random_email_suffix,
        )
        response = create_customer(
            client,
            email,
            config.customer_password,
            firstname=config.customer_firstname,
            lastname=config.customer_lastname,
        )
        body = response.json()
        customer_id = body.get("id") if isinstance(body, dict) else None

        token = create_customer_token(client, email, config.customer_password)
        logger.info("Obtained customer token for %s", email)
        return cls(email=email, password=config.customer_password, token=token, customer_id=customer_id)
