"""
Pydantic models for storefront REST API request payloads.
"""
from pydantic import BaseModel, Field


class CustomerAccount(BaseModel):
    """Customer record nested inside a registration request."""
    email: str = Field(description="Unique login email")
    firstname: str = Field(default="Test", description="Customer first name")
    lastname: str = Field(default="User", description="Customer last name")


class CustomerCreateRequest(BaseModel):
    """Request body for POST /rest/V1/customers."""
    customer: CustomerAccount
    password: str = Field(description="Plain-text password for the new account")


class TokenRequest(BaseModel):
    """Request body for POST /rest/V1/integration/customer/token."""
    username: str = Field(description="Customer email")
    password: str
