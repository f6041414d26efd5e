"""Wire contracts for Grafana account requests."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class AccountRequest(BaseModel):
    """Inbound payload posted by the account request form."""

    model_config = ConfigDict(strict=True)

    firstName: str
    lastName: str
    orgName: str
    email: str


class UserResponse(BaseModel):
    """Canonical user record echoed back once a request is accepted."""

    first_name: str
    last_name: str
    org_name: str
    email_address: str
