from __future__ import annotations

from dataclasses import dataclass

from schemas import AccountRequest, UserResponse


@dataclass(frozen=True, slots=True)
class User:
    """Canonical record of the person requesting a Grafana account."""

    first_name: str
    last_name: str
    org_name: str
    email_address: str

    @classmethod
    def from_request(cls, payload: AccountRequest) -> "User":
        """Map the camelCase request fields onto the canonical record."""
        return cls(
            first_name=payload.firstName,
            last_name=payload.lastName,
            org_name=payload.orgName,
            email_address=payload.email,
        )

    def to_response(self) -> UserResponse:
        return UserResponse(
            first_name=self.first_name,
            last_name=self.last_name,
            org_name=self.org_name,
            email_address=self.email_address,
        )
