"""Shared schema exports."""

from .account_request import AccountRequest, UserResponse

__all__ = [
    "AccountRequest",
    "UserResponse",
]
