"""Domain-level result contracts shared by multiple layers."""

from __future__ import annotations

from dataclasses import dataclass

from .user import User


@dataclass(slots=True)
class ProvisioningOutcome:
    """Side effects observed while processing one account request."""

    user: User
    persisted: bool
    notified: bool
    debug: bool = False
