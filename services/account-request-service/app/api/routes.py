"""HTTP route definitions for the account request service."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status

from schemas import AccountRequest, UserResponse

from ..config import Settings, get_settings
from ..domain.service import AccountRequestService
from ..domain.user import User

logger = logging.getLogger(__name__)

router = APIRouter()


def get_service(request: Request) -> AccountRequestService:
    """Resolve the `AccountRequestService` stored on the FastAPI application state."""
    service: AccountRequestService = request.app.state.account_request_service
    return service


@router.post(
    "/grafana-acct-request",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_account_request(
    payload: AccountRequest,
    service: AccountRequestService = Depends(get_service),
    settings: Settings = Depends(get_settings),
) -> UserResponse:
    """Accept a Grafana account request.

    The response is ``201 Created`` whenever processing finishes, including
    when the database write or the notification email failed.
    """
    user = User.from_request(payload)
    outcome = service.submit(user, settings)
    logger.info(
        "account request processed for %s (persisted=%s, notified=%s, debug=%s)",
        user.email_address,
        outcome.persisted,
        outcome.notified,
        outcome.debug,
    )
    return user.to_response()
