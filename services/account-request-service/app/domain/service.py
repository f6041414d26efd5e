"""Account request service orchestrating templating, persistence, and notification."""

from __future__ import annotations

import logging

from .contracts import ProvisioningOutcome
from .user import User
from ..config import Settings
from ..metrics import NOTIFICATION_FAILURES_TOTAL, PERSISTENCE_FAILURES_TOTAL, REQUESTS_TOTAL
from ..notifications import EmailNotifier
from ..repository import AccountRequestRepository, PersistenceError
from ..templates import load_template, render_template

logger = logging.getLogger(__name__)


class AccountRequestService:
    """Processes Grafana account requests with best-effort side effects."""

    def __init__(self, repository: AccountRequestRepository, notifier: EmailNotifier) -> None:
        """Store dependencies used to persist requests and send notifications."""
        self._repository = repository
        self._notifier = notifier

    def submit(self, user: User, settings: Settings) -> ProvisioningOutcome:
        """Record and announce an account request.

        Template loading and address validation errors propagate. Database
        and mail delivery failures are logged and reported in the outcome.
        """
        body = render_template(load_template(settings.template_path), user)
        REQUESTS_TOTAL.inc()

        persisted = True
        try:
            self._repository.record_request(user, settings)
        except PersistenceError as exc:
            persisted = False
            PERSISTENCE_FAILURES_TOTAL.inc()
            logger.warning("failed to record account request: %s", exc)
        else:
            logger.info("Updated database")

        notified = self._notifier.dispatch(user, body, settings)
        if not notified and not settings.debug:
            NOTIFICATION_FAILURES_TOTAL.inc()

        return ProvisioningOutcome(
            user=user,
            persisted=persisted,
            notified=notified,
            debug=settings.debug,
        )
