"""Database repository for Grafana account requests."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable

import psycopg

from .config import Settings
from .domain.user import User

logger = logging.getLogger(__name__)

CREATE_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS grafana (
        id      SERIAL PRIMARY KEY,
        first   TEXT NOT NULL,
        last    TEXT NOT NULL,
        org     TEXT NOT NULL,
        email   TEXT NOT NULL,
        date    DATE NOT NULL
    )
"""

INSERT_REQUEST_SQL = """
    INSERT INTO grafana (first, last, org, email, date)
    VALUES (%s, %s, %s, %s, %s)
"""


class PersistenceError(RuntimeError):
    """Raised when an account request could not be written to the database."""


class AccountRequestRepository:
    """Postgres-backed store that appends one row per account request."""

    def __init__(self, connect: Callable[..., Any] = psycopg.connect) -> None:
        """Store the connection factory used to open one connection per request."""
        self._connect = connect

    def record_request(self, user: User, settings: Settings) -> None:
        """Ensure the ``grafana`` table exists and insert the request.

        Both statements run in autocommit mode, so a failed insert leaves an
        already created table in place. Any driver error is re-raised as
        :class:`PersistenceError`.
        """
        try:
            with self._connect(settings.conninfo(), autocommit=True) as conn:
                logger.info("Creating table if not exists")
                conn.execute(CREATE_TABLE_SQL)

                logger.info(
                    "Creating record: %s, %s, %s, %s",
                    user.first_name,
                    user.last_name,
                    user.org_name,
                    user.email_address,
                )
                conn.execute(
                    INSERT_REQUEST_SQL,
                    (
                        user.first_name,
                        user.last_name,
                        user.org_name,
                        user.email_address,
                        date.today(),
                    ),
                )
        except psycopg.Error as exc:
            raise PersistenceError(str(exc)) from exc
