"""Notification template loading and placeholder substitution."""

from __future__ import annotations

from pathlib import Path

from .domain.user import User


def load_template(path: str | Path) -> str:
    """Read the notification template from disk.

    The path is resolved against the process working directory. A missing or
    unreadable file raises ``OSError``; callers are not expected to recover.
    """
    return Path(path).read_text(encoding="utf-8")


def render_template(template: str, user: User) -> str:
    """Substitute the ``{first}`` and ``{last}`` placeholders with the user's names.

    Values are inserted verbatim without HTML escaping. ``{org}`` and
    ``{email}`` are left in place.
    """
    rendered = template.replace("{first}", user.first_name)
    return rendered.replace("{last}", user.last_name)
