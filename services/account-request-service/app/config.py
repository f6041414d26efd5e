from __future__ import annotations

from dataclasses import dataclass, field
import os

from psycopg.conninfo import make_conninfo


def _env(name: str, default: str) -> str:
    return os.environ.get(name, default)


def _env_list(name: str, default: str) -> list[str]:
    return [item.strip() for item in _env(name, default).split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    """Runtime configuration values resolved from the process environment.

    Every field is read when the instance is constructed, so a new ``Settings``
    always reflects the current environment.
    """

    app_name: str = "account-request-service"
    version: str = "0.1.0"
    debug: bool = field(default_factory=lambda: _env("DEBUG", "False") != "False")
    email_cc: str = field(
        default_factory=lambda: _env("EMAILCC", "SOCOM.CDO.Engineers.DL@socom.mil")
    )
    email_from_name: str = "CDAO Infra Team"
    email_from_address: str = "SOCOM.CDO.Engineers.DL@socom.mil"
    email_subject: str = "CDAO Grafana Account Request"
    template_path: str = field(default_factory=lambda: _env("EMAIL_TEMPLATE", "email.tmpl"))
    smtp_host: str = field(default_factory=lambda: _env("SMTP_HOST", "localhost"))
    smtp_port: int = field(default_factory=lambda: int(_env("SMTP_PORT", "465")))
    psql_user: str = field(default_factory=lambda: _env("PSQLUSER", "postgres"))
    psql_password: str = field(default_factory=lambda: _env("PSQLPW", "password"))
    psql_host: str = field(default_factory=lambda: _env("PSQLHOST", "localhost"))
    psql_dbname: str = field(default_factory=lambda: _env("PSQLDBNAME", "rfs"))
    http_host: str = field(default_factory=lambda: _env("HTTP_HOST", "127.0.0.1"))
    http_port: int = field(default_factory=lambda: int(_env("HTTP_PORT", "3001")))
    cors_origins: list[str] = field(
        default_factory=lambda: _env_list("CORS_ORIGINS", "http://localhost:4200")
    )
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO").upper())

    def conninfo(self) -> str:
        """Return the libpq connection string for the request database."""
        return make_conninfo(
            user=self.psql_user,
            password=self.psql_password,
            host=self.psql_host,
            dbname=self.psql_dbname,
        )


def get_settings() -> Settings:
    """Resolve a fresh Settings instance from the current environment."""
    return Settings()
