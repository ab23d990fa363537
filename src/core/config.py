"""Process configuration, read from environment variables."""

import os
from dataclasses import dataclass, field
from typing import Mapping, Self

DEFAULT_DATABASE_URL = "sqlite:///./canastra.db"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def _as_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {value!r}.")


def _as_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}.") from None


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    host: str = "0.0.0.0"
    port: int = 8080
    log_file: str = "development.log"
    log_level: str = "INFO"
    sql_echo: bool = False
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Build settings from the environment. Missing (or empty) PORT falls back to the default."""
        env = os.environ if environ is None else environ
        defaults = cls()
        port = env.get("PORT") or ""
        return cls(
            database_url=env.get("DATABASE_URL") or defaults.database_url,
            host=env.get("HOST") or defaults.host,
            port=_as_int("PORT", port) if port else defaults.port,
            log_file=env.get("LOG_FILE", defaults.log_file),
            log_level=(env.get("LOG_LEVEL") or defaults.log_level).upper(),
            sql_echo=_as_bool("SQL_ECHO", env.get("SQL_ECHO", "false")),
        )
