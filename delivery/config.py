"""Service configuration and the object graph built from it."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path

from dotenv import dotenv_values


class ConfigError(Exception):
    """The configuration could not be loaded."""


_UNSET = ""

# Environment names that do not follow the upper-cased field name.
_ENV_OVERRIDES = {"db_ssl_mode": "DB_SSLMODE"}


def _env_key(field_name: str) -> str:
    return _ENV_OVERRIDES.get(field_name, field_name.upper())


@dataclass(frozen=True)
class Config:
    """Settings for the service; unset values are empty strings."""

    http_port: str = _UNSET
    db_host: str = _UNSET
    db_port: str = _UNSET
    db_user: str = _UNSET
    db_password: str = _UNSET
    db_name: str = _UNSET
    db_ssl_mode: str = _UNSET
    geo_service_grpc_host: str = _UNSET
    kafka_host: str = _UNSET
    kafka_consumer_group: str = _UNSET
    kafka_basket_confirmed_topic: str = _UNSET
    kafka_order_changed_topic: str = _UNSET

    @classmethod
    def from_env(cls, env_file: str | os.PathLike[str] = ".env") -> Config:
        """Load settings from ``env_file``; process environment variables win."""
        path = Path(env_file)
        if not path.is_file():
            raise ConfigError(f"error loading {path} file")
        try:
            file_values = dotenv_values(path)
        except OSError as exc:
            raise ConfigError(f"error loading {path} file") from exc

        def lookup(key: str) -> str:
            if key in os.environ:
                return os.environ[key]
            return file_values.get(key) or _UNSET

        return cls(**{f.name: lookup(_env_key(f.name)) for f in fields(cls)})


@dataclass(frozen=True)
class CompositionRoot:
    """Holds the application's shared dependencies."""

    config: Config