"""Runtime settings read from the environment (and an optional .env file)."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import load_dotenv

MEMORY_BACKEND = 'memory'
MONGODB_BACKEND = 'mongodb'
BACKENDS = (MEMORY_BACKEND, MONGODB_BACKEND)


class ConfigError(ValueError):
    """Environment holds an unusable setting."""


@dataclass(frozen=True)
class Settings:
    port: int = 3000
    environment: str = 'development'
    mongo_url: str | None = None
    database_name: str = 'clean-arch-db'
    repository_backend: str = MEMORY_BACKEND
    cors_origins: str = '*'
    log_level: str = 'INFO'

    @property
    def is_production(self) -> bool:
        return self.environment == 'production'

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> 'Settings':
        """Build settings from ``environ`` (defaults to os.environ after loading .env).

        Raises:
            ConfigError: invalid PORT or LOG_LEVEL, unknown USER_REPOSITORY, or mongodb
                backend selected without MONGO_URL
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        raw_port = environ.get('PORT', '3000')
        try:
            port = int(raw_port)
        except ValueError:
            raise ConfigError(f"PORT must be an integer, got {raw_port!r}") from None
        if not 0 < port < 65536:
            raise ConfigError(f"PORT out of range: {port}")

        mongo_url = environ.get('MONGO_URL') or None
        backend = environ.get('USER_REPOSITORY') or (MONGODB_BACKEND if mongo_url else MEMORY_BACKEND)
        backend = backend.strip().lower()
        if backend not in BACKENDS:
            raise ConfigError(f"USER_REPOSITORY must be one of {BACKENDS}, got {backend!r}")
        if backend == MONGODB_BACKEND and not mongo_url:
            raise ConfigError("USER_REPOSITORY=mongodb requires MONGO_URL")

        log_level = environ.get('LOG_LEVEL', 'INFO').strip().upper()
        if log_level not in logging.getLevelNamesMapping():
            raise ConfigError(f"LOG_LEVEL must be a logging level name, got {log_level!r}")

        return cls(
            port=port,
            environment=environ.get('APP_ENV', 'development'),
            mongo_url=mongo_url,
            database_name=environ.get('MONGODB_DATABASE', 'clean-arch-db'),
            repository_backend=backend,
            cors_origins=environ.get('CORS_ORIGINS', '*'),
            log_level=log_level,
        )
