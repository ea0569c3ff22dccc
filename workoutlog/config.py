import os
import re
from dataclasses import dataclass
from typing import Optional

DEFAULT_DATABASE_URL = 'postgresql://localhost/workoutlog'
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = 'INFO'

# Hosted Postgres clusters only accept encrypted connections
SSL_HOST_PATTERN = re.compile(r'clusters\.zeabur\.com', re.IGNORECASE)


def ssl_required(database_url, flag=None):
    """Decide whether the store connection must be encrypted.

    SSL is on when DATABASE_SSL is explicitly "true" or when the
    connection string points at a known hosted cluster.
    """
    if flag is not None and flag.strip().lower() == 'true':
        return True
    return bool(SSL_HOST_PATTERN.search(database_url or ''))


def normalize_database_url(url):
    # SQLAlchemy no longer accepts the postgres:// alias
    if url.startswith('postgres://'):
        return 'postgresql://' + url[len('postgres://'):]
    return url


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    database_ssl: bool = False
    frontend_origin: Optional[str] = None
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ

        database_url = normalize_database_url(environ.get('DATABASE_URL') or DEFAULT_DATABASE_URL)
        port = environ.get('PORT') or DEFAULT_PORT
        try:
            port = int(port)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {port!r}")

        return cls(
            database_url=database_url,
            database_ssl=ssl_required(database_url, environ.get('DATABASE_SSL')),
            frontend_origin=environ.get('FRONTEND_ORIGIN') or None,
            port=port,
            log_level=(environ.get('LOG_LEVEL') or DEFAULT_LOG_LEVEL).upper(),
        )

    def engine_options(self):
        """Keyword arguments for SQLAlchemy's create_engine."""
        if self.database_ssl:
            return {'connect_args': {'sslmode': 'require'}}
        return {}
