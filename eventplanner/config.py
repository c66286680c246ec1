"""
Application configuration

Settings come from environment variables, with a .env file in the current
working directory loaded first.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_PORT = 3000


def _flag(value, default=True):
    """Interpret an environment flag; only the literal 'false' switches it off"""
    if value is None or value == '':
        return default
    return value.strip().lower() != 'false'


@dataclass(frozen=True)
class Config:
    """Process-wide settings, built once at startup"""
    database_url: str = ''
    database_ssl: bool = True
    port: int = DEFAULT_PORT
    admin_token: str = ''
    secret_key: str = 'dev-secret-key-change-in-production'
    seed_data: bool = True
    log_level: str = 'INFO'

    @classmethod
    def from_env(cls, environ=None):
        """Build a Config from the environment (and .env when reading os.environ)"""
        if environ is None:
            # Only the working directory's .env, never a parent's
            load_dotenv(dotenv_path=os.path.join(os.getcwd(), '.env'))
            environ = os.environ

        port = environ.get('PORT', '')
        return cls(
            database_url=environ.get('DATABASE_URL', ''),
            database_ssl=_flag(environ.get('DATABASE_SSL')),
            port=int(port) if port.strip() else DEFAULT_PORT,
            admin_token=environ.get('ADMIN_TOKEN', ''),
            secret_key=environ.get('SECRET_KEY') or cls.secret_key,
            seed_data=_flag(environ.get('SEED_DATA')),
            log_level=environ.get('LOG_LEVEL', 'INFO').upper(),
        )

    @property
    def admin_enabled(self):
        return bool(self.admin_token)
