import json
from pathlib import Path
from typing import Annotated, List

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'EventPass'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Security
    SECRET_KEY: SecretStr = SecretStr('test_secret_key_change_in_production')
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7
    ALGORITHM: str = 'HS256'
    BCRYPT_ROUNDS: int = 12

    # CORS
    FRONTEND_URL: str = 'http://localhost:3000'
    # NoDecode: comma strings reach the validator raw instead of being JSON-parsed
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = ['http://localhost:3000']

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and v.startswith('['):
            return json.loads(v)
        if isinstance(v, str):
            return [i.strip() for i in v.split(',') if i.strip()]
        if isinstance(v, list):
            return v
        return []

    # PostgreSQL (any SQLAlchemy async URL works, e.g. sqlite+aiosqlite:///./eventpass.db)
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = 'eventpass'
    DATABASE_URL: str | None = None

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f'postgresql+asyncpg://{self.POSTGRES_USER}:'
            f'{self.POSTGRES_PASSWORD.get_secret_value()}@{self.POSTGRES_SERVER}:'
            f'{self.POSTGRES_PORT}/{self.POSTGRES_DB}'
        )

    # Connection pool (ignored for SQLite)
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: int = 10
    DB_POOL_RECYCLE: int = 1800
    DB_POOL_PRE_PING: bool = True
    SQLITE_BUSY_TIMEOUT: float = 30.0

    # Upper bound for a single reserve / cancel / check-in round against the store
    LEDGER_TIMEOUT_SECONDS: float = 10.0

    # SMTP (ticket emails are skipped when SMTP_USER / SMTP_PASSWORD are empty)
    SMTP_HOST: str = 'smtp.gmail.com'
    SMTP_PORT: int = 587
    SMTP_START_TLS: bool = True
    SMTP_USER: str = ''
    SMTP_PASSWORD: SecretStr = SecretStr('')
    MAIL_FROM_NAME: str = 'Event App'


settings = Settings()  # type: ignore
