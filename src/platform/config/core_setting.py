from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.platform.constant.path import BASE_DIR


_ENV_PATH = BASE_DIR / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (BASE_DIR / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Railway Reservation System'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Debug call tracing + file sink
    LOG_LEVEL: str = 'WARNING'  # Console sink level when DEBUG is off

    # Ticket storage
    RESERVATION_DATA_FILE: Path = BASE_DIR / 'tickets.dat'

    # Seating
    MAX_SEATS: int = 100
    SEATS_PER_ROW: int = 10  # Seat map row width

    @field_validator('MAX_SEATS', 'SEATS_PER_ROW')
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError('must be at least 1')
        return v

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper() if isinstance(v, str) else v


settings = Settings()  # type: ignore
