from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from vision_gateway.constants import (
    DEFAULT_CORS_ORIGINS,
    DEFAULT_CREDENTIALS_PATH,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    MAX_PORT,
)


@dataclass(frozen=True)
class Config:
    credentials_path: Optional[str]
    host: str
    port: int
    log_level: str
    cors_origins: tuple[str, ...]

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        credentials_path = os.getenv("GOOGLE_CREDENTIALS_PATH", DEFAULT_CREDENTIALS_PATH) or None
        host = os.getenv("HOST", DEFAULT_HOST)
        port = os.getenv("PORT", str(DEFAULT_PORT))
        log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
        raw_origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)

        origins = tuple(o.strip() for o in raw_origins.split(",") if o.strip())

        return cls._validate(
            credentials_path=credentials_path,
            host=host,
            port=port,
            log_level=log_level,
            cors_origins=origins,
        )

    @staticmethod
    def _validate(
        credentials_path: Optional[str],
        host: str,
        port: str,
        log_level: str,
        cors_origins: tuple[str, ...],
    ) -> "Config":
        match host:
            case "":
                raise ValueError("HOST must not be empty")
            case _:
                pass

        try:
            port_number = int(port)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {port!r}") from None

        match port_number:
            case n if 0 < n <= MAX_PORT:
                pass
            case _:
                raise ValueError(f"PORT must be between 1 and {MAX_PORT}, got {port_number}")

        return Config(
            credentials_path=credentials_path,
            host=host,
            port=port_number,
            log_level=log_level,
            cors_origins=cors_origins,
        )
