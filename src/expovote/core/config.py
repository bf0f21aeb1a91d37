from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Votação de Projetos"
    org_name: str = "Feira de Ciências"
    app_env: str = "development"  # development, testing, production
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    base_url: str | None = None  # Public URL embedded in QR codes, e.g. https://votos.example.org

    # Database
    database_url: str = "sqlite+aiosqlite:///./votacao.db"
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_connect_timeout: int = 10  # seconds
    database_command_timeout: int = 30  # seconds

    # Schema bootstrap
    database_auto_create_schema: bool = True
    schema_init_max_attempts: int = 5
    schema_init_retry_delay: float = 5.0  # seconds between attempts

    # Security
    trusted_proxy_ips: list[str] = []  # Peers allowed to set X-Forwarded-For ("*" = any)
    csp: str = (
        "default-src 'self'; "
        "style-src 'self' 'unsafe-inline'; "
        "img-src 'self' data:; "
        "frame-ancestors 'none'"
    )

    # Rate limiting (slowapi syntax)
    vote_rate_limit: str = "30/minute"
    register_rate_limit: str = "20/minute"

    # Metrics
    metrics_api_key: str | None = None  # If set, /metrics requires this key

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip().rstrip("/")
        if not v:
            return None
        if not v.startswith(("http://", "https://")):
            raise ValueError("BASE_URL must start with http:// or https://")
        return v

    @field_validator("schema_init_max_attempts")
    @classmethod
    def validate_attempts(cls, v: int) -> int:
        if v < 1:
            raise ValueError("SCHEMA_INIT_MAX_ATTEMPTS must be at least 1")
        return v

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    return Settings()
