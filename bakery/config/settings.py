from urllib.parse import quote_plus

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration using Pydantic BaseSettings.
    Values are loaded from environment variables and the .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # API Configuration
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Bakery Orders API"
    PROJECT_DESCRIPTION: str = "Order lifecycle, custom cake pricing and discount accounting"
    VERSION: str = "0.1.0"

    # PostgreSQL Database Settings
    DB_HOST: str = Field("localhost", description="PostgreSQL host")
    DB_PORT: int = Field(5432, description="PostgreSQL port")
    DB_NAME: str = Field("bakery", description="Database name")
    DB_USER: str = Field("postgres", description="Database user")
    DB_PASSWORD: str | None = Field(None, description="Database password")
    DB_ECHO: bool = Field(False, description="Log SQL statements (debug only)")

    # Database connection pool settings
    DB_POOL_SIZE: int = Field(20, description="Connection pool size")
    DB_MAX_OVERFLOW: int = Field(30, description="Maximum pool overflow")
    DB_POOL_RECYCLE: int = Field(3600, description="Recycle connections every N seconds")
    DB_POOL_TIMEOUT: int = Field(30, description="Seconds to wait for a pooled connection")

    # JWT Settings (tokens are issued by the external auth service)
    JWT_SECRET_KEY: str = Field(..., description="Secret used to verify access tokens")
    JWT_ALGORITHM: str = Field("HS256", description="JWT signing algorithm")
    ADMIN_ROLE: str = Field("admin", description="Role claim value granting admin access")

    # Business rules
    CURRENCY: str = Field("EGP", description="ISO currency code for all amounts")
    CUSTOM_ORDER_MIN_LEAD_DAYS: int = Field(2, description="Minimum days between submission and cake pickup")

    # Pagination
    DEFAULT_PAGE_SIZE: int = Field(10, description="Default page size for list endpoints")
    MAX_PAGE_SIZE: int = Field(100, description="Upper bound for requested page sizes")

    # Admin notifications
    NOTIFICATION_WEBHOOK_URL: str | None = Field(None, description="Endpoint receiving order notifications")
    NOTIFICATION_RETRY_COUNT: int = Field(3, description="Delivery attempts per notification")
    NOTIFICATION_RETRY_DELAY: float = Field(1.0, description="Seconds between delivery attempts")
    NOTIFICATION_TIMEOUT: float = Field(10.0, description="HTTP timeout for notification delivery")

    # Application Settings
    DEBUG: bool = Field(False, description="Debug mode")
    ENVIRONMENT: str = Field("production", description="Runtime environment")
    LOG_LEVEL: str = Field("INFO", description="Root log level")
    LOG_FORMAT: str = Field("colored", description="colored, json or plain")

    # CORS (JSON list in the environment, e.g. '["https://shop.example.com"]')
    CORS_ORIGINS: list[str] = Field(default_factory=list, description="Allowed origins outside DEBUG")

    # Sentry Configuration
    SENTRY_DSN: str | None = Field(None, description="Sentry DSN for error tracking")

    @field_validator("DB_POOL_SIZE")
    @classmethod
    def validate_pool_size(cls, v):
        if v < 1:
            raise ValueError("DB_POOL_SIZE must be at least 1")
        if v > 100:
            raise ValueError("DB_POOL_SIZE should not exceed 100")
        return v

    @field_validator("CUSTOM_ORDER_MIN_LEAD_DAYS", "NOTIFICATION_RETRY_COUNT")
    @classmethod
    def validate_non_negative(cls, v):
        if v < 0:
            raise ValueError("Value must be 0 or greater")
        return v

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v):
        if v not in ("colored", "json", "plain"):
            raise ValueError("LOG_FORMAT must be one of: colored, json, plain")
        return v

    @field_validator("CURRENCY")
    @classmethod
    def validate_currency(cls, v):
        if len(v) != 3:
            raise ValueError("CURRENCY must be a 3-letter ISO code")
        return v.upper()

    @computed_field
    @property
    def database_url(self) -> str:
        """Synchronous PostgreSQL URL (used by Alembic), credentials URL-encoded."""
        user = quote_plus(self.DB_USER)
        host = f"{self.DB_HOST}:{self.DB_PORT}"
        if self.DB_PASSWORD:
            return f"postgresql://{user}:{quote_plus(self.DB_PASSWORD)}@{host}/{self.DB_NAME}"
        return f"postgresql://{user}@{host}/{self.DB_NAME}"

    @property
    def is_testing(self) -> bool:
        return self.ENVIRONMENT == "test"


# Settings singleton
_settings_instance = None


def get_settings() -> Settings:
    """
    Return the cached settings instance.
    Avoids reading the environment more than once.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
