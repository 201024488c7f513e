"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DB_PASSWORD = "aidiq_password"  # noqa: S105


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=5432)
    db_user: str = Field(default="aidiq_user")
    db_password: str = Field(default=DEFAULT_DB_PASSWORD)
    db_name: str = Field(default="aidiq")
    # Full connection string, overrides the DB_* parts when set
    database_url: str | None = Field(default=None)
    create_tables_on_startup: bool = Field(default=False)

    # API
    environment: str = Field(default="development")
    cors_origins: list[str] = Field(default=["*"])
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.is_production:
            if self.database_url is None and self.db_password == DEFAULT_DB_PASSWORD:
                raise ValueError("DB_PASSWORD must be changed in production")
            if "localhost" in self.sqlalchemy_database_url:
                raise ValueError("Database should not use localhost in production")
        return self

    @property
    def sqlalchemy_database_url(self) -> str:
        """Connection string built from the DB_* settings unless DATABASE_URL is set."""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
