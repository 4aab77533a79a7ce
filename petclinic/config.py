"""
Configuration management for the PetClinic persistence layer.

Loads and validates environment variables for the application.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables or a .env file.
    """

    # Service Configuration
    APP_NAME: str = "PetClinic"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./petclinic.db"
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_PRE_PING: bool = True
    DB_ECHO: bool = False

    # Queries slower than this are logged as warnings
    QUERY_LOG_THRESHOLD_MS: int = 100

    # Load the sample owners/pets/vets when the schema is created
    SEED_SAMPLE_DATA: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    def is_sqlite(self) -> bool:
        """Check whether the configured store is SQLite."""
        return self.DATABASE_URL.startswith("sqlite")


# Global settings instance
settings = Settings()
