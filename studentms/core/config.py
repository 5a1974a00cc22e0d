from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Every value has a default, so the console app runs without any
    environment. Overrides come from a .env file or STUDENTMS_* variables.
    """

    # =============================================================================
    # APPLICATION
    # =============================================================================
    PROJECT_NAME: str = "Student Management System"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # =============================================================================
    # SQLITE DATABASE
    # =============================================================================
    DB_PATH: str = "school.db"

    # Database URL - set directly or built from DB_PATH
    DATABASE_URL: Optional[str] = Field(default=None, validate_default=True)

    DB_ECHO_SQL: bool = False
    SEED_ON_FIRST_RUN: bool = True

    # =============================================================================
    # LOGGING
    # =============================================================================
    LOG_LEVEL: str = "WARNING"

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def build_database_url(cls, v: Optional[str], info) -> str:
        """
        Build DATABASE_URL from DB_PATH if not provided.

        Priority:
        1. Use DATABASE_URL if explicitly set
        2. Build a SQLite URL from DB_PATH
        """
        if isinstance(v, str) and v:
            return v

        path = info.data.get("DB_PATH") or "school.db"
        return f"sqlite:///{path}"

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    model_config = SettingsConfigDict(
        env_prefix="STUDENTMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


# Create global settings instance
settings = Settings()


# Helper function to display current config (for debugging)
def print_config(current: Optional[Settings] = None):
    """Print current configuration."""
    current = current or settings
    print("=" * 80)
    print("CURRENT CONFIGURATION")
    print("=" * 80)
    print(f"Project Name: {current.PROJECT_NAME}")
    print(f"Version: {current.APP_VERSION}")
    print(f"Debug Mode: {current.DEBUG}")
    print("-" * 80)
    print(f"Database URL: {current.DATABASE_URL}")
    print(f"Echo SQL: {current.DB_ECHO_SQL}")
    print(f"Seed On First Run: {current.SEED_ON_FIRST_RUN}")
    print(f"Log Level: {current.LOG_LEVEL}")
    print("=" * 80)


if __name__ == "__main__":
    # Test config loading
    print_config()
