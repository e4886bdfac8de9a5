"""
Settings configuration for Alfred Ops.

Configuration for the operational scripts, loaded with Pydantic settings from
the environment and an optional .env file.
"""

from pathlib import Path
from typing import Any, Optional
from enum import Enum
from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environment, read from NODE_ENV."""
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TEST = "test"


class LogLevel(str, Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


DEFAULT_ALFRED_BASE_URL = "https://alfred-server-production.up.railway.app"


class Settings(BaseSettings):
    """Application settings with validation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    # ============================================
    # Application Settings
    # ============================================
    node_env: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)

    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_file: Optional[Path] = Field(default=None)
    log_max_size: int = Field(default=10485760)  # 10MB
    log_backup_count: int = Field(default=5)
    log_colors: bool = Field(default=True)

    # ============================================
    # Database Configuration
    # ============================================
    # Kept as a raw string: malformed URLs must fail inside database setup
    database_url: Optional[str] = Field(default=None)
    database_ssl: bool = Field(default=True)
    database_echo: bool = Field(default=False)
    sqlite_storage: Path = Field(default=Path("./data/alfred.db"))

    # ============================================
    # Server Secrets
    # ============================================
    jwt_secret: Optional[SecretStr] = Field(default=None)
    owner_setup_key: Optional[SecretStr] = Field(default=None)

    # ============================================
    # Alfred MCP Server API
    # ============================================
    alfred_base_url: str = Field(default=DEFAULT_ALFRED_BASE_URL)
    alfred_email: Optional[str] = Field(default=None)
    alfred_password: Optional[SecretStr] = Field(default=None)
    alfred_request_timeout: float = Field(default=30.0)

    # Debug trigger
    debug_client_name: str = Field(default="debug-test")
    debug_message: str = Field(default="Hello, this is a test message for debug logging.")

    # ============================================
    # Validators
    # ============================================
    @field_validator("node_env", mode="before")
    @classmethod
    def parse_node_env(cls, v: Any) -> Any:
        """Anything other than production or test behaves as development."""
        if isinstance(v, Environment):
            return v
        value = str(v or "").strip().lower()
        if value in {env.value for env in Environment}:
            return value
        return Environment.DEVELOPMENT

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("database_url", "alfred_email", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.node_env == Environment.PRODUCTION

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.node_env == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """Check if running under the test suite."""
        return self.node_env == Environment.TEST

    @property
    def has_alfred_credentials(self) -> bool:
        return bool(self.alfred_email and self.alfred_password and self.alfred_password.get_secret_value())


# Create global settings instance
settings = Settings()
