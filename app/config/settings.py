"""
Configuration management system using Pydantic Settings.
Supports environment-based configuration for different deployment environments.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode
from typing import Annotated, Dict, Any, List
from enum import Enum
import os

# Later files win: .env.<environment> overrides .env
ENV_FILES = (".env", f".env.{os.getenv('ENVIRONMENT', 'development').lower()}")


class Environment(str, Enum):
    """Supported deployment environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class DatabaseSettings(BaseSettings):
    """Database connection configuration"""

    url: str = Field(
        default="sqlite+aiosqlite:///./translations.db",
        description="SQLAlchemy async database URL",
    )
    echo: bool = Field(default=False)
    pool_pre_ping: bool = Field(default=True)
    create_tables_on_startup: bool = Field(
        default=True,
        description="Create missing tables at startup instead of relying on Alembic",
    )

    model_config = {"env_prefix": "DATABASE_", "env_file": ENV_FILES, "extra": "ignore"}


class PaginationSettings(BaseSettings):
    """Defaults and bounds for list endpoints"""

    default_limit: int = Field(default=50, ge=1)
    max_limit: int = Field(default=200, ge=1, le=1000)

    model_config = {"env_prefix": "PAGINATION_", "env_file": ENV_FILES, "extra": "ignore"}


class SecuritySettings(BaseSettings):
    """CORS configuration"""

    cors_origins: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["GET", "POST", "DELETE"]
    )
    cors_allow_headers: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["*"])

    @field_validator('cors_origins', 'cors_allow_methods', 'cors_allow_headers', mode='before')
    @classmethod
    def parse_comma_separated(cls, v):
        """Parse comma separated values from environment variables"""
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v

    model_config = {"env_prefix": "SECURITY_", "env_file": ENV_FILES, "extra": "ignore"}


class Settings(BaseSettings):
    """Main application settings"""

    # Application Configuration
    app_name: str = Field(default="Translation Bookmarks API")
    app_version: str = Field(default="1.0.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=2022, ge=1, le=65535)
    reload: bool = Field(default=False)
    workers: int = Field(default=1, ge=1, le=16)

    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: str = Field(default="json", description="json or text")

    # Nested Settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)
    pagination: PaginationSettings = Field(default_factory=PaginationSettings)

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment setting"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def get_cors_config(self) -> Dict[str, Any]:
        """Get CORS configuration for FastAPI"""
        return {
            "allow_origins": self.security.cors_origins,
            "allow_credentials": self.security.cors_allow_credentials,
            "allow_methods": self.security.cors_allow_methods,
            "allow_headers": self.security.cors_allow_headers,
        }

    model_config = {
        "env_file": ENV_FILES,
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings instance"""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment and files"""
    global settings
    settings = Settings()
    return settings
