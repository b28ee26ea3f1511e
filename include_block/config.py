"""Configuration management for include-block."""

import logging
import logging.handlers
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

logger = logging.getLogger(__name__)


class IncludeConfig(BaseSettings):
    """Block inclusion configuration."""

    model_config = SettingsConfigDict(env_prefix="INCLUDE_", extra="allow")

    root: str | None = Field(
        default=None,
        description="Directory root-relative paths resolve against (default: current directory)",
    )
    encoding: str = Field(default="utf-8", description="Encoding used to read source documents")
    default_dialect: str | None = Field(
        default=None, description="Dialect used when a file extension is not recognized"
    )

    @property
    def root_path(self) -> Path:
        """Get the root directory as a path."""
        return Path(self.root) if self.root else Path.cwd()


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_", extra="allow")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str | None = None
    max_size: int = 10485760  # 10MB
    backup_count: int = 5


class Settings(BaseSettings):
    """Main application settings."""

    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
        validate_assignment=True,
    )

    def __init__(self, **kwargs: Any) -> None:
        """Initialize settings with sub-configurations."""
        super().__init__(**kwargs)

        self.include = IncludeConfig()
        self.logging = LoggingConfig()

        if self.debug:
            self.logging.level = "DEBUG"

    def setup_logging(self) -> None:
        """Configure logging based on settings."""
        log_level = getattr(logging, self.logging.level.upper(), logging.WARNING)

        # Create logs directory if needed
        if self.logging.file:
            log_dir = Path(self.logging.file).parent
            log_dir.mkdir(parents=True, exist_ok=True)

        logging.basicConfig(
            level=log_level,
            format=self.logging.format,
            handlers=[
                logging.StreamHandler(),
                logging.handlers.RotatingFileHandler(
                    self.logging.file,
                    maxBytes=self.logging.max_size,
                    backupCount=self.logging.backup_count,
                )
                if self.logging.file
                else logging.NullHandler(),
            ],
        )


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the global settings instance so the next call re-reads the environment."""
    global _settings
    _settings = None
