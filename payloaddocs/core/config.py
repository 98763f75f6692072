"""Application configuration using Pydantic v2 Settings.

Centralized configuration that loads from environment variables
and provides type-safe access throughout the application.
"""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Snippet output
    output_dir: Path = Field(
        default=Path("./build/generated-snippets"),
        description="Directory generated snippets are written to.",
    )
    template_dir: Path | None = Field(
        default=None,
        description="Optional directory with snippet template overrides.",
    )
    template_format: str = Field(
        default="asciidoctor",
        description="Snippet template format: 'asciidoctor' or 'markdown'.",
    )

    # Payloads
    default_content_type: str = Field(
        default="application/json",
        description="Content type assumed for payloads that declare none.",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR.",
    )
    log_dir: Path | None = Field(
        default=None,
        description="Optional directory for info.log and error.log files.",
    )

    @field_validator("output_dir")
    @classmethod
    def ensure_output_dir(cls, v: Path) -> Path:
        """Ensure the snippet output directory exists."""
        v.mkdir(parents=True, exist_ok=True)
        return v.resolve()

    @field_validator("template_format")
    @classmethod
    def validate_template_format(cls, v: str) -> str:
        """Normalize and check the template format."""
        v = v.lower()
        if v not in {"asciidoctor", "markdown"}:
            raise ValueError(f"Unknown template format: {v}. Valid options: 'asciidoctor', 'markdown'")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        return v.upper()

    def configure_logging(self) -> None:
        """Configure global logging based on settings."""
        import structlog

        level = getattr(logging, self.log_level, logging.INFO)

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=level,
        )

        logger.setLevel(level)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global Settings instance.

    Returns:
        The singleton Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        _settings.configure_logging()
    return _settings
