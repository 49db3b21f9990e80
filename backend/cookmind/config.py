"""
Application configuration.

This module defines the engine and service settings using a Pydantic model
populated from environment variables (optionally loaded from a .env file).
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from typing import Optional
import os
from dotenv import load_dotenv

# Load .env from backend directory (works regardless of cwd when running uvicorn)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=_env_path)


class Settings(BaseModel):
    """
    Engine and API configuration settings.

    Can be configured via environment variables or .env file.
    Environment variable names are uppercase (e.g., LOG_LEVEL).

    Attributes:
        SUBSTITUTION_TABLE_PATH: Optional JSON file replacing the reference table
        FALLBACK_SUGGESTION_TEXT: Display text used when no substitute exists
        MAX_SUGGESTED_MISSING: Missing ingredients enriched with substitutes
        HIGH_MATCH_THRESHOLD: Minimum score for the "high" match level
        QUICK_RECIPE_MAX_MINUTES: Recipes below this prep time count as quick
        LOG_LEVEL: Logging level (DEBUG/INFO/WARNING/ERROR)
    """

    # Substitution table
    SUBSTITUTION_TABLE_PATH: Optional[str] = Field(
        default_factory=lambda: os.getenv("SUBSTITUTION_TABLE_PATH"),
        description="Path to a JSON substitution table (reference table if unset)"
    )

    FALLBACK_SUGGESTION_TEXT: str = Field(
        default_factory=lambda: os.getenv(
            "FALLBACK_SUGGESTION_TEXT", "Geen suggestie beschikbaar"
        ),
        min_length=1,
        description="Display text shown when an ingredient has no substitutes"
    )

    # Matching
    MAX_SUGGESTED_MISSING: int = Field(
        default_factory=lambda: int(os.getenv("MAX_SUGGESTED_MISSING", "2")),
        ge=0,
        le=20,
        description="Number of missing ingredients the API enriches with substitutes"
    )

    HIGH_MATCH_THRESHOLD: int = Field(
        default_factory=lambda: int(os.getenv("HIGH_MATCH_THRESHOLD", "80")),
        ge=1,
        le=99,
        description="Minimum score (exclusive of 100) for a high match"
    )

    # Recipe filters
    QUICK_RECIPE_MAX_MINUTES: int = Field(
        default_factory=lambda: int(os.getenv("QUICK_RECIPE_MAX_MINUTES", "30")),
        ge=1,
        le=600,
        description="Recipes with a shorter prep time count as quick"
    )

    # Logging Configuration
    LOG_LEVEL: str = Field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"),
        description="Logging level (DEBUG/INFO/WARNING/ERROR)"
    )

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"LOG_LEVEL must be one of: {', '.join(valid_levels)}"
            )
        return v_upper

    @field_validator('SUBSTITUTION_TABLE_PATH')
    @classmethod
    def validate_table_path(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty path as unset."""
        if v is not None and not v.strip():
            return None
        return v

    # Env-derived defaults go through the validators above
    model_config = {"validate_default": True}


# Create global settings instance
settings = Settings()


# Configure logging based on settings
def configure_logging():
    """Configure application logging based on settings."""
    import logging

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured at {settings.LOG_LEVEL} level")
    logger.info(
        f"Substitution table: "
        f"{settings.SUBSTITUTION_TABLE_PATH or 'reference table (built-in)'}"
    )


# Initialize logging on import
configure_logging()
