"""Configuration validation using Pydantic models."""
from pydantic import BaseModel, field_validator

from highlight.markup import DEFAULT_STYLE, STYLES

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigSchema(BaseModel):
    """Root configuration schema."""
    style: str = DEFAULT_STYLE
    separator: str = "\n"
    strip_whitespace: bool = True
    log_level: str = "WARNING"

    @field_validator("style")
    @classmethod
    def validate_style(cls, v: str) -> str:
        """Validate the markup style is a known preset."""
        if v not in STYLES:
            known = ", ".join(sorted(STYLES))
            raise ValueError(f"Unknown markup style '{v}'. Choose one of: {known}")
        return v

    @field_validator("separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Validate separator is not empty."""
        if not v:
            raise ValueError("separator must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name, normalized to upper case."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level '{v}'. Must be one of: {', '.join(sorted(LOG_LEVELS))}"
            )
        return level
