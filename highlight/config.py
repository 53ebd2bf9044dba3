"""Configuration loading and validation."""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from highlight.markup import MarkupStyle, get_style
from highlight.validation import ConfigSchema

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "PROMPT_HIGHLIGHT_CONFIG"


def resolve_config_path(explicit_path: Optional[str] = None) -> Optional[str]:
    """Resolve the config file path: explicit option, then environment."""
    if explicit_path:
        return explicit_path
    return os.environ.get(CONFIG_PATH_ENV) or None


class Config:
    """Configuration management."""

    def __init__(self, config_path: Optional[str] = None):
        """Load configuration from YAML file, or use defaults without one."""
        self.config_path = Path(config_path) if config_path else None
        self.data: Dict[str, Any] = {}

        if self.config_path is not None:
            with open(self.config_path, "r") as f:
                try:
                    # Ensure we always have a dictionary to read from
                    self.data = yaml.safe_load(f) or {}
                except yaml.YAMLError as e:
                    logger.error("Configuration in %s is not valid YAML: %s", self.config_path, e)
                    raise ValueError(f"Invalid configuration: {e}") from e
            logger.info("Loaded configuration from %s", self.config_path)

        self.schema = self._validate(self.data)

    def _validate(self, data: Any) -> ConfigSchema:
        """Validate raw config data against the schema."""
        if not isinstance(data, dict):
            logger.error(
                "Configuration in %s must be a mapping, got %s",
                self.config_path,
                type(data).__name__,
            )
            raise ValueError(
                f"Invalid configuration: expected a mapping, got {type(data).__name__}"
            )
        bad_keys = [key for key in data if not isinstance(key, str)]
        if bad_keys:
            logger.error(
                "Configuration in %s has non-string keys: %s", self.config_path, bad_keys
            )
            raise ValueError(f"Invalid configuration: keys must be strings, got {bad_keys}")
        try:
            return ConfigSchema.model_validate(data)
        except ValidationError as e:
            logger.error("Configuration in %s failed validation: %s", self.config_path, e)
            raise ValueError(f"Invalid configuration: {e}") from e

    # ------------------------------------------------------------------ #
    # Settings
    # ------------------------------------------------------------------ #
    def get_style(self) -> MarkupStyle:
        """Markup style for highlighted regions."""
        return get_style(self.schema.style)

    def get_separator(self) -> str:
        """Text printed between the two highlighted outputs."""
        return self.schema.separator

    def get_strip_whitespace(self) -> bool:
        """Whether inputs are stripped of surrounding whitespace."""
        return self.schema.strip_whitespace

    def get_log_level(self) -> str:
        """Logging level name."""
        return self.schema.log_level
