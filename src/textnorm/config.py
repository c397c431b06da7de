"""
Configuration management for textnorm.

This module provides configuration loading, validation, and management
for the text cleaning and keyword extraction components.
"""

import logging
import yaml
from pathlib import Path
from typing import Dict, Optional, Any
from pydantic import BaseModel, Field, ConfigDict

logger = logging.getLogger(__name__)


class BaseConfig(BaseModel):
    """Base configuration class with common validation."""

    model_config = ConfigDict(
        extra="forbid",  # Don't allow extra fields
        validate_assignment=True
    )


class PlainTextConfig(BaseConfig):
    """Configuration for HTML to plain text conversion."""
    preserve_line_breaks: bool = False
    line_break_replacement: str = Field(default="<br />", min_length=1)


class KeywordConfig(BaseConfig):
    """Configuration for keyword extraction."""
    min_length: int = Field(default=4, ge=0)


class TextConfig(BaseConfig):
    """Main textnorm configuration."""
    plain_text: PlainTextConfig = Field(default_factory=PlainTextConfig)
    keywords: KeywordConfig = Field(default_factory=KeywordConfig)


class ConfigManager:
    """
    Configuration manager for loading and validating YAML configurations.

    Loads the textnorm configuration file from a directory and caches the
    validated configuration object.
    """

    def __init__(self, config_dir: str = "configs"):
        """
        Initialize ConfigManager.

        Args:
            config_dir: Directory containing configuration files
        """
        self.config_dir = Path(config_dir)
        self._configs: Dict[str, Any] = {}

        if not self.config_dir.exists():
            raise FileNotFoundError(f"Configuration directory not found: {config_dir}")

    def load_text_config(self, config_file: str = "textnorm.yaml") -> TextConfig:
        """
        Load and validate the textnorm configuration.

        Args:
            config_file: Configuration file name

        Returns:
            Validated TextConfig object

        Raises:
            ValueError: If configuration is invalid
        """
        config_path = self.config_dir / config_file

        if not config_path.exists():
            logger.warning(f"Config file {config_path} not found, using defaults")
            default_config = TextConfig()
            self._save_config(config_path, default_config.model_dump())
            self._configs['text'] = default_config
            return default_config

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f)

            if not config_data:
                config_data = {}

            # Extract textnorm section if it exists
            if 'textnorm' in config_data:
                config_data = config_data['textnorm']

            text_config = TextConfig(**config_data)
            self._configs['text'] = text_config

            return text_config

        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_file}: {e}")
        except Exception as e:
            raise ValueError(f"Error loading textnorm config: {e}")

    def _save_config(self, config_path: Path, config_data: Dict[str, Any]) -> None:
        """Save configuration to file."""
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, 'w', encoding='utf-8') as f:
                yaml.dump(config_data, f, default_flow_style=False, indent=2, allow_unicode=True)
        except OSError as e:
            logger.warning(f"Could not save default config to {config_path}: {e}")

    def get_config(self, config_key: str) -> Optional[Any]:
        """Get cached configuration by key."""
        return self._configs.get(config_key)

    def get_section(self, section_name: str) -> Optional[BaseConfig]:
        """
        Get a configuration section such as 'keywords' or 'plain_text'.

        Args:
            section_name: Name of the configuration section

        Returns:
            Section configuration object or None if not found
        """
        text_config = self.get_config('text')
        if not text_config:
            text_config = self.load_text_config()

        return getattr(text_config, section_name, None)


def load_config(config_dir: str = "configs") -> ConfigManager:
    """
    Convenience function to create and return a ConfigManager.

    Args:
        config_dir: Directory containing configuration files

    Returns:
        Initialized ConfigManager instance
    """
    return ConfigManager(config_dir)


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_dir: str = "configs") -> ConfigManager:
    """
    Get global ConfigManager instance (singleton pattern).

    Args:
        config_dir: Directory containing configuration files

    Returns:
        Global ConfigManager instance
    """
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager(config_dir)
    return _config_manager
