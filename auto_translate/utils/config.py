"""
Configuration Loader - Load YAML configuration files into settings models
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, List
from functools import lru_cache

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..errors import ConfigurationError
from ..models import LocaleSet

SETTINGS_FILE = "auto_translate"
CONFIG_DIR_ENV = "AUTO_TRANSLATE_CONFIG_DIR"


# =============================================================================
# Settings models
# =============================================================================

class QueueSettings(BaseModel):
    """Queued vs inline translation on save"""
    enabled: bool = True
    name: str = "translations"
    concurrency: int = Field(default=2, ge=1)


class TranslatorSettings(BaseModel):
    """Translation provider and credential lookup"""
    provider: str = Field(default="deepl", description="deepl or echo")
    api_key: Optional[str] = None
    api_key_env: Optional[str] = "DEEPL_AUTH_KEY"
    ssm_parameter: Optional[str] = None
    aws_region: Optional[str] = None
    target_overrides: Dict[str, str] = Field(
        default_factory=lambda: {"en": "EN-US"},
        description="Locale -> provider target code for codes the API rejects"
    )


class LoggingSettings(BaseModel):
    """Dedicated translation log file"""
    file: Optional[str] = "logs/translation-service.log"
    level: str = "INFO"


class AutoTranslateSettings(BaseModel):
    """Top-level settings (config/auto_translate.yaml)"""
    default_source_locale: str = "en"
    supported_locales: List[str] = Field(default_factory=lambda: ["en"])
    slug_fields: List[str] = Field(default_factory=lambda: ["slug"])
    queue: QueueSettings = Field(default_factory=QueueSettings)
    translator: TranslatorSettings = Field(default_factory=TranslatorSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("supported_locales")
    @classmethod
    def _check_locales(cls, value: List[str]) -> List[str]:
        try:
            return LocaleSet(locales=value).locales
        except ValidationError as e:
            raise ValueError(e.errors()[0]["msg"]) from e

    def locale_set(self) -> LocaleSet:
        return LocaleSet(locales=self.supported_locales)


# =============================================================================
# Loader
# =============================================================================

class ConfigLoader:
    """
    Loader for YAML configuration files.

    Usage:
        config = ConfigLoader()
        raw = config.load("auto_translate")
        settings = config.get_settings()
    """

    def __init__(self, config_dir: Optional[str] = None):
        """
        Initialize the config loader.

        Args:
            config_dir: Path to config directory.
                        Defaults to $AUTO_TRANSLATE_CONFIG_DIR, then config/
                        at project root.
        """
        if config_dir is None:
            config_dir = os.getenv(CONFIG_DIR_ENV)
        if config_dir is None:
            base_dir = Path(__file__).parent.parent.parent
            self.config_dir = base_dir / "config"
        else:
            self.config_dir = Path(config_dir)

    @lru_cache(maxsize=32)
    def load(self, name: str) -> Dict[str, Any]:
        """
        Load a configuration file by name.

        Args:
            name: Config file name (without .yaml extension)

        Returns:
            Parsed configuration dict

        Raises:
            FileNotFoundError: If config file not found
            ConfigurationError: If the file is not a YAML mapping
        """
        candidates = [
            self.config_dir / f"{name}.yaml",
            self.config_dir / f"{name}.yml",
            self.config_dir / name,
        ]

        for path in candidates:
            if path.is_file():
                with open(path, "r", encoding="utf-8") as f:
                    try:
                        data = yaml.safe_load(f)
                    except yaml.YAMLError as e:
                        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
                if data is None:
                    return {}
                if not isinstance(data, dict):
                    raise ConfigurationError(f"Config file {path} must contain a mapping")
                return data

        raise FileNotFoundError(
            f"Config file '{name}' not found in {self.config_dir}"
        )

    def get_settings(self) -> AutoTranslateSettings:
        """
        Load and validate the add-on settings.

        A missing settings file yields the built-in defaults.

        Raises:
            ConfigurationError: If the file content does not validate
        """
        try:
            raw = self.load(SETTINGS_FILE)
        except FileNotFoundError:
            raw = {}

        try:
            return AutoTranslateSettings(**raw)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid auto-translate settings: {e}") from e

    def clear_cache(self):
        """Clear the config cache"""
        self.load.cache_clear()


# Singleton instance
_default_loader: Optional[ConfigLoader] = None


def get_config_loader(config_dir: Optional[str] = None) -> ConfigLoader:
    """Get or create the default config loader singleton"""
    global _default_loader
    if _default_loader is None:
        _default_loader = ConfigLoader(config_dir)
    return _default_loader


def get_config(name: str) -> Dict[str, Any]:
    """Convenience function to load a config file"""
    loader = get_config_loader()
    return loader.load(name)


def get_settings() -> AutoTranslateSettings:
    """Convenience function to get validated settings"""
    loader = get_config_loader()
    return loader.get_settings()
