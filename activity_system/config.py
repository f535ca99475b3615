"""Configuration management for the Programming Activity System."""
import os
from pathlib import Path
from typing import Any, Dict, Optional
import yaml
from dotenv import load_dotenv
from activity_system.activities.student_info import StudentProfile
from activity_system.utils.errors import ConfigurationError
from activity_system.utils.logging import setup_logging
from activity_system.utils.paths import resolve_project_path
import logging

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "config.yaml"


class Config:
    """Application configuration.

    Exchange rates and the transaction fee are fixed constants of
    ``activity_system.exchange`` and are never read from here.
    """

    def __init__(self, config_path: str = DEFAULT_CONFIG_FILE, required: bool = True):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML configuration file
            required: Raise if the file is missing instead of using defaults
        """
        self.config_path = Path(config_path)
        self.required = required
        self._config: Dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        """Load configuration from YAML and environment."""
        load_dotenv()

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    self._config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e

            if not self._config:
                raise ConfigurationError(f"Empty configuration file: {self.config_path}")
            if not isinstance(self._config, dict):
                raise ConfigurationError(f"Configuration root must be a mapping: {self.config_path}")
        elif self.required:
            raise ConfigurationError(f"Config file not found: {self.config_path}")

        self._validate()

        log_config = self._config.get('logging', {}) or {}
        setup_logging(
            level=os.getenv('LOG_LEVEL', log_config.get('level', 'WARNING')),
            log_file=log_config.get('file'),
            format_type=log_config.get('format', 'text'),
            enabled=log_config.get('enabled', True)
        )

        logger.info("Configuration loaded", extra={"activity": "config"})

    def _validate(self) -> None:
        """Validate the optional configuration sections."""
        for section in ('app', 'logging', 'ui', 'student'):
            value = self._config.get(section)
            if value is not None and not isinstance(value, dict):
                raise ConfigurationError(f"Config section '{section}' must be a mapping")

        width = self.get('ui.line_width')
        if width is not None and (not isinstance(width, int) or width < 1):
            raise ConfigurationError("ui.line_width must be a positive integer")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-separated key.

        Args:
            key: Dot-separated key (e.g., "logging.level")
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def app_name(self) -> str:
        """Get application name."""
        return self.get('app.name', 'Programming Activity System')

    @property
    def app_version(self) -> str:
        """Get application version."""
        return self.get('app.version', '0.1.0')

    @property
    def debug(self) -> bool:
        """Get debug mode."""
        return self.get('app.debug', False)

    @property
    def line_width(self) -> int:
        """Width of the dashed separator lines."""
        return self.get('ui.line_width', 45)

    @property
    def student_profile(self) -> StudentProfile:
        """Student shown by the info activity, with config overrides applied."""
        overrides = self.get('student', {}) or {}
        unknown = set(overrides) - set(StudentProfile.__dataclass_fields__)
        if unknown:
            raise ConfigurationError(f"Unknown student fields: {', '.join(sorted(unknown))}")
        return StudentProfile(**overrides)


# Global config instance
_config: Optional[Config] = None


def load_config(config_path: Optional[str] = None) -> Config:
    """Load and return global configuration instance.

    Without an explicit path, ``config.yaml`` at the project root is used
    when present and built-in defaults otherwise.
    """
    global _config
    if _config is None:
        if config_path is None:
            _config = Config(str(resolve_project_path(DEFAULT_CONFIG_FILE)), required=False)
        else:
            _config = Config(config_path)
    return _config


def get_config() -> Config:
    """Get global configuration instance."""
    if _config is None:
        raise ConfigurationError("Configuration not loaded. Call load_config() first.")
    return _config


def reset_config() -> None:
    """Forget the global configuration instance."""
    global _config
    _config = None
