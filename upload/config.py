"""
Upload Configuration Handler

Manages the optional YAML file overriding upload retry/timeout settings.
Provides defaults and validation.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from config.settings import (
    MAX_NO_PROGRESS_RETRIES,
    RETRY_BACKOFF_BASE_SECONDS,
    RETRY_BACKOFF_MAX_SECONDS,
    UPLOAD_CONFIG_PATH,
    UPLOAD_TIMEOUT,
)


class UploadConfig:
    """
    Upload configuration with YAML file support.

    Reads from config/upload.yaml if it exists,
    otherwise uses defaults from config/settings.py.

    Usage:
        config = UploadConfig()
        retries = config.max_no_progress_retries
        deadline = config.upload_timeout_seconds
    """

    DEFAULT_CONFIG_PATH = UPLOAD_CONFIG_PATH

    def __init__(
        self,
        config_path: Optional[Path] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML config file (None = use default)
            overrides: Values applied on top of file and defaults (tests, CLI flags)
        """
        self.logger = logging.getLogger(__name__)
        self.config_path = Path(config_path or self.DEFAULT_CONFIG_PATH)
        self._overrides = dict(overrides or {})

        # Load configuration (defaults + file + overrides)
        self._config = self._load_config()

        self.logger.debug(f"Upload config loaded ({self.config_path})")

    def _get_defaults(self) -> Dict[str, Any]:
        """Get default configuration values from settings"""
        return {
            # Deadline
            "upload_timeout_seconds": UPLOAD_TIMEOUT,

            # Retry policy
            "max_no_progress_retries": MAX_NO_PROGRESS_RETRIES,
            "retry_backoff_base_seconds": RETRY_BACKOFF_BASE_SECONDS,
            "retry_backoff_max_seconds": RETRY_BACKOFF_MAX_SECONDS,
        }

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file or use defaults"""
        config = self._get_defaults()

        if self.config_path.exists():
            try:
                with open(self.config_path, "r") as f:
                    file_config = yaml.safe_load(f) or {}

                if isinstance(file_config, dict):
                    # File overrides defaults
                    config.update(self._usable_values(file_config))
                    self.logger.info(f"Loaded upload config from {self.config_path}")
                else:
                    self.logger.warning(
                        f"Ignoring {self.config_path}: expected a mapping, "
                        f"got {type(file_config).__name__}. Using defaults."
                    )

            except (OSError, yaml.YAMLError) as e:
                self.logger.warning(
                    f"Failed to load config from {self.config_path}: {e}. "
                    f"Using defaults."
                )
        else:
            self.logger.debug(
                f"Config file not found at {self.config_path}. Using defaults."
            )

        config.update(self._overrides)

        self._validate_config(config)

        return config

    @staticmethod
    def _is_number(value: Any) -> bool:
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    def _usable_values(self, file_config: Dict[str, Any]) -> Dict[str, Any]:
        """Drop file entries that are not numbers"""
        usable = {}
        for key, value in file_config.items():
            if self._is_number(value):
                usable[key] = value
            else:
                self.logger.warning(
                    f"Ignoring {key}={value!r} in {self.config_path}: not a number"
                )
        return usable

    def _validate_config(self, config: Dict[str, Any]) -> None:
        """Validate configuration values"""
        for key in self._get_defaults():
            if not self._is_number(config.get(key)):
                raise ValueError(f"{key} must be a number, got {config.get(key)!r}")

        if config["upload_timeout_seconds"] <= 0:
            raise ValueError("upload_timeout_seconds must be positive")

        if config["max_no_progress_retries"] < 0:
            raise ValueError("max_no_progress_retries cannot be negative")

        if config["retry_backoff_base_seconds"] < 0:
            raise ValueError("retry_backoff_base_seconds cannot be negative")

        if config["retry_backoff_max_seconds"] < config["retry_backoff_base_seconds"]:
            self.logger.warning(
                "retry_backoff_max_seconds is less than retry_backoff_base_seconds. "
                "Every retry will wait the maximum."
            )

    def save(self) -> None:
        """Save current configuration to the YAML file"""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_path, "w") as f:
            yaml.dump(
                self._config,
                f,
                default_flow_style=False,
                sort_keys=False,
                indent=2,
            )

        self.logger.info(f"Config saved to {self.config_path}")

    # =========================================================================
    # PROPERTY ACCESSORS
    # =========================================================================

    @property
    def upload_timeout_seconds(self) -> float:
        """Overall deadline for one upload"""
        return float(self._config["upload_timeout_seconds"])

    @property
    def max_no_progress_retries(self) -> int:
        """Consecutive rounds without progress before aborting"""
        return int(self._config["max_no_progress_retries"])

    @property
    def retry_backoff_base_seconds(self) -> float:
        """First backoff delay"""
        return float(self._config["retry_backoff_base_seconds"])

    @property
    def retry_backoff_max_seconds(self) -> float:
        """Backoff cap"""
        return float(self._config["retry_backoff_max_seconds"])

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any, save: bool = False) -> None:
        """
        Set configuration value.

        Args:
            key: Configuration key
            value: New value
            save: If True, save to file immediately
        """
        self._config[key] = value
        self._validate_config(self._config)

        if save:
            self.save()

    def reload(self) -> None:
        """Reload configuration from file"""
        self._config = self._load_config()
        self.logger.info("Upload configuration reloaded")

    def to_dict(self) -> Dict[str, Any]:
        """Get configuration as dictionary"""
        return self._config.copy()

    def __repr__(self) -> str:
        return f"UploadConfig(path={self.config_path})"
