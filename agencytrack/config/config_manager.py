"""
Configuration Manager for the agency tracker
Location: agencytrack/config/config_manager.py
"""

import os
import yaml
import logging
from typing import Any, Dict, Optional

from dotenv import load_dotenv

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "settings.yaml")

# environment variable -> (section, key, cast)
ENV_OVERRIDES = {
    "LOG_LEVEL": ("logging", "level", str),
    "LOG_FILE": ("logging", "file", str),
    "REPORT_DELAY_SECONDS": ("reports", "generation_delay_seconds", float),
}


class ConfigManager:
    def __init__(self, config_path: Optional[str] = None, use_env: bool = True):
        """
        Initialize ConfigManager with the path to the configuration file.

        Args:
            config_path: Path to YAML configuration file. Falls back to
                ``AGENCYTRACK_CONFIG`` and then to the bundled settings.
            use_env: Apply environment overrides (after loading ``.env``).
        """
        if use_env:
            load_dotenv()
        self.config_path = config_path or os.getenv("AGENCYTRACK_CONFIG") or DEFAULT_CONFIG_PATH
        self.config: Dict[str, Any] = {}
        self.logger = logging.getLogger(__name__)

        self._load_config()
        if use_env:
            self._apply_env_overrides()

    def _load_config(self) -> None:
        try:
            self.logger.info(f"Loading configuration from: {self.config_path}")

            if not os.path.exists(self.config_path):
                self.logger.error(f"Configuration file not found: {self.config_path}")
                raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

            with open(self.config_path, 'r') as config_file:
                self.config = yaml.safe_load(config_file) or {}

            if self.config:
                self.logger.info(f"Configuration loaded with sections: {list(self.config.keys())}")
            else:
                self.logger.warning("Configuration file is empty")

        except Exception as e:
            self.logger.exception(f"Error loading configuration: {str(e)}")
            raise

    def _apply_env_overrides(self) -> None:
        for env_name, (section, key, cast) in ENV_OVERRIDES.items():
            raw = os.getenv(env_name)
            if raw in (None, ""):
                continue
            try:
                self.set(section, key, cast(raw))
            except ValueError:
                self.logger.warning(f"Ignoring invalid {env_name}={raw!r}")

    def get(self, section: str, key: str = None, default: Any = None) -> Any:
        """
        Get configuration value by section and key.

        Args:
            section: Configuration section
            key: Configuration key (optional)
            default: Default value if key is not found

        Returns:
            Configuration value or default
        """
        try:
            if key is None:
                return self.config.get(section, default)
            return self.config.get(section, {}).get(key, default)
        except (AttributeError, KeyError):
            self.logger.warning(f"Configuration value not found for [{section}]{'.'+key if key else ''}")
            return default

    def get_section(self, section: str) -> Dict[str, Any]:
        return self.config.get(section, {})

    def set(self, section: str, key: str, value: Any) -> None:
        if section not in self.config or self.config[section] is None:
            self.config[section] = {}
        self.config[section][key] = value
