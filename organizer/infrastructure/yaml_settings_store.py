"""YAML-based settings storage implementation.

Reads ~/.config/window-organizer/settings.yml. Works without GSettings,
on any desktop.
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from organizer.config.settings import PlacementSettings
from organizer.interfaces.settings import ISettingsStore

logger = logging.getLogger("WindowOrganizer.YamlSettingsStore")


class YamlSettingsStore(ISettingsStore):
    """Settings store using a YAML file backend."""

    def __init__(self, config_path: Path):
        """
        Initialize the YAML store.

        Args:
            config_path: Path to settings.yml
        """
        self.config_path = Path(config_path)

    def _load_config(self) -> dict:
        """Load the raw config dict from the YAML file."""
        try:
            if not self.config_path.exists():
                logger.debug(f"Settings file not found at {self.config_path}, using defaults")
                return {}

            with open(self.config_path, "r") as f:
                config_data = yaml.safe_load(f)
        except (yaml.YAMLError, OSError) as e:
            logger.error(f"Error loading settings: {e}")
            return {}

        if config_data is None:
            return {}
        if not isinstance(config_data, dict):
            logger.error(f"Settings file {self.config_path} is not a mapping")
            return {}
        return config_data

    def load_settings(self) -> PlacementSettings:
        """Read the placement settings, falling back to defaults when invalid."""
        try:
            return PlacementSettings.model_validate(self._load_config())
        except ValidationError as e:
            logger.error(f"Invalid settings in {self.config_path}: {e}")
            return PlacementSettings()
