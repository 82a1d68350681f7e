"""Configuration constants."""
import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ApplicationConfig:
    """Application configuration constants."""

    app_name: str = "window-organizer"
    gsettings_schema: str = "org.gnome.shell.extensions.window-organizer"
    placement_delay_ms: int = 50
    center_retry_interval_ms: int = 40
    center_max_attempts: int = 8
    center_tolerance_px: int = 1

    @property
    def schema_dir(self) -> Path:
        """Get the bundled GSettings schema directory."""
        return Path(__file__).resolve().parent.parent / "schemas"

    @property
    def config_dir(self) -> Path:
        """Get the XDG configuration directory."""
        xdg_config_home = os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config"))
        return Path(xdg_config_home) / self.app_name

    @property
    def settings_path(self) -> Path:
        """Get the YAML settings file path."""
        return self.config_dir / "settings.yml"


# Default configuration instance
DEFAULT_CONFIG = ApplicationConfig()
