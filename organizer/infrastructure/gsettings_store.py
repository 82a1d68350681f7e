"""GSettings-based settings storage implementation."""

import logging
import os
import subprocess
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from organizer.config.settings import PlacementSettings
from organizer.interfaces.settings import ISettingsStore

logger = logging.getLogger("WindowOrganizer.GSettingsStore")

SETTINGS_KEYS = ("target-monitor-mode", "center-windows", "debug-logging")


def parse_gvariant_text(text: str):
    """
    Parse the text form of a simple GVariant as printed by ``gsettings``.

    Only strings and booleans are needed here.

    Args:
        text: Output such as "'mouse-cursor'" or "true"

    Returns:
        str or bool value
    """
    value = text.strip()
    if value in ("true", "false"):
        return value == "true"
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    raise ValueError(f"Unsupported GSettings value: {value!r}")


class GSettingsStore(ISettingsStore):
    """Settings store using GNOME GSettings backend."""

    def __init__(self, schema_id: str, schema_dir: Optional[Path] = None):
        """
        Initialize GSettings store.

        Args:
            schema_id: GSettings schema ID (e.g., "org.gnome.shell.extensions.window-organizer")
            schema_dir: Optional directory containing compiled schemas
        """
        self.schema_id = schema_id
        self.schema_dir = schema_dir

    def _get_env_with_schema_dir(self) -> dict:
        """
        Create environment dict with GSETTINGS_SCHEMA_DIR set.

        Returns:
            Environment dictionary
        """
        env = os.environ.copy()

        if self.schema_dir and Path(self.schema_dir).exists():
            schema_dir_str = str(self.schema_dir)
            if "GSETTINGS_SCHEMA_DIR" in env:
                env["GSETTINGS_SCHEMA_DIR"] = (
                    f"{schema_dir_str}:{env['GSETTINGS_SCHEMA_DIR']}"
                )
            else:
                env["GSETTINGS_SCHEMA_DIR"] = schema_dir_str

        return env

    def _list_keys(self, env: dict) -> dict:
        """
        Read every key of the schema with one gsettings call.

        Args:
            env: Environment for the gsettings process

        Returns:
            Known keys mapped to their parsed values
        """
        result = subprocess.run(
            ["gsettings", "list-recursively", self.schema_id],
            capture_output=True,
            text=True,
            env=env,
            timeout=5,
        )
        if result.returncode != 0:
            logger.warning(f"gsettings list-recursively failed: {result.stderr.strip()}")
            return {}

        values = {}
        for line in result.stdout.splitlines():
            # "<schema> <key> <value>"
            parts = line.split(None, 2)
            if len(parts) == 3 and parts[1] in SETTINGS_KEYS:
                values[parts[1]] = parse_gvariant_text(parts[2])
        return values

    def load_settings(self) -> PlacementSettings:
        """
        Read the placement settings from GSettings.

        Keys missing from the schema keep their defaults.

        Returns:
            PlacementSettings snapshot
        """
        env = self._get_env_with_schema_dir()
        try:
            values = self._list_keys(env)
        except (
            subprocess.TimeoutExpired,
            subprocess.CalledProcessError,
            FileNotFoundError,
            ValueError,
        ) as e:
            logger.error(f"Error reading GSettings: {e}")
            return PlacementSettings()

        try:
            return PlacementSettings.model_validate(values)
        except ValidationError as e:
            logger.error(f"Invalid GSettings values: {e}")
            return PlacementSettings()
