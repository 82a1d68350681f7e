#!/usr/bin/env python3
"""
Window Organizer - moves new windows to the monitor you are working on.
Minimal entry point - classes are in separate modules.
"""

import argparse
import logging
import signal
import sys
from pathlib import Path

from organizer.config.app_config import DEFAULT_CONFIG
from organizer.infrastructure.gsettings_store import GSettingsStore
from organizer.infrastructure.yaml_settings_store import YamlSettingsStore
from organizer.interfaces.settings import ISettingsStore

logger = logging.getLogger("WindowOrganizer.Main")


def build_settings_store(backend: str, config_path=None) -> ISettingsStore:
    """
    Create the settings store for the selected backend.

    Args:
        backend: "gsettings" or "yaml"
        config_path: YAML file overriding the default location

    Returns:
        Settings store
    """
    if backend == "yaml":
        return YamlSettingsStore(Path(config_path) if config_path else DEFAULT_CONFIG.settings_path)
    return GSettingsStore(DEFAULT_CONFIG.gsettings_schema, DEFAULT_CONFIG.schema_dir)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="window-organizer",
        description="Place new windows on the monitor under the pointer or with focus",
    )
    parser.add_argument(
        "--settings-backend",
        choices=["gsettings", "yaml"],
        default="gsettings",
        help="Where placement settings are read from",
    )
    parser.add_argument("--config", help="YAML settings file (with --settings-backend yaml)")
    parser.add_argument("--debug", action="store_true", help="Always log placement decisions")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Entry point"""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if args.debug:
        logging.getLogger("WindowOrganizer").setLevel(logging.DEBUG)

    from gi.repository import GLib

    from organizer.infrastructure.glib_scheduler import GLibScheduler
    from organizer.managers.placement_controller import PlacementController

    try:
        from organizer.infrastructure.wnck_host import WnckDisplayHost

        host = WnckDisplayHost()
    except (ImportError, ValueError, RuntimeError) as e:
        logger.error(f"Cannot connect to the display: {e}")
        return 1

    controller = PlacementController(
        host,
        GLibScheduler(),
        build_settings_store(args.settings_backend, args.config),
        force_debug=args.debug,
    )

    loop = GLib.MainLoop()

    def shutdown() -> bool:
        logger.info("Window Organizer shutting down...")
        controller.disable()
        loop.quit()
        return GLib.SOURCE_REMOVE

    for sig in (signal.SIGINT, signal.SIGTERM):
        GLib.unix_signal_add(GLib.PRIORITY_DEFAULT, sig, shutdown)

    logger.info("Window Organizer starting...")
    controller.enable()
    loop.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
