"""Tests for the GSettings store."""

import subprocess

import pytest

from organizer.config.settings import TargetMonitorMode
from organizer.infrastructure import gsettings_store
from organizer.infrastructure.gsettings_store import GSettingsStore, parse_gvariant_text

SCHEMA = "org.gnome.shell.extensions.window-organizer"


def fake_gsettings(values, returncode=0, stderr=""):
    """Build a subprocess.run replacement answering `gsettings list-recursively`."""
    calls = []
    stdout = "".join(f"{SCHEMA} {key} {value}\n" for key, value in values.items())

    def run(args, **kwargs):
        calls.append((args, kwargs))
        return subprocess.CompletedProcess(
            args, returncode, stdout=stdout if returncode == 0 else "", stderr=stderr
        )

    run.calls = calls
    return run


def test_parse_gvariant_text():
    assert parse_gvariant_text("'mouse-cursor'\n") == "mouse-cursor"
    assert parse_gvariant_text("true\n") is True
    assert parse_gvariant_text("false") is False

    with pytest.raises(ValueError):
        parse_gvariant_text("uint32 5")


def test_loads_all_keys(monkeypatch):
    run = fake_gsettings(
        {
            "target-monitor-mode": "'focused-window'",
            "center-windows": "true",
            "debug-logging": "false",
        }
    )
    monkeypatch.setattr(gsettings_store.subprocess, "run", run)

    settings = GSettingsStore(SCHEMA).load_settings()

    assert settings.target_monitor_mode == TargetMonitorMode.FOCUSED_WINDOW
    assert settings.center_windows is True
    assert settings.debug_logging is False
    assert [args for args, _ in run.calls] == [["gsettings", "list-recursively", SCHEMA]]


def test_missing_key_keeps_default(monkeypatch):
    run = fake_gsettings({"center-windows": "true"})
    monkeypatch.setattr(gsettings_store.subprocess, "run", run)

    settings = GSettingsStore(SCHEMA).load_settings()

    assert settings.target_monitor_mode == TargetMonitorMode.MOUSE_CURSOR
    assert settings.center_windows is True


def test_unrelated_keys_are_ignored(monkeypatch):
    run = fake_gsettings({"center-windows": "true", "window-list": "@as []"})
    monkeypatch.setattr(gsettings_store.subprocess, "run", run)

    settings = GSettingsStore(SCHEMA).load_settings()

    assert settings.center_windows is True


def test_failed_listing_returns_defaults(monkeypatch):
    """
    GIVEN: gsettings exits non-zero because the schema is not installed
    WHEN: Settings are loaded
    THEN: Defaults are returned after a single call
    """
    # GIVEN
    run = fake_gsettings(
        {"center-windows": "true"}, returncode=1, stderr="No such schema"
    )
    monkeypatch.setattr(gsettings_store.subprocess, "run", run)

    # WHEN
    settings = GSettingsStore(SCHEMA).load_settings()

    # THEN
    assert settings.center_windows is False
    assert settings.target_monitor_mode == TargetMonitorMode.MOUSE_CURSOR
    assert len(run.calls) == 1


def test_missing_gsettings_binary_returns_defaults(monkeypatch):
    def run(args, **kwargs):
        raise FileNotFoundError("gsettings")

    monkeypatch.setattr(gsettings_store.subprocess, "run", run)

    settings = GSettingsStore(SCHEMA).load_settings()

    assert settings.center_windows is False


def test_timeout_returns_defaults(monkeypatch):
    def run(args, **kwargs):
        raise subprocess.TimeoutExpired(args, 5)

    monkeypatch.setattr(gsettings_store.subprocess, "run", run)

    settings = GSettingsStore(SCHEMA).load_settings()

    assert settings.target_monitor_mode == TargetMonitorMode.MOUSE_CURSOR


def test_schema_dir_is_prepended(monkeypatch, tmp_path):
    run = fake_gsettings({})
    monkeypatch.setattr(gsettings_store.subprocess, "run", run)
    monkeypatch.setenv("GSETTINGS_SCHEMA_DIR", "/usr/share/other")

    GSettingsStore(SCHEMA, schema_dir=tmp_path).load_settings()

    env = run.calls[0][1]["env"]
    assert env["GSETTINGS_SCHEMA_DIR"] == f"{tmp_path}:/usr/share/other"


def test_missing_schema_dir_leaves_env_alone(monkeypatch, tmp_path):
    run = fake_gsettings({})
    monkeypatch.setattr(gsettings_store.subprocess, "run", run)
    monkeypatch.delenv("GSETTINGS_SCHEMA_DIR", raising=False)

    GSettingsStore(SCHEMA, schema_dir=tmp_path / "missing").load_settings()

    env = run.calls[0][1]["env"]
    assert "GSETTINGS_SCHEMA_DIR" not in env
