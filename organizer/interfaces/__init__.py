"""Interfaces for the collaborators the placement policy depends on."""

from .host import IDisplayHost, IWindow, WindowCreatedCallback
from .scheduler import SOURCE_CONTINUE, SOURCE_REMOVE, IScheduler
from .settings import ISettingsStore

__all__ = [
    "IDisplayHost",
    "IWindow",
    "IScheduler",
    "ISettingsStore",
    "SOURCE_CONTINUE",
    "SOURCE_REMOVE",
    "WindowCreatedCallback",
]
