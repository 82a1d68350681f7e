"""Settings storage interface."""
from abc import ABC, abstractmethod

from organizer.config.settings import PlacementSettings


class ISettingsStore(ABC):
    """Abstract interface for reading placement settings."""

    @abstractmethod
    def load_settings(self) -> PlacementSettings:
        """
        Read the current placement settings.

        Implementations never raise; on any backend failure they
        return the defaults.

        Returns:
            PlacementSettings snapshot
        """
        pass
