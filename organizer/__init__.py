"""Window Organizer - places new windows on the monitor you are working on."""

__version__ = "0.1.0"
