"""Configuration for termpong."""

from .settings import DisplaySettings, Settings, get_settings

__all__ = ["DisplaySettings", "Settings", "get_settings"]
