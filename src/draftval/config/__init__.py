"""Configuration for draftval.

Usage:
    from draftval.config import SettingsManager

    manager = SettingsManager()
    settings = manager.load_settings()
    options = manager.build_options(schema, settings)
"""

from draftval.config.paths import Paths
from draftval.config.settings import Settings, SettingsManager

__all__ = ["Paths", "Settings", "SettingsManager"]
