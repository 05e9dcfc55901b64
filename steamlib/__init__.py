"""Steam game library discovery, resolution and launching."""
from .errors import (
    ExtensionError,
    ExtensionIOError,
    NotFoundError,
    SerializationError,
    ValidationError,
)
from .extension import SteamExtension
from .models import ExtensionManifest, ExtensionType, SteamApp, SteamGame, SteamLibrary
from .settings import ExtensionSettings, load_settings

__all__ = [
    "ExtensionError",
    "ExtensionIOError",
    "ExtensionManifest",
    "ExtensionSettings",
    "ExtensionType",
    "NotFoundError",
    "SerializationError",
    "SteamApp",
    "SteamExtension",
    "SteamGame",
    "SteamLibrary",
    "ValidationError",
    "load_settings",
]
