"""Data models for the Steam library catalog."""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

EXTENSION_ID = "steam_extension"
EXTENSION_NAME = "Steam Game Library Extension"
EXTENSION_VERSION = "0.1.0"

APPID_MAX = 2**32 - 1

HOOKS = ["scan_games", "get_game_details", "launch_game"]


class ExtensionType(str, Enum):
    GAME_LIBRARY = "game_library"


class SteamApp(BaseModel):
    """One installed application, as read from its app manifest."""

    model_config = ConfigDict(frozen=True)

    appid: int = Field(ge=0, le=APPID_MAX)
    name: str
    install_dir: Optional[str] = None
    size_on_disk: Optional[int] = Field(default=None, ge=0)
    last_updated: Optional[int] = None
    launch_options: Optional[str] = None


class SteamGame(BaseModel):
    """An app plus the fields derived while resolving it on disk."""

    app: SteamApp
    executable: Optional[str] = None
    working_dir: Optional[str] = None
    launch_args: Optional[str] = None
    icon_path: Optional[str] = None
    banner_path: Optional[str] = None

    @classmethod
    def summary(cls, app: SteamApp) -> "SteamGame":
        return cls(app=app)


class SteamLibrary(BaseModel):
    """A ``steamapps`` folder and the apps scanned from it."""

    path: Path
    apps: Dict[int, SteamApp] = Field(default_factory=dict)


class ExtensionManifest(BaseModel):
    name: str
    version: str
    author: Optional[str] = None
    description: Optional[str] = None
    extension_type: ExtensionType
    entry_point: str
    permissions: List[str] = Field(default_factory=list)
    dependencies: Optional[List[str]] = None
    hooks: Optional[List[str]] = None
    apis: Optional[Dict[str, Any]] = None
    menu_items: Optional[List[Dict[str, Any]]] = None


def default_manifest() -> ExtensionManifest:
    return ExtensionManifest(
        name=EXTENSION_NAME,
        version=EXTENSION_VERSION,
        author="Arcadia Team",
        description="Extension for integrating Steam game library into Arcadia",
        extension_type=ExtensionType.GAME_LIBRARY,
        entry_point="arcadia_steam_extension",
        permissions=["filesystem", "native"],
        hooks=list(HOOKS),
        apis={"provided": ["steam_games", "steam_launcher"]},
    )


__all__ = [
    "APPID_MAX",
    "EXTENSION_ID",
    "HOOKS",
    "ExtensionManifest",
    "ExtensionType",
    "SteamApp",
    "SteamGame",
    "SteamLibrary",
    "default_manifest",
]
