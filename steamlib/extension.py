"""Host-facing Steam game library extension."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from . import discovery, launch, paths, resolver
from .errors import SerializationError, ValidationError
from .models import APPID_MAX, EXTENSION_ID, ExtensionManifest, ExtensionType, SteamGame, SteamLibrary, default_manifest
from .settings import ExtensionSettings

_LOGGER = logging.getLogger(__name__)


def _require_appid(params: Optional[Mapping[str, Any]]) -> int:
    value = params.get("appid") if isinstance(params, Mapping) else None
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= APPID_MAX:
        raise ValidationError("appid parameter required")
    return value


class SteamExtension:
    """Catalog of installed Steam apps plus the hooks the host calls.

    The catalog is written only by :meth:`initialize` and read by every hook.
    The host must not run hooks while a re-initialization is in progress.
    """

    def __init__(self, settings: Optional[ExtensionSettings] = None, platform: Optional[str] = None) -> None:
        self.settings = settings or ExtensionSettings()
        self.platform = platform
        self.manifest = default_manifest()
        self.libraries: List[SteamLibrary] = []
        self.steam_install_path: Optional[Path] = None

    # ----- Lifecycle ---------------------------------------------------
    async def initialize(self, context: Optional[Mapping[str, Any]] = None) -> None:
        root = await paths.locate_installation(
            self.platform, extra_candidates=self.settings.candidates()
        )
        libraries = await discovery.discover_libraries(
            root, read_library_folders=self.settings.read_library_folders
        )
        for library in libraries:
            library.apps = await discovery.scan_library(library.path)

        self.steam_install_path = root
        self.libraries = libraries
        _LOGGER.info(
            "Initialized with %d libraries and %d apps",
            len(libraries),
            sum(len(library.apps) for library in libraries),
        )

    async def shutdown(self) -> None:
        _LOGGER.debug("Shutting down %s", EXTENSION_ID)

    # ----- Metadata ----------------------------------------------------
    def get_manifest(self) -> ExtensionManifest:
        return self.manifest

    def get_type(self) -> ExtensionType:
        return ExtensionType.GAME_LIBRARY

    def get_id(self) -> str:
        return EXTENSION_ID

    # ----- Operations --------------------------------------------------
    def scan_games(self) -> List[SteamGame]:
        return [SteamGame.summary(app) for library in self.libraries for app in library.apps.values()]

    async def get_game_details(self, appid: int) -> SteamGame:
        return await resolver.resolve_game(
            self.libraries,
            self.steam_install_path,
            appid,
            self.platform,
            self.settings.executable_names,
        )

    async def launch_game(self, appid: int) -> None:
        game = await self.get_game_details(appid)
        await launch.launch_game(game)

    # ----- Hooks -------------------------------------------------------
    async def handle_hook(self, name: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        if name == "scan_games":
            return _dump(self.scan_games())
        if name == "get_game_details":
            return _dump(await self.get_game_details(_require_appid(params)))
        if name == "launch_game":
            await self.launch_game(_require_appid(params))
            return None
        raise ValidationError(f"unknown hook: {name}")

    async def handle_hook_json(self, name: str, payload: Optional[str] = None) -> str:
        """Wire adapter: JSON text in, JSON text out."""
        params: Optional[Dict[str, Any]] = None
        if payload:
            try:
                params = json.loads(payload)
            except json.JSONDecodeError as exc:
                raise SerializationError(f"invalid params for {name}: {exc}") from exc
        result = await self.handle_hook(name, params)
        try:
            return json.dumps(result, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"failed to encode result of {name}: {exc}") from exc


def _dump(value: Any) -> Any:
    if isinstance(value, list):
        return [item.model_dump(mode="json") for item in value]
    return value.model_dump(mode="json")


__all__ = ["SteamExtension"]
