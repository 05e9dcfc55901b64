"""Resolve scanned apps into launchable games."""
from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence

from .errors import ExtensionIOError, NotFoundError
from .models import SteamGame, SteamLibrary
from .paths import platform_family

_LOGGER = logging.getLogger(__name__)

EXECUTABLE_NAMES = ("game.exe", "Game.exe", "launch.exe", "start.exe")
NATIVE_EXECUTABLE_SUFFIX = ".exe"


def game_directory(library: SteamLibrary, install_dir: Optional[str]) -> Path:
    return library.path / "common" / (install_dir or "")


async def find_executable(
    game_dir: Path,
    platform: Optional[str] = None,
    names: Iterable[str] = EXECUTABLE_NAMES,
) -> Optional[str]:
    """Return the first conventional executable inside ``game_dir``.

    On Windows any ``.exe`` in the folder is accepted as a fallback; which
    one wins depends on the directory listing order.
    """

    for name in names:
        candidate = game_dir / name
        if await asyncio.to_thread(candidate.exists):
            return str(candidate)

    if platform_family(platform) != "windows":
        return None

    try:
        entries = await asyncio.to_thread(lambda: list(game_dir.iterdir()))
    except OSError as exc:
        raise ExtensionIOError.wrap(exc, f"failed to list {game_dir}") from exc
    for entry in entries:
        if entry.suffix.lower() == NATIVE_EXECUTABLE_SUFFIX:
            return str(entry)
    return None


async def find_icon(root: Optional[Path], appid: int) -> Optional[str]:
    if root is None:
        return None
    icon_path = root / "appcache" / "librarycache" / f"{appid}_icon.jpg"
    try:
        exists = await asyncio.to_thread(icon_path.exists)
    except OSError as exc:
        _LOGGER.debug("Icon probe failed for %s: %s", appid, exc)
        return None
    return str(icon_path) if exists else None


async def resolve_game(
    libraries: Sequence[SteamLibrary],
    root: Optional[Path],
    appid: int,
    platform: Optional[str] = None,
    executable_names: Iterable[str] = EXECUTABLE_NAMES,
) -> SteamGame:
    """Probe the filesystem for ``appid``'s executable, working dir and icon.

    Nothing is cached; every call repeats the probes. Libraries are searched
    in discovery order and the first one holding ``appid`` wins.
    """

    for library in libraries:
        app = library.apps.get(appid)
        if app is None:
            continue
        game_dir = game_directory(library, app.install_dir)
        executable = await find_executable(game_dir, platform, executable_names)
        if executable is None:
            _LOGGER.debug("No executable found in %s", game_dir)
        return SteamGame(
            app=app,
            executable=executable,
            working_dir=str(game_dir),
            icon_path=await find_icon(root, appid),
        )
    raise NotFoundError(f"game with appid {appid} not found")


__all__ = [
    "EXECUTABLE_NAMES",
    "find_executable",
    "find_icon",
    "game_directory",
    "resolve_game",
]
