"""Discovery of Steam library folders and the apps installed in them."""
from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .errors import ExtensionError, ExtensionIOError, ValidationError
from .models import APPID_MAX, SteamApp, SteamLibrary
from .vdf import extract_value, parse_vdf

_LOGGER = logging.getLogger(__name__)

MANIFEST_SUFFIX = ".acf"
LIBRARY_FOLDER = "steamapps"
LIBRARY_FOLDERS_FILE = "libraryfolders.vdf"

SIZE_MAX = 2**64 - 1


def _optional_value(content: str, key: str) -> Optional[str]:
    try:
        return extract_value(content, key)
    except ExtensionError:
        return None


def _parse_unsigned(value: Optional[str], limit: int) -> Optional[int]:
    """Parse ``[+]digits`` into an int no larger than ``limit``."""
    if value is None:
        return None
    digits = value[1:] if value.startswith("+") else value
    if not (digits.isascii() and digits.isdigit()):
        return None
    number = int(digits)
    return number if number <= limit else None


async def _read_text(path: Path) -> str:
    try:
        return await asyncio.to_thread(path.read_text, encoding="utf-8")
    except OSError as exc:
        raise ExtensionIOError.wrap(exc, f"failed to read {path}") from exc
    except UnicodeDecodeError as exc:
        raise ExtensionIOError(f"failed to read {path}: not valid UTF-8 ({exc.reason})") from exc


async def parse_manifest(path: Path) -> SteamApp:
    """Build a :class:`SteamApp` from one ``.acf`` manifest."""

    content = await _read_text(path)
    raw_appid = extract_value(content, "appid")
    name = extract_value(content, "name")

    appid = _parse_unsigned(raw_appid, APPID_MAX)
    if appid is None:
        raise ValidationError("invalid appid")

    return SteamApp(
        appid=appid,
        name=name,
        install_dir=_optional_value(content, "installdir"),
        size_on_disk=_parse_unsigned(_optional_value(content, "SizeOnDisk"), SIZE_MAX),
    )


async def scan_library(library_path: Path) -> Dict[int, SteamApp]:
    """Parse every manifest in ``library_path``.

    A single malformed manifest fails the whole scan.
    """

    try:
        entries = await asyncio.to_thread(lambda: list(library_path.iterdir()))
    except OSError as exc:
        raise ExtensionIOError.wrap(exc, f"failed to list {library_path}") from exc

    apps: Dict[int, SteamApp] = {}
    for entry in entries:
        if entry.suffix != MANIFEST_SUFFIX:
            continue
        try:
            app = await parse_manifest(entry)
        except ExtensionError as exc:
            _LOGGER.error("Failed to parse manifest %s: %s", entry, exc)
            raise
        apps[app.appid] = app
    _LOGGER.info("Scanned %d apps in %s", len(apps), library_path)
    return apps


def _configured_library_paths(data: Dict[str, Any]) -> List[Path]:
    root = next((value for key, value in data.items() if key.lower() == "libraryfolders"), None)
    if not isinstance(root, dict):
        return []
    paths: List[Path] = []
    for key, value in root.items():
        # Library entries are keyed by index; other keys hold client stats.
        if not key.isdigit():
            continue
        candidate = value.get("path") if isinstance(value, dict) else value
        if isinstance(candidate, str) and candidate:
            paths.append(Path(candidate))
    return paths


async def _extra_libraries(default_library: Path) -> List[Path]:
    library_file = default_library / LIBRARY_FOLDERS_FILE
    if not await asyncio.to_thread(library_file.exists):
        return []
    data = parse_vdf(await _read_text(library_file))
    libraries: List[Path] = []
    for path in _configured_library_paths(data):
        library = path / LIBRARY_FOLDER
        if await asyncio.to_thread(library.is_dir):
            libraries.append(library)
        else:
            _LOGGER.warning("Skipping missing library folder %s", library)
    return libraries


async def discover_libraries(root: Path, read_library_folders: bool = False) -> List[SteamLibrary]:
    """Register ``root/steamapps`` and, when asked, configured extra libraries.

    Returned libraries have empty app maps until they are scanned.
    """

    default_library = root / LIBRARY_FOLDER
    if not await asyncio.to_thread(default_library.exists):
        _LOGGER.info("No %s folder under %s", LIBRARY_FOLDER, root)
        return []

    paths = [default_library]
    if read_library_folders:
        seen = {await asyncio.to_thread(default_library.resolve)}
        for extra in await _extra_libraries(default_library):
            resolved = await asyncio.to_thread(extra.resolve)
            if resolved not in seen:
                seen.add(resolved)
                paths.append(extra)
    return [SteamLibrary(path=path) for path in paths]


__all__ = [
    "LIBRARY_FOLDER",
    "MANIFEST_SUFFIX",
    "discover_libraries",
    "parse_manifest",
    "scan_library",
]
