"""Locate the Steam client installation."""
from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from .errors import NotFoundError, ValidationError

_LOGGER = logging.getLogger(__name__)

# Most common install location first.
CANDIDATE_PATHS: Dict[str, List[str]] = {
    "windows": [
        "C:\\Program Files (x86)\\Steam",
        "C:\\Program Files\\Steam",
    ],
    "macos": [
        "/Applications/Steam.app/Contents/MacOS",
        "~/Library/Application Support/Steam",
    ],
    "linux": [
        "~/.steam/steam",
        "~/.local/share/Steam",
    ],
}


def platform_family(platform: Optional[str] = None) -> str:
    platform = platform or sys.platform
    if platform in CANDIDATE_PATHS:
        return platform
    if platform.startswith(("win", "cygwin")):
        return "windows"
    if platform == "darwin":
        return "macos"
    return "linux"


def _home_dir() -> Path:
    try:
        return Path.home()
    except (RuntimeError, KeyError) as exc:
        raise ValidationError("could not find home directory") from exc


def expand_candidate(raw: str, home: Optional[Path] = None) -> Path:
    """Expand a leading ``~`` against the user's home directory."""
    if not raw.startswith("~"):
        return Path(raw)
    base = home if home is not None else _home_dir()
    return base / raw[1:].lstrip("/\\")


async def locate_installation(
    platform: Optional[str] = None,
    extra_candidates: Iterable[str] = (),
    home: Optional[Path] = None,
) -> Path:
    """Return the first candidate root that exists on disk.

    ``extra_candidates`` (usually from settings) are tried before the
    platform defaults. Raises :class:`NotFoundError` when nothing exists.
    """

    family = platform_family(platform)
    candidates: List[Union[str, Path]] = [*extra_candidates, *CANDIDATE_PATHS[family]]
    for raw in candidates:
        path = expand_candidate(str(raw), home)
        _LOGGER.debug("Probing Steam root %s", path)
        if await asyncio.to_thread(path.exists):
            _LOGGER.info("Found Steam installation at %s", path)
            return path
    raise NotFoundError("Steam installation not found")


__all__ = ["CANDIDATE_PATHS", "expand_candidate", "locate_installation", "platform_family"]
