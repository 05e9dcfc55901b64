"""Spawn resolved games as detached processes."""
from __future__ import annotations

import asyncio
import logging
import os
import subprocess
import sys
from typing import Any, Dict, List, Optional

from .errors import ExtensionIOError, ValidationError
from .models import SteamGame

_LOGGER = logging.getLogger(__name__)


def _detach_options() -> Dict[str, Any]:
    if sys.platform.startswith("win"):
        flags = getattr(subprocess, "DETACHED_PROCESS", 0) | getattr(
            subprocess, "CREATE_NEW_PROCESS_GROUP", 0
        )
        return {"creationflags": flags}
    return {"start_new_session": True}


def _spawn(cmd: List[str], cwd: str) -> subprocess.Popen:
    return subprocess.Popen(
        cmd,
        cwd=cwd,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        **_detach_options(),
    )


async def launch_game(game: SteamGame) -> Optional[int]:
    """Start ``game.executable`` and return the child's pid without waiting on it."""

    if game.executable is None:
        raise ValidationError("no executable found")

    cwd = game.working_dir or os.getcwd()
    try:
        process = await asyncio.to_thread(_spawn, [game.executable], cwd)
    except OSError as exc:
        _LOGGER.error("Failed to launch %s: %s", game.executable, exc)
        raise ExtensionIOError.wrap(exc, f"failed to launch {game.executable}") from exc

    pid = getattr(process, "pid", None)
    _LOGGER.info("Launched %s (appid %s, pid %s)", game.app.name, game.app.appid, pid)
    return pid


__all__ = ["launch_game"]
