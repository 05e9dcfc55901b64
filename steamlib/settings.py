"""User-tunable settings for Steam discovery."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .resolver import EXECUTABLE_NAMES

_LOGGER = logging.getLogger(__name__)

SETTINGS_FILE = "steamlib.json"
STEAM_PATH_ENV = "STEAMLIB_STEAM_PATH"


class ExtensionSettings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    steam_path: Optional[str] = None
    extra_candidates: List[str] = Field(default_factory=list)
    read_library_folders: bool = False
    executable_names: List[str] = Field(default_factory=lambda: list(EXECUTABLE_NAMES))

    def candidates(self) -> List[str]:
        """Explicit roots to probe ahead of the platform defaults."""
        values = [self.steam_path] if self.steam_path else []
        values.extend(self.extra_candidates)
        return values


def load_settings(path: Optional[Union[str, Path]] = None) -> ExtensionSettings:
    settings = ExtensionSettings()
    if path is not None:
        settings_path = Path(path)
        if settings_path.exists():
            try:
                data = settings_path.read_text(encoding="utf-8")
                settings = ExtensionSettings.model_validate_json(data)
            except (OSError, ValidationError) as exc:
                _LOGGER.error("Ignoring unreadable settings %s: %s", settings_path, exc)

    override = os.environ.get(STEAM_PATH_ENV)
    if override:
        settings.steam_path = override
    return settings


__all__ = ["ExtensionSettings", "SETTINGS_FILE", "STEAM_PATH_ENV", "load_settings"]
