from __future__ import annotations

import asyncio
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import pytest

from steamlib import resolver
from steamlib.errors import NotFoundError
from steamlib.models import SteamApp, SteamLibrary


def _library(path: Path, *apps: SteamApp) -> SteamLibrary:
    path.mkdir(parents=True, exist_ok=True)
    return SteamLibrary(path=path, apps={app.appid: app for app in apps})


def test_resolve_sets_working_dir(tmp_path):
    library = _library(tmp_path / "steamapps", SteamApp(appid=10, name="Ten", install_dir="ten"))

    game = asyncio.run(resolver.resolve_game([library], tmp_path, 10, "linux"))
    assert game.app.appid == 10
    assert game.working_dir == str(tmp_path / "steamapps" / "common" / "ten")
    assert game.executable is None
    assert game.launch_args is None
    assert game.banner_path is None


def test_resolve_without_install_dir_uses_common(tmp_path):
    library = _library(tmp_path / "steamapps", SteamApp(appid=11, name="Eleven"))

    game = asyncio.run(resolver.resolve_game([library], tmp_path, 11, "linux"))
    assert game.working_dir == str(tmp_path / "steamapps" / "common")


def test_resolve_unknown_appid(tmp_path):
    library = _library(tmp_path / "steamapps", SteamApp(appid=10, name="Ten"))

    with pytest.raises(NotFoundError):
        asyncio.run(resolver.resolve_game([library], tmp_path, 99, "linux"))


def test_resolve_prefers_first_library(tmp_path):
    first = _library(tmp_path / "a" / "steamapps", SteamApp(appid=3, name="First", install_dir="g"))
    second = _library(tmp_path / "b" / "steamapps", SteamApp(appid=3, name="Second", install_dir="g"))

    game = asyncio.run(resolver.resolve_game([first, second], tmp_path, 3, "linux"))
    assert game.app.name == "First"
    assert game.working_dir.startswith(str(tmp_path / "a"))


def test_find_executable_follows_name_order(tmp_path):
    (tmp_path / "launch.exe").write_bytes(b"")
    (tmp_path / "start.exe").write_bytes(b"")

    found = asyncio.run(resolver.find_executable(tmp_path, "linux"))
    assert found == str(tmp_path / "launch.exe")


def test_find_executable_windows_fallback(tmp_path):
    (tmp_path / "readme.txt").write_text("hi", encoding="utf-8")
    (tmp_path / "Hl2.EXE").write_bytes(b"")

    assert asyncio.run(resolver.find_executable(tmp_path, "win32")) == str(tmp_path / "Hl2.EXE")
    assert asyncio.run(resolver.find_executable(tmp_path, "linux")) is None


def test_find_executable_custom_names(tmp_path):
    (tmp_path / "run.sh").write_text("#!/bin/sh\n", encoding="utf-8")

    found = asyncio.run(resolver.find_executable(tmp_path, "linux", names=["run.sh"]))
    assert found == str(tmp_path / "run.sh")


def test_find_icon(tmp_path):
    cache = tmp_path / "appcache" / "librarycache"
    cache.mkdir(parents=True)
    (cache / "440_icon.jpg").write_bytes(b"\xff\xd8")

    assert asyncio.run(resolver.find_icon(tmp_path, 440)) == str(cache / "440_icon.jpg")
    assert asyncio.run(resolver.find_icon(tmp_path, 441)) is None
    assert asyncio.run(resolver.find_icon(None, 440)) is None


def test_find_icon_swallows_os_errors(tmp_path, monkeypatch):
    def broken_exists(self):
        raise PermissionError("denied")

    monkeypatch.setattr(resolver.Path, "exists", broken_exists)

    assert asyncio.run(resolver.find_icon(tmp_path, 440)) is None
