from __future__ import annotations

import asyncio
import os
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import pytest

from steamlib import launch
from steamlib.errors import ExtensionIOError, ValidationError
from steamlib.models import SteamApp, SteamGame

APP = SteamApp(appid=42, name="Answer", install_dir="answer")


class _FakeProcess:
    pid = 4242


def test_launch_without_executable_never_spawns(monkeypatch):
    calls = []
    monkeypatch.setattr(launch, "_spawn", lambda cmd, cwd: calls.append((cmd, cwd)))

    with pytest.raises(ValidationError) as excinfo:
        asyncio.run(launch.launch_game(SteamGame(app=APP, working_dir="/games/answer")))
    assert "no executable found" in str(excinfo.value)
    assert calls == []


def test_launch_spawns_in_working_dir(monkeypatch):
    calls = []

    def fake_spawn(cmd, cwd):
        calls.append((cmd, cwd))
        return _FakeProcess()

    monkeypatch.setattr(launch, "_spawn", fake_spawn)
    game = SteamGame(app=APP, executable="/games/answer/game.exe", working_dir="/games/answer")

    pid = asyncio.run(launch.launch_game(game))
    assert pid == 4242
    assert calls == [(["/games/answer/game.exe"], "/games/answer")]


def test_launch_defaults_to_current_directory(monkeypatch, tmp_path):
    calls = []
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(launch, "_spawn", lambda cmd, cwd: calls.append(cwd) or _FakeProcess())

    asyncio.run(launch.launch_game(SteamGame(app=APP, executable="game.exe")))
    assert calls == [os.getcwd()]


def test_launch_wraps_spawn_failure(monkeypatch):
    def failing_spawn(cmd, cwd):
        raise FileNotFoundError(2, "No such file or directory", cmd[0])

    monkeypatch.setattr(launch, "_spawn", failing_spawn)
    game = SteamGame(app=APP, executable="/missing/game.exe", working_dir="/missing")

    with pytest.raises(ExtensionIOError) as excinfo:
        asyncio.run(launch.launch_game(game))
    assert isinstance(excinfo.value.error, FileNotFoundError)


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX session detach")
def test_spawn_detaches_real_process(tmp_path):
    process = launch._spawn([sys.executable, "-c", "pass"], str(tmp_path))
    assert process.wait(timeout=30) == 0
