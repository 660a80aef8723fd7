from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from mazegame.core.settings import Settings
from mazegame.errors import SettingsError


@pytest.fixture(autouse=True)
def clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("MAZE_WIDTH", "MAZE_HEIGHT", "MAZE_SEED"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_loaded_from_package() -> None:
    s = Settings.load()
    assert s.video.width == 800
    assert s.video.height == 600
    assert s.maze.cell_size == 30
    assert s.maze.seed is None


def test_file_overrides(tmp_path: Path) -> None:
    fp = tmp_path / "settings.yaml"
    fp.write_text(
        textwrap.dedent(
            """
            video:
              width: 1024
            maze:
              seed: 42
            """
        ),
        encoding="utf-8",
    )

    s = Settings.load(user_path=fp)

    assert s.video.width == 1024
    assert s.video.height == 600
    assert s.maze.seed == 42


def test_missing_user_file_warns(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("WARNING"):
        s = Settings.load(user_path=tmp_path / "nope.yaml")
    assert s.video.width == 800
    assert any("not found" in rec.message for rec in caplog.records)


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAZE_WIDTH", "1200")
    monkeypatch.setenv("MAZE_SEED", "7")
    monkeypatch.setenv("MAZE_HEIGHT", "tall")

    s = Settings.load()

    assert s.video.width == 1200
    assert s.video.height == 600
    assert s.maze.seed == 7


def test_unknown_key_raises(tmp_path: Path) -> None:
    fp = tmp_path / "settings.yaml"
    fp.write_text("maze:\n  walls: 3\n", encoding="utf-8")
    with pytest.raises(SettingsError):
        Settings.load(user_path=fp)


@pytest.mark.parametrize(
    "width,height,cell_size",
    [(0, 600, 30), (800, -1, 30), (800, 600, 0), (60, 600, 30)],
)
def test_validate_rejects_unplayable_sizes(width, height, cell_size) -> None:
    s = Settings()
    s.video.width, s.video.height, s.maze.cell_size = width, height, cell_size
    with pytest.raises(SettingsError):
        s.validate()


def test_save_round_trip(tmp_path: Path) -> None:
    s = Settings()
    s.maze.seed = 99
    s.video.width = 900
    path = tmp_path / "nested" / "settings.yaml"
    s.save(path)

    loaded = Settings.load(user_path=path)
    assert loaded.maze.seed == 99
    assert loaded.video.width == 900


def test_empty_section_falls_back_to_defaults(tmp_path: Path) -> None:
    fp = tmp_path / "settings.yaml"
    fp.write_text("video:\nmaze:\n  seed: 3\n", encoding="utf-8")

    s = Settings.load(user_path=fp)

    assert s.video.width == 800
    assert s.video.height == 600
    assert s.maze.seed == 3
