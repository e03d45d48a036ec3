# tests/test_ini_config_service.py
from __future__ import annotations

from pathlib import Path

import pytest

from pytexted.services.config.ini_config_service import IniConfigService


def write_ini(p: Path, text: str) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")


@pytest.fixture()
def user_cfg_dir(monkeypatch, tmp_path) -> Path:
    """Point platformdirs at an empty directory under tmp_path."""
    d = tmp_path / "usercfg"
    monkeypatch.setattr(
        "pytexted.services.config.ini_config_service.user_config_dir",
        lambda appname: str(d),
    )
    return d


def test_defaults_when_no_config_files(user_cfg_dir):
    cfg = IniConfigService()
    assert cfg.app_version() == "0.0.0"
    assert cfg.loaded_from is None

    assert cfg.get("editor", "encoding") == "utf-8"
    assert cfg.get_bool("console", "enabled") is True
    assert cfg.get("log", "level") == "WARNING"

    # getters with defaults
    assert cfg.get("missing", "key", "x") == "x"
    assert cfg.get_int("app", "nonint", 42) == 42
    assert cfg.get_bool("app", "nope", False) is False


def test_project_root_config_is_used_when_present(user_cfg_dir, tmp_path):
    proj_root = tmp_path / "repo"
    ini = proj_root / "config" / "config.ini"
    write_ini(ini, "[app]\nversion = 1.2.3\n[window]\nwidth = 1024\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.app_version() == "1.2.3"
    assert cfg.get_int("window", "width") == 1024
    # untouched sections still get defaults
    assert cfg.get("editor", "encoding") == "utf-8"
    assert cfg.loaded_from == ini


def test_user_config_preferred_over_project_root(user_cfg_dir, tmp_path):
    write_ini(user_cfg_dir / "config.ini", "[app]\nversion = 2.0.0\n")
    proj_root = tmp_path / "repo"
    write_ini(proj_root / "config" / "config.ini", "[app]\nversion = 1.0.0\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.app_version() == "2.0.0"
    assert cfg.loaded_from == user_cfg_dir / "config.ini"


def test_explicit_path_wins(user_cfg_dir, tmp_path):
    write_ini(user_cfg_dir / "config.ini", "[app]\nversion = 2.0.0\n")
    explicit = tmp_path / "explicit.ini"
    write_ini(explicit, "[app]\nversion = 3.0.0\n[console]\nenabled = off\n")

    cfg = IniConfigService(explicit_path=explicit)
    assert cfg.app_version() == "3.0.0"
    assert cfg.get_bool("console", "enabled") is False


def test_malformed_file_is_skipped(user_cfg_dir, tmp_path):
    bad = tmp_path / "bad.ini"
    write_ini(bad, "this is not [ini\n= nope\n")
    write_ini(user_cfg_dir / "config.ini", "[log]\nlevel = debug\n")

    cfg = IniConfigService(explicit_path=bad)
    assert cfg.loaded_from == user_cfg_dir / "config.ini"
    assert cfg.get("log", "level") == "debug"


@pytest.mark.parametrize(
    "raw,expected",
    [("yes", True), ("On", True), ("1", True), ("no", False), ("0", False), ("maybe", None)],
)
def test_get_bool_values(user_cfg_dir, tmp_path, raw, expected):
    p = tmp_path / "c.ini"
    write_ini(p, f"[ui]\nflag = {raw}\n")
    cfg = IniConfigService(explicit_path=p)
    assert cfg.get_bool("ui", "flag") is expected
