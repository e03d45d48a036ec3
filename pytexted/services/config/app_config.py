from __future__ import annotations

import codecs
from dataclasses import dataclass
from pathlib import Path

from pytexted.domain.interfaces import IAppConfig
from pytexted.services.config.ini_config_service import IniConfigService
from pytexted.utils.constants import DEFAULT_ENCODING, DEFAULT_WINDOW_SIZE


def _project_root_fallback() -> Path:
    # pytexted/services/config/app_config.py -> repository root
    return Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Typed facade over IniConfigService.

    Bad values fall back to the built-in defaults instead of raising, so a
    hand-edited config.ini can never keep the editor from starting.
    """

    ini: IniConfigService
    project_root: Path

    def encoding(self) -> str:
        name = (self.ini.get("editor", "encoding", DEFAULT_ENCODING) or "").strip()
        try:
            return codecs.lookup(name).name
        except LookupError:
            return DEFAULT_ENCODING

    def window_size(self) -> tuple[int, int]:
        width = self.ini.get_int("window", "width", DEFAULT_WINDOW_SIZE[0])
        height = self.ini.get_int("window", "height", DEFAULT_WINDOW_SIZE[1])
        if not width or width <= 0:
            width = DEFAULT_WINDOW_SIZE[0]
        if not height or height <= 0:
            height = DEFAULT_WINDOW_SIZE[1]
        return width, height

    def console_enabled(self) -> bool:
        return bool(self.ini.get_bool("console", "enabled", True))

    def log_level(self) -> str:
        return (self.ini.get("log", "level", "WARNING") or "WARNING").strip().upper()

    # ---- delegate IniConfigService methods ----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        return self.ini.get_int(section, key, default)

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        return self.ini.get_bool(section, key, default)

    def app_version(self) -> str:
        return self.ini.app_version()

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return AppConfig(ini=ini, project_root=root)
