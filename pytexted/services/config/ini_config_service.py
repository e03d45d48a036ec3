# pytexted/services/config/ini_config_service.py
from __future__ import annotations

import configparser
import logging
from pathlib import Path
from typing import Dict, Optional

from platformdirs import user_config_dir

from pytexted.domain.interfaces import IConfigService
from pytexted.utils.constants import DEFAULT_ENCODING

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Dict[str, str]] = {
    "app": {"version": "0.0.0"},
    "editor": {"encoding": DEFAULT_ENCODING},
    "console": {"enabled": "true"},
    "log": {"level": "WARNING"},
}


class IniConfigService(IConfigService):
    r"""
    INI-backed configuration reader.

    Load order (first hit wins):
      1. Explicit path provided at construction
      2. User config dir (e.g., ~/.config/PyTextEditor/config.ini or %APPDATA%\PyTextEditor\config.ini)
      3. Project default at <repo>/config/config.ini  (optional)
    """

    DEFAULT_APP_DIR = "PyTextEditor"
    DEFAULT_FILE = "config.ini"

    def __init__(self, explicit_path: Optional[Path] = None, project_root: Optional[Path] = None):
        self._parser = configparser.ConfigParser()
        self._loaded_from: Optional[Path] = None

        candidates: list[Path] = []
        if explicit_path:
            candidates.append(explicit_path)
        candidates.append(Path(user_config_dir(self.DEFAULT_APP_DIR)) / self.DEFAULT_FILE)
        if project_root:
            candidates.append(project_root / "config" / self.DEFAULT_FILE)

        for path in candidates:
            try:
                if path.exists():
                    with path.open("r", encoding="utf-8") as fh:
                        self._parser.read_file(fh)
                    self._loaded_from = path
                    break
            except (OSError, configparser.Error) as e:
                # A broken config file must not stop the editor from starting.
                logger.warning("Ignoring config %s: %s", path, e)
                self._parser = configparser.ConfigParser()
                continue

        for section, values in DEFAULTS.items():
            if section not in self._parser:
                self._parser[section] = {}
            for key, value in values.items():
                self._parser[section].setdefault(key, value)

    # ----- IConfigService -----

    def get(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
        if section not in self._parser:
            return default
        return self._parser[section].get(key, default)

    def get_int(self, section: str, key: str, default: Optional[int] = None) -> Optional[int]:
        val = self.get(section, key, None)
        if val is None:
            return default
        try:
            return int(val.strip())
        except ValueError:
            return default

    def get_bool(self, section: str, key: str, default: Optional[bool] = None) -> Optional[bool]:
        val = self.get(section, key, None)
        if val is None:
            return default
        truth = {"1", "true", "yes", "y", "on"}
        falsy = {"0", "false", "no", "n", "off"}
        s = val.strip().lower()
        if s in truth:
            return True
        if s in falsy:
            return False
        return default

    def app_version(self) -> str:
        return self.get("app", "version", "0.0.0") or "0.0.0"

    @property
    def loaded_from(self) -> Optional[Path]:
        """For diagnostics."""
        return self._loaded_from
