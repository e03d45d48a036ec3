from __future__ import annotations

from pathlib import Path
from typing import Protocol


class IFileService(Protocol):
    """Read/write whole text files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text(self, path: Path, text: str) -> bool: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...


class IEditorView(Protocol):
    """The part of a window a session is allowed to touch."""

    def get_text(self) -> str: ...
    def set_text(self, text: str) -> None: ...
    def set_title(self, title: str) -> None: ...
    def is_new_file(self) -> bool: ...
    def set_new_file(self, new_file: bool) -> None: ...


class ILineReader(Protocol):
    """Blocking line source for the command loop."""

    def read_line(self) -> str | None:
        """Return the next line without its newline, or None at end of input."""
        ...

    def close(self) -> None: ...


class ISettingsService(Protocol):
    """Persist and retrieve lightweight UI state."""

    def get_geometry(self) -> bytes | None: ...
    def set_geometry(self, blob: bytes) -> None: ...


class IConfigService(Protocol):
    """Read-only access to INI-style configuration."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def app_version(self) -> str: ...

    @property
    def loaded_from(self) -> Path | None:
        """The file the values came from, or None when only defaults apply."""
        ...


class IAppConfig(IConfigService, Protocol):
    """Typed accessors on top of IConfigService."""

    def encoding(self) -> str: ...
    def window_size(self) -> tuple[int, int]: ...
    def console_enabled(self) -> bool: ...
    def log_level(self) -> str: ...
