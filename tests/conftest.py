from __future__ import annotations

import os
from pathlib import Path

# Must be set before the first QApplication is created.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import QApplication

from pytexted.services.file_service import FileService
from pytexted.services.settings_service import SettingsService


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        if created:
            app.quit()


# --- Fakes shared by session / loop tests ---


class FakeView:
    """In-memory IEditorView: the buffer is a plain string."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.title = ""
        self.new_file = True

    def get_text(self) -> str:
        return self.text

    def set_text(self, text: str) -> None:
        self.text = text

    def set_title(self, title: str) -> None:
        self.title = title

    def is_new_file(self) -> bool:
        return self.new_file

    def set_new_file(self, new_file: bool) -> None:
        self.new_file = new_file


class RecordingMessages:
    """IMessageService that records (level, text) pairs."""

    def __init__(self, answer: bool = False) -> None:
        self.records: list[tuple[str, str]] = []
        self.answer = answer

    def info(self, parent, title, text) -> None:
        self.records.append(("info", text))

    def error(self, parent, title, text) -> None:
        self.records.append(("error", text))

    def ask(self, parent, title, text) -> bool:
        self.records.append(("ask", text))
        return self.answer


class FailingWriteFiles(FileService):
    """Real reads, but every write reports failure."""

    def __init__(self) -> None:
        super().__init__()
        self.write_attempts: list[Path] = []

    def write_text(self, path: Path, text: str) -> bool:
        self.write_attempts.append(path)
        return False


# --- Other common fixtures ---


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def view() -> FakeView:
    return FakeView()


@pytest.fixture()
def messages() -> RecordingMessages:
    return RecordingMessages()
