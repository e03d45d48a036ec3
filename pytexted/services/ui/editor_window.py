from __future__ import annotations

import logging
import threading
from pathlib import Path

from PyQt6.QtCore import QByteArray, pyqtSignal
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QPlainTextEdit, QStatusBar

from pytexted.domain.interfaces import ISettingsService
from pytexted.services.session import Session
from pytexted.services.ui.ports.dialogs import IFileDialogService
from pytexted.services.ui.ports.messages import IMessageService
from pytexted.services.window_registry import WindowRegistry
from pytexted.utils.constants import APP_NAME, DEFAULT_WINDOW_SIZE, FILE_FILTER, MSG_SAVE_FAILED

logger = logging.getLogger(__name__)


class EditorWindow(QMainWindow):
    """
    Plain-text editor window implementing IEditorView.

    View calls may arrive from a command-loop worker thread. Setters are
    forwarded to the GUI thread through queued signals; get_text() reads a
    mirror of the buffer kept up to date on textChanged. The mirror is built
    from the raw document text, since toPlainText() folds non-breaking spaces
    and line separators into plain ones.
    """

    new_window_requested = pyqtSignal()

    _text_pushed = pyqtSignal(str)
    _title_pushed = pyqtSignal(str)

    def __init__(
        self,
        settings: ISettingsService,
        *,
        registry: WindowRegistry | None = None,
        app_title: str = APP_NAME,
        size: tuple[int, int] = DEFAULT_WINDOW_SIZE,
    ) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(*size)

        self.settings = settings
        self.session: Session | None = None
        self.dialogs: IFileDialogService | None = None
        self.messages: IMessageService | None = None

        self._lock = threading.Lock()
        self._text = ""
        self._new_file = True
        self._applying = False

        # Widgets
        self.editor = QPlainTextEdit(self)
        self.editor.setTabStopDistance(4 * self.editor.fontMetrics().horizontalAdvance(" "))
        self.setCentralWidget(self.editor)

        # Signals
        self.editor.textChanged.connect(self._on_text_changed)
        self._text_pushed.connect(self._apply_text)
        self._title_pushed.connect(self.setWindowTitle)

        # UI
        self._build_actions()
        self._build_menu()
        self.setStatusBar(QStatusBar(self))

        geo = self.settings.get_geometry()
        if isinstance(geo, (bytes, bytearray)):
            self.restoreGeometry(QByteArray(geo))

        self._registry = registry
        if self._registry is not None:
            self._registry.opened()

    def attach_session(
        self,
        session: Session,
        *,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
    ) -> None:
        self.session = session
        self.dialogs = dialogs
        self.messages = messages

    # ---------- IEditorView ----------
    def get_text(self) -> str:
        with self._lock:
            return self._text

    def set_text(self, text: str) -> None:
        with self._lock:
            self._text = text
        self._text_pushed.emit(text)

    def set_title(self, title: str) -> None:
        self._title_pushed.emit(title)

    def is_new_file(self) -> bool:
        with self._lock:
            return self._new_file

    def set_new_file(self, new_file: bool) -> None:
        with self._lock:
            self._new_file = new_file

    # ---------- UI creation ----------
    def _build_actions(self):
        self.act_new_window = QAction(
            "New Window",
            self,
            shortcut=QKeySequence.StandardKey.New,
            triggered=lambda: self.new_window_requested.emit(),
        )
        self.act_open = QAction(
            "Open…",
            self,
            shortcut=QKeySequence.StandardKey.Open,
            triggered=self._open_dialog,
        )
        self.act_save = QAction(
            "Save", self, shortcut=QKeySequence.StandardKey.Save, triggered=self._save
        )
        self.act_save_as = QAction(
            "Save As…",
            self,
            shortcut=QKeySequence.StandardKey.SaveAs,
            triggered=self._save_as,
        )
        self.act_close = QAction(
            "Close", self, shortcut=QKeySequence.StandardKey.Close, triggered=self.close
        )

    def _build_menu(self):
        filem = self.menuBar().addMenu("&File")
        filem.addAction(self.act_new_window)
        filem.addAction(self.act_open)
        filem.addSeparator()
        filem.addAction(self.act_save)
        filem.addAction(self.act_save_as)
        filem.addSeparator()
        filem.addAction(self.act_close)

    # ---------- Actions ----------
    def open_path(self, path: Path) -> bool:
        """GUI open: read errors are shown in a dialog instead of propagating."""
        if self.session is None:
            return False
        try:
            # The buffer still belongs to the previous file on failure.
            self.session.open(path, restore_path_on_error=True)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Open of %s failed: %s", path, e)
            if self.messages is not None:
                self.messages.error(self, "Open Error", f"Failed to open file:\n{e}")
            return False
        self.statusBar().showMessage(f"Opened: {path}", 3000)
        return True

    def _open_dialog(self):
        if self.dialogs is None:
            return
        start = str(self.session.current_path.parent) if self._has_path() else None
        path = self.dialogs.get_open_file(self, "Open", start, FILE_FILTER)
        if path:
            self.open_path(path)

    def _save(self):
        if self.session is None:
            return
        if self.is_new_file() and not self._has_path():
            self._save_as()
            return
        self._report_save(self.session.save())

    def _save_as(self):
        if self.session is None or self.dialogs is None:
            return
        start = str(self.session.current_path) if self._has_path() else None
        path = self.dialogs.get_save_file(self, "Save As", start, FILE_FILTER)
        if path is None:
            return
        self._report_save(self.session.save_as(path))

    # ---------- Helpers ----------
    def _has_path(self) -> bool:
        return self.session is not None and self.session.current_path is not None

    def _report_save(self, written: bool) -> None:
        if written:
            self.statusBar().showMessage(f"Saved: {self.session.current_path}", 3000)
        elif self.messages is not None:
            self.messages.error(self, "Save Error", MSG_SAVE_FAILED)

    def _buffer_text(self) -> str:
        return self.editor.document().toRawText().replace("\u2029", "\n")

    def _apply_text(self, text: str) -> None:
        if self._buffer_text() != text:
            self._applying = True
            try:
                self.editor.setPlainText(text)
            finally:
                self._applying = False
        with self._lock:
            self._text = text

    def _on_text_changed(self) -> None:
        if self._applying:
            return
        with self._lock:
            self._text = self._buffer_text()

    # ---------- Close ----------
    def closeEvent(self, event):
        if (
            self.session is not None
            and self.messages is not None
            and self.session.has_unsaved_changes()
            and self.messages.ask(self, "Unsaved changes", "Save changes before closing?")
        ):
            self._save()
        self.settings.set_geometry(bytes(self.saveGeometry()))
        super().closeEvent(event)
        self._release()

    def _release(self) -> None:
        registry, self._registry = self._registry, None
        if registry is not None:
            registry.closed()
