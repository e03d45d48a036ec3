from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from PyQt6.QtCore import QCoreApplication, QSettings

from pytexted.domain.interfaces import IAppConfig, IFileService, ILineReader, ISettingsService
from pytexted.services.control_loop import ControlLoop
from pytexted.services.file_service import FileService
from pytexted.services.input_reader import make_line_reader
from pytexted.services.session import Session
from pytexted.services.settings_service import SettingsService
from pytexted.services.ui.adapters import (
    ConsoleMessageService,
    QtFileDialogService,
    QtMessageService,
)
from pytexted.services.ui.editor_window import EditorWindow
from pytexted.services.ui.ports.dialogs import IFileDialogService
from pytexted.services.ui.ports.messages import IMessageService
from pytexted.services.window_registry import WindowRegistry
from pytexted.utils.constants import APP_NAME, APP_ORG, DEFAULT_ENCODING, DEFAULT_WINDOW_SIZE

logger = logging.getLogger(__name__)


def _quit_application() -> None:
    app = QCoreApplication.instance()
    if app is not None:
        logger.debug("Last window closed, quitting")
        app.quit()


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Owns the process-wide WindowRegistry
      - Builds windows with their session attached, and console loops bound to a session
    """

    def __init__(
        self,
        files: IFileService | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
        console: IMessageService | None = None,
        config: IAppConfig | None = None,
        registry: WindowRegistry | None = None,
    ) -> None:
        self.config = config
        encoding = config.encoding() if config is not None else DEFAULT_ENCODING

        # Core services (defaults if not supplied)
        self.file_service: IFileService = files or FileService(encoding)
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )

        # UI ports: dialogs/messages for the window, console for the command loop
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()
        self.console: IMessageService = console or ConsoleMessageService()

        self.registry = registry or WindowRegistry(on_empty=_quit_application)

        # Strong references; Qt would otherwise let unparented windows be collected.
        self.windows: list[EditorWindow] = []

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        config: IAppConfig | None = None,
        organization: str = APP_ORG,
        application: str = APP_NAME,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(qsettings=qsettings, config=config)

    # ---------- UI factories ----------

    def build_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
    ) -> EditorWindow:
        """
        Create an EditorWindow registered with the window counter, with a Session
        attached. `start_path` is opened the GUI way (errors shown, not raised).
        """
        size = self.config.window_size() if self.config is not None else DEFAULT_WINDOW_SIZE
        window = EditorWindow(
            self.settings_service,
            registry=self.registry,
            app_title=app_title,
            size=size,
        )
        session = Session(window, self.file_service, self.console, base_title=app_title)
        window.attach_session(session, dialogs=self.dialogs, messages=self.messages)
        window.new_window_requested.connect(self._open_new_window)
        self.windows.append(window)

        if start_path is not None:
            window.open_path(start_path)
        return window

    def build_control_loop(
        self,
        session: Session,
        reader: ILineReader | None = None,
        *,
        on_terminate: Callable[[int], None] | None = None,
    ) -> ControlLoop:
        return ControlLoop(
            session,
            reader or make_line_reader(),
            self.console,
            on_terminate=on_terminate,
        )

    def _open_new_window(self) -> None:
        self.build_window().show()
