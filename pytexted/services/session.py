from __future__ import annotations

import logging
import threading
from pathlib import Path

from pytexted.domain.interfaces import IEditorView, IFileService
from pytexted.services.ui.ports.messages import IMessageService
from pytexted.utils.constants import BASE_WINDOW_NAME, MSG_SAVE_FAILED, MSG_SAVED

logger = logging.getLogger(__name__)


class Session:
    """
    Per-window editing state: the file being edited and the text as it was
    last saved. The buffer itself lives in the view.

    Both the GUI thread (menu actions) and a command-loop worker may call in,
    so public operations are serialized on one lock.
    """

    def __init__(
        self,
        view: IEditorView,
        files: IFileService,
        messages: IMessageService,
        *,
        base_title: str = BASE_WINDOW_NAME,
    ) -> None:
        self.view = view
        self.files = files
        self.messages = messages
        self.base_title = base_title

        self.current_path: Path | None = None
        self.last_saved_text: str = view.get_text()
        self._lock = threading.RLock()

    def open(self, path: Path, *, restore_path_on_error: bool = False) -> None:
        """
        Load `path` into the view. Read errors propagate; `current_path` is
        already re-pointed when they do, unless `restore_path_on_error` is set.
        """
        with self._lock:
            previous, self.current_path = self.current_path, path
            try:
                text = self.files.read_text(path)
            except (OSError, UnicodeDecodeError):
                if restore_path_on_error:
                    self.current_path = previous
                raise
            self.view.set_text(text)
            self.view.set_title(f"{self.base_title} - {path}")
            self.view.set_new_file(False)
            self.last_saved_text = self.view.get_text()
        logger.info("Opened %s", path)

    def save(self) -> bool:
        with self._lock:
            if self.view.is_new_file() and self.current_path is None:
                logger.debug("Save ignored: buffer has never been given a path")
                return False
            return self.save_as(self.current_path)

    def save_as(self, destination: Path | None) -> bool:
        """
        Write the buffer to `destination` and re-open it from there.

        `None` is a no-op. Otherwise `last_saved_text` takes the buffer
        contents even if the write failed. Returns whether the file was written.
        """
        if destination is None:
            return False
        with self._lock:
            written = self.files.write_text(destination, self.view.get_text())
            if not written:
                self.messages.error(None, "Save Error", MSG_SAVE_FAILED)
            else:
                self.messages.info(None, "Saved", MSG_SAVED.format(path=destination))
                self.open(destination)
            # Snapshot regardless of the write result.
            self.last_saved_text = self.view.get_text()
            return written

    def has_unsaved_changes(self) -> bool:
        with self._lock:
            return self.view.get_text() != self.last_saved_text
