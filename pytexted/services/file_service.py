from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from pytexted.domain.interfaces import IFileService
from pytexted.utils.constants import DEFAULT_ENCODING

logger = logging.getLogger(__name__)


class FileService(IFileService):
    """Whole-file text reads and atomic writes."""

    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        self.encoding = encoding

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding=self.encoding)

    def write_text(self, path: Path, text: str) -> bool:
        """Write `text` to `path`; return False instead of raising on failure."""
        try:
            self.write_text_atomic(path, text)
        except (OSError, UnicodeError) as e:
            logger.warning("Write to %s failed: %s", path, e)
            return False
        logger.debug("Wrote %d chars to %s", len(text), path)
        return True

    def write_text_atomic(self, path: Path, text: str) -> None:
        data = text.encode(self.encoding)
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path}")
        sf.write(data)
        if not sf.commit():
            raise OSError(f"Commit failed for: {path}")
