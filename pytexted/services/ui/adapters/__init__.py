from __future__ import annotations

from .console_messages import ConsoleMessageService
from .qt_dialogs import QtFileDialogService
from .qt_messages import QtMessageService

__all__ = [
    "ConsoleMessageService",
    "QtFileDialogService",
    "QtMessageService",
]
