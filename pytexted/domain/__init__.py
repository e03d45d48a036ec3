"""Domain layer: interfaces and simple models (dataclasses)."""

from .interfaces import (
    IAppConfig,
    IConfigService,
    IEditorView,
    IFileService,
    ILineReader,
    ISettingsService,
)
from .models import Command, CommandKind, LoopState

__all__ = [
    "IAppConfig",
    "IConfigService",
    "IEditorView",
    "IFileService",
    "ILineReader",
    "ISettingsService",
    "Command",
    "CommandKind",
    "LoopState",
]
