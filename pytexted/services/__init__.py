"""Concrete services: file access, session state, command loop and settings."""

from .control_loop import ControlLoop
from .file_service import FileService
from .session import Session
from .settings_service import SettingsService
from .window_registry import WindowRegistry

__all__ = ["ControlLoop", "FileService", "Session", "SettingsService", "WindowRegistry"]
