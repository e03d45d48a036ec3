from __future__ import annotations

from .parser import parse_command

__all__ = ["parse_command"]
