from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class CommandKind(Enum):
    SAVE = auto()
    SAVEAS = auto()
    OPEN = auto()
    QUIT = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class Command:
    """One parsed console line. `argument` is None when no words follow the keyword."""

    keyword: CommandKind
    argument: str | None = None


class LoopState(Enum):
    LISTENING = auto()
    TERMINATED = auto()
