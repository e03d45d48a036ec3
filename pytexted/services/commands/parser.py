from __future__ import annotations

from pytexted.domain.models import Command, CommandKind
from pytexted.utils.constants import EXIT_KEYWORDS, OPEN_PREFIX, SAVE_KEYWORD, SAVEAS_PREFIX


def _trailing_argument(line: str) -> str | None:
    """
    Words after the keyword, rejoined with one space.

    Runs of spaces collapse: "open a  b.txt" yields "a b.txt".
    """
    words = [w for w in line.split(" ") if w]
    rest = words[1:]
    return " ".join(rest) if rest else None


def parse_command(line: str) -> Command:
    """
    Classify one console line.

    Exit keywords and "save" match case-insensitively and exactly;
    "saveas" and "open" are case-sensitive prefixes ("saveas" is checked first).
    Never raises: anything unmatched is CommandKind.UNKNOWN.
    """
    lowered = line.lower()
    if lowered in EXIT_KEYWORDS:
        return Command(CommandKind.QUIT)
    if lowered == SAVE_KEYWORD:
        return Command(CommandKind.SAVE)
    if line.startswith(SAVEAS_PREFIX):
        return Command(CommandKind.SAVEAS, _trailing_argument(line))
    if line.startswith(OPEN_PREFIX):
        return Command(CommandKind.OPEN, _trailing_argument(line))
    return Command(CommandKind.UNKNOWN)
