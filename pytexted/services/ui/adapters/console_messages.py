from __future__ import annotations

import sys
from typing import Any, TextIO

from pytexted.services.ui.ports.messages import IMessageService


class ConsoleMessageService(IMessageService):
    """
    Plain-text messages for the command loop: info on stdout, errors on
    stderr. Titles are dropped; only the text is printed.
    """

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self._out = out
        self._err = err

    # Resolved per call so redirected/captured streams are honoured.
    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    def info(self, parent: Any | None, title: str, text: str) -> None:
        print(text, file=self.out, flush=True)

    def error(self, parent: Any | None, title: str, text: str) -> None:
        print(text, file=self.err, flush=True)

    def ask(self, parent: Any | None, title: str, text: str) -> bool:
        # stdin belongs to the command loop.
        print(f"{text} [assuming no]", file=self.out, flush=True)
        return False
