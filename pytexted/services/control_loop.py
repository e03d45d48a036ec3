from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from pytexted.domain.interfaces import ILineReader
from pytexted.domain.models import Command, CommandKind, LoopState
from pytexted.services.commands.parser import parse_command
from pytexted.services.session import Session
from pytexted.services.ui.ports.messages import IMessageService
from pytexted.utils.constants import MSG_OPEN_USAGE, MSG_SAVEAS_USAGE, MSG_UNKNOWN

logger = logging.getLogger(__name__)


class ControlLoop:
    """
    Read-parse-dispatch cycle driving one window from the console.

    LISTENING until an exit keyword or end of input, then TERMINATED: the
    reader is closed and `on_terminate(0)` runs. Errors raised while opening a
    file are not caught here.
    """

    def __init__(
        self,
        session: Session,
        reader: ILineReader,
        messages: IMessageService,
        *,
        on_terminate: Callable[[int], None] | None = None,
    ) -> None:
        self.session = session
        self.reader = reader
        self.messages = messages
        self._on_terminate = on_terminate
        self.state = LoopState.LISTENING

    def run(self) -> LoopState:
        try:
            while self.state is LoopState.LISTENING:
                self.step()
        finally:
            self.reader.close()
        logger.debug("Command loop terminated")
        if self._on_terminate is not None:
            self._on_terminate(0)
        return self.state

    def step(self) -> LoopState:
        """Handle exactly one line of input."""
        line = self.reader.read_line()
        if line is None:
            logger.debug("End of input")
            self.state = LoopState.TERMINATED
            return self.state

        cmd = parse_command(line)
        if cmd.keyword is CommandKind.QUIT:
            self.state = LoopState.TERMINATED
        else:
            self.dispatch(cmd)
        return self.state

    def dispatch(self, cmd: Command) -> None:
        if cmd.keyword is CommandKind.SAVE:
            self.session.save()
        elif cmd.keyword is CommandKind.SAVEAS:
            if cmd.argument is None:
                self._usage(MSG_SAVEAS_USAGE)
                return
            self.session.save_as(Path(cmd.argument))
        elif cmd.keyword is CommandKind.OPEN:
            if cmd.argument is None:
                self._usage(MSG_OPEN_USAGE)
                return
            self.session.open(Path(cmd.argument))
        elif cmd.keyword is CommandKind.UNKNOWN:
            self.messages.info(None, "Command", MSG_UNKNOWN)

    def _usage(self, text: str) -> None:
        self.messages.info(None, "Usage", text)
