from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import TextIO

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot
from PyQt6.QtWidgets import QApplication

from pytexted.di.container import Container
from pytexted.services.config.app_config import build_app_config
from pytexted.services.input_reader import make_line_reader
from pytexted.utils.constants import APP_NAME, APP_ORG
from pytexted.utils.logging_setup import configure_logging

logger = logging.getLogger(__name__)


class _ExitBridge(QObject):
    """Lets a worker thread end the Qt event loop from the GUI thread."""

    requested = pyqtSignal(int)

    def __init__(self, app) -> None:
        super().__init__()
        self._app = app
        self.requested.connect(self._exit)

    @pyqtSlot(int)
    def _exit(self, code: int) -> None:
        self._app.exit(code)


def _report_loop_failure(future: Future) -> None:
    if future.cancelled():
        return
    exc = future.exception()
    if exc is not None:
        logger.error("Command loop stopped: %s", exc, exc_info=exc)


def _hard_exit(code: int) -> None:
    """End the process even though a worker is still blocked reading stdin."""
    sys.stdout.flush()
    sys.stderr.flush()
    logging.shutdown()
    os._exit(code)


def run_app(argv: Sequence[str], *, stdin: TextIO | None = None) -> int:
    """
    Bootstraps Qt, opens one window per path argument (or an empty one), and
    binds the first window to the console command loop on a worker thread.
    """
    config = build_app_config()
    configure_logging(config.log_level())
    logger.info(
        "%s %s (config: %s)", APP_NAME, config.app_version(), config.loaded_from or "defaults"
    )

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))
    # The WindowRegistry decides when the last window is gone.
    app.setQuitOnLastWindowClosed(False)

    container = Container.default(config=config)

    paths = [Path(a) for a in argv[1:]]
    windows = [container.build_window(start_path=p, app_title=APP_NAME) for p in paths]
    if not windows:
        windows.append(container.build_window(app_title=APP_NAME))
    for w in windows:
        w.show()

    bridge = _ExitBridge(app)
    pool = ThreadPoolExecutor(thread_name_prefix="pytexted-window")
    futures: list[Future] = []
    if config.console_enabled():
        loop = container.build_control_loop(
            windows[0].session,
            make_line_reader(stdin),
            on_terminate=bridge.requested.emit,
        )
        future = pool.submit(loop.run)
        future.add_done_callback(_report_loop_failure)
        futures.append(future)

    rc = app.exec()
    pool.shutdown(wait=False, cancel_futures=True)
    if any(not f.done() for f in futures):
        _hard_exit(rc)
    return rc
