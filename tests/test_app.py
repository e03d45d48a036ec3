from __future__ import annotations

import io
from pathlib import Path

import pytest

import pytexted.app as app_mod
from pytexted.domain.models import LoopState


# ----------------------------
# Fakes (Qt)
# ----------------------------


class FakeQApplication:
    org_name: str | None = None
    app_name: str | None = None
    instances: list["FakeQApplication"] = []

    def __init__(self, argv: list[str]) -> None:
        self.argv = list(argv)
        self.quit_on_last_closed = True
        self.exec_called = 0
        self.exit_codes: list[int] = []
        FakeQApplication.instances.append(self)

    @classmethod
    def setOrganizationName(cls, name: str) -> None:
        cls.org_name = name

    @classmethod
    def setApplicationName(cls, name: str) -> None:
        cls.app_name = name

    def setQuitOnLastWindowClosed(self, on: bool) -> None:
        self.quit_on_last_closed = on

    def exit(self, code: int = 0) -> None:
        self.exit_codes.append(code)

    def exec(self) -> int:
        self.exec_called += 1
        return 0


# ----------------------------
# Fakes (config, container, window)
# ----------------------------


class FakeConfig:
    def __init__(self, console: bool = True) -> None:
        self._console = console
        self.loaded_from: Path | None = None

    def app_version(self) -> str:
        return "1.2.3"

    def log_level(self) -> str:
        return "WARNING"

    def console_enabled(self) -> bool:
        return self._console


class FakeWindow:
    def __init__(self, start_path: Path | None) -> None:
        self.start_path = start_path
        self.shown = False
        self.session = object()

    def show(self) -> None:
        self.shown = True


class FakeLoop:
    def __init__(self, reader) -> None:
        self.reader = reader
        self.ran = 0

    def run(self) -> LoopState:
        self.ran += 1
        return LoopState.TERMINATED


class FakeContainer:
    def __init__(self) -> None:
        self.windows: list[FakeWindow] = []
        self.loops: list[FakeLoop] = []
        self.loop_session = None

    def build_window(self, *, start_path=None, app_title: str = ""):
        w = FakeWindow(start_path)
        self.windows.append(w)
        return w

    def build_control_loop(self, session, reader=None, *, on_terminate=None):
        self.loop_session = session
        loop = FakeLoop(reader)
        self.loops.append(loop)
        return loop


@pytest.fixture()
def patched(monkeypatch):
    FakeQApplication.instances = []
    monkeypatch.setattr(app_mod, "QApplication", FakeQApplication)
    monkeypatch.setattr(app_mod, "configure_logging", lambda level: None)
    hard_exits: list[int] = []
    monkeypatch.setattr(app_mod, "_hard_exit", hard_exits.append)
    container = FakeContainer()
    monkeypatch.setattr(
        app_mod.Container, "default", staticmethod(lambda **kw: container)
    )
    return container, hard_exits


# ----------------------------
# Tests
# ----------------------------


def test_run_app_opens_one_window_per_path(monkeypatch, patched, tmp_path: Path):
    container, hard_exits = patched
    monkeypatch.setattr(app_mod, "build_app_config", lambda: FakeConfig())
    a, b = tmp_path / "a.txt", tmp_path / "b.txt"

    rc = app_mod.run_app(["pytexted", str(a), str(b)], stdin=io.StringIO(""))

    assert rc == 0
    assert [w.start_path for w in container.windows] == [a, b]
    assert all(w.shown for w in container.windows)
    assert container.loop_session is container.windows[0].session

    app = FakeQApplication.instances[-1]
    assert app.quit_on_last_closed is False
    assert app.exec_called == 1
    assert FakeQApplication.org_name == app_mod.APP_ORG
    assert FakeQApplication.app_name == app_mod.APP_NAME


def test_run_app_without_paths_opens_empty_window(monkeypatch, patched):
    container, _ = patched
    monkeypatch.setattr(app_mod, "build_app_config", lambda: FakeConfig())

    app_mod.run_app(["pytexted"], stdin=io.StringIO(""))

    assert len(container.windows) == 1
    assert container.windows[0].start_path is None


def test_run_app_console_disabled_starts_no_loop(monkeypatch, patched):
    container, hard_exits = patched
    monkeypatch.setattr(app_mod, "build_app_config", lambda: FakeConfig(console=False))

    rc = app_mod.run_app(["pytexted"])

    assert rc == 0
    assert container.loops == []
    assert hard_exits == []


def test_exit_bridge_forwards_code():
    app = FakeQApplication([])
    bridge = app_mod._ExitBridge(app)
    bridge._exit(0)
    assert app.exit_codes == [0]


def test_report_loop_failure_logs(caplog):
    from concurrent.futures import Future

    f: Future = Future()
    f.set_exception(FileNotFoundError("nope.txt"))
    with caplog.at_level("ERROR", logger="pytexted.app"):
        app_mod._report_loop_failure(f)
    assert "nope.txt" in caplog.text

    ok: Future = Future()
    ok.set_result(LoopState.TERMINATED)
    caplog.clear()
    app_mod._report_loop_failure(ok)
    assert caplog.text == ""


def test_run_app_logs_version_and_config_source(monkeypatch, patched, tmp_path: Path, caplog):
    cfg = FakeConfig(console=False)
    cfg.loaded_from = tmp_path / "config.ini"
    monkeypatch.setattr(app_mod, "build_app_config", lambda: cfg)

    with caplog.at_level("INFO", logger="pytexted.app"):
        app_mod.run_app(["pytexted"])

    assert "1.2.3" in caplog.text
    assert str(tmp_path / "config.ini") in caplog.text
