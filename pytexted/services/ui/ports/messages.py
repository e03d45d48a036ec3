from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IMessageService(Protocol):
    """
    Abstract UI port for showing messages. Decouples session logic from Qt widgets
    and from the console.
    """

    def info(self, parent: Any | None, title: str, text: str) -> None: ...
    def error(self, parent: Any | None, title: str, text: str) -> None: ...

    def ask(self, parent: Any | None, title: str, text: str) -> bool:
        """
        Ask a yes/no question, returning True for Yes and False for No or Cancel.
        """
        ...
