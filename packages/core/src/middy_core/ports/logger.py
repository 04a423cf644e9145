"""IMiddyLogger — request-scoped logger handle exposed by the context."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..logger import LogLevel, LogProperty


@runtime_checkable
class IMiddyLogger(Protocol):
    """Logger that accumulates key/value properties for the current call.

    Middleware only ever enriches the handle; formatting is the
    implementation's concern.
    """

    def enrich_with(self, log_property: LogProperty) -> None:
        """Attach *log_property* to every subsequent log entry."""
        ...

    def log(
        self, level: LogLevel, message: str, *properties: LogProperty
    ) -> None:
        """Emit *message* with the global and the given *properties*."""
        ...

    def debug(self, message: str, *properties: LogProperty) -> None: ...

    def info(self, message: str, *properties: LogProperty) -> None: ...

    def warning(self, message: str, *properties: LogProperty) -> None: ...

    def error(self, message: str, *properties: LogProperty) -> None: ...

    def critical(self, message: str, *properties: LogProperty) -> None: ...
