"""ILambdaMiddleware — before/after hook protocol."""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Protocol,
    TypeVar,
    runtime_checkable,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from ..context import InvocationContext

TEvent_contra = TypeVar("TEvent_contra", contravariant=True)
TResponse = TypeVar("TResponse")


@runtime_checkable
class ILambdaMiddleware(Protocol[TEvent_contra, TResponse]):
    """Protocol for middleware wrapped around a Lambda handler.

    ``before`` hooks run in registration order ahead of the handler,
    ``after`` hooks in reverse order once it returned (onion model).
    Either hook may be a coroutine function; both signal failure by raising.
    """

    def before(
        self, event: TEvent_contra, context: InvocationContext
    ) -> Awaitable[None] | None:
        """Inspect the inbound *event* and enrich *context*.

        Parameters
        ----------
        event:
            The inbound event, exactly as handed to the handler.
        context:
            The per-call :class:`~middy_core.context.InvocationContext`.
        """
        ...

    def after(
        self, response: TResponse, context: InvocationContext
    ) -> Awaitable[TResponse] | TResponse:
        """Return the (possibly replaced) *response*."""
        ...


def middleware_name(middleware: Any) -> str:
    """Human readable name used in debug logs."""
    return type(middleware).__name__
