"""Invocation scope — one fresh InvocationContext per call."""

from __future__ import annotations

import contextlib
from contextvars import ContextVar
from typing import TYPE_CHECKING

from .context import InvocationContext

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from .ports.lambda_context import ILambdaContext
    from .ports.logger import IMiddyLogger

#: ContextVar tracking the context of the invocation being processed —
#: ``None`` outside of :func:`invocation_scope`.
_current_context: ContextVar[InvocationContext | None] = ContextVar(
    "current_invocation_context", default=None
)


def get_current_context() -> InvocationContext | None:
    """Return the active InvocationContext (or *None* outside a call)."""
    return _current_context.get()


@contextlib.contextmanager
def invocation_scope(
    lambda_context: ILambdaContext | None,
    logger_factory: Callable[[ILambdaContext | None], IMiddyLogger] | None = None,
) -> Iterator[InvocationContext]:
    """Build a new context for one call and publish it for its duration.

    Each asyncio task sees its own value, so concurrent invocations of the
    same pipeline never observe each other's state.
    """
    context = InvocationContext(lambda_context, logger_factory)
    token = _current_context.set(context)
    try:
        yield context
    finally:
        _current_context.reset(token)
