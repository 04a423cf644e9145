"""LoggingMiddleware — logs invocation start and duration."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..logger import LogLevel, LogProperty

if TYPE_CHECKING:
    from ..context import InvocationContext


class LoggingMiddleware:
    """Logs the event type and the invocation duration through the context logger.

    The duration is measured from the context's ``started_at``, so it covers
    every layer regardless of where this middleware is registered.  Nothing is
    written to ``additional_context``.
    """

    async def before(self, event: Any, context: InvocationContext) -> None:
        context.logger.log(
            LogLevel.INFO,
            f"Handling {type(event).__name__}",
            LogProperty("eventType", type(event).__name__),
        )

    async def after(self, response: Any, context: InvocationContext) -> Any:
        elapsed = context.elapsed_ms
        context.logger.log(
            LogLevel.INFO,
            f"Invocation completed in {elapsed:.2f}ms",
            LogProperty("durationMs", round(elapsed, 2)),
        )
        return response
