"""Pipeline — onion-model executor for before/handler/after hooks."""

from __future__ import annotations

import logging
from inspect import isawaitable
from typing import TYPE_CHECKING, Any, Generic, TypeAlias, TypeVar

from ..failures import aggregate_failures
from ..lifecycle import invocation_scope
from ..ports.middleware import middleware_name

TEvent = TypeVar("TEvent")
TResponse = TypeVar("TResponse")

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

    from ..context import InvocationContext
    from ..ports.lambda_context import ILambdaContext
    from ..ports.logger import IMiddyLogger
    from ..ports.middleware import ILambdaMiddleware
    from .registry import MiddlewareRegistry

    HandlerFn: TypeAlias = Callable[
        [TEvent, InvocationContext], Awaitable[TResponse] | TResponse
    ]
    LoggerFactory: TypeAlias = Callable[[ILambdaContext | None], IMiddyLogger]

logger = logging.getLogger(__name__)


async def _resolve(result: Any) -> Any:
    if isawaitable(result):
        return await result
    return result


class Pipeline(Generic[TEvent, TResponse]):
    """Runs a handler wrapped in an ordered, immutable list of middleware.

    For every call:

    1. a fresh :class:`~middy_core.context.InvocationContext` is built;
    2. every ``before`` hook runs in registration order, failures are
       recorded and the next hook still runs;
    3. if any ``before`` hook failed, the handler and the whole after phase
       are skipped;
    4. the handler runs once; if it fails, the failure is recorded and the
       after phase is skipped;
    5. every ``after`` hook runs in reverse order, each may replace the
       response, failures are recorded and the next hook still runs;
    6. recorded failures are raised together as
       :class:`~middy_core.primitives.exceptions.AggregateMiddlewareError`.

    The middleware tuple is fixed at construction and may be shared by
    concurrent invocations; all mutable state lives in the per-call context.
    """

    def __init__(
        self,
        handler: HandlerFn[TEvent, TResponse],
        middlewares: Iterable[ILambdaMiddleware[TEvent, TResponse]] = (),
        *,
        logger_factory: LoggerFactory | None = None,
    ) -> None:
        self._handler = handler
        self._middlewares: tuple[ILambdaMiddleware[TEvent, TResponse], ...] = tuple(
            middlewares
        )
        self._logger_factory = logger_factory

    @classmethod
    def from_registry(
        cls,
        registry: MiddlewareRegistry,
        handler: HandlerFn[TEvent, TResponse],
        *,
        logger_factory: LoggerFactory | None = None,
    ) -> Pipeline[TEvent, TResponse]:
        """Build a pipeline from the registry's current middleware."""
        return cls(
            handler,
            registry.snapshot(),
            logger_factory=logger_factory,
        )

    @property
    def middlewares(self) -> tuple[ILambdaMiddleware[TEvent, TResponse], ...]:
        return self._middlewares

    # ── Public API ───────────────────────────────────────────────

    async def execute(
        self, event: TEvent, lambda_context: ILambdaContext | None
    ) -> TResponse:
        """Run one invocation and return the handler's (shaped) response.

        Raises
        ------
        AggregateMiddlewareError
            When any hook or the handler failed; carries every failure, the
            output produced so far and the invocation context.
        """
        response, _ = await self.execute_with_context(event, lambda_context)
        return response

    async def execute_with_context(
        self, event: TEvent, lambda_context: ILambdaContext | None
    ) -> tuple[TResponse, InvocationContext]:
        """Like :meth:`execute` but also return the invocation's context."""
        with invocation_scope(lambda_context, self._logger_factory) as context:
            response = await self._run(event, context)
            error = aggregate_failures(
                context.middleware_exceptions, response=response, context=context
            )
            if error is not None:
                raise error
            return response, context

    # ── Internals ────────────────────────────────────────────────

    async def _run(self, event: TEvent, context: InvocationContext) -> Any:
        await self._run_before(event, context)
        if context.has_failures:
            logger.debug(
                "Skipping handler and after phase: %d before hook(s) failed",
                len(context.middleware_exceptions),
            )
            return None

        try:
            response = await _resolve(self._handler(event, context))
        except Exception as exc:
            logger.debug("Handler failed: %r", exc)
            context.record_failure(exc)
            return None

        return await self._run_after(response, context)

    async def _run_before(self, event: TEvent, context: InvocationContext) -> None:
        for mw in self._middlewares:
            try:
                await _resolve(mw.before(event, context))
            except Exception as exc:
                logger.debug("Before hook of %s failed: %r", middleware_name(mw), exc)
                context.record_failure(exc)

    async def _run_after(self, response: Any, context: InvocationContext) -> Any:
        for mw in reversed(self._middlewares):
            try:
                response = await _resolve(mw.after(response, context))
            except Exception as exc:
                logger.debug("After hook of %s failed: %r", middleware_name(mw), exc)
                context.record_failure(exc)
        return response


def build_pipeline(
    middlewares: Iterable[ILambdaMiddleware[Any, Any]],
    handler_fn: Callable[[Any, InvocationContext], Any],
    *,
    logger_factory: LoggerFactory | None = None,
) -> Pipeline[Any, Any]:
    """Build a :class:`Pipeline` around *handler_fn*.

    The first middleware in the list is the **outermost** layer: its
    ``before`` runs first and its ``after`` runs last.
    """
    return Pipeline(handler_fn, middlewares, logger_factory=logger_factory)
