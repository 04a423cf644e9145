"""MiddyFunction — Lambda entry point wrapping a handler in middleware."""

from __future__ import annotations

import asyncio
import functools
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel

from .middleware.pipeline import Pipeline
from .primitives.exceptions import PipelineFrozenError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from .context import InvocationContext
    from .ports.lambda_context import ILambdaContext
    from .ports.logger import IMiddyLogger
    from .ports.middleware import ILambdaMiddleware

logger = logging.getLogger(__name__)

TEvent = TypeVar("TEvent")
TResponse = TypeVar("TResponse")


class MiddyFunction(ABC, Generic[TEvent, TResponse]):
    """Base class for Lambda functions with a middleware pipeline.

    Subclasses implement :meth:`handle` and register middleware with
    :meth:`use`, typically from ``__init__``.  The middleware list is frozen
    on the first invocation.

    Usage::

        class GetOrder(MiddyFunction[dict, APIGatewayProxyResponse]):
            def __init__(self) -> None:
                super().__init__()
                self.use(ApiGatewayTracingMiddleware())
                self.use(ProblemDetailsMiddleware())

            async def handle(self, event, context):
                ...

        lambda_handler = GetOrder()
    """

    def __init__(
        self,
        *,
        logger_factory: Callable[[ILambdaContext | None], IMiddyLogger]
        | None = None,
    ) -> None:
        self._middlewares: list[ILambdaMiddleware[TEvent, TResponse]] = []
        self._logger_factory = logger_factory
        self._pipeline: Pipeline[TEvent, TResponse] | None = None

    def use(
        self, middleware: ILambdaMiddleware[TEvent, TResponse]
    ) -> MiddyFunction[TEvent, TResponse]:
        """Append *middleware* to the chain and return ``self``."""
        if self._pipeline is not None:
            raise PipelineFrozenError(
                f"Cannot add {type(middleware).__name__}: "
                f"{type(self).__name__} has already been invoked"
            )
        self._middlewares.append(middleware)
        logger.debug(
            "%s uses %s", type(self).__name__, type(middleware).__name__
        )
        return self

    @property
    def pipeline(self) -> Pipeline[TEvent, TResponse]:
        if self._pipeline is None:
            self._pipeline = Pipeline(
                self.handle, self._middlewares, logger_factory=self._logger_factory
            )
        return self._pipeline

    @abstractmethod
    def handle(
        self, event: TEvent, context: InvocationContext
    ) -> Awaitable[TResponse] | TResponse:
        """Business logic; may be a coroutine function."""

    async def handler(
        self, event: TEvent, lambda_context: ILambdaContext | None
    ) -> TResponse:
        """Run the pipeline for one invocation."""
        return await self.pipeline.execute(event, lambda_context)

    def __call__(self, event: TEvent, lambda_context: ILambdaContext | None) -> Any:
        """Synchronous entry point for the Lambda runtime.

        Pydantic responses are dumped with their AWS field names.
        """
        response = asyncio.run(self.handler(event, lambda_context))
        if isinstance(response, BaseModel):
            return response.model_dump(by_alias=True, exclude_none=True)
        return response


class _DecoratedFunction(MiddyFunction[Any, Any]):
    def __init__(
        self,
        fn: Callable[[Any, InvocationContext], Any],
        middlewares: tuple[ILambdaMiddleware[Any, Any], ...],
        logger_factory: Callable[[ILambdaContext | None], IMiddyLogger] | None,
    ) -> None:
        super().__init__(logger_factory=logger_factory)
        self._fn = fn
        functools.update_wrapper(self, fn)
        for mw in middlewares:
            self.use(mw)

    def handle(self, event: Any, context: InvocationContext) -> Any:
        return self._fn(event, context)


def middy(
    *middlewares: ILambdaMiddleware[Any, Any],
    logger_factory: Callable[[ILambdaContext | None], IMiddyLogger] | None = None,
) -> Callable[[Callable[[Any, InvocationContext], Any]], MiddyFunction[Any, Any]]:
    """Decorator wrapping a plain handler function in a middleware pipeline.

    Usage::

        @middy(SNSTracingMiddleware())
        async def lambda_handler(event, context):
            context.logger.info("received")
    """

    def decorator(
        fn: Callable[[Any, InvocationContext], Any],
    ) -> MiddyFunction[Any, Any]:
        return _DecoratedFunction(fn, middlewares, logger_factory)

    return decorator
