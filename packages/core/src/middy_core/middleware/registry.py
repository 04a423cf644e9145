"""MiddlewareRegistry — middleware declared once, shared by many functions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .definition import MiddlewareDefinition

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..ports.middleware import ILambdaMiddleware

logger = logging.getLogger(__name__)


class MiddlewareRegistry:
    """Middleware classes in registration order, instantiated lazily.

    The first registered class is the outermost layer.  Instances are built
    on the first :meth:`snapshot` and reused until something new is
    registered, so every pipeline built in between shares the same objects.

    Usage::

        registry = MiddlewareRegistry()
        registry.register(ProblemDetailsMiddleware)

        @registry.middleware
        class AuditMiddleware: ...

        pipeline = Pipeline.from_registry(registry, handle)
    """

    def __init__(self) -> None:
        self._definitions: list[MiddlewareDefinition] = []
        self._built: tuple[ILambdaMiddleware, ...] | None = None

    def register(
        self,
        middleware_cls: type[Any],
        *,
        factory: Callable[..., ILambdaMiddleware] | None = None,
        **kwargs: object,
    ) -> MiddlewareDefinition:
        """Append *middleware_cls*; *kwargs* go to its constructor or *factory*."""
        definition = MiddlewareDefinition(middleware_cls, factory, kwargs)
        self._definitions.append(definition)
        self._built = None
        logger.debug(
            "Registered %s at position %d",
            middleware_cls.__name__,
            len(self._definitions),
        )
        return definition

    def middleware(
        self, middleware_cls: type[Any] | None = None, **kwargs: object
    ) -> Any:
        """Class decorator form of :meth:`register`, with or without arguments."""

        def decorate(cls: type[Any]) -> type[Any]:
            self.register(cls, **kwargs)
            return cls

        if middleware_cls is None:
            return decorate
        return decorate(middleware_cls)

    def snapshot(self) -> tuple[ILambdaMiddleware, ...]:
        """Instances of every registered middleware, outermost first."""
        if self._built is None:
            self._built = tuple(d.build() for d in self._definitions)
        return self._built

    def __len__(self) -> int:
        return len(self._definitions)
