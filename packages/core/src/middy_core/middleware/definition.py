"""MiddlewareDefinition — a middleware class plus how to construct it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import MiddlewareRegistrationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..ports.middleware import ILambdaMiddleware


@dataclass(frozen=True)
class MiddlewareDefinition:
    """Deferred middleware: built once per registry snapshot."""

    middleware_cls: type[Any]
    factory: Callable[..., ILambdaMiddleware] | None = None
    kwargs: dict[str, object] = field(default_factory=dict)

    def build(self) -> ILambdaMiddleware:
        """Construct the middleware, checking it exposes both hooks."""
        constructor = self.factory or self.middleware_cls
        instance = constructor(**self.kwargs)
        missing = [hook for hook in ("before", "after") if not hasattr(instance, hook)]
        if missing:
            raise MiddlewareRegistrationError(
                f"{self.middleware_cls.__name__} is missing hook(s): "
                + ", ".join(missing)
            )
        return instance
