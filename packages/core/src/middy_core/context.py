"""InvocationContext — per-call state threaded through every hook."""

from __future__ import annotations

import time
from datetime import timedelta
from typing import TYPE_CHECKING, Any

from .logger import default_logger_factory

if TYPE_CHECKING:
    from collections.abc import Callable

    from .ports.lambda_context import ILambdaContext
    from .ports.logger import IMiddyLogger


class InvocationContext:
    """Mutable bag owned by exactly one invocation.

    Holds the platform call metadata, a logger bound to it, free-form
    ``additional_context`` entries, the failures recorded by hooks and the
    ``perf_counter`` reading taken when the invocation started.
    A new instance is built for every call; see
    :func:`~middy_core.lifecycle.invocation_scope`.

    Parameters
    ----------
    lambda_context:
        The runtime's context object (request id, function identity,
        remaining time).
    logger_factory:
        Optional callable ``(lambda_context) -> IMiddyLogger``.  Defaults to
        :func:`~middy_core.logger.default_logger_factory`.
    """

    def __init__(
        self,
        lambda_context: ILambdaContext | None,
        logger_factory: Callable[[ILambdaContext | None], IMiddyLogger]
        | None = None,
    ) -> None:
        self.started_at = time.perf_counter()
        self.additional_context: dict[str, Any] = {}
        self.middleware_exceptions: list[Exception] = []
        self.logger_factory: Callable[[ILambdaContext | None], IMiddyLogger] = (
            logger_factory or default_logger_factory
        )
        self.lambda_context: ILambdaContext | None = None
        self.logger: IMiddyLogger
        self.attach_to_lambda_context(lambda_context)

    def attach_to_lambda_context(self, lambda_context: ILambdaContext | None) -> None:
        """Bind *lambda_context* and rebuild the logger from it."""
        self.lambda_context = lambda_context
        self.logger = self.logger_factory(lambda_context)

    # ── Additional state ─────────────────────────────────────────

    def set(self, key: str, value: Any) -> None:
        self.additional_context[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self.additional_context.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self.additional_context

    # ── Failures ─────────────────────────────────────────────────

    def record_failure(self, error: Exception) -> None:
        """Append *error* to the failures of this invocation."""
        self.middleware_exceptions.append(error)

    @property
    def has_failures(self) -> bool:
        return bool(self.middleware_exceptions)

    # ── Platform metadata ────────────────────────────────────────

    @property
    def aws_request_id(self) -> str | None:
        return getattr(self.lambda_context, "aws_request_id", None)

    @property
    def invoked_function_arn(self) -> str | None:
        return getattr(self.lambda_context, "invoked_function_arn", None)

    @property
    def elapsed_ms(self) -> float:
        """Milliseconds since this invocation started."""
        return (time.perf_counter() - self.started_at) * 1000

    @property
    def remaining_time(self) -> timedelta | None:
        """Time budget left, when the platform object exposes it."""
        getter = getattr(self.lambda_context, "get_remaining_time_in_millis", None)
        if getter is None:
            return None
        return timedelta(milliseconds=getter())

    def __repr__(self) -> str:
        return (
            f"InvocationContext(aws_request_id={self.aws_request_id!r}, "
            f"keys={sorted(self.additional_context)!r}, "
            f"failures={len(self.middleware_exceptions)})"
        )
