"""Pipeline and middleware exceptions for middy-core."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..context import InvocationContext


class MiddyError(Exception):
    """Root exception for the entire middy toolkit."""


class PipelineError(MiddyError):
    """Base class for errors raised by the pipeline engine itself."""


class PipelineFrozenError(PipelineError):
    """Raised when middleware is registered on a function that already ran.

    The middleware list is read-only once invocations may be in flight.
    """


class MiddlewareRegistrationError(PipelineError):
    """Raised when a middleware definition cannot be built or is malformed."""


class AggregateMiddlewareError(PipelineError):
    """Every failure recorded during a single invocation.

    ``errors`` keeps the order in which failures were collected: before-phase
    failures in registration order, then the handler failure, then after-phase
    failures in reverse registration order.  ``response`` is whatever output
    had been produced when the pipeline stopped (``None`` when the handler
    never ran).
    """

    def __init__(
        self,
        errors: list[Exception],
        *,
        response: Any = None,
        context: InvocationContext | None = None,
    ) -> None:
        self.errors = list(errors)
        self.response = response
        self.context = context

        summary = ", ".join(f"{type(e).__name__}: {e}" for e in self.errors)
        super().__init__(
            f"{len(self.errors)} failure(s) during invocation"
            + (f" - {summary}" if summary else "")
        )

    @property
    def exceptions(self) -> list[Exception]:
        """Alias of :attr:`errors`."""
        return self.errors

    def __len__(self) -> int:
        return len(self.errors)


class InvalidEventShapeError(MiddyError, TypeError):
    """Raised by a middleware when the inbound event is not the envelope it expects.

    Reported through the normal hook-failure channel.
    """

    def __init__(
        self,
        expected: str,
        actual: object | None = None,
        reason: str | None = None,
    ) -> None:
        self.expected = expected
        self.actual_type = type(actual).__name__ if actual is not None else None
        self.reason = reason

        msg = f"Invalid event shape: expected {expected}"
        if self.actual_type is not None:
            msg += f", got {self.actual_type}"
        if reason:
            msg += f" - {reason}"

        super().__init__(msg)
