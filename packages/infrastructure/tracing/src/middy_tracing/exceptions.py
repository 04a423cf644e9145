"""Tracing exceptions."""

from __future__ import annotations

from middy_core.primitives.exceptions import MiddyError


class InvalidTraceParentError(MiddyError, ValueError):
    """Raised when a ``traceparent`` value is not a valid W3C trace-parent.

    The tracing middleware never lets this escape; it synthesizes a new
    trace instead.
    """

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid traceparent {value!r}: {reason}")
