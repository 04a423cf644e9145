"""Failure aggregation — fold recorded hook failures into one error."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .primitives.exceptions import AggregateMiddlewareError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .context import InvocationContext


def aggregate_failures(
    failures: Sequence[Exception],
    *,
    response: Any = None,
    context: InvocationContext | None = None,
) -> AggregateMiddlewareError | None:
    """Return ``None`` for no failures, else one error carrying all of them.

    Failures are neither reordered nor deduplicated.
    """
    if not failures:
        return None
    return AggregateMiddlewareError(list(failures), response=response, context=context)
