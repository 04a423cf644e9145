"""TracingMiddleware base — shared enrichment for every event source."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from middy_core.logger import LogProperty

from .trace_context import TraceContext

if TYPE_CHECKING:
    from middy_core.context import InvocationContext


@dataclass(frozen=True)
class TracingConfig:
    """Names used by the tracing middleware.

    Attributes:
        traceparent_key: Header / message attribute carrying the trace-parent,
            also the log property key.
        tracestate_key: Header / message attribute carrying the trace-state,
            also the log property key.
        trace_id_key: Log property key for the derived trace id.
        context_key: ``additional_context`` key the TraceContext is stored under.
    """

    traceparent_key: str = "traceparent"
    tracestate_key: str = "tracestate"
    trace_id_key: str = "trace-id"
    context_key: str = "TraceContext"


def lookup(values: Mapping[str, Any] | None, name: str) -> Any:
    """Case-insensitive mapping lookup; ``None`` when absent."""
    if not values:
        return None
    if name in values:
        return values[name]
    lowered = name.lower()
    for key, value in values.items():
        if key.lower() == lowered:
            return value
    return None


class BaseTracingMiddleware(ABC):
    """Reads trace propagation values and enriches the invocation with them.

    Subclasses only know where the two values live in their event type.
    """

    def __init__(self, config: TracingConfig | None = None) -> None:
        self._config = config or TracingConfig()

    @property
    def config(self) -> TracingConfig:
        return self._config

    @abstractmethod
    def extract(self, event: Any) -> tuple[str, str]:
        """Return ``(traceparent, tracestate)``; missing values are ``""``."""

    async def before(self, event: Any, context: InvocationContext) -> None:
        traceparent, tracestate = self.extract(event)
        trace_context = TraceContext.handle(traceparent, tracestate)

        cfg = self._config
        context.set(cfg.context_key, trace_context)
        context.logger.enrich_with(
            LogProperty(cfg.traceparent_key, trace_context.traceparent)
        )
        context.logger.enrich_with(
            LogProperty(cfg.tracestate_key, trace_context.tracestate)
        )
        context.logger.enrich_with(
            LogProperty(cfg.trace_id_key, trace_context.trace_id)
        )

    async def after(self, response: Any, context: InvocationContext) -> Any:
        return response


def get_trace_context(
    context: InvocationContext, config: TracingConfig | None = None
) -> TraceContext | None:
    """Return the TraceContext a tracing middleware stored, if any."""
    key = (config or TracingConfig()).context_key
    value = context.get(key)
    return value if isinstance(value, TraceContext) else None
