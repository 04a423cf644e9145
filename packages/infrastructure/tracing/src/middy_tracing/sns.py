"""SNSTracingMiddleware — trace context from SNS message attributes."""

from __future__ import annotations

from typing import Any

from middy_core.events import SNSEvent, coerce_event
from middy_core.primitives.exceptions import InvalidEventShapeError

from .base import BaseTracingMiddleware


class SNSTracingMiddleware(BaseTracingMiddleware):
    """Tracing for SNS notifications, read from the first record.

    Any other event raises
    :class:`~middy_core.primitives.exceptions.InvalidEventShapeError` before
    the context is touched.
    """

    def extract(self, event: Any) -> tuple[str, str]:
        sns_event = coerce_event(event, SNSEvent)
        if not sns_event.records:
            raise InvalidEventShapeError("SNSEvent", event, reason="no records")

        attributes = sns_event.records[0].sns.message_attributes
        cfg = self.config
        traceparent = attributes.get(cfg.traceparent_key)
        tracestate = attributes.get(cfg.tracestate_key)
        return (
            traceparent.value if traceparent is not None else "",
            tracestate.value if tracestate is not None else "",
        )
