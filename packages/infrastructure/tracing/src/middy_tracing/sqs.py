"""SQSTracingMiddleware — trace context from SQS message attributes."""

from __future__ import annotations

from typing import Any

from middy_core.events import SQSEvent, coerce_event
from middy_core.primitives.exceptions import InvalidEventShapeError

from .base import BaseTracingMiddleware


class SQSTracingMiddleware(BaseTracingMiddleware):
    """Tracing for SQS batches, read from the first message."""

    def extract(self, event: Any) -> tuple[str, str]:
        sqs_event = coerce_event(event, SQSEvent)
        if not sqs_event.records:
            raise InvalidEventShapeError("SQSEvent", event, reason="no records")

        attributes = sqs_event.records[0].message_attributes
        cfg = self.config
        traceparent = attributes.get(cfg.traceparent_key)
        tracestate = attributes.get(cfg.tracestate_key)
        return (
            (traceparent.string_value or "") if traceparent is not None else "",
            (tracestate.string_value or "") if tracestate is not None else "",
        )
