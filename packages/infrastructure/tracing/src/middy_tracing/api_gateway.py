"""ApiGatewayTracingMiddleware — trace context from HTTP headers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .base import BaseTracingMiddleware, lookup


class ApiGatewayTracingMiddleware(BaseTracingMiddleware):
    """Tracing for API Gateway REST (v1) and HTTP API (v2) proxy events.

    Accepts the typed request models as well as the raw dict the runtime
    delivers.  A missing header is read as an empty string.
    """

    def extract(self, event: Any) -> tuple[str, str]:
        if isinstance(event, Mapping):
            headers = event.get("headers")
        else:
            headers = getattr(event, "headers", None)
        cfg = self.config
        return (
            lookup(headers, cfg.traceparent_key) or "",
            lookup(headers, cfg.tracestate_key) or "",
        )
