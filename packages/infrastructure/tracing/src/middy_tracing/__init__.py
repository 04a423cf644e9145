"""Tracing — W3C trace context propagation for Lambda invocations."""

from __future__ import annotations

from .api_gateway import ApiGatewayTracingMiddleware
from .base import BaseTracingMiddleware, TracingConfig, get_trace_context
from .exceptions import InvalidTraceParentError
from .sns import SNSTracingMiddleware
from .sqs import SQSTracingMiddleware
from .trace_context import TraceContext, TraceParent

__all__ = [
    "ApiGatewayTracingMiddleware",
    "BaseTracingMiddleware",
    "InvalidTraceParentError",
    "SNSTracingMiddleware",
    "SQSTracingMiddleware",
    "TraceContext",
    "TraceParent",
    "TracingConfig",
    "get_trace_context",
]
