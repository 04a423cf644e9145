"""Problem details — RFC 7807 error responses for API Gateway handlers."""

from __future__ import annotations

from .builder import ContentResponseBuilder, ProxyResponseBuilder, reason_phrase
from .config import ProblemDetailsConfig
from .content import PROBLEM_JSON_CONTENT_TYPE, ProblemDetails
from .middleware import ProblemDetailsMiddleware

__all__ = [
    "PROBLEM_JSON_CONTENT_TYPE",
    "ContentResponseBuilder",
    "ProblemDetails",
    "ProblemDetailsConfig",
    "ProblemDetailsMiddleware",
    "ProxyResponseBuilder",
    "reason_phrase",
]
