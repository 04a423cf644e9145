"""middy-core — onion-model middleware engine for AWS Lambda handlers.

Only pydantic is required, for the typed event models.
"""

from __future__ import annotations

from .context import InvocationContext
from .failures import aggregate_failures
from .function import MiddyFunction, middy
from .lifecycle import get_current_context, invocation_scope
from .logger import LogLevel, LogProperty, MiddyLogger, default_logger_factory

# ── Middleware ───────────────────────────────────────────────────
from .middleware import (
    LoggingMiddleware,
    MiddlewareDefinition,
    MiddlewareRegistry,
    Pipeline,
    build_pipeline,
)

# ── Ports ────────────────────────────────────────────────────────
from .ports import ILambdaContext, ILambdaMiddleware, IMiddyLogger

# ── Primitives ───────────────────────────────────────────────────
from .primitives import (
    AggregateMiddlewareError,
    InvalidEventShapeError,
    MiddlewareRegistrationError,
    MiddyError,
    PipelineError,
    PipelineFrozenError,
)

__all__ = [
    "AggregateMiddlewareError",
    "ILambdaContext",
    "ILambdaMiddleware",
    "IMiddyLogger",
    "InvalidEventShapeError",
    "InvocationContext",
    "LogLevel",
    "LogProperty",
    "LoggingMiddleware",
    "MiddlewareDefinition",
    "MiddlewareRegistrationError",
    "MiddlewareRegistry",
    "MiddyError",
    "MiddyFunction",
    "MiddyLogger",
    "Pipeline",
    "PipelineError",
    "PipelineFrozenError",
    "aggregate_failures",
    "build_pipeline",
    "default_logger_factory",
    "get_current_context",
    "invocation_scope",
    "middy",
]
