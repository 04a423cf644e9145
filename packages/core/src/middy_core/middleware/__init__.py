"""Middleware components."""

from .definition import MiddlewareDefinition
from .logging import LoggingMiddleware
from .pipeline import Pipeline, build_pipeline
from .registry import MiddlewareRegistry

__all__ = [
    "LoggingMiddleware",
    "MiddlewareDefinition",
    "MiddlewareRegistry",
    "Pipeline",
    "build_pipeline",
]
