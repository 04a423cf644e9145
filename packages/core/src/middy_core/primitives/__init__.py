"""Primitives — exception hierarchy shared by every middy package."""

from .exceptions import (
    AggregateMiddlewareError,
    InvalidEventShapeError,
    MiddlewareRegistrationError,
    MiddyError,
    PipelineError,
    PipelineFrozenError,
)

__all__ = [
    "AggregateMiddlewareError",
    "InvalidEventShapeError",
    "MiddlewareRegistrationError",
    "MiddyError",
    "PipelineError",
    "PipelineFrozenError",
]
