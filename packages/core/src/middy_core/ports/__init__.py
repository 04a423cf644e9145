"""Ports — the protocols the pipeline depends on."""

from middy_core.ports.lambda_context import ILambdaContext
from middy_core.ports.logger import IMiddyLogger
from middy_core.ports.middleware import ILambdaMiddleware

__all__ = [
    "ILambdaContext",
    "ILambdaMiddleware",
    "IMiddyLogger",
]
