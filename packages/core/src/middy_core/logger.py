"""MiddyLogger — JSON log entries enriched with per-invocation properties."""

from __future__ import annotations

import enum
import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .ports.logger import IMiddyLogger

if TYPE_CHECKING:
    from .ports.lambda_context import ILambdaContext

_log = logging.getLogger("middy.invocation")


class LogLevel(enum.IntEnum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


@dataclass(frozen=True)
class LogProperty:
    """A single key/value pair attached to log entries."""

    key: str
    value: Any


class MiddyLogger(IMiddyLogger):
    """Writes one JSON object per entry through a stdlib logger.

    Global properties added with :meth:`enrich_with` appear on every entry;
    a later property with the same key replaces the earlier one.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._log = logger or _log
        self._global_properties: dict[str, Any] = {}

    @property
    def global_properties(self) -> dict[str, Any]:
        return dict(self._global_properties)

    def enrich_with(self, log_property: LogProperty) -> None:
        self._global_properties[log_property.key] = log_property.value

    def log(self, level: LogLevel, message: str, *properties: LogProperty) -> None:
        if not self._log.isEnabledFor(level):
            return
        entry: dict[str, Any] = {"level": level.name, "message": message}
        entry.update(self._global_properties)
        for prop in properties:
            entry[prop.key] = prop.value
        self._log.log(level, json.dumps(entry, default=str))

    def debug(self, message: str, *properties: LogProperty) -> None:
        self.log(LogLevel.DEBUG, message, *properties)

    def info(self, message: str, *properties: LogProperty) -> None:
        self.log(LogLevel.INFO, message, *properties)

    def warning(self, message: str, *properties: LogProperty) -> None:
        self.log(LogLevel.WARNING, message, *properties)

    def error(self, message: str, *properties: LogProperty) -> None:
        self.log(LogLevel.ERROR, message, *properties)

    def critical(self, message: str, *properties: LogProperty) -> None:
        self.log(LogLevel.CRITICAL, message, *properties)


def default_logger_factory(lambda_context: ILambdaContext | None) -> IMiddyLogger:
    """Build a :class:`MiddyLogger` pre-enriched with the call metadata."""
    logger = MiddyLogger()
    if lambda_context is None:
        return logger
    for key, attr in (
        ("awsRequestId", "aws_request_id"),
        ("functionName", "function_name"),
        ("functionVersion", "function_version"),
        ("invokedFunctionArn", "invoked_function_arn"),
    ):
        value = getattr(lambda_context, attr, None)
        if value is not None:
            logger.enrich_with(LogProperty(key, value))
    return logger
