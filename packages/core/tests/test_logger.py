"""Tests for MiddyLogger."""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

from middy_core.logger import LogLevel, LogProperty, MiddyLogger, default_logger_factory


def test_emits_json_with_global_and_call_properties() -> None:
    log = MagicMock()
    log.isEnabledFor.return_value = True
    logger = MiddyLogger(log)
    logger.enrich_with(LogProperty("traceparent", "tp"))

    logger.info("hello", LogProperty("orderId", 42))

    level, payload = log.log.call_args[0]
    entry = json.loads(payload)
    assert level == logging.INFO
    assert entry == {
        "level": "INFO",
        "message": "hello",
        "traceparent": "tp",
        "orderId": 42,
    }


def test_later_enrichment_replaces_key() -> None:
    logger = MiddyLogger(MagicMock())
    logger.enrich_with(LogProperty("k", 1))
    logger.enrich_with(LogProperty("k", 2))

    assert logger.global_properties == {"k": 2}


def test_disabled_level_is_skipped() -> None:
    log = MagicMock()
    log.isEnabledFor.return_value = False

    MiddyLogger(log).debug("quiet")

    log.log.assert_not_called()


def test_writes_through_stdlib_logging(caplog) -> None:
    caplog.set_level(logging.WARNING, logger="middy.invocation")

    MiddyLogger().log(LogLevel.WARNING, "careful")

    assert '"message": "careful"' in caplog.text
    assert '"level": "WARNING"' in caplog.text


def test_default_factory_without_platform_context() -> None:
    logger = default_logger_factory(None)

    assert isinstance(logger, MiddyLogger)
    assert logger.global_properties == {}


def test_default_factory_enrichment(lambda_context) -> None:
    logger = default_logger_factory(lambda_context)

    assert logger.global_properties == {
        "awsRequestId": lambda_context.aws_request_id,
        "functionName": lambda_context.function_name,
        "functionVersion": lambda_context.function_version,
        "invokedFunctionArn": lambda_context.invoked_function_arn,
    }
