"""Tests for SNSTracingMiddleware."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from middy_core.events import SNSEvent
from middy_core.middleware import Pipeline
from middy_core.primitives.exceptions import (
    AggregateMiddlewareError,
    InvalidEventShapeError,
)
from middy_tracing import SNSTracingMiddleware

TRACEPARENT = "00-0af7651916cd43dd8448eb211c80319c-b7ad6b7169203331-01"
TRACE_ID = "0af7651916cd43dd8448eb211c80319c"


def sns_event(attributes: dict[str, str]) -> dict:
    return {
        "Records": [
            {
                "EventSource": "aws:sns",
                "Sns": {
                    "Message": "payload",
                    "MessageAttributes": {
                        key: {"Type": "String", "Value": value}
                        for key, value in attributes.items()
                    },
                },
            }
        ]
    }


@pytest.mark.asyncio()
async def test_records_invalid_shape_when_event_is_not_sns(logger) -> None:
    handler = MagicMock()
    pipeline = Pipeline(
        handler, [SNSTracingMiddleware()], logger_factory=lambda _: logger
    )

    with pytest.raises(AggregateMiddlewareError) as exc:
        await pipeline.execute(1, MagicMock())

    assert len(exc.value.errors) == 1
    assert isinstance(exc.value.errors[0], InvalidEventShapeError)
    logger.enrich_with.assert_not_called()
    handler.assert_not_called()
    assert "TraceContext" not in exc.value.context


@pytest.mark.asyncio()
async def test_before_raises_invalid_shape_directly(context, logger) -> None:
    with pytest.raises(InvalidEventShapeError):
        await SNSTracingMiddleware().before({"Records": [{"body": "sqs"}]}, context)

    logger.enrich_with.assert_not_called()


@pytest.mark.asyncio()
async def test_empty_records_are_an_invalid_shape(context) -> None:
    with pytest.raises(InvalidEventShapeError, match="no records"):
        await SNSTracingMiddleware().before({"Records": []}, context)


@pytest.mark.asyncio()
async def test_enriches_logger_with_trace_context(
    context, logger, enrichment
) -> None:
    event = sns_event(
        {"traceparent": TRACEPARENT, "tracestate": "tracestate header value"}
    )

    await SNSTracingMiddleware().before(event, context)

    assert enrichment(logger) == {
        "traceparent": TRACEPARENT,
        "tracestate": "tracestate header value",
        "trace-id": TRACE_ID,
    }


@pytest.mark.asyncio()
async def test_accepts_typed_event(context, logger, enrichment) -> None:
    event = SNSEvent.model_validate(sns_event({"traceparent": TRACEPARENT}))

    await SNSTracingMiddleware().before(event, context)

    assert enrichment(logger)["trace-id"] == TRACE_ID
    assert enrichment(logger)["tracestate"] == ""


@pytest.mark.asyncio()
async def test_reads_only_the_first_record(context, logger, enrichment) -> None:
    event = sns_event({"traceparent": TRACEPARENT})
    event["Records"].append(
        sns_event(
            {"traceparent": "00-11111111111111111111111111111111-2222222222222222-01"}
        )["Records"][0]
    )

    await SNSTracingMiddleware().before(event, context)

    assert enrichment(logger)["trace-id"] == TRACE_ID


@pytest.mark.asyncio()
async def test_invalid_traceparent_attribute_starts_new_trace(
    context, logger, enrichment
) -> None:
    event = sns_event({"traceparent": "traceparent header value"})

    await SNSTracingMiddleware().before(event, context)

    properties = enrichment(logger)
    assert set(properties) == {"traceparent", "tracestate", "trace-id"}
    trace_context = context.get("TraceContext")
    assert properties["traceparent"] == "traceparent header value"
    assert properties["trace-id"] == trace_context.trace_id
    assert trace_context.is_new
    assert trace_context.outbound_traceparent != "traceparent header value"
