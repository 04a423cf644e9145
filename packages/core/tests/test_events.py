"""Tests for the AWS event models and coerce_event."""

from __future__ import annotations

import pytest

from middy_core.events import (
    APIGatewayHttpApiV2ProxyResponse,
    APIGatewayProxyRequest,
    SNSEvent,
    SQSEvent,
    coerce_event,
)
from middy_core.primitives.exceptions import InvalidEventShapeError

SNS_PAYLOAD = {
    "Records": [
        {
            "EventSource": "aws:sns",
            "Sns": {
                "MessageId": "95df01b4-ee98-5cb9-9903-4c221d41eb5e",
                "Message": "hello",
                "MessageAttributes": {
                    "traceparent": {"Type": "String", "Value": "tp"},
                },
            },
        }
    ]
}

SQS_PAYLOAD = {
    "Records": [
        {
            "messageId": "059f36b4-87a3-44ab-83d2-661975830a7d",
            "body": "hello",
            "eventSource": "aws:sqs",
            "messageAttributes": {
                "tracestate": {"stringValue": "ts", "dataType": "String"},
            },
        }
    ]
}


def test_sns_payload_is_validated() -> None:
    event = coerce_event(SNS_PAYLOAD, SNSEvent)

    assert event.records[0].sns.message_attributes["traceparent"].value == "tp"


def test_sqs_payload_is_validated() -> None:
    event = coerce_event(SQS_PAYLOAD, SQSEvent)

    assert event.records[0].message_attributes["tracestate"].string_value == "ts"


def test_model_instances_pass_through() -> None:
    event = SNSEvent.model_validate(SNS_PAYLOAD)

    assert coerce_event(event, SNSEvent) is event


@pytest.mark.parametrize("payload", [1, "text", None, [SNS_PAYLOAD]])
def test_non_mapping_is_invalid_shape(payload) -> None:
    with pytest.raises(InvalidEventShapeError) as exc:
        coerce_event(payload, SNSEvent)

    assert exc.value.expected == "SNSEvent"


def test_sqs_payload_is_not_an_sns_event() -> None:
    with pytest.raises(InvalidEventShapeError, match="Sns"):
        coerce_event(SQS_PAYLOAD, SNSEvent)


def test_sns_payload_is_not_an_sqs_event() -> None:
    with pytest.raises(InvalidEventShapeError):
        coerce_event(SNS_PAYLOAD, SQSEvent)


def test_snake_case_names_are_accepted() -> None:
    request = APIGatewayProxyRequest(http_method="GET", headers={"a": "b"})

    assert request.to_dict() == {
        "httpMethod": "GET",
        "headers": {"a": "b"},
        "isBase64Encoded": False,
    }


def test_http_api_response_keeps_cookies() -> None:
    response = APIGatewayHttpApiV2ProxyResponse.model_validate(
        {"statusCode": 404, "cookies": ["a=1"]}
    )

    assert response.status_code == 404
    assert response.cookies == ["a=1"]
