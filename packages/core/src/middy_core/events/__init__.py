"""Typed views of the AWS event payloads the bundled middleware understands."""

from .api_gateway import (
    APIGatewayHttpApiV2ProxyRequest,
    APIGatewayHttpApiV2ProxyResponse,
    APIGatewayProxyRequest,
    APIGatewayProxyResponse,
)
from .coerce import coerce_event
from .sns import SNSEvent, SNSMessage, SNSMessageAttribute, SNSRecord
from .sqs import SQSEvent, SQSMessage, SQSMessageAttribute

__all__ = [
    "APIGatewayHttpApiV2ProxyRequest",
    "APIGatewayHttpApiV2ProxyResponse",
    "APIGatewayProxyRequest",
    "APIGatewayProxyResponse",
    "SNSEvent",
    "SNSMessage",
    "SNSMessageAttribute",
    "SNSRecord",
    "SQSEvent",
    "SQSMessage",
    "SQSMessageAttribute",
    "coerce_event",
]
