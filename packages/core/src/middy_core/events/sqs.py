"""SQS batch event models."""

from __future__ import annotations

from pydantic import Field

from .base import AwsModel


class SQSMessageAttribute(AwsModel):
    string_value: str | None = Field(default=None, alias="stringValue")
    binary_value: str | None = Field(default=None, alias="binaryValue")
    data_type: str = Field(default="String", alias="dataType")


class SQSMessage(AwsModel):
    message_id: str = Field(alias="messageId")
    receipt_handle: str | None = Field(default=None, alias="receiptHandle")
    body: str
    attributes: dict[str, str] = Field(default_factory=dict)
    message_attributes: dict[str, SQSMessageAttribute] = Field(
        default_factory=dict, alias="messageAttributes"
    )
    event_source: str | None = Field(default=None, alias="eventSource")
    event_source_arn: str | None = Field(default=None, alias="eventSourceARN")
    aws_region: str | None = Field(default=None, alias="awsRegion")


class SQSEvent(AwsModel):
    records: list[SQSMessage] = Field(alias="Records")
