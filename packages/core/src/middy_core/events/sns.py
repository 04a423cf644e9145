"""SNS notification event models."""

from __future__ import annotations

from pydantic import Field

from .base import AwsModel


class SNSMessageAttribute(AwsModel):
    type: str = Field(default="String", alias="Type")
    value: str = Field(alias="Value")


class SNSMessage(AwsModel):
    message_id: str | None = Field(default=None, alias="MessageId")
    topic_arn: str | None = Field(default=None, alias="TopicArn")
    subject: str | None = Field(default=None, alias="Subject")
    message: str | None = Field(default=None, alias="Message")
    timestamp: str | None = Field(default=None, alias="Timestamp")
    message_attributes: dict[str, SNSMessageAttribute] = Field(
        default_factory=dict, alias="MessageAttributes"
    )


class SNSRecord(AwsModel):
    event_source: str | None = Field(default=None, alias="EventSource")
    event_subscription_arn: str | None = Field(
        default=None, alias="EventSubscriptionArn"
    )
    event_version: str | None = Field(default=None, alias="EventVersion")
    sns: SNSMessage = Field(alias="Sns")


class SNSEvent(AwsModel):
    records: list[SNSRecord] = Field(alias="Records")
