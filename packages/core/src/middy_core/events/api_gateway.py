"""API Gateway REST (v1) and HTTP API (v2) proxy models."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import AwsModel


class APIGatewayProxyRequest(AwsModel):
    resource: str | None = None
    path: str | None = None
    http_method: str | None = Field(default=None, alias="httpMethod")
    headers: dict[str, str] | None = None
    multi_value_headers: dict[str, list[str]] | None = Field(
        default=None, alias="multiValueHeaders"
    )
    query_string_parameters: dict[str, str] | None = Field(
        default=None, alias="queryStringParameters"
    )
    path_parameters: dict[str, str] | None = Field(
        default=None, alias="pathParameters"
    )
    stage_variables: dict[str, str] | None = Field(
        default=None, alias="stageVariables"
    )
    request_context: dict[str, Any] | None = Field(
        default=None, alias="requestContext"
    )
    body: str | None = None
    is_base64_encoded: bool = Field(default=False, alias="isBase64Encoded")


class APIGatewayProxyResponse(AwsModel):
    status_code: int = Field(default=200, alias="statusCode")
    headers: dict[str, str] | None = None
    multi_value_headers: dict[str, list[str]] | None = Field(
        default=None, alias="multiValueHeaders"
    )
    body: str | None = None
    is_base64_encoded: bool = Field(default=False, alias="isBase64Encoded")


class APIGatewayHttpApiV2ProxyRequest(AwsModel):
    version: str = "2.0"
    route_key: str | None = Field(default=None, alias="routeKey")
    raw_path: str | None = Field(default=None, alias="rawPath")
    raw_query_string: str | None = Field(default=None, alias="rawQueryString")
    cookies: list[str] | None = None
    headers: dict[str, str] | None = None
    query_string_parameters: dict[str, str] | None = Field(
        default=None, alias="queryStringParameters"
    )
    path_parameters: dict[str, str] | None = Field(
        default=None, alias="pathParameters"
    )
    request_context: dict[str, Any] | None = Field(
        default=None, alias="requestContext"
    )
    body: str | None = None
    is_base64_encoded: bool = Field(default=False, alias="isBase64Encoded")


class APIGatewayHttpApiV2ProxyResponse(AwsModel):
    status_code: int = Field(default=200, alias="statusCode")
    headers: dict[str, str] | None = None
    cookies: list[str] | None = None
    body: str | None = None
    is_base64_encoded: bool = Field(default=False, alias="isBase64Encoded")
