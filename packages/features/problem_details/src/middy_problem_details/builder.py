"""Response builders turning API Gateway responses into problem responses."""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING

from middy_core.events import (
    APIGatewayHttpApiV2ProxyResponse,
    APIGatewayProxyResponse,
)

from .config import ProblemDetailsConfig
from .content import PROBLEM_JSON_CONTENT_TYPE, ProblemDetails

if TYPE_CHECKING:
    from middy_core.context import InvocationContext

_CONTENT_TYPE = "Content-Type"


def reason_phrase(status_code: int) -> str:
    """Standard reason phrase for *status_code*; empty when unknown."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


class ProxyResponseBuilder:
    """Shared pieces of problem response construction."""

    def __init__(self, config: ProblemDetailsConfig | None = None) -> None:
        self._config = config or ProblemDetailsConfig()

    @staticmethod
    def merge(headers: dict[str, str] | None) -> dict[str, str]:
        """Copy *headers*, forcing the problem+json content type."""
        merged = {
            k: v for k, v in (headers or {}).items() if k.lower() != "content-type"
        }
        merged[_CONTENT_TYPE] = PROBLEM_JSON_CONTENT_TYPE
        return merged

    @staticmethod
    def merge_multi_value(
        headers: dict[str, list[str]] | None,
    ) -> dict[str, list[str]] | None:
        if headers is None:
            return None
        merged = {k: list(v) for k, v in headers.items() if k.lower() != "content-type"}
        merged[_CONTENT_TYPE] = [PROBLEM_JSON_CONTENT_TYPE]
        return merged

    def build_problem_content(
        self,
        status_code: int,
        function_arn: str | None,
        aws_request_id: str | None,
        detail: str | None,
    ) -> ProblemDetails:
        return ProblemDetails(
            type=f"{self._config.type_base_uri}{status_code}",
            title=reason_phrase(status_code),
            status=status_code,
            detail=detail,
            instance=function_arn,
            aws_request_id=aws_request_id,
        )


class ContentResponseBuilder(ProxyResponseBuilder):
    """Builds a problem response from the handler's own response content."""

    def create_problem_response(
        self,
        context: InvocationContext,
        lambda_response: APIGatewayProxyResponse | None,
    ) -> APIGatewayProxyResponse:
        status_code = (
            lambda_response.status_code
            if lambda_response is not None
            else self._config.default_status_code
        )
        problem = self.build_problem_content(
            status_code,
            context.invoked_function_arn,
            context.aws_request_id,
            lambda_response.body if lambda_response is not None else None,
        )
        return APIGatewayProxyResponse(
            status_code=status_code,
            headers=self.merge(lambda_response.headers if lambda_response else None),
            multi_value_headers=self.merge_multi_value(
                lambda_response.multi_value_headers if lambda_response else None
            ),
            body=problem.to_json(),
        )

    def create_http_api_problem_response(
        self,
        context: InvocationContext,
        lambda_response: APIGatewayHttpApiV2ProxyResponse | None,
    ) -> APIGatewayHttpApiV2ProxyResponse:
        status_code = (
            lambda_response.status_code
            if lambda_response is not None
            else self._config.default_status_code
        )
        problem = self.build_problem_content(
            status_code,
            context.invoked_function_arn,
            context.aws_request_id,
            lambda_response.body if lambda_response is not None else None,
        )
        return APIGatewayHttpApiV2ProxyResponse(
            status_code=status_code,
            headers=self.merge(lambda_response.headers if lambda_response else None),
            cookies=lambda_response.cookies if lambda_response else None,
            body=problem.to_json(),
        )
