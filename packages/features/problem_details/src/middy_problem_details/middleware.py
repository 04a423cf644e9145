"""ProblemDetailsMiddleware — shape error responses as problem+json."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from middy_core.events import (
    APIGatewayHttpApiV2ProxyResponse,
    APIGatewayProxyResponse,
)

from .builder import ContentResponseBuilder
from .config import ProblemDetailsConfig

if TYPE_CHECKING:
    from middy_core.context import InvocationContext

ProxyResponse = APIGatewayProxyResponse | APIGatewayHttpApiV2ProxyResponse


class ProblemDetailsMiddleware:
    """Rewrites error responses into RFC 7807 problem documents.

    ``after`` leaves responses below the error threshold alone.  Error
    responses, and a missing response (reported with the default status),
    get a problem+json body carrying the status, its reason phrase, the
    request id, the function ARN and the original body as ``detail``.
    Headers, multi-value headers and cookies are preserved.

    Parameters
    ----------
    config:
        Optional :class:`ProblemDetailsConfig`.
    response_cls:
        Response model used for raw ``dict`` responses and for a missing
        response.  ``APIGatewayHttpApiV2ProxyResponse`` selects the HTTP API
        payload format.
    """

    def __init__(
        self,
        config: ProblemDetailsConfig | None = None,
        *,
        response_cls: type[ProxyResponse] = APIGatewayProxyResponse,
    ) -> None:
        self._config = config or ProblemDetailsConfig()
        self._response_cls = response_cls
        self._builder = ContentResponseBuilder(self._config)

    async def before(self, event: Any, context: InvocationContext) -> None:
        """Nothing to prepare before the handler runs."""

    async def after(self, response: Any, context: InvocationContext) -> Any:
        as_dict = isinstance(response, Mapping)
        typed = self._response_cls.model_validate(response) if as_dict else response

        threshold = self._config.error_status_threshold
        if typed is not None and typed.status_code < threshold:
            return response

        if isinstance(typed, APIGatewayHttpApiV2ProxyResponse) or (
            typed is None and self._response_cls is APIGatewayHttpApiV2ProxyResponse
        ):
            shaped: ProxyResponse = self._builder.create_http_api_problem_response(
                context, typed
            )
        else:
            shaped = self._builder.create_problem_response(context, typed)

        return shaped.to_dict() if as_dict else shaped
