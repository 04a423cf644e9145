from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from middy_core.context import InvocationContext

FUNCTION_ARN = "arn:aws:lambda:eu-west-1:123456789012:function:orders-api"
REQUEST_ID = "c6af9ac6-7b61-11e6-9a41-93e8deadbeef"


@pytest.fixture()
def context() -> InvocationContext:
    lambda_context = MagicMock()
    lambda_context.invoked_function_arn = FUNCTION_ARN
    lambda_context.aws_request_id = REQUEST_ID
    return InvocationContext(lambda_context, lambda _: MagicMock())
