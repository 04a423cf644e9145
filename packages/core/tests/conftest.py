from __future__ import annotations

from dataclasses import dataclass

import pytest


@dataclass
class FakeLambdaContext:
    aws_request_id: str = "c6af9ac6-7b61-11e6-9a41-93e8deadbeef"
    function_name: str = "orders-api"
    function_version: str = "$LATEST"
    invoked_function_arn: str = (
        "arn:aws:lambda:eu-west-1:123456789012:function:orders-api"
    )
    memory_limit_in_mb: int = 128
    remaining_millis: int = 3000

    def get_remaining_time_in_millis(self) -> int:
        return self.remaining_millis


@pytest.fixture()
def lambda_context() -> FakeLambdaContext:
    return FakeLambdaContext()


@pytest.fixture()
def make_lambda_context():
    def _make(**kwargs) -> FakeLambdaContext:
        return FakeLambdaContext(**kwargs)

    return _make
