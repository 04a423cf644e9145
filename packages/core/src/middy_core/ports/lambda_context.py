"""ILambdaContext — platform call metadata consumed by the pipeline."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ILambdaContext(Protocol):
    """Read-only view of the context object the Lambda runtime passes in.

    Mirrors the attribute names of the AWS Python runtime so the real
    ``LambdaContext`` satisfies it without adaptation.
    """

    aws_request_id: str
    function_name: str
    function_version: str
    invoked_function_arn: str
    memory_limit_in_mb: int | str

    def get_remaining_time_in_millis(self) -> int:
        """Milliseconds left before the platform terminates the call."""
        ...
