"""ProblemDetails — RFC 7807 problem document."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

PROBLEM_JSON_CONTENT_TYPE = "application/problem+json"


class ProblemDetails(BaseModel):
    """Problem document serialized in camelCase with nulls omitted.

    ``instance`` identifies the function that produced the problem and
    ``aws_request_id`` the invocation, so a client report can be traced back
    to a single log stream entry.
    """

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )

    type: str
    title: str
    status: int
    detail: str | None = None
    instance: str | None = None
    aws_request_id: str | None = None

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)
