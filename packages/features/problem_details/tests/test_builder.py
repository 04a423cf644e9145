"""Tests for the problem response builders."""

from __future__ import annotations

import pytest

from middy_problem_details import (
    ContentResponseBuilder,
    ProblemDetails,
    ProxyResponseBuilder,
    reason_phrase,
)


@pytest.mark.parametrize(
    ("status", "phrase"),
    [(400, "Bad Request"), (404, "Not Found"), (500, "Internal Server Error")],
)
def test_reason_phrase(status, phrase) -> None:
    assert reason_phrase(status) == phrase


def test_unknown_status_has_empty_reason_phrase() -> None:
    assert reason_phrase(599) == ""


def test_merge_replaces_content_type_case_insensitively() -> None:
    merged = ProxyResponseBuilder.merge({"CONTENT-TYPE": "text/html", "X-A": "1"})

    assert merged == {"X-A": "1", "Content-Type": "application/problem+json"}


def test_merge_multi_value_keeps_none() -> None:
    assert ProxyResponseBuilder.merge_multi_value(None) is None


def test_problem_details_serialization_omits_nulls() -> None:
    problem = ProblemDetails(type="about:blank", title="Gone", status=410)

    assert problem.to_json() == '{"type":"about:blank","title":"Gone","status":410}'


def test_problem_details_accepts_aliases() -> None:
    problem = ProblemDetails.model_validate(
        {"type": "t", "title": "x", "status": 400, "awsRequestId": "r"}
    )

    assert problem.aws_request_id == "r"


def test_build_problem_content() -> None:
    problem = ContentResponseBuilder().build_problem_content(
        403, "arn:fn", "req-1", "not yours"
    )

    assert problem == ProblemDetails(
        type="https://httpstatuses.io/403",
        title="Forbidden",
        status=403,
        detail="not yours",
        instance="arn:fn",
        aws_request_id="req-1",
    )
