"""ProblemDetailsConfig — tunables for error shaping."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProblemDetailsConfig:
    """Configuration for :class:`ProblemDetailsMiddleware`.

    Attributes:
        default_status_code: Status used when the handler produced no response.
        error_status_threshold: Responses with a status at or above this value
            are rewritten; lower ones pass through untouched.
        type_base_uri: Prefix of the problem ``type`` URI; the status code is
            appended.
    """

    default_status_code: int = 500
    error_status_threshold: int = 400
    type_base_uri: str = "https://httpstatuses.io/"
