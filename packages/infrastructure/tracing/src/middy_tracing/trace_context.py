"""W3C Trace Context parsing and generation.

A ``traceparent`` value has the form ``version-traceid-parentid-flags``
(``00-4bf92f3577b34da6a3ce929d0e0e4736-00f067aa0ba902b7-01``):
2, 32, 16 and 2 lowercase hex digits.
"""

from __future__ import annotations

import re
import secrets
from dataclasses import dataclass

from .exceptions import InvalidTraceParentError

_HEADER_RE = re.compile(
    r"^(?P<version>[0-9a-f]{2})-(?P<trace_id>[0-9a-f]{32})-"
    r"(?P<parent_id>[0-9a-f]{16})-(?P<flags>[0-9a-f]{2})(?P<rest>-.*)?$"
)
_INVALID_TRACE_ID = "0" * 32
_INVALID_PARENT_ID = "0" * 16
_SUPPORTED_VERSION = "00"
_SAMPLED_FLAG = 0x01


@dataclass(frozen=True)
class TraceParent:
    version: str
    trace_id: str
    parent_id: str
    trace_flags: str

    @classmethod
    def parse(cls, value: str) -> TraceParent:
        """Parse *value*, raising :class:`InvalidTraceParentError`."""
        match = _HEADER_RE.match(value.strip())
        if match is None:
            raise InvalidTraceParentError(value, "malformed")

        version = match["version"]
        if version == "ff":
            raise InvalidTraceParentError(value, "version ff is forbidden")
        # Future versions may append fields; version 00 may not.
        if version == _SUPPORTED_VERSION and match["rest"]:
            raise InvalidTraceParentError(value, "unexpected trailing data")
        if match["trace_id"] == _INVALID_TRACE_ID:
            raise InvalidTraceParentError(value, "all-zero trace id")
        if match["parent_id"] == _INVALID_PARENT_ID:
            raise InvalidTraceParentError(value, "all-zero parent id")

        return cls(
            version=version,
            trace_id=match["trace_id"],
            parent_id=match["parent_id"],
            trace_flags=match["flags"],
        )

    @classmethod
    def try_parse(cls, value: str | None) -> TraceParent | None:
        if not value:
            return None
        try:
            return cls.parse(value)
        except InvalidTraceParentError:
            return None

    @classmethod
    def create_new(cls, *, sampled: bool = True) -> TraceParent:
        """Start a new trace with random ids."""
        return cls(
            version=_SUPPORTED_VERSION,
            trace_id=secrets.token_hex(16),
            parent_id=secrets.token_hex(8),
            trace_flags=f"{_SAMPLED_FLAG if sampled else 0:02x}",
        )

    @property
    def sampled(self) -> bool:
        return bool(int(self.trace_flags, 16) & _SAMPLED_FLAG)

    def __str__(self) -> str:
        return f"{self.version}-{self.trace_id}-{self.parent_id}-{self.trace_flags}"


@dataclass(frozen=True)
class TraceContext:
    """Trace propagation values for the current invocation.

    ``traceparent`` and ``tracestate`` are the inbound values as received
    (``""`` when absent).  ``outbound_traceparent`` is the header to send
    downstream: the inbound one when valid, otherwise a new trace.
    """

    traceparent: str
    tracestate: str
    trace_id: str
    parent_id: str
    outbound_traceparent: str
    is_new: bool = False

    @classmethod
    def handle(cls, traceparent: str | None, tracestate: str | None) -> TraceContext:
        """Derive the context from inbound propagation values.

        A valid *traceparent* has its trace id reused; anything else gets
        freshly generated ids.
        """
        parsed = TraceParent.try_parse(traceparent)
        is_new = parsed is None
        if parsed is None:
            parsed = TraceParent.create_new()
        return cls(
            traceparent=traceparent or "",
            tracestate=tracestate or "",
            trace_id=parsed.trace_id,
            parent_id=parsed.parent_id,
            outbound_traceparent=str(parsed) if is_new else (traceparent or ""),
            is_new=is_new,
        )
