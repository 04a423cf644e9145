"""coerce_event — turn raw runtime payloads into typed event models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from ..primitives.exceptions import InvalidEventShapeError

M = TypeVar("M", bound=BaseModel)


def coerce_event(event: object, model_cls: type[M]) -> M:
    """Return *event* as a ``model_cls`` instance.

    Model instances pass through, mappings (what the Lambda runtime actually
    delivers) are validated.  Anything else raises
    :class:`~middy_core.primitives.exceptions.InvalidEventShapeError`.
    """
    if isinstance(event, model_cls):
        return event
    if not isinstance(event, Mapping):
        raise InvalidEventShapeError(model_cls.__name__, event)
    try:
        return model_cls.model_validate(event)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise InvalidEventShapeError(
            model_cls.__name__, event, reason=f"{location}: {first['msg']}"
        ) from e
