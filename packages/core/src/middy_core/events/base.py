"""AwsModel — shared pydantic configuration for AWS payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class AwsModel(BaseModel):
    """Accepts both AWS (camel/Pascal case) and snake_case field names."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_dict(self) -> dict[str, Any]:
        """Dump with AWS field names, dropping unset optionals."""
        return self.model_dump(by_alias=True, exclude_none=True)
