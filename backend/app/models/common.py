"""
Shared schema base and response envelope
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts both snake_case and camelCase input; serializes as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def dump(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


def envelope(data: Any = None, **extra: Any) -> dict:
    """Successful response envelope: `{"success": true, "data": ...}`"""
    if isinstance(data, BaseModel):
        data = data.model_dump(by_alias=True, mode="json")
    elif isinstance(data, list):
        data = [
            item.model_dump(by_alias=True, mode="json") if isinstance(item, BaseModel) else item
            for item in data
        ]
    body = {"success": True, "data": data}
    body.update(extra)
    return body


def error_envelope(error: str, **extra: Any) -> dict:
    body = {"success": False, "error": error}
    body.update(extra)
    return body
