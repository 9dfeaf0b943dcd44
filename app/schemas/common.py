# app/schemas/common.py
from typing import Any

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel


class CamelModel(SQLModel):
    """
    Base for every request/response body.

    JSON keys are camelCase (startDate, isRead, ...); Python code keeps
    using the snake_case field names, which are also accepted on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StatusMessage(CamelModel):
    """Confirmation body for mutations that return no entity."""

    message: str


def drop_server_fields(data: Any, fields: set[str]) -> Any:
    """
    Remove server-assigned keys (snake_case or camelCase spelling) from a
    raw payload so clients cannot set them.
    """
    if not isinstance(data, dict):
        return data
    names = fields | {to_camel(name) for name in fields}
    return {key: value for key, value in data.items() if key not in names}


def normalize_interests(values: list[str] | None) -> list[str]:
    """
    Clean a list of interest tags:
      - strip whitespace
      - drop empty tags
      - drop case-insensitive duplicates, keeping the first spelling
    Order is preserved.
    """
    if not values:
        return []

    seen: set[str] = set()
    result: list[str] = []
    for raw in values:
        tag = raw.strip()
        if not tag or tag.lower() in seen:
            continue
        seen.add(tag.lower())
        result.append(tag)
    return result
