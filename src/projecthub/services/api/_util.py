"""Helpers shared by the resource clients."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel

M = TypeVar("M", bound=BaseModel)


def validate_list(model: type[M], data: Any) -> list[M]:
    """Validate a list payload; anything that is not a list reads as empty."""
    if not isinstance(data, list):
        return []
    return [model.model_validate(item) for item in data]
