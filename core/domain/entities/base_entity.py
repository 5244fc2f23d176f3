# core/domain/entities/base_entity.py
from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class ValueEntity(BaseModel):
    """
    Base for immutable value objects exchanged with the Gateway.

    - Frozen: instances are built per call and never mutated.
    - Equality is by value.
    - Accepts extra fields to avoid breaking on forward-compatible payload changes.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
    )

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-safe dict for HTTP payloads and logging.
        """
        return self.model_dump(mode="json", exclude_none=True)
