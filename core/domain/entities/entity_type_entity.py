from __future__ import annotations

from typing import Optional

from core.domain.entities.base_entity import ValueEntity


class EntityType(ValueEntity):
    """
    An object type exposed by a subgraph schema (e.g. "Pool", "Token").
    """

    name: str
    description: Optional[str] = None
