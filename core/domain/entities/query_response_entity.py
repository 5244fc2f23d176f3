from __future__ import annotations

from typing import Any, Dict, List, Optional

from core.domain.entities.base_entity import ValueEntity


class QueryResponse(ValueEntity):
    """
    Parsed GraphQL response body.

    `data` is opaque: subgraph schemas are not known ahead of time, so it is kept
    as decoded JSON and interpreted by callers. Extra top-level keys such as
    `extensions` are preserved.
    """

    data: Optional[Any] = None
    errors: Optional[List[Dict[str, Any]]] = None
