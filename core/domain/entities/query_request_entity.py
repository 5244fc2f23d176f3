from __future__ import annotations

from typing import Any, Dict, Optional

from core.domain.entities.base_entity import ValueEntity


class QueryRequest(ValueEntity):
    """
    GraphQL query text plus optional variables.
    """

    query: str
    variables: Optional[Dict[str, Any]] = None

    def to_payload(self) -> Dict[str, Any]:
        """
        Wire body: { "query": "...", "variables": {...} }.

        Variables always serialize as an object, empty when not given.
        """
        return {
            "query": self.query,
            "variables": dict(self.variables or {}),
        }
