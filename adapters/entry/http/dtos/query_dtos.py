from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class QueryInDTO(BaseModel):
    """
    DTO for running a GraphQL query against a subgraph endpoint.
    """

    query: str = Field(..., description="GraphQL query text, e.g. '{ pools(first: 5) { id } }'")
    variables: Optional[Dict[str, Any]] = Field(default=None, description="Optional query variables.")

    @field_validator("query")
    @classmethod
    def _validate_query(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("query is required")
        return v


class QueryOutDTO(BaseModel):
    """
    DTO returned by API for a successful GraphQL query.
    """

    data: Optional[Any] = None
    extensions: Optional[Dict[str, Any]] = None


class EntityTypeOutDTO(BaseModel):
    name: str
    description: Optional[str] = None


class EndpointKindOutDTO(BaseModel):
    endpoint_id: str
    kind: str


class GatewayErrorOutDTO(BaseModel):
    """
    Error detail returned when the Gateway call fails.
    """

    error: str
    status_code: Optional[int] = None
    body: Optional[Any] = None
    errors: Optional[List[Any]] = None
