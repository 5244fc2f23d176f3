from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from core.domain.entities.entity_type_entity import EntityType
from core.domain.entities.query_request_entity import QueryRequest
from core.domain.entities.query_response_entity import QueryResponse


class SubgraphQueryRepository(ABC):
    """
    Abstraction for running GraphQL queries against indexed subgraphs.

    Every call is one independent request/response exchange; implementations
    must not keep per-call state so that calls can run concurrently.
    """

    @abstractmethod
    async def query_by_subgraph_id(self, subgraph_id: str, request: QueryRequest) -> QueryResponse:
        """
        Query a subgraph addressed by its subgraph ID.
        """
        raise NotImplementedError

    @abstractmethod
    async def query_by_deployment_id(self, deployment_id: str, request: QueryRequest) -> QueryResponse:
        """
        Query a subgraph addressed by its deployment ID.
        """
        raise NotImplementedError

    @abstractmethod
    async def query_auto(self, endpoint_id: str, request: QueryRequest) -> QueryResponse:
        """
        Classify `endpoint_id` and dispatch to the matching query method.
        """
        raise NotImplementedError

    @abstractmethod
    async def test_connection(self, endpoint_id: str) -> QueryResponse:
        """
        Run a minimal introspection query to check that the endpoint answers.
        """
        raise NotImplementedError

    @abstractmethod
    async def list_entity_types(self, endpoint_id: str) -> List[EntityType]:
        """
        List the object types exposed by the endpoint's schema.
        """
        raise NotImplementedError
