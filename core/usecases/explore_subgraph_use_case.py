from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from core.domain.entities.endpoint_reference_entity import EndpointReference
from core.domain.entities.entity_type_entity import EntityType
from core.domain.entities.query_request_entity import QueryRequest
from core.domain.entities.query_response_entity import QueryResponse
from core.repositories.subgraph_query_repository import SubgraphQueryRepository
from core.services.endpoint_classifier_service import EndpointClassifierService


class ExploreSubgraphUseCase:
    """
    Use case for ad-hoc exploration of a subgraph endpoint.

    This isolates the HTTP layer from the Gateway client: routers talk in
    endpoint IDs and plain dicts, the repository talks in entities.
    """

    def __init__(
        self,
        *,
        query_repository: SubgraphQueryRepository,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._repo = query_repository
        self._logger = logger or logging.getLogger(self.__class__.__name__)

    def describe_endpoint(self, endpoint_id: str) -> EndpointReference:
        """
        Classify an identifier without touching the network.
        """
        return EndpointClassifierService.classify(endpoint_id)

    async def run_query(
        self,
        *,
        endpoint_id: str,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
    ) -> QueryResponse:
        """
        Run a caller-supplied GraphQL query.
        """
        request = QueryRequest(query=query, variables=variables)
        return await self._repo.query_auto(endpoint_id, request)

    async def check_connection(self, *, endpoint_id: str) -> QueryResponse:
        res = await self._repo.test_connection(endpoint_id)
        self._logger.info("Connection OK endpoint_id=%s", endpoint_id)
        return res

    async def entity_types(self, *, endpoint_id: str) -> List[EntityType]:
        types = await self._repo.list_entity_types(endpoint_id)
        self._logger.info("Found %d entity types endpoint_id=%s", len(types), endpoint_id)
        return types
