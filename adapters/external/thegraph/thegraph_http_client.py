from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from core.domain.entities.entity_type_entity import EntityType
from core.domain.entities.query_request_entity import QueryRequest
from core.domain.entities.query_response_entity import QueryResponse
from core.domain.exceptions import ConfigurationError, EmptyDataError, GraphQLError, TransportError
from core.repositories.subgraph_query_repository import SubgraphQueryRepository
from core.services.endpoint_classifier_service import EndpointClassifierService
from core.services.gateway_url_service import GatewayUrlService

CONNECTION_QUERY = "{ __schema { queryType { name } } }"

ENTITY_TYPES_QUERY = """
{
  __schema {
    types {
      kind
      name
      description
    }
  }
}
"""

SCHEMA_INTROSPECTION_QUERY = """
query IntrospectionQuery {
  __schema {
    queryType { name }
    mutationType { name }
    subscriptionType { name }
    types { ...FullType }
    directives {
      name
      description
      locations
      args { ...InputValue }
    }
  }
}

fragment FullType on __Type {
  kind
  name
  description
  fields(includeDeprecated: true) {
    name
    description
    args { ...InputValue }
    type { ...TypeRef }
    isDeprecated
    deprecationReason
  }
  inputFields { ...InputValue }
  interfaces { ...TypeRef }
  enumValues(includeDeprecated: true) {
    name
    description
    isDeprecated
    deprecationReason
  }
  possibleTypes { ...TypeRef }
}

fragment InputValue on __InputValue {
  name
  description
  type { ...TypeRef }
  defaultValue
}

fragment TypeRef on __Type {
  kind
  name
  ofType {
    kind
    name
    ofType {
      kind
      name
      ofType { kind name }
    }
  }
}
"""

# Root operation types are not entities.
_NON_ENTITY_TYPES = frozenset({"Query", "Subscription"})


class GatewayQueryClient(SubgraphQueryRepository):
    """
    The Graph Gateway client with both authentication schemes.

    Uses POST JSON:
      { "query": "...", "variables": {...} }

    Authorization:
      - subgraph ID:   API key in the URL path, no Authorization header
      - deployment ID: Bearer {api_key}

    The client keeps no per-call state: one instance can serve any number of
    concurrent queries.
    """

    def __init__(
        self,
        *,
        api_key: Optional[str],
        base_url: str = GatewayUrlService.DEFAULT_BASE_URL,
        timeout_s: float = 20.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        key = str(api_key or "").strip()
        if not key:
            raise ConfigurationError(
                "API key is required. Get one from https://thegraph.com/studio/ and set GATEWAY_API_KEY."
            )
        self._api_key = key
        self._base_url = GatewayUrlService.normalize_base(base_url)
        self._logger = logging.getLogger(self.__class__.__name__)
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout_s, connect=5.0),
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "GatewayQueryClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def query_by_subgraph_id(self, subgraph_id: str, request: QueryRequest) -> QueryResponse:
        url = GatewayUrlService.subgraph_url(
            base_url=self._base_url,
            api_key=self._api_key,
            subgraph_id=subgraph_id,
        )
        return await self._post(url, request, headers={})

    async def query_by_deployment_id(self, deployment_id: str, request: QueryRequest) -> QueryResponse:
        url = GatewayUrlService.deployment_url(base_url=self._base_url, deployment_id=deployment_id)
        return await self._post(url, request, headers={"Authorization": f"Bearer {self._api_key}"})

    async def query_auto(self, endpoint_id: str, request: QueryRequest) -> QueryResponse:
        ref = EndpointClassifierService.classify(endpoint_id)
        self._logger.debug("Routing endpoint_id=%s as %s", endpoint_id, ref.kind.value)
        if ref.is_deployment:
            return await self.query_by_deployment_id(endpoint_id, request)
        return await self.query_by_subgraph_id(endpoint_id, request)

    async def query(
        self,
        endpoint_id: str,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
    ) -> QueryResponse:
        """
        Shortcut for `query_auto` taking the raw query text and variables.
        """
        return await self.query_auto(endpoint_id, QueryRequest(query=query, variables=variables))

    async def test_connection(self, endpoint_id: str) -> QueryResponse:
        return await self.query_auto(endpoint_id, QueryRequest(query=CONNECTION_QUERY))

    async def list_entity_types(self, endpoint_id: str) -> List[EntityType]:
        """
        List object types of the endpoint's schema, in schema order.

        Root operation types (Query/Subscription) and introspection types (`__*`)
        are left out. Entries without a `kind` are kept.
        """
        res = await self.query_auto(endpoint_id, QueryRequest(query=ENTITY_TYPES_QUERY))
        data = res.data if isinstance(res.data, dict) else {}
        schema = data.get("__schema")
        if not schema:
            raise EmptyDataError(f"No schema data returned for endpoint_id={endpoint_id}")
        types = schema.get("types") if isinstance(schema, dict) else None
        if not isinstance(schema, dict) or not isinstance(types, (list, type(None))):
            raise EmptyDataError(f"Malformed schema data returned for endpoint_id={endpoint_id}")

        out: List[EntityType] = []
        for t in types or []:
            if not isinstance(t, dict):
                raise EmptyDataError(f"Malformed schema type entry returned for endpoint_id={endpoint_id}")
            name = t.get("name")
            if not isinstance(name, str) or not name or name in _NON_ENTITY_TYPES or name.startswith("__"):
                continue
            if t.get("kind", "OBJECT") != "OBJECT":
                continue
            out.append(EntityType(name=name, description=t.get("description")))
        return out

    async def get_schema(self, endpoint_id: str) -> QueryResponse:
        """
        Run the full standard introspection query.
        """
        return await self.query_auto(endpoint_id, QueryRequest(query=SCHEMA_INTROSPECTION_QUERY))

    async def _post(self, url: str, request: QueryRequest, *, headers: Dict[str, str]) -> QueryResponse:
        safe_url = GatewayUrlService.mask(url, self._api_key)
        all_headers = {"Content-Type": "application/json", **headers}

        try:
            r = await self._client.post(url, headers=all_headers, json=request.to_payload())
        except httpx.RequestError as exc:
            self._logger.warning("Gateway request failed url=%s: %s", safe_url, exc)
            raise TransportError(f"Request to {safe_url} failed: {exc}") from exc

        # The Gateway sends structured JSON error bodies with non-2xx statuses too.
        try:
            body: Any = r.json()
        except ValueError:
            body = r.text

        if not r.is_success:
            self._logger.warning("Gateway HTTP %s url=%s", r.status_code, safe_url)
            raise TransportError(
                f"HTTP {r.status_code} from {safe_url}",
                status_code=r.status_code,
                body=body,
            )

        if not isinstance(body, dict):
            raise TransportError(
                f"Unexpected non-object response body from {safe_url}",
                status_code=r.status_code,
                body=body,
            )

        errors = body.get("errors")
        if errors:
            err = GraphQLError(errors, data=body.get("data"))
            self._logger.warning("GraphQL errors url=%s count=%d", safe_url, len(err.errors))
            raise err
        if errors is not None and not isinstance(errors, list):
            raise TransportError(
                f"Malformed `errors` field in response from {safe_url}",
                status_code=r.status_code,
                body=body,
            )

        return QueryResponse.model_validate(body)
