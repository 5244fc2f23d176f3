from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from core.domain.exceptions import EmptyDataError, GatewayClientError, GraphQLError, TransportError
from core.usecases.explore_subgraph_use_case import ExploreSubgraphUseCase

from .deps import get_explore_use_case
from .dtos.query_dtos import EndpointKindOutDTO, EntityTypeOutDTO, GatewayErrorOutDTO, QueryInDTO, QueryOutDTO

router = APIRouter(prefix="/graph", tags=["graph"])


def _to_http(exc: GatewayClientError) -> HTTPException:
    """
    Map client failures to HTTP errors.

    - GraphQLError   -> 400 (the query was rejected by the subgraph)
    - TransportError -> 502 (Gateway unreachable or non-2xx)
    - EmptyDataError -> 502
    """
    if isinstance(exc, GraphQLError):
        detail = GatewayErrorOutDTO(error=str(exc), errors=exc.errors)
        return HTTPException(status_code=400, detail=detail.model_dump(exclude_none=True))
    if isinstance(exc, TransportError):
        detail = GatewayErrorOutDTO(error=str(exc), status_code=exc.status_code, body=exc.body)
        return HTTPException(status_code=502, detail=detail.model_dump(exclude_none=True))
    if isinstance(exc, EmptyDataError):
        return HTTPException(status_code=502, detail=GatewayErrorOutDTO(error=str(exc)).model_dump(exclude_none=True))
    return HTTPException(status_code=500, detail=GatewayErrorOutDTO(error=str(exc)).model_dump(exclude_none=True))


@router.get("/{endpoint_id}/kind", response_model=EndpointKindOutDTO)
async def get_endpoint_kind(
    endpoint_id: str,
    uc: ExploreSubgraphUseCase = Depends(get_explore_use_case),
) -> EndpointKindOutDTO:
    """
    Tell whether an identifier will be queried as a subgraph ID or a deployment ID.
    """
    ref = uc.describe_endpoint(endpoint_id)
    return EndpointKindOutDTO(endpoint_id=ref.endpoint_id, kind=ref.kind.value)


@router.post("/{endpoint_id}/query", response_model=QueryOutDTO, response_model_exclude_none=True)
async def run_query(
    endpoint_id: str,
    dto: QueryInDTO,
    uc: ExploreSubgraphUseCase = Depends(get_explore_use_case),
) -> QueryOutDTO:
    """
    Run a GraphQL query against a subgraph or deployment ID.

    The ID type is auto-detected; see GET /graph/{endpoint_id}/kind.
    """
    try:
        res = await uc.run_query(endpoint_id=endpoint_id, query=dto.query, variables=dto.variables)
    except GatewayClientError as exc:
        raise _to_http(exc) from exc
    return QueryOutDTO.model_validate(res.to_dict())


@router.get("/{endpoint_id}/connection", response_model=QueryOutDTO, response_model_exclude_none=True)
async def check_connection(
    endpoint_id: str,
    uc: ExploreSubgraphUseCase = Depends(get_explore_use_case),
) -> QueryOutDTO:
    try:
        res = await uc.check_connection(endpoint_id=endpoint_id)
    except GatewayClientError as exc:
        raise _to_http(exc) from exc
    return QueryOutDTO.model_validate(res.to_dict())


@router.get("/{endpoint_id}/entity-types", response_model=List[EntityTypeOutDTO])
async def list_entity_types(
    endpoint_id: str,
    uc: ExploreSubgraphUseCase = Depends(get_explore_use_case),
) -> List[EntityTypeOutDTO]:
    """
    List the entity (object) types of the endpoint's schema.
    """
    try:
        items = await uc.entity_types(endpoint_id=endpoint_id)
    except GatewayClientError as exc:
        raise _to_http(exc) from exc
    return [EntityTypeOutDTO.model_validate(x.model_dump()) for x in items]
