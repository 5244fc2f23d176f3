from __future__ import annotations

from fastapi import Request

from core.repositories.subgraph_query_repository import SubgraphQueryRepository
from core.usecases.explore_subgraph_use_case import ExploreSubgraphUseCase


def get_query_repository(request: Request) -> SubgraphQueryRepository:
    """
    Return the Gateway client built during app startup (see main.lifespan).
    """
    return request.app.state.graph_client


def get_explore_use_case(request: Request) -> ExploreSubgraphUseCase:
    return ExploreSubgraphUseCase(query_repository=get_query_repository(request))
