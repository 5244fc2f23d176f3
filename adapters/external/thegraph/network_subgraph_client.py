from __future__ import annotations

from typing import Any, Dict, List

from core.domain.entities.query_request_entity import QueryRequest
from core.repositories.subgraph_query_repository import SubgraphQueryRepository


class NetworkSubgraphClient:
    """
    Client for The Graph Network subgraph (registry of subgraphs and deployments).

    Subgraph:
      https://gateway.thegraph.com/api/{api_key}/subgraphs/id/DZz4kDTdmzWLWsV373w2bSmoar3umKKH9y82SUKr5qmp
    """

    SUBGRAPH_ID = "DZz4kDTdmzWLWsV373w2bSmoar3umKKH9y82SUKr5qmp"

    def __init__(self, *, query_repository: SubgraphQueryRepository) -> None:
        self._repo = query_repository

    async def get_deployment_info(self, *, deployment_id: str) -> Dict[str, Any]:
        """
        Fetch deployment metadata (network, IPFS hashes, subgraph display info).

        Returns {} when the deployment is unknown to the network subgraph.
        """
        q = """
        query GetDeploymentInfo($deploymentId: String!) {
          subgraphDeployment(id: $deploymentId) {
            id
            ipfsHash
            createdAt
            network
            schemaIpfsHash
            subgraphCount
            versions {
              subgraph {
                displayName
                description
                website
              }
            }
          }
        }
        """
        res = await self._repo.query_by_subgraph_id(
            self.SUBGRAPH_ID,
            QueryRequest(query=q, variables={"deploymentId": deployment_id}),
        )
        return (res.data or {}).get("subgraphDeployment") or {}

    async def search_subgraphs(self, *, search_text: str, limit: int = 10) -> List[Dict[str, Any]]:
        """
        Search active subgraphs by display name (case-insensitive), highest signal first.
        """
        q = """
        query SearchSubgraphs($searchText: String!, $limit: Int!) {
          subgraphs(
            where: { displayName_contains_nocase: $searchText, active: true }
            first: $limit
            orderBy: signalledTokens
            orderDirection: desc
          ) {
            id
            displayName
            description
            website
            currentVersion {
              id
              subgraphDeployment { id ipfsHash network }
            }
            signalledTokens
            createdAt
          }
        }
        """
        res = await self._repo.query_by_subgraph_id(
            self.SUBGRAPH_ID,
            QueryRequest(query=q, variables={"searchText": search_text, "limit": int(limit)}),
        )
        return (res.data or {}).get("subgraphs") or []

    async def get_subgraphs_for_network(self, *, network: str, limit: int = 5) -> List[Dict[str, Any]]:
        """
        Top active subgraphs whose current deployment indexes `network` (e.g. "mainnet", "arbitrum-one").
        """
        q = """
        query GetSubgraphsForNetwork($network: String!, $limit: Int!) {
          subgraphs(
            where: {
              currentVersion_: { subgraphDeployment_: { network: $network } }
              active: true
            }
            first: $limit
            orderBy: signalledTokens
            orderDirection: desc
          ) {
            id
            displayName
            description
            currentVersion {
              id
              subgraphDeployment { id network ipfsHash }
            }
            signalledTokens
          }
        }
        """
        res = await self._repo.query_by_subgraph_id(
            self.SUBGRAPH_ID,
            QueryRequest(query=q, variables={"network": network, "limit": int(limit)}),
        )
        return (res.data or {}).get("subgraphs") or []
