from __future__ import annotations

import time
from typing import Any, Dict, List, Optional

from core.domain.entities.query_request_entity import QueryRequest
from core.repositories.subgraph_query_repository import SubgraphQueryRepository

TOP_POOLS_BY_TVL_QUERY = """
query TopPoolsByTVL($limit: Int!) {
  pools(
    first: $limit
    orderBy: totalValueLockedUSD
    orderDirection: desc
    where: { totalValueLockedUSD_gt: "1000" }
  ) {
    id
    token0 { symbol name }
    token1 { symbol name }
    totalValueLockedUSD
    volumeUSD
    feeTier
  }
}
"""

RECENT_SWAPS_QUERY = """
query RecentSwaps($limit: Int!) {
  swaps(first: $limit, orderBy: timestamp, orderDirection: desc) {
    id
    timestamp
    amount0
    amount1
    amountUSD
    pool {
      token0 { symbol }
      token1 { symbol }
    }
    transaction { id }
  }
}
"""

TOKEN_INFO_QUERY = """
query TokenInfo($tokenAddress: ID!) {
  token(id: $tokenAddress) {
    id
    symbol
    name
    decimals
    totalSupply
    volume
    volumeUSD
    txCount
    poolCount
    derivedETH
  }
}
"""

FIND_POOLS_QUERY = """
query FindPools($token0: String!, $token1: String!) {
  pools(
    where: {
      or: [
        { and: [{ token0_: { symbol_contains_nocase: $token0 } }, { token1_: { symbol_contains_nocase: $token1 } }] }
        { and: [{ token0_: { symbol_contains_nocase: $token1 } }, { token1_: { symbol_contains_nocase: $token0 } }] }
      ]
    }
  ) {
    id
    token0 { id symbol name }
    token1 { id symbol name }
    feeTier
    totalValueLockedUSD
    volumeUSD
  }
}
"""

TRENDING_TOKENS_QUERY = """
query TrendingTokens($limit: Int!) {
  tokens(
    first: $limit
    orderBy: volumeUSD
    orderDirection: desc
    where: { volumeUSD_gt: "100000" }
  ) {
    id
    symbol
    name
    volumeUSD
    totalValueLockedUSD
    txCount
    derivedETH
  }
}
"""

TOKEN_PRICE_HISTORY_QUERY = """
query TokenPriceHistory($tokenAddress: String!, $timestamp: Int!) {
  tokenDayDatas(
    where: { token: $tokenAddress, date_gt: $timestamp }
    orderBy: date
    orderDirection: desc
  ) {
    id
    date
    priceUSD
    volumeUSD
    totalValueLockedUSD
    token { symbol name }
  }
}
"""


class UniswapV3Client:
    """
    Client for Uniswap V3 (Ethereum mainnet) via The Graph Gateway.

    Subgraph:
      https://gateway.thegraph.com/api/{api_key}/subgraphs/id/5zvR82QoaXYFyDEKLZ9t6v9adgnptxYZ22YwKx9QqPWVTH7CZ

    Note:
    - Token addresses are lowercased; subgraph entity IDs are lowercase hex.
    - Missing entities come back as {} / [] rather than raising.
    """

    SUBGRAPH_ID = "5zvR82QoaXYFyDEKLZ9t6v9adgnptxYZ22YwKx9QqPWVTH7CZ"

    def __init__(self, *, query_repository: SubgraphQueryRepository, subgraph_id: Optional[str] = None) -> None:
        self._repo = query_repository
        self._subgraph_id = subgraph_id or self.SUBGRAPH_ID

    async def _data(self, query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        res = await self._repo.query_auto(self._subgraph_id, QueryRequest(query=query, variables=variables))
        return res.data or {}

    async def top_pools_by_tvl(self, *, limit: int = 10) -> List[Dict[str, Any]]:
        data = await self._data(TOP_POOLS_BY_TVL_QUERY, {"limit": int(limit)})
        return data.get("pools") or []

    async def recent_swaps(self, *, limit: int = 10) -> List[Dict[str, Any]]:
        data = await self._data(RECENT_SWAPS_QUERY, {"limit": int(limit)})
        return data.get("swaps") or []

    async def token_info(self, *, token_address: str) -> Dict[str, Any]:
        data = await self._data(TOKEN_INFO_QUERY, {"tokenAddress": str(token_address).lower()})
        return data.get("token") or {}

    async def find_pools(self, *, token0_symbol: str, token1_symbol: str) -> List[Dict[str, Any]]:
        """
        Pools pairing the two symbols, in either token order.
        """
        data = await self._data(FIND_POOLS_QUERY, {"token0": token0_symbol, "token1": token1_symbol})
        return data.get("pools") or []

    async def trending_tokens(self, *, limit: int = 10) -> List[Dict[str, Any]]:
        data = await self._data(TRENDING_TOKENS_QUERY, {"limit": int(limit)})
        return data.get("tokens") or []

    async def token_price_history(
        self,
        *,
        token_address: str,
        days: int = 7,
        now: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Daily price points for a token over the last `days` days, newest first.

        Args:
            token_address: Token contract address (any case).
            days: Window size in days.
            now: Unix seconds used as "now" (defaults to the current time).
        """
        ts_now = int(now if now is not None else time.time())
        since = ts_now - int(days) * 24 * 60 * 60
        data = await self._data(
            TOKEN_PRICE_HISTORY_QUERY,
            {"tokenAddress": str(token_address).lower(), "timestamp": since},
        )
        return data.get("tokenDayDatas") or []
