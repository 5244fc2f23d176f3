"""Tests for the typed subgraph clients built on the Gateway client."""

import pytest

from adapters.external.thegraph.network_subgraph_client import NetworkSubgraphClient
from adapters.external.thegraph.uniswap_v3_client import UniswapV3Client

from .conftest import API_KEY, RecordingHandler


class TestNetworkSubgraphClient:
    @pytest.mark.asyncio
    async def test_get_deployment_info(self, make_client) -> None:
        deployment = {"id": "0xabc", "network": "mainnet", "versions": []}
        handler = RecordingHandler(payload={"data": {"subgraphDeployment": deployment}})
        client = NetworkSubgraphClient(query_repository=make_client(handler))

        info = await client.get_deployment_info(deployment_id="0xabc")

        assert info == deployment
        assert handler.last.url.path == f"/api/{API_KEY}/subgraphs/id/{NetworkSubgraphClient.SUBGRAPH_ID}"
        assert handler.last_body()["variables"] == {"deploymentId": "0xabc"}

    @pytest.mark.asyncio
    async def test_get_deployment_info_missing(self, make_client) -> None:
        client = NetworkSubgraphClient(
            query_repository=make_client(RecordingHandler(payload={"data": {"subgraphDeployment": None}}))
        )

        assert await client.get_deployment_info(deployment_id="0xnope") == {}

    @pytest.mark.asyncio
    async def test_search_subgraphs(self, make_client) -> None:
        subgraphs = [{"id": "1", "displayName": "Uniswap V3"}]
        handler = RecordingHandler(payload={"data": {"subgraphs": subgraphs}})
        client = NetworkSubgraphClient(query_repository=make_client(handler))

        out = await client.search_subgraphs(search_text="uniswap", limit=3)

        assert out == subgraphs
        assert handler.last_body()["variables"] == {"searchText": "uniswap", "limit": 3}

    @pytest.mark.asyncio
    async def test_get_subgraphs_for_network(self, make_client) -> None:
        handler = RecordingHandler(payload={"data": {}})
        client = NetworkSubgraphClient(query_repository=make_client(handler))

        out = await client.get_subgraphs_for_network(network="arbitrum-one")

        assert out == []
        assert handler.last_body()["variables"] == {"network": "arbitrum-one", "limit": 5}


class TestUniswapV3Client:
    @pytest.mark.asyncio
    async def test_top_pools_by_tvl(self, make_client) -> None:
        pools = [{"id": "0xpool", "feeTier": "500"}]
        handler = RecordingHandler(payload={"data": {"pools": pools}})
        client = UniswapV3Client(query_repository=make_client(handler))

        out = await client.top_pools_by_tvl(limit=1)

        assert out == pools
        assert handler.last.url.path.endswith(UniswapV3Client.SUBGRAPH_ID)
        assert handler.last_body()["variables"] == {"limit": 1}

    @pytest.mark.asyncio
    async def test_token_info_lowercases_address(self, make_client) -> None:
        handler = RecordingHandler(payload={"data": {"token": {"symbol": "WETH"}}})
        client = UniswapV3Client(query_repository=make_client(handler))

        out = await client.token_info(token_address="0xC02AAA39B223FE8D0A0E5C4F27EAD9083C756CC2")

        assert out == {"symbol": "WETH"}
        assert handler.last_body()["variables"] == {"tokenAddress": "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"}

    @pytest.mark.asyncio
    async def test_find_pools_passes_symbols(self, make_client) -> None:
        handler = RecordingHandler(payload={"data": {"pools": []}})
        client = UniswapV3Client(query_repository=make_client(handler))

        await client.find_pools(token0_symbol="WETH", token1_symbol="USDC")

        assert handler.last_body()["variables"] == {"token0": "WETH", "token1": "USDC"}

    @pytest.mark.asyncio
    async def test_token_price_history_window(self, make_client) -> None:
        handler = RecordingHandler(payload={"data": {"tokenDayDatas": [{"date": 1}]}})
        client = UniswapV3Client(query_repository=make_client(handler))

        out = await client.token_price_history(token_address="0xABC", days=2, now=1_000_000)

        assert out == [{"date": 1}]
        assert handler.last_body()["variables"] == {"tokenAddress": "0xabc", "timestamp": 1_000_000 - 2 * 86400}

    @pytest.mark.asyncio
    async def test_recent_swaps_and_trending_default_to_empty(self, make_client) -> None:
        client = UniswapV3Client(query_repository=make_client(RecordingHandler(payload={"data": None})))

        assert await client.recent_swaps() == []
        assert await client.trending_tokens() == []

    @pytest.mark.asyncio
    async def test_custom_deployment_id(self, make_client) -> None:
        deployment_id = "Qm" + "d" * 44
        handler = RecordingHandler(payload={"data": {"pools": []}})
        client = UniswapV3Client(query_repository=make_client(handler), subgraph_id=deployment_id)

        await client.top_pools_by_tvl()

        assert handler.last.url.path == f"/api/deployments/id/{deployment_id}"
        assert handler.last.headers["Authorization"] == f"Bearer {API_KEY}"
