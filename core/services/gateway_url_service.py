from __future__ import annotations


class GatewayUrlService:
    """
    Builds Gateway query URLs.

    Shapes:
    - subgraph ID:   "{base}/{api_key}/subgraphs/id/{subgraph_id}"
    - deployment ID: "{base}/deployments/id/{deployment_id}"  (key goes in the Authorization header)
    """

    DEFAULT_BASE_URL = "https://gateway.thegraph.com/api"

    @staticmethod
    def normalize_base(base_url: str) -> str:
        return (base_url or GatewayUrlService.DEFAULT_BASE_URL).strip().rstrip("/")

    @staticmethod
    def subgraph_url(*, base_url: str, api_key: str, subgraph_id: str) -> str:
        base = GatewayUrlService.normalize_base(base_url)
        return f"{base}/{api_key}/subgraphs/id/{subgraph_id}"

    @staticmethod
    def deployment_url(*, base_url: str, deployment_id: str) -> str:
        base = GatewayUrlService.normalize_base(base_url)
        return f"{base}/deployments/id/{deployment_id}"

    @staticmethod
    def mask(url: str, api_key: str) -> str:
        """
        Hide the API key when a URL is logged or put into an error message.
        """
        if not api_key:
            return url
        return url.replace(api_key, "***")
