"""Shared fixtures for Gateway client tests."""

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from adapters.external.thegraph.thegraph_http_client import GatewayQueryClient

API_KEY = "test-api-key-123"
BASE_URL = "https://gateway.thegraph.com/api"
SUBGRAPH_ID = "5zvR82QoaXYFyDEKLZ9t6v9adgnptxYZ22YwKx9QqPWVTH7CZ"
DEPLOYMENT_ID = "QmeB7YfNvLbM9AnSVeh5JvsfUwm1KVCtUDwaDLh5oxupGh"


class RecordingHandler:
    """MockTransport handler that records requests and replies with a fixed response."""

    def __init__(self, status_code: int = 200, payload: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        self.payload = payload if payload is not None else {"data": {}}
        self.text = text
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self) -> Dict[str, Any]:
        return json.loads(self.last.content)


@pytest.fixture
def make_client() -> Callable[..., GatewayQueryClient]:
    """Build a GatewayQueryClient backed by an httpx.MockTransport."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> GatewayQueryClient:
        return GatewayQueryClient(
            api_key=API_KEY,
            base_url=BASE_URL,
            transport=httpx.MockTransport(handler),
        )

    return _make
