import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from adapters.entry.http.graph_router import router as graph_router
from adapters.external.thegraph.thegraph_http_client import GatewayQueryClient
from config.settings import settings


def _setup_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def build_graph_client() -> GatewayQueryClient:
    """
    Build the Gateway client from settings.

    Raises ConfigurationError when GATEWAY_API_KEY is not set.
    """
    return GatewayQueryClient(
        api_key=settings.GATEWAY_API_KEY,
        base_url=settings.THEGRAPH_GATEWAY_URL,
        timeout_s=settings.THEGRAPH_TIMEOUT_S,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    _setup_logging()
    logging.getLogger(__name__).info("Starting %s (lifespan startup)...", settings.APP_NAME)

    app.state.graph_client = build_graph_client()

    try:
        yield
    finally:
        logging.getLogger(__name__).info("Shutting down %s (lifespan shutdown)...", settings.APP_NAME)
        await app.state.graph_client.aclose()


app = FastAPI(title="graph-gateway-client", version="0.1.0", lifespan=lifespan)
app.include_router(graph_router)


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}
