"""
Application configuration for graph-gateway-client.

Centralizes environment variables using python-dotenv.

Note:
- The Gateway API key is only read here; the query client itself is always
  constructed from explicit arguments (see main.py).
"""

import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """
    Configuration settings for the graph-gateway-client service.
    """

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    APP_NAME: str = os.getenv("APP_NAME", "graph-gateway-client")

    # The Graph Gateway
    GATEWAY_API_KEY: str = os.getenv("GATEWAY_API_KEY", "")
    THEGRAPH_GATEWAY_URL: str = os.getenv("THEGRAPH_GATEWAY_URL", "https://gateway.thegraph.com/api")
    THEGRAPH_TIMEOUT_S: float = float(os.getenv("THEGRAPH_TIMEOUT_S", "20.0"))


settings = Settings()
