from __future__ import annotations

from typing import Any, List, Optional


class GatewayClientError(Exception):
    """
    Base class for every failure surfaced by the Gateway query client.
    """


class ConfigurationError(GatewayClientError):
    """
    The client was constructed with missing or invalid configuration (e.g. no API key).
    """


class TransportError(GatewayClientError):
    """
    The HTTP exchange did not succeed.

    Raised for:
    - a non-2xx status (status_code set, body is the parsed JSON or raw text);
    - a 2xx response whose body is not a JSON object;
    - network-level failures (status_code is None, original error chained as __cause__).
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, body: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class GraphQLError(GatewayClientError):
    """
    HTTP succeeded but the response carries a non-empty `errors` array.

    Partial `data` returned next to the errors is kept on the exception.
    """

    def __init__(self, errors: Any, *, data: Any = None) -> None:
        self.errors = list(errors) if isinstance(errors, list) else [errors]
        self.data = data
        super().__init__(f"GraphQL errors: {'; '.join(self.messages)}")

    @property
    def messages(self) -> List[str]:
        return [str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in self.errors]


class EmptyDataError(GatewayClientError):
    """
    A helper operation needed `data` from the response and got none.
    """
