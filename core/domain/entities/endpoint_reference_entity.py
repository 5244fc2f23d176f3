from __future__ import annotations

from enum import Enum

from core.domain.entities.base_entity import ValueEntity


class EndpointKind(str, Enum):
    """
    How a Gateway endpoint identifier is addressed and authenticated.

    - SUBGRAPH_ID: API key embedded in the URL path.
    - DEPLOYMENT_ID: fixed path, API key sent as a bearer token.
    """

    SUBGRAPH_ID = "subgraph_id"
    DEPLOYMENT_ID = "deployment_id"


class EndpointReference(ValueEntity):
    """
    A classified Gateway endpoint identifier.

    The identifier itself is opaque; only `kind` decides the URL shape and auth scheme.
    """

    endpoint_id: str
    kind: EndpointKind

    @property
    def is_deployment(self) -> bool:
        return self.kind is EndpointKind.DEPLOYMENT_ID
