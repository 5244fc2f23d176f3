from __future__ import annotations

from core.domain.entities.endpoint_reference_entity import EndpointKind, EndpointReference


class EndpointClassifierService:
    """
    Decides whether a Gateway identifier is a deployment ID or a subgraph ID.

    Rules:
    - Deployment IDs are IPFS-style hashes: they start with "Qm" and are longer than 40 chars.
    - Everything else is treated as a subgraph ID.

    This is a heuristic over opaque strings. Nothing else is validated; a malformed
    identifier is sent as-is and the Gateway rejects it.
    """

    DEPLOYMENT_PREFIX = "Qm"
    DEPLOYMENT_MIN_LENGTH = 41

    @classmethod
    def kind_of(cls, endpoint_id: str) -> EndpointKind:
        value = endpoint_id or ""
        if value.startswith(cls.DEPLOYMENT_PREFIX) and len(value) >= cls.DEPLOYMENT_MIN_LENGTH:
            return EndpointKind.DEPLOYMENT_ID
        return EndpointKind.SUBGRAPH_ID

    @classmethod
    def classify(cls, endpoint_id: str) -> EndpointReference:
        return EndpointReference(endpoint_id=endpoint_id, kind=cls.kind_of(endpoint_id))
