"""Tests for value entities and the error hierarchy."""

import pydantic
import pytest

from core.domain.entities.query_request_entity import QueryRequest
from core.domain.entities.query_response_entity import QueryResponse
from core.domain.exceptions import GatewayClientError, GraphQLError, TransportError


def test_query_request_payload_defaults_variables() -> None:
    req = QueryRequest(query="{ pools { id } }")
    assert req.to_payload() == {"query": "{ pools { id } }", "variables": {}}


def test_query_request_payload_keeps_variables() -> None:
    req = QueryRequest(query="q", variables={"limit": 5})
    assert req.to_payload() == {"query": "q", "variables": {"limit": 5}}


def test_entities_are_frozen() -> None:
    req = QueryRequest(query="q")
    with pytest.raises(pydantic.ValidationError):
        req.query = "other"


def test_value_equality() -> None:
    assert QueryRequest(query="q", variables={"a": 1}) == QueryRequest(query="q", variables={"a": 1})


def test_query_response_keeps_extra_keys() -> None:
    res = QueryResponse.model_validate({"data": {"x": 1}, "extensions": {"cost": 3}})

    assert res.data == {"x": 1}
    assert res.to_dict() == {"data": {"x": 1}, "extensions": {"cost": 3}}


def test_graphql_error_messages() -> None:
    err = GraphQLError([{"message": "bad query"}, {"message": "other"}], data={"partial": True})

    assert err.messages == ["bad query", "other"]
    assert "bad query" in str(err)
    assert err.data == {"partial": True}
    assert isinstance(err, GatewayClientError)


def test_graphql_error_wraps_non_list() -> None:
    err = GraphQLError("boom")
    assert err.errors == ["boom"]
    assert err.messages == ["boom"]


def test_transport_error_fields() -> None:
    err = TransportError("HTTP 401", status_code=401, body={"error": "auth"})

    assert err.status_code == 401
    assert err.body == {"error": "auth"}
