import pytest
from scalr_client.errors import RequestEncodingError
from scalr_client.models import Account, VcsProvider, Workspace
from scalr_client.request import (
    build_request,
    encode_document,
    encode_query,
    encode_refs,
    resource_path,
)
from scalr_client.resources import (
    AgentPoolCreateOptions,
    AgentPoolListOptions,
    AgentPoolUpdateOptions,
    Environment,
    PolicyGroupCreateOptions,
    PolicyGroupVCSRepoOptions,
    SlackEvent,
    SlackIntegrationUpdateOptions,
)


def test_resource_path_escapes_segments():
    assert resource_path("agent-pools", "apool-1") == "agent-pools/apool-1"
    assert resource_path("a/b") == "a%2Fb"
    assert resource_path("x y?z") == "x%20y%3Fz"


def test_list_options_become_filters():
    params = encode_query(
        AgentPoolListOptions(
            page_number=2,
            page_size=50,
            account="acc-1",
            vcs_enabled=False,
            include=["workspaces", "agents"],
        )
    )
    assert params == {
        "page[number]": "2",
        "page[size]": "50",
        "include": "workspaces,agents",
        "filter[account]": "acc-1",
        "filter[vcs-enabled]": "false",
    }


def test_absent_filters_are_omitted():
    assert encode_query(AgentPoolListOptions()) == {}


def test_get_without_payload_has_no_params():
    req = build_request("get", "roles")
    assert req.method == "GET"
    assert req.params == {}
    assert req.json is None


def test_delete_uses_query_encoding():
    req = build_request("DELETE", "tags/tag-1", {"force": True})
    assert req.params == {"force": "true"}
    assert req.json is None


def test_document_contains_only_present_fields():
    doc = encode_document(
        AgentPoolCreateOptions(name="pool", account=Account(id="acc-1"))
    )
    assert doc == {
        "data": {
            "type": "agent-pools",
            "attributes": {"name": "pool"},
            "relationships": {"account": {"data": {"type": "accounts", "id": "acc-1"}}},
        }
    }


def test_explicit_empty_values_are_sent():
    doc = encode_document(
        SlackIntegrationUpdateOptions(environment=None, workspaces=[], events=[])
    )
    data = doc["data"]
    assert data["attributes"] == {"events": []}
    assert data["relationships"] == {
        "environment": {"data": None},
        "workspaces": {"data": []},
    }


def test_relation_list_keeps_order_and_kebab_names():
    doc = encode_document(
        AgentPoolUpdateOptions(
            workspaces=[Workspace(id="ws-2"), Workspace(id="ws-1")],
        )
    )
    assert doc["data"]["relationships"]["workspaces"]["data"] == [
        {"type": "workspaces", "id": "ws-2"},
        {"type": "workspaces", "id": "ws-1"},
    ]
    assert "attributes" not in doc["data"]


def test_attribute_aliases_and_nested_options():
    doc = encode_document(
        PolicyGroupCreateOptions(
            name="opa",
            opa_version="0.55.0",
            vcs_repo=PolicyGroupVCSRepoOptions(identifier="org/repo"),
            account=Account(id="acc-1"),
            vcs_provider=VcsProvider(id="vcs-1"),
        )
    )
    data = doc["data"]
    assert data["attributes"] == {
        "name": "opa",
        "opa-version": "0.55.0",
        "vcs-repo": {"identifier": "org/repo"},
    }
    assert data["relationships"]["vcs-provider"] == {
        "data": {"type": "vcs-providers", "id": "vcs-1"}
    }


def test_enums_encode_as_values():
    doc = encode_document(
        SlackIntegrationUpdateOptions(events=[SlackEvent.RUN_ERRORED, "run_success"])
    )
    assert doc["data"]["attributes"]["events"] == ["run_errored", "run_success"]


def test_primary_id_only_when_set():
    with_id = encode_document(AgentPoolUpdateOptions(id="apool-1", name="x"))
    assert with_id["data"]["id"] == "apool-1"
    without = encode_document(AgentPoolUpdateOptions(name="x"))
    assert "id" not in without["data"]


def test_encode_refs():
    assert encode_refs([Environment(id="env-1"), Environment(id="env-2")]) == {
        "data": [
            {"type": "environments", "id": "env-1"},
            {"type": "environments", "id": "env-2"},
        ]
    }


def test_post_passes_raw_body_through():
    req = build_request("POST", "x", {"data": []})
    assert req.json == {"data": []}
    assert req.params == {}


def test_unsupported_payload_and_method():
    with pytest.raises(RequestEncodingError):
        build_request("POST", "x", object())
    with pytest.raises(RequestEncodingError):
        build_request("PUT", "x")
    with pytest.raises(RequestEncodingError):
        encode_query({"nested": {"a": 1}})
