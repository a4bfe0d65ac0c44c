import httpx
import pytest
from scalr_client.errors import (
    DecodingError,
    ResourceNotFoundError,
    ServerValidationError,
    UnauthorizedError,
    UnexpectedResponseError,
)
from scalr_client.resources import (
    AccessPolicy,
    PolicyEnforcementLevel,
    PolicyGroup,
    PolicyGroupStatus,
    Role,
    SlackEvent,
    SlackIntegration,
    SlackStatus,
)
from scalr_client.response import check_response, decode_many, decode_one


def _resp(status, **kwargs):
    return httpx.Response(
        status,
        request=httpx.Request("GET", "https://mock.scalr.io/api/iacp/v3/x"),
        **kwargs,
    )


POLICY = {
    "data": {
        "type": "access-policies",
        "id": "ap-1",
        "attributes": {"is-system": False},
        "relationships": {
            "roles": {
                "data": [
                    {"type": "roles", "id": "role-1"},
                    {"type": "roles", "id": "role-2"},
                ]
            },
            "user": {"data": {"type": "users", "id": "user-1"}},
            "team": {"data": None},
            "account": {"data": {"type": "accounts", "id": "acc-1"}},
            "environment": {"links": {"related": "/environments/env-1"}},
        },
    },
    "included": [
        {
            "type": "roles",
            "id": "role-1",
            "attributes": {"name": "admin", "is-system": True},
            "relationships": {
                "account": {"data": {"type": "accounts", "id": "acc-1"}},
                "permissions": {
                    "data": [{"type": "permissions", "id": "*:*"}]
                },
            },
        }
    ],
}


def test_decode_one_resolves_included_relations():
    policy = decode_one(_resp(200, json=POLICY), AccessPolicy)

    assert policy.id == "ap-1"
    assert policy.is_system is False
    assert [r.id for r in policy.roles] == ["role-1", "role-2"]

    admin, other = policy.roles
    assert admin.name == "admin"
    assert admin.is_system is True
    assert admin.account.id == "acc-1"
    assert admin.account.name is None
    assert [p.id for p in admin.permissions] == ["*:*"]

    # Not included: id only
    assert other.name is None
    assert policy.user.id == "user-1"
    assert policy.user.email is None
    assert policy.team is None
    assert policy.environment is None
    assert policy.account.id == "acc-1"


def test_decoded_entities_are_immutable():
    policy = decode_one(_resp(200, json=POLICY), AccessPolicy)
    with pytest.raises(Exception):
        policy.is_system = True


def test_decode_many_with_pagination():
    body = {
        "data": [
            {"type": "roles", "id": "role-b", "attributes": {"name": "b"}},
            {"type": "roles", "id": "role-a", "attributes": {"name": "a"}},
        ],
        "meta": {
            "pagination": {
                "current-page": 1,
                "prev-page": None,
                "next-page": 2,
                "total-pages": 2,
                "total-count": 4,
            }
        },
    }
    page = decode_many(_resp(200, json=body), Role)

    assert [r.name for r in page] == ["b", "a"]
    assert page.current_page == 1
    assert page.next_page == 2
    assert page.total_pages == 2
    assert page.total_count == 4
    assert page.has_next


@pytest.mark.parametrize(
    "resp",
    [
        _resp(200, text="<html>"),
        _resp(200, json=[1, 2]),
        _resp(200, json={"meta": {}}),
        _resp(200),
        _resp(200, json={"data": {"type": "roles", "attributes": {}}}),
    ],
)
def test_decode_one_failures(resp):
    with pytest.raises(DecodingError):
        decode_one(resp, Role)


def test_decode_shape_mismatch():
    with pytest.raises(DecodingError):
        decode_many(_resp(200, json={"data": {"type": "roles", "id": "r"}}), Role)
    with pytest.raises(DecodingError):
        decode_one(_resp(200, json={"data": []}), Role)


def test_check_response_passes_2xx():
    check_response(_resp(200, json={}))
    check_response(_resp(204))


def test_404_without_body_is_generic_not_found():
    with pytest.raises(ResourceNotFoundError) as exc:
        check_response(_resp(404))
    assert exc.value.message == "resource not found"
    assert exc.value.status_code == 404


def test_404_with_problems_keeps_title_and_detail():
    body = {"errors": [{"status": "404", "title": "Not Found", "detail": "Role 'x' not found"}]}
    with pytest.raises(ResourceNotFoundError) as exc:
        check_response(_resp(404, json=body))
    assert exc.value.message == "Not Found\n\nRole 'x' not found"
    assert exc.value.problems[0].status == "404"


@pytest.mark.parametrize("status", [400, 409, 422])
def test_content_rejections_are_server_validation(status):
    body = {
        "errors": [
            {"title": "Invalid Attribute", "detail": "Name is too long", "code": "invalid"},
            {"detail": "Account is required"},
        ]
    }
    with pytest.raises(ServerValidationError) as exc:
        check_response(_resp(status, json=body))
    assert exc.value.message == "Invalid Attribute\n\nName is too long\nAccount is required"
    assert exc.value.problems[0].code == "invalid"


def test_unparseable_error_body_is_unexpected():
    with pytest.raises(UnexpectedResponseError) as exc:
        check_response(_resp(502, text="bad gateway"))
    assert exc.value.status_code == 502
    assert exc.value.response_text == "bad gateway"
    assert exc.value.problems == []


def test_other_status_with_problems_is_unexpected():
    body = {"errors": [{"title": "Forbidden"}]}
    with pytest.raises(UnexpectedResponseError) as exc:
        check_response(_resp(403, json=body))
    assert not isinstance(exc.value, ServerValidationError)
    assert exc.value.message == "Forbidden"


def test_401_is_unauthorized():
    with pytest.raises(UnauthorizedError):
        check_response(_resp(401, json={"errors": [{"title": "Unauthorized"}]}))


def test_to_many_relations_are_immutable():
    policy = decode_one(_resp(200, json=POLICY), AccessPolicy)
    assert isinstance(policy.roles, tuple)
    with pytest.raises(AttributeError):
        policy.roles.append(Role(id="role-3"))


def test_unknown_enum_values_decode_as_strings():
    body = {
        "data": {
            "type": "policy-groups",
            "id": "pgrp-1",
            "attributes": {"name": "opa", "status": "pending"},
            "relationships": {
                "policies": {
                    "data": [
                        {"type": "policies", "id": "pol-1"},
                        {"type": "policies", "id": "pol-2"},
                    ]
                }
            },
        },
        "included": [
            {"type": "policies", "id": "pol-1", "attributes": {"enforced-level": "advisory"}},
            {"type": "policies", "id": "pol-2", "attributes": {"enforced-level": "warn-only"}},
        ],
    }
    group = decode_one(_resp(200, json=body), PolicyGroup)

    assert group.status == "pending"
    assert not isinstance(group.status, PolicyGroupStatus)
    known, unknown = group.policies
    assert known.enforced_level is PolicyEnforcementLevel.ADVISORY
    assert unknown.enforced_level == "warn-only"


def test_unknown_slack_events_are_kept():
    body = {
        "data": {
            "type": "slack-integrations",
            "id": "si-1",
            "attributes": {
                "status": "active",
                "events": ["run_success", "drift_detected"],
            },
        }
    }
    integration = decode_one(_resp(200, json=body), SlackIntegration)

    assert integration.status is SlackStatus.ACTIVE
    assert integration.events == (SlackEvent.RUN_SUCCESS, "drift_detected")
    assert integration.events[0] is SlackEvent.RUN_SUCCESS
