from __future__ import annotations

from typing import ClassVar, List, Optional, Tuple

from pydantic import Field

from ..errors import OptionsValidationError
from ..models import (
    Account,
    ListOptions,
    Resource,
    ResourceOptions,
    ServiceAccount,
    User,
    Workspace,
)
from ..service import ResourceService
from ..validation import require_one_of, require_ref
from .environments import Environment
from .roles import Role
from .teams import Team


def _require_roles(roles: Optional[List[Role]]) -> None:
    if not roles:
        raise OptionsValidationError("at least one role must be provided")
    for role in roles:
        require_ref(role, field="role")


class AccessPolicy(Resource):
    resource_type: ClassVar[str] = "access-policies"

    is_system: Optional[bool] = None

    roles: Tuple[Role, ...] = ()
    # Subject: exactly one of these is set.
    user: Optional[User] = None
    team: Optional[Team] = None
    service_account: Optional[ServiceAccount] = None
    # Scope: exactly one of these is set.
    account: Optional[Account] = None
    environment: Optional[Environment] = None
    workspace: Optional[Workspace] = None


class AccessPolicyCreateOptions(ResourceOptions):
    resource_type: ClassVar[str] = "access-policies"

    roles: Optional[List[Role]] = None
    user: Optional[User] = None
    team: Optional[Team] = None
    service_account: Optional[ServiceAccount] = None
    account: Optional[Account] = None
    environment: Optional[Environment] = None
    workspace: Optional[Workspace] = None

    def check(self) -> None:
        _require_roles(self.roles)

        field, scope = require_one_of(
            account=self.account,
            environment=self.environment,
            workspace=self.workspace,
        )
        require_ref(scope, field=field)

        field, subject = require_one_of(
            user=self.user,
            team=self.team,
            service_account=self.service_account,
        )
        require_ref(subject, field=field)


class AccessPolicyUpdateOptions(ResourceOptions):
    resource_type: ClassVar[str] = "access-policies"

    roles: Optional[List[Role]] = None

    def check(self) -> None:
        _require_roles(self.roles)


class AccessPolicyListOptions(ListOptions):
    environment: Optional[str] = Field(default=None, alias="filter[environment]")
    account: Optional[str] = Field(default=None, alias="filter[account]")
    workspace: Optional[str] = Field(default=None, alias="filter[workspace]")
    user: Optional[str] = Field(default=None, alias="filter[user]")
    service_account: Optional[str] = Field(
        default=None, alias="filter[service-account]"
    )
    team: Optional[str] = Field(default=None, alias="filter[team]")


class AccessPolicies(
    ResourceService[
        AccessPolicy,
        AccessPolicyCreateOptions,
        AccessPolicyUpdateOptions,
        AccessPolicyListOptions,
    ]
):
    path = "access-policies"
    model = AccessPolicy
    kind = "access policy"
    list_options = AccessPolicyListOptions
