from __future__ import annotations

from enum import Enum
from typing import ClassVar, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..errors import OptionsValidationError
from ..models import (
    Account,
    ListOptions,
    Resource,
    ResourceOptions,
    VcsProvider,
    open_enum,
)
from ..request import build_request, encode_refs, resource_path
from ..service import ResourceService, ServiceBase
from ..validation import require_name, require_ref
from .environments import Environment
from .vcs_revisions import VcsRevision


class PolicyGroupStatus(str, Enum):
    FETCHING = "fetching"
    ACTIVE = "active"
    ERRORED = "errored"


class PolicyEnforcementLevel(str, Enum):
    HARD = "hard-mandatory"
    SOFT = "soft-mandatory"
    ADVISORY = "advisory"


# Decoded values the enums above do not know yet stay plain strings.
StatusValue = open_enum(PolicyGroupStatus)
EnforcementLevelValue = open_enum(PolicyEnforcementLevel)


class Policy(Resource):
    resource_type: ClassVar[str] = "policies"

    name: Optional[str] = None
    enabled: Optional[bool] = None
    enforced_level: Optional[EnforcementLevelValue] = None


class PolicyGroupVCSRepo(BaseModel):
    identifier: Optional[str] = None
    branch: Optional[str] = None
    path: Optional[str] = None

    model_config = ConfigDict(extra="ignore", frozen=True)


class PolicyGroupVCSRepoOptions(BaseModel):
    identifier: Optional[str] = None
    branch: Optional[str] = None
    path: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


class PolicyGroup(Resource):
    resource_type: ClassVar[str] = "policy-groups"

    name: Optional[str] = None
    status: Optional[StatusValue] = None
    error_message: Optional[str] = None
    opa_version: Optional[str] = None
    vcs_repo: Optional[PolicyGroupVCSRepo] = None

    account: Optional[Account] = None
    vcs_provider: Optional[VcsProvider] = None
    vcs_revision: Optional[VcsRevision] = None
    policies: Tuple[Policy, ...] = ()
    environments: Tuple[Environment, ...] = ()


class PolicyGroupCreateOptions(ResourceOptions):
    resource_type: ClassVar[str] = "policy-groups"

    name: Optional[str] = None
    opa_version: Optional[str] = None
    vcs_repo: Optional[PolicyGroupVCSRepoOptions] = None

    account: Optional[Account] = None
    vcs_provider: Optional[VcsProvider] = None

    def check(self) -> None:
        require_name(self.name)
        require_ref(self.account, field="account")
        require_ref(self.vcs_provider, field="vcs provider")
        if self.vcs_repo is None:
            raise OptionsValidationError("vcs repo is required")


class PolicyGroupUpdateOptions(ResourceOptions):
    resource_type: ClassVar[str] = "policy-groups"

    name: Optional[str] = None
    opa_version: Optional[str] = None
    vcs_repo: Optional[PolicyGroupVCSRepoOptions] = None

    vcs_provider: Optional[VcsProvider] = None

    def check(self) -> None:
        if "name" in self.model_fields_set:
            require_name(self.name)
        require_ref(self.vcs_provider, field="vcs provider", required=False)


class PolicyGroupListOptions(ListOptions):
    account: Optional[str] = Field(default=None, alias="filter[account]")
    environment: Optional[str] = Field(default=None, alias="filter[environment]")
    name: Optional[str] = Field(default=None, alias="filter[name]")
    policy_group: Optional[str] = Field(default=None, alias="filter[policy-group]")
    query: Optional[str] = None
    sort: Optional[str] = None


class PolicyGroups(
    ResourceService[
        PolicyGroup,
        PolicyGroupCreateOptions,
        PolicyGroupUpdateOptions,
        PolicyGroupListOptions,
    ]
):
    path = "policy-groups"
    model = PolicyGroup
    kind = "policy group"
    list_options = PolicyGroupListOptions
    read_include = "policies"


# --- Environment linkage ---


class PolicyGroupEnvironmentsCreateOptions(BaseModel):
    policy_group_id: str
    environments: List[Environment] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class PolicyGroupEnvironmentDeleteOptions(BaseModel):
    policy_group_id: str
    environment_id: str

    model_config = ConfigDict(extra="forbid")


class PolicyGroupEnvironments(ServiceBase[Environment]):
    """Links environments to a policy group (relationship endpoints, no body back)."""

    path = "policy-groups"
    model = Environment
    kind = "policy group"

    def _relationship_path(self, policy_group_id: str) -> str:
        return f"{self._item_path(policy_group_id)}/relationships/environments"

    async def create(self, options: PolicyGroupEnvironmentsCreateOptions) -> None:
        path = self._relationship_path(options.policy_group_id)
        if not options.environments:
            raise OptionsValidationError("list of environments is required")
        for env in options.environments:
            require_ref(env, field="environment")
        await self.client.execute(
            build_request("POST", path, encode_refs(options.environments))
        )

    async def delete(self, options: PolicyGroupEnvironmentDeleteOptions) -> None:
        path = self._relationship_path(options.policy_group_id)
        self._require_id(options.environment_id, kind="environment")
        await self.client.execute(
            build_request("DELETE", f"{path}/{resource_path(options.environment_id)}")
        )
