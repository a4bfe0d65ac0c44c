from __future__ import annotations

from typing import ClassVar, List, Optional, Tuple

from pydantic import Field

from ..models import Account, Agent, ListOptions, Resource, ResourceOptions, Workspace
from ..service import ResourceService
from ..validation import require_name, require_ref
from .environments import Environment


def _check_workspaces(workspaces: Optional[List[Workspace]]) -> None:
    for ws in workspaces or []:
        require_ref(ws, field="workspace")


class AgentPool(Resource):
    resource_type: ClassVar[str] = "agent-pools"

    name: Optional[str] = None
    vcs_enabled: Optional[bool] = None

    account: Optional[Account] = None
    environment: Optional[Environment] = None
    # Workspaces this pool serves and the agents connected to it.
    workspaces: Tuple[Workspace, ...] = ()
    agents: Tuple[Agent, ...] = ()


class AgentPoolCreateOptions(ResourceOptions):
    resource_type: ClassVar[str] = "agent-pools"

    name: Optional[str] = None
    vcs_enabled: Optional[bool] = None

    account: Optional[Account] = None
    environment: Optional[Environment] = None
    workspaces: Optional[List[Workspace]] = None

    def check(self) -> None:
        require_ref(self.account, field="account")
        require_ref(self.environment, field="environment", required=False)
        _check_workspaces(self.workspaces)
        require_name(self.name, field="agent pool name")


class AgentPoolUpdateOptions(ResourceOptions):
    resource_type: ClassVar[str] = "agent-pools"

    name: Optional[str] = None

    workspaces: Optional[List[Workspace]] = None

    def check(self) -> None:
        if "name" in self.model_fields_set:
            require_name(self.name, field="agent pool name")
        _check_workspaces(self.workspaces)


class AgentPoolListOptions(ListOptions):
    account: Optional[str] = Field(default=None, alias="filter[account]")
    environment: Optional[str] = Field(default=None, alias="filter[environment]")
    name: Optional[str] = Field(default=None, alias="filter[name]")
    agent_pool: Optional[str] = Field(default=None, alias="filter[agent-pool]")
    vcs_enabled: Optional[bool] = Field(default=None, alias="filter[vcs-enabled]")


class AgentPools(
    ResourceService[
        AgentPool,
        AgentPoolCreateOptions,
        AgentPoolUpdateOptions,
        AgentPoolListOptions,
    ]
):
    path = "agent-pools"
    model = AgentPool
    kind = "agent pool"
    list_options = AgentPoolListOptions
