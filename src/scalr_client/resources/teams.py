from __future__ import annotations

from typing import ClassVar, List, Optional, Tuple

from pydantic import Field

from ..models import (
    Account,
    IdentityProvider,
    ListOptions,
    Resource,
    ResourceOptions,
    User,
)
from ..service import ResourceService
from ..validation import require_name, require_ref


class Team(Resource):
    resource_type: ClassVar[str] = "teams"

    name: Optional[str] = None
    description: Optional[str] = None

    account: Optional[Account] = None
    identity_provider: Optional[IdentityProvider] = None
    users: Tuple[User, ...] = ()


class TeamCreateOptions(ResourceOptions):
    resource_type: ClassVar[str] = "teams"

    name: Optional[str] = None
    description: Optional[str] = None

    account: Optional[Account] = None
    identity_provider: Optional[IdentityProvider] = None
    users: Optional[List[User]] = None

    def check(self) -> None:
        require_name(self.name)
        require_ref(self.account, field="account", required=False)
        require_ref(self.identity_provider, field="identity provider", required=False)


class TeamUpdateOptions(ResourceOptions):
    resource_type: ClassVar[str] = "teams"

    name: Optional[str] = None
    description: Optional[str] = None

    users: Optional[List[User]] = None


class TeamListOptions(ListOptions):
    team: Optional[str] = Field(default=None, alias="filter[team]")
    name: Optional[str] = Field(default=None, alias="filter[name]")
    account: Optional[str] = Field(default=None, alias="filter[account]")
    identity_provider: Optional[str] = Field(
        default=None, alias="filter[identity-provider]"
    )
    query: Optional[str] = None
    sort: Optional[str] = None


class Teams(ResourceService[Team, TeamCreateOptions, TeamUpdateOptions, TeamListOptions]):
    path = "teams"
    model = Team
    kind = "team"
    list_options = TeamListOptions
