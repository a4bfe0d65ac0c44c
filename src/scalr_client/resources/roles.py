from __future__ import annotations

from typing import ClassVar, List, Optional, Tuple

from pydantic import Field

from ..models import Account, ListOptions, Permission, Resource, ResourceOptions
from ..service import ResourceService
from ..validation import require_name, require_ref


class Role(Resource):
    resource_type: ClassVar[str] = "roles"

    name: Optional[str] = None
    description: Optional[str] = None
    is_system: Optional[bool] = None

    account: Optional[Account] = None
    permissions: Tuple[Permission, ...] = ()


class RoleCreateOptions(ResourceOptions):
    resource_type: ClassVar[str] = "roles"

    name: Optional[str] = None
    description: Optional[str] = None

    account: Optional[Account] = None
    permissions: Optional[List[Permission]] = None

    def check(self) -> None:
        require_ref(self.account, field="account")
        require_name(self.name)


class RoleUpdateOptions(ResourceOptions):
    resource_type: ClassVar[str] = "roles"

    name: Optional[str] = None
    description: Optional[str] = None

    permissions: Optional[List[Permission]] = None


class RoleListOptions(ListOptions):
    role: Optional[str] = Field(default=None, alias="filter[role]")
    account: Optional[str] = Field(default=None, alias="filter[account]")
    name: Optional[str] = Field(default=None, alias="filter[name]")
    query: Optional[str] = None
    sort: Optional[str] = None


class Roles(ResourceService[Role, RoleCreateOptions, RoleUpdateOptions, RoleListOptions]):
    path = "roles"
    model = Role
    kind = "role"
    list_options = RoleListOptions
