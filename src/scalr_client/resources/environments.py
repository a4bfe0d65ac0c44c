from __future__ import annotations

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from ..models import Account, ListOptions, Resource, ResourceOptions, User
from ..service import ResourceService
from ..validation import require_name, require_ref


class Environment(Resource):
    resource_type: ClassVar[str] = "environments"

    name: Optional[str] = None
    status: Optional[str] = None
    cost_estimation_enabled: Optional[bool] = None
    created_at: Optional[datetime] = None

    account: Optional[Account] = None
    created_by: Optional[User] = None


class EnvironmentCreateOptions(ResourceOptions):
    resource_type: ClassVar[str] = "environments"

    name: Optional[str] = None
    cost_estimation_enabled: Optional[bool] = None

    account: Optional[Account] = None

    def check(self) -> None:
        require_name(self.name)
        require_ref(self.account, field="account")


class EnvironmentUpdateOptions(ResourceOptions):
    resource_type: ClassVar[str] = "environments"

    name: Optional[str] = None
    cost_estimation_enabled: Optional[bool] = None

    def check(self) -> None:
        if "name" in self.model_fields_set:
            require_name(self.name)


class EnvironmentListOptions(ListOptions):
    environment: Optional[str] = Field(default=None, alias="filter[environment]")
    account: Optional[str] = Field(default=None, alias="filter[account]")
    name: Optional[str] = Field(default=None, alias="filter[name]")
    query: Optional[str] = None
    sort: Optional[str] = None


class Environments(
    ResourceService[
        Environment,
        EnvironmentCreateOptions,
        EnvironmentUpdateOptions,
        EnvironmentListOptions,
    ]
):
    path = "environments"
    model = Environment
    kind = "environment"
    list_options = EnvironmentListOptions
