from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, ClassVar, List, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, PlainValidator


def to_kebab(name: str) -> str:
    return name.replace("_", "-")


def open_enum(enum_cls: Type[Enum]) -> Any:
    """
    Field type for decoded enum values: known values become members of
    enum_cls, values a newer server added stay plain strings.
    """

    def coerce(value: Any) -> Any:
        try:
            return enum_cls(value)
        except ValueError:
            return value

    return Annotated[Union[enum_cls, str], PlainValidator(coerce)]


class Resource(BaseModel):
    """
    Base for decoded JSON:API resources.
    - Attributes and relations are flattened onto the model, keyed by their
      kebab-case wire names (vcs_enabled <-> "vcs-enabled").
    - A relation that was not included by the server carries only its id.
    - Instances are immutable snapshots; to-many relations are tuples.
    """

    resource_type: ClassVar[str] = ""

    id: str

    model_config = ConfigDict(
        alias_generator=to_kebab,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class ResourceOptions(BaseModel):
    """
    Base for create/update options.
    Only fields the caller actually set are sent; a field set explicitly to
    None (or []) is still sent so the server can clear it.
    """

    resource_type: ClassVar[str] = ""

    # Never sent on create/update; the server assigns identity.
    id: Optional[str] = None

    model_config = ConfigDict(
        alias_generator=to_kebab,
        populate_by_name=True,
        extra="forbid",
    )

    def check(self) -> None:
        """Raise OptionsValidationError if the options can't be sent."""


class ListOptions(BaseModel):
    page_number: Optional[int] = Field(default=None, alias="page[number]")
    page_size: Optional[int] = Field(default=None, alias="page[size]")
    include: Optional[Union[str, List[str]]] = None

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


# --- Reference entities (relation targets) ---


class Account(Resource):
    resource_type: ClassVar[str] = "accounts"

    name: Optional[str] = None


class User(Resource):
    resource_type: ClassVar[str] = "users"

    email: Optional[str] = None
    username: Optional[str] = None
    full_name: Optional[str] = None
    status: Optional[str] = None


class ServiceAccount(Resource):
    resource_type: ClassVar[str] = "service-accounts"

    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


class Workspace(Resource):
    resource_type: ClassVar[str] = "workspaces"

    name: Optional[str] = None


class VcsProvider(Resource):
    resource_type: ClassVar[str] = "vcs-providers"

    name: Optional[str] = None
    vcs_type: Optional[str] = None


class IdentityProvider(Resource):
    resource_type: ClassVar[str] = "identity-providers"

    name: Optional[str] = None


class Permission(Resource):
    resource_type: ClassVar[str] = "permissions"


class Agent(Resource):
    resource_type: ClassVar[str] = "agents"

    name: Optional[str] = None
    status: Optional[str] = None


__all__ = [
    "to_kebab",
    "open_enum",
    "Resource",
    "ResourceOptions",
    "ListOptions",
    "Account",
    "User",
    "ServiceAccount",
    "Workspace",
    "VcsProvider",
    "IdentityProvider",
    "Permission",
    "Agent",
]
