from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import Field

from ..models import Account, ListOptions, Resource, ResourceOptions
from ..service import ResourceService
from ..validation import require_name, require_ref


class Tag(Resource):
    resource_type: ClassVar[str] = "tags"

    name: Optional[str] = None

    account: Optional[Account] = None


class TagCreateOptions(ResourceOptions):
    resource_type: ClassVar[str] = "tags"

    name: Optional[str] = None

    account: Optional[Account] = None

    def check(self) -> None:
        require_name(self.name)
        require_ref(self.account, field="account")


class TagUpdateOptions(ResourceOptions):
    resource_type: ClassVar[str] = "tags"

    name: Optional[str] = None

    def check(self) -> None:
        require_name(self.name)


class TagListOptions(ListOptions):
    tag: Optional[str] = Field(default=None, alias="filter[tag]")
    account: Optional[str] = Field(default=None, alias="filter[account]")
    name: Optional[str] = Field(default=None, alias="filter[name]")
    query: Optional[str] = None


class Tags(ResourceService[Tag, TagCreateOptions, TagUpdateOptions, TagListOptions]):
    path = "tags"
    model = Tag
    kind = "tag"
    list_options = TagListOptions
