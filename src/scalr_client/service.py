"""
Generic resource services.

Every resource is the same pipeline: validate locally, build the request,
execute it, decode the response. Resources only declare data (path, model,
kind, identifier pattern) and pick the capabilities they support by mixing
in Listable / Creatable / Readable / Updatable / Deletable.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    AsyncIterator,
    ClassVar,
    Generic,
    Optional,
    Pattern,
    Type,
    TypeVar,
)

from .models import ListOptions, Resource, ResourceOptions
from .pagination import Page
from .request import build_request, resource_path
from .response import decode_many, decode_one
from .validation import STRING_ID, require_identifier

if TYPE_CHECKING:
    from .client import ScalrClient

E = TypeVar("E", bound=Resource)
C = TypeVar("C", bound=ResourceOptions)
U = TypeVar("U", bound=ResourceOptions)
L = TypeVar("L", bound=ListOptions)


class ServiceBase(Generic[E]):
    path: ClassVar[str] = ""
    model: ClassVar[Type[Resource]] = Resource
    kind: ClassVar[str] = "resource"
    id_pattern: ClassVar[Pattern[str]] = STRING_ID

    def __init__(self, client: "ScalrClient"):
        self.client = client

    def _require_id(self, resource_id: str, kind: Optional[str] = None) -> str:
        return require_identifier(
            resource_id, kind=kind or self.kind, pattern=self.id_pattern
        )

    def _item_path(self, resource_id: str) -> str:
        self._require_id(resource_id)
        return f"{self.path}/{resource_path(resource_id)}"


class Listable(ServiceBase[E], Generic[E, L]):
    list_options: ClassVar[Type[ListOptions]] = ListOptions

    async def list(self, options: Optional[L] = None) -> Page[E]:
        """
        List one page. Filters are sent as given; a filter the server can't
        match yields an empty page, not an error.
        """
        resp = await self.client.execute(build_request("GET", self.path, options))
        requested = options.page_number if options is not None else None
        return decode_many(resp, self.model, requested)

    async def iter_all(self, options: Optional[L] = None) -> AsyncIterator[E]:
        """Yield every item, walking pages from options.page_number (or 1)."""
        base = options if options is not None else self.list_options()
        page_number = base.page_number or 1
        while True:
            page = await self.list(base.model_copy(update={"page_number": page_number}))
            for item in page:
                yield item
            if not page.items or not page.has_next:
                return
            page_number = page.next_page


class Creatable(ServiceBase[E], Generic[E, C]):
    async def create(self, options: C) -> E:
        options.check()
        # The server assigns identity; never send a caller-supplied id.
        options = options.model_copy(update={"id": None})
        resp = await self.client.execute(build_request("POST", self.path, options))
        return decode_one(resp, self.model)


class Readable(ServiceBase[E]):
    read_include: ClassVar[Optional[str]] = None

    async def read(self, resource_id: str) -> E:
        path = self._item_path(resource_id)
        params = {"include": self.read_include} if self.read_include else None
        resp = await self.client.execute(build_request("GET", path, params))
        return decode_one(resp, self.model)


class Updatable(ServiceBase[E], Generic[E, U]):
    async def update(self, resource_id: str, options: U) -> E:
        path = self._item_path(resource_id)
        options.check()
        options = options.model_copy(update={"id": None})
        resp = await self.client.execute(build_request("PATCH", path, options))
        return decode_one(resp, self.model)


class Deletable(ServiceBase[E]):
    async def delete(self, resource_id: str) -> None:
        path = self._item_path(resource_id)
        await self.client.execute(build_request("DELETE", path))


class ResourceService(
    Listable[E, L],
    Creatable[E, C],
    Readable[E],
    Updatable[E, U],
    Deletable[E],
    Generic[E, C, U, L],
):
    """List, create, read, update and delete."""


__all__ = [
    "ServiceBase",
    "Listable",
    "Creatable",
    "Readable",
    "Updatable",
    "Deletable",
    "ResourceService",
]
