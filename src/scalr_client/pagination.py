from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Iterator, Optional, Sequence, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Pagination(BaseModel):
    current_page: Optional[int] = Field(default=None, alias="current-page")
    prev_page: Optional[int] = Field(default=None, alias="prev-page")
    next_page: Optional[int] = Field(default=None, alias="next-page")
    total_pages: Optional[int] = Field(default=None, alias="total-pages")
    total_count: Optional[int] = Field(default=None, alias="total-count")

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    One page of a collection, in server order.
    An out-of-range page is just an empty page; it is not an error.
    """

    items: Tuple[T, ...] = ()
    pagination: Pagination = field(default_factory=Pagination)

    @property
    def current_page(self) -> int:
        return self.pagination.current_page or 1

    @property
    def total_pages(self) -> int:
        return self.pagination.total_pages or 0

    @property
    def total_count(self) -> int:
        return self.pagination.total_count or 0

    @property
    def prev_page(self) -> Optional[int]:
        return self.pagination.prev_page

    @property
    def next_page(self) -> Optional[int]:
        return self.pagination.next_page

    @property
    def has_next(self) -> bool:
        return bool(self.pagination.next_page)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def paginate(
    items: Sequence[T],
    meta: Optional[Dict[str, Any]],
    requested_page: Optional[int] = None,
) -> Page[T]:
    """
    Wrap decoded items with the 'pagination' block of a response's meta.
    The server's current-page wins; the requested page is the fallback.
    """
    raw = meta.get("pagination") if isinstance(meta, dict) else None
    pagination = Pagination.model_validate(raw if isinstance(raw, dict) else {})

    if pagination.current_page is None and requested_page is not None:
        pagination = pagination.model_copy(update={"current_page": requested_page})

    return Page(items=tuple(items), pagination=pagination)


__all__ = ["Pagination", "Page", "paginate"]
