"""Paginated result page.

A Page is a length-aware slice of a result set: the current page's records
plus the metadata needed to render pagination controls.  Item numbering
(first_item / last_item) is 1-based and None when the page is empty.
"""

from __future__ import annotations

from math import ceil
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """One page of records with pagination metadata."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    items: list[T] = Field(default_factory=list)
    total: int = Field(ge=0)
    per_page: int = Field(gt=0)
    current_page: int = Field(default=1, gt=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def last_page(self) -> int:
        return max(ceil(self.total / self.per_page), 1)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def first_item(self) -> int | None:
        if not self.items:
            return None
        return (self.current_page - 1) * self.per_page + 1

    @computed_field  # type: ignore[prop-decorator]
    @property
    def last_item(self) -> int | None:
        if not self.items:
            return None
        return self.first_item + len(self.items) - 1  # type: ignore[operator]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_more_pages(self) -> bool:
        return self.current_page < self.last_page
